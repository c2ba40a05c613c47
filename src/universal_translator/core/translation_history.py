"""Translation History - append-only, newest-first log of the session's translations."""

from typing import Iterator, Optional

from universal_translator.core.translation_record import TranslationRecord


class TranslationHistory:
    """
    In-memory history for the lifetime of the session.

    New records are prepended so that index 0 is always the most recent one.
    Records are never mutated once inserted. Each record gets a sequence
    number when it is added; numbers keep increasing across clear() so a
    number never refers to two different records within one session.
    """

    def __init__(self):
        self._records: list[tuple[int, TranslationRecord]] = []
        self._last_sequence = 0

    def prepend(self, record: TranslationRecord) -> int:
        """Add a record as the newest entry and return its sequence number."""
        self._last_sequence += 1
        self._records.insert(0, (self._last_sequence, record))
        return self._last_sequence

    @property
    def entries(self) -> tuple[TranslationRecord, ...]:
        """Snapshot of all records, newest first."""
        return tuple(record for _, record in self._records)

    @property
    def numbered_entries(self) -> tuple[tuple[int, TranslationRecord], ...]:
        """Snapshot of (sequence, record) pairs, newest first."""
        return tuple(self._records)

    @property
    def latest(self) -> Optional[TranslationRecord]:
        return self._records[0][1] if self._records else None

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TranslationRecord]:
        return iter(self.entries)
