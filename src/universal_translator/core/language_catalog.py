"""Language Catalog - fixed, ordered list of supported languages."""

from dataclasses import dataclass
from typing import Iterable, Optional

from universal_translator.core.constants import AUTO_DETECT


@dataclass(frozen=True)
class LanguageEntry:
    """A selectable language: wire code plus the name shown to the user."""

    code: str
    display_name: str


DEFAULT_LANGUAGES = (
    LanguageEntry(AUTO_DETECT, "Detect Language"),
    LanguageEntry("en", "English"),
    LanguageEntry("tr", "Turkish"),
    LanguageEntry("es", "Spanish"),
    LanguageEntry("fr", "French"),
    LanguageEntry("de", "German"),
    LanguageEntry("it", "Italian"),
    LanguageEntry("ja", "Japanese"),
    LanguageEntry("ko", "Korean"),
    LanguageEntry("zh", "Chinese"),
)


class LanguageCatalog:
    """
    Immutable catalog of languages, loaded once at startup.

    The auto-detect sentinel is only ever offered as a source language.
    """

    def __init__(self, entries: Iterable[LanguageEntry] = DEFAULT_LANGUAGES):
        self._entries = tuple(entries)
        self._by_code = {entry.code: entry for entry in self._entries}

    def source_languages(self) -> list[LanguageEntry]:
        return list(self._entries)

    def target_languages(self) -> list[LanguageEntry]:
        return [entry for entry in self._entries if entry.code != AUTO_DETECT]

    def display_name(self, code: str) -> Optional[str]:
        """Return the display name for a code, or None if it is not in the catalog."""
        entry = self._by_code.get(code)
        return entry.display_name if entry else None

    def is_valid_source(self, code: str) -> bool:
        return code in self._by_code

    def is_valid_target(self, code: str) -> bool:
        return code != AUTO_DETECT and code in self._by_code

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __len__(self) -> int:
        return len(self._entries)
