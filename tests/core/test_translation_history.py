"""Unit tests for TranslationHistory."""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from universal_translator.core import TranslationHistory, TranslationRecord


def make_record(source: str, target: str = "translated") -> TranslationRecord:
    return TranslationRecord(
        source_text=source,
        target_text=target,
        source_lang="en",
        target_lang="es",
        timestamp=datetime.now(),
    )


def test_new_history_is_empty():
    history = TranslationHistory()
    assert len(history) == 0
    assert history.latest is None
    assert history.entries == ()


def test_prepend_puts_newest_first():
    history = TranslationHistory()
    first = make_record("one")
    second = make_record("two")

    history.prepend(first)
    history.prepend(second)

    assert history.entries == (second, first)
    assert history.latest is second
    assert list(history) == [second, first]


def test_entries_is_a_snapshot():
    history = TranslationHistory()
    history.prepend(make_record("one"))
    snapshot = history.entries

    history.prepend(make_record("two"))

    assert len(snapshot) == 1
    assert len(history) == 2


def test_clear_removes_all_records():
    history = TranslationHistory()
    history.prepend(make_record("one"))
    history.clear()
    assert len(history) == 0


def test_records_cannot_be_modified():
    record = make_record("one")
    with pytest.raises(FrozenInstanceError):
        record.target_text = "changed"


def test_sequence_numbers_survive_clear():
    history = TranslationHistory()
    assert history.prepend(make_record("one")) == 1
    assert history.prepend(make_record("two")) == 2

    history.clear()
    third = make_record("three")

    assert history.prepend(third) == 3
    assert history.numbered_entries == ((3, third),)
