"""Tests del historial de cálculos."""

import pytest

from core.history import History, HistoryEntry


def test_newest_first():
    history = History()
    history.add("1 + 1", "2")
    history.add("2 + 2", "4")
    assert [entry.result for entry in history] == ["4", "2"]
    assert history.latest().expression == "2 + 2"


def test_capped_at_limit():
    history = History()
    for i in range(60):
        history.add(f"{i} + 0", str(i))
    assert len(history) == 50
    assert history[0].result == "59"
    assert history[-1].result == "10"


def test_custom_limit():
    history = History(limit=2)
    for i in range(3):
        history.add(f"{i} * 1", str(i))
    assert [entry.result for entry in history] == ["2", "1"]


def test_invalid_limit():
    with pytest.raises(ValueError):
        History(limit=0)


def test_clear():
    history = History()
    history.add("1 + 1", "2")
    history.clear()
    assert len(history) == 0
    assert history.latest() is None


def test_entry_has_timestamp():
    entry = History().add("3 * 3", "9")
    assert isinstance(entry, HistoryEntry)
    assert entry.timestamp > 0


def test_entry_equality():
    assert HistoryEntry("1 + 1", "2", 5.0) == HistoryEntry("1 + 1", "2", 5.0)
    assert HistoryEntry("1 + 1", "2", 5.0) != HistoryEntry("1 + 1", "3", 5.0)
