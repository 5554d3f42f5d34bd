"""Ordering, de-duplication, and selection tests for search history."""

from __future__ import annotations

import unittest

from weathersearch.history import HistoryEntry, HistoryRing


def _clock(value: float = 1_700_000_000.5):
    return lambda: value


class HistoryRingTests(unittest.TestCase):
    def test_record_puts_newest_first_and_dedupes(self) -> None:
        ring = HistoryRing(clock=_clock())
        ring.record("Paris")
        ring.record("Oslo")
        ring.record("Paris")
        self.assertEqual(ring.queries(), ["Paris", "Oslo"])

    def test_record_stamps_integer_seconds(self) -> None:
        ring = HistoryRing(clock=_clock(1234.9))
        entry = ring.record("Rome")
        self.assertEqual(entry, HistoryEntry(query="Rome", timestamp=1234))

    def test_record_enforces_limit(self) -> None:
        ring = HistoryRing(limit=50, clock=_clock())
        for idx in range(51):
            ring.record(f"city-{idx}")
        self.assertEqual(len(ring), 50)
        self.assertEqual(ring.queries()[0], "city-50")
        self.assertNotIn("city-0", ring.queries())

    def test_constructor_dedupes_and_truncates_loaded_entries(self) -> None:
        entries = [HistoryEntry("a", 3), HistoryEntry("b", 2), HistoryEntry("a", 1), HistoryEntry("c", 0)]
        ring = HistoryRing(entries, limit=2)
        self.assertEqual(ring.queries(), ["a", "b"])

    def test_selection_wraps_both_directions(self) -> None:
        ring = HistoryRing([HistoryEntry("a", 1), HistoryEntry("b", 1), HistoryEntry("c", 1)])
        ring.select_prev()
        self.assertEqual(ring.selected, 2)
        ring.select_next()
        self.assertEqual(ring.selected, 0)

    def test_selection_on_empty_history_is_noop(self) -> None:
        ring = HistoryRing()
        ring.select_next()
        ring.select_prev()
        self.assertEqual(ring.selected, 0)
        self.assertIsNone(ring.selected_entry())

    def test_entries_returns_copy(self) -> None:
        ring = HistoryRing([HistoryEntry("a", 1)])
        ring.entries.clear()
        self.assertEqual(len(ring), 1)


if __name__ == "__main__":
    unittest.main()
