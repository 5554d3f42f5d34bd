"""Most-recent-first search history with a selection cursor."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

DEFAULT_HISTORY_LIMIT = 50


@dataclass(frozen=True)
class HistoryEntry:
    """One submitted query and the unix time (seconds) it was recorded."""

    query: str
    timestamp: int

    def to_json(self) -> dict[str, object]:
        return {"query": self.query, "timestamp": self.timestamp}


class HistoryRing:
    """Bounded, de-duplicated history list.

    Entries are ordered newest first and no two entries share a query.
    ``selected`` is a wrapping index used by the history pane.
    """

    def __init__(
        self,
        entries: Iterable[HistoryEntry] = (),
        *,
        limit: int = DEFAULT_HISTORY_LIMIT,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.limit = max(1, limit)
        self._clock = clock
        self._entries: list[HistoryEntry] = []
        seen: set[str] = set()
        for entry in entries:
            if entry.query in seen:
                continue
            seen.add(entry.query)
            self._entries.append(entry)
        del self._entries[self.limit :]
        self.selected = 0

    @property
    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def queries(self) -> list[str]:
        return [entry.query for entry in self._entries]

    def record(self, query: str) -> HistoryEntry:
        """Move ``query`` to the front with a fresh timestamp and enforce the cap."""
        self._entries = [entry for entry in self._entries if entry.query != query]
        entry = HistoryEntry(query=query, timestamp=int(self._clock()))
        self._entries.insert(0, entry)
        del self._entries[self.limit :]
        self._clamp_selection()
        return entry

    def select_next(self) -> None:
        if self._entries:
            self.selected = (self.selected + 1) % len(self._entries)

    def select_prev(self) -> None:
        if self._entries:
            self.selected = (self.selected - 1) % len(self._entries)

    def selected_entry(self) -> HistoryEntry | None:
        if not self._entries:
            return None
        self._clamp_selection()
        return self._entries[self.selected]

    def _clamp_selection(self) -> None:
        self.selected = max(0, min(self.selected, len(self._entries) - 1))
