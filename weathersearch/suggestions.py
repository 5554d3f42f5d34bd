"""Autocomplete suggestion state and the background lookup coordinator.

Lookups run on a worker pool and report back through a queue that only the
UI loop drains. Each result carries the exact buffer text it was requested
for; the UI applies it only while the buffer still holds that text, so any
number of superseded lookups can finish in any order and be dropped.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from queue import Empty, Queue

from .weather.models import Location

logger = logging.getLogger(__name__)

DEFAULT_MIN_QUERY_CHARS = 3
DEFAULT_LOOKUP_WORKERS = 4


@dataclass(frozen=True)
class SuggestionResult:
    """Completed lookup keyed by the buffer text that triggered it."""

    query: str
    candidates: tuple[Location, ...]


@dataclass
class SuggestionSet:
    """Suggestions currently attached to the search prompt."""

    query_at_fetch: str = ""
    results: list[Location] = field(default_factory=list)
    selected_index: int = 0
    visible: bool = False

    def replace(self, query: str, results: Sequence[Location], *, visible: bool) -> None:
        self.query_at_fetch = query
        self.results = list(results)
        self.selected_index = 0
        self.visible = bool(self.results) and visible

    def clear(self) -> None:
        self.query_at_fetch = ""
        self.results = []
        self.selected_index = 0
        self.visible = False

    def hide(self) -> None:
        self.visible = False

    def select_next(self) -> None:
        if self.results:
            self.selected_index = (self.selected_index + 1) % len(self.results)

    def select_prev(self) -> None:
        if self.results:
            self.selected_index = (self.selected_index - 1) % len(self.results)

    def selected(self) -> Location | None:
        if not self.results:
            return None
        index = max(0, min(self.selected_index, len(self.results) - 1))
        return self.results[index]


class SuggestionCoordinator:
    """Decide when to look up suggestions and collect their results.

    ``note_edit`` arms at most one lookup per edit; ``dispatch_pending`` hands
    the armed query to the worker pool without blocking. Workers are daemon
    threads, so a lookup still blocked on the network never delays exit.
    Failed lookups are logged and never produce a result.
    """

    def __init__(
        self,
        lookup: Callable[[str], Sequence[Location]],
        *,
        min_query_chars: int = DEFAULT_MIN_QUERY_CHARS,
        max_workers: int = DEFAULT_LOOKUP_WORKERS,
    ) -> None:
        self._lookup = lookup
        self.min_query_chars = max(1, min_query_chars)
        self._max_workers = max(1, max_workers)
        self._workers: list[threading.Thread] = []
        self._workers_lock = threading.Lock()
        self._requests: Queue[str | None] = Queue()
        self._results: Queue[SuggestionResult] = Queue()
        self.last_dispatched_query = ""
        self.pending_query: str | None = None

    def note_edit(self, content: str) -> bool:
        """Arm a lookup for ``content`` when it qualifies; return whether armed.

        Content shorter than the minimum disarms any pending lookup.
        """
        if len(content) < self.min_query_chars:
            self.pending_query = None
            return False
        if content == self.last_dispatched_query:
            return False
        self.pending_query = content
        self.last_dispatched_query = content
        return True

    def dispatch_pending(self) -> str | None:
        """Queue the armed lookup, if any, and return its query."""
        query = self.pending_query
        self.pending_query = None
        if query is None:
            return None
        self._ensure_workers()
        self._requests.put(query)
        logger.debug("dispatched suggestion lookup for %r", query)
        return query

    def _ensure_workers(self) -> None:
        with self._workers_lock:
            if self._workers:
                return
            for index in range(self._max_workers):
                worker = threading.Thread(
                    target=self._worker,
                    name=f"weathersearch-lookup-{index}",
                    daemon=True,
                )
                worker.start()
                self._workers.append(worker)

    def _worker(self) -> None:
        while True:
            query = self._requests.get()
            if query is None:
                return
            self._run_lookup(query)

    def _run_lookup(self, query: str) -> None:
        try:
            candidates = tuple(self._lookup(query))
        except Exception:
            logger.debug("suggestion lookup for %r failed", query, exc_info=True)
            return
        self._results.put(SuggestionResult(query=query, candidates=candidates))

    def drain_results(self) -> list[SuggestionResult]:
        """Return every completed result without blocking."""
        out: list[SuggestionResult] = []
        while True:
            try:
                out.append(self._results.get_nowait())
            except Empty:
                break
        return out

    def shutdown(self, wait: bool = False) -> None:
        """Drop queued lookups and stop the workers.

        Lookups already running are abandoned, not interrupted; with
        ``wait=False`` this returns immediately.
        """
        with self._workers_lock:
            workers = self._workers
            self._workers = []
        while True:
            try:
                self._requests.get_nowait()
            except Empty:
                break
        for _worker in workers:
            self._requests.put(None)
        if wait:
            for worker in workers:
                worker.join()
