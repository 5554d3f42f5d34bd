"""State transitions shared by the modal key handlers.

Key handlers decide *which* action a key means; this controller owns *how*
each action mutates ``AppState``, including the suggestion race check and
the synchronous submission flow.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from .history import HistoryEntry
from .state import AppState, Focus, Mode, Phase
from .suggestions import SuggestionCoordinator, SuggestionResult
from .weather.client import WeatherFetchError
from .weather.models import WeatherReport

logger = logging.getLogger(__name__)


class SearchController:
    """Stateful operations over the search prompt, suggestions, and history."""

    def __init__(
        self,
        *,
        state: AppState,
        coordinator: SuggestionCoordinator,
        fetch_weather: Callable[[str], WeatherReport],
        save_history: Callable[[list[HistoryEntry]], bool],
        redraw: Callable[[], None] = lambda: None,
    ) -> None:
        self.state = state
        self.coordinator = coordinator
        self.fetch_weather = fetch_weather
        self.save_history = save_history
        self.redraw = redraw

    # suggestions
    def apply_suggestion_results(self, results: Iterable[SuggestionResult]) -> bool:
        """Apply results whose query still equals the live buffer text.

        Returns ``True`` when any result was applied.
        """
        applied = False
        for result in results:
            if result.query != self.state.buffer.text:
                logger.debug("discarding stale suggestions for %r", result.query)
                continue
            self.state.suggestions.replace(
                result.query,
                result.candidates,
                visible=self.state.mode is Mode.INSERT and self.state.phase is Phase.INPUT,
            )
            applied = True
        if applied:
            self.state.dirty = True
        return applied

    def buffer_edited(self) -> None:
        """React to an insert-mode edit: hide short queries, arm longer ones."""
        text = self.state.buffer.text
        if len(text) < self.coordinator.min_query_chars:
            self.state.suggestions.clear()
        self.coordinator.note_edit(text)
        self.state.dirty = True

    def delete_backward(self) -> None:
        self.state.buffer.delete_backward()
        self.buffer_edited()

    def delete_forward(self, *, arm: bool) -> None:
        """Delete under the cursor; only insert-mode deletes may arm a lookup."""
        self.state.buffer.delete_forward()
        if arm:
            self.buffer_edited()
            return
        if len(self.state.buffer) < self.coordinator.min_query_chars:
            self.state.suggestions.clear()
        self.state.dirty = True

    def insert_text(self, text: str) -> None:
        self.state.buffer.insert(text)
        self.buffer_edited()

    def accept_suggestion(self) -> bool:
        suggestions = self.state.suggestions
        if not suggestions.visible:
            return False
        selected = suggestions.selected()
        if selected is None:
            return False
        self.state.buffer.set_text(selected.label())
        suggestions.clear()
        self.state.dirty = True
        return True

    def move_suggestion_selection(self, direction: int) -> bool:
        suggestions = self.state.suggestions
        if not suggestions.visible:
            return False
        if direction > 0:
            suggestions.select_next()
        else:
            suggestions.select_prev()
        self.state.dirty = True
        return True

    # modes and focus
    def toggle_focus(self) -> None:
        self.state.focus = self.state.focus.toggled()
        self.state.dirty = True

    def enter_insert(self, reposition: Callable[[], None] | None = None) -> None:
        if reposition is not None:
            reposition()
        self.state.mode = Mode.INSERT
        self.state.dirty = True

    def leave_insert(self) -> None:
        self.state.mode = Mode.NORMAL
        self.state.buffer.move_left()
        self.state.suggestions.hide()
        self.state.dirty = True

    def clear_input(self) -> None:
        self.state.buffer.clear()
        self.state.suggestions.clear()
        self.state.dirty = True

    # history
    def move_history_selection(self, direction: int) -> None:
        if direction > 0:
            self.state.history.select_next()
        else:
            self.state.history.select_prev()
        self.state.dirty = True

    def load_selected_history(self) -> bool:
        entry = self.state.history.selected_entry()
        if entry is None:
            return False
        self.state.buffer.set_text(entry.query)
        self.state.focus = Focus.SEARCH
        self.state.mode = Mode.INSERT
        self.state.dirty = True
        return True

    # phases
    def submit_query(self) -> bool:
        """Fetch weather for the buffer text, blocking until it resolves.

        Empty input is ignored. Returns ``True`` when a fetch was attempted.
        """
        state = self.state
        city = state.buffer.text
        if not city:
            return False
        state.phase = Phase.LOADING
        state.suggestions.hide()
        state.dirty = True
        self.redraw()

        try:
            report = self.fetch_weather(city)
        except WeatherFetchError as exc:
            logger.info("weather fetch for %r failed: %s", city, exc.message)
            state.error_message = exc.message
            state.phase = Phase.ERROR
            state.dirty = True
            return True

        state.weather = report
        state.history.record(city)
        self.save_history(state.history.entries)
        state.buffer.clear()
        state.suggestions.clear()
        state.mode = Mode.NORMAL
        state.phase = Phase.DISPLAY
        state.dirty = True
        return True

    def return_to_input(self, mode: Mode) -> None:
        self.state.phase = Phase.INPUT
        self.state.mode = mode
        self.state.error_message = ""
        self.state.suggestions.hide()
        self.state.dirty = True
