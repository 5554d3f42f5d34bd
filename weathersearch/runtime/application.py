"""Application object that composes state, controllers, and loop wiring."""

from __future__ import annotations

import shutil
from collections.abc import Callable

from ..history import HistoryEntry
from ..input import ModalKeyRouter
from ..render import render_context_for, render_frame
from ..search_controller import SearchController
from ..state import AppState
from ..suggestions import SuggestionCoordinator
from ..ui_theme import DEFAULT_THEME, UITheme
from ..weather.models import WeatherReport
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController


class App:
    """Composed runtime app owning the controller and loop callbacks."""

    def __init__(
        self,
        *,
        state: AppState,
        coordinator: SuggestionCoordinator,
        fetch_weather: Callable[[str], WeatherReport],
        save_history: Callable[[list[HistoryEntry]], bool],
        theme: UITheme = DEFAULT_THEME,
        render_fn: Callable[..., None] = render_frame,
    ) -> None:
        self.state = state
        self.coordinator = coordinator
        self.theme = theme
        self._render_fn = render_fn
        self.controller = SearchController(
            state=state,
            coordinator=coordinator,
            fetch_weather=fetch_weather,
            save_history=save_history,
            redraw=self.redraw,
        )
        self.router = ModalKeyRouter(self.controller)

    def drain_suggestion_results(self) -> bool:
        return self.controller.apply_suggestion_results(self.coordinator.drain_results())

    def dispatch_pending_lookups(self) -> None:
        self.coordinator.dispatch_pending()

    def handle_key(self, key: str) -> bool:
        return self.router.handle(key)

    def render(self, columns: int, lines: int) -> None:
        self._render_fn(render_context_for(self.state, columns, lines, self.theme))

    def redraw(self) -> None:
        """Paint immediately, outside the loop's dirty check (used before blocking)."""
        term = shutil.get_terminal_size((80, 24))
        self.render(term.columns, term.lines)
        self.state.dirty = False

    def callbacks(self) -> RuntimeLoopCallbacks:
        return RuntimeLoopCallbacks(
            drain_suggestion_results=self.drain_suggestion_results,
            render=self.render,
            handle_key=self.handle_key,
            dispatch_pending_lookups=self.dispatch_pending_lookups,
        )

    def run(
        self,
        terminal: TerminalController,
        stdin_fd: int,
        timing: RuntimeLoopTiming | None = None,
        run_main_loop_fn: Callable[..., None] = run_main_loop,
    ) -> None:
        """Run the interactive event loop."""
        run_main_loop_fn(
            state=self.state,
            terminal=terminal,
            stdin_fd=stdin_fd,
            timing=timing if timing is not None else RuntimeLoopTiming(),
            callbacks=self.callbacks(),
        )
