"""Runtime bootstrap: load settings and history, wire services, run the loop."""

from __future__ import annotations

import logging
import os
import sys
from functools import partial

from ..history import HistoryRing
from ..state import AppState
from ..suggestions import SuggestionCoordinator
from ..ui_theme import resolve_theme
from ..weather.client import OpenMeteoClient
from .application import App
from .config import AppPaths, default_app_paths, load_settings
from .history_store import load_history, save_history
from .loop import RuntimeLoopTiming
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def run_app(paths: AppPaths | None = None) -> None:
    """Initialize runtime state, wire subsystems, and run the event loop.

    Raises ``termios.error``/``OSError`` when the terminal cannot be put into
    raw mode; the worker pool and HTTP client are closed on every exit path.
    """
    if paths is None:
        paths = default_app_paths()
    settings = load_settings(paths.config_path)
    history = HistoryRing(load_history(paths), limit=settings.history_limit)
    state = AppState(history=history)
    theme = resolve_theme(settings.theme, no_color=bool(os.environ.get("NO_COLOR")))

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)

    client = OpenMeteoClient(
        timeout=settings.request_timeout_seconds,
        suggestion_count=settings.suggestion_count,
    )
    coordinator = SuggestionCoordinator(
        client.lookup_suggestions,
        min_query_chars=settings.suggestion_min_chars,
        max_workers=settings.suggestion_workers,
    )
    app = App(
        state=state,
        coordinator=coordinator,
        fetch_weather=client.fetch_weather,
        save_history=partial(save_history, paths),
        theme=theme,
    )
    logger.info("starting with %d history entries", len(history))
    try:
        app.run(terminal, stdin_fd, RuntimeLoopTiming())
    finally:
        coordinator.shutdown(wait=False)
        client.close()
