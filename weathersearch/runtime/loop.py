"""Main interactive event loop for the terminal UI.

Each iteration drains finished suggestion lookups, repaints when needed,
reads at most one key, dispatches it, and then starts any lookup the key
armed. All state mutation happens on this thread.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import read_key
from ..state import AppState
from .terminal import TerminalController


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_poll_ms: int = 50


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    drain_suggestion_results: Callable[[], bool]
    render: Callable[[int, int], None]
    handle_key: Callable[[str], bool]
    dispatch_pending_lookups: Callable[[], None]


def normalize_enter(key: str, state: AppState) -> str | None:
    """Fold CR, LF and CRLF into one ``ENTER``; ``None`` means swallow the key."""
    if state.skip_next_lf and key == "ENTER_LF":
        state.skip_next_lf = False
        return None
    if key == "ENTER_CR":
        state.skip_next_lf = True
        return "ENTER"
    state.skip_next_lf = False
    if key == "ENTER_LF":
        return "ENTER"
    return key


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run the main interactive TUI loop until a quit action occurs."""
    ops = callbacks
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                state.dirty = True

            if ops.drain_suggestion_results():
                state.dirty = True

            if state.dirty:
                ops.render(term.columns, term.lines)
                state.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.key_poll_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue

            normalized = normalize_enter(key, state)
            if normalized is None:
                continue
            if ops.handle_key(normalized):
                break
            ops.dispatch_pending_lookups()
