"""Rendering for the search/history terminal view.

``build_frame`` is a pure function of a ``RenderContext`` snapshot; it never
touches ``AppState``. ``render_frame`` writes one composed ANSI frame.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from ..state import AppState, Focus, Mode, Phase
from ..ui_theme import DEFAULT_THEME, UITheme
from ..weather.models import Location, WeatherReport
from . import help as help_text
from .panes import (
    draw_box,
    list_rows,
    prompt_line,
    styled,
    suggestion_labels,
    weather_lines,
    wrapped_lines,
)

HEADER_ROWS = 3
FOOTER_ROWS = 3
PROMPT_ROWS = 3
MAIN_PANE_PERCENT = 70


@dataclass(frozen=True)
class RenderContext:
    width: int
    height: int
    phase: Phase
    mode: Mode
    focus: Focus
    buffer_text: str
    cursor: int
    suggestions: tuple[Location, ...] = ()
    suggestion_selected: int = 0
    suggestions_visible: bool = False
    history: tuple[str, ...] = ()
    history_selected: int = 0
    weather: WeatherReport | None = None
    error_message: str = ""
    theme: UITheme = DEFAULT_THEME


def render_context_for(state: AppState, width: int, height: int, theme: UITheme = DEFAULT_THEME) -> RenderContext:
    """Snapshot the parts of ``state`` the renderer reads."""
    return RenderContext(
        width=width,
        height=height,
        phase=state.phase,
        mode=state.mode,
        focus=state.focus,
        buffer_text=state.buffer.text,
        cursor=state.buffer.cursor,
        suggestions=tuple(state.suggestions.results),
        suggestion_selected=state.suggestions.selected_index,
        suggestions_visible=state.suggestions.visible,
        history=tuple(state.history.queries()),
        history_selected=state.history.selected,
        weather=state.weather,
        error_message=state.error_message,
        theme=theme,
    )


def _input_pane(context: RenderContext, width: int, height: int) -> list[str]:
    theme = context.theme
    focused = context.focus is Focus.SEARCH
    prompt = styled(
        prompt_line(context.buffer_text, context.cursor, context.mode, max(1, width - 2)),
        theme.prompt_text,
        theme,
    )
    title = help_text.search_title(context.mode)
    show_suggestions = context.suggestions_visible and bool(context.suggestions)
    if not show_suggestions or height < PROMPT_ROWS + 3:
        return draw_box([prompt], width, height, title=title, theme=theme, focused=focused)

    prompt_box = draw_box([prompt], width, PROMPT_ROWS, title=title, theme=theme, focused=focused)
    list_height = height - PROMPT_ROWS
    items = list_rows(
        suggestion_labels(list(context.suggestions)),
        context.suggestion_selected,
        list_height - 2,
        theme.suggestion_text,
        theme,
    )
    suggestion_box = draw_box(items, width, list_height, title=help_text.SUGGESTIONS_TITLE, theme=theme)
    return prompt_box + suggestion_box


def _main_pane(context: RenderContext, width: int, height: int) -> list[str]:
    theme = context.theme
    if context.phase is Phase.INPUT:
        return _input_pane(context, width, height)
    if context.phase is Phase.LOADING:
        body = [styled(help_text.LOADING_TEXT, theme.status, theme)]
        return draw_box(body, width, height, title=help_text.LOADING_TITLE, theme=theme)
    if context.phase is Phase.DISPLAY:
        body = weather_lines(context.weather, theme) if context.weather is not None else []
        return draw_box(body, width, height, title=help_text.DISPLAY_TITLE, theme=theme)
    body = wrapped_lines(context.error_message, width - 2, theme.error, theme)
    return draw_box(body, width, height, title=help_text.ERROR_TITLE, theme=theme)


def _history_pane(context: RenderContext, width: int, height: int) -> list[str]:
    theme = context.theme
    focused = context.focus is Focus.HISTORY
    items = list_rows(
        list(context.history),
        context.history_selected if focused else None,
        height - 2,
        theme.history_text,
        theme,
    )
    return draw_box(items, width, height, title=help_text.HISTORY_TITLE, theme=theme, focused=focused)


def build_frame(context: RenderContext) -> list[str]:
    """Compose exactly ``context.height`` rows of ``context.width`` cells."""
    width = max(0, context.width)
    height = max(0, context.height)
    theme = context.theme
    header = draw_box(
        [styled(help_text.header_text(context.mode), theme.title, theme)],
        width,
        min(HEADER_ROWS, height),
        title="",
        theme=theme,
    )
    footer_rows = min(FOOTER_ROWS, max(0, height - len(header)))
    main_rows = max(0, height - len(header) - footer_rows)

    left_width = width * MAIN_PANE_PERCENT // 100
    right_width = width - left_width
    left = _main_pane(context, left_width, main_rows)
    right = _history_pane(context, right_width, main_rows)
    main = [left[idx] + right[idx] for idx in range(main_rows)]

    footer = draw_box(
        [styled(help_text.footer_text(context.mode), theme.footer, theme)],
        width,
        footer_rows,
        title="",
        theme=theme,
    )
    return header + main + footer


def render_frame(context: RenderContext, fd: int | None = None) -> None:
    """Write the frame for ``context`` to ``fd`` (stdout by default)."""
    out = ["\033[H\033[J", "\r\n".join(build_frame(context)), context.theme.reset]
    target = sys.stdout.fileno() if fd is None else fd
    os.write(target, "".join(out).encode("utf-8", errors="replace"))


__all__ = [
    "RenderContext",
    "build_frame",
    "render_context_for",
    "render_frame",
]
