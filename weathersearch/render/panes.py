"""Bordered pane drawing and per-phase pane bodies.

Every function returns rows already fitted to the requested width so the
frame composer can join panes side by side without re-measuring.
"""

from __future__ import annotations

import textwrap

from ..ansi import clip_ansi_line, display_width, fit_ansi_line
from ..state import Mode
from ..ui_theme import UITheme
from ..weather.codes import describe_weather_code
from ..weather.models import Location, WeatherReport


def styled(text: str, style: str, theme: UITheme) -> str:
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def draw_box(
    body: list[str],
    width: int,
    height: int,
    *,
    title: str,
    theme: UITheme,
    focused: bool = False,
) -> list[str]:
    """Frame ``body`` rows in a box exactly ``width`` x ``height`` cells."""
    if width <= 0 or height <= 0:
        return [""] * max(0, height)
    if width < 2 or height < 2:
        return [" " * width] * height

    inner = width - 2
    border = theme.border_focused if focused else theme.border
    title_text = clip_ansi_line(title, inner)
    top = "┌" + title_text + "─" * (inner - display_width(title_text)) + "┐"
    rows = [styled(top, border, theme)]
    left = styled("│", border, theme)
    right = styled("│", border, theme)
    for idx in range(height - 2):
        line = body[idx] if idx < len(body) else ""
        fitted = fit_ansi_line(line, inner)
        if "\033" in fitted:
            fitted += theme.reset
        rows.append(f"{left}{fitted}{right}")
    rows.append(styled("└" + "─" * inner + "┘", border, theme))
    return rows


def _window_start(selected: int, count: int, rows: int) -> int:
    """First visible index keeping ``selected`` inside a ``rows``-tall window."""
    if rows <= 0 or count <= rows:
        return 0
    return max(0, min(selected - rows + 1, count - rows)) if selected >= rows else 0


def prompt_line(text: str, cursor: int, mode: Mode, cols: int) -> str:
    """Plain prompt text with the cursor drawn as a block or ``[c]``.

    Leading characters are dropped when needed so the cursor stays visible.
    """
    cursor = max(0, min(cursor, len(text)))
    before = text[:cursor]
    if mode is Mode.INSERT:
        marker = "█"
        after = text[cursor:]
    elif cursor < len(text):
        marker = f"[{text[cursor]}]"
        after = text[cursor + 1 :]
    else:
        marker = "█"
        after = ""
    while before and display_width(before) + display_width(marker) > cols:
        before = before[1:]
    return before + marker + after


def list_rows(
    items: list[str],
    selected: int | None,
    rows: int,
    style: str,
    theme: UITheme,
) -> list[str]:
    """Render a scrolled list; ``selected=None`` disables highlighting."""
    start = _window_start(selected or 0, len(items), rows)
    out: list[str] = []
    for idx in range(start, min(len(items), start + rows)):
        item_style = theme.selected_row if selected is not None and idx == selected else style
        out.append(styled(items[idx], item_style, theme))
    return out


def suggestion_labels(candidates: list[Location]) -> list[str]:
    return [candidate.display_name() for candidate in candidates]


def weather_lines(report: WeatherReport, theme: UITheme) -> list[str]:
    current = report.current
    units = report.units

    def row(label: str, value: str, style: str) -> str:
        return styled(f"{label}: ", theme.label, theme) + styled(value, style, theme)

    return [
        row("Location", report.location.display_name(), theme.value_strong),
        "",
        row("Condition", describe_weather_code(current.weather_code), theme.condition),
        "",
        row("Temperature", f"{current.temperature:.1f}{units.temperature}", theme.temperature),
        row("Feels like", f"{current.apparent_temperature:.1f}{units.temperature}", theme.temperature),
        "",
        row("Humidity", f"{current.relative_humidity}%", theme.value),
        row("Pressure", f"{current.pressure:.1f} {units.pressure}", theme.value),
        row("Wind Speed", f"{current.wind_speed:.1f} {units.wind_speed}", theme.value),
        row("Precipitation", f"{current.precipitation:.1f} mm", theme.value),
    ]


def wrapped_lines(text: str, cols: int, style: str, theme: UITheme) -> list[str]:
    if cols <= 0:
        return []
    return [styled(line, style, theme) for line in textwrap.wrap(text, cols) or [""]]
