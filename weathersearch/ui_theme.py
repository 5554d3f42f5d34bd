"""UI theme definitions and selection helpers.

Themes are ANSI palettes for pane chrome, the search prompt, and the weather
report. The active theme comes from the ``theme`` config key.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    border: str
    border_focused: str
    title: str
    prompt_text: str
    selected_row: str
    suggestion_text: str
    history_text: str
    label: str
    value: str
    value_strong: str
    condition: str
    temperature: str
    status: str
    error: str
    footer: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[38;5;250m",
    border_focused="\033[33m",
    title="\033[1;36m",
    prompt_text="\033[33m",
    selected_row="\033[30;43m",
    suggestion_text="\033[37m",
    history_text="\033[38;5;248m",
    label="\033[36m",
    value="\033[37m",
    value_strong="\033[1;37m",
    condition="\033[33m",
    temperature="\033[1;32m",
    status="\033[33m",
    error="\033[31m",
    footer="\033[37m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    border_focused="\033[1;38;5;45m",
    title="\033[1;38;5;39m",
    prompt_text="\033[38;5;153m",
    selected_row="\033[38;5;16;48;5;45m",
    suggestion_text="\033[38;5;252m",
    history_text="\033[38;5;110m",
    label="\033[38;5;45m",
    value="\033[38;5;252m",
    value_strong="\033[1;38;5;255m",
    condition="\033[38;5;153m",
    temperature="\033[1;38;5;84m",
    status="\033[38;5;153m",
    error="\033[38;5;203m",
    footer="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    border_focused="",
    title="",
    prompt_text="",
    selected_row="",
    suggestion_text="",
    history_text="",
    label="",
    value="",
    value_strong="",
    condition="",
    temperature="",
    status="",
    error="",
    footer="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
