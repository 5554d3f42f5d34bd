"""Key-help strings shown in the footer and pane titles."""

from __future__ import annotations

from ..state import Mode

NORMAL_FOOTER = "NORMAL: i=insert | Tab=switch panes | j/k=navigate history | Enter=search/load | ESC=quit"
INSERT_FOOTER = "INSERT: Type to search | Up/Down=select | Tab=accept/switch | ESC=normal mode"

SUGGESTIONS_TITLE = "Suggestions (Up/Down to select, Tab to accept)"
HISTORY_TITLE = "History (Tab to switch, j/k to navigate, Enter to load)"
DISPLAY_TITLE = "Weather Information (Press 'i' to search again, 'q' to quit)"
ERROR_TITLE = "Error (Press 'i' to try again)"
LOADING_TITLE = "Status"
LOADING_TEXT = "Loading weather data..."


def mode_label(mode: Mode) -> str:
    return "NORMAL" if mode is Mode.NORMAL else "INSERT"


def footer_text(mode: Mode) -> str:
    return NORMAL_FOOTER if mode is Mode.NORMAL else INSERT_FOOTER


def header_text(mode: Mode) -> str:
    return f"Weather TUI Search -- {mode_label(mode)} --"


def search_title(mode: Mode) -> str:
    return f"Search City (Mode: {mode_label(mode)})"
