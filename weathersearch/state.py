from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .history import HistoryRing
from .suggestions import SuggestionSet
from .text_buffer import TextBuffer
from .weather.models import WeatherReport


class Mode(Enum):
    NORMAL = "normal"
    INSERT = "insert"


class Focus(Enum):
    SEARCH = "search"
    HISTORY = "history"

    def toggled(self) -> Focus:
        return Focus.HISTORY if self is Focus.SEARCH else Focus.SEARCH


class Phase(Enum):
    INPUT = "input"
    LOADING = "loading"
    DISPLAY = "display"
    ERROR = "error"


@dataclass
class AppState:
    history: HistoryRing
    buffer: TextBuffer = field(default_factory=TextBuffer)
    mode: Mode = Mode.NORMAL
    focus: Focus = Focus.SEARCH
    phase: Phase = Phase.INPUT
    suggestions: SuggestionSet = field(default_factory=SuggestionSet)
    weather: WeatherReport | None = None
    error_message: str = ""
    dirty: bool = True
    skip_next_lf: bool = False
