"""Keyboard dispatch facade routing by application phase and mode."""

from __future__ import annotations

from ..search_controller import SearchController
from ..state import Mode, Phase
from .key_insert import InsertKeyHandler
from .key_normal import NormalKeyHandler
from .key_result import handle_result_key


class ModalKeyRouter:
    """Send each key to the handler for the current phase and mode."""

    def __init__(self, controller: SearchController) -> None:
        self.controller = controller
        self.normal = NormalKeyHandler(controller)
        self.insert = InsertKeyHandler(controller)

    def handle(self, key: str) -> bool:
        """Handle one key and return ``True`` when the app should quit."""
        state = self.controller.state
        if state.phase is Phase.LOADING:
            return False
        if state.phase in (Phase.DISPLAY, Phase.ERROR):
            return handle_result_key(key, self.controller)
        if state.mode is Mode.INSERT:
            return self.insert.handle(key)
        return self.normal.handle(key)
