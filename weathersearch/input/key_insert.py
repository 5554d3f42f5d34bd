"""Insert-mode keyboard handling."""

from __future__ import annotations

from collections.abc import Callable

from ..search_controller import SearchController
from .key_registry import KeyBinding, KeyTable


def build_insert_key_table(controller: SearchController) -> KeyTable:
    state = controller.state
    buffer = state.buffer

    def run(operation: Callable[[], object]) -> Callable[[], bool]:
        def action() -> bool:
            operation()
            state.dirty = True
            return False

        return action

    def accept_or_toggle_focus() -> None:
        if not controller.accept_suggestion():
            controller.toggle_focus()

    def accept_or_submit() -> None:
        if not controller.accept_suggestion():
            controller.submit_query()

    return KeyTable().bind(
        KeyBinding(("ESC",), run(controller.leave_insert)),
        KeyBinding(("BACKSPACE",), run(controller.delete_backward)),
        KeyBinding(("DELETE",), run(lambda: controller.delete_forward(arm=True))),
        KeyBinding(("LEFT",), run(buffer.move_left)),
        KeyBinding(("RIGHT",), run(buffer.move_right)),
        KeyBinding(("HOME",), run(buffer.move_to_start)),
        KeyBinding(("END",), run(buffer.move_to_end)),
        KeyBinding(("DOWN",), run(lambda: controller.move_suggestion_selection(1))),
        KeyBinding(("UP",), run(lambda: controller.move_suggestion_selection(-1))),
        KeyBinding(("TAB",), run(accept_or_toggle_focus)),
        KeyBinding(("ENTER",), run(accept_or_submit)),
    )


class InsertKeyHandler:
    """Insert-mode handler: table keys first, then printable text."""

    def __init__(self, controller: SearchController) -> None:
        self.controller = controller
        self.table = build_insert_key_table(controller)

    def handle(self, key: str) -> bool:
        handled = self.table.dispatch(key, self.controller.state.focus)
        if handled is not None:
            return handled
        if len(key) == 1 and key.isprintable():
            self.controller.insert_text(key)
        return False
