"""Normal-mode keyboard handling."""

from __future__ import annotations

from collections.abc import Callable

from ..search_controller import SearchController
from ..state import Focus
from .key_registry import KeyBinding, KeyTable


def build_normal_key_table(controller: SearchController) -> KeyTable:
    """Bind vi-style motions, edits, mode entry, and pane commands."""
    state = controller.state
    buffer = state.buffer

    def run(operation: Callable[[], object]) -> Callable[[], bool]:
        def action() -> bool:
            operation()
            state.dirty = True
            return False

        return action

    def enter_insert(reposition: Callable[[], None] | None = None) -> Callable[[], bool]:
        return run(lambda: controller.enter_insert(reposition))

    def quit_action() -> bool:
        return True

    return KeyTable().bind(
        KeyBinding(("i",), enter_insert()),
        KeyBinding(("I",), enter_insert(buffer.move_to_start)),
        KeyBinding(("a",), enter_insert(buffer.move_right)),
        KeyBinding(("A",), enter_insert(buffer.move_to_end)),
        KeyBinding(("h",), run(buffer.move_left), focus=Focus.SEARCH),
        KeyBinding(("l",), run(buffer.move_right), focus=Focus.SEARCH),
        KeyBinding(("j",), run(lambda: controller.move_history_selection(1)), focus=Focus.HISTORY),
        KeyBinding(("k",), run(lambda: controller.move_history_selection(-1)), focus=Focus.HISTORY),
        KeyBinding(("0", "^"), run(buffer.move_to_start)),
        KeyBinding(("$",), run(buffer.move_to_end)),
        KeyBinding(("w",), run(buffer.move_to_next_word)),
        KeyBinding(("b",), run(buffer.move_to_prev_word)),
        KeyBinding(("x",), run(lambda: controller.delete_forward(arm=False))),
        KeyBinding(("CTRL_D",), run(controller.clear_input)),
        KeyBinding(("TAB",), run(controller.toggle_focus)),
        KeyBinding(("ENTER",), run(controller.submit_query), focus=Focus.SEARCH),
        KeyBinding(("ENTER",), run(controller.load_selected_history), focus=Focus.HISTORY),
        KeyBinding(("ESC",), quit_action),
    )


class NormalKeyHandler:
    """Normal-mode handler bound to one controller."""

    def __init__(self, controller: SearchController) -> None:
        self.controller = controller
        self.table = build_normal_key_table(controller)

    def handle(self, key: str) -> bool:
        """Handle one key and return ``True`` when the app should quit."""
        return bool(self.table.dispatch(key, self.controller.state.focus))
