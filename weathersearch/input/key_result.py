"""Key handling for the display and error phases."""

from __future__ import annotations

from ..search_controller import SearchController
from ..state import Mode

QUIT_KEYS = frozenset({"ESC", "q"})


def handle_result_key(key: str, controller: SearchController) -> bool:
    """Leave the result screen; ``Esc``/``q`` quit, ``i`` resumes typing."""
    if key in QUIT_KEYS:
        return True
    controller.return_to_input(Mode.INSERT if key == "i" else Mode.NORMAL)
    return False
