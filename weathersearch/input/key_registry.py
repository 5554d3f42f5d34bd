"""Key-dispatch tables scoped by pane focus."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..state import Focus

KeyAction = Callable[[], bool]


@dataclass(frozen=True)
class KeyBinding:
    """Map one or more key tokens to an action.

    ``focus=None`` binds the keys for every pane. Actions return ``True``
    when the application should quit.
    """

    keys: tuple[str, ...]
    action: KeyAction
    focus: Focus | None = None


class KeyTable:
    """Lookup of ``(focus, key)`` to action with a focus-agnostic fallback."""

    def __init__(self) -> None:
        self._actions: dict[tuple[Focus | None, str], KeyAction] = {}

    def bind(self, *bindings: KeyBinding) -> KeyTable:
        """Register bindings, later ones overriding earlier ones; returns ``self``."""
        for binding in bindings:
            for key in binding.keys:
                self._actions[(binding.focus, key)] = binding.action
        return self

    def lookup(self, key: str, focus: Focus) -> KeyAction | None:
        action = self._actions.get((focus, key))
        if action is None:
            action = self._actions.get((None, key))
        return action

    def dispatch(self, key: str, focus: Focus) -> bool | None:
        """Run the bound action; ``None`` means the key is unbound."""
        action = self.lookup(key, focus)
        if action is None:
            return None
        return action()
