"""Character-addressed editable text for the search prompt.

Python ``str`` indexing is by code point, so every cursor position here is a
character index and no byte offsets ever leave this module.
"""

from __future__ import annotations


class TextBuffer:
    """Mutable single-line text with a cursor in ``[0, len(text)]``."""

    def __init__(self, text: str = "", cursor: int | None = None) -> None:
        self._text = text
        self._cursor = len(text) if cursor is None else max(0, min(cursor, len(text)))

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._text)

    def set_text(self, text: str) -> None:
        """Replace all content and park the cursor at the end."""
        self._text = text
        self._cursor = len(text)

    def clear(self) -> None:
        self._text = ""
        self._cursor = 0

    def insert(self, ch: str) -> None:
        """Insert ``ch`` at the cursor and advance past it."""
        if not ch:
            return
        self._text = self._text[: self._cursor] + ch + self._text[self._cursor :]
        self._cursor += len(ch)

    def delete_forward(self) -> bool:
        """Delete the character under the cursor; no-op at end of text."""
        if self._cursor >= len(self._text):
            return False
        self._text = self._text[: self._cursor] + self._text[self._cursor + 1 :]
        return True

    def delete_backward(self) -> bool:
        """Delete the character before the cursor; no-op at start of text."""
        if self._cursor <= 0:
            return False
        self._cursor -= 1
        self._text = self._text[: self._cursor] + self._text[self._cursor + 1 :]
        return True

    def move_left(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def move_right(self) -> None:
        if self._cursor < len(self._text):
            self._cursor += 1

    def move_to_start(self) -> None:
        self._cursor = 0

    def move_to_end(self) -> None:
        self._cursor = len(self._text)

    def move_to_next_word(self) -> None:
        """Skip the current non-whitespace run, then the whitespace after it."""
        text = self._text
        pos = self._cursor
        while pos < len(text) and not text[pos].isspace():
            pos += 1
        while pos < len(text) and text[pos].isspace():
            pos += 1
        self._cursor = pos

    def move_to_prev_word(self) -> None:
        """Move to the start of the word before the cursor."""
        if self._cursor == 0:
            return
        text = self._text
        pos = self._cursor - 1
        while pos > 0 and text[pos].isspace():
            pos -= 1
        while pos > 0 and not text[pos - 1].isspace():
            pos -= 1
        self._cursor = pos

    def __repr__(self) -> str:
        return f"TextBuffer(text={self._text!r}, cursor={self._cursor})"
