"""Editing surface abstraction and an in-memory implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod


class EditingSurface(ABC):
    """What the gate needs from the host editor.

    The host owns the text; the gate only reads it, replaces it wholesale on
    a language switch, and asks for a newline once it has approved an Enter.
    """

    @property
    @abstractmethod
    def text(self) -> str: ...

    @abstractmethod
    def replace(self, text: str) -> None: ...

    @abstractmethod
    def insert_newline(self) -> None: ...


class TextBuffer(EditingSurface):
    """A plain string buffer with a single cursor."""

    def __init__(self, text: str = ""):
        self._text = text
        self._cursor = len(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def line_count(self) -> int:
        return self._text.count("\n") + 1

    def move_cursor(self, offset: int) -> None:
        if not 0 <= offset <= len(self._text):
            raise IndexError(
                f"Cursor offset {offset} outside buffer of length {len(self._text)}"
            )
        self._cursor = offset

    def insert(self, chars: str) -> None:
        self._text = self._text[: self._cursor] + chars + self._text[self._cursor :]
        self._cursor += len(chars)

    def delete_backward(self, count: int = 1) -> None:
        start = max(0, self._cursor - count)
        self._text = self._text[:start] + self._text[self._cursor :]
        self._cursor = start

    def replace(self, text: str) -> None:
        self._text = text
        self._cursor = len(text)

    def insert_newline(self) -> None:
        self.insert("\n")
