"""Boundary between the search core and the host editing surface."""

from __future__ import annotations

from typing import Protocol


class SearchDocument(Protocol):
    """Everything the search core needs from a host document.

    ``get_range`` and ``replace`` address the UTF-8 encoded text in bytes.
    Cursor, selection and line offsets are character offsets.
    """

    def get_all_text(self) -> str:
        ...

    def selected_text(self) -> str:
        ...

    def get_range(self, start_byte: int, length: int) -> str:
        ...

    @property
    def cursor_offset(self) -> int:
        ...

    @property
    def selection_offset(self) -> int:
        ...

    def set_selection_range(self, start: int, end: int) -> None:
        ...

    def replace(self, start_byte: int, length: int, new_text: str) -> None:
        ...

    @property
    def text(self) -> str:
        ...

    @text.setter
    def text(self, value: str) -> None:
        ...

    def line_at_offset(self, offset: int) -> int:
        ...

    def offset_at_line(self, line: int) -> int:
        ...

    def scroll_to_line(self, line: int) -> None:
        ...

    def scroll_to_horizontal_offset(self, offset: int) -> None:
        ...

    @property
    def smallest_visible_horizontal_index(self) -> int:
        ...


class BufferValidationError(RuntimeError):
    """Raised when a caller hands the buffer an out-of-bounds offset."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


__all__ = ["BufferValidationError", "SearchDocument"]
