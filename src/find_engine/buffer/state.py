"""Selection and viewport state for ``Buffer``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Selection = Tuple[int, int]  # (anchor, cursor), character offsets


@dataclass(slots=True)
class BufferState:
    """Cursor plus selection anchor.

    Both are character offsets; equal values mean a collapsed cursor.
    """

    cursor_offset: int = 0
    selection_offset: int = 0

    @property
    def selection(self) -> Selection:
        return (self.selection_offset, self.cursor_offset)

    @property
    def span(self) -> Tuple[int, int]:
        return (
            min(self.cursor_offset, self.selection_offset),
            max(self.cursor_offset, self.selection_offset),
        )

    def set_selection(self, anchor: int, cursor: int) -> None:
        self.selection_offset = anchor
        self.cursor_offset = cursor

    def collapse(self, offset: int) -> None:
        self.set_selection(offset, offset)

    def clamp(self, length: int) -> None:
        self.cursor_offset = max(0, min(self.cursor_offset, length))
        self.selection_offset = max(0, min(self.selection_offset, length))


@dataclass(slots=True)
class Viewport:
    top_line: int = 0
    left_column: int = 0
    width: int = 80
