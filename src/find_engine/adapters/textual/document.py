"""``SearchDocument`` implementation backed by a Textual ``TextArea``."""

from __future__ import annotations

from typing import Tuple

from textual.widgets import TextArea
from textual.widgets.text_area import Selection

from find_engine.buffer.document import BufferDocument
from find_engine.buffer.sync import BufferValidationError
from find_engine.scan.offsets import ENCODING, byte_range_to_char_range

Location = Tuple[int, int]  # (row, column)


class TextAreaDocument:
    """Expose a ``TextArea`` through character offsets.

    Offsets are computed against ``TextArea.text`` with ``\\n`` line breaks.
    The selection anchor is ``selection.start`` and the cursor is
    ``selection.end``, matching how ``TextArea`` extends selections.
    """

    def __init__(self, text_area: TextArea) -> None:
        self.text_area = text_area

    def _index(self) -> BufferDocument:
        return BufferDocument.from_text(self.text_area.text)

    def _location(self, index: BufferDocument, offset: int) -> Location:
        if offset < 0 or offset > index.length:
            raise BufferValidationError("Offset out of range", offset=offset)
        row = index.line_at_offset(offset)
        return (row, offset - index.offset_at_line(row))

    def _offset(self, location: Location) -> int:
        index = self._index()
        row, column = location
        return index.offset_at_line(row) + column

    def get_all_text(self) -> str:
        return self.text_area.text

    @property
    def text(self) -> str:
        return self.text_area.text

    @text.setter
    def text(self, value: str) -> None:
        self.text_area.text = value

    def selected_text(self) -> str:
        start = min(self.cursor_offset, self.selection_offset)
        end = max(self.cursor_offset, self.selection_offset)
        return self.text_area.text[start:end]

    def get_range(self, start_byte: int, length: int) -> str:
        data = self.text_area.text.encode(ENCODING)
        return data[start_byte : start_byte + length].decode(ENCODING)

    def replace(self, start_byte: int, length: int, new_text: str) -> None:
        index = self._index()
        start, end = byte_range_to_char_range(
            index.encoded, start_byte, start_byte + length
        )
        self.text_area.replace(
            new_text, self._location(index, start), self._location(index, end)
        )

    @property
    def cursor_offset(self) -> int:
        return self._offset(self.text_area.selection.end)

    @property
    def selection_offset(self) -> int:
        return self._offset(self.text_area.selection.start)

    def set_selection_range(self, start: int, end: int) -> None:
        index = self._index()
        self.text_area.selection = Selection(
            self._location(index, start), self._location(index, end)
        )

    def line_at_offset(self, offset: int) -> int:
        return self._location(self._index(), offset)[0]

    def offset_at_line(self, line: int) -> int:
        return self._index().offset_at_line(line)

    def scroll_to_line(self, line: int) -> None:
        self.text_area.scroll_to(y=line, animate=False)

    def scroll_to_horizontal_offset(self, offset: int) -> None:
        self.text_area.scroll_to(x=offset, animate=False)

    @property
    def smallest_visible_horizontal_index(self) -> int:
        return int(self.text_area.scroll_offset.x)


__all__ = ["TextAreaDocument"]
