"""Translate between scan offsets (UTF-8 bytes) and selection offsets (characters).

Scan positions and match spans are byte offsets into the encoded document,
while every ``SearchDocument`` selection call takes character offsets.
Nothing outside this module converts between the two.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple, Union

if TYPE_CHECKING:
    from find_engine.buffer.sync import SearchDocument

Text = Union[str, bytes]

ENCODING = "utf-8"


def encode_text(text: Text) -> bytes:
    if isinstance(text, bytes):
        return text
    return text.encode(ENCODING)


def decode_text(text: Text) -> str:
    if isinstance(text, str):
        return text
    return text.decode(ENCODING)


class ByteCursor:
    """Map character offsets of ``text`` to byte offsets of its encoding.

    Lookups are expected in ascending order, as the scanner produces them;
    each one only encodes the characters since the previous lookup. Asking
    for an earlier offset starts over from the beginning of the text.
    """

    __slots__ = ("text", "_char", "_byte")

    def __init__(self, text: str) -> None:
        self.text = text
        self._char = 0
        self._byte = 0

    def byte_offset(self, char_offset: int) -> int:
        if char_offset < 0:
            raise ValueError(f"char offset must be >= 0, got {char_offset}")
        if char_offset < self._char:
            self._char = self._byte = 0
        self._byte += len(self.text[self._char : char_offset].encode(ENCODING))
        self._char = min(char_offset, len(self.text))
        return self._byte

    def byte_span(self, start: int, end: int) -> Tuple[int, int]:
        return self.byte_offset(start), self.byte_offset(end)


def byte_offset_to_char_offset(text: Text, byte_offset: int) -> int:
    """Count the characters encoded in ``text[:byte_offset]``.

    A prefix that ends inside a multi-byte sequence counts the partial
    sequence as one character.
    """

    if byte_offset < 0:
        raise ValueError(f"byte offset must be >= 0, got {byte_offset}")
    prefix = encode_text(text)[:byte_offset]
    return len(prefix.decode(ENCODING, errors="replace"))


def char_offset_to_byte_offset(text: Text, char_offset: int) -> int:
    if char_offset < 0:
        raise ValueError(f"char offset must be >= 0, got {char_offset}")
    if isinstance(text, bytes):
        text = text.decode(ENCODING, errors="replace")
    return len(text[:char_offset].encode(ENCODING))


def byte_range_to_char_range(
    text: Text, start_byte: int, end_byte: int
) -> Tuple[int, int]:
    data = encode_text(text)
    start_char = byte_offset_to_char_offset(data, start_byte)
    span = data[start_byte:end_byte].decode(ENCODING, errors="replace")
    return start_char, start_char + len(span)


def select_range(document: SearchDocument, start: int, stop: int) -> None:
    """Select ``[start, stop)`` (characters) and bring its start into view.

    The view always scrolls to the line holding ``start``. It scrolls
    horizontally only when ``start`` lies left of the visible columns.
    """

    line = document.line_at_offset(start)
    column = start - document.offset_at_line(line)
    document.set_selection_range(start, stop)
    document.scroll_to_line(line)
    if column < document.smallest_visible_horizontal_index:
        document.scroll_to_horizontal_offset(column)


def select_range_bytes(
    document: SearchDocument,
    start_byte: int,
    end_byte: int,
    *,
    data: Optional[bytes] = None,
) -> Tuple[int, int]:
    """Select a byte span of the document, returning the character range used.

    ``data`` is the already-encoded document text, when the caller has it.
    """

    if data is None:
        data = encode_text(document.get_all_text())
    start_char, end_char = byte_range_to_char_range(data, start_byte, end_byte)
    select_range(document, start_char, end_char)
    return start_char, end_char


__all__ = [
    "ENCODING",
    "ByteCursor",
    "byte_offset_to_char_offset",
    "byte_range_to_char_range",
    "char_offset_to_byte_offset",
    "decode_text",
    "encode_text",
    "select_range",
    "select_range_bytes",
]
