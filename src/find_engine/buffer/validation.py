"""Offset checks shared by buffer operations."""

from __future__ import annotations

from .document import BufferDocument
from .sync import BufferValidationError


def ensure_offset(document: BufferDocument, offset: int) -> int:
    if offset < 0 or offset > document.length:
        raise BufferValidationError("Offset out of range", offset=offset)
    return offset


def ensure_line(document: BufferDocument, line: int) -> int:
    if line < 0 or line >= document.line_count:
        raise BufferValidationError("Line out of range", offset=line)
    return line


def ensure_byte_offset(document: BufferDocument, offset: int) -> int:
    data = document.encoded
    if offset < 0 or offset > len(data):
        raise BufferValidationError("Byte offset out of range", offset=offset)
    if offset < len(data) and data[offset] & 0xC0 == 0x80:
        raise BufferValidationError(
            "Byte offset splits a multi-byte character", offset=offset
        )
    return offset
