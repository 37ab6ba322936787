"""Scanning over byte positions and byte/character offset translation."""

from .offsets import (
    ByteCursor,
    byte_offset_to_char_offset,
    byte_range_to_char_range,
    char_offset_to_byte_offset,
    decode_text,
    encode_text,
    select_range,
    select_range_bytes,
)
from .scanner import Match, find_next, find_previous, iter_matches

__all__ = [
    "ByteCursor",
    "Match",
    "byte_offset_to_char_offset",
    "byte_range_to_char_range",
    "char_offset_to_byte_offset",
    "decode_text",
    "encode_text",
    "find_next",
    "find_previous",
    "iter_matches",
    "select_range",
    "select_range_bytes",
]
