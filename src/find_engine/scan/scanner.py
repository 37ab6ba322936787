"""Forward scanning with optional wraparound.

Positions and match spans are UTF-8 byte offsets. The pattern itself runs
over the decoded text, so a match never starts or ends inside a character.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Optional

from find_engine.query import Query

from .offsets import ByteCursor, Text, byte_offset_to_char_offset, decode_text


@dataclass(frozen=True, slots=True)
class Match:
    """Byte span ``[start, end)`` of one match in the scanned text."""

    start: int
    end: int
    source: Optional[re.Match[str]] = field(
        default=None, compare=False, repr=False
    )

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @classmethod
    def from_re(cls, match: re.Match[str], cursor: ByteCursor) -> "Match":
        start, end = cursor.byte_span(*match.span())
        return cls(start=start, end=end, source=match)


def iter_matches(data: Text, query: Query, start: int = 0) -> Iterator[Match]:
    """Yield non-overlapping matches left to right, beginning at byte ``start``."""

    text = decode_text(data)
    cursor = ByteCursor(text)
    pos = byte_offset_to_char_offset(data, start)
    for found in query.pattern.finditer(text, pos):
        yield Match.from_re(found, cursor)


def find_next(
    data: Text, start_byte: int, query: Query, wrap: bool
) -> Optional[Match]:
    text = decode_text(data)
    found = query.pattern.search(text, byte_offset_to_char_offset(data, start_byte))
    if found is None and wrap:
        found = query.pattern.search(text, 0)
    if found is None:
        return None
    return Match.from_re(found, ByteCursor(text))


def find_previous(
    data: Text, search_byte: int, query: Query, wrap: bool
) -> Optional[Match]:
    """Return the last match starting strictly before ``search_byte``.

    ``re`` cannot scan backwards, so this walks forward from the start of the
    text keeping the most recent candidate. The first match at or past
    ``search_byte`` ends the walk. With ``wrap`` and no candidate the walk
    instead runs to the end and the last match in the text wins.
    """

    previous: Optional[Match] = None
    matches = iter_matches(data, query)
    for candidate in matches:
        if candidate.start < search_byte:
            previous = candidate
            continue
        if previous is not None:
            return previous
        if not wrap:
            return None
        previous = candidate
        break

    for candidate in matches:
        previous = candidate
    return previous


__all__ = ["Match", "find_next", "find_previous", "iter_matches"]
