"""Immutable text snapshot with a line index."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Tuple

from find_engine.scan.offsets import ENCODING


def _line_starts(text: str) -> Tuple[int, ...]:
    starts = [0]
    index = text.find("\n")
    while index != -1:
        starts.append(index + 1)
        index = text.find("\n", index + 1)
    return tuple(starts)


@dataclass(frozen=True, slots=True)
class BufferDocument:
    """Text plus derived lookups; edits produce a new document."""

    text: str = ""
    version: int = 0
    line_starts: Tuple[int, ...] = field(init=False, repr=False, compare=False)
    encoded: bytes = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "line_starts", _line_starts(self.text))
        object.__setattr__(self, "encoded", self.text.encode(ENCODING))

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        return cls(text=text)

    def with_text(self, text: str) -> "BufferDocument":
        return BufferDocument(text=text, version=self.version + 1)

    def splice(self, start: int, end: int, text: str) -> "BufferDocument":
        """Return a document with characters ``[start:end]`` replaced."""

        return self.with_text(self.text[:start] + text + self.text[end:])

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def line_count(self) -> int:
        return len(self.line_starts)

    def line_at_offset(self, offset: int) -> int:
        return bisect_right(self.line_starts, offset) - 1

    def offset_at_line(self, line: int) -> int:
        return self.line_starts[line]

    def get_line(self, line: int) -> str:
        start = self.line_starts[line]
        if line + 1 < len(self.line_starts):
            return self.text[start : self.line_starts[line + 1] - 1]
        return self.text[start:]
