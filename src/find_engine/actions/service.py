"""Stateless helpers shared by every find/replace command.

Commands receive a ``SearchService`` instead of inheriting these routines, and
the document is always passed in explicitly; the service never keeps one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from find_engine.buffer.sync import SearchDocument
from find_engine.query import Query, is_valid
from find_engine.runtime import telemetry
from find_engine.scan import (
    encode_text,
    find_next,
    find_previous,
    select_range,
    select_range_bytes,
)


@dataclass(frozen=True, slots=True)
class Substitution:
    """Result of rewriting every match in a block of text.

    ``last_span`` is the character range of the final replacement.
    """

    text: str
    count: int
    last_span: Optional[Tuple[int, int]] = None


def _reject_invalid(query: Query) -> bool:
    if is_valid(query):
        return False
    telemetry.record_event(
        "search.invalid_query", level="debug", data={"query": query.raw}
    )
    return True


class SearchService:
    """Selection, scanning and substitution routines over a ``SearchDocument``."""

    def select_range(self, document: SearchDocument, start: int, stop: int) -> None:
        select_range(document, start, stop)

    def select_range_bytes(
        self,
        document: SearchDocument,
        start_byte: int,
        end_byte: int,
        *,
        data: Optional[bytes] = None,
    ) -> Tuple[int, int]:
        return select_range_bytes(document, start_byte, end_byte, data=data)

    def select_next_match(
        self,
        document: SearchDocument,
        start_byte: int,
        query: Query,
        wrap_around: bool,
        *,
        data: Optional[bytes] = None,
    ) -> bool:
        if _reject_invalid(query):
            return False
        if data is None:
            data = encode_text(document.get_all_text())
        match = find_next(data, start_byte, query, wrap_around)
        if match is None:
            return False
        self.select_range_bytes(document, match.start, match.end, data=data)
        return True

    def select_previous_match(
        self,
        document: SearchDocument,
        search_byte: int,
        query: Query,
        wrap_around: bool,
        *,
        data: Optional[bytes] = None,
    ) -> bool:
        if _reject_invalid(query):
            return False
        if data is None:
            data = encode_text(document.get_all_text())
        match = find_previous(data, search_byte, query, wrap_around)
        if match is None:
            return False
        self.select_range_bytes(document, match.start, match.end, data=data)
        return True

    def replace_selection_if_match(
        self,
        document: SearchDocument,
        start_byte: int,
        query: Query,
        replacement: str,
    ) -> Optional[int]:
        """Replace the selection when ``query`` matches all of it.

        ``start_byte`` is where the selection begins. Returns the byte length
        of the inserted text, or ``None`` when the selection was left alone.
        A match covering only part of the selection does not count.
        """

        if _reject_invalid(query):
            return None
        selected = document.selected_text()
        if not selected or query.pattern.fullmatch(selected) is None:
            return None

        size = len(encode_text(selected))
        found = query.pattern.fullmatch(document.get_range(start_byte, size))
        if found is None:
            return None
        inserted = query.expand(found, replacement)
        document.replace(start_byte, size, inserted)
        return len(encode_text(inserted))

    def substitute_all(self, text: str, query: Query, replacement: str) -> Substitution:
        """Rewrite every non-overlapping match, rescanning the rewritten text.

        Scanning resumes right after each inserted replacement, so inserted
        text is never matched again. After an empty match the scan also
        steps over one character.
        """

        if _reject_invalid(query):
            return Substitution(text=text, count=0)

        pos = 0
        count = 0
        last_span: Optional[Tuple[int, int]] = None
        while pos <= len(text):
            found = query.pattern.search(text, pos)
            if found is None:
                break
            start, end = found.span()
            inserted = query.expand(found, replacement)
            text = text[:start] + inserted + text[end:]
            count += 1
            pos = start + len(inserted)
            last_span = (start, pos)
            if start == end:
                pos += 1

        return Substitution(text=text, count=count, last_span=last_span)


__all__ = ["SearchService", "Substitution"]
