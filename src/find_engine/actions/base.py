"""Shared plumbing for search commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from find_engine.buffer.sync import SearchDocument
from find_engine.query import Query, SearchOptions, build_query, default_options
from find_engine.runtime import telemetry
from find_engine.scan import char_offset_to_byte_offset, encode_text

from .service import SearchService

OffsetPicker = Callable[[int, int], int]


@dataclass(frozen=True, slots=True)
class ScanStart:
    """Where a command starts scanning, in both offset spaces."""

    data: bytes
    char_offset: int
    byte_offset: int


def scan_start(document: SearchDocument, pick: OffsetPicker) -> ScanStart:
    text = document.get_all_text()
    offset = pick(document.cursor_offset, document.selection_offset)
    return ScanStart(
        data=encode_text(text),
        char_offset=offset,
        byte_offset=char_offset_to_byte_offset(text, offset),
    )


class SearchCommand:
    """Base class for commands that run once against a document.

    The query is compiled in the constructor, so a malformed pattern raises
    ``QueryError`` before anything touches the document.
    """

    name: str = "search"

    def __init__(
        self,
        query: str,
        options: Optional[SearchOptions] = None,
        *,
        service: Optional[SearchService] = None,
    ) -> None:
        self.options = options or default_options()
        self.query: Query = build_query(query, self.options)
        self.service = service or SearchService()

    def execute(self, document: SearchDocument) -> bool:
        with telemetry.span(
            f"search::{self.name}",
            component="search",
            metadata=self._metadata(),
        ) as handle:
            found = self.run(document)
            handle.finish("match" if found else "no_match")
        return found

    def run(self, document: SearchDocument) -> bool:  # pragma: no cover - abstract
        raise NotImplementedError

    def collapse(self, document: SearchDocument, offset: int) -> bool:
        """Collapse the selection to ``offset`` to show that nothing matched."""

        document.set_selection_range(offset, offset)
        telemetry.record_event(
            "search.no_match",
            level="debug",
            data={"command": self.name, "query": self.query.raw, "offset": offset},
        )
        return False

    def _metadata(self) -> dict[str, Any]:
        return {
            "query": self.query.raw,
            "regex": not self.query.is_literal,
            "match_case": self.options.match_case,
            "wrap_around": self.options.wrap_around,
        }


class ReplaceCommand(SearchCommand):
    name = "replace"

    def __init__(
        self,
        query: str,
        replace: str,
        options: Optional[SearchOptions] = None,
        *,
        service: Optional[SearchService] = None,
    ) -> None:
        super().__init__(query, options, service=service)
        self.replace = replace

    def _metadata(self) -> dict[str, Any]:
        metadata = super()._metadata()
        metadata["replace"] = self.replace
        return metadata


__all__ = ["ReplaceCommand", "ScanStart", "SearchCommand", "scan_start"]
