"""Commands that rewrite matched text."""

from __future__ import annotations

from typing import Any, Optional

from find_engine.buffer.sync import SearchDocument
from find_engine.query import SearchOptions
from find_engine.runtime import telemetry
from find_engine.scan import (
    byte_offset_to_char_offset,
    char_offset_to_byte_offset,
    encode_text,
)

from .base import ReplaceCommand, scan_start
from .service import SearchService


class ReplaceAndFindCommand(ReplaceCommand):
    """Replace the selection if the query matches all of it, then find the next match.

    Text is only ever replaced after it has been selected, so the user sees
    exactly what will change. Without a matching selection the first press
    only finds; a second press replaces.
    """

    name = "replace_and_find"

    def run(self, document: SearchDocument) -> bool:
        start = scan_start(document, min)
        start_byte = start.byte_offset
        if document.selected_text():
            inserted = self.service.replace_selection_if_match(
                document, start_byte, self.query, self.replace
            )
            if inserted is not None:
                start_byte += inserted
            else:
                start_byte = scan_start(document, max).byte_offset

        data = encode_text(document.get_all_text())
        if self.service.select_next_match(
            document, start_byte, self.query, self.options.wrap_around, data=data
        ):
            return True
        return self.collapse(document, byte_offset_to_char_offset(data, start_byte))


class ReplaceAllCommand(ReplaceCommand):
    """Replace every match in the document, or only inside the selection."""

    name = "replace_all"

    def __init__(
        self,
        query: str,
        replace: str,
        options: Optional[SearchOptions] = None,
        selection_only: bool = False,
        *,
        service: Optional[SearchService] = None,
    ) -> None:
        super().__init__(query, replace, options, service=service)
        self.selection_only = selection_only
        self.count = 0

    def run(self, document: SearchDocument) -> bool:
        source = (
            document.selected_text() if self.selection_only else document.get_all_text()
        )
        result = self.service.substitute_all(source, self.query, self.replace)
        self.count = result.count
        telemetry.record_event(
            "search.replace_all",
            data={
                "query": self.query.raw,
                "count": result.count,
                "selection_only": self.selection_only,
            },
        )
        if result.count == 0:
            return False

        if self.selection_only:
            start = min(document.cursor_offset, document.selection_offset)
            start_byte = char_offset_to_byte_offset(document.get_all_text(), start)
            document.replace(start_byte, len(encode_text(source)), result.text)
            self.service.select_range(document, start, start + len(result.text))
        else:
            document.text = result.text
            assert result.last_span is not None
            self.service.select_range(document, *result.last_span)
        return True

    def _metadata(self) -> dict[str, Any]:
        metadata = super()._metadata()
        metadata["selection_only"] = self.selection_only
        return metadata


__all__ = ["ReplaceAllCommand", "ReplaceAndFindCommand"]
