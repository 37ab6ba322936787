"""Commands that move the selection to a match."""

from __future__ import annotations

from find_engine.buffer.sync import SearchDocument

from .base import SearchCommand, scan_start


class FindIncrementalCommand(SearchCommand):
    """Search from the start of the selection, so it can match itself again.

    Used while the query is being typed: the current match stays selected
    as long as it still matches.
    """

    name = "find_incremental"

    def run(self, document: SearchDocument) -> bool:
        start = scan_start(document, min)
        if self.service.select_next_match(
            document,
            start.byte_offset,
            self.query,
            self.options.wrap_around,
            data=start.data,
        ):
            return True
        return self.collapse(document, start.char_offset)


class FindNextCommand(SearchCommand):
    """Search from the end of the selection, skipping the current match."""

    name = "find_next"

    def run(self, document: SearchDocument) -> bool:
        start = scan_start(document, max)
        if self.service.select_next_match(
            document,
            start.byte_offset,
            self.query,
            self.options.wrap_around,
            data=start.data,
        ):
            return True
        return self.collapse(document, start.char_offset)


class FindPreviousCommand(SearchCommand):
    name = "find_previous"

    def run(self, document: SearchDocument) -> bool:
        start = scan_start(document, min)
        if self.service.select_previous_match(
            document,
            start.byte_offset,
            self.query,
            self.options.wrap_around,
            data=start.data,
        ):
            return True
        return self.collapse(document, start.char_offset)


__all__ = ["FindIncrementalCommand", "FindNextCommand", "FindPreviousCommand"]
