"""Adapter that runs search commands on behalf of a Textual UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from textual.widgets import TextArea

from find_engine.actions import (
    ReplaceAllCommand,
    SearchCommand,
    SearchService,
    UnknownCommandError,
    create_command,
)
from find_engine.buffer.sync import SearchDocument
from find_engine.query import QueryError, SearchOptions, default_options
from find_engine.runtime import telemetry

from .document import TextAreaDocument


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to report back to widgets."""

    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


@dataclass(slots=True)
class SearchOutcome:
    command: str
    success: bool
    status: str
    message: Optional[str] = None


class TextualSearchAdapter:
    """Turns find/replace requests from the UI into command runs.

    Compilation failures and unknown command names become outcomes with a
    ``query_error`` or ``unknown_command`` status so widgets can show them.
    """

    def __init__(
        self,
        document: SearchDocument,
        hooks: Optional[TextualUIHooks] = None,
        *,
        options: Optional[SearchOptions] = None,
        service: Optional[SearchService] = None,
    ) -> None:
        self.document = document
        self.hooks = hooks or TextualUIHooks()
        self.options = options or default_options()
        self.service = service or SearchService()
        self.logger = telemetry.get_logger("find_engine.adapters.textual")

    @classmethod
    def for_text_area(
        cls,
        text_area: TextArea,
        hooks: Optional[TextualUIHooks] = None,
        *,
        options: Optional[SearchOptions] = None,
    ) -> "TextualSearchAdapter":
        return cls(TextAreaDocument(text_area), hooks, options=options)

    def run(
        self,
        command: str,
        query: str,
        *,
        replace: str = "",
        options: Optional[SearchOptions] = None,
        selection_only: bool = False,
    ) -> SearchOutcome:
        self._log_state("request ->", command=command, query=query, replace=replace)
        try:
            action = create_command(
                command,
                query,
                replace=replace,
                options=options or self.options,
                selection_only=selection_only,
                service=self.service,
            )
        except QueryError as exc:
            outcome = SearchOutcome(command, False, "query_error", str(exc))
        except UnknownCommandError as exc:
            outcome = SearchOutcome(command, False, "unknown_command", str(exc))
        else:
            outcome = self._execute(command, action)

        self._report(outcome)
        return outcome

    def _execute(self, command: str, action: SearchCommand) -> SearchOutcome:
        found = action.execute(self.document)
        if not found:
            return SearchOutcome(command, False, "no_match")
        if isinstance(action, ReplaceAllCommand):
            return SearchOutcome(command, True, "replaced", f"{action.count} replaced")
        return SearchOutcome(command, True, "match")

    def _report(self, outcome: SearchOutcome) -> None:
        self.hooks.update_status(outcome.message or outcome.status)
        payload: Dict[str, object] = {
            "command": outcome.command,
            "success": outcome.success,
            "selection": self._selection(),
        }
        if outcome.message:
            payload["message"] = outcome.message
        self.hooks.handle_event(f"search.{outcome.status}", payload)
        self._log_state(
            "result <-",
            success=outcome.success,
            status=outcome.status,
            message=outcome.message,
        )

    def _selection(self) -> tuple[int, int]:
        return (self.document.selection_offset, self.document.cursor_offset)

    def _log_state(self, prefix: str, **fields: object) -> None:
        parts = [prefix, f"selection={self._selection()!r}"]
        parts.extend(f"{key}={value!r}" for key, value in fields.items() if value is not None)
        line = " ".join(parts)
        self.logger.debug(line)
        self.hooks.log(line)


__all__ = ["SearchOutcome", "TextualSearchAdapter", "TextualUIHooks"]
