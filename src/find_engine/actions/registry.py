"""Name-based lookup of search commands."""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict, Optional, Type

from find_engine.query import SearchOptions

from .base import SearchCommand
from .find import FindIncrementalCommand, FindNextCommand, FindPreviousCommand
from .replace import ReplaceAllCommand, ReplaceAndFindCommand
from .service import SearchService

CommandFactory = Callable[..., SearchCommand]


class UnknownCommandError(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown search command '{self.name}'"


def _find(
    command_cls: Type[SearchCommand],
    query: str,
    *,
    replace: str,
    options: Optional[SearchOptions],
    selection_only: bool,
    service: Optional[SearchService],
) -> SearchCommand:
    del replace, selection_only
    return command_cls(query, options, service=service)


def _replace_and_find(
    query: str,
    *,
    replace: str,
    options: Optional[SearchOptions],
    selection_only: bool,
    service: Optional[SearchService],
) -> SearchCommand:
    del selection_only
    return ReplaceAndFindCommand(query, replace, options, service=service)


def _replace_all(
    query: str,
    *,
    replace: str,
    options: Optional[SearchOptions],
    selection_only: bool,
    service: Optional[SearchService],
) -> SearchCommand:
    return ReplaceAllCommand(query, replace, options, selection_only, service=service)


COMMANDS: Dict[str, CommandFactory] = {
    "find_incremental": partial(_find, FindIncrementalCommand),
    "find_next": partial(_find, FindNextCommand),
    "find_previous": partial(_find, FindPreviousCommand),
    "replace_and_find": _replace_and_find,
    "replace_all": _replace_all,
}


def create_command(
    name: str,
    query: str,
    *,
    replace: str = "",
    options: Optional[SearchOptions] = None,
    selection_only: bool = False,
    service: Optional[SearchService] = None,
) -> SearchCommand:
    """Build the command registered under ``name``.

    Raises ``UnknownCommandError`` for unregistered names and ``QueryError``
    when ``query`` does not compile.
    """

    factory = COMMANDS.get(name)
    if factory is None:
        raise UnknownCommandError(name)
    return factory(
        query,
        replace=replace,
        options=options,
        selection_only=selection_only,
        service=service,
    )


__all__ = ["COMMANDS", "UnknownCommandError", "create_command"]
