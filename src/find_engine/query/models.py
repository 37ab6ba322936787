"""Value types describing what to search for and how."""

from __future__ import annotations

import re
import dataclasses
from dataclasses import dataclass
from typing import Any

from find_engine.runtime.telemetry import env_flag


class QueryError(ValueError):
    """Raised when a query or its replacement template cannot be compiled."""

    def __init__(self, message: str, *, pattern: str | None = None) -> None:
        super().__init__(message)
        self.pattern = pattern


@dataclass(frozen=True, slots=True)
class SearchOptions:
    """Read-only switches shared by every search command."""

    match_case: bool = False
    wrap_around: bool = True
    is_regex: bool = False

    @classmethod
    def from_env(cls) -> "SearchOptions":
        return cls(
            match_case=env_flag("MATCH_CASE", False),
            wrap_around=env_flag("WRAP_AROUND", True),
            is_regex=env_flag("REGEX", False),
        )

    def replace(self, **changes: Any) -> "SearchOptions":
        return dataclasses.replace(self, **changes)


def default_options() -> SearchOptions:
    return SearchOptions.from_env()


@dataclass(frozen=True, slots=True)
class Query:
    """A compiled query.

    Patterns are compiled over decoded text so that ``.``, character classes
    and case folding work on whole characters; ``raw`` keeps the user's input
    for display and logs.
    """

    raw: str
    pattern: re.Pattern[str]
    match_case: bool
    is_literal: bool

    def expand(self, match: re.Match[str], replacement: str) -> str:
        """Return the text that replaces ``match``.

        Literal queries insert ``replacement`` verbatim. Pattern queries
        expand group references such as ``\\1`` or ``\\g<name>``.
        """

        if self.is_literal:
            return replacement
        try:
            return match.expand(replacement)
        except (re.error, IndexError) as exc:
            raise QueryError(
                f"Invalid replacement {replacement!r}: {exc}", pattern=self.raw
            ) from exc

    def __str__(self) -> str:
        return self.raw


__all__ = ["Query", "QueryError", "SearchOptions", "default_options"]
