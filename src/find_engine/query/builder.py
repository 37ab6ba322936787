"""Turn raw user input plus ``SearchOptions`` into a ``Query``."""

from __future__ import annotations

import re

from .models import Query, QueryError, SearchOptions

# ``^`` and ``$`` anchor at line boundaries, as editors expect.
BASE_FLAGS = re.MULTILINE


def _flags_for(options: SearchOptions) -> int:
    if options.match_case:
        return BASE_FLAGS
    return BASE_FLAGS | re.IGNORECASE


def _compile(raw: str, source: str, options: SearchOptions, *, literal: bool) -> Query:
    try:
        pattern = re.compile(source, _flags_for(options))
    except re.error as exc:
        raise QueryError(f"Invalid pattern {raw!r}: {exc}", pattern=raw) from exc
    return Query(
        raw=raw,
        pattern=pattern,
        match_case=options.match_case,
        is_literal=literal,
    )


def build_literal_query(text: str, options: SearchOptions) -> Query:
    return _compile(text, re.escape(text), options, literal=True)


def build_pattern_query(text: str, options: SearchOptions) -> Query:
    return _compile(text, text, options, literal=False)


def build_query(text: str, options: SearchOptions) -> Query:
    if options.is_regex:
        return build_pattern_query(text, options)
    return build_literal_query(text, options)


__all__ = ["build_literal_query", "build_pattern_query", "build_query"]
