"""Query construction: options, compiled queries, and the validity guard."""

from .builder import build_literal_query, build_pattern_query, build_query
from .models import Query, QueryError, SearchOptions, default_options
from .validation import is_valid

__all__ = [
    "Query",
    "QueryError",
    "SearchOptions",
    "build_literal_query",
    "build_pattern_query",
    "build_query",
    "default_options",
    "is_valid",
]
