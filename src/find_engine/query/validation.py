"""Guard against queries that would match at every position."""

from __future__ import annotations

import re

from .models import Query


def is_valid(query: Query) -> bool:
    """Reject the empty, case-insensitive pattern.

    That pattern is what an empty search box compiles to under the default
    options; it matches the empty string everywhere.
    """

    pattern = query.pattern
    return not (pattern.pattern == "" and pattern.flags & re.IGNORECASE)


__all__ = ["is_valid"]
