"""Find/replace engine for host text-editing surfaces."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "query",
    "runtime",
    "scan",
]

__version__ = "0.1.0"
