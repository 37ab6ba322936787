"""Textual integration: a ``TextArea`` document and a command adapter."""

from .controller import SearchOutcome, TextualSearchAdapter, TextualUIHooks
from .document import TextAreaDocument

__all__ = [
    "SearchOutcome",
    "TextAreaDocument",
    "TextualSearchAdapter",
    "TextualUIHooks",
]
