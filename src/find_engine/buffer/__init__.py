"""Host document contract plus an in-process reference buffer."""

from .buffer import Buffer, BufferView, Transaction
from .document import BufferDocument
from .state import BufferState, Viewport
from .sync import BufferValidationError, SearchDocument
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_byte_offset, ensure_line, ensure_offset

__all__ = [
    "Buffer",
    "BufferDocument",
    "BufferState",
    "BufferValidationError",
    "BufferView",
    "SearchDocument",
    "Transaction",
    "UndoEntry",
    "UndoTimeline",
    "Viewport",
    "ensure_byte_offset",
    "ensure_line",
    "ensure_offset",
]
