"""In-process document implementing the ``SearchDocument`` contract."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from find_engine.runtime import telemetry
from find_engine.scan.offsets import ENCODING

from .document import BufferDocument
from .state import BufferState, Selection, Viewport
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_byte_offset, ensure_line, ensure_offset


@dataclass(slots=True)
class BufferView:
    version: int
    text: str
    selection: Selection
    top_line: int
    left_column: int


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        viewport: Optional[Viewport] = None,
        history: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.viewport = viewport or Viewport()
        self.history = history if history is not None else UndoTimeline()
        self.state.clamp(self.document.length)

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_text(text))

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.document.version,
            text=self.document.text,
            selection=self.state.selection,
            top_line=self.viewport.top_line,
            left_column=self.viewport.left_column,
        )

    # -- text -------------------------------------------------------------

    def get_all_text(self) -> str:
        return self.document.text

    @property
    def text(self) -> str:
        return self.document.text

    @text.setter
    def text(self, value: str) -> None:
        with Transaction(self, "set_text") as tx:
            self.document = self.document.with_text(value)
            self.state.clamp(self.document.length)
            tx.commit()

    def get_range(self, start_byte: int, length: int) -> str:
        start_byte = ensure_byte_offset(self.document, start_byte)
        end_byte = ensure_byte_offset(self.document, start_byte + length)
        return self.document.encoded[start_byte:end_byte].decode(ENCODING)

    def replace(self, start_byte: int, length: int, new_text: str) -> None:
        """Replace ``length`` bytes at ``start_byte``; the cursor lands after ``new_text``."""

        start_byte = ensure_byte_offset(self.document, start_byte)
        end_byte = ensure_byte_offset(self.document, start_byte + length)
        data = self.document.encoded
        start = len(data[:start_byte].decode(ENCODING))
        end = start + len(data[start_byte:end_byte].decode(ENCODING))
        with Transaction(self, "replace") as tx:
            self.document = self.document.splice(start, end, new_text)
            self.state.collapse(start + len(new_text))
            tx.commit()

    # -- selection --------------------------------------------------------

    @property
    def cursor_offset(self) -> int:
        return self.state.cursor_offset

    @property
    def selection_offset(self) -> int:
        return self.state.selection_offset

    def selected_text(self) -> str:
        start, end = self.state.span
        return self.document.text[start:end]

    def set_selection_range(self, start: int, end: int) -> None:
        ensure_offset(self.document, start)
        ensure_offset(self.document, end)
        self.state.set_selection(start, end)

    # -- lines and viewport -----------------------------------------------

    def line_at_offset(self, offset: int) -> int:
        return self.document.line_at_offset(ensure_offset(self.document, offset))

    def offset_at_line(self, line: int) -> int:
        return self.document.offset_at_line(ensure_line(self.document, line))

    def scroll_to_line(self, line: int) -> None:
        self.viewport.top_line = ensure_line(self.document, line)

    def scroll_to_horizontal_offset(self, offset: int) -> None:
        self.viewport.left_column = max(0, offset)

    @property
    def smallest_visible_horizontal_index(self) -> int:
        return self.viewport.left_column

    # -- history ----------------------------------------------------------

    def undo(self) -> bool:
        entry = self.history.undo()
        if entry is None:
            return False
        self._restore(entry.before_text, entry.selection_before)
        return True

    def redo(self) -> bool:
        entry = self.history.redo()
        if entry is None:
            return False
        self._restore(entry.after_text, entry.selection_after)
        return True

    def _restore(self, text: str, selection: Selection) -> None:
        self.document = self.document.with_text(text)
        self.state.set_selection(*selection)
        self.state.clamp(self.document.length)


class Transaction(AbstractContextManager["Transaction"]):
    """Wrap one buffer mutation in a telemetry span and record it for undo."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None
        self._before_text = ""
        self._before_selection: Selection = (0, 0)

    def __enter__(self) -> "Transaction":
        self._before_text = self.buffer.document.text
        self._before_selection = self.buffer.state.selection
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(self) -> None:
        entry = UndoEntry(
            label=self.label,
            before_text=self._before_text,
            after_text=self.buffer.document.text,
            selection_before=self._before_selection,
            selection_after=self.buffer.state.selection,
        )
        self.buffer.history.push(entry)

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
