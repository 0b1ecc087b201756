"""High-level buffer façade combining document and session state."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Iterable, Optional, Sequence

from edm.commands.models import Range
from edm.runtime import telemetry

from .document import LineDocument
from .state import BufferState
from .sync import BufferMirror
from .validation import LineSpan, resolve_range


@dataclass(slots=True)
class BufferDelta:
    version: int
    lo: int
    removed: int
    inserted: int
    current_line: int
    label: str


class Buffer:
    """The single line buffer of an editing session.

    All structural edits go through ``replace_lines`` or ``insert_lines`` so
    the cursor and the saved flag are updated in one place.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[LineDocument] = None,
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self.document = document or LineDocument()
        if state is None:
            state = BufferState(current_line=self.document.line_count)
        self.state = state

    @classmethod
    def from_text(
        cls, text: str, *, filename: Optional[str] = None, name: str = "default"
    ) -> "Buffer":
        return cls.from_lines(
            LineDocument.from_text(text).snapshot(), filename=filename, name=name
        )

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        *,
        filename: Optional[str] = None,
        name: str = "default",
    ) -> "Buffer":
        document = LineDocument.from_lines(lines)
        state = BufferState(current_line=document.line_count, filename=filename)
        return cls(name=name, document=document, state=state)

    @property
    def lines(self) -> Sequence[str]:
        return self.document.snapshot()

    @property
    def line_count(self) -> int:
        return self.document.line_count

    @property
    def current_line(self) -> int:
        return self.state.current_line

    @property
    def saved(self) -> bool:
        return self.state.saved

    @property
    def filename(self) -> Optional[str]:
        return self.state.filename

    def text(self) -> str:
        return self.document.text()

    def resolve(self, address: Range) -> LineSpan:
        return resolve_range(
            address, length=self.line_count, current_line=self.state.current_line
        )

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            lines=tuple(self.document.snapshot()),
            current_line=self.state.current_line,
            saved=self.state.saved,
            filename=self.state.filename,
            attributes=dict(attributes or {}),
        )

    def replace_lines(
        self, span: LineSpan, new_lines: Iterable[str], *, label: str
    ) -> BufferDelta:
        """Replace ``span`` with ``new_lines`` and shift the cursor.

        The cursor moves by the net line count change only when the edited
        span starts before it.
        """

        block = list(new_lines)
        with Transaction(self, label) as tx:
            cursor = self.state.current_line
            self._splice(span.lo, span.hi, block)
            if span.lo < cursor:
                cursor = cursor - len(span) + len(block)
            self.state.set_cursor(cursor, length=self.line_count)
            delta = tx.commit(span.lo, len(span), len(block))
        return delta

    def insert_lines(
        self, index: int, new_lines: Iterable[str], *, label: str
    ) -> BufferDelta:
        """Insert ``new_lines`` before 0-based ``index`` and advance the cursor."""

        block = list(new_lines)
        index = max(0, min(index, self.line_count))
        with Transaction(self, label) as tx:
            self._splice(index, index, block)
            self.state.set_cursor(
                self.state.current_line + len(block), length=self.line_count
            )
            delta = tx.commit(index, 0, len(block))
        return delta

    def delete_lines(self, span: LineSpan) -> BufferDelta:
        return self.replace_lines(span, (), label="delete_lines")

    def mark_saved(self, filename: Optional[str] = None) -> None:
        self.state.saved = True
        self.state.remember_filename(filename)

    def _splice(self, lo: int, hi: int, block: list[str]) -> None:
        # Applying an edit marks the buffer unsaved even when it is empty.
        self.state.saved = False
        if lo == hi and not block:
            return
        self.document = self.document.update_lines(lo, hi, block)


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(self, lo: int, removed: int, inserted: int) -> BufferDelta:
        delta = BufferDelta(
            version=self.buffer.document.version,
            lo=lo,
            removed=removed,
            inserted=inserted,
            current_line=self.buffer.state.current_line,
            label=self.label,
        )
        telemetry.record_event(
            "buffer.change",
            level="debug",
            data={
                "label": self.label,
                "lo": lo,
                "removed": removed,
                "inserted": inserted,
                "current_line": delta.current_line,
            },
        )
        return delta

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
