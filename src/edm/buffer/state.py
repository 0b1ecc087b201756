"""Cursor, saved flag, and filename tracking for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class BufferState:
    """Mutable session state tied to a LineDocument.

    ``current_line`` is 1-based, with 0 meaning "before the first line".
    ``saved`` is true while there are no pending changes.
    """

    current_line: int = 0
    saved: bool = True
    filename: Optional[str] = None

    def set_cursor(self, line: int, *, length: int) -> None:
        self.current_line = max(0, min(line, length))

    def remember_filename(self, filename: Optional[str]) -> None:
        if filename:
            self.filename = filename
