from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import pytest

from edm.buffer import Buffer, BufferState, LineDocument
from edm.errors import WriteFailed
from edm.host import format_numbered
from edm.modes.mode_manager import ModeManager
from edm.session import create_manager


class RecordingPrinter:
    def __init__(self) -> None:
        self.output: List[str] = []
        self.warnings: List[str] = []
        self.errors: List[str] = []

    def print_lines(self, lines: Sequence[str]) -> None:
        self.output.append("".join(lines))

    def print_numbered(self, lines: Sequence[str]) -> None:
        self.output.append("numbered:" + "".join(format_numbered(lines)))

    def info(self, message: str) -> None:
        self.output.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


class MemoryStorage:
    def __init__(self, *, fail: bool = False) -> None:
        self.files: Dict[str, str] = {}
        self.fail = fail

    def write(self, filename: str, text: str) -> int:
        if self.fail:
            raise WriteFailed(filename, PermissionError(13, "Permission denied"))
        self.files[filename] = text
        return len(text.encode("utf-8"))


def make_buffer(
    lines: Sequence[str] = (),
    *,
    current_line: Optional[int] = None,
    filename: Optional[str] = None,
) -> Buffer:
    document = LineDocument.from_lines(lines)
    state = BufferState(
        current_line=document.line_count if current_line is None else current_line,
        filename=filename,
    )
    return Buffer(document=document, state=state)


def make_manager(
    lines: Sequence[str] = (),
    *,
    current_line: Optional[int] = None,
    filename: Optional[str] = None,
    storage: Optional[object] = None,
) -> tuple[ModeManager, RecordingPrinter, MemoryStorage]:
    printer = RecordingPrinter()
    store = storage if storage is not None else MemoryStorage()
    manager = create_manager(
        make_buffer(lines, current_line=current_line, filename=filename),
        printer=printer,
        storage=store,  # type: ignore[arg-type]
    )
    return manager, printer, store  # type: ignore[return-value]


@pytest.fixture
def abc_lines() -> List[str]:
    return ["a\n", "b\n", "c\n"]
