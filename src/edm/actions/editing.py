"""Structural edits: insert, append, delete, and change."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from edm.buffer import BufferDelta, LineSpan
from edm.commands import Append, Change, Delete, Insert
from edm.modes.base_mode import ModeContext, ModeResult, continue_result, request_lines

TEXT_ENTRY_KEY = "text_entry"


@dataclass(slots=True)
class TextEntry:
    """Edit waiting for the lines collected in text-entry mode."""

    kind: str
    span: Optional[LineSpan] = None


def pending_text_entry(context: ModeContext) -> Optional[TextEntry]:
    entry = context.extras.get(TEXT_ENTRY_KEY)
    return entry if isinstance(entry, TextEntry) else None


def _announce(context: ModeContext, delta: BufferDelta) -> None:
    context.bus.emit("buffer.change", delta)


def _begin_text_entry(context: ModeContext, entry: TextEntry) -> ModeResult:
    context.extras[TEXT_ENTRY_KEY] = entry
    return request_lines(entry.kind)


def handle_insert(context: ModeContext, command: Insert) -> ModeResult:
    del command
    return _begin_text_entry(context, TextEntry(kind="insert"))


def handle_append(context: ModeContext, command: Append) -> ModeResult:
    del command
    return _begin_text_entry(context, TextEntry(kind="append"))


def handle_delete(context: ModeContext, command: Delete) -> ModeResult:
    buffer = context.buffer
    span = buffer.resolve(command.address)
    _announce(context, buffer.delete_lines(span))
    return continue_result("delete")


def handle_change(context: ModeContext, command: Change) -> ModeResult:
    buffer = context.buffer
    span = buffer.resolve(command.address)
    if command.text is None:
        return _begin_text_entry(context, TextEntry(kind="change", span=span))
    _announce(context, buffer.replace_lines(span, [command.text], label="change"))
    return continue_result("change")


def commit_text_entry(context: ModeContext, lines: Sequence[str]) -> ModeResult:
    """Apply the pending edit with the lines collected before the sentinel."""

    entry = context.extras.pop(TEXT_ENTRY_KEY, None)
    if not isinstance(entry, TextEntry):
        raise RuntimeError("No text entry is pending")

    buffer = context.buffer
    if entry.kind == "insert":
        delta = buffer.insert_lines(buffer.current_line - 1, lines, label="insert")
    elif entry.kind == "append":
        delta = buffer.insert_lines(buffer.current_line, lines, label="append")
    elif entry.kind == "change" and entry.span is not None:
        delta = buffer.replace_lines(entry.span, lines, label="change")
    else:
        raise RuntimeError(f"Unknown text entry kind '{entry.kind}'")
    _announce(context, delta)
    return ModeResult(switch_to="command", status="ok", message=entry.kind)


__all__ = [
    "TEXT_ENTRY_KEY",
    "TextEntry",
    "commit_text_entry",
    "handle_append",
    "handle_change",
    "handle_delete",
    "handle_insert",
    "pending_text_entry",
]
