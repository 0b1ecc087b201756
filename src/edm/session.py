"""Assemble an editing session from a buffer and host collaborators."""

from __future__ import annotations

from typing import Iterable, Optional

from edm.buffer import Buffer
from edm.host import ConsolePrinter, FileStorage, Printer, Storage
from edm.modes import CommandMode, ModeBus, ModeContext, ModeManager, TextEntryMode
from edm.runtime import telemetry


def create_manager(
    buffer: Optional[Buffer] = None,
    *,
    printer: Optional[Printer] = None,
    storage: Optional[Storage] = None,
    prompt: str = ":",
) -> ModeManager:
    """Build a ModeManager with command and text-entry modes registered."""

    context = ModeContext(
        buffer=buffer or Buffer(),
        printer=printer or ConsolePrinter(),
        storage=storage or FileStorage(),
        bus=ModeBus(),
    )
    manager = ModeManager(context)
    manager.register_mode(CommandMode, prompt=prompt)
    manager.register_mode(TextEntryMode)
    telemetry.record_event(
        "session.start",
        data={
            "lines": context.buffer.line_count,
            "filename": context.buffer.filename or "",
        },
    )
    return manager


def feed_lines(manager: ModeManager, lines: Iterable[str]) -> Optional[int]:
    """Drive ``manager`` with ``lines`` until one of them exits the session.

    Returns the exit code, or ``None`` when the lines run out first.
    """

    for line in lines:
        result = manager.handle_line(line)
        if result.exit_requested:
            return result.exit_code
    return None


__all__ = ["create_manager", "feed_lines"]
