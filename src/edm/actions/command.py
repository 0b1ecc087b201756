"""Apply parsed commands to the session buffer."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from edm.commands import (
    Append,
    Change,
    Command,
    Delete,
    ForceQuit,
    Insert,
    Line,
    NumberPrint,
    Print,
    Quit,
    Shell,
    Write,
    WriteQuit,
)
from edm.errors import NoFilename
from edm.host import read_command_output
from edm.modes.base_mode import ModeContext, ModeResult, continue_result, exit_result
from edm.runtime import telemetry

from .editing import handle_append, handle_change, handle_delete, handle_insert

CommandHandler = Callable[[ModeContext, Any], ModeResult]


def apply_command(context: ModeContext, command: Command) -> ModeResult:
    """Run ``command`` and return the resulting effect.

    Raises an ``EditorError`` before touching the buffer when the command
    cannot be applied.
    """

    handler = _COMMAND_HANDLERS.get(type(command))
    if handler is None:
        raise TypeError(f"No handler for {type(command).__name__}")
    return handler(context, command)


def _write_buffer(context: ModeContext, filename: Optional[str]) -> None:
    buffer = context.buffer
    target = filename or buffer.filename
    if not target:
        raise NoFilename()
    size = context.storage.write(target, buffer.text())
    buffer.mark_saved(filename)
    context.printer.info(f"{buffer.line_count}ln; {size}b")
    context.bus.emit(
        "command.write",
        {"filename": target, "lines": buffer.line_count, "bytes": size},
    )


def _handle_write(context: ModeContext, command: Write) -> ModeResult:
    _write_buffer(context, command.filename)
    return continue_result("write")


def _handle_write_quit(context: ModeContext, command: WriteQuit) -> ModeResult:
    _write_buffer(context, command.filename)
    context.bus.emit("command.quit", {"force": False})
    return exit_result(0, "wq")


def _handle_quit(context: ModeContext, command: Quit) -> ModeResult:
    del command
    buffer = context.buffer
    if buffer.saved:
        context.bus.emit("command.quit", {"force": False})
        return exit_result(0, "quit")
    context.printer.warn("Changes not written")
    telemetry.record_event("session.quit_refused", level="warning")
    # A second q in a row now exits without writing.
    buffer.state.saved = True
    return continue_result("unsaved_changes")


def _handle_force_quit(context: ModeContext, command: ForceQuit) -> ModeResult:
    del command
    context.bus.emit("command.quit", {"force": True})
    return exit_result(0, "quit!")


def _handle_print(context: ModeContext, command: Print) -> ModeResult:
    buffer = context.buffer
    buffer.resolve(command.address)
    context.printer.print_lines(buffer.lines)
    return continue_result("print")


def _handle_number_print(context: ModeContext, command: NumberPrint) -> ModeResult:
    buffer = context.buffer
    buffer.resolve(command.address)
    context.printer.print_numbered(buffer.lines)
    return continue_result("number_print")


def _handle_line(context: ModeContext, command: Line) -> ModeResult:
    buffer = context.buffer
    buffer.resolve(command.address)
    context.printer.info(str(buffer.current_line))
    return continue_result("line")


def _handle_shell(context: ModeContext, command: Shell) -> ModeResult:
    output = read_command_output(command.command)
    context.printer.print_lines(output)
    context.bus.emit(
        "command.shell", {"command": command.command, "lines": len(output)}
    )
    return continue_result("shell")


_COMMAND_HANDLERS: Dict[type, CommandHandler] = {
    Quit: _handle_quit,
    ForceQuit: _handle_force_quit,
    Write: _handle_write,
    WriteQuit: _handle_write_quit,
    Insert: handle_insert,
    Append: handle_append,
    Delete: handle_delete,
    Change: handle_change,
    Print: _handle_print,
    NumberPrint: _handle_number_print,
    Line: _handle_line,
    Shell: _handle_shell,
}


__all__ = ["apply_command"]
