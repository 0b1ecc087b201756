"""Command mode: each input line is an address plus a command."""

from __future__ import annotations

from edm.actions import command as command_actions
from edm.commands import parse_line
from edm.errors import EditorError
from edm.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult


class CommandMode(Mode):
    name = "command"

    def __init__(self, context: ModeContext, *, prompt: str = ":") -> None:
        super().__init__(context)
        self._prompt = prompt

    @property
    def prompt(self) -> str:
        return self._prompt

    def on_enter(self, previous: str | None) -> None:
        del previous
        self.context.bus.emit("command.start", None)

    def handle_line(self, line: str) -> ModeResult:
        text = line.rstrip("\r\n")
        self.context.bus.emit("command.submit", text)
        try:
            command = parse_line(text)
            with telemetry.span(
                "command::apply",
                component="commands",
                metadata={"command": type(command).__name__},
            ):
                return command_actions.apply_command(self.context, command)
        except EditorError as exc:
            return self._report(exc)

    def _report(self, exc: EditorError) -> ModeResult:
        message = str(exc)
        telemetry.record_event(
            "command.error",
            level="warning",
            data={"kind": exc.kind, "message": message},
        )
        self.context.bus.emit("command.error", {"kind": exc.kind, "message": message})
        self.context.printer.error(message)
        return ModeResult(status="command_error", message=message)
