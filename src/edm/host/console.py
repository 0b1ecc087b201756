"""Terminal collaborators: printing buffer content and user messages."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Protocol, Sequence, TextIO

_WARN = "\x1b[33;1m"
_ERROR = "\x1b[31;1m"
_FATAL = "\x1b[91;1m"
_RESET = "\x1b[0m"


class Printer(Protocol):
    """Output side of the editor as seen by the buffer engine."""

    def print_lines(self, lines: Sequence[str]) -> None:
        ...

    def print_numbered(self, lines: Sequence[str]) -> None:
        ...

    def info(self, message: str) -> None:
        ...

    def warn(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


def format_numbered(lines: Sequence[str]) -> List[str]:
    """Prefix each line with its number, padded to the widest number + 3."""

    width = len(str(len(lines))) + 3
    return [f"{index:<{width}}{line}" for index, line in enumerate(lines, start=1)]


def _terminated(lines: Iterable[str]) -> str:
    text = "".join(lines)
    if text and not text.endswith("\n"):
        text += "\n"
    return text


class ConsolePrinter:
    """Writes buffer output to stdout and ``W:``/``E:`` messages to stderr."""

    def __init__(
        self,
        *,
        stream: Optional[TextIO] = None,
        messages: Optional[TextIO] = None,
        color: bool = True,
    ) -> None:
        self.stream = stream or sys.stdout
        self.messages = messages or sys.stderr
        self.color = color

    def print_lines(self, lines: Sequence[str]) -> None:
        self.stream.write(_terminated(lines))
        self.stream.flush()

    def print_numbered(self, lines: Sequence[str]) -> None:
        self.print_lines(format_numbered(lines))

    def info(self, message: str) -> None:
        self.stream.write(f"{message}\n")
        self.stream.flush()

    def warn(self, message: str) -> None:
        self._message(_WARN, "W", message)

    def error(self, message: str) -> None:
        self._message(_ERROR, "E", message)

    def fatal(self, message: str) -> None:
        self._message(_FATAL, "FATAL", message)

    def _message(self, color: str, tag: str, message: str) -> None:
        line = f"{tag}: {message}"
        if self.color:
            line = f"{color}{line}{_RESET}"
        self.messages.write(f"{line}\n")
        self.messages.flush()


__all__ = ["ConsolePrinter", "Printer", "format_numbered"]
