"""Error types raised by the parsers and the buffer engine."""

from __future__ import annotations

from typing import Optional


class EditorError(RuntimeError):
    """Base class for every user-correctable editor failure.

    ``kind`` is the short name reported to the user and used as the
    ``command.error`` event payload.
    """

    kind = "EditorError"


class ParseError(EditorError):
    """Raised when a command line cannot be turned into a command."""

    kind = "ParseError"


class InvalidRange(ParseError):
    kind = "InvalidRange"

    def __init__(self, address: str) -> None:
        super().__init__(f"Invalid range '{address}'")
        self.address = address


class UnknownCommand(ParseError):
    kind = "UnknownCommand"

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown command '{token}'" if token else "No command given")
        self.token = token


class TooManyArguments(ParseError):
    kind = "TooManyArguments"

    def __init__(self, token: str, args: tuple[str, ...]) -> None:
        super().__init__(f"Too many arguments for '{token}'")
        self.token = token
        self.args_given = args


class AddressOutOfRange(EditorError):
    """Raised when a range resolves outside the live buffer."""

    kind = "AddressOutOfRange"

    def __init__(self, lo: int, hi: int, length: int) -> None:
        super().__init__(f"Address out of range ({lo + 1},{hi} of {length})")
        self.lo = lo
        self.hi = hi
        self.length = length


class NoFilename(EditorError):
    kind = "NoFilename"

    def __init__(self) -> None:
        super().__init__("No filename given")


class WriteFailed(EditorError):
    kind = "WriteFailed"

    def __init__(self, filename: str, cause: Optional[OSError] = None) -> None:
        reason = cause.strerror if cause is not None and cause.strerror else cause
        super().__init__(f"{filename}: {reason}" if reason else filename)
        self.filename = filename
        self.cause = cause


__all__ = [
    "AddressOutOfRange",
    "EditorError",
    "InvalidRange",
    "NoFilename",
    "ParseError",
    "TooManyArguments",
    "UnknownCommand",
    "WriteFailed",
]
