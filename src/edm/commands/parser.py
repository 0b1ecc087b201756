"""Turn command text into typed ``Command`` values."""

from __future__ import annotations

from typing import Callable, Dict, List

from edm.errors import TooManyArguments, UnknownCommand

from .address import parse_address
from .models import (
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
    Range,
    Shell,
    Write,
    WriteQuit,
)

CommandBuilder = Callable[[Range], Command]

# Commands whose arguments are free-form; matched before the arity check.
_WITH_ARGUMENTS = ("w", "wq", "c")


def _write_command(
    address: Range, token: str, args: List[str], remainder: str
) -> Command:
    del address, remainder
    if len(args) > 1:
        raise TooManyArguments(token, tuple(args))
    filename = args[0] if args else None
    if token == "wq":
        return WriteQuit(filename)
    return Write(filename)


def _change_command(
    address: Range, token: str, args: List[str], remainder: str
) -> Command:
    del args
    text = remainder.strip()[len(token) :].strip()
    if not text:
        return Change(address, None)
    return Change(address, text + "\n")


_ARGUMENT_PARSERS: Dict[str, Callable[[Range, str, List[str], str], Command]] = {
    "w": _write_command,
    "wq": _write_command,
    "c": _change_command,
}

_COMMAND_BUILDERS: Dict[str, CommandBuilder] = {
    "q": lambda address: Quit(),
    "q!": lambda address: ForceQuit(),
    "i": lambda address: Insert(),
    "a": lambda address: Append(),
    "d": Delete,
    "p": Print,
    "n": NumberPrint,
    "l": Line,
}


def parse_command(address: Range, remainder: str) -> Command:
    """Build the command named by the first token of ``remainder``.

    ``address`` is attached to commands that use it and dropped otherwise.
    """

    if remainder.startswith("!"):
        shell_command = remainder[1:].strip()
        if not shell_command:
            raise UnknownCommand("!")
        return Shell(shell_command)

    args = remainder.split()
    if not args:
        raise UnknownCommand("")
    token = args[0]

    if token in _WITH_ARGUMENTS:
        return _ARGUMENT_PARSERS[token](address, token, args[1:], remainder)

    builder = _COMMAND_BUILDERS.get(token)
    if builder is None:
        raise UnknownCommand(token)
    if len(args) > 1:
        raise TooManyArguments(token, tuple(args[1:]))
    return builder(address)


def parse_line(line: str) -> Command:
    """Parse a full command line (address plus command)."""

    address, remainder = parse_address(line.rstrip("\r\n"))
    return parse_command(address, remainder)


__all__ = ["parse_command", "parse_line"]
