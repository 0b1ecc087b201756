"""Dataclasses describing parsed addresses and commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


def _require_positive(field_name: str, value: int) -> None:
    if value < 1:
        raise ValueError(f"{field_name} must be a positive line number, got {value}")


@dataclass(frozen=True, slots=True)
class SingleLine:
    """Exactly line ``line``."""

    line: int

    def __post_init__(self) -> None:
        _require_positive("line", self.line)


@dataclass(frozen=True, slots=True)
class Bounded:
    """Lines ``start`` through ``end`` inclusive."""

    start: int
    end: int

    def __post_init__(self) -> None:
        _require_positive("start", self.start)
        _require_positive("end", self.end)


@dataclass(frozen=True, slots=True)
class FromLine:
    """Line ``start`` through the end of the buffer."""

    start: int

    def __post_init__(self) -> None:
        _require_positive("start", self.start)


@dataclass(frozen=True, slots=True)
class ToLine:
    """The beginning of the buffer through line ``end``."""

    end: int

    def __post_init__(self) -> None:
        _require_positive("end", self.end)


@dataclass(frozen=True, slots=True)
class NoAddress:
    """No address given; the current line is implied."""


Range = Union[SingleLine, Bounded, FromLine, ToLine, NoAddress]


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class ForceQuit:
    pass


@dataclass(frozen=True, slots=True)
class Write:
    filename: Optional[str] = None


@dataclass(frozen=True, slots=True)
class WriteQuit:
    filename: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Insert:
    pass


@dataclass(frozen=True, slots=True)
class Append:
    pass


@dataclass(frozen=True, slots=True)
class Delete:
    address: Range = NoAddress()


@dataclass(frozen=True, slots=True)
class Change:
    address: Range = NoAddress()
    text: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Shell:
    """Run ``command`` through the shell and print its output."""

    command: str


@dataclass(frozen=True, slots=True)
class Print:
    address: Range = NoAddress()


@dataclass(frozen=True, slots=True)
class NumberPrint:
    address: Range = NoAddress()


@dataclass(frozen=True, slots=True)
class Line:
    address: Range = NoAddress()


Command = Union[
    Quit,
    ForceQuit,
    Write,
    WriteQuit,
    Insert,
    Append,
    Delete,
    Change,
    Print,
    NumberPrint,
    Line,
    Shell,
]


__all__ = [
    "Append",
    "Bounded",
    "Change",
    "Command",
    "Delete",
    "ForceQuit",
    "FromLine",
    "Insert",
    "Line",
    "NoAddress",
    "NumberPrint",
    "Print",
    "Quit",
    "Range",
    "Shell",
    "SingleLine",
    "ToLine",
    "Write",
    "WriteQuit",
]
