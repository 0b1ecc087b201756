"""Address and command grammar for the line editor."""

from .address import parse_address, parse_range, split_address
from .models import (
    Append,
    Bounded,
    Change,
    Command,
    Delete,
    ForceQuit,
    FromLine,
    Insert,
    Line,
    NoAddress,
    NumberPrint,
    Print,
    Quit,
    Range,
    Shell,
    SingleLine,
    ToLine,
    Write,
    WriteQuit,
)
from .parser import parse_command, parse_line

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
    "parse_address",
    "parse_command",
    "parse_line",
    "parse_range",
    "split_address",
]
