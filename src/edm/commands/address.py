"""Address prefix parsing for command lines."""

from __future__ import annotations

import re
from typing import Tuple

from edm.errors import InvalidRange

from .models import Bounded, FromLine, NoAddress, Range, SingleLine, ToLine

_NUMBER = re.compile(r"[0-9]+")


def split_address(line: str) -> Tuple[str, str]:
    """Split ``line`` at its first alphabetic character or ``!``.

    Returns ``(prefix, remainder)``; the remainder is untouched.
    """

    for index, char in enumerate(line):
        if char.isalpha() or char == "!":
            return line[:index], line[index:]
    return line, ""


def _line_number(component: str, address: str) -> int:
    if not _NUMBER.fullmatch(component):
        raise InvalidRange(address)
    value = int(component)
    if value < 1:
        raise InvalidRange(address)
    return value


def parse_range(address: str) -> Range:
    """Turn an address prefix such as ``"2,5"`` into a ``Range``."""

    text = address.strip()
    if not text:
        return NoAddress()

    if "," not in text:
        return SingleLine(_line_number(text, address))

    start, end = (part.strip() for part in text.split(",", 1))
    if not start and not end:
        raise InvalidRange(address)
    if not start:
        return ToLine(_line_number(end, address))
    if not end:
        return FromLine(_line_number(start, address))
    return Bounded(_line_number(start, address), _line_number(end, address))


def parse_address(line: str) -> Tuple[Range, str]:
    """Parse the optional address of ``line`` and return it with the rest."""

    prefix, remainder = split_address(line)
    return parse_range(prefix), remainder


__all__ = ["parse_address", "parse_range", "split_address"]
