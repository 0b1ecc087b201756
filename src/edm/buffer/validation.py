"""Range resolution against the live buffer."""

from __future__ import annotations

from dataclasses import dataclass

from edm.commands.models import Bounded, FromLine, NoAddress, Range, SingleLine, ToLine
from edm.errors import AddressOutOfRange


@dataclass(frozen=True, slots=True)
class LineSpan:
    """Half-open, 0-based slice ``[lo, hi)`` of buffer lines."""

    lo: int
    hi: int

    def __len__(self) -> int:
        return self.hi - self.lo


def resolve_range(address: Range, *, length: int, current_line: int) -> LineSpan:
    """Resolve ``address`` using the buffer length at the moment of application.

    Every explicit address names at least one existing line. Only an implied
    address on an empty cursor yields the empty slice ``[0, 0)``.
    """

    if isinstance(address, NoAddress):
        if current_line == 0:
            return LineSpan(0, 0)
        lo, hi = current_line - 1, current_line
    elif isinstance(address, SingleLine):
        lo, hi = address.line - 1, address.line
    elif isinstance(address, Bounded):
        lo, hi = address.start - 1, address.end
    elif isinstance(address, FromLine):
        lo, hi = address.start - 1, length
    elif isinstance(address, ToLine):
        lo, hi = 0, address.end
    else:
        raise TypeError(f"Unsupported address {address!r}")

    if lo < 0 or lo >= length or hi > length or lo >= hi:
        raise AddressOutOfRange(lo, hi, length)
    return LineSpan(lo, hi)
