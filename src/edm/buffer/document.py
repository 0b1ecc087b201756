"""Line storage for edm buffers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

_LINE = re.compile(r"[^\n]*\n|[^\n]+")


def split_lines(text: str) -> List[str]:
    """Split ``text`` into lines that keep their ``"\\n"`` terminator.

    A final line without a terminator is kept as-is, so joining the result
    with ``""`` reproduces ``text`` exactly.
    """

    return _LINE.findall(text)


@dataclass(slots=True)
class LineDocument:
    """Immutable-ish list-of-lines model; every edit returns a new version."""

    _lines: List[str] = field(default_factory=list)
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "LineDocument":
        return cls(_lines=split_lines(text))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LineDocument":
        return cls(_lines=list(lines))

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def update_lines(
        self, start: int, end: int, new_lines: Iterable[str]
    ) -> "LineDocument":
        """Return a document with ``[start:end]`` replaced by ``new_lines``."""

        lines = list(self._lines)
        lines[start:end] = list(new_lines)
        return LineDocument(_lines=lines, version=self.version + 1)

    def text(self) -> str:
        return "".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)
