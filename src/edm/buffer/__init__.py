"""Line buffer, cursor state, and range resolution."""

from .buffer import Buffer, BufferDelta, Transaction
from .document import LineDocument, split_lines
from .state import BufferState
from .sync import BufferMirror
from .validation import LineSpan, resolve_range

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferMirror",
    "BufferState",
    "LineDocument",
    "LineSpan",
    "Transaction",
    "resolve_range",
    "split_lines",
]
