"""Editor modes and the manager that switches between them."""

from .base_mode import (
    Mode,
    ModeBus,
    ModeContext,
    ModeResult,
    continue_result,
    exit_result,
    request_lines,
)
from .command_mode import CommandMode
from .text_entry_mode import SENTINEL, TextEntryMode
from .mode_manager import ModeManager

__all__ = [
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "ModeManager",
    "CommandMode",
    "TextEntryMode",
    "SENTINEL",
    "continue_result",
    "exit_result",
    "request_lines",
]
