"""Command handlers that make up the buffer engine."""

from .command import apply_command
from .editing import TextEntry, commit_text_entry, pending_text_entry

__all__ = [
    "TextEntry",
    "apply_command",
    "commit_text_entry",
    "pending_text_entry",
]
