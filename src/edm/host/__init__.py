"""Collaborators that connect the engine to terminals and files."""

from .console import ConsolePrinter, Printer, format_numbered
from .files import FileStorage, Storage, load_file, read_command_output

__all__ = [
    "ConsolePrinter",
    "FileStorage",
    "Printer",
    "Storage",
    "format_numbered",
    "load_file",
    "read_command_output",
]
