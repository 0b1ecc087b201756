"""File and shell collaborators for loading and persisting buffers."""

from __future__ import annotations

import subprocess
from typing import List, Protocol, Tuple

from edm.buffer import split_lines
from edm.errors import WriteFailed
from edm.runtime import telemetry


class Storage(Protocol):
    """Persistence side of the editor as seen by the buffer engine."""

    def write(self, filename: str, text: str) -> int:
        """Write ``text`` to ``filename`` and return the number of bytes."""
        ...


class FileStorage:
    """Writes buffers to disk byte-for-byte (no newline translation)."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def write(self, filename: str, text: str) -> int:
        data = text.encode(self.encoding)
        try:
            with open(filename, "wb") as handle:
                handle.write(data)
        except OSError as exc:
            telemetry.record_event(
                "storage.write_failed",
                level="error",
                data={"filename": filename, "reason": exc.strerror or str(exc)},
            )
            raise WriteFailed(filename, exc) from exc
        telemetry.record_event(
            "storage.write", data={"filename": filename, "bytes": len(data)}
        )
        return len(data)


def load_file(filename: str, *, encoding: str = "utf-8") -> Tuple[List[str], bool]:
    """Read ``filename`` into terminator-preserving lines.

    Returns ``(lines, found)``. A missing file yields an empty buffer; any
    other ``OSError`` propagates to the caller.
    """

    try:
        with open(filename, "r", encoding=encoding, newline="") as handle:
            text = handle.read()
    except FileNotFoundError:
        telemetry.record_event("storage.new_file", data={"filename": filename})
        return [], False
    return split_lines(text), True


def read_command_output(command: str) -> List[str]:
    """Run ``command`` through the shell and return its stdout as lines."""

    completed = subprocess.run(
        command,
        shell=True,
        capture_output=True,
        text=True,
        errors="replace",
        check=False,
    )
    telemetry.record_event(
        "shell.read",
        data={"command": command, "returncode": completed.returncode},
    )
    return split_lines(completed.stdout)


__all__ = ["FileStorage", "Storage", "load_file", "read_command_output"]
