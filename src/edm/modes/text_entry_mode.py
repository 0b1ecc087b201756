"""Text-entry mode: raw lines become buffer content until the sentinel."""

from __future__ import annotations

from typing import List

from edm.actions import editing as editing_actions
from edm.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult

SENTINEL = "."


def strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


class TextEntryMode(Mode):
    name = "text_entry"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._lines: List[str] = []

    def on_enter(self, previous: str | None) -> None:
        del previous
        self._lines.clear()
        entry = editing_actions.pending_text_entry(self.context)
        self.context.bus.emit("text_entry.start", entry.kind if entry else None)

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self.context.bus.emit("text_entry.end", len(self._lines))
        self._lines.clear()

    def handle_line(self, line: str) -> ModeResult:
        if strip_terminator(line) == SENTINEL:
            return self.finish()
        self._lines.append(line if line.endswith("\n") else line + "\n")
        return ModeResult(status="collecting")

    def finish(self) -> ModeResult:
        """Apply the pending edit with everything collected so far."""

        telemetry.record_event(
            "text_entry.commit", level="debug", data={"lines": len(self._lines)}
        )
        return editing_actions.commit_text_entry(self.context, list(self._lines))
