"""Hook-based controller that wires a ModeManager into a Textual host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from edm.buffer import Buffer, BufferMirror
from edm.host import Storage, format_numbered
from edm.modes import ModeManager, ModeResult
from edm.session import create_manager


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    show_prompt: Callable[[str], None] = _noop
    show_output: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    request_exit: Callable[[int], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class HookPrinter:
    """Printer that routes engine output through ``TextualUIHooks``."""

    def __init__(self, hooks: TextualUIHooks) -> None:
        self.hooks = hooks

    def print_lines(self, lines: Sequence[str]) -> None:
        self.hooks.show_output("".join(lines))

    def print_numbered(self, lines: Sequence[str]) -> None:
        self.print_lines(format_numbered(lines))

    def info(self, message: str) -> None:
        self.hooks.show_output(message)

    def warn(self, message: str) -> None:
        self.hooks.update_status(f"W: {message}")

    def error(self, message: str) -> None:
        self.hooks.update_status(f"E: {message}")


_RELAYED_EVENTS = (
    "command.submit",
    "command.error",
    "command.write",
    "command.quit",
    "buffer.change",
    "text_entry.start",
    "text_entry.end",
)


class TextualEdmAdapter:
    """Bridges ModeManager + bus events to a Textual-friendly surface."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_buffer()
        self._refresh_prompt()

    def submit_line(self, text: str) -> ModeResult:
        """Feed one line typed by the user to the active mode."""

        self._log_state("line ->", text=text)
        result = self.manager.handle_line(text + "\n")
        self._after_mode_result(result)
        self._log_state(
            "result <-",
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
            exit_code=result.exit_code,
        )
        return result

    def _after_mode_result(self, result: ModeResult) -> None:
        if result.status == "request_lines":
            self.hooks.update_status(f"-- {result.message} --")
        self._refresh_buffer()
        self._refresh_prompt()
        if result.exit_requested:
            self.hooks.request_exit(result.exit_code or 0)

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in _RELAYED_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_buffer(self) -> None:
        mirror = self.manager.context.buffer.mirror(attributes=self._attributes())
        self.hooks.update_buffer(mirror)

    def _refresh_prompt(self) -> None:
        self.hooks.show_prompt(self.manager.prompt)

    def _attributes(self) -> Dict[str, str]:
        mode = self.manager.active_mode
        return {"mode": mode.name if mode else "?"}

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.manager.context.buffer
        active_mode = self.manager.active_mode
        return {
            "mode": active_mode.name if active_mode else "?",
            "current_line": buffer.current_line,
            "lines": buffer.line_count,
            "saved": buffer.saved,
            "version": buffer.document.version,
        }


def create_adapter(
    hooks: TextualUIHooks,
    buffer: Optional[Buffer] = None,
    *,
    storage: Optional[Storage] = None,
    prompt: str = ":",
) -> TextualEdmAdapter:
    """Build a session whose printer reports through ``hooks``."""

    manager = create_manager(
        buffer, printer=HookPrinter(hooks), storage=storage, prompt=prompt
    )
    return TextualEdmAdapter(manager, hooks)


__all__ = ["HookPrinter", "TextualEdmAdapter", "TextualUIHooks", "create_adapter"]
