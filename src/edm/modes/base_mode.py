"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from edm.buffer import Buffer
from edm.host import Printer, Storage


@dataclass(slots=True)
class ModeResult:
    """Outcome of handling one input line.

    ``status`` names the effect: ``"ok"`` (continue), ``"request_lines"``
    (text entry begins), ``"exit"`` (stop the session with ``exit_code``),
    or ``"command_error"``.
    """

    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None
    exit_code: Optional[int] = None

    @property
    def exit_requested(self) -> bool:
        return self.status == "exit"


def continue_result(message: Optional[str] = None) -> ModeResult:
    return ModeResult(status="ok", message=message)


def exit_result(code: int = 0, message: Optional[str] = None) -> ModeResult:
    return ModeResult(status="exit", exit_code=code, message=message)


def request_lines(mode: str) -> ModeResult:
    return ModeResult(switch_to="text_entry", status="request_lines", message=mode)


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode can access."""

    buffer: Buffer
    printer: Printer
    storage: Storage
    bus: "ModeBus" = field(default_factory=lambda: ModeBus())
    extras: Dict[str, object] = field(default_factory=dict)


class ModeBus:
    """Minimal event bus letting modes and hosts exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(
        self, previous: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(
        self, next_mode: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_line(
        self, line: str
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError

    @property
    def prompt(self) -> str:
        return ""
