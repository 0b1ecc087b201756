"""Textual application hosting the line editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

try:  # pragma: no cover - imported only when the front-end is run
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' extra (pip install edm[textual]) to use --textual"
    ) from exc

from edm.buffer import Buffer, BufferMirror
from edm.config import EditorConfig
from edm.host import format_numbered
from edm.runtime import telemetry

from .controller import TextualEdmAdapter, TextualUIHooks, create_adapter


@dataclass
class UIState:
    buffer_text: str = ""
    status_text: str = ""
    output_text: str = ""


def render_mirror(mirror: BufferMirror) -> str:
    """Numbered buffer listing with ``>`` marking the current line."""

    rows = format_numbered(mirror.lines)
    marked = [
        (">" if index == mirror.current_line else " ") + row
        for index, row in enumerate(rows, start=1)
    ]
    title = mirror.filename or "[no file]"
    flag = "" if mirror.saved else " [+]"
    return f"{title}{flag}\n" + "".join(marked)


class EdmApp(App[None]):
    """Buffer view, status line, and a command input."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
	}

	#output-view {
		height: auto;
		max-height: 10;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self, buffer: Optional[Buffer] = None, *, config: Optional[EditorConfig] = None
    ) -> None:
        super().__init__()
        self._config = config or EditorConfig()
        self._initial_buffer = buffer
        self._state = UIState()
        self.adapter: TextualEdmAdapter | None = None
        self._buffer_widget: Static | None = None
        self._output_widget: Static | None = None
        self._status_widget: Static | None = None
        self._input_widget: Input | None = None
        self._logger = telemetry.get_logger("edm.adapters.textual")

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view", markup=False)
            yield self._buffer_widget
        self._output_widget = Static("", id="output-view", markup=False)
        self._status_widget = Static("", id="status-line", markup=False)
        self._input_widget = Input(placeholder=self._config.prompt, id="command-line")
        yield self._output_widget
        yield self._status_widget
        yield self._input_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            show_prompt=self._show_prompt,
            show_output=self._show_output,
            handle_event=self._handle_event,
            request_exit=self._request_exit,
            log=self._log_line,
        )
        self.adapter = create_adapter(
            hooks, self._initial_buffer, prompt=self._config.prompt
        )
        if self._input_widget:
            self._input_widget.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self.adapter:
            return
        self.adapter.submit_line(event.value)
        event.input.value = ""

    def _update_buffer(self, mirror: BufferMirror) -> None:
        self._state.buffer_text = render_mirror(mirror)
        if self._buffer_widget:
            self._buffer_widget.update(self._state.buffer_text)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _show_output(self, text: str) -> None:
        self._state.output_text = text
        if self._output_widget:
            self._output_widget.update(text)

    def _show_prompt(self, prompt: str) -> None:
        if self._input_widget:
            self._input_widget.placeholder = prompt or "text (. to finish)"

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "command.write" and isinstance(payload, dict):
            self._update_status(f"wrote {payload.get('filename')}")

    def _request_exit(self, code: int) -> None:
        self.exit(return_code=code)

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


def run_app(
    buffer: Optional[Buffer] = None, *, config: Optional[EditorConfig] = None
) -> int:
    app = EdmApp(buffer, config=config)
    app.run()
    return app.return_code or 0


__all__ = ["EdmApp", "render_mirror", "run_app"]
