from __future__ import annotations

from typing import Any, Dict, List

from edm.adapters.textual import HookPrinter, TextualUIHooks, create_adapter
from edm.buffer import BufferMirror

from conftest import MemoryStorage, make_buffer


def test_adapter_updates_buffer_and_status() -> None:
    mirrors: List[BufferMirror] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: mirrors.append(mirror),
        update_status=lambda status: statuses.append(status),
    )
    adapter = create_adapter(hooks, make_buffer(["a\n", "b\n"]))

    adapter.submit_line("i")
    adapter.submit_line("x")
    adapter.submit_line(".")

    assert mirrors  # snapshot taken on construction
    assert mirrors[-1].text == "a\nx\nb\n"
    assert mirrors[-1].attributes["mode"] == "command"
    assert mirrors[-1].saved is False
    assert "-- insert --" in statuses


def test_adapter_relays_command_events() -> None:
    events: List[tuple[str, object | None]] = []
    exits: List[int] = []
    storage = MemoryStorage()
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: None,
        handle_event=lambda name, payload: events.append((name, payload)),
        request_exit=lambda code: exits.append(code),
    )
    adapter = create_adapter(hooks, make_buffer(["a\n"]), storage=storage)

    result = adapter.submit_line("wq notes.txt")

    assert result.exit_requested
    assert exits == [0]
    assert ("command.submit", "wq notes.txt") in events
    written = next(payload for name, payload in events if name == "command.write")
    assert isinstance(written, dict)
    assert written["filename"] == "notes.txt"
    assert storage.files == {"notes.txt": "a\n"}


def test_adapter_reports_errors_on_status_line() -> None:
    statuses: List[str] = []
    events: List[Dict[str, Any]] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: None,
        update_status=lambda status: statuses.append(status),
        handle_event=lambda name, payload: events.append(
            {"name": name, "payload": payload}
        ),
    )
    adapter = create_adapter(hooks, make_buffer(["a\n"]))

    adapter.submit_line("1,9p")
    adapter.submit_line("1d")
    adapter.submit_line("q")

    assert statuses[0].startswith("E: Address out of range")
    assert statuses[-1] == "W: Changes not written"
    errors = [event for event in events if event["name"] == "command.error"]
    assert errors[-1]["payload"]["kind"] == "AddressOutOfRange"
    changes = [event for event in events if event["name"] == "buffer.change"]
    assert [change["payload"].removed for change in changes] == [1]


def test_adapter_prompt_follows_mode() -> None:
    prompts: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: None,
        show_prompt=lambda prompt: prompts.append(prompt),
    )
    adapter = create_adapter(hooks, prompt="*")

    adapter.submit_line("a")
    adapter.submit_line(".")

    assert prompts == ["*", "", "*"]


def test_hook_printer_routes_output() -> None:
    shown: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: None,
        show_output=lambda text: shown.append(text),
    )
    printer = HookPrinter(hooks)

    printer.print_numbered(["a\n", "b\n"])
    printer.info("2ln; 4b")

    assert shown == ["1   a\n2   b\n", "2ln; 4b"]


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: None,
        log=lambda line: logs.append(line),
    )
    adapter = create_adapter(hooks)

    adapter.submit_line("p")

    assert any(line.startswith("line ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)
    assert any(line.startswith("event ->") for line in logs)
