from __future__ import annotations

import io
import sys

import pytest

from edm import __version__, cli

from conftest import make_manager


def test_load_buffer_without_target_is_empty() -> None:
    buffer = cli.load_buffer(None)

    assert buffer.line_count == 0
    assert buffer.current_line == 0
    assert buffer.filename is None


def test_load_buffer_missing_file_keeps_filename(tmp_path) -> None:
    target = tmp_path / "new.txt"

    buffer = cli.load_buffer(str(target))

    assert buffer.line_count == 0
    assert buffer.filename == str(target)
    assert not target.exists()


def test_load_buffer_puts_cursor_on_last_line(tmp_path) -> None:
    target = tmp_path / "doc.txt"
    target.write_text("a\nb\nc\n", encoding="utf-8")

    buffer = cli.load_buffer(str(target))

    assert list(buffer.lines) == ["a\n", "b\n", "c\n"]
    assert buffer.current_line == 3
    assert buffer.saved is True


def test_load_buffer_reads_shell_output() -> None:
    buffer = cli.load_buffer("!echo hello")

    assert list(buffer.lines) == ["hello\n"]
    assert buffer.filename is None


def test_run_console_prompts_and_exits() -> None:
    manager, printer, _storage = make_manager(["a\n"])
    stdin = io.StringIO("p\nq\n")
    stdout = io.StringIO()

    code = cli.run_console(manager, stdin=stdin, stdout=stdout)

    assert code == 0
    assert stdout.getvalue() == "::"
    assert printer.output == ["a\n"]


def test_run_console_treats_eof_as_force_quit() -> None:
    manager, printer, _storage = make_manager(["a\n"])
    stdin = io.StringIO("1d\na\nlast")

    code = cli.run_console(manager, stdin=stdin, stdout=io.StringIO())

    assert code == 0
    assert list(manager.context.buffer.lines) == ["last\n"]
    assert printer.warnings == ["Changes not written"]


def test_main_edits_and_writes_file(tmp_path, monkeypatch, capsys) -> None:
    target = tmp_path / "doc.txt"
    target.write_text("a\nb\n", encoding="utf-8")
    monkeypatch.setenv("EDM_PROMPT", "")
    monkeypatch.setattr("sys.stdin", io.StringIO("1c first\nn\nwq\n"))

    code = cli.main([str(target)])

    assert code == 0
    assert target.read_text(encoding="utf-8") == "first\nb\n"
    out = capsys.readouterr().out
    assert out == "1   first\n2   b\n2ln; 8b\n"


def test_main_fails_on_unreadable_target(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("NO_COLOR", "1")

    code = cli.main([str(tmp_path)])

    assert code == 1
    assert capsys.readouterr().err.startswith("FATAL: ")


def test_version_flag(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-V"])

    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_textual_without_extra_reports_fatal(monkeypatch, capsys) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delitem(sys.modules, "edm.adapters.textual.app", raising=False)
    monkeypatch.setitem(sys.modules, "textual.app", None)

    code = cli.main(["--textual"])

    assert code == 1
    assert "textual" in capsys.readouterr().err
