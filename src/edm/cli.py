"""Command-line entry point and console REPL."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from edm import __version__
from edm.buffer import Buffer
from edm.config import EditorConfig
from edm.host import ConsolePrinter, load_file, read_command_output
from edm.modes import ModeManager
from edm.runtime import telemetry
from edm.session import create_manager

DESCRIPTION = "edm - (ED iMproved) a line-oriented text editor, inspired by ed."
EPILOG = (
    "If FILE begins with a '!', the output of that shell command is read "
    "into the buffer instead."
)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="edm", description=DESCRIPTION, epilog=EPILOG
    )
    parser.add_argument(
        "-V", "--version", action="version", version=__version__
    )
    parser.add_argument(
        "file",
        nargs="?",
        metavar="FILE",
        help="File to edit (created on first write if it does not exist)",
    )
    parser.add_argument(
        "--textual",
        action="store_true",
        help="Run the Textual front-end instead of the console prompt",
    )
    return parser.parse_args(argv)


def load_buffer(target: Optional[str]) -> Buffer:
    """Build the initial buffer from a filename, a ``!command``, or nothing.

    Raises ``OSError`` (or ``UnicodeDecodeError``) when an existing file
    cannot be read.
    """

    if not target:
        return Buffer()
    if target.startswith("!"):
        return Buffer.from_lines(read_command_output(target[1:]))
    lines, _found = load_file(target)
    return Buffer.from_lines(lines, filename=target)


def run_console(
    manager: ModeManager,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Read lines until a command exits the session; return the exit code."""

    source = stdin or sys.stdin
    out = stdout or sys.stdout
    while True:
        prompt = manager.prompt
        if prompt:
            out.write(prompt)
            out.flush()
        line = source.readline()
        if not line:
            result = manager.handle_eof()
        else:
            result = manager.handle_line(line)
        if result.exit_requested:
            return result.exit_code or 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    config = EditorConfig.from_env()
    telemetry.configure(settings=config)
    printer = ConsolePrinter(color=config.color)

    try:
        buffer = load_buffer(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        telemetry.record_event(
            "session.load_failed", level="error", data={"target": args.file}
        )
        printer.fatal(f"{args.file}: {exc}")
        return 1

    if args.textual:
        try:
            from edm.adapters.textual.app import run_app
        except RuntimeError as exc:
            printer.fatal(str(exc))
            return 1
        return run_app(buffer, config=config)

    manager = create_manager(buffer, printer=printer, prompt=config.prompt)
    return run_console(manager)


if __name__ == "__main__":  # pragma: no cover - manual entry
    sys.exit(main())
