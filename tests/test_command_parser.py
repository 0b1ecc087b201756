import pytest

from edm.commands import (
    Append,
    Bounded,
    Change,
    Delete,
    ForceQuit,
    Insert,
    Line,
    NoAddress,
    NumberPrint,
    Print,
    Quit,
    Shell,
    SingleLine,
    ToLine,
    Write,
    WriteQuit,
    parse_command,
    parse_line,
)
from edm.errors import TooManyArguments, UnknownCommand


@pytest.mark.parametrize(
    ("remainder", "expected"),
    [
        ("q", Quit()),
        ("q!", ForceQuit()),
        ("w", Write(None)),
        ("w notes.txt", Write("notes.txt")),
        ("wq", WriteQuit(None)),
        ("wq notes.txt", WriteQuit("notes.txt")),
        ("i", Insert()),
        ("a", Append()),
        ("l", Line(NoAddress())),
        ("p", Print(NoAddress())),
        ("n", NumberPrint(NoAddress())),
    ],
)
def test_command_table(remainder: str, expected: object) -> None:
    assert parse_command(NoAddress(), remainder) == expected


def test_delete_and_change_keep_the_address() -> None:
    address = Bounded(1, 2)

    assert parse_command(address, "d").address == address  # type: ignore[union-attr]
    assert parse_command(address, "d") == Delete(address)
    assert parse_command(address, "c") == Change(address, None)


def test_change_with_inline_text() -> None:
    command = parse_command(SingleLine(3), "c   hello   world  ")

    assert command == Change(SingleLine(3), "hello   world\n")


def test_address_on_address_free_command_is_accepted() -> None:
    assert parse_command(SingleLine(5), "q") == Quit()
    assert parse_command(SingleLine(5), "i") == Insert()
    assert parse_command(SingleLine(5), "w") == Write(None)


@pytest.mark.parametrize("remainder", ["q now", "p 1", "d x", "i text", "q! y"])
def test_extra_tokens_are_rejected(remainder: str) -> None:
    with pytest.raises(TooManyArguments):
        parse_command(NoAddress(), remainder)


@pytest.mark.parametrize("remainder", ["w a b", "wq a b"])
def test_write_takes_at_most_one_filename(remainder: str) -> None:
    with pytest.raises(TooManyArguments):
        parse_command(NoAddress(), remainder)


@pytest.mark.parametrize("remainder", ["z", "quit", "x y", "cx", ""])
def test_unknown_commands(remainder: str) -> None:
    with pytest.raises(UnknownCommand):
        parse_command(NoAddress(), remainder)


def test_parse_line_combines_address_and_command() -> None:
    assert parse_line("3c hello\n") == Change(SingleLine(3), "hello\n")
    assert parse_line(",5p\n") == Print(ToLine(5))
    assert parse_line("1,2d") == Delete(Bounded(1, 2))


def test_shell_escape_takes_the_rest_of_the_line() -> None:
    assert parse_line("!echo  a b\n") == Shell("echo  a b")
    assert parse_line("2! ls") == Shell("ls")


def test_shell_escape_needs_a_command() -> None:
    with pytest.raises(UnknownCommand):
        parse_line("!  ")
