import pytest

from edm.commands import (
    Bounded,
    FromLine,
    NoAddress,
    SingleLine,
    ToLine,
    parse_address,
    split_address,
)
from edm.errors import InvalidRange, ParseError


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("p", NoAddress()),
        ("3d", SingleLine(3)),
        ("1,2d", Bounded(1, 2)),
        (",5p", ToLine(5)),
        ("2,p", FromLine(2)),
        ("12,40d", Bounded(12, 40)),
        ("1 d", SingleLine(1)),
    ],
)
def test_parse_address_grammar(line: str, expected: object) -> None:
    address, _remainder = parse_address(line)

    assert address == expected


def test_empty_line_has_no_address() -> None:
    assert parse_address("") == (NoAddress(), "")


def test_remainder_is_returned_untouched() -> None:
    address, remainder = parse_address("3c  hello world  ")

    assert address == SingleLine(3)
    assert remainder == "c  hello world  "


def test_split_address_without_command_keeps_whole_line_as_prefix() -> None:
    assert split_address("1,2") == ("1,2", "")


@pytest.mark.parametrize("line", [",d", "0d", "1.5d", "-1d", "1,2,3d", "+2p", "2,0d"])
def test_invalid_addresses_raise_invalid_range(line: str) -> None:
    with pytest.raises(InvalidRange):
        parse_address(line)


def test_invalid_range_is_a_parse_error() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_address(",p")

    assert excinfo.value.kind == "InvalidRange"
    assert excinfo.value.address == ","
