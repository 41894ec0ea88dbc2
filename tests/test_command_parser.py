from __future__ import annotations

import pytest

from parking_lot.commands.parser import CommandParser
from parking_lot.exceptions import ParseError


def test_splits_command_and_parameters() -> None:
    parser = CommandParser("park KA-01-HH-1234 White")

    assert parser.command == "park"
    assert parser.parameters == ["KA-01-HH-1234", "White"]
    assert parser.get_param(0) == "KA-01-HH-1234"
    assert parser.get_param(1) == "White"


def test_command_without_parameters() -> None:
    parser = CommandParser("status")

    assert parser.command == "status"
    assert parser.parameters == []
    assert parser.get_param(0) is None


def test_extra_whitespace_is_ignored() -> None:
    parser = CommandParser("leave   3  ")

    assert parser.command == "leave"
    assert parser.get_int_param() == 3


def test_out_of_range_parameter_is_absent() -> None:
    parser = CommandParser("park KA-01 White")

    assert parser.get_param(2) is None
    assert parser.get_param(-1) is None


@pytest.mark.parametrize("line", ["", " park KA-01 White", "   "])
def test_malformed_line_raises(line: str) -> None:
    with pytest.raises(ParseError, match="Invalid command format"):
        CommandParser(line)


def test_non_numeric_integer_parameter_raises() -> None:
    parser = CommandParser("leave abc")

    with pytest.raises(ParseError, match='For input string: "abc"'):
        parser.get_int_param()


def test_missing_integer_parameter_raises() -> None:
    with pytest.raises(ParseError, match="Missing integer parameter"):
        CommandParser("create_parking_lot").get_int_param()


def test_require_param_names_missing_parameter() -> None:
    parser = CommandParser("park KA-01")

    assert parser.require_param(0, "registration number") == "KA-01"
    with pytest.raises(ParseError, match="Missing parameter: colour"):
        parser.require_param(1, "colour")


@pytest.mark.parametrize("value", ["1_0", "2147483648", "-2147483649", "99999999999999999999", "1.0", " 3", "0x1A"])
def test_integer_parameter_must_be_a_32_bit_decimal(value: str) -> None:
    parser = CommandParser("leave 1")
    parser.parameters = [value]

    with pytest.raises(ParseError, match="For input string"):
        parser.get_int_param()


@pytest.mark.parametrize(
    ("value", "expected"),
    [("10", 10), ("+7", 7), ("-2147483648", -2147483648), ("2147483647", 2147483647), ("0010", 10), ("0", 0)],
)
def test_integer_parameter_accepts_decimal_forms(value: str, expected: int) -> None:
    assert CommandParser(f"leave {value}").get_int_param() == expected
