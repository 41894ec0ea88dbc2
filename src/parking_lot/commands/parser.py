"""Parsing of single command lines."""

import re
from typing import Optional

from ..exceptions import ParseError

COMMAND_PATTERN = re.compile(r"(\S+)\s*(.*)")
INTEGER_PATTERN = re.compile(r"([+-]?)0*([0-9]{1,10})")

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class CommandParser:
    """
    Split a command line into a command token and positional parameters.

    The first whitespace-delimited word is the command; the rest of the line
    is split on whitespace into parameters.
    """

    def __init__(self, line: str):
        """
        Parse a line.

        Args:
            line: One command line, without its trailing newline

        Raises:
            ParseError: If the line has no command token
        """
        match = COMMAND_PATTERN.fullmatch(line)
        if match is None:
            raise ParseError("Invalid command format")

        self.command: str = match.group(1)
        self.parameters: list[str] = match.group(2).split()

    def get_param(self, index: int = 0) -> Optional[str]:
        """Get the parameter at a position, or None if there is none."""
        if 0 <= index < len(self.parameters):
            return self.parameters[index]
        return None

    def require_param(self, index: int, name: str) -> str:
        """Get the parameter at a position, failing if it is missing."""
        value = self.get_param(index)
        if value is None:
            raise ParseError(f"Missing parameter: {name}")
        return value

    def get_int_param(self, index: int = 0) -> int:
        """
        Get the parameter at a position as an integer.

        Raises:
            ParseError: If the parameter is missing, not a plain decimal
                integer, or outside the 32-bit signed range
        """
        value = self.get_param(index)
        if value is None:
            raise ParseError("Missing integer parameter")
        match = INTEGER_PATTERN.fullmatch(value)
        number = int(match.group(1) + match.group(2)) if match else None
        if number is None or not INT_MIN <= number <= INT_MAX:
            raise ParseError(f'For input string: "{value}"')
        return number
