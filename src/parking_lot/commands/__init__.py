"""Command parsing and dispatch module."""

from .parser import CommandParser
from .dispatch import HANDLERS, process_command

__all__ = ["CommandParser", "HANDLERS", "process_command"]
