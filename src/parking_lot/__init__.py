"""Command-line parking lot simulator."""

from .commands import CommandParser, process_command
from .state import CommandError, CommandResult, ParkingLotManager, Vehicle

__version__ = "1.0.0"

__all__ = ["CommandParser", "process_command", "CommandError", "CommandResult", "ParkingLotManager", "Vehicle"]
