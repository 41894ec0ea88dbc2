"""State management module."""

from .models import CommandError, CommandResult, SlotRow, Vehicle
from .lot_manager import ParkingLotManager, StatusTable

__all__ = ["CommandError", "CommandResult", "SlotRow", "Vehicle", "ParkingLotManager", "StatusTable"]
