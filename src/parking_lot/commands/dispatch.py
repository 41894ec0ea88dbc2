"""Routing of parsed commands to the parking lot manager."""

import logging
from typing import Callable

from ..exceptions import ParseError
from ..metrics import record_command
from ..state.lot_manager import ParkingLotManager
from ..state.models import CommandError, CommandResult
from .parser import CommandParser

logger = logging.getLogger(__name__)

Handler = Callable[[ParkingLotManager, CommandParser], CommandResult]


def _create_parking_lot(manager: ParkingLotManager, parser: CommandParser) -> CommandResult:
    return manager.create_parking_lot(parser.get_int_param())


def _park(manager: ParkingLotManager, parser: CommandParser) -> CommandResult:
    return manager.park(
        parser.require_param(0, "registration number"),
        parser.require_param(1, "colour"),
    )


def _leave(manager: ParkingLotManager, parser: CommandParser) -> CommandResult:
    return manager.leave(parser.get_int_param())


def _status(manager: ParkingLotManager, parser: CommandParser) -> CommandResult:
    return manager.status()


def _registration_numbers_for_colour(manager: ParkingLotManager, parser: CommandParser) -> CommandResult:
    return manager.registration_numbers_for_colour(parser.require_param(0, "colour"))


def _slot_numbers_for_colour(manager: ParkingLotManager, parser: CommandParser) -> CommandResult:
    return manager.slot_numbers_for_colour(parser.require_param(0, "colour"))


def _slot_number_for_registration_number(manager: ParkingLotManager, parser: CommandParser) -> CommandResult:
    return manager.slot_number_for_registration_number(parser.require_param(0, "registration number"))


HANDLERS: dict[str, Handler] = {
    "create_parking_lot": _create_parking_lot,
    "park": _park,
    "leave": _leave,
    "status": _status,
    "registration_numbers_for_cars_with_colour": _registration_numbers_for_colour,
    "slot_numbers_for_cars_with_colour": _slot_numbers_for_colour,
    "slot_number_for_registration_number": _slot_number_for_registration_number,
}


def process_command(manager: ParkingLotManager, line: str) -> CommandResult:
    """
    Run one command line against the manager.

    Parse failures and unknown commands are turned into failed results, so
    this never raises for bad input.

    Args:
        manager: Parking lot to operate on
        line: Raw command line

    Returns:
        Result of the command
    """
    command = "invalid"
    try:
        parser = CommandParser(line)
        command = parser.command
        handler = HANDLERS.get(command)
        if handler is None:
            logger.debug(f"Unknown command: {command}")
            command = "unknown"
            result = CommandResult.failure(CommandError.UNKNOWN_COMMAND, "Incorrect command")
        else:
            result = handler(manager, parser)
    except ParseError as e:
        logger.debug(f"Could not parse {line!r}: {e}")
        result = CommandResult.failure(CommandError.PARSE_ERROR, f"{e} Incorrect Command")

    record_command(command, result.outcome)
    return result
