from __future__ import annotations

from parking_lot.commands.dispatch import HANDLERS, process_command
from parking_lot.metrics import REGISTRY
from parking_lot.state.lot_manager import ParkingLotManager
from parking_lot.state.models import CommandError


def _command_count(command: str, outcome: str) -> float:
    value = REGISTRY.get_sample_value("parking_commands_total", {"command": command, "outcome": outcome})
    return value or 0.0


def test_all_commands_are_registered() -> None:
    assert set(HANDLERS) == {
        "create_parking_lot",
        "park",
        "leave",
        "status",
        "registration_numbers_for_cars_with_colour",
        "slot_numbers_for_cars_with_colour",
        "slot_number_for_registration_number",
    }


def test_scenario_messages() -> None:
    manager = ParkingLotManager()
    lines = [
        "create_parking_lot 2",
        "park KA-01-HH-1234 White",
        "park KA-01-HH-9999 Black",
        "park KA-01-BB-0001 White",
        "leave 1",
        "registration_numbers_for_cars_with_colour Black",
        "slot_numbers_for_cars_with_colour Black",
        "slot_number_for_registration_number KA-01-HH-9999",
        "slot_number_for_registration_number KA-01-HH-1234",
    ]

    messages = [process_command(manager, line).message for line in lines]

    assert messages == [
        "Parking lot created with capacity: 2",
        "Allocated slot number: 1",
        "Allocated slot number: 2",
        "Sorry, parking lot is full",
        "Slot number 1 is free",
        "KA-01-HH-9999",
        "2",
        "2",
        "Not found",
    ]


def test_unknown_command() -> None:
    result = process_command(ParkingLotManager(), "fly KA-01")

    assert result.error == CommandError.UNKNOWN_COMMAND
    assert result.message == "Incorrect command"


def test_command_names_are_case_sensitive() -> None:
    assert process_command(ParkingLotManager(), "Status").error == CommandError.UNKNOWN_COMMAND


def test_empty_line_is_a_parse_error() -> None:
    result = process_command(ParkingLotManager(), "")

    assert result.error == CommandError.PARSE_ERROR
    assert result.message == "Invalid command format Incorrect Command"


def test_bad_integer_is_a_parse_error() -> None:
    manager = ParkingLotManager(capacity=3)

    result = process_command(manager, "create_parking_lot many")

    assert result.error == CommandError.PARSE_ERROR
    assert result.message == 'For input string: "many" Incorrect Command'
    assert manager.capacity == 3


def test_park_missing_colour_is_a_parse_error() -> None:
    manager = ParkingLotManager()

    result = process_command(manager, "park KA-01")

    assert result.message == "Missing parameter: colour Incorrect Command"
    assert manager.used == 0


def test_failures_do_not_stop_later_commands() -> None:
    manager = ParkingLotManager(capacity=1)

    process_command(manager, "leave x")
    process_command(manager, "bogus")
    result = process_command(manager, "park KA-01 White")

    assert result.ok
    assert result.value == 1


def test_commands_are_counted_by_outcome() -> None:
    manager = ParkingLotManager(capacity=1)
    full_before = _command_count("park", "lot_full")
    unknown_before = _command_count("unknown", "unknown_command")

    process_command(manager, "park KA-01 White")
    process_command(manager, "park KA-02 White")
    process_command(manager, "bogus")

    assert _command_count("park", "lot_full") == full_before + 1
    assert _command_count("unknown", "unknown_command") == unknown_before + 1
