"""Parking lot state management and slot allocation."""

import logging
from collections.abc import Iterator
from typing import Optional

from ..metrics import record_park_rejection, update_slot_counts
from .models import CommandError, CommandResult, SlotRow, Vehicle

logger = logging.getLogger(__name__)

STATUS_HEADER = "Slot No.\tRegistration No\tColour"
NOT_FOUND_MESSAGE = "Not found"


class StatusTable:
    """
    Ordered view of the occupied slots.

    Rows are read from the manager each time the table is iterated, so the
    same table can be walked repeatedly and always reflects the current lot.
    Each walk works on a snapshot taken when it starts.
    """

    def __init__(self, slots: dict[int, Vehicle]):
        self._slots = slots

    def __iter__(self) -> Iterator[SlotRow]:
        for slot_number, vehicle in sorted(self._slots.items()):
            yield SlotRow(
                slot_number=slot_number,
                registration_number=vehicle.registration_number,
                colour=vehicle.colour,
            )

    def __len__(self) -> int:
        return len(self._slots)

    def render(self) -> str:
        """Format the table with its header row, one line per slot."""
        lines = [STATUS_HEADER]
        for row in self:
            lines.append(f"{row.slot_number:<8d}{row.registration_number:<20s}{row.colour}")
        return "\n".join(lines)


class ParkingLotManager:
    """
    Owns the lot capacity and the slot-to-vehicle mapping.

    Every operation returns a CommandResult; a full lot or an empty slot is
    an ordinary outcome, not an exception.
    """

    def __init__(self, capacity: int = 10, allow_non_positive_capacity: bool = False):
        """
        Initialize the manager with an empty lot.

        Args:
            capacity: Initial lot capacity
            allow_non_positive_capacity: Accept capacity <= 0 as an always-full
                lot instead of rejecting it

        Raises:
            ValueError: If capacity <= 0 and that is not allowed
        """
        if capacity <= 0 and not allow_non_positive_capacity:
            raise ValueError(f"Invalid parking lot capacity: {capacity}")

        self.allow_non_positive_capacity = allow_non_positive_capacity
        self._capacity = max(capacity, 0)
        self._slots: dict[int, Vehicle] = {}
        update_slot_counts(self._capacity, 0)

        logger.info(f"Initialized ParkingLotManager with capacity {self._capacity}")

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def used(self) -> int:
        return len(self._slots)

    @property
    def available(self) -> int:
        return max(self._capacity - len(self._slots), 0)

    def is_full(self) -> bool:
        """Whether no further vehicle can be parked."""
        return len(self._slots) >= self._capacity

    def get_vehicle(self, slot_number: int) -> Optional[Vehicle]:
        """Get the vehicle parked in a slot, if any."""
        return self._slots.get(slot_number)

    def create_parking_lot(self, capacity: int) -> CommandResult:
        """
        Replace the lot with an empty one of the given capacity.

        Args:
            capacity: Number of slots in the new lot

        Returns:
            Result carrying the new capacity
        """
        if capacity <= 0 and not self.allow_non_positive_capacity:
            logger.debug(f"Rejected parking lot capacity {capacity}")
            return CommandResult.failure(
                CommandError.INVALID_CAPACITY,
                f"Invalid parking lot capacity: {capacity}",
            )

        discarded = len(self._slots)
        self._capacity = max(capacity, 0)
        self._slots.clear()
        update_slot_counts(self._capacity, 0)

        logger.info(f"Created parking lot with capacity {capacity} (discarded {discarded} vehicle(s))")
        return CommandResult.success(
            f"Parking lot created with capacity: {capacity}",
            value=capacity,
        )

    def park(self, registration_number: str, colour: str) -> CommandResult:
        """
        Park a vehicle in the lowest free slot.

        Args:
            registration_number: Vehicle registration number
            colour: Vehicle colour

        Returns:
            Result carrying the allocated slot number
        """
        if self.is_full():
            record_park_rejection()
            logger.debug(f"Lot full, could not park {registration_number}")
            return CommandResult.failure(CommandError.LOT_FULL, "Sorry, parking lot is full")

        slot_number = self._next_available_slot()
        self._slots[slot_number] = Vehicle(registration_number=registration_number, colour=colour)
        update_slot_counts(self._capacity, len(self._slots))

        logger.info(f"Parked {registration_number} ({colour}) in slot {slot_number}")
        return CommandResult.success(f"Allocated slot number: {slot_number}", value=slot_number)

    def leave(self, slot_number: int) -> CommandResult:
        """
        Free a slot.

        Args:
            slot_number: Slot to free

        Returns:
            Result carrying the freed slot number
        """
        vehicle = self._slots.pop(slot_number, None)
        if vehicle is None:
            logger.debug(f"Leave on empty slot {slot_number}")
            return CommandResult.failure(
                CommandError.SLOT_NOT_FOUND,
                f"Slot number {slot_number} not found",
            )

        update_slot_counts(self._capacity, len(self._slots))

        logger.info(f"{vehicle.registration_number} left slot {slot_number}")
        return CommandResult.success(f"Slot number {slot_number} is free", value=slot_number)

    def status(self) -> CommandResult:
        """Get the status table of all occupied slots."""
        table = StatusTable(self._slots)
        return CommandResult.success(table.render(), value=table)

    def registration_numbers_for_colour(self, colour: str) -> CommandResult:
        """Get registration numbers of vehicles with the given colour, in slot order."""
        registrations = [row.registration_number for row in StatusTable(self._slots) if row.colour == colour]
        if not registrations:
            return CommandResult.failure(CommandError.NOT_FOUND, NOT_FOUND_MESSAGE)
        return CommandResult.success(", ".join(registrations), value=registrations)

    def slot_numbers_for_colour(self, colour: str) -> CommandResult:
        """Get slot numbers holding vehicles with the given colour, ascending."""
        slot_numbers = [row.slot_number for row in StatusTable(self._slots) if row.colour == colour]
        if not slot_numbers:
            return CommandResult.failure(CommandError.NOT_FOUND, NOT_FOUND_MESSAGE)
        return CommandResult.success(", ".join(str(s) for s in slot_numbers), value=slot_numbers)

    def slot_number_for_registration_number(self, registration_number: str) -> CommandResult:
        """Get the slot holding the vehicle with the given registration number."""
        for row in StatusTable(self._slots):
            if row.registration_number == registration_number:
                return CommandResult.success(str(row.slot_number), value=row.slot_number)
        return CommandResult.failure(CommandError.NOT_FOUND, NOT_FOUND_MESSAGE)

    def _next_available_slot(self) -> int:
        slot_number = 1
        while slot_number in self._slots:
            slot_number += 1
        return slot_number
