"""Data models for parking lot state."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class CommandError(str, Enum):
    """Reason a command did not succeed."""

    PARSE_ERROR = "parse_error"
    INVALID_CAPACITY = "invalid_capacity"
    LOT_FULL = "lot_full"
    SLOT_NOT_FOUND = "slot_not_found"
    NOT_FOUND = "not_found"
    UNKNOWN_COMMAND = "unknown_command"


class Vehicle(BaseModel):
    """A parked vehicle."""

    model_config = ConfigDict(frozen=True)

    registration_number: str
    colour: str


class SlotRow(BaseModel):
    """One row of the status table."""

    model_config = ConfigDict(frozen=True)

    slot_number: int
    registration_number: str
    colour: str


class CommandResult(BaseModel):
    """Outcome of a single command."""

    ok: bool
    message: str
    error: Optional[CommandError] = None
    value: Any = None

    @classmethod
    def success(cls, message: str, value: Any = None) -> "CommandResult":
        return cls(ok=True, message=message, value=value)

    @classmethod
    def failure(cls, error: CommandError, message: str) -> "CommandResult":
        return cls(ok=False, message=message, error=error)

    @property
    def outcome(self) -> str:
        """Metric label for this result."""
        return "ok" if self.ok else self.error.value
