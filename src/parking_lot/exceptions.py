"""Exception hierarchy for the parking lot simulator."""


class ParkingLotError(Exception):
    """Base exception for all parking lot errors."""


class ParseError(ParkingLotError):
    """A command line or one of its parameters could not be parsed."""


class ConfigError(ParkingLotError):
    """Invalid configuration file."""
