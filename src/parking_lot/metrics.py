"""Prometheus metrics for the parking lot simulator."""

from pathlib import Path

from prometheus_client import CollectorRegistry, Counter, Gauge, write_to_textfile

# Create a custom registry to avoid conflicts with default metrics
REGISTRY = CollectorRegistry()

# Commands processed, by command name and outcome
COMMANDS_PROCESSED = Counter(
    "parking_commands_total",
    "Total number of commands processed",
    ["command", "outcome"],
    registry=REGISTRY,
)

# Park requests turned away because the lot was full
PARK_REJECTIONS = Counter(
    "parking_park_rejections_total",
    "Number of park requests rejected because the lot was full",
    registry=REGISTRY,
)

LOT_CAPACITY = Gauge(
    "parking_lot_capacity",
    "Configured capacity of the parking lot",
    registry=REGISTRY,
)

OCCUPIED_SLOTS = Gauge(
    "parking_slots_occupied",
    "Number of occupied parking slots",
    registry=REGISTRY,
)

AVAILABLE_SLOTS = Gauge(
    "parking_slots_available",
    "Number of available parking slots",
    registry=REGISTRY,
)


def record_command(command: str, outcome: str) -> None:
    """Record a processed command."""
    COMMANDS_PROCESSED.labels(command=command, outcome=outcome).inc()


def record_park_rejection() -> None:
    """Increment the lot-full rejection counter."""
    PARK_REJECTIONS.inc()


def update_slot_counts(capacity: int, occupied: int) -> None:
    """Update capacity and occupancy gauges."""
    LOT_CAPACITY.set(capacity)
    OCCUPIED_SLOTS.set(occupied)
    AVAILABLE_SLOTS.set(max(capacity - occupied, 0))


def write_metrics_textfile(path: str | Path) -> None:
    """Write the registry to a node-exporter textfile."""
    write_to_textfile(str(path), REGISTRY)
