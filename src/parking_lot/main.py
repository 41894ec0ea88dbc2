"""Command-line entry point and read loop."""

import argparse
import logging
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Optional, TextIO

from .commands.dispatch import process_command
from .config import AppConfig, LoggingConfig, get_config_path, load_config
from .exceptions import ConfigError
from .metrics import write_metrics_textfile
from .state.lot_manager import ParkingLotManager

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


def read_commands(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield command lines until the exit sentinel.

    Trailing newlines are stripped; the sentinel match is case-sensitive.
    """
    for line in lines:
        command = line.rstrip("\r\n")
        if command == EXIT_COMMAND:
            logger.debug("Exit command received")
            return
        yield command


def run_commands(
    manager: ParkingLotManager,
    commands: Iterable[str],
    output: Optional[TextIO] = None,
) -> int:
    """
    Process commands in order, printing each result message.

    Args:
        manager: Parking lot to operate on
        commands: Command lines to run
        output: Stream to print results to (default: stdout)

    Returns:
        Number of commands processed
    """
    count = 0
    for command in commands:
        result = process_command(manager, command)
        print(result.message, file=output or sys.stdout)
        count += 1
    return count


def configure_logging(config: LoggingConfig, verbose: bool = False) -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, config.level),
        format=config.format,
        stream=sys.stderr,
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parking-lot",
        description="Parking lot simulator. Commands are read from arguments, a file, or stdin.",
    )
    parser.add_argument("commands", nargs="*", help="Commands to run, one per argument (e.g. 'park KA-01 White')")
    parser.add_argument("--file", "-f", help="Read commands from FILE, one per line")
    parser.add_argument("--config", "-c", help="Path to YAML configuration (default: config/config.yaml if present)")
    parser.add_argument("--capacity", type=int, help="Initial lot capacity (overrides configuration)")
    parser.add_argument("--metrics-file", help="Write Prometheus metrics to FILE at exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run the simulator."""
    args = build_arg_parser().parse_args(argv)

    config_path = Path(args.config) if args.config else get_config_path()
    try:
        config = load_config(config_path) if config_path else AppConfig()
    except (FileNotFoundError, ConfigError) as e:
        configure_logging(LoggingConfig(), args.verbose)
        logger.error(str(e))
        return 1

    configure_logging(config.logging, args.verbose)
    if config_path:
        logger.info(f"Loaded configuration from {config_path}")

    capacity = args.capacity if args.capacity is not None else config.lot.default_capacity
    try:
        manager = ParkingLotManager(
            capacity=capacity,
            allow_non_positive_capacity=config.lot.allow_non_positive_capacity,
        )
    except ValueError as e:
        logger.error(str(e))
        return 1

    if args.commands:
        processed = run_commands(manager, args.commands)
    elif args.file:
        try:
            with open(args.file) as f:
                processed = run_commands(manager, read_commands(f))
        except OSError as e:
            logger.error(f"Could not read command file {args.file}: {e}")
            return 1
    else:
        processed = run_commands(manager, read_commands(sys.stdin))

    logger.info(f"Processed {processed} command(s)")

    metrics_path = args.metrics_file or config.metrics.textfile_path
    if metrics_path:
        try:
            write_metrics_textfile(metrics_path)
        except OSError as e:
            logger.error(f"Could not write metrics file {metrics_path}: {e}")
        else:
            logger.info(f"Wrote metrics to {metrics_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
