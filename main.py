"""Command-line entry point: read sensor reports, answer both queries."""

from __future__ import annotations
import argparse
import sys
from dataclasses import dataclass

import structlog

from core import Pos
from row_coverage import coverage_length
from gaps import GapNotUniqueError, find_gap
from log_config import configure_logging
from parsing import parse_sensors

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class QueryConfig:
    """Which row to count and which square region to search."""

    row: int = 2_000_000
    limit: int = 4_000_000
    multiplier: int = 4_000_000


@dataclass(frozen=True)
class Report:
    row: int
    excluded: int
    gap: Pos
    score: int


def tuning_score(pos: Pos, multiplier: int) -> int:
    return pos.x * multiplier + pos.y


def run(text: str, config: QueryConfig) -> Report:
    sensors = parse_sensors(text)
    excluded = coverage_length(sensors, sensors.markers(), config.row)
    gap = find_gap(sensors, Pos(0, 0), Pos(config.limit, config.limit))
    return Report(
        row=config.row,
        excluded=excluded,
        gap=gap,
        score=tuning_score(gap, config.multiplier),
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the queries."""
    defaults = QueryConfig()
    parser = argparse.ArgumentParser(description="Sensor exclusion zones and the hidden beacon")
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="File of sensor reports (default: read stdin)",
    )
    parser.add_argument(
        "--row",
        type=int,
        default=defaults.row,
        help=f"Row to count excluded positions on (default: {defaults.row})",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=defaults.limit,
        help=f"Search the square [0, LIMIT] x [0, LIMIT] for the gap (default: {defaults.limit})",
    )
    parser.add_argument(
        "--multiplier",
        type=int,
        default=defaults.multiplier,
        help=f"Score the gap as x * MULTIPLIER + y (default: {defaults.multiplier})",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON lines")

    args = parser.parse_args(argv)

    if args.limit < 0:
        parser.error("--limit must be non-negative")

    return args


def read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path) as f:
        return f.read()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(verbose=args.verbose, log_json=args.log_json)

    try:
        text = read_input(args.input)
    except OSError as e:
        log.error("cannot read input", path=args.input, error=str(e))
        return 1

    config = QueryConfig(row=args.row, limit=args.limit, multiplier=args.multiplier)
    try:
        report = run(text, config)
    except GapNotUniqueError as e:
        log.error("gap search failed", candidates=len(e.candidates), error=str(e))
        return 1
    except ValueError as e:
        log.error("invalid input", error=str(e))
        return 1

    print(f"Excluded positions at y = {report.row}: {report.excluded}")
    print(f"Tuning score of the gap at ({report.gap.x}, {report.gap.y}): {report.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
