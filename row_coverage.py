"""Which positions on a single row are ruled out by the sensors."""

from __future__ import annotations
from typing import Iterable

import structlog

from core import Pos
from intervals import Interval, merge_union, subtract_point, total_length
from sensors import Sensor

log = structlog.get_logger(__name__)


def sensor_row_interval(sensor: Sensor, y: int) -> Interval | None:
    """The cross-section of a sensor's diamond at row `y`, if it reaches that far."""
    half_width = sensor.radius - abs(sensor.center.y - y)
    if half_width < 0:
        return None
    return Interval(sensor.center.x - half_width, sensor.center.x + half_width + 1)


def row_intervals(sensors: Iterable[Sensor], y: int) -> list[Interval]:
    return [
        interval
        for interval in (sensor_row_interval(s, y) for s in sensors)
        if interval is not None
    ]


def covered_intervals(sensors: Iterable[Sensor], markers: Iterable[Pos], y: int) -> list[Interval]:
    """Merged positions on row `y` inside some diamond, with known markers removed."""
    contributions = row_intervals(sensors, y)
    merged = merge_union(contributions)
    for marker in markers:
        if marker.y == y:
            merged = subtract_point(merged, marker.x)
    log.debug("row coverage", y=y, contributions=len(contributions), merged=len(merged))
    return merged


def coverage_length(sensors: Iterable[Sensor], markers: Iterable[Pos], y: int) -> int:
    return total_length(covered_intervals(sensors, markers, y))
