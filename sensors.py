"""Sensors and the beacons they report."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator

import structlog

from core import Pos

log = structlog.get_logger(__name__)


class NoSensorsError(ValueError):
    """Raised when a sensor set is built from no input at all."""


@dataclass(frozen=True)
class Sensor:
    center: Pos
    marker: Pos
    radius: int

    @staticmethod
    def from_pair(center: Pos, marker: Pos) -> Sensor:
        return Sensor(center=center, marker=marker, radius=center.manhattan_distance(marker))

    def covers(self, pos: Pos) -> bool:
        """Check if position lies in this sensor's exclusion diamond."""
        return self.center.manhattan_distance(pos) <= self.radius


@dataclass(frozen=True)
class SensorSet:
    sensors: tuple[Sensor, ...]

    def __post_init__(self) -> None:
        if not self.sensors:
            raise NoSensorsError("at least one sensor/beacon pair is required")

    @staticmethod
    def from_pairs(pairs: Iterable[tuple[Pos, Pos]]) -> SensorSet:
        sensors = tuple(Sensor.from_pair(center, marker) for center, marker in pairs)
        result = SensorSet(sensors)
        log.debug(
            "built sensor set",
            sensors=len(sensors),
            markers=len(result.markers()),
            bounds=result.bounds(),
        )
        return result

    def __iter__(self) -> Iterator[Sensor]:
        return iter(self.sensors)

    def __len__(self) -> int:
        return len(self.sensors)

    def markers(self) -> list[Pos]:
        """Distinct markers, in the order they first appear."""
        return list(dict.fromkeys(s.marker for s in self.sensors))

    def bounds(self) -> tuple[int, int]:
        """Inclusive x extent covered by any sensor's diamond."""
        return (
            min(s.center.x - s.radius for s in self.sensors),
            max(s.center.x + s.radius for s in self.sensors),
        )
