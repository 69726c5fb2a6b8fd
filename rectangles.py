"""Sensor diamonds as axis-aligned squares in rotated space."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from core import Pos, rotate
from sensors import Sensor


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in rotated space: lower inclusive, upper exclusive."""

    lower: Pos
    upper: Pos

    def contains(self, pos: Pos) -> bool:
        return (
            self.lower.x <= pos.x < self.upper.x
            and self.lower.y <= pos.y < self.upper.y
        )


def to_rectangle(sensor: Sensor) -> Rect:
    # Manhattan distance in (x, y) is Chebyshev distance in (x - y, x + y),
    # so the diamond becomes a square of side 2 * radius + 1.
    center = rotate(sensor.center)
    d = sensor.radius
    return Rect(
        lower=Pos(center.x - d, center.y - d),
        upper=Pos(center.x + d + 1, center.y + d + 1),
    )


def to_rectangles(sensors: Iterable[Sensor]) -> list[Rect]:
    return [to_rectangle(s) for s in sensors]
