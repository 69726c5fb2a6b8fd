"""Parsing sensor reports from text."""

from __future__ import annotations
import re

from core import Pos
from sensors import SensorSet


_LINE_RE = re.compile(
    r"^Sensor at x=(-?\d+), y=(-?\d+): closest beacon is at x=(-?\d+), y=(-?\d+)$"
)


def parse_line(line: str) -> tuple[Pos, Pos]:
    match = _LINE_RE.match(line.strip())
    if match is None:
        raise ValueError(f"Malformed sensor report: {line!r}")
    sx, sy, bx, by = (int(g) for g in match.groups())
    return Pos(sx, sy), Pos(bx, by)


def parse_pairs(text: str) -> list[tuple[Pos, Pos]]:
    pairs = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            pairs.append(parse_line(line))
        except ValueError as e:
            raise ValueError(f"line {lineno}: {e}") from e
    return pairs


def parse_sensors(text: str) -> SensorSet:
    return SensorSet.from_pairs(parse_pairs(text))
