"""Half-open integer intervals and the union/subtraction algebra over them."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, order=True)
class Interval:
    """The integers in [start, end)."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return max(0, self.end - self.start)

    def contains(self, x: int) -> bool:
        return self.start <= x < self.end

    def disjoint(self, other: Interval) -> bool:
        # Touching intervals are not disjoint: [0, 3) and [3, 5) merge into [0, 5).
        return self.start > other.end or other.start > self.end


def merge_union(intervals: Iterable[Interval]) -> list[Interval]:
    """Merge intervals into a sorted list of pairwise disjoint intervals.

    Empty intervals are dropped. One pass over the intervals sorted by start
    is enough: anything that can join the current run does so as soon as it
    is reached.
    """
    result: list[Interval] = []
    current: Interval | None = None
    for interval in sorted(i for i in intervals if i.length > 0):
        if current is None:
            current = interval
        elif current.disjoint(interval):
            result.append(current)
            current = interval
        else:
            current = Interval(current.start, max(current.end, interval.end))
    if current is not None:
        result.append(current)
    return result


def subtract_point(merged: list[Interval], x: int) -> list[Interval]:
    """Remove the single integer `x` from a merged interval set."""
    result: list[Interval] = []
    for interval in merged:
        if not interval.contains(x):
            result.append(interval)
            continue
        if interval.start < x:
            result.append(Interval(interval.start, x))
        if x + 1 < interval.end:
            result.append(Interval(x + 1, interval.end))
    return result


def total_length(merged: Iterable[Interval]) -> int:
    return sum(interval.length for interval in merged)
