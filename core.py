"""Core data structures and the rotated coordinate system."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Pos:
    x: int
    y: int

    def manhattan_distance(self, other: Pos) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


def rotate(pos: Pos) -> Pos:
    """Map (x, y) to (x - y, x + y), turning Manhattan diamonds into squares."""
    return Pos(pos.x - pos.y, pos.x + pos.y)


def has_lattice_preimage(pos: Pos) -> bool:
    """Whether a rotated-space point comes from an integer (x, y)."""
    return (pos.x - pos.y) % 2 == 0


def unrotate(pos: Pos) -> Pos:
    """Inverse of `rotate`. Only defined for points with matching parity."""
    if not has_lattice_preimage(pos):
        raise ValueError(f"{pos} has no integer preimage (mixed parity)")
    u, v = pos.x, pos.y
    return Pos((u + v) // 2, (v - u) // 2)
