"""Locating the one position in a bounded region that no sensor can see.

Scanning every position of the region against every sensor is hopeless for
large regions. Instead, each sensor's diamond is rotated into an
axis-aligned square (see `rectangles`), and the distinct square edges cut
rotated space into a grid. An isolated uncovered position has squares
abutting it on every side, so it shows up as a grid cell one unit wide and
one unit tall. Only those cells are examined, which keeps the work
proportional to the number of sensors rather than the size of the region.
"""

from __future__ import annotations
from typing import Iterable

import numpy as np
import structlog

from core import Pos, has_lattice_preimage, unrotate
from rectangles import Rect, to_rectangles
from sensors import Sensor

log = structlog.get_logger(__name__)

# Bounds the cells x rects comparison array built per step of `uncovered`.
CELLS_PER_CHUNK = 4096


class GapNotUniqueError(RuntimeError):
    """Raised when a region holds zero or several uncovered positions."""

    def __init__(self, candidates: list[Pos]) -> None:
        self.candidates = candidates
        super().__init__(
            f"expected exactly one uncovered position, found {len(candidates)}: {candidates[:10]}"
        )


def _edges(rects: list[Rect]) -> tuple[list[int], list[int]]:
    u_edges = {r.lower.x for r in rects} | {r.upper.x for r in rects}
    v_edges = {r.lower.y for r in rects} | {r.upper.y for r in rects}
    return sorted(u_edges), sorted(v_edges)


def _unit_starts(edges: list[int]) -> list[int]:
    """Edge values immediately followed by the next integer."""
    return [a for a, b in zip(edges, edges[1:]) if b - a == 1]


def unit_cells(rects: list[Rect]) -> list[Pos]:
    """Rotated-space lower corners of the 1x1 grid cells between rectangle edges."""
    u_edges, v_edges = _edges(rects)
    return [Pos(u, v) for u in _unit_starts(u_edges) for v in _unit_starts(v_edges)]


def uncovered(cells: list[Pos], rects: list[Rect], chunk_size: int = CELLS_PER_CHUNK) -> list[Pos]:
    """Filter out cells inside any rectangle.

    Cells are tested `chunk_size` at a time so the comparison array stays
    bounded at chunk_size x len(rects) x 2, however many cells there are.
    """
    if not cells:
        return []
    points = np.array([(c.x, c.y) for c in cells], dtype=np.int64)
    lower = np.array([(r.lower.x, r.lower.y) for r in rects], dtype=np.int64)
    upper = np.array([(r.upper.x, r.upper.y) for r in rects], dtype=np.int64)
    covered = np.empty(len(cells), dtype=bool)
    for start in range(0, len(cells), chunk_size):
        chunk = points[start : start + chunk_size]
        # chunk[:, None, :] against rects[None, :, :] -> (cells, rects, axis)
        inside = (chunk[:, None, :] >= lower[None, :, :]) & (chunk[:, None, :] < upper[None, :, :])
        covered[start : start + chunk_size] = inside.all(axis=2).any(axis=1)
    return [cell for cell, hit in zip(cells, covered) if not hit]


def gap_candidates(sensors: Iterable[Sensor], region_lower: Pos, region_upper: Pos) -> list[Pos]:
    """Every uncovered position inside the inclusive region that the rectangle grid exposes."""
    rects = to_rectangles(sensors)
    cells = unit_cells(rects)
    lattice = [c for c in cells if has_lattice_preimage(c)]
    free = uncovered(lattice, rects)
    in_region = sorted(
        p
        for p in map(unrotate, free)
        if region_lower.x <= p.x <= region_upper.x and region_lower.y <= p.y <= region_upper.y
    )
    log.debug(
        "gap search",
        rects=len(rects),
        unit_cells=len(cells),
        lattice_cells=len(lattice),
        uncovered=len(free),
        in_region=len(in_region),
    )
    return in_region


def find_gap(sensors: Iterable[Sensor], region_lower: Pos, region_upper: Pos) -> Pos:
    candidates = gap_candidates(sensors, region_lower, region_upper)
    if len(candidates) != 1:
        raise GapNotUniqueError(candidates)
    return candidates[0]
