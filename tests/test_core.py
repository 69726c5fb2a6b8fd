"""Tests for core data structures."""

import random

import pytest
from core import Pos, has_lattice_preimage, rotate, unrotate


class TestManhattanDistance:
    def test_returns_zero_for_same_position(self) -> None:
        p = Pos(5, 5)
        assert p.manhattan_distance(p) == 0

    def test_calculates_horizontal_distance(self) -> None:
        p1 = Pos(0, 5)
        p2 = Pos(7, 5)
        assert p1.manhattan_distance(p2) == 7

    def test_calculates_vertical_distance(self) -> None:
        p1 = Pos(5, 0)
        p2 = Pos(5, 4)
        assert p1.manhattan_distance(p2) == 4

    def test_calculates_diagonal_distance(self) -> None:
        p1 = Pos(0, 0)
        p2 = Pos(3, 4)
        assert p1.manhattan_distance(p2) == 7

    def test_handles_negative_coordinates(self) -> None:
        assert Pos(-2, 15).manhattan_distance(Pos(2, 18)) == 7


class TestPosOrdering:
    def test_sorts_by_x_then_y(self) -> None:
        assert sorted([Pos(1, 5), Pos(0, 9), Pos(1, 2)]) == [Pos(0, 9), Pos(1, 2), Pos(1, 5)]


class TestRotate:
    def test_maps_to_difference_and_sum(self) -> None:
        assert rotate(Pos(3, 1)) == Pos(2, 4)

    def test_maps_negative_coordinates(self) -> None:
        assert rotate(Pos(-3, 5)) == Pos(-8, 2)

    def test_unrotate_inverts_rotate(self) -> None:
        rng = random.Random(15)
        for _ in range(500):
            p = Pos(rng.randint(-10**7, 10**7), rng.randint(-10**7, 10**7))
            assert unrotate(rotate(p)) == p

    def test_rotated_points_always_have_lattice_preimage(self) -> None:
        for x in range(-3, 4):
            for y in range(-3, 4):
                assert has_lattice_preimage(rotate(Pos(x, y)))

    def test_manhattan_distance_becomes_chebyshev(self) -> None:
        a, b = Pos(2, 18), Pos(-2, 15)
        ra, rb = rotate(a), rotate(b)
        assert max(abs(ra.x - rb.x), abs(ra.y - rb.y)) == a.manhattan_distance(b)


class TestUnrotate:
    @pytest.mark.parametrize("pos", [Pos(1, 2), Pos(0, -1), Pos(-3, 0)])
    def test_rejects_mixed_parity(self, pos: Pos) -> None:
        assert not has_lattice_preimage(pos)
        with pytest.raises(ValueError, match="mixed parity"):
            unrotate(pos)

    def test_accepts_matching_parity(self) -> None:
        assert unrotate(Pos(-8, 2)) == Pos(-3, 5)
