"""Neighbourhood geometry on the row-major grid."""

from __future__ import annotations

import pytest

from tilitoli.engine.gamegrid import neighbor_in_direction, neighbors
from tilitoli.models.board import Direction


@pytest.mark.parametrize(
    ("index", "size", "expected"),
    [
        (0, 3, {1, 3}),
        (2, 3, {1, 5}),
        (6, 3, {3, 7}),
        (8, 3, {5, 7}),
        (1, 3, {0, 2, 4}),
        (3, 3, {0, 4, 6}),
        (4, 3, {1, 3, 5, 7}),
        (5, 4, {1, 4, 6, 9}),
        (3, 2, {1, 2}),
    ],
)
def test_neighbors(index: int, size: int, expected: set[int]) -> None:
    assert neighbors(index, size) == expected


def test_single_cell_has_no_neighbors() -> None:
    assert neighbors(0, 1) == set()


@pytest.mark.parametrize("size", [2, 3, 4, 6])
def test_neighbor_counts(size: int) -> None:
    corners = {0, size - 1, size * (size - 1), size * size - 1}
    for index in range(size * size):
        row, col = divmod(index, size)
        found = neighbors(index, size)
        on_edge = row in (0, size - 1) or col in (0, size - 1)

        if index in corners:
            assert len(found) == 2
        elif on_edge:
            assert len(found) == 3
        else:
            assert len(found) == 4

        # Every neighbour is exactly one step away.
        for other in found:
            r2, c2 = divmod(other, size)
            assert abs(row - r2) + abs(col - c2) == 1


@pytest.mark.parametrize(
    ("direction", "expected"),
    [
        (Direction.UP, 7),
        (Direction.DOWN, 1),
        (Direction.LEFT, 5),
        (Direction.RIGHT, 3),
    ],
)
def test_neighbor_in_direction_from_centre(direction: Direction, expected: int) -> None:
    # Blank in the middle of a 3×3 board.
    assert neighbor_in_direction(4, direction, 3) == expected


def test_neighbor_in_direction_off_grid() -> None:
    # Blank bottom-right: nothing below it or to its right can slide in.
    assert neighbor_in_direction(8, Direction.UP, 3) is None
    assert neighbor_in_direction(8, Direction.LEFT, 3) is None
    assert neighbor_in_direction(8, Direction.DOWN, 3) == 5
    assert neighbor_in_direction(8, Direction.RIGHT, 3) == 7
