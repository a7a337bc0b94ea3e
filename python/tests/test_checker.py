"""Win detection and the solvability parity test."""

from __future__ import annotations

import pytest

from tilitoli.engine.gamecheck import is_solvable, is_solved
from tilitoli.models.board import Board


# -- is_solved ------------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4, 7])
def test_goal_state_is_solved(size: int) -> None:
    assert is_solved(Board.solved(size).tiles)


@pytest.mark.parametrize(
    "tiles",
    [
        [1, 2, 3, 4, 5, 6, 7, 0, 8],
        [2, 1, 3, 4, 5, 6, 7, 8, 0],
        [0, 1, 2, 3, 4, 5, 6, 7, 8],
    ],
)
def test_unsolved_states(tiles: list[int]) -> None:
    assert not is_solved(tiles)


def test_last_cell_is_not_inspected() -> None:
    assert is_solved([1, 2, 3, 99])


# -- is_solvable ----------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6])
def test_goal_state_is_solvable(size: int) -> None:
    assert is_solvable(Board.solved(size).tiles, size)


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_swapping_two_tiles_is_unsolvable(size: int) -> None:
    board = Board.solved(size)
    board.swap(0, 1)
    assert not is_solvable(board.tiles, size)


def test_fifteen_fourteen_puzzle_is_unsolvable() -> None:
    tiles = list(range(1, 14)) + [15, 14, 0]
    assert not is_solvable(tiles, 4)


@pytest.mark.parametrize(
    "tiles",
    [
        [1, 2, 3, 4, 5, 6, 7, 0, 8],
        [1, 2, 3, 4, 0, 6, 7, 5, 8],
        [0, 1, 2, 3, 4, 5, 6, 7, 8],
    ],
)
def test_reachable_states_are_solvable(tiles: list[int]) -> None:
    assert is_solvable(tiles, 3)


def test_blank_swapped_across_the_board_is_unsolvable() -> None:
    # Odd permutation, but the blank is an even distance from home.
    assert not is_solvable([0, 2, 3, 4, 5, 6, 7, 8, 1], 3)
