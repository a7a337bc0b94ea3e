"""Scramble generation: permutation, solvability and the random walk itself."""

from __future__ import annotations

import random

import pytest

from tilitoli.config import SHUFFLE_MOVES_PER_SIZE
from tilitoli.engine.gamecheck import is_solvable, is_solved
from tilitoli.engine.gamegenerator import GameGenerator
from tilitoli.engine.gamegrid import neighbors
from tilitoli.models.board import Board


class _RecordingRandom(random.Random):
    """Seeded RNG that remembers every ``choice`` it makes."""

    def __init__(self, seed: int) -> None:
        super().__init__(seed)
        self.calls: list[tuple[list[int], int]] = []

    def choice(self, seq):  # type: ignore[override]
        picked = super().choice(seq)
        self.calls.append((list(seq), picked))
        return picked


# -- resulting boards -----------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_scramble_keeps_a_permutation(size: int, seed: int) -> None:
    board = GameGenerator.generate(size, random.Random(seed))

    assert sorted(board.tiles) == list(range(size * size))
    assert board.tiles[board.blank_index] == 0


@pytest.mark.parametrize("size", [2, 3, 4, 5, 7])
@pytest.mark.parametrize("seed", [3, 11, 42])
def test_scramble_is_solvable(size: int, seed: int) -> None:
    board = GameGenerator.generate(size, random.Random(seed))
    assert is_solvable(board.tiles, size)


def test_scramble_without_rng() -> None:
    board = GameGenerator.generate(4)
    assert sorted(board.tiles) == list(range(16))
    assert is_solvable(board.tiles, 4)


def test_seeded_scrambles_are_reproducible() -> None:
    first = GameGenerator.generate(5, random.Random(1234))
    second = GameGenerator.generate(5, random.Random(1234))
    assert first.tiles == second.tiles


def test_scramble_mixes_larger_boards() -> None:
    board = GameGenerator.generate(4, random.Random(7))
    assert not is_solved(board.tiles)


@pytest.mark.parametrize("seed", range(8))
def test_two_by_two_walk_always_returns_home(seed: int) -> None:
    # On a 2×2 ring the walk is forced after its first step and repeats
    # every 12 moves; 150 * 2 is a whole number of periods.
    board = GameGenerator.generate(2, random.Random(seed))
    assert board.tiles == [1, 2, 3, 0]


@pytest.mark.parametrize("size", [1, 0, -3])
def test_generate_rejects_boards_without_moves(size: int) -> None:
    with pytest.raises(ValueError):
        GameGenerator.generate(size)


# -- the walk -------------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4, 6])
def test_walk_length_and_no_immediate_backtrack(size: int) -> None:
    rng = _RecordingRandom(size)
    board = Board.solved(size)
    GameGenerator.scramble(board, rng)

    assert len(rng.calls) == SHUFFLE_MOVES_PER_SIZE * size

    blank = size * size - 1
    prev: int | None = None
    for candidates, picked in rng.calls:
        assert set(candidates) <= neighbors(blank, size)
        assert picked in candidates
        if prev is not None:
            assert prev not in candidates
        prev, blank = blank, picked

    assert board.blank_index == blank


def test_walk_offers_candidates_in_index_order() -> None:
    rng = _RecordingRandom(5)
    GameGenerator.scramble(Board.solved(4), rng)
    for candidates, _ in rng.calls:
        assert candidates == sorted(candidates)
