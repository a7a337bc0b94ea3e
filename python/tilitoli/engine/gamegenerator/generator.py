"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from tilitoli.config import MIN_SIZE, SHUFFLE_MOVES_PER_SIZE
from tilitoli.engine.gamegrid import neighbors
from tilitoli.models.board import Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state.

    Only positions reachable by sliding moves are ever produced, so every
    scramble is solvable by construction.
    """

    @staticmethod
    def scramble(board: Board, rng: random.Random | None = None) -> None:
        """Scramble *board* in-place using random valid moves.

        The blank never steps straight back onto the cell it just left,
        unless that is its only option.
        Needs a board of at least 2×2; smaller boards have no moves.
        """
        rng = rng or random.Random()
        num_shuffles = SHUFFLE_MOVES_PER_SIZE * board.size
        prev_index: int | None = None

        for _ in range(num_shuffles):
            blank = board.blank_index
            valid = sorted(neighbors(blank, board.size))
            candidates = [i for i in valid if i != prev_index] or valid
            target = rng.choice(candidates)
            board.swap(blank, target)
            prev_index = blank

        logger.debug(
            "scrambled %d×%d board with %d moves",
            board.size, board.size, num_shuffles,
        )

    @staticmethod
    def generate(size: int, rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board of the given size."""
        if size < MIN_SIZE:
            raise ValueError(f"Board size must be at least {MIN_SIZE}, got {size}.")
        board = Board.solved(size)
        GameGenerator.scramble(board, rng)
        return board
