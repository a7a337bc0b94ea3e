"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import logging
import random
from typing import Any

from tilitoli.config import MIN_SIZE
from tilitoli.engine.gamecheck import is_solvable, is_solved
from tilitoli.engine.gamegenerator import GameGenerator
from tilitoli.engine.gamegrid import neighbor_in_direction, neighbors
from tilitoli.engine.gameimage import position
from tilitoli.engine.gamestate import GameState, ManualScheduler, Scheduler
from tilitoli.models.board import Board, Direction
from tilitoli.models.outcome import REJECTED, GameStats, MoveResult, TileDescriptor

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates game sessions on one board at a time.

    Each instance is independent; frontends and tests create as many as
    they need.  Without an explicit *scheduler* the clock only advances
    when a :class:`ManualScheduler` is advanced or :meth:`tick` is called.
    """

    def __init__(
        self,
        size: int,
        *,
        scheduler: Scheduler | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._scheduler = scheduler or ManualScheduler()
        self._rng = rng
        self.state: GameState | None = None
        self.new_game(size)

    @classmethod
    def from_board(
        cls, board: Board, *, scheduler: Scheduler | None = None
    ) -> "GamePlay":
        """Create a game session from an existing board, without scrambling."""
        obj = object.__new__(cls)
        obj._scheduler = scheduler or ManualScheduler()
        obj._rng = None
        obj.state = None
        if not is_solvable(board.tiles, board.size):
            logger.warning("supplied %d×%d board is not solvable", board.size, board.size)
        obj._start(board)
        return obj

    # -- sessions -------------------------------------------------------------

    def new_game(self, size: int) -> None:
        """Replace the current session with a freshly scrambled board."""
        if size < MIN_SIZE:
            raise ValueError(f"Board size must be at least {MIN_SIZE}, got {size}.")
        board = GameGenerator.generate(size, self._rng)
        self._start(board)
        logger.info("new %d×%d game", size, size)

    def stop(self) -> None:
        """Stop the clock of the current session."""
        self.state.pause()

    def _start(self, board: Board) -> None:
        image = None
        if self.state is not None:
            self.state.pause()
            image = self.state.image
        self.state = GameState(board, self._scheduler, image=image)
        self.state.resume()

    @property
    def size(self) -> int:
        return self.state.size

    # -- movement -------------------------------------------------------------

    def attempt_move(self, index: int) -> MoveResult:
        """Slide the tile at *index* into the blank if they are adjacent.

        Illegal moves are rejected through the result, not by raising.
        """
        state = self.state
        board = state.board
        if not 0 <= index < len(board.tiles):
            raise ValueError(
                f"Cell index {index} is outside 0..{len(board.tiles) - 1}."
            )
        if not state.playing:
            return REJECTED

        blank = board.blank_index
        if index not in neighbors(blank, board.size):
            return REJECTED

        board.swap(index, blank)
        state.increment_moves()
        logger.debug("moved tile %d -> %d (move %d)", index, blank, state.moves)

        if not is_solved(board.tiles):
            return MoveResult(moved=True, won=False)

        state.playing = False
        state.pause()
        logger.info(
            "solved %d×%d in %d moves, %ds",
            board.size, board.size, state.moves, state.elapsed_seconds,
        )
        return MoveResult(moved=True, won=True)

    def move(self, direction: Direction) -> MoveResult:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        """
        board = self.state.board
        target = neighbor_in_direction(board.blank_index, direction, board.size)
        if target is None:
            return REJECTED
        return self.attempt_move(target)

    # -- clock & picture ------------------------------------------------------

    def tick(self) -> None:
        self.state.tick()

    def set_image(self, handle: Any) -> None:
        """Record (or clear, with ``None``) the picture used for tile faces."""
        self.state.image = handle

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return is_solved(self.state.board.tiles)

    def stats(self) -> GameStats:
        state = self.state
        return GameStats(
            moves=state.moves,
            elapsed_seconds=state.elapsed_seconds,
            playing=state.playing,
        )

    def tile_descriptors(self) -> list[TileDescriptor]:
        """Describe every cell in row-major order for rendering."""
        board = self.state.board
        picture = self.state.image is not None
        descriptors: list[TileDescriptor] = []
        for index, value in enumerate(board.tiles):
            blank = value == 0
            descriptors.append(
                TileDescriptor(
                    index=index,
                    value=value,
                    is_blank=blank,
                    in_place=not blank and board.is_tile_correct(index),
                    background_position=(
                        position(value, board.size) if picture and not blank else None
                    ),
                )
            )
        return descriptors
