"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from typing import Any

from tilitoli.config import TICK_INTERVAL
from tilitoli.engine.gamestate.ticker import Scheduler, TickHandle
from tilitoli.models.board import Board


class GameState:
    """Holds the current board, move counter, clock and picture handle.

    The clock is driven by one recurring task obtained from *scheduler*.
    At most one such task is alive per session: :meth:`resume` cancels any
    running task before starting another.
    """

    def __init__(self, board: Board, scheduler: Scheduler, image: Any = None) -> None:
        self.board = board
        self.moves: int = 0
        self.elapsed_seconds: int = 0
        self.playing: bool = True
        self.image = image
        self._scheduler = scheduler
        self._tick_handle: TickHandle | None = None

    @property
    def size(self) -> int:
        return self.board.size

    # -- time tracking --------------------------------------------------------

    def tick(self) -> None:
        if self.playing:
            self.elapsed_seconds += 1

    def pause(self) -> None:
        """Cancel the clock task, if any."""
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None

    def resume(self) -> None:
        """Start the clock task, cancelling a running one first."""
        self.pause()
        self._tick_handle = self._scheduler.every(TICK_INTERVAL, self.tick)

    @property
    def clock_running(self) -> bool:
        """True while a clock task is scheduled for this session."""
        return self._tick_handle is not None

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1
