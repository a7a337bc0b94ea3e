"""Small value types handed from the engine to its callers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a move attempt.  Rejected moves are not errors."""

    moved: bool
    won: bool


REJECTED = MoveResult(moved=False, won=False)


@dataclass(frozen=True)
class TileDescriptor:
    """Render-facing view of one board cell, derived on demand.

    ``background_position`` is the ``(x%, y%)`` crop offset of the shared
    picture and is only set in picture mode for non-blank tiles.
    """

    index: int
    value: int
    is_blank: bool
    in_place: bool
    background_position: tuple[float, float] | None = None


@dataclass(frozen=True)
class GameStats:
    moves: int
    elapsed_seconds: int
    playing: bool
