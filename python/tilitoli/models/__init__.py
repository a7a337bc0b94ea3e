from tilitoli.models.board import Board, Direction
from tilitoli.models.outcome import REJECTED, GameStats, MoveResult, TileDescriptor

__all__ = [
    "Board",
    "Direction",
    "GameStats",
    "MoveResult",
    "REJECTED",
    "TileDescriptor",
]
