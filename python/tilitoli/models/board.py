"""Board model for the sliding puzzle game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    """Direction in which a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a flat row-major list of ints, so the cell at
    ``(row, col)`` lives at index ``row * size + col``.  0 represents the
    blank space; any other value ``v`` belongs at index ``v - 1``.
    """

    size: int
    tiles: list[int]
    blank_index: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        count = size * size
        tiles = list(range(1, count))
        tiles.append(0)
        return cls(size=size, tiles=tiles, blank_index=count - 1)

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        tiles = list(flat)
        return cls(size=size, tiles=tiles, blank_index=tiles.index(0))

    # -- mutation -------------------------------------------------------------

    def swap(self, i: int, j: int) -> None:
        """Exchange the tiles at *i* and *j*.

        No legality checks happen here; callers decide which swaps are moves.
        """
        tiles = self.tiles
        tiles[i], tiles[j] = tiles[j], tiles[i]
        if tiles[i] == 0:
            self.blank_index = i
        elif tiles[j] == 0:
            self.blank_index = j

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def rows(self) -> list[list[int]]:
        """Return the tiles as a list of rows."""
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* is in its goal position."""
        val = self.tiles[index]
        if val == 0:
            return index == len(self.tiles) - 1
        return val == index + 1

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=self.tiles[:],
            blank_index=self.blank_index,
        )
