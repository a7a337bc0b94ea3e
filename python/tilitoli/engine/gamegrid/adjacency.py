"""Orthogonal neighbourhoods on a row-major N×N grid."""

from __future__ import annotations

from tilitoli.models.board import Direction


def neighbors(index: int, size: int) -> set[int]:
    """Return the indices orthogonally adjacent to *index*.

    Corners have 2 neighbours, edges 3 and interior cells 4.  A 1×1 grid has
    none.
    """
    row, col = divmod(index, size)
    result: set[int] = set()
    if row > 0:
        result.add(index - size)
    if row < size - 1:
        result.add(index + size)
    if col > 0:
        result.add(index - 1)
    if col < size - 1:
        result.add(index + 1)
    return result


def neighbor_in_direction(
    index: int, direction: Direction, size: int
) -> int | None:
    """Return the cell whose tile would slide in *direction* into *index*.

    *index* is the blank.  ``Direction.UP`` moves the tile **below** the
    blank upward, so it resolves to the cell underneath, and so on.
    Returns ``None`` when that cell is off the grid.
    """
    row, col = divmod(index, size)
    # Offset from the blank to the tile that will slide into it.
    offsets = {
        Direction.UP: (1, 0),
        Direction.DOWN: (-1, 0),
        Direction.LEFT: (0, 1),
        Direction.RIGHT: (0, -1),
    }
    dr, dc = offsets[direction]
    tr, tc = row + dr, col + dc
    if not (0 <= tr < size and 0 <= tc < size):
        return None
    return tr * size + tc
