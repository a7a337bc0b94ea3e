"""Maps tiles onto crops of a single picture for picture mode.

The renderer scales the picture to ``size * 100%`` of a tile in each axis and
offsets it by the percentages returned here, the same convention as CSS
``background-position``: 0% aligns the left/top edges, 100% the right/bottom
edges.
"""

from __future__ import annotations


def position(value: int, size: int) -> tuple[float, float]:
    """Return the ``(x%, y%)`` background offset for tile *value*.

    The offset is taken from the tile's solved home cell, so each tile keeps
    showing its own piece of the picture wherever it sits on the board.

    Precondition: ``size >= 2`` (the offset is divided over ``size - 1``
    steps).  Only non-blank values ``1 .. size² - 1`` are accepted.
    """
    if not 1 <= value < size * size:
        raise ValueError(
            f"Tile value {value} is outside 1..{size * size - 1} "
            f"for a {size}×{size} board."
        )
    original_row, original_col = divmod(value - 1, size)
    step = 100 / (size - 1)
    return original_col * step, original_row * step
