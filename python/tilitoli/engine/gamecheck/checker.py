"""Win detection and the solvability parity test."""

from __future__ import annotations

from collections.abc import Sequence


def is_solved(tiles: Sequence[int]) -> bool:
    """Return True if every tile but the last cell holds ``index + 1``.

    The last cell is not inspected: once all others match, the permutation
    invariant leaves only the blank for it.
    """
    for i in range(len(tiles) - 1):
        if tiles[i] != i + 1:
            return False
    return True


def is_solvable(tiles: Sequence[int], size: int) -> bool:
    """Return True if *tiles* can reach the goal state by sliding moves.

    Every move is a transposition involving the blank and shifts the blank
    one step, so the permutation parity always equals the parity of the
    blank's Manhattan distance from its home (bottom-right) cell.
    """
    count = size * size
    # Cell -> home cell of the value it holds (the blank lives in the last cell).
    target = [v - 1 if v else count - 1 for v in tiles]

    seen = [False] * count
    cycles = 0
    for start in range(count):
        if seen[start]:
            continue
        cycles += 1
        i = start
        while not seen[i]:
            seen[i] = True
            i = target[i]
    permutation_parity = (count - cycles) % 2

    row, col = divmod(list(tiles).index(0), size)
    distance = (size - 1 - row) + (size - 1 - col)
    return permutation_parity == distance % 2
