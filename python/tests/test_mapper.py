"""Picture-mode crop offsets."""

from __future__ import annotations

import pytest

from tilitoli.engine.gameimage import position


def test_first_tile_is_top_left() -> None:
    assert position(1, 4) == (0.0, 0.0)


def test_interior_tile() -> None:
    x, y = position(6, 4)
    assert x == pytest.approx(33.333, abs=0.01)
    assert y == pytest.approx(33.333, abs=0.01)


@pytest.mark.parametrize(
    ("value", "size", "expected"),
    [
        (4, 4, (100.0, 0.0)),
        (13, 4, (0.0, 100.0)),
        (15, 4, (66.667, 100.0)),
        (3, 3, (100.0, 0.0)),
        (5, 3, (50.0, 50.0)),
        (3, 2, (0.0, 100.0)),
    ],
)
def test_offsets_follow_home_cell(
    value: int, size: int, expected: tuple[float, float]
) -> None:
    assert position(value, size) == pytest.approx(expected, abs=0.01)


@pytest.mark.parametrize(("value", "size"), [(0, 4), (16, 4), (-1, 3), (9, 3)])
def test_values_outside_the_tiles_are_rejected(value: int, size: int) -> None:
    with pytest.raises(ValueError):
        position(value, size)
