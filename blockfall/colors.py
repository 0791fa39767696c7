"""The palette used to paint grid cells and blocks."""

from __future__ import annotations

from typing import NamedTuple


class Color(NamedTuple):
    """An RGBA colour with components in the range 0..255."""

    r: int
    g: int
    b: int
    a: int = 255


DARK_GREY = Color(26, 31, 40, 255)
GREEN = Color(0, 255, 0, 255)
RED = Color(255, 0, 0, 255)
ORANGE = Color(255, 165, 0, 255)
YELLOW = Color(255, 255, 0, 255)
PURPLE = Color(128, 0, 128, 255)
CYAN = Color(0, 255, 255, 255)
BLUE = Color(0, 0, 255, 255)


def cell_colors() -> list[Color]:
    """Return the colour for each cell value; index 0 is an empty cell."""
    return [DARK_GREY, GREEN, RED, ORANGE, YELLOW, PURPLE, CYAN, BLUE]