'''
Quadrant copies and the two reflections that orient a Hilbert sub-curve.

Row 0 is the top of a grid and column 0 is its left edge, so the "bottom"
quadrants are the ones with the higher row indices.

Both flips work in place on a square list of lists that the caller owns
exclusively, and each is its own inverse.
'''

from enum import Enum
from typing import List, Sequence


class Quadrant(Enum):
    """Quadrants in the order the curve visits them."""
    BL = 0
    TL = 1
    TR = 2
    BR = 3

    @property
    def row_offset(self) -> int:
        # In units of half the side length.
        return 1 if self in (Quadrant.BL, Quadrant.BR) else 0

    @property
    def col_offset(self) -> int:
        return 1 if self in (Quadrant.TR, Quadrant.BR) else 0


def copy_quadrant(grid: Sequence[Sequence], quadrant: Quadrant) -> List[list]:
    """Return a fresh copy of one quadrant of a square grid with even side."""
    half = len(grid) >> 1
    y0 = quadrant.row_offset * half
    x0 = quadrant.col_offset * half
    return [[grid[y0 + y][x0 + x] for x in range(half)] for y in range(half)]


def flip_top_left_to_bottom_right(region: List[list]) -> None:
    """
    Reflect across the top-left to bottom-right axis (transpose).

    The value at [1][0] ends up at [0][1].
    """
    for y in range(len(region)):
        for x in range(y + 1, len(region)):
            region[y][x], region[x][y] = region[x][y], region[y][x]


def flip_bottom_left_to_top_right(region: List[list]) -> None:
    """
    Reflect across the bottom-left to top-right axis.

    The value at [0][0] ends up at [-1][-1].
    """
    m = len(region)
    for y in range(m):
        for x in range(m - 1 - y):
            region[y][x], region[m-1-x][m-1-y] = region[m-1-x][m-1-y], region[y][x]
