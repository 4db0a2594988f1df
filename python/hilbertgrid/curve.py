"""
Conversion between a square grid and a line ordered along a Hilbert curve.

The curve starts in the bottom-left cell and ends in the bottom-right cell.
The smallest piece is the 2x2 "U":

     _
    | |

A 4x4 grid is built from four of these. The top two stay as they are, the
bottom-left one is reflected across its bottom-left/top-right axis and the
bottom-right one across its top-left/bottom-right axis, so the curve runs
BL -> TL -> TR -> BR:

     _   _
    | |_| |
    |_   _|
     _| |_

Larger grids repeat the same construction recursively.

Usage:
    from hilbertgrid.curve import grid_to_line, line_to_grid

    line = grid_to_line([['a', 'b'], ['c', 'd']])   # ['c', 'a', 'b', 'd']
    grid = line_to_grid(line)                       # [['a', 'b'], ['c', 'd']]

Malformed input gives None rather than an exception.
"""

import logging
from collections.abc import Mapping
from typing import List, Optional, Sequence

from hilbertgrid import utils
from hilbertgrid.orientation import (
    Quadrant, copy_quadrant, flip_bottom_left_to_top_right, flip_top_left_to_bottom_right,
)


logger = logging.getLogger(__name__)


def _length(value) -> Optional[int]:
    """len(value) for an integer-indexable sequence, otherwise None."""
    if value is None or isinstance(value, Mapping) or not hasattr(value, '__getitem__'):
        return None
    try:
        return len(value)
    except TypeError:
        # Unsized, or a 0-d numpy array.
        return None


def is_valid_grid(grid: Optional[Sequence[Sequence]]) -> bool:
    """True if `grid` is square with a power of two side length."""
    if grid is None:
        logger.debug('Rejecting grid: no grid given')
        return False
    n_rows = _length(grid)
    if n_rows is None:
        logger.debug(f'Rejecting grid: {type(grid).__name__} is not a sequence of rows')
        return False
    if not utils.is_power_of_two(n_rows):
        logger.debug(f'Rejecting grid: {n_rows} rows is not a power of two')
        return False
    row_lengths = [_length(row) for row in grid]
    for index, length in enumerate(row_lengths):
        if length is None:
            logger.debug(f'Rejecting grid: row {index} is not a sequence')
            return False
    row_length = row_lengths[0]
    if not utils.is_power_of_two(row_length):
        logger.debug(f'Rejecting grid: row length {row_length} is not a power of two')
        return False
    for index, length in enumerate(row_lengths):
        if length != row_length:
            logger.debug(f'Rejecting grid: row {index} has length {length}, '
                         f'expected {row_length}')
            return False
    if row_length != n_rows:
        logger.debug(f'Rejecting grid: {n_rows}x{row_length} is not square')
        return False
    return True


def is_valid_line(line: Optional[Sequence]) -> bool:
    """True if `line` has a power of four length."""
    if line is None:
        logger.debug('Rejecting line: no line given')
        return False
    length = _length(line)
    if length is None:
        logger.debug(f'Rejecting line: {type(line).__name__} is not a sequence')
        return False
    if not utils.is_power_of_four(length):
        logger.debug(f'Rejecting line: length {length} is not a power of four')
        return False
    return True


def grid_to_line(grid: Optional[Sequence[Sequence]]) -> Optional[list]:
    """
    Map a square grid (side 2**k) to a line following the Hilbert curve.

    Returns None if the grid is missing, ragged, not square, or its side
    is not a power of two. The input grid is not modified.
    """
    if not is_valid_grid(grid):
        return None
    return map_to_line(grid)


def line_to_grid(line: Optional[Sequence]) -> Optional[List[list]]:
    """
    Map a line (length 4**k) back to the square grid it was read from.

    Returns None if the line is missing or its length is not a power of four.
    """
    if not is_valid_line(line):
        return None
    return map_to_grid(line)


def map_to_line(grid: Sequence[Sequence]) -> list:
    """Recursively map an already validated grid to a line."""
    length = len(grid)
    if length == 1:
        return [grid[0][0]]
    if length == 2:
        return [grid[1][0], grid[0][0], grid[0][1], grid[1][1]]

    tl = copy_quadrant(grid, Quadrant.TL)
    tr = copy_quadrant(grid, Quadrant.TR)
    bl = copy_quadrant(grid, Quadrant.BL)
    br = copy_quadrant(grid, Quadrant.BR)
    flip_bottom_left_to_top_right(bl)
    flip_top_left_to_bottom_right(br)

    line = map_to_line(bl)
    line.extend(map_to_line(tl))
    line.extend(map_to_line(tr))
    line.extend(map_to_line(br))
    return line


def map_to_grid(line: Sequence) -> List[list]:
    """Recursively map an already validated line to a grid."""
    length = len(line)
    if length == 1:
        return [[line[0]]]
    if length == 4:
        return [[line[1], line[2]], [line[0], line[3]]]

    part = length >> 2
    bl = map_to_grid(line[:part])
    tl = map_to_grid(line[part:part*2])
    tr = map_to_grid(line[part*2:part*3])
    br = map_to_grid(line[part*3:])

    # The sub-grids are fresh so flipping them in place is safe.
    flip_bottom_left_to_top_right(bl)
    flip_top_left_to_bottom_right(br)

    size = utils.integer_fourth_root(length)
    half = size >> 1
    assert len(tl) == half
    grid = []
    for y in range(half):
        grid.append(tl[y] + tr[y])
    for y in range(half):
        grid.append(bl[y] + br[y])
    return grid
