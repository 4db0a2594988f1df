'''
Visit-order tables for the Hilbert curve.

Feeding a grid whose cells hold their own (row, col) coordinates through
`grid_to_line` yields the position visited at each step of the curve.
The tables are reused by the numpy front end and by the renderers.
'''

import logging
from functools import lru_cache
from typing import List, Optional, Tuple

from hilbertgrid import utils
from hilbertgrid.curve import grid_to_line


logger = logging.getLogger(__name__)


def curve_order(side: int) -> Optional[List[Tuple[int, int]]]:
    """
    The (row, col) of every curve position on a `side` x `side` grid.

    Returns None if `side` is not a power of two.
    """
    if not utils.is_power_of_two(side):
        logger.debug(f'No curve for side {side}')
        return None
    return list(_curve_order(utils.as_int(side)))


@lru_cache(maxsize=16)
def _curve_order(side: int) -> Tuple[Tuple[int, int], ...]:
    coords = [[(y, x) for x in range(side)] for y in range(side)]
    order = grid_to_line(coords)
    assert order is not None
    return tuple(order)


def curve_index_grid(side: int) -> Optional[List[List[int]]]:
    """
    A `side` x `side` grid where each cell holds its position along the curve.

    Returns None if `side` is not a power of two.
    """
    order = curve_order(side)
    if order is None:
        return None
    grid = [[0] * side for _ in range(side)]
    for index, (y, x) in enumerate(order):
        grid[y][x] = index
    return grid
