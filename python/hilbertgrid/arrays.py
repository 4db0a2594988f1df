'''
numpy front end for the Hilbert conversion.

A whole conversion is one fancy-index gather (grid -> line) or scatter
(line -> grid) driven by the curve's visit-order table, so the dtype of the
input array is kept as is.
'''

import logging
from typing import Optional, Tuple

import numpy as np

from hilbertgrid import utils
from hilbertgrid.ordering import curve_order


logger = logging.getLogger(__name__)


def _as_array(value) -> Optional[np.ndarray]:
    try:
        return np.asarray(value)
    except ValueError as e:
        # Ragged nested sequences.
        logger.debug(f'Rejecting input: {e}')
        return None


def _order_indices(side: int) -> Tuple[np.ndarray, np.ndarray]:
    order = np.array(curve_order(side), dtype=np.intp).reshape(-1, 2)
    return order[:, 0], order[:, 1]


def array_to_line(array) -> Optional[np.ndarray]:
    """
    Map a square 2-D array (side 2**k) to a 1-D array along the Hilbert curve.

    Returns None for anything that is not a square 2-D array with a power of
    two side.
    """
    if array is None:
        return None
    array = _as_array(array)
    if array is None:
        return None
    if array.ndim != 2:
        logger.debug(f'Rejecting array: expected 2 dimensions, got {array.ndim}')
        return None
    rows, cols = array.shape
    if rows != cols or not utils.is_power_of_two(rows):
        logger.debug(f'Rejecting array: shape {array.shape}')
        return None
    ys, xs = _order_indices(rows)
    return array[ys, xs]


def line_to_array(line) -> Optional[np.ndarray]:
    """
    Map a 1-D array (length 4**k) to the square 2-D array it was read from.

    Returns None for anything that is not a 1-D array with a power of four
    length.
    """
    if line is None:
        return None
    line = _as_array(line)
    if line is None:
        return None
    if line.ndim != 1:
        logger.debug(f'Rejecting line: expected 1 dimension, got {line.ndim}')
        return None
    if not utils.is_power_of_four(line.shape[0]):
        logger.debug(f'Rejecting line: length {line.shape[0]} is not a power of four')
        return None
    side = utils.integer_fourth_root(line.shape[0])
    ys, xs = _order_indices(side)
    array = np.empty((side, side), dtype=line.dtype)
    array[ys, xs] = line
    return array
