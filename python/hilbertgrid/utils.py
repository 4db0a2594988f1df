import logging
import numbers
import operator
from typing import Optional


logger = logging.getLogger(__name__)


def as_int(value) -> Optional[int]:
    """
    `value` as a plain int, or None if it is not an integer.

    numpy integer scalars are accepted. bool is an int subclass but True is
    not a side length, so it gives None.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return None
    return operator.index(value)


def is_power_of_two(value) -> bool:
    """
    >> is_power_of_two(1)
    True
    >> is_power_of_two(12)
    False
    """
    value = as_int(value)
    if value is None or value < 1:
        return False
    return value & (value - 1) == 0


def is_power_of_four(value) -> bool:
    """
    >> is_power_of_four(16)
    True
    >> is_power_of_four(8)
    False
    """
    if not is_power_of_two(value):
        return False
    # The single set bit has to sit at an even position.
    return (as_int(value).bit_length() - 1) % 2 == 0


def integer_fourth_root(value: int) -> int:
    """
    Side length of the square grid holding `value` cells.

    `value` must be a power of four; 4**a gives 2**a.
    """
    assert is_power_of_four(value), f'{value} is not a power of four'
    return 1 << ((as_int(value).bit_length() - 1) // 2)
