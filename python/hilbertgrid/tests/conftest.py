"""
Pytest configuration for the hilbertgrid tests.

Provides grid and line builders shared by the test modules.
"""

from random import Random

import matplotlib

# Plots are only ever written to files in tests.
matplotlib.use('Agg')


def make_grid(side: int):
    """Grid filled row-major with 1..side*side."""
    return [[y * side + x + 1 for x in range(side)] for y in range(side)]


def make_random_line(rnd: Random, length: int):
    return [rnd.getrandbits(32) for _ in range(length)]
