"""Plot the Hilbert curve path over its grid, colored by position along the curve."""

import logging
from typing import Optional

import matplotlib
import matplotlib.pyplot as plt
import numpy as np

from hilbertgrid.ordering import curve_order


logger = logging.getLogger(__name__)


def plot_curve(side: int, output_path: Optional[str] = None, show_indices: bool = False):
    """
    Draw the curve for a `side` x `side` grid.

    Row 0 is drawn at the top, as the grid is stored. The figure is saved to
    `output_path` when given, otherwise returned for the caller to show.
    Raises ValueError if `side` is not a power of two.
    """
    order = curve_order(side)
    if order is None:
        raise ValueError(f'side must be a power of two, got {side}')
    coords = np.array(order, dtype=float).reshape(-1, 2)
    ys = coords[:, 0]
    xs = coords[:, 1]

    fig, ax = plt.subplots(figsize=(6, 6))
    ax.plot(xs, ys, color='0.6', linewidth=1, zorder=1)
    cmap = matplotlib.colormaps['viridis']
    ax.scatter(xs, ys, c=np.arange(len(order)), cmap=cmap, s=max(4, 400 // side), zorder=2)
    if show_indices:
        for index, (y, x) in enumerate(order):
            ax.annotate(str(index), (x, y), textcoords='offset points', xytext=(3, 3),
                        fontsize=7)

    ax.set_xlim(-0.5, side - 0.5)
    ax.set_ylim(side - 0.5, -0.5)
    ax.set_aspect('equal')
    ax.set_xlabel('col')
    ax.set_ylabel('row')
    ax.set_title(f'Hilbert curve {side}x{side}')

    if output_path is not None:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)
        logger.info(f'Curve plot written to {output_path}')
    return fig
