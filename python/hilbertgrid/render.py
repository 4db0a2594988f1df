'''
Plain-text rendering of grids, lines and the curve itself.

`draw_curve` uses the same picture as the documentation in
`hilbertgrid.curve`: cells sit on the even text columns, a step between
horizontal neighbours is a '_' on the odd column between them, and a step
between vertical neighbours is a '|' in the lower of the two text rows.
'''

from typing import List, Optional, Sequence

from hilbertgrid.ordering import curve_order


def format_grid(grid: Sequence[Sequence]) -> str:
    """One text row per grid row, cells right aligned to a common width."""
    cells = [[str(value) for value in row] for row in grid]
    width = max((len(cell) for row in cells for cell in row), default=0)
    return "\n".join(" ".join(cell.rjust(width) for cell in row) for row in cells)


def format_line(line: Sequence, per_row: int = 16) -> str:
    """Space separated values, `per_row` to a text row."""
    assert per_row > 0
    cells = [str(value) for value in line]
    rows = [cells[i:i + per_row] for i in range(0, len(cells), per_row)]
    return "\n".join(" ".join(row) for row in rows)


def draw_curve(side: int) -> Optional[str]:
    """
    ASCII drawing of the curve on a `side` x `side` grid.

    >> print(draw_curve(4))
     _   _
    | |_| |
    |_   _|
     _| |_

    Returns None if `side` is not a power of two.
    """
    order = curve_order(side)
    if order is None:
        return None
    canvas: List[List[str]] = [[' '] * (2 * side - 1) for _ in range(side)]
    for (y0, x0), (y1, x1) in zip(order, order[1:]):
        if y0 == y1:
            canvas[y0][min(x0, x1) * 2 + 1] = '_'
        else:
            assert x0 == x1
            canvas[max(y0, y1)][x0 * 2] = '|'
    return "\n".join("".join(row).rstrip() for row in canvas)
