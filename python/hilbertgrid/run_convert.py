"""
Command line front end for the Hilbert grid/line conversion.

Usage:
    hilbertgrid demo
    hilbertgrid to-line grid.json
    echo '[1, 2, 3, 4]' | hilbertgrid to-grid
    hilbertgrid draw --order 3
    hilbertgrid --list-orders
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from hilbertgrid import log_utils
from hilbertgrid.curve import grid_to_line, line_to_grid
from hilbertgrid.params import CurveParams, get_order, list_orders
from hilbertgrid.render import draw_curve, format_grid, format_line


logger = logging.getLogger(__name__)


DEMO_LINE = list('abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789+-')

DEMO_GRID = [
    list('vwzALMPQ'),
    list('uxyBKNOR'),
    list('tsDCJITS'),
    list('qrEFGHUV'),
    list('pmlk10ZW'),
    list('onij23YX'),
    list('bchg549+'),
    list('adef678-'),
]


def run_demo() -> int:
    """Convert the demo line to a grid and back, then map the demo grid to a line."""
    grid = line_to_grid(DEMO_LINE)
    logger.info(f'Mapped a line of {len(DEMO_LINE)} to a {len(grid)}x{len(grid)} grid')
    print(format_grid(grid))
    print()
    print(format_line(grid_to_line(grid)))
    print()
    print(format_line(grid_to_line(DEMO_GRID)))
    return 0


def _read_json(filename: Optional[str]):
    if filename is None or filename == '-':
        return json.load(sys.stdin)
    with open(filename, 'r') as f:
        return json.load(f)


def run_to_line(filename: Optional[str]) -> int:
    grid = _read_json(filename)
    line = grid_to_line(grid) if isinstance(grid, list) else None
    if line is None:
        print('Error: input must be a square grid with a power of two side', file=sys.stderr)
        return 1
    logger.info(f'Mapped a {len(grid)}x{len(grid)} grid to a line of {len(line)}')
    print(json.dumps(line))
    return 0


def run_to_grid(filename: Optional[str]) -> int:
    line = _read_json(filename)
    grid = line_to_grid(line) if isinstance(line, list) else None
    if grid is None:
        print('Error: input must be a line with a power of four length', file=sys.stderr)
        return 1
    logger.info(f'Mapped a line of {len(line)} to a {len(grid)}x{len(grid)} grid')
    print(json.dumps(grid))
    return 0


def run_draw(params: CurveParams) -> int:
    print(draw_curve(params.side))
    return 0


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hilbertgrid',
        description='Map square grids to lines and back along a Hilbert curve')
    parser.add_argument('--log-level', default='WARNING',
                        help='Logging level (default: WARNING)')
    parser.add_argument('--list-orders', action='store_true',
                        help='List the named curve sizes and exit')
    subparsers = parser.add_subparsers(dest='command')

    subparsers.add_parser('demo', help='Run the alphabet demonstration')

    to_line = subparsers.add_parser('to-line', help='Map a JSON grid to a JSON line')
    to_line.add_argument('input', nargs='?', default=None,
                         help='JSON file holding a 2-D array (default: stdin)')

    to_grid = subparsers.add_parser('to-grid', help='Map a JSON line to a JSON grid')
    to_grid.add_argument('input', nargs='?', default=None,
                         help='JSON file holding an array (default: stdin)')

    draw = subparsers.add_parser('draw', help='Draw the curve as ASCII art')
    size = draw.add_mutually_exclusive_group()
    size.add_argument('--order', '-o', type=int, default=None,
                      help='Curve order k, for a 2**k x 2**k grid (default: 3)')
    size.add_argument('--size', '-s', default=None,
                      help='Named curve size, see --list-orders')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)

    try:
        log_utils.configure_logging(args.log_level)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if args.list_orders:
        print("Available sizes:")
        print(list_orders())
        return 0

    try:
        if args.command == 'demo':
            return run_demo()
        if args.command == 'to-line':
            return run_to_line(args.input)
        if args.command == 'to-grid':
            return run_to_grid(args.input)
        if args.command == 'draw':
            if args.size is not None:
                params = get_order(args.size)
            elif args.order is not None:
                if args.order < 0:
                    print('Error: order must not be negative', file=sys.stderr)
                    return 1
                params = CurveParams(order=args.order)
            else:
                params = CurveParams()
            return run_draw(params)
    except json.JSONDecodeError as e:
        print(f'Error: invalid JSON: {e}', file=sys.stderr)
        return 1
    except OSError as e:
        print(f'Error: cannot read input: {e}', file=sys.stderr)
        return 1
    except KeyError as e:
        print(f'Error: unknown size {e}', file=sys.stderr)
        return 1

    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
