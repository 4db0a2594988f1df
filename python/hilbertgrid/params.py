"""
Curve sizes used by the command line and the tests.

Usage:
    from hilbertgrid.params import ORDERS, get_order

    # Get a specific size by name
    params = get_order("o3")

    # For pytest parametrization
    @pytest.mark.parametrize("name,params", ORDERS.items())
    def test_something(name, params):
        ...
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class CurveParams:
    # A curve of order k covers a 2**k x 2**k grid.
    order: int = 3
    log_level: str = 'INFO'

    def __post_init__(self):
        assert isinstance(self.order, int) and self.order >= 0
        assert isinstance(getattr(logging, self.log_level.upper(), None), int)

    @property
    def side(self) -> int:
        return 1 << self.order

    @property
    def length(self) -> int:
        return 1 << (2 * self.order)

    # Field mapping from camelCase JSON to snake_case Python
    _FIELD_MAPPING = {
        'order': 'order',
        'logLevel': 'log_level',
        'log_level': 'log_level',
    }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CurveParams':
        """Create CurveParams from a dictionary with camelCase or snake_case names."""
        converted_data = {}
        for key, snake_key in cls._FIELD_MAPPING.items():
            if key in data:
                converted_data[snake_key] = data[key]
        return cls(**converted_data)


# Named sizes. Names encode the order: o{k} is a 2**k x 2**k grid.
ORDERS: Dict[str, CurveParams] = {
    f"o{order}": CurveParams(order=order) for order in range(6)
}


def get_order(name: str) -> CurveParams:
    """Get a curve size by name. Raises KeyError if not found."""
    return ORDERS[name]


def list_orders() -> str:
    """Return a formatted string listing all available sizes."""
    lines = []
    for name, params in ORDERS.items():
        lines.append(f"  {name}: {params.side}x{params.side} ({params.length} cells)")
    return "\n".join(lines)
