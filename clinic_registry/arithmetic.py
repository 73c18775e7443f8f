"""
Rounding helpers shared by the service and user queries
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Number = Union[int, float, Decimal]


def round_half_up(value: Number, places: int = 2) -> float:
    """
    Round to ``places`` decimals, halves away from zero.

    Floats go through ``str`` first so 2.675 rounds to 2.68, not 2.67.
    """
    quantum = Decimal(1).scaleb(-places)
    decimal_value = value if isinstance(value, Decimal) else Decimal(str(value))
    return float(decimal_value.quantize(quantum, rounding=ROUND_HALF_UP))


def mean(values, places: int = 2) -> float:
    """Arithmetic mean rounded half-up; 0 for an empty sequence"""
    values = list(values)
    if not values:
        return 0.0
    return round_half_up(Decimal(sum(values)) / Decimal(len(values)), places)
