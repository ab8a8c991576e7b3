"""Weight unit conversions.

All body weight is stored as integer grams.
"""

import math
from decimal import ROUND_HALF_UP, Decimal

from workout_progress.models.metrics import UnitSystem

GRAMS_PER_KG = 1000
GRAMS_PER_LB = 453.592


def grams_to_kg(grams: float) -> float:
    """Convert grams to kilograms."""
    return grams / GRAMS_PER_KG


def grams_to_lb(grams: float) -> float:
    """Convert grams to pounds."""
    return grams / GRAMS_PER_LB


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, ties away from zero.

    Uses the exact binary value of ``value``, so 80.25 becomes 80.3
    while 0.15 (stored as 0.1499...) becomes 0.1.
    """
    if value % 1 == 0:
        return float(value)
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def convert_weight(grams: float, unit: UnitSystem) -> float:
    """Convert grams to the given unit system without rounding."""
    return grams_to_kg(grams) if unit == UnitSystem.KG else grams_to_lb(grams)


def display_weight(grams: float, unit: UnitSystem) -> float:
    """Weight in the given unit, rounded to one decimal for charts.

    Example:
        display_weight(80500, UnitSystem.KG) -> 80.5
        display_weight(80000, UnitSystem.LB) -> 176.4
    """
    return round_one_decimal(convert_weight(grams, unit))
