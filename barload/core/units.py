"""Weight unit conversion and display utilities."""

import math
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum


class WeightUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"


class RoundingMode(str, Enum):
    NEAREST = "nearest"
    UP = "up"
    DOWN = "down"


# Conversion constant
LBS_PER_KG = 2.20462262


def to_fixed(value: float, digits: int) -> str:
    """
    Format a number with a fixed count of fraction digits.

    Ties are rounded half-up on the exact binary value of the float, so
    0.125 becomes "0.13" rather than the banker's "0.12".
    """
    quantum = Decimal(1).scaleb(-digits)
    return format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP), "f")


def kg_to_lbs(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg * LBS_PER_KG


def lbs_to_kg(lbs: float) -> float:
    """Convert pounds to kilograms."""
    return lbs / LBS_PER_KG


def convert_weight(value: float, from_unit: WeightUnit, to_unit: WeightUnit) -> float:
    """Convert weight between units."""
    if from_unit == to_unit:
        return value
    if from_unit == WeightUnit.KG and to_unit == WeightUnit.LBS:
        return kg_to_lbs(value)
    return lbs_to_kg(value)


def other_unit(unit: WeightUnit) -> WeightUnit:
    """Return the unit a converted barbell is shown in."""
    return WeightUnit.LBS if unit == WeightUnit.KG else WeightUnit.KG


def display_weight(weight: float) -> str:
    """
    Format a weight for display.

    Two fraction digits, dropped entirely when they are both zero:
    100 -> "100", 100.5 -> "100.50", 99.999 -> "100".

    Args:
        weight: Weight in any unit

    Returns:
        Display string without a unit suffix
    """
    fixed = to_fixed(weight, 2)
    if fixed.endswith(".00"):
        return fixed[:-3]
    return fixed


def format_weight(value: float, unit: WeightUnit) -> str:
    """Format weight with unit suffix."""
    return f"{display_weight(value)}{unit.value}"


def plain_weight(value: float) -> str:
    """
    Format a weight as a bare number: 102.5 -> "102.5", 220.0 -> "220".

    Used where the raw weight is shown without fixed decimals.
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def plate_round(weight: float, smallest_plate: float, mode: RoundingMode) -> float:
    """
    Snap a weight onto the grid reachable with the smallest plate.

    Plates go on in pairs, so the finest step is twice the smallest plate.

    Formula: step = 2 × smallest_plate, q = weight / step
    - down:    floor(q) × step
    - up:      ceil(q) × step (weight itself when already on the grid)
    - nearest: round-half-up(q) × step

    Args:
        weight: Weight to round
        smallest_plate: Lightest plate available; must be non-zero
        mode: Rounding direction

    Returns:
        Rounded weight
    """
    step = 2 * smallest_plate
    q = weight / step

    if mode == RoundingMode.DOWN:
        return math.floor(q) * step
    if mode == RoundingMode.UP:
        if weight % step == 0:
            return weight
        return math.ceil(q) * step
    # Half-up; floor(q + 0.5) overshoots for q just below .5
    nearest = math.floor(q)
    if q - nearest >= 0.5:
        nearest += 1
    return nearest * step
