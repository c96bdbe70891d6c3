"""
Core math engine for barbell loading.

Side weight: (total - round2(bar + 2 × collar)) / 2
Plates are chosen greedily, largest first, without backtracking.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from barload.core.units import display_weight, to_fixed


@dataclass
class PlateSpec:
    """Identical plates available in matched pairs (one plate per side)."""
    weight: float
    pairs: int


BarLoad = list[Union[float, str]]


def effective_collar_weight(weight: float, bar_weight: float, collar_weight: float) -> float:
    """
    Determine the collar weight that counts toward the baseline.

    Collars are dropped when the total cannot cover the bar plus both
    collars, so a caller may always pass its collar weight.

    Args:
        weight: Target total weight
        bar_weight: Weight of the empty bar
        collar_weight: Weight of a single collar

    Returns:
        collar_weight, or 0 for loads lighter than bar + collars
    """
    if weight < bar_weight + collar_weight * 2:
        return 0
    return collar_weight


def side_weight(weight: float, bar_weight: float, collar_weight: float) -> float:
    """
    Calculate the weight to build from plates on one side of the bar.

    Formula: side = (weight - round2(bar + 2 × effective_collar)) / 2

    The baseline goes through display_weight so floating noise from
    converted collar weights (2.5 kg -> 5.51155655 lbs) is cut to two
    decimals before the subtraction.

    Returns:
        Side weight; zero or negative when no plates are needed
    """
    collar = effective_collar_weight(weight, bar_weight, collar_weight)
    baseline = float(display_weight(bar_weight + collar * 2))
    return (weight - baseline) / 2


def weight_to_bar_load(
    weight: float,
    plates: Sequence[PlateSpec],
    bar_weight: float,
    collar_weight: float
) -> BarLoad:
    """
    Given a total weight, return the plates for one side of the bar.

    Plates must be sorted by descending weight. Each plate is used while it
    still fits and pairs remain, then the next lighter plate is tried. Any
    weight left over is appended as a string with three fraction digits.

    Args:
        weight: Target total weight
        plates: Available plates, heaviest first
        bar_weight: Weight of the empty bar
        collar_weight: Weight of a single collar

    Returns:
        Plate weights, largest first, optionally ending with the remainder
    """
    bar_load: BarLoad = []
    remaining = side_weight(weight, bar_weight, collar_weight)

    for plate in plates:
        pairs_available = plate.pairs
        while plate.weight <= remaining and pairs_available > 0:
            bar_load.append(plate.weight)
            remaining -= plate.weight
            pairs_available -= 1

    # No epsilon: float noise on an exact fit still shows up as "0.000"
    if remaining > 0:
        bar_load.append(to_fixed(remaining, 3))
    return bar_load


def split_bar_load(bar_load: BarLoad) -> tuple[list[float], Optional[str]]:
    """Separate plate weights from the trailing remainder, if any."""
    if bar_load and isinstance(bar_load[-1], str):
        return list(bar_load[:-1]), bar_load[-1]
    return list(bar_load), None


def loaded_weight(plates: Sequence[float], bar_weight: float, collar_weight: float) -> float:
    """
    Calculate the total weight actually on the bar.

    Formula: total = bar + 2 × collar + 2 × sum(plates)
    """
    return bar_weight + collar_weight * 2 + sum(plates) * 2
