"""
Load planning service.

Builds the primary barbell in the selected unit and a second barbell showing
the same total converted to the other unit, snapped onto that unit's plates.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from barload.core.calculations import (
    BarLoad,
    PlateSpec,
    effective_collar_weight,
    loaded_weight,
    split_bar_load,
    weight_to_bar_load,
)
from barload.core.config import settings
from barload.core.units import (
    RoundingMode,
    WeightUnit,
    convert_weight,
    display_weight,
    format_weight,
    other_unit,
    plain_weight,
    plate_round,
)

logger = logging.getLogger(__name__)


# Home gym inventory, heaviest first (weight, pairs)
DEFAULT_PLATES = {
    WeightUnit.KG: [
        (50, 0),
        (25, 8),
        (20, 1),
        (15, 1),
        (10, 1),
        (5, 1),
        (2.5, 1),
        (1.25, 1),
    ],
    WeightUnit.LBS: [
        (45, 8),
        (35, 0),
        (25, 1),
        (10, 1),
        (5, 1),
        (2.5, 1),
    ],
}

# Olympic bars are sold as 20 kg / 45 lb, not as exact conversions
STANDARD_BARS = {
    WeightUnit.KG: 20,
    WeightUnit.LBS: 45,
}

STANDARD_COLLAR_KG = 2.5


def default_plates(unit: WeightUnit) -> list[PlateSpec]:
    """Return a fresh copy of the default inventory for a unit."""
    return [PlateSpec(weight=w, pairs=p) for w, p in DEFAULT_PLATES[unit]]


@dataclass
class LoadConfig:
    """Everything needed to plan both barbells."""
    total_weight: float = 0
    unit: WeightUnit = settings.DEFAULT_UNIT
    rounding: RoundingMode = settings.DEFAULT_ROUNDING
    bar_weight: float = settings.DEFAULT_BAR_WEIGHT
    collar_weight: float = settings.DEFAULT_COLLAR_WEIGHT
    plates_kg: list[PlateSpec] = field(default_factory=lambda: default_plates(WeightUnit.KG))
    plates_lbs: list[PlateSpec] = field(default_factory=lambda: default_plates(WeightUnit.LBS))

    def plates_for(self, unit: WeightUnit) -> list[PlateSpec]:
        return self.plates_kg if unit == WeightUnit.KG else self.plates_lbs


@dataclass
class BarbellLoad:
    """One loaded bar."""
    weight: float
    unit: WeightUnit
    bar_weight: float
    collar_weight: float
    load: BarLoad
    plates: list[float]
    remainder: Optional[str]
    title: str
    loaded_weight: float


@dataclass
class LoadPlan:
    """Primary bar plus the same total in the other unit."""
    primary: BarbellLoad
    converted: BarbellLoad
    rounding: RoundingMode
    rounded_weight: float


class LoadingService:
    """Applies the barbell conventions around the plate calculator."""

    def available_plates(self, plates: Sequence[PlateSpec]) -> list[PlateSpec]:
        """Keep only plates that have at least one pair, preserving order."""
        return [plate for plate in plates if plate.pairs > 0]

    def smallest_plate(self, plates: Sequence[PlateSpec]) -> float:
        """
        Find the lightest usable plate.

        Args:
            plates: Inventory sorted heaviest first

        Returns:
            Weight of the last plate that has pairs available

        Raises:
            ValueError: If no plate has any pairs
        """
        available = self.available_plates(plates)
        if not available:
            raise ValueError("No plates available")
        return available[-1].weight

    def converted_bar_weight(self, bar_weight: float, to_unit: WeightUnit) -> float:
        """
        Pick the bar for the other unit.

        A standard 20 kg bar becomes a 45 lb bar and vice versa; anything
        else is converted linearly.
        """
        from_unit = other_unit(to_unit)
        if bar_weight == STANDARD_BARS[from_unit]:
            return STANDARD_BARS[to_unit]
        return convert_weight(bar_weight, from_unit, to_unit)

    def converted_collar_weight(self, collar_weight: float, to_unit: WeightUnit) -> float:
        """
        Pick the collars for the other unit.

        The lbs bar is shown without collars; the kg bar gets standard
        2.5 kg collars when the source bar used collars.
        """
        if to_unit == WeightUnit.LBS or collar_weight == 0:
            return 0
        return STANDARD_COLLAR_KG

    def load_barbell(
        self,
        weight: float,
        unit: WeightUnit,
        plates: Sequence[PlateSpec],
        bar_weight: float,
        collar_weight: float,
        title: Optional[str] = None
    ) -> BarbellLoad:
        """Load one bar and split the result into plates and remainder."""
        bar_load = weight_to_bar_load(
            weight,
            self.available_plates(plates),
            bar_weight,
            collar_weight
        )
        used_plates, remainder = split_bar_load(bar_load)

        if remainder is not None:
            logger.warning(
                "Remainder of %s%s per side for %s%s",
                remainder, unit.value, display_weight(weight), unit.value
            )

        return BarbellLoad(
            weight=weight,
            unit=unit,
            bar_weight=bar_weight,
            collar_weight=collar_weight,
            load=bar_load,
            plates=used_plates,
            remainder=remainder,
            title=title if title is not None else f"{plain_weight(weight)}{unit.value}",
            loaded_weight=loaded_weight(
                used_plates,
                bar_weight,
                effective_collar_weight(weight, bar_weight, collar_weight)
            ),
        )

    def plan_loads(self, config: LoadConfig) -> LoadPlan:
        """
        Plan the primary bar and its converted counterpart.

        Steps:
        1. Load the primary bar with the selected unit's plates
        2. Convert the total to the other unit
        3. Round it onto the other unit's smallest-plate grid
        4. Swap in the other unit's bar and collars
        5. Load the converted bar

        Raises:
            ValueError: If the other unit has no plates available
        """
        unit = WeightUnit(config.unit)
        rounding = RoundingMode(config.rounding)

        primary = self.load_barbell(
            config.total_weight,
            unit,
            config.plates_for(unit),
            config.bar_weight,
            config.collar_weight,
        )

        to_unit = other_unit(unit)
        converted_total = convert_weight(config.total_weight, unit, to_unit)
        smallest = self.smallest_plate(config.plates_for(to_unit))
        rounded_weight = plate_round(converted_total, smallest, rounding)

        converted = self.load_barbell(
            rounded_weight,
            to_unit,
            config.plates_for(to_unit),
            self.converted_bar_weight(config.bar_weight, to_unit),
            self.converted_collar_weight(config.collar_weight, to_unit),
            title=format_weight(converted_total, to_unit),
        )

        logger.debug(
            "Planned %s%s as %s (rounded %s to %s%s)",
            display_weight(config.total_weight), unit.value, primary.load,
            rounding.value, display_weight(rounded_weight), to_unit.value
        )

        return LoadPlan(
            primary=primary,
            converted=converted,
            rounding=rounding,
            rounded_weight=rounded_weight,
        )


loading_service = LoadingService()
