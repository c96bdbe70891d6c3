"""Bar load API endpoints."""

import logging

from fastapi import APIRouter, HTTPException

from barload.core.calculations import (
    PlateSpec,
    effective_collar_weight,
    loaded_weight,
    side_weight,
    split_bar_load,
    weight_to_bar_load,
)
from barload.core.units import WeightUnit, plain_weight
from barload.schemas.schemas import (
    BarLoadRequest,
    BarLoadResponse,
    BarbellLoadResponse,
    DefaultPlatesResponse,
    LoadPlanRequest,
    LoadPlanResponse,
    PlateSpecSchema,
)
from barload.services.loading_service import LoadConfig, default_plates, loading_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/load", tags=["bar loads"])


def to_plate_specs(plates: list[PlateSpecSchema]) -> list[PlateSpec]:
    return [PlateSpec(weight=p.weight, pairs=p.pairs) for p in plates]


@router.post("/compute", response_model=BarLoadResponse)
def compute_bar_load(request: BarLoadRequest):
    """
    Compute the plates for one side of the bar.

    Plates are used exactly as given (heaviest first, zero-pair entries
    skipped by the calculator). Any weight the plates cannot cover is
    returned as a three-decimal remainder.
    """
    collar = effective_collar_weight(request.weight, request.bar_weight, request.collar_weight)
    bar_load = weight_to_bar_load(
        request.weight,
        to_plate_specs(request.plates),
        request.bar_weight,
        request.collar_weight
    )
    plates, remainder = split_bar_load(bar_load)

    return BarLoadResponse(
        load=bar_load,
        plates=plates,
        remainder=remainder,
        side_weight=side_weight(request.weight, request.bar_weight, request.collar_weight),
        collars_applied=collar > 0,
        loaded_weight=loaded_weight(plates, request.bar_weight, collar),
    )


@router.post("/plan", response_model=LoadPlanResponse)
def plan_loads(request: LoadPlanRequest):
    """
    Plan the barbell in the selected unit and in the other unit.

    Returns:
    - Primary bar with plates and remainder
    - Converted bar rounded onto the other unit's smallest plate
    - The rounded weight used for the converted bar
    """
    config = LoadConfig(
        total_weight=request.total_weight,
        unit=request.unit,
        rounding=request.rounding,
        bar_weight=request.bar_weight,
        collar_weight=request.collar_weight,
    )
    if request.plates_kg is not None:
        config.plates_kg = to_plate_specs(request.plates_kg)
    if request.plates_lbs is not None:
        config.plates_lbs = to_plate_specs(request.plates_lbs)

    try:
        plan = loading_service.plan_loads(config)
    except ValueError as e:
        logger.info("Rejected load plan: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    converted_unit = plan.converted.unit.value
    return LoadPlanResponse(
        primary=BarbellLoadResponse.model_validate(plan.primary),
        converted=BarbellLoadResponse.model_validate(plan.converted),
        rounding=plan.rounding,
        rounded_weight=plan.rounded_weight,
        rounded_label=f"Rounded {plan.rounding.value}: {plain_weight(plan.rounded_weight)}{converted_unit}",
    )


@router.get("/plates/{unit}", response_model=DefaultPlatesResponse)
def get_default_plates(unit: WeightUnit):
    """Get the default plate inventory for a unit."""
    return DefaultPlatesResponse(
        unit=unit,
        plates=[PlateSpecSchema.model_validate(p) for p in default_plates(unit)],
    )
