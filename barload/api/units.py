"""Unit conversion API endpoints."""

from fastapi import APIRouter, Query

from barload.core.units import (
    RoundingMode,
    WeightUnit,
    convert_weight,
    display_weight,
    plate_round,
)
from barload.schemas.schemas import ConvertResponse, DisplayResponse, RoundResponse

router = APIRouter(prefix="/units", tags=["units"])


@router.get("/convert", response_model=ConvertResponse)
def convert(
    weight: float = Query(..., allow_inf_nan=False),
    from_unit: WeightUnit = Query(...),
    to_unit: WeightUnit = Query(...)
):
    """Convert a weight between kg and lbs."""
    converted = convert_weight(weight, from_unit, to_unit)
    return ConvertResponse(weight=converted, unit=to_unit, display=display_weight(converted))


@router.get("/round", response_model=RoundResponse)
def round_to_plates(
    weight: float = Query(..., allow_inf_nan=False),
    smallest_plate: float = Query(..., gt=0, allow_inf_nan=False),
    mode: RoundingMode = RoundingMode.NEAREST
):
    """Round a weight to the nearest value the smallest plate pair can reach."""
    rounded = plate_round(weight, smallest_plate, mode)
    return RoundResponse(
        weight=weight,
        smallest_plate=smallest_plate,
        mode=mode,
        rounded=rounded,
        display=display_weight(rounded),
    )


@router.get("/display", response_model=DisplayResponse)
def display(weight: float = Query(..., allow_inf_nan=False)):
    """Format a weight the way it is shown on screen."""
    return DisplayResponse(weight=weight, display=display_weight(weight))
