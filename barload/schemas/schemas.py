"""Pydantic schemas for request/response validation."""

from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from barload.core.config import settings
from barload.core.units import RoundingMode, WeightUnit


# Plate schemas
class PlateSpecSchema(BaseModel):
    weight: float = Field(..., gt=0, allow_inf_nan=False)
    pairs: int = Field(..., ge=0)

    class Config:
        from_attributes = True


def _check_descending(plates: list[PlateSpecSchema]) -> list[PlateSpecSchema]:
    weights = [p.weight for p in plates]
    if weights != sorted(weights, reverse=True):
        raise ValueError("plates must be sorted by descending weight")
    return plates


# Bar load schemas
class BarLoadRequest(BaseModel):
    weight: float = Field(..., allow_inf_nan=False)
    plates: list[PlateSpecSchema]
    bar_weight: float = Field(settings.DEFAULT_BAR_WEIGHT, ge=0, allow_inf_nan=False)
    collar_weight: float = Field(settings.DEFAULT_COLLAR_WEIGHT, ge=0, allow_inf_nan=False)

    @field_validator("plates")
    @classmethod
    def plates_descending(cls, v):
        return _check_descending(v)


class BarLoadResponse(BaseModel):
    load: list[Union[float, str]]  # Plates, then the remainder string if any
    plates: list[float]
    remainder: Optional[str]
    side_weight: float
    collars_applied: bool
    loaded_weight: float


# Load plan schemas
class LoadPlanRequest(BaseModel):
    total_weight: float = Field(..., allow_inf_nan=False)
    unit: WeightUnit = settings.DEFAULT_UNIT
    rounding: RoundingMode = settings.DEFAULT_ROUNDING
    bar_weight: float = Field(settings.DEFAULT_BAR_WEIGHT, ge=0, allow_inf_nan=False)
    collar_weight: float = Field(settings.DEFAULT_COLLAR_WEIGHT, ge=0, allow_inf_nan=False)
    plates_kg: Optional[list[PlateSpecSchema]] = None  # None uses the default inventory
    plates_lbs: Optional[list[PlateSpecSchema]] = None

    @field_validator("plates_kg", "plates_lbs")
    @classmethod
    def plates_descending(cls, v):
        if v is None:
            return v
        return _check_descending(v)


class BarbellLoadResponse(BaseModel):
    weight: float
    unit: WeightUnit
    bar_weight: float
    collar_weight: float
    load: list[Union[float, str]]
    plates: list[float]
    remainder: Optional[str]
    title: str
    loaded_weight: float

    class Config:
        from_attributes = True


class LoadPlanResponse(BaseModel):
    primary: BarbellLoadResponse
    converted: BarbellLoadResponse
    rounding: RoundingMode
    rounded_weight: float
    rounded_label: str  # e.g. "Rounded nearest: 225lbs"


class DefaultPlatesResponse(BaseModel):
    unit: WeightUnit
    plates: list[PlateSpecSchema]


# Unit schemas
class ConvertResponse(BaseModel):
    weight: float
    unit: WeightUnit
    display: str


class RoundResponse(BaseModel):
    weight: float
    smallest_plate: float
    mode: RoundingMode
    rounded: float
    display: str


class DisplayResponse(BaseModel):
    weight: float
    display: str
