"""Pydantic models describing calculator configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator


class ValidationRange(BaseModel):
    """Inclusive ``[min, max]`` bounds for one input category.

    Attributes
    ----------
    min:
        Smallest accepted value (inclusive).
    max:
        Largest accepted value (inclusive). Must be strictly greater than ``min``.
    """

    min: float
    max: float

    @model_validator(mode="after")
    def _min_below_max(self) -> "ValidationRange":
        if not self.min < self.max:
            raise ValueError(f"range minimum ({self.min}) must be below maximum ({self.max})")
        return self

    model_config = {"frozen": True}


class ValidationRules(BaseModel):
    """One range per input category; pond length, width and depth share ``pond_dimensions``."""

    excavator_capacity: ValidationRange
    cycle_time: ValidationRange
    truck_capacity: ValidationRange
    round_trip_time: ValidationRange
    work_hours: ValidationRange
    pond_dimensions: ValidationRange

    model_config = {"frozen": True}


class ExcavatorDefaults(BaseModel):
    bucket_capacity: float
    cycle_time: float
    name: str


class TruckDefaults(BaseModel):
    capacity: float
    round_trip_time: float
    name: str


class EquipmentDefaults(BaseModel):
    """Starting fleet shown before the user edits anything."""

    excavators: list[ExcavatorDefaults] = Field(min_length=1)
    trucks: list[TruckDefaults] = Field(min_length=1)


class ProjectDefaults(BaseModel):
    work_hours_per_day: float = 8.0
    pond_length: float = 40.0
    pond_width: float = 25.0
    pond_depth: float = 5.0


class FleetLimits(BaseModel):
    """Maximum number of units per equipment type."""

    max_excavators: int = 10
    max_trucks: int = 20

    @field_validator("max_excavators", "max_trucks")
    @classmethod
    def _at_least_one(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Fleet limits must allow at least one unit")
        return value


class CalculatorConfig(BaseModel):
    """Complete configuration bundle consumed by the calculator.

    Attributes
    ----------
    version:
        Free-form configuration version label.
    defaults:
        Default excavator and truck fleets.
    project:
        Default pond geometry and work schedule.
    fleet_limits:
        Maximum fleet sizes.
    validation:
        Ranges applied by the validation engine.
    """

    version: str
    defaults: EquipmentDefaults
    project: ProjectDefaults = Field(default_factory=ProjectDefaults)
    fleet_limits: FleetLimits = Field(default_factory=FleetLimits)
    validation: ValidationRules


__all__ = [
    "ValidationRange",
    "ValidationRules",
    "ExcavatorDefaults",
    "TruckDefaults",
    "EquipmentDefaults",
    "ProjectDefaults",
    "FleetLimits",
    "CalculatorConfig",
]
