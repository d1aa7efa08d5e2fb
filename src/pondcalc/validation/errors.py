"""Validation error variants returned (never raised) by the validation engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class FieldTag(str, Enum):
    EXCAVATOR_CAPACITY = "excavator_capacity"
    CYCLE_TIME = "cycle_time"
    TRUCK_CAPACITY = "truck_capacity"
    ROUND_TRIP_TIME = "round_trip_time"
    WORK_HOURS = "work_hours"
    POND_LENGTH = "pond_length"
    POND_WIDTH = "pond_width"
    POND_DEPTH = "pond_depth"
    POND_DIMENSIONS = "pond_dimensions"


@dataclass(frozen=True)
class InputValidationError:
    """Base class for every validation failure.

    ``field`` names the input the error belongs to (a :class:`FieldTag` value or a caller-supplied
    field name) so user interfaces can attach the message to the right widget.
    """

    def describe(self) -> str:
        return "Invalid input."


@dataclass(frozen=True)
class ValueTooLow(InputValidationError):
    actual: float
    minimum: float
    guidance: str
    field: str | None = None

    def describe(self) -> str:
        return f"{self.actual:g} is below the minimum of {self.minimum:g}. {self.guidance}"


@dataclass(frozen=True)
class ValueTooHigh(InputValidationError):
    actual: float
    maximum: float
    guidance: str
    field: str | None = None

    def describe(self) -> str:
        return f"{self.actual:g} is above the maximum of {self.maximum:g}. {self.guidance}"


@dataclass(frozen=True)
class RequiredField(InputValidationError):
    guidance: str
    field: str | None = None

    def describe(self) -> str:
        return self.guidance


@dataclass(frozen=True)
class InvalidFormat(InputValidationError):
    input: str
    guidance: str
    field: str | None = None

    def describe(self) -> str:
        return f"'{self.input}' is not a valid number. {self.guidance}"


@dataclass(frozen=True)
class DecimalPrecisionError(InputValidationError):
    actual: float
    max_decimals: int
    guidance: str
    field: str | None = None

    def describe(self) -> str:
        return f"{self.actual!r} has more than {self.max_decimals} decimal places. {self.guidance}"


@dataclass(frozen=True)
class EdgeCaseError(InputValidationError):
    issue: str
    guidance: str
    field: str | None = None

    def describe(self) -> str:
        return f"{self.issue}. {self.guidance}"


@dataclass(frozen=True)
class ConfigurationError(InputValidationError):
    message: str
    field: str | None = None

    def describe(self) -> str:
        return self.message


class FleetValidationIssue(NamedTuple):
    """One failing field on one fleet unit."""

    unit_id: str
    field: FieldTag
    error: InputValidationError


__all__ = [
    "FieldTag",
    "InputValidationError",
    "ValueTooLow",
    "ValueTooHigh",
    "RequiredField",
    "InvalidFormat",
    "DecimalPrecisionError",
    "EdgeCaseError",
    "ConfigurationError",
    "FleetValidationIssue",
]
