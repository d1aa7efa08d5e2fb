"""Field-level validators for calculator inputs.

Every validator returns either the accepted value (unchanged, never clamped) or an
:class:`~pondcalc.validation.errors.InputValidationError` instance describing why the value was
rejected. Nothing here raises for bad user input.
"""

from __future__ import annotations

import math
import re
from typing import Union

from pondcalc.config.models import ValidationRange, ValidationRules
from pondcalc.core.types import ProjectInputs
from pondcalc.validation.errors import (
    ConfigurationError,
    DecimalPrecisionError,
    EdgeCaseError,
    FieldTag,
    InputValidationError,
    InvalidFormat,
    RequiredField,
    ValueTooHigh,
    ValueTooLow,
)

ValidationResult = Union[float, InputValidationError]

MAX_DECIMALS = 2
_PRECISION_TOLERANCE = 1e-9
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)")

# label, unit
_FIELD_TEXT: dict[str, tuple[str, str]] = {
    FieldTag.EXCAVATOR_CAPACITY.value: ("Excavator bucket capacity", "cubic yards"),
    FieldTag.CYCLE_TIME.value: ("Excavator cycle time", "minutes"),
    FieldTag.TRUCK_CAPACITY.value: ("Truck capacity", "cubic yards"),
    FieldTag.ROUND_TRIP_TIME.value: ("Truck round-trip time", "minutes"),
    FieldTag.WORK_HOURS.value: ("Work hours per day", "hours"),
    FieldTag.POND_LENGTH.value: ("Pond length", "feet"),
    FieldTag.POND_WIDTH.value: ("Pond width", "feet"),
    FieldTag.POND_DEPTH.value: ("Pond depth", "feet"),
    FieldTag.POND_DIMENSIONS.value: ("Pond dimension", "feet"),
}

_RULE_FOR_FIELD: dict[str, str] = {
    FieldTag.EXCAVATOR_CAPACITY.value: "excavator_capacity",
    FieldTag.CYCLE_TIME.value: "cycle_time",
    FieldTag.TRUCK_CAPACITY.value: "truck_capacity",
    FieldTag.ROUND_TRIP_TIME.value: "round_trip_time",
    FieldTag.WORK_HOURS.value: "work_hours",
    FieldTag.POND_LENGTH.value: "pond_dimensions",
    FieldTag.POND_WIDTH.value: "pond_dimensions",
    FieldTag.POND_DEPTH.value: "pond_dimensions",
    FieldTag.POND_DIMENSIONS.value: "pond_dimensions",
}


def _field_key(field: str | FieldTag) -> str:
    return field.value if isinstance(field, FieldTag) else str(field)


def _field_text(field: str) -> tuple[str, str]:
    return _FIELD_TEXT.get(field, (field.replace("_", " ").capitalize(), ""))


def _with_unit(value: float, unit: str) -> str:
    return f"{value:g} {unit}".rstrip()


def _check_range(field: str | FieldTag, rng: ValidationRange, value: float) -> ValidationResult:
    key = _field_key(field)
    label, unit = _field_text(key)
    if not value > 0:
        return RequiredField(
            guidance=f"{label} is required and must be greater than zero.", field=key
        )
    if value < rng.min:
        return ValueTooLow(
            actual=value,
            minimum=rng.min,
            guidance=f"{label} must be at least {_with_unit(rng.min, unit)}.",
            field=key,
        )
    if value > rng.max:
        return ValueTooHigh(
            actual=value,
            maximum=rng.max,
            guidance=f"{label} must be no more than {_with_unit(rng.max, unit)}.",
            field=key,
        )
    return value


def validate_excavator_capacity(rng: ValidationRange, value: float) -> ValidationResult:
    return _check_range(FieldTag.EXCAVATOR_CAPACITY, rng, value)


def validate_cycle_time(rng: ValidationRange, value: float) -> ValidationResult:
    return _check_range(FieldTag.CYCLE_TIME, rng, value)


def validate_truck_capacity(rng: ValidationRange, value: float) -> ValidationResult:
    return _check_range(FieldTag.TRUCK_CAPACITY, rng, value)


def validate_round_trip_time(rng: ValidationRange, value: float) -> ValidationResult:
    return _check_range(FieldTag.ROUND_TRIP_TIME, rng, value)


def validate_work_hours(rng: ValidationRange, value: float) -> ValidationResult:
    return _check_range(FieldTag.WORK_HOURS, rng, value)


def validate_pond_dimensions(rng: ValidationRange, value: float) -> ValidationResult:
    return _check_range(FieldTag.POND_DIMENSIONS, rng, value)


def range_for(rules: ValidationRules, field: str | FieldTag) -> ValidationRange | None:
    """Return the configured range for ``field`` (``None`` for unknown field names)."""

    rule_name = _RULE_FOR_FIELD.get(_field_key(field))
    return None if rule_name is None else getattr(rules, rule_name)


def validate_field(
    rules: ValidationRules, field: str | FieldTag, value: float
) -> ValidationResult:
    """Apply the configured range for ``field``; unknown names yield ``ConfigurationError``."""

    key = _field_key(field)
    rng = range_for(rules, key)
    if rng is None:
        return ConfigurationError(
            message=f"No validation range is configured for field '{key}'.", field=key
        )
    return _check_range(key, rng, value)


def parse_number(raw: str) -> float | None:
    """Return the float encoded by ``raw`` or ``None`` when it is not a plain decimal number."""

    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    return float(text)


def validate_string_input(
    field_name: str | FieldTag, rng: ValidationRange, raw: str
) -> ValidationResult:
    """Parse ``raw`` as a decimal number and range-check it.

    Empty or whitespace-only input yields ``RequiredField``; anything that is not a plain decimal
    number (``"abc"``, ``"12.34.56"``, ``"8."``) yields ``InvalidFormat`` carrying the raw text.
    """

    key = _field_key(field_name)
    label, _ = _field_text(key)
    if not raw.strip():
        return RequiredField(guidance=f"{label} is required.", field=key)
    value = parse_number(raw)
    if value is None:
        return InvalidFormat(
            input=raw,
            guidance=f"Enter {label.lower()} as a number, for example 2.5.",
            field=key,
        )
    return _check_range(key, rng, value)


def validate_decimal_precision(
    value: float, field: str | FieldTag | None = None
) -> ValidationResult:
    """Reject values needing more than :data:`MAX_DECIMALS` fractional digits.

    Compares ``value`` against its two-decimal reconstruction within a small tolerance, so binary
    representation noise (``2.50``, ``0.1 + 0.2``) is accepted.
    """

    scaled = value * 100
    # huge magnitudes have no fractional part left
    if not math.isfinite(scaled):
        return value
    reconstructed = round(scaled) / 100
    if abs(value - reconstructed) > _PRECISION_TOLERANCE:
        return DecimalPrecisionError(
            actual=value,
            max_decimals=MAX_DECIMALS,
            guidance=f"Please use at most {MAX_DECIMALS} decimal places.",
            field=None if field is None else _field_key(field),
        )
    return value


def validate_with_edge_cases(
    field_name: str | FieldTag, rng: ValidationRange, value: float
) -> ValidationResult:
    """Range validation that tells negative input apart from exactly-zero input."""

    key = _field_key(field_name)
    if value < 0:
        return EdgeCaseError(
            issue="Negative values are not allowed",
            guidance="Please enter a positive value.",
            field=key,
        )
    if value == 0:
        return EdgeCaseError(
            issue="Zero values are not practical",
            guidance="Please enter a value greater than zero.",
            field=key,
        )
    return _check_range(key, rng, value)


def validate_all_inputs(
    rules: ValidationRules, inputs: ProjectInputs
) -> Union[ProjectInputs, InputValidationError]:
    """Validate every project field, stopping at the first failure.

    Fields are checked in form order: excavator capacity, cycle time, truck capacity, round-trip
    time, work hours, pond length, pond width, pond depth. On success ``inputs`` is returned as-is.
    """

    checks = (
        (FieldTag.EXCAVATOR_CAPACITY, rules.excavator_capacity, inputs.excavator_capacity),
        (FieldTag.CYCLE_TIME, rules.cycle_time, inputs.excavator_cycle_time),
        (FieldTag.TRUCK_CAPACITY, rules.truck_capacity, inputs.truck_capacity),
        (FieldTag.ROUND_TRIP_TIME, rules.round_trip_time, inputs.truck_round_trip_time),
        (FieldTag.WORK_HOURS, rules.work_hours, inputs.work_hours_per_day),
        (FieldTag.POND_LENGTH, rules.pond_dimensions, inputs.pond_length),
        (FieldTag.POND_WIDTH, rules.pond_dimensions, inputs.pond_width),
        (FieldTag.POND_DEPTH, rules.pond_dimensions, inputs.pond_depth),
    )
    for field, rng, value in checks:
        result = _check_range(field, rng, value)
        if isinstance(result, InputValidationError):
            return result
    return inputs


__all__ = [
    "MAX_DECIMALS",
    "ValidationResult",
    "parse_number",
    "range_for",
    "validate_all_inputs",
    "validate_cycle_time",
    "validate_decimal_precision",
    "validate_excavator_capacity",
    "validate_field",
    "validate_pond_dimensions",
    "validate_round_trip_time",
    "validate_string_input",
    "validate_truck_capacity",
    "validate_with_edge_cases",
    "validate_work_hours",
]
