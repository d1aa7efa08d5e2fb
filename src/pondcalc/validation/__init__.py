"""Input validation engine: field validators, fleet validators, and error variants."""

from .errors import (
    ConfigurationError,
    DecimalPrecisionError,
    EdgeCaseError,
    FieldTag,
    FleetValidationIssue,
    InputValidationError,
    InvalidFormat,
    RequiredField,
    ValueTooHigh,
    ValueTooLow,
)
from .fields import (
    MAX_DECIMALS,
    ValidationResult,
    parse_number,
    range_for,
    validate_all_inputs,
    validate_cycle_time,
    validate_decimal_precision,
    validate_excavator_capacity,
    validate_field,
    validate_pond_dimensions,
    validate_round_trip_time,
    validate_string_input,
    validate_truck_capacity,
    validate_with_edge_cases,
    validate_work_hours,
)
from .fleet import validate_excavator_fleet, validate_truck_fleet

__all__ = [
    "ConfigurationError",
    "DecimalPrecisionError",
    "EdgeCaseError",
    "FieldTag",
    "FleetValidationIssue",
    "InputValidationError",
    "InvalidFormat",
    "MAX_DECIMALS",
    "RequiredField",
    "ValidationResult",
    "ValueTooHigh",
    "ValueTooLow",
    "parse_number",
    "range_for",
    "validate_all_inputs",
    "validate_cycle_time",
    "validate_decimal_precision",
    "validate_excavator_capacity",
    "validate_excavator_fleet",
    "validate_field",
    "validate_pond_dimensions",
    "validate_round_trip_time",
    "validate_string_input",
    "validate_truck_capacity",
    "validate_truck_fleet",
    "validate_with_edge_cases",
    "validate_work_hours",
]
