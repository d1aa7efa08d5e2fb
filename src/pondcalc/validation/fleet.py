"""Fleet-table validators (accumulate every failing field on every unit)."""

from __future__ import annotations

from collections.abc import Iterable

from pondcalc.config.models import ValidationRules
from pondcalc.fleet.models import Excavator, Truck
from pondcalc.validation.errors import FieldTag, FleetValidationIssue, InputValidationError
from pondcalc.validation.fields import (
    validate_cycle_time,
    validate_excavator_capacity,
    validate_round_trip_time,
    validate_truck_capacity,
)


def validate_excavator_fleet(
    rules: ValidationRules, excavators: Iterable[Excavator]
) -> list[FleetValidationIssue]:
    """Return one issue per failing field per excavator; an empty list means the fleet is valid.

    Inactive units are checked too, since they can be re-activated without further edits.
    """

    issues: list[FleetValidationIssue] = []
    for unit in excavators:
        capacity = validate_excavator_capacity(rules.excavator_capacity, unit.bucket_capacity)
        if isinstance(capacity, InputValidationError):
            issues.append(FleetValidationIssue(unit.id, FieldTag.EXCAVATOR_CAPACITY, capacity))
        cycle = validate_cycle_time(rules.cycle_time, unit.cycle_time)
        if isinstance(cycle, InputValidationError):
            issues.append(FleetValidationIssue(unit.id, FieldTag.CYCLE_TIME, cycle))
    return issues


def validate_truck_fleet(
    rules: ValidationRules, trucks: Iterable[Truck]
) -> list[FleetValidationIssue]:
    """Truck counterpart of :func:`validate_excavator_fleet`."""

    issues: list[FleetValidationIssue] = []
    for unit in trucks:
        capacity = validate_truck_capacity(rules.truck_capacity, unit.capacity)
        if isinstance(capacity, InputValidationError):
            issues.append(FleetValidationIssue(unit.id, FieldTag.TRUCK_CAPACITY, capacity))
        trip = validate_round_trip_time(rules.round_trip_time, unit.round_trip_time)
        if isinstance(trip, InputValidationError):
            issues.append(FleetValidationIssue(unit.id, FieldTag.ROUND_TRIP_TIME, trip))
    return issues


__all__ = ["validate_excavator_fleet", "validate_truck_fleet"]
