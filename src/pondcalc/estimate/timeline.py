"""Excavation/hauling timeline estimation."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Union

from pondcalc.core.types import ProjectInputs
from pondcalc.estimate.geometry import pond_volume_cubic_yards
from pondcalc.estimate.models import (
    Bottleneck,
    CalculationError,
    CalculationResult,
    ConfidenceLevel,
    InsufficientEquipment,
    InvalidConfiguration,
)
from pondcalc.fleet.models import Excavator, Truck
from pondcalc.productivity.rates import (
    EXCAVATOR_EFFICIENCY,
    TRUCK_EFFICIENCY,
    calculate_excavator_fleet_productivity,
    calculate_excavator_rate,
    calculate_truck_fleet_productivity,
    calculate_truck_rate,
)

CalculationOutcome = Union[CalculationResult, CalculationError]

# Bottleneck stage delivering less than this share of the other stage triggers a balance warning.
IMBALANCE_RATIO = 0.5

STANDARD_ASSUMPTIONS: tuple[str, ...] = (
    f"Excavator efficiency factor of {EXCAVATOR_EFFICIENCY:.0%} applied to every dig cycle",
    f"Truck efficiency factor of {TRUCK_EFFICIENCY:.0%} applied to every haul trip",
    "Equipment operates continuously during scheduled work hours",
    "Timeline is rounded up to whole work days",
)


def _schedule_problem(pond_volume: float, work_hours_per_day: float) -> InvalidConfiguration | None:
    if not (pond_volume > 0 and math.isfinite(pond_volume)):
        return InvalidConfiguration(
            reason="Pond volume must be a finite number greater than zero."
        )
    if not (work_hours_per_day > 0 and math.isfinite(work_hours_per_day)):
        return InvalidConfiguration(
            reason="Work hours per day must be a finite number greater than zero."
        )
    return None


def _balance_warnings(excavation_rate: float, hauling_rate: float) -> list[str]:
    if hauling_rate < excavation_rate * IMBALANCE_RATIO:
        return [
            "Hauling capacity is less than half of excavation capacity; "
            "adding trucks would shorten the timeline."
        ]
    if excavation_rate < hauling_rate * IMBALANCE_RATIO:
        return [
            "Excavation capacity is less than half of hauling capacity; "
            "adding excavators would shorten the timeline."
        ]
    return []


def _build_result(
    excavation_rate: float,
    hauling_rate: float,
    pond_volume: float,
    work_hours_per_day: float,
    confidence: ConfidenceLevel,
    extra_warnings: Sequence[str],
) -> CalculationOutcome:
    for rate in (excavation_rate, hauling_rate):
        if not (rate > 0 and math.isfinite(rate)):
            return InvalidConfiguration(
                reason="Equipment productivity must be a finite number greater than zero."
            )
    effective_rate = min(excavation_rate, hauling_rate)
    total_hours = pond_volume / effective_rate
    if not math.isfinite(total_hours):
        return InvalidConfiguration(reason="Equipment productivity is too small to schedule.")
    timeline_in_days = math.ceil(total_hours / work_hours_per_day)
    bottleneck = Bottleneck.EXCAVATION if excavation_rate <= hauling_rate else Bottleneck.HAULING
    return CalculationResult(
        timeline_in_days=timeline_in_days,
        total_hours=total_hours,
        excavation_rate=excavation_rate,
        hauling_rate=hauling_rate,
        bottleneck=bottleneck,
        confidence=confidence,
        assumptions=STANDARD_ASSUMPTIONS,
        warnings=tuple(_balance_warnings(excavation_rate, hauling_rate)) + tuple(extra_warnings),
    )


def calculate_timeline(
    excavator_capacity: float,
    excavator_cycle_time: float,
    truck_capacity: float,
    truck_round_trip_time: float,
    pond_volume: float,
    work_hours_per_day: float,
    *,
    confidence: ConfidenceLevel = ConfidenceLevel.HIGH,
    extra_warnings: Sequence[str] = (),
) -> CalculationOutcome:
    """Estimate the timeline for a single excavator paired with a single truck.

    Parameters
    ----------
    excavator_capacity, excavator_cycle_time:
        Bucket size (cubic yards) and cycle time (minutes).
    truck_capacity, truck_round_trip_time:
        Load size (cubic yards) and round-trip time (minutes).
    pond_volume:
        Cubic yards to move.
    work_hours_per_day:
        Scheduled hours per work day.
    confidence:
        Tag carried through to the result unchanged.
    extra_warnings:
        Caller warnings appended after the engine's own.

    Returns
    -------
    CalculationResult | CalculationError
        ``InvalidConfiguration`` when the volume, work hours, either equipment time, or either
        rate is not a finite positive number; otherwise the estimate. The slower stage sets the
        pace and ties favour ``Bottleneck.EXCAVATION``.
    """

    problem = _schedule_problem(pond_volume, work_hours_per_day)
    if problem is not None:
        return problem
    if not excavator_cycle_time > 0 or not truck_round_trip_time > 0:
        return InvalidConfiguration(reason="Cycle and round-trip times must be greater than zero.")
    excavation_rate = calculate_excavator_rate(excavator_capacity, excavator_cycle_time)
    hauling_rate = calculate_truck_rate(truck_capacity, truck_round_trip_time)
    return _build_result(
        excavation_rate, hauling_rate, pond_volume, work_hours_per_day, confidence, extra_warnings
    )


def perform_calculation(
    excavators: Iterable[Excavator],
    trucks: Iterable[Truck],
    pond_volume: float,
    work_hours_per_day: float,
    *,
    confidence: ConfidenceLevel = ConfidenceLevel.HIGH,
    extra_warnings: Sequence[str] = (),
) -> CalculationOutcome:
    """Fleet-aware timeline estimate.

    Only active units count. A fleet that is empty and one whose units are all inactive are both
    rejected with :class:`InsufficientEquipment`. Rates are fleet sums; rounding and bottleneck
    rules match :func:`calculate_timeline`.
    """

    active_excavators = [unit for unit in excavators if unit.is_active]
    active_trucks = [unit for unit in trucks if unit.is_active]
    missing = tuple(
        kind
        for kind, units in (("excavator", active_excavators), ("truck", active_trucks))
        if not units
    )
    if missing:
        return InsufficientEquipment(missing=missing)

    problem = _schedule_problem(pond_volume, work_hours_per_day)
    if problem is not None:
        return problem
    bad_ids = [unit.id for unit in active_excavators if not unit.cycle_time > 0]
    bad_ids += [unit.id for unit in active_trucks if not unit.round_trip_time > 0]
    if bad_ids:
        return InvalidConfiguration(
            reason=f"Cycle and round-trip times must be greater than zero ({', '.join(bad_ids)})."
        )

    excavation_rate = calculate_excavator_fleet_productivity(active_excavators)
    hauling_rate = calculate_truck_fleet_productivity(active_trucks)
    return _build_result(
        excavation_rate, hauling_rate, pond_volume, work_hours_per_day, confidence, extra_warnings
    )


def estimate_project(
    inputs: ProjectInputs, *, confidence: ConfidenceLevel = ConfidenceLevel.HIGH
) -> CalculationOutcome:
    """Run :func:`calculate_timeline` for a single-unit project form."""

    volume = pond_volume_cubic_yards(inputs.pond_length, inputs.pond_width, inputs.pond_depth)
    return calculate_timeline(
        inputs.excavator_capacity,
        inputs.excavator_cycle_time,
        inputs.truck_capacity,
        inputs.truck_round_trip_time,
        volume,
        inputs.work_hours_per_day,
        confidence=confidence,
    )


__all__ = [
    "CalculationOutcome",
    "IMBALANCE_RATIO",
    "STANDARD_ASSUMPTIONS",
    "calculate_timeline",
    "estimate_project",
    "perform_calculation",
]
