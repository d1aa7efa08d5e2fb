"""Excavator and truck productivity (cubic yards per hour)."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from pondcalc.core.errors import PondCalcValueError
from pondcalc.fleet.models import Excavator, Truck

MINUTES_PER_HOUR = 60.0
EXCAVATOR_EFFICIENCY = 0.85
TRUCK_EFFICIENCY = 0.8


def _cycles_per_hour(minutes: float, label: str) -> float:
    if minutes <= 0:
        raise PondCalcValueError(f"{label} must be > 0")
    return MINUTES_PER_HOUR / minutes


def calculate_excavator_rate(bucket_capacity: float, cycle_time: float) -> float:
    """Return excavator productivity in cubic yards per hour.

    Parameters
    ----------
    bucket_capacity : float
        Bucket volume in cubic yards.
    cycle_time : float
        Minutes per dig/swing/dump cycle. Must be ``> 0``.

    Returns
    -------
    float
        ``(60 / cycle_time) * bucket_capacity * 0.85``. The 0.85 factor covers repositioning
        and other non-digging time within each cycle.

    Raises
    ------
    PondCalcValueError
        If ``cycle_time <= 0``. Inputs are expected to have passed validation already.
    """

    return _cycles_per_hour(cycle_time, "cycle_time") * bucket_capacity * EXCAVATOR_EFFICIENCY


def calculate_truck_rate(capacity: float, round_trip_time: float) -> float:
    """Return truck hauling rate in cubic yards per hour.

    ``(60 / round_trip_time) * capacity * 0.8``; the 0.8 factor covers loading, dumping and
    travel inefficiencies. ``round_trip_time <= 0`` raises :class:`PondCalcValueError`.
    """

    return _cycles_per_hour(round_trip_time, "round_trip_time") * capacity * TRUCK_EFFICIENCY


def calculate_excavator_fleet_productivity(excavators: Iterable[Excavator]) -> float:
    """Sum of unit rates over active excavators (``0.0`` for an empty or all-inactive fleet)."""

    total = 0.0
    for unit in excavators:
        if unit.is_active:
            total += calculate_excavator_rate(unit.bucket_capacity, unit.cycle_time)
    return total


def calculate_truck_fleet_productivity(trucks: Iterable[Truck]) -> float:
    """Sum of unit rates over active trucks (``0.0`` for an empty or all-inactive fleet)."""

    total = 0.0
    for unit in trucks:
        if unit.is_active:
            total += calculate_truck_rate(unit.capacity, unit.round_trip_time)
    return total


def unit_rate_table(
    excavators: Iterable[Excavator], trucks: Iterable[Truck]
) -> pd.DataFrame:
    """Return one row per unit with its productivity contribution.

    Columns: ``type``, ``id``, ``name``, ``capacity_cy``, ``minutes``, ``active``,
    ``rate_cy_per_hour``. Inactive units are listed with a rate of ``0.0``.
    """

    rows: list[dict[str, object]] = []
    for exc in excavators:
        rows.append(
            {
                "type": "excavator",
                "id": exc.id,
                "name": exc.name,
                "capacity_cy": exc.bucket_capacity,
                "minutes": exc.cycle_time,
                "active": exc.is_active,
                "rate_cy_per_hour": (
                    calculate_excavator_rate(exc.bucket_capacity, exc.cycle_time)
                    if exc.is_active
                    else 0.0
                ),
            }
        )
    for truck in trucks:
        rows.append(
            {
                "type": "truck",
                "id": truck.id,
                "name": truck.name,
                "capacity_cy": truck.capacity,
                "minutes": truck.round_trip_time,
                "active": truck.is_active,
                "rate_cy_per_hour": (
                    calculate_truck_rate(truck.capacity, truck.round_trip_time)
                    if truck.is_active
                    else 0.0
                ),
            }
        )
    columns = ["type", "id", "name", "capacity_cy", "minutes", "active", "rate_cy_per_hour"]
    return pd.DataFrame(rows, columns=columns)


__all__ = [
    "EXCAVATOR_EFFICIENCY",
    "TRUCK_EFFICIENCY",
    "MINUTES_PER_HOUR",
    "calculate_excavator_rate",
    "calculate_truck_rate",
    "calculate_excavator_fleet_productivity",
    "calculate_truck_fleet_productivity",
    "unit_rate_table",
]
