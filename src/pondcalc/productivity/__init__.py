"""Productivity helpers for excavators and haul trucks."""

from .rates import (
    EXCAVATOR_EFFICIENCY,
    MINUTES_PER_HOUR,
    TRUCK_EFFICIENCY,
    calculate_excavator_fleet_productivity,
    calculate_excavator_rate,
    calculate_truck_fleet_productivity,
    calculate_truck_rate,
    unit_rate_table,
)

__all__ = [
    "EXCAVATOR_EFFICIENCY",
    "MINUTES_PER_HOUR",
    "TRUCK_EFFICIENCY",
    "calculate_excavator_fleet_productivity",
    "calculate_excavator_rate",
    "calculate_truck_fleet_productivity",
    "calculate_truck_rate",
    "unit_rate_table",
]
