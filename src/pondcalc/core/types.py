"""Shared domain records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectInputs:
    """Single-unit project form: one excavator, one truck, pond geometry (feet), schedule."""

    excavator_capacity: float  # cubic yards per bucket
    excavator_cycle_time: float  # minutes
    truck_capacity: float  # cubic yards per load
    truck_round_trip_time: float  # minutes
    work_hours_per_day: float
    pond_length: float
    pond_width: float
    pond_depth: float


__all__ = ["ProjectInputs"]
