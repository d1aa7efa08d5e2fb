"""Equipment records that make up an excavation fleet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Excavator:
    """Digging unit.

    Attributes
    ----------
    id:
        Identifier, unique within the excavator fleet.
    bucket_capacity:
        Bucket capacity in cubic yards.
    cycle_time:
        Minutes per dig/swing/dump cycle.
    name:
        Display name.
    is_active:
        Inactive units stay in the fleet but contribute nothing to productivity.
    """

    id: str
    bucket_capacity: float
    cycle_time: float
    name: str = ""
    is_active: bool = True


@dataclass(frozen=True)
class Truck:
    """Hauling unit.

    Attributes
    ----------
    id:
        Identifier, unique within the truck fleet.
    capacity:
        Load capacity in cubic yards.
    round_trip_time:
        Minutes per load/haul/dump/return trip.
    name:
        Display name.
    is_active:
        Inactive units stay in the fleet but contribute nothing to productivity.
    """

    id: str
    capacity: float
    round_trip_time: float
    name: str = ""
    is_active: bool = True


Equipment = Union[Excavator, Truck]


__all__ = ["Excavator", "Truck", "Equipment"]
