"""Immutable fleet editing helpers (add/remove/update/activate)."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import replace
from typing import Any, TypeVar

from pondcalc.config.models import CalculatorConfig
from pondcalc.core.errors import PondCalcValueError
from pondcalc.fleet.models import Excavator, Truck

UnitT = TypeVar("UnitT", Excavator, Truck)

_ID_SUFFIX = re.compile(r"-(\d+)$")


def ensure_unique_ids(fleet: Iterable[UnitT]) -> tuple[UnitT, ...]:
    """Return ``fleet`` as a tuple, raising when two units share an id."""

    units = tuple(fleet)
    seen: set[str] = set()
    for unit in units:
        if unit.id in seen:
            raise PondCalcValueError(f"Duplicate equipment id '{unit.id}'")
        seen.add(unit.id)
    return units


def _index_of(fleet: Sequence[UnitT], unit_id: str) -> int:
    for idx, unit in enumerate(fleet):
        if unit.id == unit_id:
            return idx
    raise PondCalcValueError(f"Unknown equipment id '{unit_id}'")


def next_unit_id(fleet: Iterable[UnitT], prefix: str) -> str:
    """Return ``"<prefix>-<n>"`` with ``n`` one past the highest numeric suffix in use."""

    highest = 0
    for unit in fleet:
        if not unit.id.startswith(f"{prefix}-"):
            continue
        match = _ID_SUFFIX.search(unit.id)
        if match:
            highest = max(highest, int(match.group(1)))
    return f"{prefix}-{highest + 1}"


def add_unit(
    fleet: Sequence[UnitT], unit: UnitT, *, max_units: int | None = None
) -> tuple[UnitT, ...]:
    """Append ``unit`` to a copy of ``fleet``.

    Raises
    ------
    PondCalcValueError
        When the id is already used or the fleet would exceed ``max_units``.
    """

    if any(existing.id == unit.id for existing in fleet):
        raise PondCalcValueError(f"Duplicate equipment id '{unit.id}'")
    if max_units is not None and len(fleet) >= max_units:
        raise PondCalcValueError(f"Fleet limit reached ({max_units} units)")
    return (*fleet, unit)


def remove_unit(fleet: Sequence[UnitT], unit_id: str) -> tuple[UnitT, ...]:
    """Return ``fleet`` without ``unit_id``; the last unit of a fleet cannot be removed."""

    idx = _index_of(fleet, unit_id)
    if len(fleet) <= 1:
        raise PondCalcValueError("A fleet must keep at least one unit")
    return (*fleet[:idx], *fleet[idx + 1 :])


def update_unit(fleet: Sequence[UnitT], unit_id: str, **changes: Any) -> tuple[UnitT, ...]:
    """Return ``fleet`` with ``unit_id`` replaced by a copy carrying ``changes``."""

    if "id" in changes and changes["id"] != unit_id:
        raise PondCalcValueError("Equipment ids cannot be changed")
    idx = _index_of(fleet, unit_id)
    updated = replace(fleet[idx], **changes)
    return (*fleet[:idx], updated, *fleet[idx + 1 :])


def set_unit_active(fleet: Sequence[UnitT], unit_id: str, active: bool) -> tuple[UnitT, ...]:
    return update_unit(fleet, unit_id, is_active=active)


def fleet_from_defaults(
    config: CalculatorConfig,
) -> tuple[tuple[Excavator, ...], tuple[Truck, ...]]:
    """Build the starting excavator and truck fleets from configured defaults."""

    excavators = tuple(
        Excavator(
            id=f"excavator-{idx + 1}",
            bucket_capacity=spec.bucket_capacity,
            cycle_time=spec.cycle_time,
            name=spec.name,
        )
        for idx, spec in enumerate(config.defaults.excavators)
    )
    trucks = tuple(
        Truck(
            id=f"truck-{idx + 1}",
            capacity=spec.capacity,
            round_trip_time=spec.round_trip_time,
            name=spec.name,
        )
        for idx, spec in enumerate(config.defaults.trucks)
    )
    return excavators, trucks


__all__ = [
    "add_unit",
    "ensure_unique_ids",
    "fleet_from_defaults",
    "next_unit_id",
    "remove_unit",
    "set_unit_active",
    "update_unit",
]
