from __future__ import annotations

import pytest

from pondcalc.config import load_default_config
from pondcalc.core.errors import PondCalcValueError
from pondcalc.fleet import (
    Excavator,
    Truck,
    add_unit,
    ensure_unique_ids,
    fleet_from_defaults,
    next_unit_id,
    remove_unit,
    set_unit_active,
    update_unit,
)


@pytest.fixture
def trucks() -> tuple[Truck, ...]:
    return (
        Truck(id="truck-1", capacity=12.0, round_trip_time=15.0, name="Dump 1"),
        Truck(id="truck-2", capacity=15.0, round_trip_time=18.0, name="Dump 2"),
    )


def test_add_unit_returns_new_tuple(trucks):
    extra = Truck(id="truck-3", capacity=10.0, round_trip_time=12.0)
    updated = add_unit(trucks, extra)
    assert updated[-1] == extra
    assert len(trucks) == 2


def test_add_unit_rejects_duplicate_ids_and_limits(trucks):
    with pytest.raises(PondCalcValueError, match="Duplicate"):
        add_unit(trucks, Truck(id="truck-1", capacity=1.0, round_trip_time=1.0))
    with pytest.raises(PondCalcValueError, match="limit"):
        add_unit(trucks, Truck(id="truck-3", capacity=1.0, round_trip_time=1.0), max_units=2)


def test_remove_unit_keeps_at_least_one(trucks):
    remaining = remove_unit(trucks, "truck-1")
    assert [unit.id for unit in remaining] == ["truck-2"]
    with pytest.raises(PondCalcValueError, match="at least one"):
        remove_unit(remaining, "truck-2")
    with pytest.raises(PondCalcValueError, match="Unknown"):
        remove_unit(trucks, "truck-9")


def test_update_and_activate(trucks):
    updated = update_unit(trucks, "truck-2", capacity=20.0)
    assert updated[1].capacity == 20.0
    assert trucks[1].capacity == 15.0
    deactivated = set_unit_active(updated, "truck-1", False)
    assert deactivated[0].is_active is False
    assert deactivated[0].name == "Dump 1"
    with pytest.raises(PondCalcValueError):
        update_unit(trucks, "truck-1", id="truck-7")


def test_next_unit_id():
    assert next_unit_id((), "excavator") == "excavator-1"
    fleet = (
        Excavator(id="excavator-1", bucket_capacity=2.5, cycle_time=2.0),
        Excavator(id="excavator-4", bucket_capacity=2.5, cycle_time=2.0),
        Excavator(id="custom", bucket_capacity=2.5, cycle_time=2.0),
    )
    assert next_unit_id(fleet, "excavator") == "excavator-5"


def test_ensure_unique_ids():
    unit = Excavator(id="excavator-1", bucket_capacity=2.5, cycle_time=2.0)
    assert ensure_unique_ids([unit]) == (unit,)
    with pytest.raises(PondCalcValueError):
        ensure_unique_ids([unit, unit])


def test_fleet_from_defaults():
    excavators, trucks = fleet_from_defaults(load_default_config())
    assert excavators[0].id == "excavator-1"
    assert excavators[0].bucket_capacity == 2.5
    assert trucks[0].capacity == 12.0
    assert all(unit.is_active for unit in (*excavators, *trucks))
