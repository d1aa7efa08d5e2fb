from __future__ import annotations

import pytest

from pondcalc.core.errors import PondCalcValueError
from pondcalc.fleet import load_fleet_csv


def _write(tmp_path, text: str):
    path = tmp_path / "fleet.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_fleet_csv(tmp_path):
    path = _write(
        tmp_path,
        "type,id,capacity,minutes,name,active\n"
        "excavator,excavator-1,2.5,2.0,CAT 320,true\n"
        "truck,truck-1,12,15,Dump 1,\n"
        "Truck,truck-2,15,18,,false\n",
    )
    excavators, trucks = load_fleet_csv(path)
    assert len(excavators) == 1
    assert excavators[0].bucket_capacity == 2.5
    assert excavators[0].cycle_time == 2.0
    assert excavators[0].name == "CAT 320"
    assert [t.id for t in trucks] == ["truck-1", "truck-2"]
    assert trucks[0].is_active is True
    assert trucks[1].is_active is False
    assert trucks[1].name == ""


def test_optional_columns_can_be_omitted(tmp_path):
    path = _write(tmp_path, "type,id,capacity,minutes\nexcavator,e1,3,2\ntruck,t1,10,12\n")
    excavators, trucks = load_fleet_csv(path)
    assert excavators[0].is_active and trucks[0].is_active


@pytest.mark.parametrize(
    "text, message",
    [
        ("type,id,capacity\nexcavator,e1,3\n", "missing columns"),
        ("type,id,capacity,minutes\ncrane,c1,3,2\n", "unknown equipment type"),
        ("type,id,capacity,minutes\nexcavator,e1,big,2\n", "not a number"),
        ("type,id,capacity,minutes,active\nexcavator,e1,3,2,maybe\n", "active"),
        ("type,id,capacity,minutes\ntruck,t1,10,12\ntruck,t1,11,13\n", "Duplicate"),
        ("", "empty"),
        ("type,id,capacity,minutes\nexcavator,e1,3,2\ntruck,t1,1,2,3,4,5\n", "Could not parse"),
        ("type,id,capacity,minutes\nexcavator,,2.5,2\n", "missing equipment id"),
        ("type,id,capacity,minutes\ntruck,  ,12,15\n", "missing equipment id"),
    ],
)
def test_bad_fleet_files(tmp_path, text, message):
    with pytest.raises(PondCalcValueError, match=message):
        load_fleet_csv(_write(tmp_path, text))


def test_missing_file(tmp_path):
    with pytest.raises(PondCalcValueError, match="not found"):
        load_fleet_csv(tmp_path / "nope.csv")
