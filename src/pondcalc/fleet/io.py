"""Fleet table import (CSV via pandas)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

from pondcalc.core.errors import PondCalcValueError
from pondcalc.fleet.models import Excavator, Truck
from pondcalc.fleet.operations import ensure_unique_ids

__all__ = ["FLEET_COLUMNS", "read_csv", "load_fleet_csv"]

FLEET_COLUMNS = ("type", "id", "capacity", "minutes", "name", "active")
REQUIRED_COLUMNS = FLEET_COLUMNS[:4]

_TRUE = {"true", "yes", "1", "y", "active"}
_FALSE = {"false", "no", "0", "n", "inactive"}


def read_csv(path: Path) -> pd.DataFrame:
    """Load a CSV file using pandas with UTF-8 defaults (all columns as text)."""
    try:
        return pd.read_csv(path, dtype=str, encoding="utf-8")
    except pd.errors.EmptyDataError as exc:
        raise PondCalcValueError(f"Fleet file {path} is empty") from exc
    except pd.errors.ParserError as exc:
        raise PondCalcValueError(f"Could not parse fleet file {path}: {exc}") from exc


def _coerce_bool(value: Any, *, row: int) -> bool:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return True
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise PondCalcValueError(f"Row {row}: cannot interpret active={value!r}")


def _coerce_float(value: Any, *, row: int, column: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise PondCalcValueError(f"Row {row}: {column}={value!r} is not a number") from exc


def load_fleet_csv(path: str | Path) -> tuple[tuple[Excavator, ...], tuple[Truck, ...]]:
    """Read excavators and trucks from a single CSV table.

    Required columns are ``type`` (``excavator`` or ``truck``), ``id``, ``capacity`` (cubic
    yards) and ``minutes`` (cycle time for excavators, round-trip time for trucks). ``name`` and
    ``active`` are optional; ``active`` defaults to true.

    Numeric values are not range-checked here; run the fleet validators on the result.
    """

    csv_path = Path(path)
    if not csv_path.exists():
        raise PondCalcValueError(f"Fleet file not found: {csv_path}")
    df = read_csv(csv_path)
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise PondCalcValueError(f"Fleet file {csv_path} missing columns: {', '.join(missing)}")

    excavators: list[Excavator] = []
    trucks: list[Truck] = []
    for offset, record in enumerate(df.to_dict(orient="records")):
        row = offset + 2  # header is line 1
        kind = str(record["type"]).strip().lower()
        raw_id = record["id"]
        unit_id = "" if raw_id is None or pd.isna(raw_id) else str(raw_id).strip()
        if not unit_id:
            raise PondCalcValueError(f"Row {row}: missing equipment id")
        name = record.get("name")
        name = "" if name is None or pd.isna(name) else str(name)
        active = _coerce_bool(record.get("active"), row=row)
        capacity = _coerce_float(record["capacity"], row=row, column="capacity")
        minutes = _coerce_float(record["minutes"], row=row, column="minutes")
        if kind == "excavator":
            excavators.append(
                Excavator(
                    id=unit_id,
                    bucket_capacity=capacity,
                    cycle_time=minutes,
                    name=name,
                    is_active=active,
                )
            )
        elif kind == "truck":
            trucks.append(
                Truck(
                    id=unit_id,
                    capacity=capacity,
                    round_trip_time=minutes,
                    name=name,
                    is_active=active,
                )
            )
        else:
            raise PondCalcValueError(
                f"Row {row}: unknown equipment type {record['type']!r} (expected excavator/truck)"
            )
    return ensure_unique_ids(excavators), ensure_unique_ids(trucks)
