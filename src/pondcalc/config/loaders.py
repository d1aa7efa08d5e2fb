"""Configuration loading utilities (packaged defaults + user YAML/JSON files)."""

from __future__ import annotations

import json
import warnings
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from pondcalc.config.models import CalculatorConfig, ValidationRange
from pondcalc.core.errors import PondCalcValueError

__all__ = ["load_default_config", "load_config", "parse_config", "config_warnings"]

_DEFAULTS_FILE = "calculator-defaults.json"


def _format_pydantic_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err.get("loc", ())) or "root"
        parts.append(f"{location}: {err.get('msg')}")
    return "; ".join(parts)


def parse_config(payload: Any, *, source: str = "<memory>") -> CalculatorConfig:
    """Validate a decoded mapping against :class:`CalculatorConfig`."""

    if not isinstance(payload, dict):
        raise PondCalcValueError(f"Configuration {source} must be a mapping at the top level")
    try:
        return CalculatorConfig.model_validate(payload)
    except ValidationError as exc:
        raise PondCalcValueError(
            f"Configuration {source} is invalid: {_format_pydantic_error(exc)}"
        ) from exc


@cache
def load_default_config() -> CalculatorConfig:
    """Return the packaged configuration (parsed once per process)."""

    data_path = resources.files(__package__) / "_data" / _DEFAULTS_FILE
    with resources.as_file(data_path) as path:
        payload = json.loads(path.read_text(encoding="utf-8"))
    return parse_config(payload, source=_DEFAULTS_FILE)


def _read_payload(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in {".yaml", ".yml"}:
            return yaml.safe_load(text)
        return json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise PondCalcValueError(f"Could not parse configuration {path}: {exc}") from exc


def load_config(path: str | Path | None = None) -> CalculatorConfig:
    """Load a configuration file, falling back to the packaged defaults when ``path`` is ``None``.

    Parameters
    ----------
    path:
        YAML (``.yaml``/``.yml``) or JSON file. Keys mirror :class:`CalculatorConfig`.

    Returns
    -------
    CalculatorConfig
        Parsed configuration. Non-fatal anomalies (see :func:`config_warnings`) are emitted via
        :func:`warnings.warn`.
    """

    if path is None:
        return load_default_config()
    config_path = Path(path)
    if not config_path.exists():
        raise PondCalcValueError(f"Configuration file not found: {config_path}")
    config = parse_config(_read_payload(config_path), source=str(config_path))
    for message in config_warnings(config):
        warnings.warn(f"[config:{config_path.name}] {message}", stacklevel=2)
    return config


def _outside(entry: ValidationRange, value: float) -> bool:
    return not entry.min <= value <= entry.max


def config_warnings(config: CalculatorConfig) -> list[str]:
    """Return warnings when configured defaults disagree with the configured ranges or limits."""

    rules = config.validation
    messages: list[str] = []
    for idx, exc in enumerate(config.defaults.excavators):
        if _outside(rules.excavator_capacity, exc.bucket_capacity):
            messages.append(
                f"Default excavator {idx + 1} ({exc.name}): bucket_capacity={exc.bucket_capacity} "
                f"outside [{rules.excavator_capacity.min}, {rules.excavator_capacity.max}]"
            )
        if _outside(rules.cycle_time, exc.cycle_time):
            messages.append(
                f"Default excavator {idx + 1} ({exc.name}): cycle_time={exc.cycle_time} "
                f"outside [{rules.cycle_time.min}, {rules.cycle_time.max}]"
            )
    for idx, truck in enumerate(config.defaults.trucks):
        if _outside(rules.truck_capacity, truck.capacity):
            messages.append(
                f"Default truck {idx + 1} ({truck.name}): capacity={truck.capacity} "
                f"outside [{rules.truck_capacity.min}, {rules.truck_capacity.max}]"
            )
        if _outside(rules.round_trip_time, truck.round_trip_time):
            messages.append(
                f"Default truck {idx + 1} ({truck.name}): round_trip_time={truck.round_trip_time} "
                f"outside [{rules.round_trip_time.min}, {rules.round_trip_time.max}]"
            )
    project = config.project
    if _outside(rules.work_hours, project.work_hours_per_day):
        messages.append(
            f"Default work_hours_per_day={project.work_hours_per_day} "
            f"outside [{rules.work_hours.min}, {rules.work_hours.max}]"
        )
    for label, value in (
        ("pond_length", project.pond_length),
        ("pond_width", project.pond_width),
        ("pond_depth", project.pond_depth),
    ):
        if _outside(rules.pond_dimensions, value):
            messages.append(
                f"Default {label}={value} "
                f"outside [{rules.pond_dimensions.min}, {rules.pond_dimensions.max}]"
            )
    limits = config.fleet_limits
    if len(config.defaults.excavators) > limits.max_excavators:
        messages.append(
            f"{len(config.defaults.excavators)} default excavators exceed "
            f"max_excavators={limits.max_excavators}"
        )
    if len(config.defaults.trucks) > limits.max_trucks:
        messages.append(
            f"{len(config.defaults.trucks)} default trucks exceed max_trucks={limits.max_trucks}"
        )
    return messages
