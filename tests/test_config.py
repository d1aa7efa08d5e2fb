from __future__ import annotations

import json

import pytest
import yaml

from pondcalc.config import (
    CalculatorConfig,
    ValidationRange,
    config_warnings,
    load_config,
    load_default_config,
    parse_config,
)
from pondcalc.core.errors import PondCalcValueError


def _payload() -> dict:
    return load_default_config().model_dump()


def test_packaged_defaults_load():
    config = load_default_config()
    assert isinstance(config, CalculatorConfig)
    assert config.defaults.excavators[0].bucket_capacity == 2.5
    assert config.defaults.trucks[0].round_trip_time == 15.0
    assert config.validation.work_hours.max == 16.0
    assert config_warnings(config) == []


def test_load_config_without_path_is_cached_default():
    assert load_config() is load_default_config()
    assert load_config(None) == load_config(None)


def test_range_requires_min_below_max():
    with pytest.raises(ValueError):
        ValidationRange(min=5.0, max=5.0)


def test_yaml_and_json_files(tmp_path):
    payload = _payload()
    payload["version"] = "2.0.0"
    yaml_path = tmp_path / "calc.yaml"
    yaml_path.write_text(yaml.safe_dump(payload), encoding="utf-8")
    json_path = tmp_path / "calc.json"
    json_path.write_text(json.dumps(payload), encoding="utf-8")
    assert load_config(yaml_path).version == "2.0.0"
    assert load_config(json_path) == load_config(yaml_path)


def test_invalid_range_is_reported_with_location(tmp_path):
    payload = _payload()
    payload["validation"]["cycle_time"] = {"min": 10.0, "max": 1.0}
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(PondCalcValueError, match="validation.cycle_time"):
        load_config(path)


def test_missing_file_and_parse_errors(tmp_path):
    with pytest.raises(PondCalcValueError, match="not found"):
        load_config(tmp_path / "missing.yaml")
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(PondCalcValueError, match="Could not parse"):
        load_config(broken)


def test_non_mapping_payload_rejected():
    with pytest.raises(PondCalcValueError, match="mapping"):
        parse_config([1, 2, 3])


def test_empty_default_fleet_rejected():
    payload = _payload()
    payload["defaults"]["trucks"] = []
    with pytest.raises(PondCalcValueError, match="defaults.trucks"):
        parse_config(payload)


def test_out_of_range_defaults_warn(tmp_path):
    payload = _payload()
    payload["defaults"]["excavators"][0]["bucket_capacity"] = 50.0
    payload["fleet_limits"]["max_trucks"] = 1
    payload["defaults"]["trucks"].append(dict(payload["defaults"]["trucks"][0]))
    path = tmp_path / "warn.yaml"
    path.write_text(yaml.safe_dump(payload), encoding="utf-8")
    with pytest.warns(UserWarning) as record:
        config = load_config(path)
    messages = [str(item.message) for item in record]
    assert any("bucket_capacity=50.0" in message for message in messages)
    assert any("max_trucks=1" in message for message in messages)
    assert len(config_warnings(config)) == 2
