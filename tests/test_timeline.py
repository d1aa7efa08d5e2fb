from __future__ import annotations

import math

import pytest

from pondcalc.core.types import ProjectInputs
from pondcalc.estimate import (
    STANDARD_ASSUMPTIONS,
    Bottleneck,
    CalculationError,
    CalculationResult,
    ConfidenceLevel,
    InsufficientEquipment,
    InvalidConfiguration,
    calculate_timeline,
    estimate_project,
    perform_calculation,
    pond_volume_cubic_yards,
)
from pondcalc.fleet import Excavator, Truck
from pondcalc.productivity import calculate_excavator_rate, calculate_truck_rate


def _excavator(unit_id: str = "excavator-1", active: bool = True, **kwargs) -> Excavator:
    values = dict(bucket_capacity=2.5, cycle_time=2.0)
    values.update(kwargs)
    return Excavator(id=unit_id, is_active=active, **values)


def _truck(unit_id: str = "truck-1", active: bool = True, **kwargs) -> Truck:
    values = dict(capacity=12.0, round_trip_time=15.0)
    values.update(kwargs)
    return Truck(id=unit_id, is_active=active, **values)


def test_single_unit_reference_scenario():
    result = calculate_timeline(2.5, 2.0, 12.0, 15.0, 500.0, 8.0)
    assert isinstance(result, CalculationResult)
    assert result.timeline_in_days > 0
    assert result.excavation_rate == pytest.approx(63.75)
    assert result.hauling_rate == pytest.approx(38.4)
    assert result.bottleneck is Bottleneck.HAULING
    assert result.total_hours == pytest.approx(500.0 / 38.4)
    assert result.timeline_in_days == math.ceil((500.0 / 38.4) / 8.0)
    assert result.confidence is ConfidenceLevel.HIGH
    assert result.assumptions == STANDARD_ASSUMPTIONS
    assert result.warnings == ()


@pytest.mark.parametrize(
    "volume, hours",
    [
        (0.0, 8.0),
        (-10.0, 8.0),
        (500.0, 0.0),
        (500.0, -1.0),
        (math.inf, 8.0),
        (math.nan, 8.0),
        (500.0, math.inf),
    ],
)
def test_single_unit_invalid_configuration(volume, hours):
    result = calculate_timeline(2.5, 2.0, 12.0, 15.0, volume, hours)
    assert isinstance(result, InvalidConfiguration)
    assert result.reason


def test_single_unit_non_positive_times_are_returned_not_raised():
    assert isinstance(calculate_timeline(2.5, 0.0, 12.0, 15.0, 500.0, 8.0), InvalidConfiguration)
    assert isinstance(calculate_timeline(2.5, 2.0, 12.0, -1.0, 500.0, 8.0), InvalidConfiguration)


def test_vanishing_rate_is_rejected_instead_of_overflowing():
    result = calculate_timeline(1e-320, 2.0, 12.0, 15.0, 500.0, 8.0)
    assert isinstance(result, InvalidConfiguration)


@pytest.mark.parametrize(
    "excavator_capacity, truck_capacity",
    [(2.5, math.nan), (math.nan, 12.0), (math.inf, 12.0)],
)
def test_non_finite_capacity_is_invalid_configuration(excavator_capacity, truck_capacity):
    result = calculate_timeline(excavator_capacity, 2.0, truck_capacity, 15.0, 500.0, 8.0)
    assert isinstance(result, InvalidConfiguration)


def test_fleet_with_nan_capacity_is_invalid_configuration():
    result = perform_calculation([_excavator()], [_truck(capacity=math.nan)], 500.0, 8.0)
    assert isinstance(result, InvalidConfiguration)


def test_short_job_rounds_up_to_one_day():
    rate = calculate_truck_rate(12.0, 15.0)
    result = calculate_timeline(2.5, 2.0, 12.0, 15.0, rate * 4.8, 8.0)
    assert result.total_hours == pytest.approx(4.8)
    assert result.timeline_in_days == 1


def test_exact_day_boundary():
    rate = calculate_truck_rate(12.0, 15.0)
    exact = calculate_timeline(2.5, 2.0, 12.0, 15.0, rate * 8.0, 8.0)
    assert exact.total_hours == 8.0
    assert exact.timeline_in_days == 1
    over = calculate_timeline(2.5, 2.0, 12.0, 15.0, rate * 8.0 * (1 + 1e-9), 8.0)
    assert over.timeline_in_days == 2


def test_ties_favour_excavation():
    # 80 cy/h raw at 0.85 and 85 cy/h raw at 0.8 both land on 68.0
    excavation = calculate_excavator_rate(2.0, 1.5)
    hauling = calculate_truck_rate(2.125, 1.5)
    assert excavation == hauling == 68.0
    result = calculate_timeline(2.0, 1.5, 2.125, 1.5, 100.0, 8.0)
    assert result.bottleneck is Bottleneck.EXCAVATION


def test_excavation_bottleneck_and_balance_warning():
    result = calculate_timeline(1.0, 5.0, 30.0, 10.0, 300.0, 8.0)
    assert result.bottleneck is Bottleneck.EXCAVATION
    assert any("adding excavators" in warning for warning in result.warnings)


def test_hauling_imbalance_warning_and_extra_warnings():
    result = calculate_timeline(
        5.0, 1.0, 10.0, 30.0, 300.0, 8.0, extra_warnings=("Soil conditions unverified",)
    )
    assert result.bottleneck is Bottleneck.HAULING
    assert "adding trucks" in result.warnings[0]
    assert result.warnings[-1] == "Soil conditions unverified"


def test_confidence_is_carried_through():
    result = calculate_timeline(2.5, 2.0, 12.0, 15.0, 500.0, 8.0, confidence=ConfidenceLevel.LOW)
    assert result.confidence is ConfidenceLevel.LOW


def test_repeated_calls_are_identical():
    first = calculate_timeline(2.5, 2.0, 12.0, 15.0, 500.0, 8.0)
    second = calculate_timeline(2.5, 2.0, 12.0, 15.0, 500.0, 8.0)
    assert first == second


class TestPerformCalculation:
    def test_inactive_only_excavators_are_insufficient(self):
        result = perform_calculation([_excavator(active=False)], [_truck()], 5000.0, 8.0)
        assert isinstance(result, InsufficientEquipment)
        assert result.missing == ("excavator",)

    def test_empty_fleets_are_insufficient(self):
        result = perform_calculation([], [], 5000.0, 8.0)
        assert isinstance(result, InsufficientEquipment)
        assert result.missing == ("excavator", "truck")
        assert "excavators and trucks" in result.describe()

    def test_bad_volume_or_hours(self):
        no_volume = perform_calculation([_excavator()], [_truck()], 0.0, 8.0)
        no_hours = perform_calculation([_excavator()], [_truck()], 500.0, 0.0)
        assert isinstance(no_volume, InvalidConfiguration)
        assert isinstance(no_hours, InvalidConfiguration)

    def test_active_unit_with_zero_cycle_is_invalid_configuration(self):
        result = perform_calculation([_excavator(cycle_time=0.0)], [_truck()], 500.0, 8.0)
        assert isinstance(result, InvalidConfiguration)
        assert "excavator-1" in result.reason

    def test_matches_single_unit_form_for_one_unit_each(self):
        fleet_result = perform_calculation([_excavator()], [_truck()], 500.0, 8.0)
        single_result = calculate_timeline(2.5, 2.0, 12.0, 15.0, 500.0, 8.0)
        assert fleet_result == single_result

    def test_fleet_rates_sum_active_units_only(self):
        excavators = [
            _excavator("excavator-1"),
            _excavator("excavator-2"),
            _excavator("excavator-3", active=False),
        ]
        trucks = [_truck(f"truck-{i}") for i in range(1, 5)]
        result = perform_calculation(excavators, trucks, 5000.0, 10.0)
        assert result.excavation_rate == pytest.approx(2 * 63.75)
        assert result.hauling_rate == pytest.approx(4 * 38.4)
        assert result.bottleneck is Bottleneck.EXCAVATION
        assert result.total_hours == pytest.approx(5000.0 / 127.5)
        assert result.timeline_in_days == 4


def test_pond_volume_cubic_yards():
    assert pond_volume_cubic_yards(27.0, 1.0, 1.0) == 1.0
    assert pond_volume_cubic_yards(40.0, 25.0, 5.0) == pytest.approx(5000.0 / 27.0)


def test_estimate_project_uses_pond_geometry():
    inputs = ProjectInputs(
        excavator_capacity=2.5,
        excavator_cycle_time=2.0,
        truck_capacity=12.0,
        truck_round_trip_time=15.0,
        work_hours_per_day=8.0,
        pond_length=54.0,
        pond_width=10.0,
        pond_depth=5.0,
    )
    result = estimate_project(inputs)
    assert result.total_hours == pytest.approx(100.0 / 38.4)
    assert result.timeline_in_days == 1


def test_base_calculation_error_describes_itself():
    assert CalculationError().describe() == "Calculation failed."
