from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from pondcalc.cli._utils import issues_table, parse_field, print_notes, result_table
from pondcalc.cli.config import config_app
from pondcalc.config import CalculatorConfig, load_config
from pondcalc.core.errors import PondCalcValueError
from pondcalc.core.types import ProjectInputs
from pondcalc.estimate import (
    CalculationError,
    calculate_timeline,
    perform_calculation,
    pond_volume_cubic_yards,
)
from pondcalc.fleet import (
    POND_PROFILES,
    get_fleet_profile,
    get_pond_profile,
    list_fleet_profiles,
    load_fleet_csv,
)
from pondcalc.fleet.models import Excavator, Truck
from pondcalc.productivity import unit_rate_table
from pondcalc.validation import (
    FieldTag,
    InputValidationError,
    validate_all_inputs,
    validate_excavator_fleet,
    validate_truck_fleet,
)

app = typer.Typer(add_completion=False, no_args_is_help=True)
app.add_typer(config_app, name="config")
console = Console()

CONFIG_OPTION = typer.Option(None, "--config", help="YAML/JSON configuration file.")
DEBUG_OPTION = typer.Option(False, "--debug", help="Verbose tracebacks.")


def _enable_rich_tracebacks():
    """Enable rich tracebacks with local variables."""
    import rich.traceback as _rt

    _rt.install(show_locals=True, width=140, extra_lines=2)


def _load_config_or_exit(path: Path | None) -> CalculatorConfig:
    try:
        return load_config(path)
    except PondCalcValueError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(1)


def _field_or_exit(
    config: CalculatorConfig, field: FieldTag, raw: str | None, default: float
) -> float:
    result = parse_field(config.validation, field, raw, default)
    if isinstance(result, InputValidationError):
        console.print(f"[red]{field.value}:[/red] {result.describe()}")
        raise typer.Exit(1)
    return result


def _report_outcome(outcome, *, title: str, pond_volume: float) -> None:
    if isinstance(outcome, CalculationError):
        console.print(f"[red]Calculation failed:[/red] {outcome.describe()}")
        raise typer.Exit(1)
    console.print(result_table(outcome, title=title, pond_volume=pond_volume))
    print_notes(console, outcome)


def _check_fleet_limits(
    config: CalculatorConfig, excavators: tuple[Excavator, ...], trucks: tuple[Truck, ...]
) -> None:
    limits = config.fleet_limits
    if len(excavators) > limits.max_excavators:
        console.print(
            f"[red]Fleet limit exceeded:[/red] {len(excavators)} excavators "
            f"(max {limits.max_excavators})"
        )
        raise typer.Exit(1)
    if len(trucks) > limits.max_trucks:
        console.print(
            f"[red]Fleet limit exceeded:[/red] {len(trucks)} trucks (max {limits.max_trucks})"
        )
        raise typer.Exit(1)


@app.command()
def estimate(
    excavator_capacity: str | None = typer.Option(
        None, "--excavator-capacity", help="Bucket capacity (cubic yards)."
    ),
    cycle_time: str | None = typer.Option(None, "--cycle-time", help="Excavator cycle (minutes)."),
    truck_capacity: str | None = typer.Option(
        None, "--truck-capacity", help="Truck capacity (cubic yards)."
    ),
    round_trip: str | None = typer.Option(
        None, "--round-trip", help="Truck round-trip time (minutes)."
    ),
    work_hours: str | None = typer.Option(None, "--work-hours", help="Work hours per day."),
    length: str | None = typer.Option(None, "--length", help="Pond length (feet)."),
    width: str | None = typer.Option(None, "--width", help="Pond width (feet)."),
    depth: str | None = typer.Option(None, "--depth", help="Pond depth (feet)."),
    config_path: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
):
    """Estimate one excavator with one truck (omitted values use config defaults)."""
    if debug:
        _enable_rich_tracebacks()
    config = _load_config_or_exit(config_path)
    excavator_default = config.defaults.excavators[0]
    truck_default = config.defaults.trucks[0]
    project = config.project

    inputs = ProjectInputs(
        excavator_capacity=_field_or_exit(
            config,
            FieldTag.EXCAVATOR_CAPACITY,
            excavator_capacity,
            excavator_default.bucket_capacity,
        ),
        excavator_cycle_time=_field_or_exit(
            config, FieldTag.CYCLE_TIME, cycle_time, excavator_default.cycle_time
        ),
        truck_capacity=_field_or_exit(
            config, FieldTag.TRUCK_CAPACITY, truck_capacity, truck_default.capacity
        ),
        truck_round_trip_time=_field_or_exit(
            config, FieldTag.ROUND_TRIP_TIME, round_trip, truck_default.round_trip_time
        ),
        work_hours_per_day=_field_or_exit(
            config, FieldTag.WORK_HOURS, work_hours, project.work_hours_per_day
        ),
        pond_length=_field_or_exit(config, FieldTag.POND_LENGTH, length, project.pond_length),
        pond_width=_field_or_exit(config, FieldTag.POND_WIDTH, width, project.pond_width),
        pond_depth=_field_or_exit(config, FieldTag.POND_DEPTH, depth, project.pond_depth),
    )
    checked = validate_all_inputs(config.validation, inputs)
    if isinstance(checked, InputValidationError):
        console.print(f"[red]{checked.field}:[/red] {checked.describe()}")
        raise typer.Exit(1)

    volume = pond_volume_cubic_yards(checked.pond_length, checked.pond_width, checked.pond_depth)
    outcome = calculate_timeline(
        checked.excavator_capacity,
        checked.excavator_cycle_time,
        checked.truck_capacity,
        checked.truck_round_trip_time,
        volume,
        checked.work_hours_per_day,
    )
    _report_outcome(outcome, title="Pond excavation estimate", pond_volume=volume)


@app.command()
def fleet(
    fleet_csv: Path = typer.Argument(
        ..., dir_okay=False, help="Fleet CSV (type,id,capacity,minutes,name,active)."
    ),
    length: str | None = typer.Option(None, "--length", help="Pond length (feet)."),
    width: str | None = typer.Option(None, "--width", help="Pond width (feet)."),
    depth: str | None = typer.Option(None, "--depth", help="Pond depth (feet)."),
    work_hours: str | None = typer.Option(None, "--work-hours", help="Work hours per day."),
    config_path: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
):
    """Validate a fleet table and estimate the timeline with every active unit."""
    if debug:
        _enable_rich_tracebacks()
    config = _load_config_or_exit(config_path)
    try:
        excavators, trucks = load_fleet_csv(fleet_csv)
    except PondCalcValueError as exc:
        console.print(f"[red]Fleet error:[/red] {exc}")
        raise typer.Exit(1)
    _check_fleet_limits(config, excavators, trucks)

    issues = validate_excavator_fleet(config.validation, excavators)
    issues += validate_truck_fleet(config.validation, trucks)
    if issues:
        console.print(issues_table(issues, title="Fleet validation issues"))
        raise typer.Exit(1)

    project = config.project
    hours = _field_or_exit(config, FieldTag.WORK_HOURS, work_hours, project.work_hours_per_day)
    volume = pond_volume_cubic_yards(
        _field_or_exit(config, FieldTag.POND_LENGTH, length, project.pond_length),
        _field_or_exit(config, FieldTag.POND_WIDTH, width, project.pond_width),
        _field_or_exit(config, FieldTag.POND_DEPTH, depth, project.pond_depth),
    )

    df = unit_rate_table(excavators, trucks)
    t = Table(title=f"Fleet: {fleet_csv.name}")
    for column in ("type", "id", "name", "active", "rate_cy_per_hour"):
        t.add_column(column)
    for row in df.itertuples(index=False):
        t.add_row(
            row.type,
            row.id,
            row.name,
            "yes" if row.active else "no",
            f"{row.rate_cy_per_hour:.2f}",
        )
    console.print(t)

    outcome = perform_calculation(excavators, trucks, volume, hours)
    _report_outcome(outcome, title="Fleet excavation estimate", pond_volume=volume)


@app.command()
def profile(
    name: str = typer.Argument(..., help="Fleet profile name (see `pondcalc profiles`)."),
    pond: str = typer.Option("backyard.medium", "--pond", help="Pond profile <category>.<size>."),
):
    """Estimate a preset fleet against a preset pond."""
    try:
        fleet_profile = get_fleet_profile(name)
        pond_profile = get_pond_profile(pond)
    except KeyError as exc:
        console.print(f"[red]{exc.args[0]}[/red]")
        raise typer.Exit(1)
    volume = pond_volume_cubic_yards(pond_profile.length, pond_profile.width, pond_profile.depth)
    outcome = perform_calculation(
        fleet_profile.excavators, fleet_profile.trucks, volume, pond_profile.work_hours
    )
    _report_outcome(
        outcome,
        title=f"{fleet_profile.name} fleet / {pond_profile.description}",
        pond_volume=volume,
    )


@app.command()
def profiles():
    """List the available fleet and pond profiles."""
    t = Table(title="Fleet profiles")
    t.add_column("Name")
    t.add_column("Excavators")
    t.add_column("Trucks")
    t.add_column("Description")
    for item in list_fleet_profiles():
        t.add_row(item.name, str(len(item.excavators)), str(len(item.trucks)), item.description)
    console.print(t)

    ponds = Table(title="Pond profiles")
    ponds.add_column("Key")
    ponds.add_column("L x W x D (ft)")
    ponds.add_column("Hours/day")
    ponds.add_column("Description")
    for key in sorted(POND_PROFILES):
        p = POND_PROFILES[key]
        ponds.add_row(
            key,
            f"{p.length:g} x {p.width:g} x {p.depth:g}",
            f"{p.work_hours:g}",
            p.description,
        )
    console.print(ponds)


if __name__ == "__main__":
    app()
