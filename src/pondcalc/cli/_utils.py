"""Shared helpers for pondcalc CLI commands."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from pondcalc.config.models import ValidationRules
from pondcalc.estimate.models import CalculationResult
from pondcalc.validation import (
    FieldTag,
    FleetValidationIssue,
    InputValidationError,
    range_for,
    validate_decimal_precision,
    validate_field,
    validate_string_input,
)


def parse_field(
    rules: ValidationRules, field: FieldTag, raw: str | None, default: float
) -> float | InputValidationError:
    """Range-check a raw CLI value (or ``default`` when omitted) and enforce two decimals."""

    if raw is None:
        result = validate_field(rules, field, default)
    else:
        result = validate_string_input(field, range_for(rules, field), raw)
    if isinstance(result, InputValidationError):
        return result
    return validate_decimal_precision(result, field)


def result_table(result: CalculationResult, *, title: str, pond_volume: float) -> Table:
    table = Table(title=title)
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Pond volume", f"{pond_volume:,.1f} cubic yards")
    table.add_row("Excavation rate", f"{result.excavation_rate:,.2f} cubic yards/hour")
    table.add_row("Hauling rate", f"{result.hauling_rate:,.2f} cubic yards/hour")
    table.add_row("Bottleneck", result.bottleneck.value)
    table.add_row("Total hours", f"{result.total_hours:,.1f}")
    table.add_row("Timeline", f"{result.timeline_in_days} day(s)")
    table.add_row("Confidence", result.confidence.value)
    return table


def print_notes(console: Console, result: CalculationResult) -> None:
    for note in result.assumptions:
        console.print(f"[dim]assumption:[/dim] {note}")
    for note in result.warnings:
        console.print(f"[yellow]warning:[/yellow] {note}")


def issues_table(issues: Sequence[FleetValidationIssue], *, title: str) -> Table:
    table = Table(title=title)
    table.add_column("Unit")
    table.add_column("Field")
    table.add_column("Problem")
    for issue in issues:
        table.add_row(issue.unit_id, issue.field.value, issue.error.describe())
    return table


__all__ = ["issues_table", "parse_field", "print_notes", "result_table"]
