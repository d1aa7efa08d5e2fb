from __future__ import annotations

import warnings
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from pondcalc.config import config_warnings, load_config
from pondcalc.core.errors import PondCalcValueError

config_app = typer.Typer(
    add_completion=False, no_args_is_help=True, help="Configuration maintenance utilities."
)
console = Console()


@config_app.command("validate")
def validate_config(
    path: Path | None = typer.Argument(
        None,
        dir_okay=False,
        help="YAML/JSON configuration file (defaults to the packaged configuration).",
    ),
) -> None:
    """Validate a configuration file and print a summary."""
    source = str(path) if path is not None else "packaged defaults"
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            config = load_config(path)
    except PondCalcValueError as exc:
        console.print(f"[red]Configuration validation failed:[/red] {exc}")
        raise typer.Exit(1)

    t = Table(title=f"Configuration: {source}")
    t.add_column("Entry")
    t.add_column("Value")
    t.add_row("Version", config.version)
    t.add_row("Default excavators", str(len(config.defaults.excavators)))
    t.add_row("Default trucks", str(len(config.defaults.trucks)))
    t.add_row(
        "Fleet limits",
        f"{config.fleet_limits.max_excavators} excavators, {config.fleet_limits.max_trucks} trucks",
    )
    for name, rng in config.validation:
        t.add_row(f"Range: {name}", f"[{rng.min:g}, {rng.max:g}]")
    console.print(t)
    for message in config_warnings(config):
        console.print(f"[yellow]warning:[/yellow] {message}")
    console.print("[green]Configuration is valid.[/green]")


__all__ = ["config_app"]
