"""Typer CLI.

Running without a subcommand serves the demo: a coffee machine, then a tea
machine, through the same `serve` call.
"""

from __future__ import annotations

import json

import typer
from rich.console import Console

from cli import doctor
from cli.ui_components import build_machines_table, print_banner
from core.config import AppSettings
from core.domain.models import MachineKind
from core.logging_setup import configure_logging
from core.services.drink_pipeline import build_machine, describe_machines, run_demo, serve

app = typer.Typer(help="Drink machines: one contract, substitutable variants.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Configure logging; run the demo when no command is given."""

    settings = AppSettings()
    configure_logging(settings.log_level)
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        run_demo(_console)


@app.command()
def demo() -> None:
    """Serve a coffee machine, then a tea machine."""

    run_demo(_console)


@app.command()
def brew(
    kind: MachineKind = typer.Argument(..., help="Machine to serve with."),
) -> None:
    """Prepare a drink and add milk with a single machine."""

    serve(build_machine(kind, _console))


@app.command()
def machines(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print the catalog as JSON."),
) -> None:
    """List registered machines."""

    catalog = describe_machines()
    if as_json:
        payload = [info.model_dump(mode="json") for info in catalog]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    settings: AppSettings = ctx.obj or AppSettings()
    if settings.show_banner:
        print_banner(_console)
    _console.print(build_machines_table(catalog))


def run() -> None:
    app()
