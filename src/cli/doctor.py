"""Doctor command for environment diagnostics."""

from __future__ import annotations

import io

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings
from core.domain.models import MachineKind
from core.interfaces.machine import Machine
from core.services.drink_pipeline import build_machine, serve

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and machine checks.")

_console = Console()


def _check_machine(kind: MachineKind) -> tuple[bool, str]:
    """Build a machine on a silent console and serve it once."""

    try:
        machine = build_machine(kind, Console(file=io.StringIO()))
        if not isinstance(machine, Machine):
            return False, f"{type(machine).__name__} does not satisfy Machine"
        serve(machine)
        return True, type(machine).__name__
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics."""

    settings = AppSettings()

    table = Table(title="Drink Machines Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Log level", "OK", settings.log_level)
    table.add_row("Banner", "OK", "enabled" if settings.show_banner else "disabled")

    # Substitutability
    failures = 0
    for kind in MachineKind:
        ok, detail = _check_machine(kind)
        failures += 0 if ok else 1
        table.add_row(f"Machine: {kind.value}", "OK" if ok else "FAIL", detail)

    _console.print(table)

    if failures:
        _console.print(f"\n[yellow]Note:[/yellow] {failures} machine(s) failed the check.")
