"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables/panels are reused by several commands.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import MachineInfo


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Why here:
    - Avoids circular imports (main <-> doctor).
    - Never printed by `demo`/`brew`, whose stdout is the machine output only.
    """

    title = Text("DRINK MACHINES", style="bold cyan")
    subtitle = Text("Coffee • Tea • Substitutable machines", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_machines_table(machines: list[MachineInfo]) -> Table:
    """Rich table listing registered machines."""

    table = Table(title="Drink Machines")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Class", style="white")
    table.add_column("Adds milk", style="green")
    table.add_column("Description", style="dim")
    for info in machines:
        table.add_row(
            info.kind.value,
            info.name,
            "yes" if info.adds_milk else "no",
            info.description,
        )
    return table
