"""Machine: tea.

Tea takes no milk here, so `add_milk` is accepted and does nothing. The
machine is still a full `Machine`: callers invoke it exactly like coffee.
"""

from __future__ import annotations

from rich.console import Console

from core.interfaces.machine import Machine


class TeaMachine(Machine):
    """Tea machine: `add_milk` is a no-op."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def add_milk(self) -> None:
        return None
