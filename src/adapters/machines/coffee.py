"""Machine: coffee."""

from __future__ import annotations

from rich.console import Console

from core.domain.models import MILK_NOTICE
from core.interfaces.machine import Machine


class CoffeeMachine(Machine):
    """Coffee machine: milk is added and announced."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def add_milk(self) -> None:
        self.console.print(MILK_NOTICE)
