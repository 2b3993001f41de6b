"""Drink machine contract.

Why Protocol:
- A structural contract: anything with `prepare_drink` and `add_milk` is a
  machine, so callers never check concrete types.
- Variants still subclass it explicitly to inherit the shared
  `prepare_drink` behavior.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from rich.console import Console

from core.domain.models import PREPARED_NOTICE


@runtime_checkable
class Machine(Protocol):
    """Minimal contract for a drink machine.

    Design rules:
    - `prepare_drink` is shared and always prints the preparation notice.
    - `add_milk` is abstract: every variant must define it, even as a no-op.
    """

    console: Console

    def prepare_drink(self) -> None:
        """Print the preparation notice."""

        self.console.print(PREPARED_NOTICE)

    @abstractmethod
    def add_milk(self) -> None:
        """Add milk to the drink (variant-defined, may do nothing)."""

        ...
