"""Drink serving orchestration.

This module owns the machine registry and the serving flow, so the CLI
only parses arguments and renders results. Every helper takes the abstract
`Machine`; none of them look at the concrete variant.
"""

from __future__ import annotations

import io
import logging
from typing import Callable, Iterable

from rich.console import Console

from adapters.machines import CoffeeMachine, TeaMachine
from core.domain.models import MachineInfo, MachineKind
from core.interfaces.machine import Machine

logger = logging.getLogger(__name__)

MachineFactory = Callable[[Console | None], Machine]

MACHINE_REGISTRY: dict[MachineKind, MachineFactory] = {
    MachineKind.COFFEE: CoffeeMachine,
    MachineKind.TEA: TeaMachine,
}

_DESCRIPTIONS: dict[MachineKind, str] = {
    MachineKind.COFFEE: "Prepares coffee and announces the added milk.",
    MachineKind.TEA: "Prepares tea; adding milk is accepted and does nothing.",
}


def build_machine(kind: MachineKind, console: Console | None = None) -> Machine:
    """Instantiate the machine registered for `kind`."""

    factory = MACHINE_REGISTRY[kind]
    return factory(console)


def serve(machine: Machine) -> None:
    """Prepare a drink and add milk, whatever the machine is."""

    logger.debug("Serving with %s", type(machine).__name__)
    machine.prepare_drink()
    machine.add_milk()


def serve_all(machines: Iterable[Machine]) -> None:
    for machine in machines:
        serve(machine)


def run_demo(console: Console | None = None) -> None:
    """Serve one coffee machine, then one tea machine."""

    serve_all(build_machine(kind, console) for kind in MachineKind)


def _adds_milk(factory: MachineFactory) -> bool:
    """Whether `add_milk` prints anything, checked on a silent console."""

    buffer = io.StringIO()
    factory(Console(file=buffer)).add_milk()
    return bool(buffer.getvalue())


def describe_machines() -> list[MachineInfo]:
    """Catalog of registered machines, in `MachineKind` order."""

    infos: list[MachineInfo] = []
    for kind in MachineKind:
        factory = MACHINE_REGISTRY[kind]
        description = _DESCRIPTIONS[kind]
        infos.append(
            MachineInfo(
                kind=kind,
                name=getattr(factory, "__name__", kind.label()),
                adds_milk=_adds_milk(factory),
                description=description,
            )
        )
    return infos
