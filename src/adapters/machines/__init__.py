"""Concrete drink machines.

Each module implements `core.interfaces.machine.Machine`.
"""

from adapters.machines.coffee import CoffeeMachine
from adapters.machines.tea import TeaMachine

__all__ = [
	"CoffeeMachine",
	"TeaMachine",
]
