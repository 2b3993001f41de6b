"""Core interfaces.

Why:
- Defines the contracts (Protocol) concrete machines implement.
- Services depend on the abstraction, never on a concrete variant.
"""

from core.interfaces.machine import Machine

__all__ = ["Machine"]
