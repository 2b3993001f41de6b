"""Domain models (Pydantic v2).

Notes:
- These models describe *which* machines exist, not *how* they behave.
- The notices are fixed text; every machine prints exactly these strings.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

PREPARED_NOTICE = "prepared."
MILK_NOTICE = "milk added."


class MachineKind(str, Enum):
    """Registered machine variants, in demo order."""

    COFFEE = "coffee"
    TEA = "tea"

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return self.value.capitalize()


class MachineInfo(BaseModel):
    """Describes a registered machine variant.

    Why it exists:
    - Lets the CLI list machines (table or JSON) without instantiating them.
    """

    model_config = ConfigDict(frozen=True)

    kind: MachineKind = Field(
        ...,
        description="Registry key of the variant.",
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Class name of the implementation.",
    )
    adds_milk: bool = Field(
        default=False,
        description="Whether `add_milk` produces any output.",
    )
    description: str = Field(
        default="",
        max_length=256,
        description="Short summary for listings.",
    )
