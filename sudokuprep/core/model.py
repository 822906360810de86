from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet

EMPTY = 0


class UnitKind(str, Enum):
    """The three kinds of unit every cell belongs to."""
    ROW = "row"
    COLUMN = "column"
    BLOCK = "block"


class Rule(str, Enum):
    """Deduction that forced a placement."""
    NAKED_SINGLE = "naked single"
    HIDDEN_SINGLE = "hidden single"


@dataclass(frozen=True)
class Placement:
    """A value committed to the grid during propagation."""
    index: int
    value: int
    rule: Rule
    iteration: int


Index = int
Value = int
Domain = FrozenSet[Value]
