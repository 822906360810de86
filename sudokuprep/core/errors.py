"""Contract violations raised by the preprocessor."""

from __future__ import annotations

from .model import UnitKind


class PreconditionViolation(ValueError):
    """A caller broke the preprocessor's contract."""


class ConflictingGridError(PreconditionViolation):
    def __init__(self, conflicts: int) -> None:
        super().__init__(f"grid must be conflict-free, found {conflicts} conflicting pair(s)")
        self.conflicts = conflicts


class NotUndeterminedError(PreconditionViolation, KeyError):
    def __init__(self, index: int) -> None:
        super().__init__(f"cell {index} is not undetermined")
        self.index = index

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class UnitOutOfRangeError(PreconditionViolation, IndexError):
    def __init__(self, kind: UnitKind, unit: int, side_length: int) -> None:
        super().__init__(f"{kind.value} {unit} outside [0, {side_length})")
        self.kind = kind
        self.unit = unit
