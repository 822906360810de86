"""Unit-kind registry and base classes."""

from __future__ import annotations

from typing import Dict, Tuple, Type

from ..core.model import UnitKind


class Unit:
    """Base unit adapter over a grid's geometry."""
    kind: UnitKind

    @staticmethod
    def index_for(grid, unit: int, offset: int) -> int:  # pragma: no cover - abstract
        raise NotImplementedError

    @staticmethod
    def members(grid, index: int) -> Tuple[int, ...]:  # pragma: no cover - abstract
        raise NotImplementedError

    @classmethod
    def cells(cls, grid, unit: int) -> Tuple[int, ...]:
        """All cell indices of ``unit``, in offset order."""
        return tuple(cls.index_for(grid, unit, offset) for offset in range(grid.side_length))


UNIT_REGISTRY: Dict[UnitKind, Type[Unit]] = {}


def register_unit(cls: Type[Unit]) -> Type[Unit]:
    UNIT_REGISTRY[cls.kind] = cls
    return cls


from . import row, column, block  # noqa: E402,F401  populate the registry
