"""Constraint propagation run before a search takes over the grid.

Constructing a :class:`Preprocessor` performs the whole pass:

1. every empty cell of the grid becomes undetermined;
2. rounds of propagation run until nothing changes.  A round recomputes the
   domain of every undetermined cell in ascending index order and commits any
   naked single on the spot.  If the sweep placed nothing, the cells are
   scanned for a hidden single and the first one found is committed;
3. the surviving undetermined cells are grouped per row, column and block.

The grid is written to in place and must not be shared while this runs.
Afterwards the object only answers queries.
"""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

from ..io.config import PreprocessorConfig
from ..units import UNIT_REGISTRY
from .constraints import HIDDEN_SINGLE_SCOPES, forced_value
from .domains import DOMAIN_STRATEGIES
from .errors import ConflictingGridError, NotUndeterminedError, UnitOutOfRangeError
from .grid import Grid
from .model import Domain, Placement, Rule, UnitKind

log = logging.getLogger(__name__)


class Preprocessor:

    def __init__(self, grid: Grid, config: PreprocessorConfig | None = None) -> None:
        self._grid = grid
        self._config = config or PreprocessorConfig()
        self._compute_domain = DOMAIN_STRATEGIES[self._config.domain_strategy]
        self._hidden_single = HIDDEN_SINGLE_SCOPES[self._config.hidden_single_scope]
        self._undetermined: Set[int] = set()
        self._domains: Dict[int, Domain] = {}
        self._groups: Dict[UnitKind, Dict[int, Tuple[int, ...]]] = {}
        self._placements: List[Placement] = []
        self._iterations = 0
        self._preprocess()

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    def undetermined_cells(self) -> FrozenSet[int]:
        return frozenset(self._undetermined)

    def undetermined_cells_in_row(self, row: int) -> Tuple[int, ...]:
        return self._group(UnitKind.ROW, row)

    def undetermined_cells_in_column(self, column: int) -> Tuple[int, ...]:
        return self._group(UnitKind.COLUMN, column)

    def undetermined_cells_in_block(self, block: int) -> Tuple[int, ...]:
        return self._group(UnitKind.BLOCK, block)

    def domain_of(self, index: int) -> Domain:
        try:
            return self._domains[index]
        except KeyError:
            raise NotUndeterminedError(index) from None

    def is_value_in_domain(self, index: int, value: int) -> bool:
        return value in self.domain_of(index)

    @property
    def feasible(self) -> bool:
        """False when some undetermined cell has no candidate left."""
        return all(self._domains.values())

    def infeasible_cells(self) -> FrozenSet[int]:
        return frozenset(i for i, d in self._domains.items() if not d)

    @property
    def placements(self) -> Tuple[Placement, ...]:
        """Cells committed during propagation, in commit order."""
        return tuple(self._placements)

    @property
    def iterations(self) -> int:
        return self._iterations

    @property
    def initial_undetermined(self) -> int:
        return len(self._undetermined) + len(self._placements)

    # ------------------------------------------------------------------
    # propagation
    # ------------------------------------------------------------------

    def _preprocess(self) -> None:
        if self._config.validate_input:
            conflicts = self._grid.conflict_count()
            if conflicts:
                raise ConflictingGridError(conflicts)
        self._undetermined = set(self._grid.empty_field_indices())
        log.debug("Preprocessing %d empty cell(s)", len(self._undetermined))
        self._presolve()
        self._group_undetermined()
        log.info("Fixed point after %d round(s): %d placed, %d undetermined",
                 self._iterations, len(self._placements), len(self._undetermined))
        if not self.feasible:
            log.warning("Grid is infeasible, no candidates left for cell(s) %s",
                        sorted(self.infeasible_cells()))

    def _presolve(self) -> None:
        changed = True
        while changed:
            self._iterations += 1
            changed = self._sweep_domains() or self._insert_hidden_single()

    def _sweep_domains(self) -> bool:
        """Recompute every domain, committing naked singles as they appear.

        Returns True when at least one cell was committed.
        """
        self._domains = {}
        placed = False
        for index in sorted(self._undetermined):
            domain = self._compute_domain(self._grid, index)
            value = forced_value(domain)
            if value is not None:
                self._commit(index, value, Rule.NAKED_SINGLE)
                placed = True
            else:
                self._domains[index] = domain
        return placed

    def _insert_hidden_single(self) -> bool:
        for index in sorted(self._undetermined):
            units = [cls.members(self._grid, index) for cls in UNIT_REGISTRY.values()]
            value = self._hidden_single(index, self._domains[index], units, self._domains)
            if value is not None:
                self._commit(index, value, Rule.HIDDEN_SINGLE)
                return True
        return False

    def _commit(self, index: int, value: int, rule: Rule) -> None:
        self._grid.write(index, value)
        self._undetermined.discard(index)
        self._domains.pop(index, None)
        self._placements.append(Placement(index, value, rule, self._iterations))
        log.debug("Round %d: %s puts %d in cell %d", self._iterations, rule.value, value, index)

    # ------------------------------------------------------------------
    # grouping
    # ------------------------------------------------------------------

    def _group_undetermined(self) -> None:
        side = self._grid.side_length
        for kind, cls in UNIT_REGISTRY.items():
            self._groups[kind] = {
                unit: tuple(i for i in cls.cells(self._grid, unit) if i in self._undetermined)
                for unit in range(side)
            }

    def _group(self, kind: UnitKind, unit: int) -> Tuple[int, ...]:
        groups = self._groups[kind]
        if unit not in groups:
            raise UnitOutOfRangeError(kind, unit, self._grid.side_length)
        return groups[unit]

    def __repr__(self) -> str:
        return (f"Preprocessor(undetermined={len(self._undetermined)}, "
                f"placed={len(self._placements)}, feasible={self.feasible})")


def preprocess(grid: Grid, config: Optional[PreprocessorConfig] = None) -> Preprocessor:
    """Run propagation on ``grid`` and return the query surface."""
    return Preprocessor(grid, config)
