"""Candidate domain computation.

Both strategies answer the same question: which values could the empty cell
at ``index`` hold right now?  ``trial_domain`` asks the grid by writing every
value and reading the global conflict count; ``peer_domain`` reads the values
already placed in the cell's row, column and block.  On a conflict-free grid
the two agree exactly, ``peer_domain`` is just much cheaper.
"""

from __future__ import annotations

from typing import Callable, Dict

from .grid import Grid
from .model import EMPTY, Domain


def trial_domain(grid: Grid, index: int) -> Domain:
    values = set()
    for value in range(grid.valid_min, grid.valid_max + 1):
        grid.write(index, value)
        try:
            if grid.conflict_count() == 0:
                values.add(value)
        finally:
            grid.write(index, EMPTY)
    return frozenset(values)


def peer_domain(grid: Grid, index: int) -> Domain:
    taken = set()
    for members in (grid.row_of(index), grid.column_of(index), grid.block_of(index)):
        taken.update(grid.read(i) for i in members if i != index)
    return frozenset(v for v in range(grid.valid_min, grid.valid_max + 1) if v not in taken)


DomainStrategy = Callable[[Grid, int], Domain]

DOMAIN_STRATEGIES: Dict[str, DomainStrategy] = {
    "trial": trial_domain,
    "peers": peer_domain,
}
