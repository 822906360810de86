"""Grid storage and geometry consumed by the preprocessor.

Cells are addressed by a flat index in ``[0, side**2)``, row-major.  Blocks
are ``block_height x block_width`` rectangles numbered row-major, and offsets
inside a block run row-major as well, so for a 9x9 grid ``index_for_block(4, 0)``
is the top-left cell of the centre block.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Iterable, List, Protocol, Sequence, Tuple

from .model import EMPTY


class Grid(Protocol):
    """Everything the preprocessor needs from a puzzle surface."""

    @property
    def side_length(self) -> int: ...

    @property
    def valid_min(self) -> int: ...

    @property
    def valid_max(self) -> int: ...

    def empty_field_indices(self) -> set[int]: ...

    def index_for_row(self, unit: int, offset: int) -> int: ...

    def index_for_column(self, unit: int, offset: int) -> int: ...

    def index_for_block(self, unit: int, offset: int) -> int: ...

    def row_of(self, index: int) -> Tuple[int, ...]: ...

    def column_of(self, index: int) -> Tuple[int, ...]: ...

    def block_of(self, index: int) -> Tuple[int, ...]: ...

    def read(self, index: int) -> int: ...

    def write(self, index: int, value: int) -> None: ...

    def conflict_count(self) -> int: ...


class SudokuGrid:
    """Mutable flat-list grid with rectangular blocks."""

    def __init__(self, block_height: int, block_width: int | None = None, cells: Iterable[int] | None = None) -> None:
        if block_width is None:
            block_width = block_height
        if block_height < 1 or block_width < 1:
            raise ValueError("block dimensions must be positive")
        self.block_height = block_height
        self.block_width = block_width
        self._side = block_height * block_width
        size = self._side * self._side
        if cells is None:
            self._cells: List[int] = [EMPTY] * size
        else:
            self._cells = [int(v) for v in cells]
            if len(self._cells) != size:
                raise ValueError(f"expected {size} cells, got {len(self._cells)}")
            for i, v in enumerate(self._cells):
                self._check_value(i, v)
        self._units = [
            tuple(index_for(unit, offset) for offset in range(self._side))
            for index_for in (self.index_for_row, self.index_for_column, self.index_for_block)
            for unit in range(self._side)
        ]

    # ------------------------------------------------------------------
    # construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], block_height: int | None = None,
                  block_width: int | None = None) -> "SudokuGrid":
        side = len(rows)
        if any(len(row) != side for row in rows):
            raise ValueError("grid must be square")
        if block_height is None:
            block_height = math.isqrt(side)
            if block_height * block_height != side:
                raise ValueError(f"cannot infer square blocks for side {side}")
        if block_width is None:
            block_width = side // block_height
        if block_height * block_width != side:
            raise ValueError(f"blocks {block_height}x{block_width} do not tile side {side}")
        return cls(block_height, block_width, [v for row in rows for v in row])

    @classmethod
    def parse(cls, text: str, block_height: int | None = None, block_width: int | None = None) -> "SudokuGrid":
        """Build a grid from text, one row per non-blank line.

        Rows of single characters are used for sides up to 9 (``.`` or ``0``
        marks an empty cell); larger grids separate cells by whitespace.
        """
        lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
        rows = []
        for line in lines:
            tokens = line.split() if len(lines) > 9 else list(line.replace(" ", ""))
            rows.append([EMPTY if t == "." else int(t) for t in tokens])
        return cls.from_rows(rows, block_height, block_width)

    def copy(self) -> "SudokuGrid":
        return SudokuGrid(self.block_height, self.block_width, self._cells)

    # ------------------------------------------------------------------
    # Grid protocol
    # ------------------------------------------------------------------

    @property
    def side_length(self) -> int:
        return self._side

    @property
    def valid_min(self) -> int:
        return 1

    @property
    def valid_max(self) -> int:
        return self._side

    def empty_field_indices(self) -> set[int]:
        return {i for i, v in enumerate(self._cells) if v == EMPTY}

    def index_for_row(self, unit: int, offset: int) -> int:
        self._check_unit(unit, offset)
        return unit * self._side + offset

    def index_for_column(self, unit: int, offset: int) -> int:
        self._check_unit(unit, offset)
        return offset * self._side + unit

    def index_for_block(self, unit: int, offset: int) -> int:
        self._check_unit(unit, offset)
        blocks_across = self._side // self.block_width
        band, stack = divmod(unit, blocks_across)
        dr, dc = divmod(offset, self.block_width)
        return (band * self.block_height + dr) * self._side + stack * self.block_width + dc

    def row_of(self, index: int) -> Tuple[int, ...]:
        r = self._check_index(index) // self._side
        return tuple(self.index_for_row(r, i) for i in range(self._side))

    def column_of(self, index: int) -> Tuple[int, ...]:
        c = self._check_index(index) % self._side
        return tuple(self.index_for_column(c, i) for i in range(self._side))

    def block_of(self, index: int) -> Tuple[int, ...]:
        return tuple(self.index_for_block(self.block_index(index), i) for i in range(self._side))

    def read(self, index: int) -> int:
        return self._cells[self._check_index(index)]

    def write(self, index: int, value: int) -> None:
        self._check_value(self._check_index(index), value)
        self._cells[index] = value

    def conflict_count(self) -> int:
        total = 0
        for members in self._units:
            counts = Counter(self._cells[i] for i in members)
            counts.pop(EMPTY, None)
            total += sum(c * (c - 1) // 2 for c in counts.values())
        return total

    # ------------------------------------------------------------------

    def block_index(self, index: int) -> int:
        r, c = divmod(self._check_index(index), self._side)
        blocks_across = self._side // self.block_width
        return (r // self.block_height) * blocks_across + c // self.block_width

    def rows(self) -> List[List[int]]:
        return [self._cells[r * self._side:(r + 1) * self._side] for r in range(self._side)]

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._cells):
            raise IndexError(f"cell index {index} outside [0, {len(self._cells)})")
        return index

    def _check_unit(self, unit: int, offset: int) -> None:
        if not 0 <= unit < self._side or not 0 <= offset < self._side:
            raise IndexError(f"unit {unit} / offset {offset} outside [0, {self._side})")

    def _check_value(self, index: int, value: int) -> None:
        if value != EMPTY and not self.valid_min <= value <= self.valid_max:
            raise ValueError(f"value {value} for cell {index} outside [{self.valid_min}, {self.valid_max}]")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuGrid):
            return NotImplemented
        return (self.block_height, self.block_width, self._cells) == (
            other.block_height, other.block_width, other._cells)

    __hash__ = None  # mutable

    def __str__(self) -> str:
        width = len(str(self._side))
        return "\n".join(
            " ".join(".".rjust(width) if v == EMPTY else str(v).rjust(width) for v in row)
            for row in self.rows()
        )
