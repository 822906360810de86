import pytest

from sudokuprep.core.grid import SudokuGrid
from sudokuprep.core.model import EMPTY

SOLVED_4 = """
1234
3412
2143
4321
"""


def test_parse_and_render():
    grid = SudokuGrid.parse("12..\n....\n....\n...4")
    assert grid.side_length == 4
    assert grid.read(0) == 1 and grid.read(2) == EMPTY
    assert str(grid).splitlines()[0] == "1 2 . ."


def test_empty_field_indices():
    grid = SudokuGrid.parse("12..\n3412\n2143\n4321")
    assert grid.empty_field_indices() == {2, 3}


def test_index_mapping_9x9():
    grid = SudokuGrid(3)
    assert grid.index_for_row(2, 5) == 23
    assert grid.index_for_column(2, 5) == 47
    assert grid.index_for_block(4, 0) == 30
    assert grid.index_for_block(8, 8) == 80
    assert grid.block_of(40) == (30, 31, 32, 39, 40, 41, 48, 49, 50)


def test_rectangular_blocks():
    grid = SudokuGrid(2, 3)
    assert grid.side_length == 6
    assert grid.valid_max == 6
    assert grid.index_for_block(1, 0) == 3
    assert grid.index_for_block(2, 4) == 19
    assert grid.block_index(19) == 2
    assert 19 in grid.block_of(19)


@pytest.mark.parametrize("dims", [(2, 2), (3, 3), (2, 3)])
def test_unit_mappings_are_bijections(dims):
    grid = SudokuGrid(*dims)
    side = grid.side_length
    for index_for in (grid.index_for_row, grid.index_for_column, grid.index_for_block):
        seen = [index_for(unit, offset) for unit in range(side) for offset in range(side)]
        assert sorted(seen) == list(range(side * side))


def test_members_include_index():
    grid = SudokuGrid(3)
    for index in (0, 40, 80):
        for members in (grid.row_of(index), grid.column_of(index), grid.block_of(index)):
            assert index in members
            assert len(members) == 9


def test_conflict_count():
    assert SudokuGrid.parse(SOLVED_4).conflict_count() == 0
    assert SudokuGrid.parse("11..\n....\n....\n....").conflict_count() == 2
    assert SudokuGrid.parse("222.\n....\n....\n....").conflict_count() == 4


def test_write_and_copy():
    grid = SudokuGrid(2)
    clone = grid.copy()
    grid.write(5, 3)
    assert grid.read(5) == 3
    assert clone.read(5) == EMPTY
    assert grid != clone


def test_invalid_input():
    grid = SudokuGrid(2)
    with pytest.raises(ValueError):
        grid.write(0, 5)
    with pytest.raises(IndexError):
        grid.write(16, 1)
    with pytest.raises(ValueError):
        SudokuGrid.from_rows([[1, 2], [3]])
    with pytest.raises(ValueError):
        SudokuGrid.from_rows([[EMPTY] * 6 for _ in range(6)])
    with pytest.raises(ValueError):
        SudokuGrid(2, cells=[1, 2, 3])
