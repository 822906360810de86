from sudokuprep.core.domains import DOMAIN_STRATEGIES, peer_domain, trial_domain
from sudokuprep.core.grid import SudokuGrid

PUZZLE_4 = ".2..\n...1\n....\n...."


def test_empty_grid_allows_everything():
    grid = SudokuGrid(2)
    assert trial_domain(grid, 0) == frozenset({1, 2, 3, 4})
    assert peer_domain(grid, 0) == frozenset({1, 2, 3, 4})


def test_trial_domain_restores_grid():
    grid = SudokuGrid.parse(PUZZLE_4)
    before = grid.copy()
    assert trial_domain(grid, 0) == frozenset({1, 3, 4})
    assert grid == before


def test_strategies_agree_on_conflict_free_grid():
    grid = SudokuGrid.parse(PUZZLE_4)
    for index in sorted(grid.empty_field_indices()):
        assert trial_domain(grid, index) == peer_domain(grid, index)


def test_empty_domain():
    grid = SudokuGrid.parse(".23.\n.1..\n4...\n....")
    assert trial_domain(grid, 0) == frozenset()
    assert peer_domain(grid, 0) == frozenset()


def test_strategy_names():
    assert set(DOMAIN_STRATEGIES) == {"trial", "peers"}
