import pytest

from sudokulogic.common import InputFormatError
from sudokulogic.grid import CandidateGrid, parse_puzzle_string

from conftest import EULER_1

EULER_1_LAYOUT = """
# Project Euler 96, grid 01

..3 .2. 6..
9.. 3.5 ..1
..1 8.6 4..

..8 1.2 9..
7.. ... ..8
..6 7.8 2..

..2 6.9 5..
8.. 2.3 ..9
..5 .1. 3..
"""


def test_from_string_sets_candidates(euler_grid):
    assert euler_grid[2] == 3
    # Row 1 has 3, 2, 6; column 1 has 9, 7, 8; box 1 has 9, 3, 1.
    assert euler_grid[0] == frozenset({4, 5})
    assert euler_grid.is_open(0)
    assert euler_grid.is_solved(2)
    assert euler_grid.possible(2) == frozenset({3})
    assert euler_grid.n_open == 49
    assert euler_grid.is_peer_consistent()
    assert not euler_grid.is_complete
    assert not euler_grid.is_contradictory


def test_layouts_agree():
    assert (CandidateGrid.from_string(EULER_1_LAYOUT) ==
            CandidateGrid.from_string(EULER_1))
    assert (CandidateGrid.from_string(EULER_1.replace("0", ".")) ==
            CandidateGrid.from_string(EULER_1))


def test_to_string_round_trip(euler_grid):
    assert euler_grid.to_string() == EULER_1


@pytest.mark.parametrize("text", [
    EULER_1[:-1],
    EULER_1 + "0",
    EULER_1[:-1] + "x",
    "",
])
def test_bad_input(text):
    with pytest.raises(InputFormatError):
        parse_puzzle_string(text)


def test_bad_values():
    with pytest.raises(InputFormatError):
        CandidateGrid.from_values([10] + [None] * 80)
    with pytest.raises(InputFormatError):
        CandidateGrid.from_values([None] * 80)


def test_replace_copies(euler_grid):
    changed = euler_grid.replace({0: 4})
    assert changed[0] == 4
    assert euler_grid[0] == frozenset({4, 5})
    assert euler_grid.replace({}) is euler_grid


def test_queries(euler_grid):
    row_1 = euler_grid.geometry.rows[0].cells
    assert euler_grid.solved_cells(row_1) == [2, 4, 6]
    assert euler_grid.unique_solved_values(row_1) == [2, 3, 6]
    assert euler_grid.unique_open_values(row_1) == [1, 4, 5, 7, 8, 9]
    assert 0 in euler_grid.open_cells_with(row_1, 4)
    assert euler_grid.open_cells_with(row_1, [4, 5]) == [0, 1]
    assert euler_grid.values([0, 2]) == [frozenset({4, 5}), 3]


def test_contradiction_and_completion():
    cells = list(range(1, 10)) * 9
    assert CandidateGrid(cells).is_complete
    cells[0] = frozenset()
    grid = CandidateGrid(cells)
    assert grid.is_contradictory
    assert "!" in str(grid)


def test_display(euler_grid):
    lines = str(euler_grid).splitlines()
    assert len(lines) == 35
    assert all(len(line) == 35 for line in lines)
