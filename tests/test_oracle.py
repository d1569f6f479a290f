import pytest

from sudokulogic.grid import CandidateGrid
from sudokulogic.oracle import solve_backtracking
from sudokulogic.orchestrator import Orchestrator

from conftest import (
    CHAIN_PUZZLE,
    CHAIN_PUZZLE_SOLUTION,
    EULER_1,
    EULER_1_SOLUTION,
    NAKED_PAIR_PUZZLE,
    NAKED_PAIR_PUZZLE_SOLUTION,
)

PUZZLES = [
    (EULER_1, EULER_1_SOLUTION),
    (CHAIN_PUZZLE, CHAIN_PUZZLE_SOLUTION),
    (NAKED_PAIR_PUZZLE, NAKED_PAIR_PUZZLE_SOLUTION),
]


@pytest.mark.parametrize("puzzle, solution", PUZZLES)
def test_backtracking(puzzle, solution):
    answer = solve_backtracking(CandidateGrid.from_string(puzzle))
    assert answer.to_string() == solution
    assert answer.is_complete
    assert answer.is_peer_consistent()


def test_backtracking_clash():
    clash = "11" + "0" * 79
    assert solve_backtracking(CandidateGrid.from_string(clash)) is None


def test_backtracking_no_completion():
    # Row 1 needs a 9 in cell 8, but column 9 already has one.
    puzzle = "12345678" + "0" * 9 + "9" + "0" * 63
    assert solve_backtracking(CandidateGrid.from_string(puzzle)) is None


def test_backtracking_empty_grid(open_grid):
    answer = solve_backtracking(open_grid)
    assert answer.is_complete
    assert answer.is_peer_consistent()


@pytest.mark.parametrize("puzzle, solution", PUZZLES)
def test_integer_programming_agrees(puzzle, solution):
    pytest.importorskip("mip")
    from sudokulogic.integer_programming import solve_integer_programming
    grid = CandidateGrid.from_string(puzzle)
    answer = solve_integer_programming(grid)
    assert answer.to_string() == solution
    assert Orchestrator().solve(grid).grid == answer
