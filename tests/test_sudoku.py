import sys

import pytest

pytest.importorskip("cardinal_pythonlib")
pytest.importorskip("mip")

from sudokulogic.sudoku import DEMO_SUDOKU_1, main, Sudoku  # noqa: E402

from conftest import NAKED_PAIR_PUZZLE, NAKED_PAIR_PUZZLE_SOLUTION  # noqa


def test_problem_layout():
    problem = Sudoku(DEMO_SUDOKU_1)
    lines = str(problem).splitlines()
    assert lines[0] == "... ... ..."
    assert lines[1] == "..2 3.1 45."
    assert lines[3] == ""
    assert len(lines) == 11


def test_demo_is_the_naked_pair_puzzle():
    assert Sudoku(DEMO_SUDOKU_1).problem.to_string() == NAKED_PAIR_PUZZLE


def test_solve_logic():
    problem = Sudoku(DEMO_SUDOKU_1)
    result = problem.solve_logic()
    assert problem.solved
    assert result.solved
    assert problem.grid.to_string() == NAKED_PAIR_PUZZLE_SOLUTION
    assert problem.working
    assert str(problem).splitlines()[0] == "358 264 971"


def test_solve_integer_programming():
    problem = Sudoku(DEMO_SUDOKU_1)
    problem.solve()
    assert problem.solved
    assert problem.grid.to_string() == NAKED_PAIR_PUZZLE_SOLUTION


def run_main(monkeypatch, *args) -> int:
    monkeypatch.setattr(sys, "argv", ["sudokulogic"] + list(args))
    with pytest.raises(SystemExit) as e:
        main()
    return e.value.code


def test_main_strategies(monkeypatch, capsys):
    assert run_main(monkeypatch, "strategies") == 0
    out = capsys.readouterr().out.split()
    assert out[0] == "single_candidate"
    assert out[-1] == "chain"


def test_main_working(monkeypatch, tmp_path):
    puzzle = tmp_path / "puzzle.txt"
    puzzle.write_text(DEMO_SUDOKU_1)
    assert run_main(monkeypatch, "working", str(puzzle),
                    "--upto", "naked_pair", "--maxrounds", "100") == 0
    assert run_main(monkeypatch, "check", str(puzzle)) == 0


def test_main_needs_command(monkeypatch):
    assert run_main(monkeypatch) == 1
