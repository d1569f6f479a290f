#!/usr/bin/env python

"""
validation.py

===============================================================================

    Copyright (C) 2019-2019 Rudolf Cardinal (rudolf@pobox.com).

    This is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This software is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this software. If not, see <http://www.gnu.org/licenses/>.

===============================================================================

**Checking a puzzle before solving it, and the one-call entry point.**

"""

import logging
from typing import List, Sequence

from sudokulogic.common import DEFAULT_RANK, InvalidPuzzleError
from sudokulogic.grid import CandidateGrid, digit_str, parse_puzzle_string
from sudokulogic.oracle import solve_backtracking
from sudokulogic.orchestrator import Orchestrator, SolveResult
from sudokulogic.strategies import Strategy

log = logging.getLogger(__name__)


class ValidPuzzle(object):
    """
    A puzzle that has passed :func:`check_valid`.

    Attributes:
        grid_string: flat string, ``0`` for unknown cells
        formatted_grid: the starting candidate grid
        oracle_solution: the completed grid, from the backtracking solver
    """
    def __init__(self, grid_string: str, formatted_grid: CandidateGrid,
                 oracle_solution: CandidateGrid) -> None:
        self.grid_string = grid_string
        self.formatted_grid = formatted_grid
        self.oracle_solution = oracle_solution

    def __repr__(self) -> str:
        return f"ValidPuzzle({self.grid_string!r})"


def _duplicates(formatted: CandidateGrid) -> List[str]:
    clashes = []  # type: List[str]
    for partition in formatted.geometry.all_partitions:
        seen = set()
        for i in formatted.solved_cells(partition.cells):
            if formatted[i] in seen:
                clashes.append(f"{digit_str(formatted[i])} in {partition}")
            seen.add(formatted[i])
    return clashes


def check_valid(text: str, rank: int = DEFAULT_RANK) -> ValidPuzzle:
    """
    Checks a puzzle string.

    Raises:
        :exc:`sudokulogic.common.InputFormatError`: wrong length, or
            characters we don't understand
        :exc:`sudokulogic.common.InvalidPuzzleError`: duplicate givens, or no
            possible completion
    """
    values = parse_puzzle_string(text, rank=rank)
    formatted = CandidateGrid.from_values(values, rank=rank)
    grid_string = formatted.to_string()
    clashes = _duplicates(formatted)
    if clashes:
        raise InvalidPuzzleError(
            InvalidPuzzleError.DUPLICATE,
            f"Duplicate givens: {'; '.join(clashes)}")
    solution = solve_backtracking(formatted)
    if solution is None:
        raise InvalidPuzzleError(
            InvalidPuzzleError.UNSOLVABLE,
            f"Puzzle has no solution: {grid_string}")
    log.debug(f"Valid puzzle: {grid_string}")
    return ValidPuzzle(grid_string, formatted, solution)


class CheckAndSolveResult(object):
    """
    Validation plus a logic solve.
    """
    def __init__(self, puzzle: ValidPuzzle, result: SolveResult) -> None:
        self.puzzle = puzzle
        self.result = result

    @property
    def oracle_solution(self) -> CandidateGrid:
        return self.puzzle.oracle_solution

    @property
    def strategies_used(self) -> List[str]:
        return self.result.strategies_used

    @property
    def agrees_with_oracle(self) -> bool:
        """
        Did logic finish the puzzle, with the same answer as the oracle?
        """
        return (self.result.solved and
                self.result.grid == self.puzzle.oracle_solution)


def check_and_solve(text: str,
                    strategies: Sequence[Strategy] = None,
                    rank: int = DEFAULT_RANK) -> CheckAndSolveResult:
    """
    Validates the puzzle, then solves it by logic.
    """
    puzzle = check_valid(text, rank=rank)
    result = Orchestrator(strategies).solve(puzzle.formatted_grid)
    if result.solved and result.grid != puzzle.oracle_solution:
        # Possible for puzzles with more than one solution.
        log.warning("Logic solution differs from the backtracking solution")
    return CheckAndSolveResult(puzzle, result)
