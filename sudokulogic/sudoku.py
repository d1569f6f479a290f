#!/usr/bin/env python

"""
sudoku.py

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

**Solves Sudoku puzzles.**

It uses two approaches:

- Integer programming, which is close to magic.
  You say "here are my constraints; go" and a few milliseconds later you have
  a valid answer.

- Logic, like a human would do, one step at a time, showing the working.
  There are a large variety of these from a human's perspective (though only
  the simplest are required for the majority of puzzles encountered in the
  wild); see e.g. http://www.sudokusnake.com/techniques.php.

- Sudoku Snake technique names implemented:

  - Beginner:

    - Hidden Singles (single candidate per partition)
    - Naked Singles (single candidate)
    - Pointing, Claiming (box narrowing)

  - Intermediate

    - Hidden Subsets
    - Naked Subsets

  - Advanced

    - X-Wing
    - Swordfish
    - Jellyfish

  - Master

    - Chains, in the simple sense of playing out both candidates of a
      two-candidate cell and keeping what both agree on.

"""

import argparse
import logging
import sys
from typing import List, Sequence

from cardinal_pythonlib.argparse_func import RawDescriptionArgumentDefaultsHelpFormatter  # noqa
from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from sudokulogic.common import (
    DEFAULT_RANK,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    NEWLINE,
    run_guard,
    SPACE,
    UNKNOWN,
)
from sudokulogic.grid import CandidateGrid, digit_str
from sudokulogic.integer_programming import solve_integer_programming
from sudokulogic.orchestrator import (
    default_strategies,
    limit_strategies_to,
    Orchestrator,
    SolveResult,
    strategy_names,
)
from sudokulogic.strategies import Strategy
from sudokulogic.validation import check_and_solve

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

DEMO_SUDOKU_1 = """
# Coton 54, Coton Community News Dec 2019-Jan 2020

... ... ...
..2 3.1 45.
.1. ... .6.

.47 .5. 38.
... 7.3 ...
.36 ... 14.

.7. ... .9.
.91 4.5 6..
... ..9 ...
"""


# =============================================================================
# Sudoku
# =============================================================================

class Sudoku(object):
    """
    Represents and solves Sudoku puzzles.
    """

    def __init__(self, string_version: str, rank: int = DEFAULT_RANK) -> None:
        """
        Args:
            string_version:
                String representation of the puzzle. Rules as below.
            rank:
                rank of the puzzle (3 for normal 9x9 Sudoku)

        - Lines starting with ``#`` are comments.
        - Use numbers 1-9 for known cells.
        - ``.`` or ``0`` represents an unknown cell.
        - Spaces and blank lines are ignored, so you can lay it out as you
          like, or put it all on one line.
        """
        self.rank = rank
        self.n = rank ** 2
        self.problem = CandidateGrid.from_string(string_version, rank=rank)
        self.grid = self.problem
        self.solved = False
        self.working = []  # type: List[str]
        self.result = None  # type: SolveResult

    # -------------------------------------------------------------------------
    # String representations
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.solution_str() if self.solved else self.problem_str()

    def problem_str(self) -> str:
        """
        Creates the string representation of the problem.
        """
        return self._make_string(self.problem)

    def solution_str(self) -> str:
        """
        Creates the string representation of the solution (so far).
        """
        return self._make_string(self.grid)

    def _make_string(self, grid: CandidateGrid) -> str:
        x = ""
        for index, cell in enumerate(grid):
            row_zb = grid.geometry.row_number(index)
            col_zb = grid.geometry.column_number(index)
            x += digit_str(cell) if isinstance(cell, int) else UNKNOWN
            if col_zb % self.rank == self.rank - 1 and col_zb < self.n - 1:
                x += SPACE
            if col_zb == self.n - 1 and row_zb < self.n - 1:
                x += NEWLINE
                if row_zb % self.rank == self.rank - 1:
                    x += NEWLINE
        return x

    # -------------------------------------------------------------------------
    # Solve via integer programming
    # -------------------------------------------------------------------------

    def solve(self) -> None:
        """
        Solves the problem, writing to :attr:`solved` and :attr:`grid`.
        """
        if self.solved:
            log.info("Already solved")
            return
        answer = solve_integer_programming(self.problem)
        if answer is not None:
            self.solved = True
            self.grid = answer
            self.working.append("Solved via integer programming method")

    # -------------------------------------------------------------------------
    # Solve via puzzle logic and show working
    # -------------------------------------------------------------------------

    def solve_logic(self, strategies: Sequence[Strategy] = None,
                    max_rounds: int = None,
                    timeout_s: float = None) -> SolveResult:
        """
        Solve via conventional logic, and save our working.
        """
        if self.solved:
            log.info("Already solved")
            return self.result
        orchestrator = Orchestrator(strategies=strategies,
                                    max_rounds=max_rounds,
                                    timeout_s=timeout_s)
        self.result = orchestrator.solve(self.problem)
        self.grid = self.result.grid
        self.solved = self.result.solved
        self.working.extend(self.result.working)
        if not self.solved:
            log.warning(f"Unable to finish by logic; possibilities are:\n"
                        f"{self.grid}")
        return self.result


# =============================================================================
# main
# =============================================================================

def main() -> None:
    """
    Command-line entry point.
    """
    cmd_check = "check"
    cmd_demo = "demo"
    cmd_solve = "solve"
    cmd_strategies = "strategies"
    cmd_working = "working"

    help_filename = (
        "Puzzle filename to read. Must contain text in format as above.")

    parser = argparse.ArgumentParser(
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter,
        description=(
            f"Solve Sudoku puzzles. Format is:\n\n"
            f"{DEMO_SUDOKU_1}"
        )
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Be verbose")
    subparsers = parser.add_subparsers(
        dest="command",
        help="Append --help for more help")

    parser_solve = subparsers.add_parser(
        cmd_solve, help="Solve from a file, via integer programming")
    parser_solve.add_argument(
        "filename", type=str, default="", help=help_filename)

    parser_working = subparsers.add_parser(
        cmd_working,
        help="Solve from a file, via puzzle logic, showing working")
    parser_working.add_argument(
        "filename", type=str, default="", help=help_filename)
    parser_working.add_argument(
        "--upto", type=str, default=None, choices=strategy_names(),
        help="Use strategies only up to and including this one")
    parser_working.add_argument(
        "--nochains", action="store_true", help="Don't use chain reasoning")
    parser_working.add_argument(
        "--maxrounds", type=int, default=None,
        help="Stop after this many rounds")
    parser_working.add_argument(
        "--timeout", type=float, default=None,
        help="Stop after this many seconds")

    parser_check = subparsers.add_parser(
        cmd_check,
        help="Check a puzzle from a file is valid, then try it by logic")
    parser_check.add_argument(
        "filename", type=str, default="", help=help_filename)

    _parser_demo = subparsers.add_parser(cmd_demo, help="Run demo")
    _parser_strategies = subparsers.add_parser(
        cmd_strategies, help="List strategy names, simplest first")

    args = parser.parse_args()
    main_only_quicksetup_rootlogger(level=logging.DEBUG if args.verbose
                                    else logging.INFO)

    if not args.command:
        print("Must specify command")
        sys.exit(EXIT_FAILURE)
    if args.command == cmd_strategies:
        for name in strategy_names():
            print(name)
        sys.exit(EXIT_SUCCESS)
    if args.command == cmd_demo:
        problem = Sudoku(DEMO_SUDOKU_1)
        log.info(f"Solving:\n{problem}")
        problem.solve_logic()
        log.info(f"Answer:\n{problem}")
        sys.exit(EXIT_SUCCESS)

    log.info(f"Reading {args.filename}")
    with open(args.filename, "rt") as f:
        string_version = f.read()

    if args.command == cmd_check:
        checked = check_and_solve(string_version)
        log.info(f"Valid puzzle: {checked.puzzle.grid_string}")
        log.info(f"Strategies used: {checked.strategies_used}")
        if checked.agrees_with_oracle:
            log.info("Solved by logic; agrees with backtracking solution")
        else:
            log.warning(f"Not solved by logic; backtracking solution is "
                        f"{checked.oracle_solution.to_string()}")
        sys.exit(EXIT_SUCCESS)

    problem = Sudoku(string_version)
    log.info(f"Solving:\n{problem}")
    if args.command == cmd_solve:
        problem.solve()
    else:
        strategies = default_strategies(with_chains=not args.nochains)
        if args.upto:
            strategies = limit_strategies_to(args.upto, strategies)
        problem.solve_logic(strategies=strategies,
                            max_rounds=args.maxrounds,
                            timeout_s=args.timeout)
    log.info(f"Answer:\n{problem}")
    sys.exit(EXIT_SUCCESS)


# =============================================================================
# Command-line entry point
# =============================================================================

def cli() -> None:
    run_guard(main)


if __name__ == "__main__":
    cli()
