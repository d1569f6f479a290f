#!/usr/bin/env python

"""
integer_programming.py

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

**Solving by integer programming, which is close to magic.**

You say "here are my constraints; go" and a few milliseconds later you have a
valid answer. No working is shown; this is the quick way to an answer, and a
second opinion on the logic solver's.

"""

import logging
from typing import List, Optional

from mip import BINARY, Constr, Model, Var, xsum

from sudokulogic.common import ALMOST_ONE
from sudokulogic.grid import CandidateGrid

log = logging.getLogger(__name__)


# =============================================================================
# Functions for mip models
# =============================================================================

def debug_model_constraints(m: Model) -> None:
    """
    Shows constraints for a model.
    """
    lines = [f"Constraints in model {m.name!r}:"]
    for c in m.constrs:  # type: Constr
        lines.append(f"{c.name} == {c.expr}")
    log.debug("\n".join(lines))


def debug_model_vars(m: Model) -> None:
    """
    Show the names/values of model variables after fitting.
    """
    lines = [f"Variables in model {m.name!r}:"]
    for v in m.vars:  # type: Var
        lines.append(f"{v.name} == {v.x}")
    log.debug("\n".join(lines))


# =============================================================================
# Integer programming
# =============================================================================

def solve_integer_programming(grid: CandidateGrid) -> Optional[CandidateGrid]:
    """
    Completes the grid with a mixed-integer-programming solver. Returns the
    completed grid, or ``None`` if the model is infeasible.
    """
    g = grid.geometry
    n = g.n
    m = Model("Sudoku solver")

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Variables
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    x = [
        [
            m.add_var(f"x({g.pretty(i)}, digit={d + 1})", var_type=BINARY)
            for d in range(n)
        ] for i in g.all_index
    ]  # index as: x[cell_index][digit_zb]

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Constraints
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # One digit per cell
    for i in g.all_index:
        m += xsum(x[i][d] for d in range(n)) == 1
    # One of each digit per row, column and box
    for partition in g.all_partitions:
        for d in range(n):
            m += xsum(x[i][d] for i in partition.cells) == 1
    # Starting values
    for i in grid.solved_cells(g.all_index):
        m += x[i][grid[i] - 1] == 1

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Solve
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    debug_model_constraints(m)
    m.optimize()

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Read out answers
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    if not m.num_solutions:
        log.error("Unable to solve!")
        return None
    debug_model_vars(m)
    values = []  # type: List[int]
    for i in g.all_index:
        values.append(next(d + 1 for d in range(n)
                           if x[i][d].x > ALMOST_ONE))
    return CandidateGrid(values, rank=grid.rank)
