#!/usr/bin/env python

"""
oracle.py

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

**Backtracking solver: just gives the answer.**

No working is shown. It is used to check that a puzzle has a solution at all,
and that the logic solver got the right one.

Try a digit, carry on, undo when stuck; always the cell with fewest options
next. Only the solved cells of the grid given are used, never its candidates.
(See also :mod:`sudokulogic.integer_programming`.)

"""

import logging
from typing import Dict, List, Optional, Set, Tuple

from sudokulogic.grid import CandidateGrid

log = logging.getLogger(__name__)


# =============================================================================
# Backtracking
# =============================================================================

class _Board(object):
    """
    Mutable working copy for the backtracking search: one value per cell
    (0 for empty) plus the digits used in each row, column and box.
    """
    def __init__(self, grid: CandidateGrid) -> None:
        g = grid.geometry
        self.geometry = g
        self.values = [c if isinstance(c, int) else 0
                       for c in grid]  # type: List[int]
        self.used = [set() for _ in g.all_partitions]  # type: List[Set[int]]
        # Partition numbers for each cell: its row, column and box.
        n = g.n
        self.owners = [
            (g.row_number(i), n + g.column_number(i), 2 * n + g.box_number(i))
            for i in g.all_index
        ]  # type: List[Tuple[int, int, int]]
        self.consistent = True
        for i, v in enumerate(self.values):
            if not v:
                continue
            if any(v in self.used[p] for p in self.owners[i]):
                self.consistent = False
            for p in self.owners[i]:
                self.used[p].add(v)

    def options(self, index: int) -> List[int]:
        taken = set()
        for p in self.owners[index]:
            taken |= self.used[p]
        return [d for d in self.geometry.digits if d not in taken]

    def place(self, index: int, digit: int) -> None:
        self.values[index] = digit
        for p in self.owners[index]:
            self.used[p].add(digit)

    def unplace(self, index: int) -> None:
        digit = self.values[index]
        self.values[index] = 0
        for p in self.owners[index]:
            self.used[p].discard(digit)


def solve_backtracking(grid: CandidateGrid) -> Optional[CandidateGrid]:
    """
    Completes the grid by exhaustive search. Returns the completed grid, or
    ``None`` if the givens clash or there is no completion.
    """
    board = _Board(grid)
    if not board.consistent:
        log.debug("Backtracking: givens clash")
        return None
    empty = set(i for i, v in enumerate(board.values) if not v)
    # Undo stack: (cell, digits not yet tried there).
    stack = []  # type: List[Tuple[int, List[int]]]
    while True:
        if not empty:
            return CandidateGrid(board.values, rank=grid.rank)
        options = {i: board.options(i) for i in empty}  # type: Dict[int, List[int]]  # noqa
        index = min(sorted(empty), key=lambda k: len(options[k]))
        empty.remove(index)
        stack.append((index, options[index]))
        while True:
            if not stack:
                log.debug("Backtracking: no solution")
                return None
            index, untried = stack[-1]
            if board.values[index]:
                board.unplace(index)
            if untried:
                board.place(index, untried.pop(0))
                break
            stack.pop()
            empty.add(index)
