#!/usr/bin/env python

"""
subsets.py

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

**Naked and hidden subsets (pairs, triples, quads).**

Example: in row 1, if digit 4 could be in columns 5/7 only, and digit 8
could be in columns 5/7 only, then either '4' goes in column 5 and '8'
goes in column 7, or vice versa - but these cells can't possibly
contain anything other than '4' or '8'.

.. code-block:: none

    <not_4_not_8>
    4, 8, 9             # Cell A. Inference: can only contain 4, 8.
    <not_4_not_8>
    <not_4_not_8>
    4, 8                # Cell B. (Inference: can only contain 4, 8.)
    <not_4_not_8>

That's a *hidden* pair: two digits confined to two cells, so those cells lose
their other candidates. The *naked* version looks at it from the cells' side:
if two cells in a row can only hold {4, 8} between them, no other cell in the
row can hold 4 or 8.

.. code-block:: none

    <?>                 # Inference: cannot contain 4 or 8
    4, 8    # Cell A
    <?>                 # Inference: cannot contain 4 or 8
    <?>                 # Inference: cannot contain 4 or 8
    4, 8    # Cell B
    <?>                 # Inference: cannot contain 4 or 8

Both generalize to groups of n (we use n = 2, 3, 4). See also
http://pi.math.cornell.edu/~mec/Summer2009/Mahmood/Solve.html

"""

from itertools import combinations
import logging
from typing import List

from sudokulogic.common import ConfigurationError
from sudokulogic.grid import CandidateGrid
from sudokulogic.solution import is_only, Solution, Update
from sudokulogic.strategies import as_partition, ScopedStrategy, SolutionList

log = logging.getLogger(__name__)

GROUP_NAMES = {2: "Pair", 3: "Triple", 4: "Quad"}


def _check_groupsize(groupsize: int) -> None:
    if groupsize not in GROUP_NAMES:
        raise ConfigurationError(
            f"Subset size must be one of {sorted(GROUP_NAMES)}, "
            f"not {groupsize}")


# =============================================================================
# Naked subsets
# =============================================================================

class NakedSubset(ScopedStrategy):
    """
    n open cells in a partition whose candidates, between them, come to
    exactly n digits. Those digits can go nowhere else in the partition.
    """
    def __init__(self, groupsize: int) -> None:
        _check_groupsize(groupsize)
        self.groupsize = groupsize
        self.name = f"naked_{GROUP_NAMES[groupsize].lower()}"
        self.label = f"Naked {GROUP_NAMES[groupsize]}"

    def scan(self, grid: CandidateGrid, scope) -> SolutionList:
        partition = as_partition(grid, scope)
        if partition is None:
            return None
        n = self.groupsize
        open_cells = grid.open_cells(partition.cells)
        small_cells = [i for i in open_cells if len(grid[i]) <= n]
        found = []  # type: List[Solution]
        for cell_combo in combinations(small_cells, n):
            digits = frozenset().union(*grid.values(cell_combo))
            if len(digits) != n:
                continue
            targets = [i for i in open_cells
                       if i not in cell_combo and grid[i] & digits]
            if not targets:
                continue
            found.append(Solution(
                strategy=self.label,
                cell_init=cell_combo,
                updates=[Update(i, grid, digits) for i in targets],
                category=self.category,
            ))
        return found or None


# =============================================================================
# Hidden subsets
# =============================================================================

class HiddenSubset(ScopedStrategy):
    """
    n digits that, within a partition, only appear in n cells. Those cells
    can't contain anything else.
    """
    def __init__(self, groupsize: int) -> None:
        _check_groupsize(groupsize)
        self.groupsize = groupsize
        self.name = f"hidden_{GROUP_NAMES[groupsize].lower()}"
        self.label = f"Hidden {GROUP_NAMES[groupsize]}"

    def scan(self, grid: CandidateGrid, scope) -> SolutionList:
        partition = as_partition(grid, scope)
        if partition is None:
            return None
        n = self.groupsize
        open_cells = grid.open_cells(partition.cells)
        found = []  # type: List[Solution]
        for digit_combo in combinations(
                grid.unique_open_values(open_cells), n):
            combo_set = frozenset(digit_combo)
            cells = [i for i in open_cells if grid[i] & combo_set]
            if len(cells) != n:
                continue
            targets = [i for i in cells if grid[i] - combo_set]
            if not targets:
                continue
            found.append(Solution(
                strategy=self.label,
                cell_init=cells,
                updates=[Update(i, grid, is_only(combo_set, grid.n))
                         for i in targets],
                category=self.category,
            ))
        return found or None
