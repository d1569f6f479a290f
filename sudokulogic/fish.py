#!/usr/bin/env python

"""
fish.py

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

**Fish: X-Wing (2), Swordfish (3), Jellyfish (4).**

Pick a digit. If, in each of n rows, that digit can only go in (between 2
and) n cells, and all those cells together sit in exactly n columns, then
the n rows use up the digit's place in each of those n columns. So the digit
can't be anywhere else in those columns. The same works with rows and
columns swapped.

Unlike the other tactics, this reasons across a whole axis at once, so it
looks at the whole grid rather than being swept one partition at a time.

"""

from itertools import combinations
import logging
from typing import Callable, List, Sequence

from sudokulogic.common import ConfigurationError
from sudokulogic.geometry import Partition
from sudokulogic.grid import CandidateGrid
from sudokulogic.solution import Solution, Update
from sudokulogic.strategies import SolutionList, Strategy

log = logging.getLogger(__name__)

FISH_NAMES = {2: "X-Wing", 3: "Swordfish", 4: "Jellyfish"}


class Fish(Strategy):
    """
    Basic fish of a given size.
    """
    def __init__(self, size: int) -> None:
        if size not in FISH_NAMES:
            raise ConfigurationError(
                f"Fish size must be one of {sorted(FISH_NAMES)}, not {size}")
        self.size = size
        self.label = FISH_NAMES[size]
        self.name = self.label.lower().replace("-", "_")

    def _find_oriented(self, grid: CandidateGrid, digit: int,
                       base: Sequence[Partition],
                       cover_of: Callable[[int], Partition]) \
            -> List[Solution]:
        """
        Fish for one digit whose defining lines are ``base`` (e.g. rows) and
        whose cover lines (e.g. columns) are found via ``cover_of``.
        """
        n = self.size
        lines = [
            cells
            for cells in (grid.open_cells_with(p.cells, digit) for p in base)
            if 2 <= len(cells) <= n
        ]
        found = []  # type: List[Solution]
        if len(lines) < n:
            return found
        for line_combo in combinations(lines, n):
            group = [i for line in line_combo for i in line]
            crossing = sorted(set(
                c for i in group for c in cover_of(i).cells
            ))
            if len(crossing) != n * grid.n:
                continue
            in_group = set(group)
            targets = [i for i in grid.open_cells_with(crossing, digit)
                       if i not in in_group]
            if not targets:
                continue
            log.debug(f"{self.label} on digit {digit}: cells {group}")
            found.append(Solution(
                strategy=self.label,
                cell_init=group,
                updates=[Update(i, grid, digit) for i in targets],
                category=self.category,
            ))
        return found

    def find(self, grid: CandidateGrid) -> SolutionList:
        g = grid.geometry
        digits = grid.unique_open_values(g.all_index)
        found = []  # type: List[Solution]
        # Row-based fish for every digit, then column-based.
        for base, cover_of in ((g.rows, g.column_of), (g.columns, g.row_of)):
            for d in digits:
                found.extend(self._find_oriented(grid, d, base, cover_of))
        return found or None
