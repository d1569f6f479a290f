#!/usr/bin/env python

"""
strategies.py

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

**Strategy interface, the full-grid sweep, and the simplest tactics.**

Each strategy is an object with a :meth:`Strategy.find` method taking a grid
and returning a list of :class:`sudokulogic.solution.Solution` objects, or
``None`` if it found nothing (never an empty list). Strategies never modify
the grid.

Many tactics are naturally about one row, column or box (or one cell). Those
implement :meth:`ScopedStrategy.scan` for a single scope, and :func:`sweep`
applies them to every scope in turn, so the tactic itself needn't know about
sweeping.

Tactics here (Sudoku Snake names in brackets):

- Single candidate: a cell has one possible digit left ("Naked Singles").
- Single candidate per partition: a digit has only one possible cell in a
  row, column or box ("Hidden Singles").
- Box narrowing: within a box, a digit is confined to one row or column, so
  it can't be elsewhere in that row/column ("Pointing"); or within a row or
  column, a digit is confined to one box, so it can't be elsewhere in that box
  ("Claiming").

"""

import logging
from typing import Iterable, List, Optional, Sequence, Union

from sudokulogic.geometry import Geometry, Partition, PartitionKind
from sudokulogic.grid import CandidateGrid
from sudokulogic.solution import (
    is_only,
    RankCategory,
    SingleJustification,
    Solution,
    Update,
)

log = logging.getLogger(__name__)

SolutionList = Optional[List[Solution]]
Scope = Union[Partition, int]


# =============================================================================
# Sweeps
# =============================================================================

class PartitionSweep(object):
    """
    Scope wrapper: "every row, then every column, then every box" (or some
    of those).
    """
    ALL = (PartitionKind.ROW, PartitionKind.COLUMN, PartitionKind.BOX)

    def __init__(self, kinds: Sequence[PartitionKind] = ALL) -> None:
        self.kinds = tuple(kinds)

    def __repr__(self) -> str:
        return f"PartitionSweep({[k.value for k in self.kinds]})"

    def scopes(self, geometry: Geometry) -> List[Partition]:
        lookup = {
            PartitionKind.ROW: geometry.rows,
            PartitionKind.COLUMN: geometry.columns,
            PartitionKind.BOX: geometry.boxes,
        }
        return [p for kind in self.kinds for p in lookup[kind]]


class CellSweep(object):
    """
    Scope wrapper: "every cell, in index order".
    """
    def __repr__(self) -> str:
        return "CellSweep()"

    # noinspection PyMethodMayBeStatic
    def scopes(self, geometry: Geometry) -> Sequence[int]:
        return geometry.all_index


def sweep(strategy: "ScopedStrategy", grid: CandidateGrid,
          scopes: Iterable[Scope]) -> SolutionList:
    """
    Applies a single-scope strategy to every scope given. Returns all the
    solutions found, in scope order, or ``None`` if there were none.
    """
    found = []  # type: List[Solution]
    for scope in scopes:
        result = strategy.scan(grid, scope)
        if result:
            found.extend(result)
    return found or None


# =============================================================================
# Base classes
# =============================================================================

class Strategy(object):
    """
    Base class for all strategies.

    Attributes:
        name: unique identifier, used to cut the strategy ladder short
        label: human-readable name, as shown in the working
        category: which ranking rule applies to what it finds
    """
    name = "base"
    label = "Base strategy"
    category = RankCategory.ELIMINATION

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name!r}>"

    def find(self, grid: CandidateGrid) -> SolutionList:
        """
        Look at the whole grid. Returns solutions, or ``None``.
        """
        raise NotImplementedError


class ScopedStrategy(Strategy):
    """
    A strategy written for one partition or one cell, swept across the grid.
    """
    sweep_over = PartitionSweep()  # type: Union[PartitionSweep, CellSweep]

    def scan(self, grid: CandidateGrid, scope: Scope) -> SolutionList:
        """
        Look at one scope (a :class:`Partition` or a cell index).
        """
        raise NotImplementedError

    def find(self, grid: CandidateGrid) -> SolutionList:
        result = sweep(self, grid, self.sweep_over.scopes(grid.geometry))
        log.debug(f"{self.label}: {len(result) if result else 0} found")
        return result


def as_partition(grid: CandidateGrid, scope) -> Optional[Partition]:
    """
    Accepts a :class:`Partition` or a bare collection of cell indices, and
    returns the row/column/box it is (or ``None``).
    """
    if isinstance(scope, Partition):
        return scope
    return grid.geometry.partition_of_cells(scope)


# =============================================================================
# Single candidate
# =============================================================================

class SingleCandidate(ScopedStrategy):
    """
    A cell with only one candidate left can be solved.

    The solution's update is always the same, but we also record *why* the
    cell came down to one candidate, so that the ranker can prefer the
    easiest explanation: it was the only open cell in its row, column or box;
    or its row, column and box together rule out everything else; or an
    earlier elimination strategy was needed.
    """
    name = "single_candidate"
    label = "Single Candidate"
    category = RankCategory.SINGLE_CANDIDATE
    sweep_over = CellSweep()

    @staticmethod
    def justify(grid: CandidateGrid, index: int) -> SingleJustification:
        g = grid.geometry
        if len(grid.open_cells(g.row_of(index).cells)) == 1:
            return SingleJustification.ROW
        if len(grid.open_cells(g.column_of(index).cells)) == 1:
            return SingleJustification.COLUMN
        if len(grid.open_cells(g.box_of(index).cells)) == 1:
            return SingleJustification.BOX
        if len(grid.unique_solved_values(g.peers(index))) == g.n - 1:
            return SingleJustification.MULTI_PARAMETER
        return SingleJustification.NARROWING

    def scan(self, grid: CandidateGrid, scope: int) -> SolutionList:
        index = scope
        cell = grid[index]
        if isinstance(cell, int) or len(cell) != 1:
            return None
        justification = self.justify(grid, index)
        update = Update(index, grid, is_only(cell, grid.n))
        return [Solution(
            strategy=f"{self.label} ({justification.value})",
            cell_init=[index],
            updates=[update],
            category=self.category,
            justification=justification,
        )]


# =============================================================================
# Single candidate per partition
# =============================================================================

class SingleCandidatePerPartition(ScopedStrategy):
    """
    Where there is only one possible cell for a digit in a row, column, or
    box, that cell must be that digit.
    """
    name = "single_per_partition"
    label = "Single Candidate Per Partition"
    category = RankCategory.SINGLE_PER_PARTITION

    def scan(self, grid: CandidateGrid, scope) -> SolutionList:
        partition = as_partition(grid, scope)
        if partition is None:
            return None
        open_cells = grid.open_cells(partition.cells)
        homes = {}  # digit -> cells it could go in
        for i in open_cells:
            for d in sorted(grid[i]):
                homes.setdefault(d, []).append(i)
        # First-appearance order: by cell, then digit.
        singles = [(cells[0], d) for d, cells in homes.items()
                   if len(cells) == 1]
        if not singles:
            return None
        strategy = f"{self.label} ({partition.kind.value})"
        return [
            Solution(
                strategy=strategy,
                cell_init=[i],
                updates=[Update(i, grid, is_only(d, grid.n))],
                category=self.category,
            )
            for i, d in sorted(singles)
        ]


# =============================================================================
# Box narrowing
# =============================================================================

class BoxNarrowing(ScopedStrategy):
    """
    Pointing and claiming.

    - Box scope: if the only places for digit d in a box all lie in one row,
      then d must go in that row within this box, and we can eliminate d
      from the rest of that row. Likewise for columns.
    - Row/column scope: if the only places for d in a row all lie in one
      box, we can eliminate d from the rest of that box.
    """
    name = "box_narrowing"
    label = "Box Narrowing"

    def _eliminate(self, grid: CandidateGrid, digit: int,
                   confining: List[int],
                   others: Iterable[int]) -> Optional[Solution]:
        keep = set(confining)
        targets = [i for i in grid.open_cells_with(others, digit)
                   if i not in keep]
        if not targets:
            return None
        return Solution(
            strategy=self.label,
            cell_init=confining,
            updates=[Update(i, grid, digit) for i in targets],
            category=self.category,
        )

    def scan(self, grid: CandidateGrid, scope) -> SolutionList:
        partition = as_partition(grid, scope)
        if partition is None:
            return None
        g = grid.geometry
        found = []  # type: List[Solution]
        for d in grid.unique_open_values(partition.cells):
            cells = grid.open_cells_with(partition.cells, d)
            if partition.kind == PartitionKind.BOX:
                lines = []  # type: List[Partition]
                if len(set(g.row_number(i) for i in cells)) == 1:
                    lines.append(g.row_of(cells[0]))
                if len(set(g.column_number(i) for i in cells)) == 1:
                    lines.append(g.column_of(cells[0]))
            else:
                lines = []
                if len(set(g.box_number(i) for i in cells)) == 1:
                    lines.append(g.box_of(cells[0]))
            for line in lines:
                s = self._eliminate(grid, d, cells, line.cells)
                if s is not None:
                    found.append(s)
        return found or None
