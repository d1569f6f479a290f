#!/usr/bin/env python

"""
solution.py

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

**Updates and solutions: what a strategy found, and applying it.**

- An :class:`Update` is a change to one cell: some candidates removed.
- A :class:`Solution` is one deduction: a strategy label, the cells that
  triggered it, and its updates.
- :func:`apply_solution` turns an old grid plus a solution into a new grid.

"""

from copy import copy
from enum import Enum
import logging
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from sudokulogic.common import ContradictionError, DEFAULT_RANK
from sudokulogic.grid import CandidateGrid, Cell

log = logging.getLogger(__name__)


# =============================================================================
# Classification
# =============================================================================

class RankCategory(Enum):
    """
    Which ranking rule applies to a solution. Decided when the solution is
    created, never worked out from its label.
    """
    SINGLE_CANDIDATE = "single_candidate"
    SINGLE_PER_PARTITION = "single_per_partition"
    ELIMINATION = "elimination"
    CHAIN = "chain"


class SingleJustification(Enum):
    """
    Why a cell came down to one candidate. In order of increasing effort for
    a human.
    """
    ROW = "Row"  # only open cell in its row
    COLUMN = "Column"
    BOX = "Box"
    MULTI_PARAMETER = "Multi-Parameter"  # row, column and box together
    NARROWING = "Narrowing"  # needed an earlier elimination strategy


# =============================================================================
# Helpers
# =============================================================================

def is_only(digits: Union[int, Iterable[int]],
            n: int = DEFAULT_RANK ** 2) -> Tuple[int, ...]:
    """
    Sometimes we know which digits a cell *must* be from, rather than which
    it can't be. This returns the digits to remove: everything in 1..n that
    isn't in ``digits``.
    """
    keep = {digits} if isinstance(digits, int) else set(digits)
    return tuple(d for d in range(1, n + 1) if d not in keep)


# =============================================================================
# Update
# =============================================================================

class Update(object):
    """
    Removal of candidates from one cell. Treat as read-only.
    """
    __slots__ = ("index", "removal", "current_answer", "updated_answer")

    def __init__(self, index: int, grid: CandidateGrid,
                 removal: Union[int, Iterable[int]]) -> None:
        """
        Args:
            index: cell index
            grid: grid the update is worked out against
            removal: digit(s) ruled out for this cell
        """
        current = grid[index]
        if isinstance(current, int):
            raise ContradictionError(
                f"Cannot update cell {index}: already solved as {current}")
        removed = {removal} if isinstance(removal, int) else set(removal)
        self.index = index
        self.removal = tuple(sorted(removed))  # type: Tuple[int, ...]
        self.current_answer = tuple(sorted(current))  # type: Tuple[int, ...]
        self.updated_answer = tuple(
            d for d in self.current_answer if d not in removed
        )  # type: Tuple[int, ...]
        if not self.updated_answer:
            raise ContradictionError(
                f"Update would leave cell {index} with no candidates: "
                f"{list(self.current_answer)} minus {list(self.removal)}")

    def __repr__(self) -> str:
        return (f"Update(index={self.index}, removal={list(self.removal)}, "
                f"current_answer={list(self.current_answer)}, "
                f"updated_answer={list(self.updated_answer)})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Update):
            return NotImplemented
        return (self.index == other.index and
                self.removal == other.removal and
                self.current_answer == other.current_answer)

    def __hash__(self) -> int:
        return hash((self.index, self.removal, self.current_answer))

    @property
    def solves(self) -> bool:
        return len(self.updated_answer) == 1

    @property
    def eliminated(self) -> Tuple[int, ...]:
        """
        Candidates actually taken away (``removal`` may name digits the cell
        never had).
        """
        return tuple(d for d in self.current_answer
                     if d not in self.updated_answer)


# =============================================================================
# Solution
# =============================================================================

class ChainNotes(object):
    """
    Extra information kept for solutions found by chain reasoning.
    """
    __slots__ = ("starting_paths", "total_chain_rounds", "branch_history")

    def __init__(self,
                 starting_paths: Sequence[CandidateGrid],
                 total_chain_rounds: int,
                 branch_history: Sequence[Sequence[
                     Tuple[int, "Solution"]]]) -> None:
        """
        Args:
            starting_paths:
                one hypothetical grid per candidate of the branch cell, as
                created before any propagation
            total_chain_rounds:
                round in which the shared eliminations were found
            branch_history:
                per branch, ``(chain_round, solution)`` for everything
                applied to that branch
        """
        self.starting_paths = tuple(starting_paths)
        self.total_chain_rounds = total_chain_rounds
        self.branch_history = tuple(tuple(h) for h in branch_history)


class Solution(object):
    """
    One deduction, ready to apply. Treat as read-only; :meth:`with_round`
    gives a tagged copy.
    """
    def __init__(self,
                 strategy: str,
                 cell_init: Iterable[int],
                 updates: Iterable[Update],
                 category: RankCategory = RankCategory.ELIMINATION,
                 justification: SingleJustification = None,
                 chain: ChainNotes = None) -> None:
        """
        Args:
            strategy: display label
            cell_init: cells that triggered the deduction
            updates: the changes, in order
            category: ranking category
            justification: for single-candidate solutions, why
            chain: chain metadata, for chain solutions
        """
        self.strategy = strategy
        self.cell_init = tuple(cell_init)
        self.updates = tuple(updates)
        self.category = category
        self.justification = justification
        self.chain = chain
        self.round = None  # type: Optional[int]

    def __repr__(self) -> str:
        return (f"Solution(strategy={self.strategy!r}, "
                f"cell_init={list(self.cell_init)}, "
                f"updates={list(self.updates)}, round={self.round})")

    @property
    def narrow(self) -> Tuple[Update, ...]:
        """
        Updates that leave more than one candidate.
        """
        return tuple(u for u in self.updates if len(u.updated_answer) > 1)

    @property
    def solved(self) -> Tuple[Update, ...]:
        """
        Updates that solve a cell.
        """
        return tuple(u for u in self.updates if len(u.updated_answer) == 1)

    @property
    def removal(self) -> Tuple[int, ...]:
        return tuple(d for u in self.updates for d in u.removal)

    @property
    def total_chain_rounds(self) -> Optional[int]:
        return self.chain.total_chain_rounds if self.chain else None

    def with_round(self, round_number: int) -> "Solution":
        s = copy(self)
        s.round = round_number
        return s

    def describe(self, n: int = DEFAULT_RANK ** 2) -> str:
        """
        Plain-words account of the deduction, for the working notes.
        """
        def pretty(i: int) -> str:
            return f"(row={i // n + 1}, col={i % n + 1})"

        parts = []  # type: List[str]
        for u in self.solved:
            parts.append(f"{pretty(u.index)} must be {u.updated_answer[0]}")
        for u in self.narrow:
            parts.append(f"eliminating {list(u.eliminated)} "
                         f"from {pretty(u.index)}")
        prefix = f"Round {self.round}: " if self.round is not None else ""
        trigger = ", ".join(pretty(i) for i in self.cell_init)
        return f"{prefix}{self.strategy} [from {trigger}]: " + "; ".join(parts)


# =============================================================================
# Applying solutions
# =============================================================================

def _remove_from_peers(cells: List[Cell], grid: CandidateGrid,
                       index: int) -> None:
    value = cells[index]
    if not isinstance(value, int):
        return
    for p in grid.geometry.peers(index):
        other = cells[p]
        if not isinstance(other, int) and value in other:
            cells[p] = other - {value}


def update_peers(grid: CandidateGrid, solved_index: int) -> CandidateGrid:
    """
    After solving a cell, removes its digit from the candidates of every open
    cell in the same row, column and box. Returns a new grid.
    """
    value = grid[solved_index]
    if not isinstance(value, int):
        return grid
    return grid.replace({
        p: grid[p] - {value}
        for p in grid.open_cells(grid.geometry.peers(solved_index))
        if value in grid[p]
    })


def _apply_single(grid: CandidateGrid, solution: Solution) -> CandidateGrid:
    cells = list(grid.cells)
    for u in solution.updates:
        current = cells[u.index]
        if u.solves:
            value = u.updated_answer[0]
            # A hypothetical branch can already have lost this digit.
            still_possible = (current == value if isinstance(current, int)
                              else value in current)
            cells[u.index] = value if still_possible else frozenset()
        elif isinstance(current, int):
            if current not in u.updated_answer:
                cells[u.index] = frozenset()
        else:
            # Never adds candidates back.
            cells[u.index] = current & frozenset(u.updated_answer)
    for u in solution.solved:
        _remove_from_peers(cells, grid, u.index)
    return CandidateGrid(cells, rank=grid.rank)


def apply_solution(grid: CandidateGrid,
                   solution: Union[Solution, Sequence[Solution]]) \
        -> CandidateGrid:
    """
    Applies a solution (or several, left to right) and returns the new grid.
    Cells solved along the way have their digit removed from their peers.
    """
    if isinstance(solution, Solution):
        return _apply_single(grid, solution)
    for s in solution:
        grid = _apply_single(grid, s)
    return grid
