#!/usr/bin/env python

"""
chains.py

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

**Chains: reasoning from "what if" branches.**

Take a cell with two candidates, say {3, 7}. Either it's a 3, or it's a 7.
Play out both possibilities, side by side, using simple tactics. If some
other cell ends up *not* being a 5 in both versions of the future, then it
isn't a 5, whichever way the first cell goes.

This is the disciplined cousin of guessing. We never commit to a branch; we
only keep what every branch agrees on, so the result holds regardless.

Stages, for one starting cell:

- Branching: one hypothetical grid per candidate.
- Propagating (round 1, 2, ...): look for shared eliminations; if there are
  none, advance every branch by one round of the propagation tactics.
- Proved: shared eliminations found.
- Stuck: no branch could advance (or we ran out of rounds).

"""

import logging
from typing import List, Optional, Sequence, Tuple

from sudokulogic.common import ConfigurationError, ContradictionError
from sudokulogic.grid import CandidateGrid
from sudokulogic.solution import (
    apply_solution,
    ChainNotes,
    is_only,
    RankCategory,
    Solution,
    Update,
)
from sudokulogic.strategies import (
    CellSweep,
    ScopedStrategy,
    SingleCandidate,
    SolutionList,
    Strategy,
)

log = logging.getLogger(__name__)

DEFAULT_CHAIN_BRANCH_SIZE = 2
BRANCH_LABEL = "Chain Branch"


def rules_out(branch: CandidateGrid, index: int, digit: int) -> bool:
    """
    Does this cell, in this branch, say "not ``digit``"? A solved cell rules
    out every digit but its own; a contradicted cell rules out everything.
    """
    return digit not in branch.possible(index)


class Chain(ScopedStrategy):
    """
    Hypothetical-branch reasoning, started from each cell in turn.
    """
    name = "chain"
    label = "Chain"
    category = RankCategory.CHAIN
    sweep_over = CellSweep()

    def __init__(self,
                 branch_size: Optional[int] = DEFAULT_CHAIN_BRANCH_SIZE,
                 propagation: Sequence[Strategy] = None,
                 max_rounds: int = None) -> None:
        """
        Args:
            branch_size:
                only start from cells with exactly this many candidates;
                ``None`` for any open cell with at least two
            propagation:
                tactics used to advance each branch, in order of preference
                (default: single candidate only)
            max_rounds:
                give up after this many propagation rounds
        """
        if branch_size is not None and branch_size < 2:
            raise ConfigurationError(
                f"Chain branch size must be at least 2, not {branch_size}")
        if max_rounds is not None and max_rounds < 1:
            raise ConfigurationError(
                f"Chain max_rounds must be at least 1, not {max_rounds}")
        if propagation is None:
            propagation = [SingleCandidate()]
        self.propagation = list(propagation)  # type: List[Strategy]
        if not self.propagation:
            raise ConfigurationError("Chain needs at least one propagation "
                                     "strategy")
        self.branch_size = branch_size
        self.max_rounds = max_rounds

    def starts_from(self, grid: CandidateGrid, index: int) -> bool:
        """
        Is this cell a suitable starting point?
        """
        cell = grid[index]
        if isinstance(cell, int):
            return False
        if self.branch_size is None:
            return len(cell) >= 2
        return len(cell) == self.branch_size

    @staticmethod
    def branch(grid: CandidateGrid, index: int) -> List[CandidateGrid]:
        """
        One hypothetical grid per candidate of the cell, with that candidate
        assigned and removed from the cell's peers.
        """
        branches = []  # type: List[CandidateGrid]
        for d in sorted(grid[index]):
            assume = Solution(
                strategy=BRANCH_LABEL,
                cell_init=[index],
                updates=[Update(index, grid, is_only(d, grid.n))],
                category=RankCategory.CHAIN,
            )
            branches.append(apply_solution(grid, assume))
        return branches

    @staticmethod
    def shared_eliminations(original: CandidateGrid,
                            branches: Sequence[CandidateGrid]) \
            -> List[Update]:
        """
        For every cell open in the original grid: candidates that every
        branch rules out. Returned as updates to the original grid.
        """
        updates = []  # type: List[Update]
        for i in original.open_cells(original.geometry.all_index):
            gone = [d for d in sorted(original[i])
                    if all(rules_out(b, i, d) for b in branches)]
            if gone:
                updates.append(Update(i, original, gone))
        return updates

    def _propagate(self, grid: CandidateGrid) -> SolutionList:
        """
        Results of the first propagation tactic that finds anything.
        """
        for strategy in self.propagation:
            found = strategy.find(grid)
            if found:
                return found
        return None

    def advance(self, path: CandidateGrid, chain_round: int) \
            -> Tuple[Optional[CandidateGrid], List[Tuple[int, Solution]]]:
        """
        One propagation round on one branch. Returns the new grid (or
        ``None`` if it couldn't advance) and the ``(round, solution)`` pairs
        applied.
        """
        if path.is_contradictory:
            return None, []
        try:
            found = self._propagate(path)
        except ContradictionError as e:
            # Only the branch is impossible, not the puzzle.
            log.debug(f"Chain branch hit a contradiction: {e}")
            return None, []
        if not found:
            return None, []
        return (apply_solution(path, found),
                [(chain_round, s) for s in found])

    def scan(self, grid: CandidateGrid, scope: int) -> SolutionList:
        index = scope
        if not self.starts_from(grid, index):
            return None
        starting_paths = self.branch(grid, index)
        paths = list(starting_paths)
        history = [
            [] for _ in paths
        ]  # type: List[List[Tuple[int, Solution]]]
        chain_round = 1
        while True:
            updates = self.shared_eliminations(grid, paths)
            if updates:
                log.debug(
                    f"Chain from {grid.geometry.pretty(index)} proved "
                    f"{len(updates)} update(s) in round {chain_round}")
                return [Solution(
                    strategy=self.label,
                    cell_init=[index],
                    updates=updates,
                    category=self.category,
                    chain=ChainNotes(
                        starting_paths=starting_paths,
                        total_chain_rounds=chain_round,
                        branch_history=history,
                    ),
                )]
            if self.max_rounds is not None and chain_round > self.max_rounds:
                log.debug(f"Chain from {grid.geometry.pretty(index)}: out of "
                          f"rounds")
                return None
            progressed = False
            for k, path in enumerate(paths):
                advanced, applied = self.advance(path, chain_round)
                if advanced is None:
                    continue
                progressed = True
                paths[k] = advanced
                history[k].extend(applied)
            if not progressed:
                return None
            chain_round += 1
