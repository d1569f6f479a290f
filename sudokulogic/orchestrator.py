#!/usr/bin/env python

"""
orchestrator.py

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

**Solving by logic, one deduction at a time, showing the working.**

Each round:

- try the strategies in order, cheapest first; the first that finds anything
  wins the round;
- pick the most "human" of its solutions (:mod:`sudokulogic.ranking`);
- apply that one solution and note what was done.

Stop when the grid is complete (solved), when no strategy finds anything
(stuck; a normal outcome, not an error), or when told to stop.

"""

import logging
import time
from typing import Callable, List, Optional, Sequence, Tuple

from sudokulogic.chains import Chain
from sudokulogic.common import ConfigurationError, ContradictionError
from sudokulogic.fish import Fish
from sudokulogic.grid import CandidateGrid
from sudokulogic.ranking import filter_best
from sudokulogic.solution import apply_solution, Solution
from sudokulogic.strategies import (
    BoxNarrowing,
    SingleCandidate,
    SingleCandidatePerPartition,
    Strategy,
)
from sudokulogic.subsets import HiddenSubset, NakedSubset

log = logging.getLogger(__name__)


# =============================================================================
# The strategy ladder
# =============================================================================

def default_strategies(with_chains: bool = True) -> List[Strategy]:
    """
    All strategies, cheapest (most human) first.
    """
    strategies = [
        SingleCandidate(),
        SingleCandidatePerPartition(),
        BoxNarrowing(),
        NakedSubset(2),
        NakedSubset(3),
        NakedSubset(4),
        HiddenSubset(2),
        HiddenSubset(3),
        HiddenSubset(4),
        Fish(2),
        Fish(3),
        Fish(4),
    ]  # type: List[Strategy]
    if with_chains:
        strategies.append(Chain())
    return strategies


def strategy_names(strategies: Sequence[Strategy] = None) -> List[str]:
    if strategies is None:
        strategies = default_strategies()
    return [s.name for s in strategies]


def limit_strategies_to(name: str,
                        strategies: Sequence[Strategy] = None) \
        -> List[Strategy]:
    """
    The ladder, cut off after (and including) the named strategy.
    """
    if strategies is None:
        strategies = default_strategies()
    names = strategy_names(strategies)
    if name not in names:
        raise ConfigurationError(
            f"Unknown strategy {name!r}; choose from {names}")
    return list(strategies[:names.index(name) + 1])


# =============================================================================
# Result
# =============================================================================

class SolveResult(object):
    """
    What happened.

    Attributes:
        grid: the grid as we left it
        solutions: the solutions applied, in order, each tagged with its round
        solved: is the grid complete?
        rounds: number of rounds run
        aborted: did we stop early (abort, timeout or round limit)?
        working: plain-words notes, one per solution
    """
    def __init__(self,
                 grid: CandidateGrid,
                 solutions: Sequence[Solution],
                 solved: bool,
                 rounds: int,
                 aborted: bool = False,
                 working: Sequence[str] = None) -> None:
        self.grid = grid
        self.solutions = list(solutions)
        self.solved = solved
        self.rounds = rounds
        self.aborted = aborted
        self.working = list(working or [])

    def __repr__(self) -> str:
        return (f"SolveResult(solved={self.solved}, rounds={self.rounds}, "
                f"aborted={self.aborted}, grid={self.grid.to_string()!r})")

    @property
    def strategies_used(self) -> List[str]:
        """
        Strategy labels, first use order, no repeats.
        """
        used = []  # type: List[str]
        for s in self.solutions:
            if s.strategy not in used:
                used.append(s.strategy)
        return used

    @property
    def stuck(self) -> bool:
        return not self.solved and not self.aborted


# =============================================================================
# Orchestrator
# =============================================================================

class Orchestrator(object):
    """
    Runs the strategy ladder round by round.
    """
    def __init__(self,
                 strategies: Sequence[Strategy] = None,
                 max_rounds: int = None,
                 timeout_s: float = None,
                 should_abort: Callable[[], bool] = None) -> None:
        """
        Args:
            strategies:
                the ladder, in order of preference; default
                :func:`default_strategies`
            max_rounds:
                stop after this many rounds
            timeout_s:
                stop after this many seconds (checked between rounds)
            should_abort:
                callable checked between rounds; return ``True`` to stop
        """
        if strategies is None:
            strategies = default_strategies()
        self.strategies = list(strategies)  # type: List[Strategy]
        if not self.strategies:
            raise ConfigurationError("No strategies to solve with")
        self.max_rounds = max_rounds
        self.timeout_s = timeout_s
        self.should_abort = should_abort

    def scan(self, grid: CandidateGrid) \
            -> Optional[Tuple[Strategy, List[Solution]]]:
        """
        The first strategy that finds anything, and what it found.
        """
        for strategy in self.strategies:
            log.debug(f"Trying {strategy.label}")
            found = strategy.find(grid)
            if found:
                return strategy, found
        return None

    def _stop_reason(self, rounds: int, deadline: Optional[float]) \
            -> Optional[str]:
        if self.max_rounds is not None and rounds >= self.max_rounds:
            return f"reached maximum of {self.max_rounds} rounds"
        if deadline is not None and time.monotonic() > deadline:
            return f"timed out after {self.timeout_s} s"
        if self.should_abort is not None and self.should_abort():
            return "aborted by caller"
        return None

    def solve(self, grid: CandidateGrid) -> SolveResult:
        """
        Solves as far as logic (and our patience) allows.
        """
        if grid.is_contradictory:
            raise ContradictionError(f"Grid is already contradictory: "
                                     f"{grid.to_string()}")
        n_givens = len(grid.unique_solved_values(grid.geometry.all_index))
        if n_givens < grid.n - 1:
            log.warning(f"Only {n_givens} distinct digits given; this puzzle "
                        f"cannot have a unique solution")
        deadline = (time.monotonic() + self.timeout_s
                    if self.timeout_s is not None else None)
        applied = []  # type: List[Solution]
        working = []  # type: List[str]
        rounds = 0
        while not grid.is_complete:
            reason = self._stop_reason(rounds, deadline)
            if reason:
                log.warning(f"Stopping early: {reason}")
                return SolveResult(grid, applied, solved=False,
                                   rounds=rounds, aborted=True,
                                   working=working)
            log.debug(f"Round {rounds + 1}. Unsolved cells: {grid.n_open}. "
                      f"Possibilities: {grid.n_candidates} "
                      f"(target {len(grid)})")
            result = self.scan(grid)
            if result is None:
                log.info(f"Stuck after {rounds} rounds, with {grid.n_open} "
                         f"cells unsolved")
                return SolveResult(grid, applied, solved=False,
                                   rounds=rounds, working=working)
            strategy, found = result
            rounds += 1
            best = filter_best(found).with_round(rounds)
            grid = apply_solution(grid, best)
            if grid.is_contradictory:
                raise ContradictionError(
                    f"{strategy.label} left a cell with no candidates in "
                    f"round {rounds}: {best!r}")
            note = best.describe(grid.n)
            log.info(note)
            working.append(note)
            applied.append(best)
        return SolveResult(grid, applied, solved=True, rounds=rounds,
                           working=working)


def solve_with_standard_options(grid: CandidateGrid) -> SolveResult:
    """
    Solves with the full ladder, including chains.
    """
    return Orchestrator(default_strategies(with_chains=True)).solve(grid)
