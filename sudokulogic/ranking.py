#!/usr/bin/env python

"""
ranking.py

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

**Choosing the most "human" deduction from several.**

A round of solving usually turns up several solutions from the same
strategy. Which should a person do next? The rules, by ranking category:

1.  Single candidate: prefer cells that were the last one open in a row,
    column or box; then cells whose row, column and box together pin them
    down; then anything that needed an earlier elimination.

2.  Single candidate per partition: the first one found.

3.  Chain: the fewest propagation rounds (easiest to see); then the most
    updates (most useful).

4.  Anything else: the most cells solved; then the most cells narrowed; then
    narrowed cells closest to being solved (fewest candidates left).

Remaining ties go to whichever was found first, which is reproducible
because every strategy enumerates in a fixed order (rows before columns
before boxes, lowest cell index first).

"""

import logging
from typing import List, Sequence

from sudokulogic.solution import RankCategory, SingleJustification, Solution

log = logging.getLogger(__name__)

HARDER_SINGLE_JUSTIFICATIONS = (
    SingleJustification.MULTI_PARAMETER,
    SingleJustification.NARROWING,
)


def _best_single_candidate(solutions: List[Solution]) -> List[Solution]:
    """
    May return several equally simple solutions.
    """
    single_param = [s for s in solutions
                    if s.justification not in HARDER_SINGLE_JUSTIFICATIONS]
    if single_param:
        return single_param
    no_narrowing = [s for s in solutions
                    if s.justification != SingleJustification.NARROWING]
    if no_narrowing:
        return no_narrowing
    return solutions


def _best_chain(solutions: List[Solution]) -> List[Solution]:
    least_rounds = min(s.total_chain_rounds for s in solutions)
    quickest = [s for s in solutions if s.total_chain_rounds == least_rounds]
    most_updates = max(len(s.updates) for s in quickest)
    return [next(s for s in quickest if len(s.updates) == most_updates)]


def _remaining_after_narrowing(solution: Solution) -> int:
    return sum(len(u.updated_answer) for u in solution.narrow)


def _best_elimination(solutions: List[Solution]) -> List[Solution]:
    highest_solved = max(len(s.solved) for s in solutions)
    most_solved = [s for s in solutions if len(s.solved) == highest_solved]
    if len(most_solved) == 1:
        return most_solved
    highest_narrowed = max(len(s.narrow) for s in most_solved)
    most_narrowed = [s for s in most_solved
                     if len(s.narrow) == highest_narrowed]
    if len(most_narrowed) == 1:
        return most_narrowed
    # min() returns the first of equal candidates.
    return [min(most_narrowed, key=_remaining_after_narrowing)]


def best_group(solutions: Sequence[Solution]) -> List[Solution]:
    """
    The best solution(s) from a list: usually one, but the single-candidate
    rule can return several equally simple ones.
    """
    solutions = list(solutions)
    if not solutions:
        raise ValueError("No solutions to choose from")
    if len(solutions) == 1:
        return solutions
    categories = set(s.category for s in solutions)
    category = categories.pop() if len(categories) == 1 else None
    if category == RankCategory.SINGLE_CANDIDATE:
        return _best_single_candidate(solutions)
    if category == RankCategory.SINGLE_PER_PARTITION:
        return solutions[:1]
    if category == RankCategory.CHAIN:
        return _best_chain(solutions)
    return _best_elimination(solutions)


def filter_best(solutions: Sequence[Solution]) -> Solution:
    """
    The single best solution to apply next.
    """
    return best_group(solutions)[0]


def sort_by_bestness(solutions: Sequence[Solution]) -> List[Solution]:
    """
    All the solutions, best first: repeatedly takes out the best group.
    """
    remaining = list(solutions)
    ranked = []  # type: List[Solution]
    while remaining:
        group = best_group(remaining)
        ranked.extend(group)
        remaining = [s for s in remaining
                     if not any(s is chosen for chosen in group)]
    return ranked
