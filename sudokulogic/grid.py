#!/usr/bin/env python

"""
grid.py

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

**The candidate grid: a puzzle in progress.**

Each cell is either solved (a plain ``int``) or open (a ``frozenset`` of the
digits still possible there). A grid is never modified; :meth:`replace`
gives you a new one. That way hypothetical branches can share an ancestor
without treading on each other.

An open cell with one candidate left is still open. It only becomes solved
when a solution says so (see :mod:`sudokulogic.solution`), which is what lets
us say *why* it was solved.

"""

import logging
from typing import (
    Dict, FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple,
    Union,
)

from sudokulogic.common import (
    DEFAULT_RANK,
    DISPLAY_CONTRADICTION,
    DISPLAY_SOLVED,
    DISPLAY_UNKNOWN,
    FILLERS,
    HASH,
    InputFormatError,
    NEWLINE,
    SPACE,
)
from sudokulogic.geometry import Geometry, get_geometry

log = logging.getLogger(__name__)

Cell = Union[int, FrozenSet[int]]

DIGIT_CHARS = "123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def digit_str(d: int) -> str:
    return DIGIT_CHARS[d - 1]


# =============================================================================
# CandidateGrid
# =============================================================================

class CandidateGrid(object):
    """
    An immutable sequence of n^2 cells, indexed from 0.
    """
    __slots__ = ("geometry", "cells")

    def __init__(self, cells: Iterable[Union[int, Iterable[int]]],
                 rank: int = DEFAULT_RANK) -> None:
        """
        Args:
            cells:
                one entry per cell: an ``int`` for a solved cell, or an
                iterable of candidate digits for an open one
            rank:
                rank of the puzzle (3 for normal 9x9 Sudoku)
        """
        self.geometry = get_geometry(rank)  # type: Geometry
        self.cells = tuple(
            c if isinstance(c, int) else frozenset(c)
            for c in cells
        )  # type: Tuple[Cell, ...]
        if len(self.cells) != self.geometry.n_cells:
            raise InputFormatError(
                f"A grid of rank {rank} must have {self.geometry.n_cells} "
                f"cells, not {len(self.cells)}")

    # -------------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------------

    @classmethod
    def from_values(cls, values: Sequence[Optional[int]],
                    rank: int = DEFAULT_RANK) -> "CandidateGrid":
        """
        Builds the starting grid from givens (``None`` or ``0`` for unknown).
        Every unknown cell gets all digits not already given among its peers.
        """
        geometry = get_geometry(rank)
        if len(values) != geometry.n_cells:
            raise InputFormatError(
                f"A puzzle of rank {rank} must have {geometry.n_cells} "
                f"cells, not {len(values)}")
        givens = []  # type: List[Optional[int]]
        for i, v in enumerate(values):
            if v is None or v == 0:
                givens.append(None)
            elif isinstance(v, int) and 1 <= v <= geometry.n:
                givens.append(v)
            else:
                raise InputFormatError(
                    f"Bad value {v!r} at cell {i}; must be 1-{geometry.n}, "
                    f"0 or None")
        cells = []  # type: List[Cell]
        for i, v in enumerate(givens):
            if v is not None:
                cells.append(v)
                continue
            seen = set(givens[p] for p in geometry.peers(i))
            cells.append(frozenset(d for d in geometry.digits
                                   if d not in seen))
        return cls(cells, rank=rank)

    @classmethod
    def from_string(cls, text: str,
                    rank: int = DEFAULT_RANK) -> "CandidateGrid":
        """
        Builds the starting grid from a string. ``0`` or ``.`` is an unknown
        cell; whitespace and ``#`` comment lines are ignored, so both a single
        flat line and the multi-line layout work.
        """
        return cls.from_values(parse_puzzle_string(text, rank=rank),
                               rank=rank)

    # -------------------------------------------------------------------------
    # Basics
    # -------------------------------------------------------------------------

    @property
    def rank(self) -> int:
        return self.geometry.rank

    @property
    def n(self) -> int:
        return self.geometry.n

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateGrid):
            return NotImplemented
        return self.rank == other.rank and self.cells == other.cells

    def __hash__(self) -> int:
        return hash((self.rank, self.cells))

    def __repr__(self) -> str:
        return f"CandidateGrid({self.to_string()!r}, rank={self.rank})"

    def to_string(self) -> str:
        """
        Flat string, solved digits as themselves and open cells as ``0``.
        """
        return "".join(
            digit_str(c) if isinstance(c, int) else "0"
            for c in self.cells
        )

    def replace(self, changes: Dict[int, Cell]) -> "CandidateGrid":
        """
        Returns a new grid with some cells changed.
        """
        if not changes:
            return self
        cells = list(self.cells)
        for i, c in changes.items():
            cells[i] = c
        return CandidateGrid(cells, rank=self.rank)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_open(self, index: int) -> bool:
        return not isinstance(self.cells[index], int)

    def is_solved(self, index: int) -> bool:
        return isinstance(self.cells[index], int)

    def possible(self, index: int) -> FrozenSet[int]:
        """
        Digits still possible for a cell; a solved cell gives just its value.
        """
        c = self.cells[index]
        return frozenset((c, )) if isinstance(c, int) else c

    def open_cells(self, indices: Iterable[int]) -> List[int]:
        return [i for i in indices if self.is_open(i)]

    def solved_cells(self, indices: Iterable[int]) -> List[int]:
        return [i for i in indices if self.is_solved(i)]

    def values(self, indices: Iterable[int]) -> List[Cell]:
        return [self.cells[i] for i in indices]

    def unique_open_values(self, indices: Iterable[int]) -> List[int]:
        """
        Every digit that is a candidate somewhere among the open cells given,
        ascending.
        """
        found = set()
        for i in self.open_cells(indices):
            found |= self.cells[i]
        return sorted(found)

    def unique_solved_values(self, indices: Iterable[int]) -> List[int]:
        return sorted(set(self.cells[i] for i in self.solved_cells(indices)))

    def open_cells_with(self, indices: Iterable[int],
                        digits: Union[int, Iterable[int]]) -> List[int]:
        """
        Open cells (from those given) in which all of ``digits`` are still
        candidates.
        """
        wanted = {digits} if isinstance(digits, int) else set(digits)
        return [i for i in self.open_cells(indices)
                if wanted.issubset(self.cells[i])]

    @property
    def is_complete(self) -> bool:
        """
        Are we there yet?
        """
        return all(isinstance(c, int) for c in self.cells)

    @property
    def is_contradictory(self) -> bool:
        """
        Has some open cell run out of candidates?
        """
        return any(not isinstance(c, int) and not c for c in self.cells)

    @property
    def n_open(self) -> int:
        """
        Number of unsolved cells. Maximum is 81 (for rank 3).
        """
        return sum(1 for c in self.cells if not isinstance(c, int))

    @property
    def n_candidates(self) -> int:
        """
        Number of cell/digit possibilities overall. Minimum is n^2 (solved).
        """
        return sum(1 if isinstance(c, int) else len(c) for c in self.cells)

    def is_peer_consistent(self) -> bool:
        """
        No solved digit is repeated within, or still a candidate elsewhere
        in, any row, column or box.
        """
        g = self.geometry
        for i, c in enumerate(self.cells):
            if not isinstance(c, int):
                continue
            for p in g.peers(i):
                other = self.cells[p]
                if other == c or (not isinstance(other, int) and c in other):
                    return False
        return True

    # -------------------------------------------------------------------------
    # Visuals
    # -------------------------------------------------------------------------

    def _pstr_row_col(self, index: int, digit: int) -> Tuple[int, int]:
        """
        For __str__(): ``row, col`` (``y, x``) coordinates.
        """
        t = self.rank
        x_base = self.geometry.column_number(index) * (t + 1)
        y_base = self.geometry.row_number(index) * (t + 1)
        x_offset = (digit - 1) % t
        y_offset = (digit - 1) // t
        return (y_base + y_offset), (x_base + x_offset)

    def __str__(self) -> str:
        """
        Returns a visual representation of possibilities.
        """
        t = self.rank
        pn = self.n * (t + 1) - 1

        # BEWARE: [[" "] * pn] * pn would share one row list between all rows.
        strings = [[SPACE for _ in range(pn)] for _ in range(pn)]

        # Prettify
        cell_boundaries = [(t + 1) * t * k - 1 for k in range(1, t)]
        for r in cell_boundaries:
            for i in range(pn):
                strings[r][i] = "-"
        for c in cell_boundaries:
            for i in range(pn):
                strings[i][c] = "|"
        for r in cell_boundaries:
            for c in cell_boundaries:
                strings[r][c] = "+"

        # Data
        for i, cell in enumerate(self.cells):
            for d in self.geometry.digits:
                y, x = self._pstr_row_col(i, d)
                if isinstance(cell, int):
                    txt = digit_str(d) if cell == d else DISPLAY_SOLVED
                elif not cell:
                    txt = DISPLAY_CONTRADICTION
                elif d in cell:
                    txt = digit_str(d)
                else:
                    txt = DISPLAY_UNKNOWN
                strings[y][x] = txt
        return NEWLINE.join("".join(line) for line in strings)


# =============================================================================
# Parsing
# =============================================================================

def parse_puzzle_string(text: str,
                        rank: int = DEFAULT_RANK) -> List[Optional[int]]:
    """
    Reads givens from text. Returns one entry per cell: the digit, or
    ``None`` for unknown.

    - Lines starting with ``#`` are comments.
    - Whitespace is ignored.
    - ``.`` or ``0`` represents an unknown cell.
    """
    geometry = get_geometry(rank)
    lines = [line for line in text.splitlines()
             if not line.strip().startswith(HASH)]
    chars = "".join("".join(line.split()) for line in lines)
    if len(chars) != geometry.n_cells:
        raise InputFormatError(
            f"A puzzle of rank {rank} must have exactly {geometry.n_cells} "
            f"cells; found {len(chars)}")
    allowed = DIGIT_CHARS[:geometry.n]
    values = []  # type: List[Optional[int]]
    for i, ch in enumerate(chars):
        if ch in FILLERS:
            values.append(None)
        elif ch.upper() in allowed:
            values.append(allowed.index(ch.upper()) + 1)
        else:
            raise InputFormatError(
                f"Unexpected character {ch!r} at cell {i}; use "
                f"{allowed[0]}-{allowed[-1]} for known cells and "
                f"{' or '.join(FILLERS)} for unknown ones")
    return values
