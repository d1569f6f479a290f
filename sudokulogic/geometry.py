#!/usr/bin/env python

"""
geometry.py

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

**Fixed geometry of a Sudoku board.**

Cells are numbered 0 to n^2 - 1, left to right then top to bottom, where
n = rank^2 (n = 9 for a normal, rank 3, Sudoku). Every cell belongs to one
row, one column and one box; these are its three "partitions". Its "peers"
are all other cells sharing any partition with it.

Nothing here holds state; :func:`get_geometry` caches one :class:`Geometry`
per rank.

"""

from enum import Enum
from functools import lru_cache
import logging
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from sudokulogic.common import ConfigurationError, DEFAULT_RANK

log = logging.getLogger(__name__)


# =============================================================================
# Partitions
# =============================================================================

class PartitionKind(Enum):
    ROW = "Row"
    COLUMN = "Column"
    BOX = "Box"


class Partition(NamedTuple):
    """
    A row, column or box: a group of cells that must contain each digit
    exactly once.
    """
    kind: PartitionKind
    number: int  # zero-based row/column/box number
    cells: Tuple[int, ...]  # cell indices, ascending

    def __str__(self) -> str:
        return f"{self.kind.value.lower()} {self.number + 1}"


# =============================================================================
# Box
# =============================================================================

class Box(object):
    """
    Represents a rank x rank box within the Sudoku grid.
    """
    def __init__(self, box_zb: int, rank: int = DEFAULT_RANK) -> None:
        """
        Boxes are numbered 0 to N - 1, left to right then top to bottom. For
        a standard 9x9 (rank 3) Sudoku, with 3x3 boxes, they are numbered 0-8.

        Args:
            box_zb: box number, as above; zero-based
            rank: rank
        """
        assert 0 <= box_zb < rank ** 2, (
            f"box_zb was {box_zb}; must be in range 0 to {rank ** 2 - 1} "
            f"inclusive"
        )
        self.rank = rank
        self.box_zb = box_zb

    def __repr__(self) -> str:
        return f"Box({self.box_zb}, rank={self.rank})"

    def top_left_cell(self) -> Tuple[int, int]:
        """
        Returns ``row_zb, col_zb`` for the top-left cell in the box.
        """
        t = self.rank
        return (self.box_zb // t) * t, (self.box_zb % t) * t

    @classmethod
    def containing(cls, row_zb: int, col_zb: int,
                   rank: int = DEFAULT_RANK) -> "Box":
        """
        Returns the box containing this cell.
        """
        t = rank
        return cls(box_zb=(row_zb // t) * t + col_zb // t, rank=rank)

    def cell_indices(self) -> Tuple[int, ...]:
        """
        Flat cell indices for this box, ascending.
        """
        n = self.rank ** 2
        row_min, col_min = self.top_left_cell()
        return tuple(
            r * n + c
            for r in range(row_min, row_min + self.rank)
            for c in range(col_min, col_min + self.rank)
        )


# =============================================================================
# Geometry
# =============================================================================

class Geometry(object):
    """
    All the partitions of a board of a given rank, plus per-cell lookups.
    """
    def __init__(self, rank: int = DEFAULT_RANK) -> None:
        if rank < 2:
            raise ConfigurationError(f"Rank must be at least 2, not {rank}")
        self.rank = rank
        self.n = n = rank ** 2
        self.n_cells = n * n
        self.digits = tuple(range(1, n + 1))
        self.all_index = tuple(range(self.n_cells))

        self.rows = [
            Partition(PartitionKind.ROW, r,
                      tuple(r * n + c for c in range(n)))
            for r in range(n)
        ]  # type: List[Partition]
        self.columns = [
            Partition(PartitionKind.COLUMN, c,
                      tuple(r * n + c for r in range(n)))
            for c in range(n)
        ]  # type: List[Partition]
        self.boxes = [
            Partition(PartitionKind.BOX, b, Box(b, rank=rank).cell_indices())
            for b in range(n)
        ]  # type: List[Partition]
        # Enumeration order matters: rows, then columns, then boxes.
        self.all_partitions = self.rows + self.columns + self.boxes

        self._box_number = [
            Box.containing(i // n, i % n, rank=rank).box_zb
            for i in self.all_index
        ]  # type: List[int]
        self._by_cells = {
            frozenset(p.cells): p for p in self.all_partitions
        }  # type: Dict[frozenset, Partition]
        self._peers = tuple(
            tuple(sorted(
                (set(self.row_of(i).cells) |
                 set(self.column_of(i).cells) |
                 set(self.box_of(i).cells)) - {i}
            ))
            for i in self.all_index
        )
        log.debug(f"Built geometry for rank {rank} ({n}x{n})")

    def __repr__(self) -> str:
        return f"Geometry(rank={self.rank})"

    def row_number(self, index: int) -> int:
        return index // self.n

    def column_number(self, index: int) -> int:
        return index % self.n

    def box_number(self, index: int) -> int:
        return self._box_number[index]

    def row_of(self, index: int) -> Partition:
        return self.rows[self.row_number(index)]

    def column_of(self, index: int) -> Partition:
        return self.columns[self.column_number(index)]

    def box_of(self, index: int) -> Partition:
        return self.boxes[self.box_number(index)]

    def peers(self, index: int) -> Tuple[int, ...]:
        """
        All other cells sharing a row, column or box with this one.
        """
        return self._peers[index]

    def partition_of_cells(self, cells: Iterable[int]) -> Optional[Partition]:
        """
        Identifies which row, column or box a group of cells is, or returns
        ``None`` if it isn't exactly one of them.
        """
        return self._by_cells.get(frozenset(cells))

    def pretty(self, index: int) -> str:
        return (f"(row={self.row_number(index) + 1}, "
                f"col={self.column_number(index) + 1})")


@lru_cache(maxsize=None)
def get_geometry(rank: int = DEFAULT_RANK) -> Geometry:
    """
    Returns the (shared, immutable) geometry for a rank.
    """
    return Geometry(rank)
