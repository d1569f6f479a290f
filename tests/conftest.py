"""
Shared puzzles for the tests.
"""

import pytest

from sudokulogic.grid import CandidateGrid

# Project Euler problem 96, grid 01. Needs only single candidates.
EULER_1 = (
    "003020600900305001001806400008102900700000008"
    "006708200002609500800203009005010300"
)
EULER_1_SOLUTION = (
    "483921657967345821251876493548132976729564138"
    "136798245372689514814253769695417382"
)

# Gets stuck on everything short of chains.
CHAIN_PUZZLE = (
    "270060540050127080000400270000046752027508410"
    "500712908136274895785001024002000107"
)
CHAIN_PUZZLE_SOLUTION = (
    "271863549954127386368459271819346752627598413"
    "543712968136274895785931624492685137"
)

# Coton 54: needs box narrowing and a naked pair.
NAKED_PAIR_PUZZLE = (
    "000000000002301450010000060047050380000703000"
    "036000140070000090091405600000009000"
)
NAKED_PAIR_PUZZLE_SOLUTION = (
    "358264971762391458914587263247156389189743526"
    "536928147473612895891475632625839714"
)


@pytest.fixture
def euler_grid() -> CandidateGrid:
    return CandidateGrid.from_string(EULER_1)


@pytest.fixture
def chain_grid() -> CandidateGrid:
    return CandidateGrid.from_string(CHAIN_PUZZLE)


@pytest.fixture
def naked_pair_grid() -> CandidateGrid:
    return CandidateGrid.from_string(NAKED_PAIR_PUZZLE)


@pytest.fixture
def open_grid() -> CandidateGrid:
    """
    Nothing known: every cell can be anything.
    """
    return CandidateGrid([range(1, 10)] * 81)
