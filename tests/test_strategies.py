from sudokulogic.geometry import PartitionKind
from sudokulogic.grid import CandidateGrid
from sudokulogic.solution import RankCategory, SingleJustification
from sudokulogic.strategies import (
    BoxNarrowing,
    CellSweep,
    PartitionSweep,
    SingleCandidate,
    SingleCandidatePerPartition,
    sweep,
)


def test_sweep_returns_none_not_empty(chain_grid):
    assert SingleCandidate().find(chain_grid) is None
    assert sweep(SingleCandidate(), chain_grid, [0, 1]) is None


def test_sweep_scopes(euler_grid):
    g = euler_grid.geometry
    assert len(PartitionSweep().scopes(g)) == 27
    rows_only = PartitionSweep([PartitionKind.ROW]).scopes(g)
    assert rows_only == g.rows
    assert list(CellSweep().scopes(g)) == list(range(81))


def test_single_candidate(euler_grid):
    found = SingleCandidate().find(euler_grid)
    assert [s.cell_init for s in found] == [(41, ), (42, ), (75, )]
    first = found[0]
    assert first.strategy == "Single Candidate (Multi-Parameter)"
    assert first.category == RankCategory.SINGLE_CANDIDATE
    assert first.justification == SingleJustification.MULTI_PARAMETER
    assert first.updates[0].updated_answer == (4, )


def test_single_candidate_justifications():
    solved_row = list(range(1, 10))
    cells = [frozenset({1})] + solved_row[1:] + [
        frozenset(range(1, 10))] * 72
    grid = CandidateGrid(cells)
    found = SingleCandidate().scan(grid, 0)
    assert found[0].justification == SingleJustification.ROW
    assert found[0].strategy == "Single Candidate (Row)"
    # Open cells all round, but still one candidate: needed elimination.
    narrowed = CandidateGrid([frozenset({7})] + [frozenset(range(1, 10))] * 80)
    found = SingleCandidate().scan(narrowed, 0)
    assert found[0].justification == SingleJustification.NARROWING


def test_single_candidate_per_partition(euler_grid):
    found = SingleCandidatePerPartition().find(euler_grid)
    assert len(found) == 19
    first = found[0]
    assert first.strategy == "Single Candidate Per Partition (Row)"
    assert first.cell_init == (5, )
    assert first.updates[0].updated_answer == (1, )
    assert first.category == RankCategory.SINGLE_PER_PARTITION


def test_single_candidate_per_partition_needs_real_partition(euler_grid):
    assert SingleCandidatePerPartition().scan(euler_grid, [0, 1, 2]) is None


def test_box_narrowing(chain_grid):
    found = BoxNarrowing().find(chain_grid)
    assert len(found) == 2
    # Claiming: in row 8, 9 can only go in box 8.
    claiming, pointing = found
    assert claiming.cell_init == (66, 67)
    assert [u.index for u in claiming.updates] == [75, 76, 77]
    assert all(u.removal == (9, ) for u in claiming.updates)
    # Pointing: in box 7, 9 can only go in row 9.
    assert pointing.cell_init == (72, 73)
    assert [u.index for u in pointing.updates] == [75, 76, 77]
    assert claiming.updates[2].updated_answer == (3, 5)
    assert claiming.category == RankCategory.ELIMINATION
    assert claiming.strategy == "Box Narrowing"


def test_strategies_do_not_modify_grid(chain_grid):
    before = chain_grid.to_string(), tuple(chain_grid)
    BoxNarrowing().find(chain_grid)
    SingleCandidatePerPartition().find(chain_grid)
    assert (chain_grid.to_string(), tuple(chain_grid)) == before
