import pytest

from sudokulogic.common import ContradictionError
from sudokulogic.grid import CandidateGrid
from sudokulogic.solution import (
    apply_solution,
    is_only,
    Solution,
    update_peers,
    Update,
)


@pytest.mark.parametrize("keep", [
    {1},
    {4, 8},
    {2, 3, 9},
    set(range(1, 10)),
])
def test_is_only_is_the_complement(keep):
    removal = set(is_only(keep))
    assert removal | keep == set(range(1, 10))
    assert not removal & keep


def test_is_only_accepts_int_and_size():
    assert is_only(3) == (1, 2, 4, 5, 6, 7, 8, 9)
    assert is_only([1, 2], n=4) == (3, 4)


def test_update_narrows(euler_grid):
    # Cell 1 starts as {4, 5, 7, 8}.
    u = Update(1, euler_grid, [4, 9])
    assert u.current_answer == (4, 5, 7, 8)
    assert u.updated_answer == (5, 7, 8)
    assert u.removal == (4, 9)
    assert u.eliminated == (4, )
    assert not u.solves


def test_update_solves(euler_grid):
    u = Update(0, euler_grid, is_only(5))
    assert u.updated_answer == (5, )
    assert u.solves


def test_update_refuses_contradictions(euler_grid):
    with pytest.raises(ContradictionError):
        Update(0, euler_grid, [4, 5])
    with pytest.raises(ContradictionError):
        Update(2, euler_grid, [1])


def test_apply_solution_solves_and_updates_peers(euler_grid):
    s = Solution("Test", [0], [Update(0, euler_grid, is_only(5))])
    after = apply_solution(euler_grid, s)
    assert after[0] == 5
    assert after[1] == frozenset({4, 7, 8})
    assert after.is_peer_consistent()
    # The original is untouched.
    assert euler_grid[0] == frozenset({4, 5})
    assert euler_grid[1] == frozenset({4, 5, 7, 8})


def test_apply_solution_list(euler_grid):
    first = Solution("Test", [1], [Update(1, euler_grid, [4])])
    second = Solution("Test", [1], [Update(1, euler_grid, [8])])
    after = apply_solution(euler_grid, [first, second])
    assert after[1] == frozenset({5, 7})


def test_size_one_candidates_stay_open(euler_grid):
    s = Solution("Test", [1], [Update(1, euler_grid, [4, 5, 7])])
    after = apply_solution(euler_grid, s)
    assert after[1] == 8
    narrowed = apply_solution(
        euler_grid, Solution("Test", [0], [Update(0, euler_grid, [4, 7])]))
    assert narrowed[0] == 5
    assert narrowed.is_solved(0)
    # Narrowing leaves a one-candidate set open until something solves it.
    grid = CandidateGrid([{1, 2}] + [frozenset(range(1, 10))] * 80)
    u = Update(1, grid, range(2, 10))
    assert not isinstance(apply_solution(grid, Solution("Test", [1], [u]))[0],
                          int)


def test_update_peers():
    grid = CandidateGrid([5] + [frozenset(range(1, 10))] * 80)
    after = update_peers(grid, 0)
    assert 5 not in after[1]
    assert 5 not in after[72]
    assert 5 not in after[20]
    assert 5 in after[30]


def test_solution_properties(euler_grid):
    solves = Update(0, euler_grid, is_only(4))
    narrows = Update(1, euler_grid, [7])
    s = Solution("Test", [0, 1], [solves, narrows])
    assert s.solved == (solves, )
    assert s.narrow == (narrows, )
    assert s.removal == is_only(4) + (7, )
    assert s.round is None
    tagged = s.with_round(3)
    assert tagged.round == 3
    assert s.round is None
    note = tagged.describe()
    assert note.startswith("Round 3: Test")
    assert "(row=1, col=1) must be 4" in note
    assert "eliminating [7] from (row=1, col=2)" in note
