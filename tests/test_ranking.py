import pytest

from sudokulogic.ranking import best_group, filter_best, sort_by_bestness
from sudokulogic.solution import (
    ChainNotes,
    is_only,
    RankCategory,
    SingleJustification,
    Solution,
    Update,
)


def single(grid, index, digit, justification):
    return Solution(
        strategy=f"Single Candidate ({justification.value})",
        cell_init=[index],
        updates=[Update(index, grid, is_only(digit))],
        category=RankCategory.SINGLE_CANDIDATE,
        justification=justification,
    )


def chain(grid, updates, rounds):
    return Solution("Chain", [0], updates, category=RankCategory.CHAIN,
                    chain=ChainNotes([], rounds, []))


def test_empty():
    with pytest.raises(ValueError):
        best_group([])


def test_more_solved_wins(euler_grid):
    # Cell 0 is {4, 5}; cell 1 is {4, 5, 7, 8}.
    narrows = Solution("A", [0], [Update(1, euler_grid, [7])])
    solves = Solution("B", [0], [Update(0, euler_grid, [4])])
    assert filter_best([narrows, solves]) is solves
    assert sort_by_bestness([narrows, solves]) == [solves, narrows]


def test_more_narrowed_then_fewest_remaining(euler_grid):
    one = Solution("A", [0], [Update(1, euler_grid, [7])])
    # Cell 5 is {1, 4, 7}.
    two = Solution("B", [0], [Update(1, euler_grid, [7]),
                              Update(5, euler_grid, [4])])
    assert filter_best([one, two]) is two
    less_left = Solution("C", [0], [Update(1, euler_grid, [7, 8])])
    assert filter_best([one, less_left]) is less_left
    # Exact tie: first found.
    again = Solution("D", [0], [Update(1, euler_grid, [8])])
    assert filter_best([one, again]) is one


def test_single_candidate_preference(euler_grid):
    narrowing = single(euler_grid, 0, 4, SingleJustification.NARROWING)
    multi = single(euler_grid, 1, 7, SingleJustification.MULTI_PARAMETER)
    row = single(euler_grid, 3, 9, SingleJustification.ROW)
    box = single(euler_grid, 5, 1, SingleJustification.BOX)
    assert best_group([narrowing, multi, row, box]) == [row, box]
    assert best_group([narrowing, multi]) == [multi]
    assert best_group([narrowing]) == [narrowing]
    assert sort_by_bestness([narrowing, multi, row, box]) == [
        row, box, multi, narrowing]


def test_single_per_partition_first_found(euler_grid):
    a = Solution("A", [5], [Update(5, euler_grid, is_only(1))],
                 category=RankCategory.SINGLE_PER_PARTITION)
    b = Solution("B", [10], [Update(10, euler_grid, [2])],
                 category=RankCategory.SINGLE_PER_PARTITION)
    assert best_group([a, b]) == [a]
    assert best_group([b, a]) == [b]


def test_chain_preference(euler_grid):
    slow = chain(euler_grid, [Update(0, euler_grid, [4])], rounds=3)
    fast_small = chain(euler_grid, [Update(1, euler_grid, [4])], rounds=2)
    fast_big = chain(euler_grid, [Update(1, euler_grid, [4]),
                                  Update(3, euler_grid, [4])], rounds=2)
    assert filter_best([slow, fast_small, fast_big]) is fast_big
    assert sort_by_bestness([slow, fast_small, fast_big]) == [
        fast_big, fast_small, slow]


def test_deterministic(euler_grid):
    solutions = [
        Solution(str(i), [i], [Update(1, euler_grid, [7])]) for i in range(5)
    ]
    assert filter_best(solutions) is solutions[0]
    assert sort_by_bestness(solutions) == solutions
