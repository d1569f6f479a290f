import pytest

from sudokulogic.common import ConfigurationError
from sudokulogic.fish import Fish
from sudokulogic.grid import CandidateGrid

ALL_DIGITS = frozenset(range(1, 10))
WITHOUT_5 = ALL_DIGITS - {5}


def x_wing_grid(rows=(0, 4), columns=(1, 7)) -> CandidateGrid:
    """
    Everything open; in the given rows, 5 can only be in the given columns.
    """
    cells = [ALL_DIGITS] * 81
    for r in rows:
        for c in range(9):
            if c not in columns:
                cells[r * 9 + c] = WITHOUT_5
    return CandidateGrid(cells)


def test_names():
    assert [Fish(k).name for k in (2, 3, 4)] == [
        "x_wing", "swordfish", "jellyfish"]
    assert Fish(2).label == "X-Wing"
    with pytest.raises(ConfigurationError):
        Fish(5)


def test_x_wing_rows():
    found = Fish(2).find(x_wing_grid())
    assert len(found) == 1
    s = found[0]
    assert s.strategy == "X-Wing"
    assert s.cell_init == (1, 7, 37, 43)
    targets = [u.index for u in s.updates]
    assert len(targets) == 14
    assert all(i % 9 in (1, 7) for i in targets)
    assert all(u.removal == (5, ) for u in s.updates)


def test_x_wing_columns():
    # Transpose: in columns 0 and 4, 5 can only be in rows 1 and 7.
    grid = x_wing_grid()
    transposed = CandidateGrid(
        [grid[(i % 9) * 9 + i // 9] for i in range(81)])
    found = Fish(2).find(transposed)
    assert len(found) == 1
    assert found[0].cell_init == (9, 63, 13, 67)
    assert all(i // 9 in (1, 7) for i in (u.index for u in found[0].updates))


def test_swordfish():
    grid = x_wing_grid(rows=(0, 3, 6), columns=(2, 5, 8))
    found = Fish(3).find(grid)
    assert len(found) == 1
    assert len(found[0].updates) == 18
    assert Fish(2).find(grid) is None


def test_no_fish(open_grid, chain_grid):
    assert Fish(2).find(open_grid) is None
    assert Fish(2).find(chain_grid) is None
    assert Fish(4).find(chain_grid) is None


def test_jellyfish():
    grid = x_wing_grid(rows=(0, 2, 4, 6), columns=(1, 3, 5, 7))
    found = Fish(4).find(grid)
    assert len(found) == 1
    s = found[0]
    assert s.strategy == "Jellyfish"
    assert len(s.updates) == 20
    targets = [u.index for u in s.updates]
    assert all(i % 9 in (1, 3, 5, 7) for i in targets)
    assert all(i // 9 not in (0, 2, 4, 6) for i in targets)
    assert all(u.removal == (5, ) for u in s.updates)
