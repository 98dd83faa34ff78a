import numpy as np
import pytest

from gridsnake.food import BoardFullError, FoodSpawner
from gridsnake.grid import GridGeometry


def test_never_spawns_on_excluded_cells(geometry, spawner):
    excluded = {(c, r) for c in range(geometry.cols) for r in range(geometry.rows) if (c + r) % 3}
    for _ in range(500):
        cell = spawner.spawn(excluded, geometry)
        assert cell not in excluded
        assert geometry.in_bounds(cell)


def test_last_free_cell_is_found(geometry, spawner):
    free = (7, 5)
    excluded = [c for c in geometry.cells() if c != free]
    assert spawner.spawn(excluded, geometry) == free


def test_full_board_raises(geometry, spawner):
    with pytest.raises(BoardFullError):
        spawner.spawn(list(geometry.cells()), geometry)


def test_out_of_bounds_exclusions_ignored(spawner):
    geo = GridGeometry(20, 10, 10)  # 2x1
    cell = spawner.spawn([(0, 0), (5, 5), (-1, 0)], geo)
    assert cell == (1, 0)


def test_free_mask_shape(geometry, spawner):
    mask = spawner.free_mask([(2, 1)], geometry)
    assert mask.shape == (geometry.rows, geometry.cols)
    assert not mask[1, 2]
    assert mask.sum() == geometry.cell_count - 1


def test_same_seed_same_sequence(geometry):
    a, b = FoodSpawner(seed=7), FoodSpawner(seed=7)
    assert [a.spawn([], geometry) for _ in range(20)] == [b.spawn([], geometry) for _ in range(20)]


def test_roughly_uniform(spawner):
    geo = GridGeometry(20, 20, 10)  # 4 cells
    counts = np.zeros(4, dtype=int)
    for _ in range(4000):
        col, row = spawner.spawn([], geo)
        counts[row * 2 + col] += 1
    assert counts.min() > 800
