import random

import numpy as np
import pytest

from maze.generator import MazeGenerator, gen_kruskal
from maze.maze_core import (
    bfs_reachable, carved_edges, cell_center, is_perfect, logical_edges
)
from utils.constants import OPEN, WALL, WALL_VINES, ENTRANCE, EXIT


def test_single_cell_maze() -> None:
    result = MazeGenerator(seed=0).generate(1)
    grid = result.grid

    assert grid.shape == (3, 3)
    assert grid[1, 1] == OPEN
    assert result.carved == []
    assert result.entrance == (1, 0)
    assert result.exit == (1, 2)
    assert grid[1, 0] == ENTRANCE
    assert grid[1, 2] == EXIT
    assert result.spawn_y == 1.5


def test_five_by_five_with_seed_is_reproducible() -> None:
    first = MazeGenerator(seed=2024).generate(5)
    second = MazeGenerator(seed=2024).generate(5)

    assert len(first.carved) == 24
    assert len(carved_edges(first.grid)) == 24
    assert is_perfect(first.grid)
    assert np.array_equal(first.grid, second.grid)
    assert first.entrance == second.entrance
    assert first.exit == second.exit


@pytest.mark.parametrize("n", [1, 2, 3, 4, 7, 12])
def test_spanning_tree_property(n) -> None:
    for seed in range(5):
        result = MazeGenerator(seed=seed).generate(n)

        assert result.grid.shape == (2 * n + 1, 2 * n + 1)
        assert len(result.carved) == n * n - 1
        assert is_perfect(result.grid)


@pytest.mark.parametrize("n", [1, 3, 6, 10])
def test_every_open_cell_is_reachable(n) -> None:
    grid = MazeGenerator(seed=n).generate(n).grid
    reachable = bfs_reachable(grid, cell_center(0, 0))

    rows, cols = np.nonzero(grid == OPEN)
    open_cells = set(zip(rows.tolist(), cols.tolist()))
    assert open_cells == reachable


@pytest.mark.parametrize("seed", range(10))
def test_entrance_and_exit_on_opposite_borders(seed) -> None:
    result = MazeGenerator(seed=seed).generate(6)
    grid = result.grid
    size = grid.shape[0]

    assert np.count_nonzero(grid == ENTRANCE) == 1
    assert np.count_nonzero(grid == EXIT) == 1

    er, ec = result.entrance
    xr, xc = result.exit
    assert ec == 0
    assert xc == size - 1
    assert 1 <= er <= size - 2
    assert 1 <= xr <= size - 2
    assert grid[er, 1] == OPEN
    assert grid[xr, size - 2] == OPEN
    assert result.spawn_y == er + 0.5


def test_fixed_edge_order_is_deterministic() -> None:
    edges = logical_edges(4)
    first = MazeGenerator(seed=1, variant_chance=0.0).generate(4, edges=list(edges))
    second = MazeGenerator(seed=99, variant_chance=0.0).generate(4, edges=list(edges))

    assert first.carved == second.carved
    assert np.array_equal(first.grid[:, 1:-1], second.grid[:, 1:-1])


def test_edges_processed_in_given_order() -> None:
    # Without shuffling, every edge of the first row is accepted first
    edges = logical_edges(3)
    result = MazeGenerator(seed=0).generate(3, edges=edges)

    assert result.carved[0] == edges[0]
    assert len(result.carved) == 8


@pytest.mark.parametrize("n", [0, -1, 2.5, True, "3", None])
def test_invalid_size_is_rejected(n) -> None:
    with pytest.raises(ValueError):
        MazeGenerator(seed=0).generate(n)


def test_wall_variant_chance_extremes() -> None:
    plain = MazeGenerator(seed=3, variant_chance=0.0).generate(5).grid
    vines = MazeGenerator(seed=3, variant_chance=1.0).generate(5).grid

    assert not np.any(plain == WALL_VINES)
    assert not np.any(vines == WALL)


def test_default_wall_variant_split() -> None:
    grid = MazeGenerator(seed=11).generate(30).grid
    walls = np.count_nonzero((grid == WALL) | (grid == WALL_VINES))
    vines = np.count_nonzero(grid == WALL_VINES)

    assert 0.25 < vines / walls < 0.35


def test_grid_is_read_only_after_generation() -> None:
    grid = MazeGenerator(seed=0).generate(3).grid

    with pytest.raises(ValueError):
        grid[1, 1] = WALL


def test_injected_rng_is_used() -> None:
    a = MazeGenerator(rng=random.Random(5)).generate(6)
    b = MazeGenerator(seed=5).generate(6)

    assert np.array_equal(a.grid, b.grid)


def test_animated_generation_yields_every_carve() -> None:
    states = list(gen_kruskal(4, random.Random(8)))

    assert states[0]["done"] is False
    assert states[-1]["done"] is True
    # setup state + one per carve + final state
    assert len(states) == 1 + 15 + 1
    assert len(states[-1]["carved"]) == 15


def test_steps_then_place_markers() -> None:
    generator = MazeGenerator(seed=4)
    last = None
    for state in generator.steps(3):
        last = state

    result = generator.place_markers(last["grid"], last["carved"])
    assert result.n == 3
    assert result.size == 7
    assert is_perfect(result.grid)
