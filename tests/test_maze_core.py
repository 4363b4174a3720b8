import numpy as np

from maze.generator import MazeGenerator
from maze.maze_core import (
    bfs_shortest_path, carved_edges, cell_center, cell_id, find_markers,
    format_maze, format_maze_as_integers, is_perfect, logical_edges,
    logical_size, neighbors_open, print_maze, wall_between
)


def _grid(rows):
    return np.array(rows, dtype=np.int32)


def test_logical_edge_count() -> None:
    for n in range(1, 8):
        assert len(logical_edges(n)) == 2 * n * (n - 1)


def test_cell_and_wall_coordinates() -> None:
    assert cell_id(4, 2, 3) == 11
    assert cell_center(2, 3) == (5, 7)
    assert wall_between((0, 0), (0, 1)) == (1, 2)
    assert wall_between((1, 2), (2, 2)) == (4, 5)


def test_carved_edges_and_perfect_check() -> None:
    # 2x2 logical maze shaped like a U
    grid = _grid([
        [1, 1, 1, 1, 1],
        [1, 0, 1, 0, 1],
        [1, 0, 1, 0, 1],
        [1, 0, 0, 0, 1],
        [1, 1, 1, 1, 1],
    ])

    assert logical_size(grid) == 2
    assert sorted(carved_edges(grid)) == [((0, 0), (1, 0)), ((0, 1), (1, 1)), ((1, 0), (1, 1))]
    assert is_perfect(grid)


def test_cycle_is_not_perfect() -> None:
    grid = _grid([
        [1, 1, 1, 1, 1],
        [1, 0, 0, 0, 1],
        [1, 0, 1, 0, 1],
        [1, 0, 0, 0, 1],
        [1, 1, 1, 1, 1],
    ])

    assert not is_perfect(grid)


def test_disconnected_is_not_perfect() -> None:
    grid = _grid([
        [1, 1, 1, 1, 1],
        [1, 0, 0, 0, 1],
        [1, 1, 1, 0, 1],
        [1, 0, 1, 0, 1],
        [1, 1, 1, 1, 1],
    ])

    assert not is_perfect(grid)


def test_neighbors_open_stays_in_bounds() -> None:
    grid = _grid([
        [0, 1],
        [0, 0],
    ])

    assert sorted(neighbors_open(grid, 0, 0)) == [(1, 0)]
    assert sorted(neighbors_open(grid, 1, 0)) == [(0, 0), (1, 1)]


def test_shortest_path_between_entrance_and_exit() -> None:
    result = MazeGenerator(seed=21).generate(8)
    grid = result.grid
    start = (result.entrance[0], 1)
    goal = (result.exit[0], grid.shape[1] - 2)

    path = bfs_shortest_path(grid, start, goal)

    assert path[0] == start
    assert path[-1] == goal
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1
        assert grid[r2, c2] == 0


def test_shortest_path_unreachable_goal() -> None:
    grid = _grid([
        [0, 1, 0],
    ])

    assert bfs_shortest_path(grid, (0, 0), (0, 2)) == []
    assert bfs_shortest_path(grid, (0, 0), (0, 0)) == [(0, 0)]


def test_find_markers() -> None:
    result = MazeGenerator(seed=2).generate(4)

    assert find_markers(result.grid) == (result.entrance, result.exit)


def test_format_maze_glyphs() -> None:
    grid = _grid([
        [1, 2, 1],
        [3, 0, 4],
        [1, 1, 1],
    ])

    assert format_maze(grid) == "███\nS E\n███"
    assert format_maze(grid, player_cell=(1, 1)) == "███\nS●E\n███"


def test_format_maze_as_integers() -> None:
    grid = _grid([
        [1, 2, 1],
        [3, 0, 4],
        [1, 1, 1],
    ])

    assert format_maze_as_integers(grid) == "121\n304\n111"


def test_print_maze_writes_to_console(capsys) -> None:
    grid = MazeGenerator(seed=0).generate(1).grid

    print_maze(grid, (1, 1))
    out = capsys.readouterr().out

    assert "S●E" in out
    assert "You are here" in out
