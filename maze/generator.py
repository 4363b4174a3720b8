"""
Maze generation - randomized Kruskal's algorithm over a disjoint set
The grid is (2n+1) x (2n+1): odd/odd cells are rooms, the rest are walls
"""

import logging
import numbers
import random
import numpy as np
from utils.constants import (
    OPEN, WALL, WALL_VINES, ENTRANCE, EXIT,
    WALL_VARIANT_CHANCE, MAX_PLACEMENT_ATTEMPTS
)
from maze.disjoint_set import DisjointSet
from maze.maze_core import cell_id, cell_center, logical_edges, wall_between

logger = logging.getLogger(__name__)


class MazeResult:
    """
    A finished maze handed from the generator to the level

    Attributes:
        grid: read-only numpy int32 array (2n+1, 2n+1)
        n: logical cells per side
        entrance, exit: (row, col) of the border markers
        spawn_y: entrance row centered in its cell
        carved: logical edges opened, in carve order
    """

    def __init__(self, grid, n, entrance, exit_cell, carved):
        self.grid = grid
        self.n = n
        self.entrance = entrance
        self.exit = exit_cell
        self.spawn_y = entrance[0] + 0.5
        self.carved = carved

    @property
    def size(self):
        return self.grid.shape[0]

    def __repr__(self):
        return f"MazeResult(n={self.n}, entrance={self.entrance}, exit={self.exit})"


def _check_size(n):
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
        raise ValueError(f"maze size must be a positive integer, got {n!r}")


def gen_kruskal(n, rng, variant_chance=WALL_VARIANT_CHANCE, edges=None):
    """
    Kruskal's algorithm - animated generator

    Args:
        n: logical cells per side
        rng: random.Random used for wall variants and the edge shuffle
        variant_chance: probability of the vines wall variant
        edges: optional fixed edge order; skips the shuffle when given

    Yields:
        {"grid", "carved", "current", "done"} after setup and every carve
    """
    _check_size(n)
    size = 2 * n + 1

    # Fill with walls (1 or 2)
    grid = np.empty((size, size), dtype=np.int32)
    for r in range(size):
        for c in range(size):
            grid[r, c] = WALL_VINES if rng.random() < variant_chance else WALL

    # Open cell centers
    for r in range(n):
        for c in range(n):
            grid[cell_center(r, c)] = OPEN

    ds = DisjointSet(n * n)
    if edges is None:
        edges = logical_edges(n)
        rng.shuffle(edges)

    carved = []
    yield {"grid": grid, "carved": carved, "current": (0, 0), "done": False}

    for a, b in edges:
        if ds.union(cell_id(n, *a), cell_id(n, *b)):
            grid[wall_between(a, b)] = OPEN
            carved.append((a, b))
            yield {"grid": grid, "carved": carved, "current": b, "done": False}

    yield {"grid": grid, "carved": carved, "current": (0, 0), "done": True}


class MazeGenerator:
    """
    Builds perfect mazes with entrance and exit markers

    All randomness comes from one random.Random, so a seed reproduces a maze.
    """

    def __init__(self, seed=None, rng=None, variant_chance=WALL_VARIANT_CHANCE):
        """
        Args:
            seed: seed for a new random.Random (ignored when rng is given)
            rng: random.Random to draw from
            variant_chance: probability of the vines wall variant
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.variant_chance = variant_chance

    def steps(self, n, edges=None):
        """Animated generation states, finish with place_markers()"""
        return gen_kruskal(n, self.rng, self.variant_chance, edges)

    def generate(self, n, edges=None):
        """
        Generate a maze instantly

        Args:
            n: logical cells per side (>= 1)
            edges: optional fixed edge order for reproducible mazes

        Returns:
            MazeResult
        """
        last_state = None
        for state in self.steps(n, edges):
            last_state = state

        result = self.place_markers(last_state["grid"], last_state["carved"])
        logger.debug("Generated %dx%d maze: %d passages, entrance %s, exit %s",
                     n, n, len(result.carved), result.entrance, result.exit)
        return result

    def place_markers(self, grid, carved):
        """
        Mark the entrance on the left border and the exit on the right border,
        then freeze the grid

        Returns:
            MazeResult
        """
        size = grid.shape[0]
        n = (size - 1) // 2

        start_row = self._pick_border_row(grid, 1)
        grid[start_row, 0] = ENTRANCE

        end_row = self._pick_border_row(grid, size - 2)
        grid[end_row, size - 1] = EXIT

        grid.setflags(write=False)
        return MazeResult(grid, n, (start_row, 0), (end_row, size - 1), carved)

    def _pick_border_row(self, grid, inner_col):
        """Random row whose cell in inner_col is open"""
        size = grid.shape[0]
        for _ in range(MAX_PLACEMENT_ATTEMPTS):
            row = self.rng.randint(1, size - 2)
            if grid[row, inner_col] == OPEN:
                return row
        raise RuntimeError(f"no open cell found in column {inner_col}")
