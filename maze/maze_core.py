"""
Core maze grid functions - edges, connectivity, and console dumps
Grids are numpy int32 arrays indexed [row, col]
"""

from collections import deque
from utils.constants import OPEN, ENTRANCE, EXIT

# Neighbor offsets (row, col)
DIRS = [
    (-1, 0),   # up
    (0, 1),    # right
    (1, 0),    # down
    (0, -1),   # left
]


def logical_size(grid):
    """Number of logical cells per side of a (2n+1) x (2n+1) grid"""
    return (grid.shape[0] - 1) // 2


def cell_id(n, r, c):
    """Convert logical cell coordinates to a disjoint-set id"""
    return r * n + c


def cell_center(r, c):
    """Grid coordinates of a logical cell center"""
    return 2 * r + 1, 2 * c + 1


def logical_edges(n):
    """All adjacent logical cell pairs, each listed once"""
    edges = []
    for r in range(n):
        for c in range(n):
            if r + 1 < n:
                edges.append(((r, c), (r + 1, c)))
            if c + 1 < n:
                edges.append(((r, c), (r, c + 1)))
    return edges


def wall_between(a, b):
    """Grid coordinates of the wall cell between two adjacent logical cells"""
    (r1, c1), (r2, c2) = a, b
    return r1 + r2 + 1, c1 + c2 + 1


def carved_edges(grid):
    """Logical edges whose wall cell has been opened"""
    n = logical_size(grid)
    res = []
    for a, b in logical_edges(n):
        wr, wc = wall_between(a, b)
        if grid[wr, wc] == OPEN:
            res.append((a, b))
    return res


def in_bounds(grid, r, c):
    """Check if grid coordinates are inside the grid"""
    rows, cols = grid.shape
    return 0 <= r < rows and 0 <= c < cols


def neighbors_open(grid, r, c):
    """Get list of open neighbor cells"""
    res = []
    for dr, dc in DIRS:
        nr, nc = r + dr, c + dc
        if in_bounds(grid, nr, nc) and grid[nr, nc] == OPEN:
            res.append((nr, nc))
    return res


def bfs_reachable(grid, start):
    """Set of open cells reachable from start through open cells"""
    q = deque([start])
    seen = {start}

    while q:
        r, c = q.popleft()
        for nxt in neighbors_open(grid, r, c):
            if nxt not in seen:
                seen.add(nxt)
                q.append(nxt)
    return seen


def reconstruct_path(prev, goal):
    """Reconstruct path from prev dictionary"""
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path


def bfs_shortest_path(grid, start, goal):
    """BFS shortest path over open cells, [] if goal is unreachable"""
    if start == goal:
        return [start]

    q = deque([start])
    prev = {start: None}

    while q:
        r, c = q.popleft()
        for n in neighbors_open(grid, r, c):
            if n not in prev:
                prev[n] = (r, c)
                if n == goal:
                    return reconstruct_path(prev, goal)
                q.append(n)
    return []


def find_markers(grid):
    """
    Locate the entrance and exit cells

    Returns:
        (entrance, exit) as (row, col) tuples, None where a marker is missing
    """
    entrance = None
    exit_cell = None
    rows, cols = grid.shape
    for r in range(rows):
        for c in range(cols):
            if grid[r, c] == ENTRANCE:
                entrance = (r, c)
            elif grid[r, c] == EXIT:
                exit_cell = (r, c)
    return entrance, exit_cell


def is_perfect(grid):
    """
    Check the spanning-tree property over logical cells:
    n*n - 1 carved edges and every logical cell reachable from (1, 1)
    """
    n = logical_size(grid)
    if len(carved_edges(grid)) != n * n - 1:
        return False

    reachable = bfs_reachable(grid, cell_center(0, 0))
    for r in range(n):
        for c in range(n):
            if cell_center(r, c) not in reachable:
                return False
    return True


# ========== CONSOLE DUMP ==========

def format_maze(grid, player_cell=None):
    """
    Render the grid as wall/open/entrance/exit glyphs

    Args:
        grid: maze grid
        player_cell: optional (row, col) drawn as the viewer marker

    Returns:
        Multi-line string
    """
    lines = []
    rows, cols = grid.shape
    for r in range(rows):
        line = []
        for c in range(cols):
            tile = grid[r, c]
            if player_cell is not None and (r, c) == tuple(player_cell):
                line.append('●')
            elif tile == OPEN:
                line.append(' ')
            elif tile == ENTRANCE:
                line.append('S')
            elif tile == EXIT:
                line.append('E')
            else:
                line.append('█')
        lines.append(''.join(line))
    return '\n'.join(lines)


def format_maze_as_integers(grid):
    """Render the raw integer codes of the grid"""
    return '\n'.join(''.join(str(int(v)) for v in row) for row in grid)


def print_maze(grid, player_cell=None):
    """Print the glyph dump to the console"""
    print(format_maze(grid, player_cell))
    if player_cell is not None:
        print("You are here ➡ ●")
