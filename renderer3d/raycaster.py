"""
Raycaster Engine - DDA (Digital Differential Analyzer) algorithm
Wolfenstein3D style raycasting through the maze cell grid
Optimized with Numba JIT compilation
"""

import math
from collections import namedtuple
import numpy as np
from numba import njit, int32, float64
from utils.constants import FOV, WALL_SCALE, DDA_INFINITY, MIN_WALL_DISTANCE

# One screen column of a rendered frame.
# side: 0 = vertical face (x step), 1 = horizontal face (y step)
RaySlice = namedtuple('RaySlice', 'column distance wall_code wall_x side hit steps')

# Columns of the cast_all_rays result array
COL_DISTANCE = 0
COL_SIDE = 1
COL_WALL_CODE = 2
COL_WALL_X = 3
COL_HIT = 4


@njit(cache=True)
def _numba_cast_ray(grid, rows, cols, px, py, ray_angle, view_angle):
    """
    Cast one ray through the grid (Numba JIT compiled)

    Args:
        grid: 2D int32 array indexed [row, col], 0 = open
        rows, cols: grid dimensions
        px, py: viewer position in cells (x = column, y = row)
        ray_angle: ray direction in radians
        view_angle: viewer facing angle in radians

    Returns:
        (distance, side, wall_code, wall_x, hit, steps)
    """
    ray_dir_x = math.cos(ray_angle)
    ray_dir_y = math.sin(ray_angle)

    # Current cell
    map_x = int(math.floor(px))
    map_y = int(math.floor(py))

    # Delta distances
    if ray_dir_x == 0.0:
        delta_dist_x = DDA_INFINITY
    else:
        delta_dist_x = abs(1.0 / ray_dir_x)
    if ray_dir_y == 0.0:
        delta_dist_y = DDA_INFINITY
    else:
        delta_dist_y = abs(1.0 / ray_dir_y)

    # Step direction and distance to the first grid line
    if ray_dir_x < 0:
        step_x = -1
        side_dist_x = (px - map_x) * delta_dist_x
    else:
        step_x = 1
        side_dist_x = (map_x + 1.0 - px) * delta_dist_x

    if ray_dir_y < 0:
        step_y = -1
        side_dist_y = (py - map_y) * delta_dist_y
    else:
        step_y = 1
        side_dist_y = (map_y + 1.0 - py) * delta_dist_y

    # DDA loop, bounded by the longest monotone walk out of the grid
    max_steps = 2 * (rows + cols)
    hit = False
    side = 0
    wall_code = 0
    steps = 0

    while steps < max_steps:
        if side_dist_x < side_dist_y:
            side_dist_x += delta_dist_x
            map_x += step_x
            side = 0
        else:
            side_dist_y += delta_dist_y
            map_y += step_y
            side = 1
        steps += 1

        # Leaving the grid is a miss
        if map_x < 0 or map_x >= cols or map_y < 0 or map_y >= rows:
            break

        code = grid[map_y, map_x]
        if code != 0:
            hit = True
            wall_code = int(code)
            break

    if not hit:
        return math.inf, side, 0, 0.0, False, steps

    # Ray length up to the face that was crossed
    if side == 0:
        ray_len = side_dist_x - delta_dist_x
    else:
        ray_len = side_dist_y - delta_dist_y

    # Fish-eye correction
    distance = ray_len * math.cos(ray_angle - view_angle)

    # Texture X coordinate along the struck face
    if side == 0:
        wall_x = py + ray_len * ray_dir_y
    else:
        wall_x = px + ray_len * ray_dir_x
    wall_x -= math.floor(wall_x)

    if (side == 0 and step_x < 0) or (side == 1 and step_y > 0):
        wall_x = 1.0 - wall_x
    if wall_x >= 1.0:
        wall_x -= 1.0

    return distance, side, wall_code, wall_x, True, steps


@njit(cache=True)
def _numba_cast_all_rays(grid, rows, cols, px, py, view_angle, fov_rad, num_rays):
    """
    Cast one ray per screen column (Numba JIT compiled)

    Returns:
        results: numpy array shape (num_rays, 5)
                 [distance, side, wall_code, wall_x, hit]
    """
    results = np.empty((num_rays, 5), dtype=np.float64)

    for i in range(num_rays):
        ray_angle = view_angle + (i / num_rays - 0.5) * fov_rad
        distance, side, wall_code, wall_x, hit, _ = _numba_cast_ray(
            grid, rows, cols, px, py, ray_angle, view_angle
        )
        results[i, 0] = distance
        results[i, 1] = float64(side)
        results[i, 2] = float64(wall_code)
        results[i, 3] = wall_x
        results[i, 4] = 1.0 if hit else 0.0

    return results


def wall_height(distance, scale=WALL_SCALE):
    """
    On-screen height of a wall slice

    Args:
        distance: corrected perpendicular distance
        scale: projection constant (screen height fills at distance 1)

    Returns:
        Height in pixels, 0 for a miss
    """
    if not math.isfinite(distance):
        return 0
    # A viewer flush against a wall still sees it fill the screen
    return int(scale / max(distance, MIN_WALL_DISTANCE))


class Raycaster:
    """
    DDA Raycasting engine for first-person maze rendering
    Uses Numba JIT for high-performance ray casting
    """

    def __init__(self, fov=FOV, num_rays=320):
        """
        Args:
            fov: field of view in radians
            num_rays: rays per frame (one per screen column)
        """
        self.fov = fov
        self.num_rays = num_rays

        # Cached grid array
        self._grid_cache = None
        self._grid_source = None

    def set_resolution(self, num_rays):
        """Update ray count for different screen widths"""
        self.num_rays = num_rays

    def _get_grid_array(self, grid):
        """Convert grid to a contiguous int32 numpy array (with caching)"""
        if self._grid_source is not grid or self._grid_cache is None:
            if (isinstance(grid, np.ndarray) and grid.dtype == np.int32
                    and grid.flags['C_CONTIGUOUS']):
                self._grid_cache = grid
            else:
                self._grid_cache = np.ascontiguousarray(grid, dtype=np.int32)
            self._grid_source = grid
        return self._grid_cache

    def ray_angle(self, column, view_angle, screen_width=None, fov=None):
        """Angle of the ray through a screen column"""
        if screen_width is None:
            screen_width = self.num_rays
        if fov is None:
            fov = self.fov
        return view_angle + (column / screen_width - 0.5) * fov

    def cast_ray(self, grid, px, py, ray_angle, view_angle, column=-1):
        """
        Cast a single ray

        Returns:
            RaySlice
        """
        grid_arr = self._get_grid_array(grid)
        rows, cols = grid_arr.shape
        distance, side, wall_code, wall_x, hit, steps = _numba_cast_ray(
            grid_arr, int32(rows), int32(cols),
            float64(px), float64(py), float64(ray_angle), float64(view_angle)
        )
        return RaySlice(column, distance, wall_code, wall_x, side, hit, steps)

    def render_frame(self, grid, pose, screen_width):
        """
        Lazily cast one ray per screen column, left to right

        Args:
            grid: maze grid, not modified while the frame is consumed
            pose: object with world_x, world_y, angle and fov
            screen_width: number of columns

        Yields:
            RaySlice per column; hit is False where the ray left the grid
        """
        grid_arr = self._get_grid_array(grid)
        rows, cols = grid_arr.shape
        px = float64(pose.world_x)
        py = float64(pose.world_y)
        view_angle = float64(pose.angle)
        fov = pose.fov

        for column in range(screen_width):
            ray_angle = self.ray_angle(column, view_angle, screen_width, fov)
            distance, side, wall_code, wall_x, hit, steps = _numba_cast_ray(
                grid_arr, int32(rows), int32(cols),
                px, py, float64(ray_angle), view_angle
            )
            yield RaySlice(column, distance, wall_code, wall_x, side, hit, steps)

    def cast_all_rays(self, grid, px, py, view_angle):
        """
        Cast all rays for the screen using Numba JIT

        Returns:
            numpy array shape (num_rays, 5):
            [distance, side, wall_code, wall_x, hit]
        """
        grid_arr = self._get_grid_array(grid)
        rows, cols = grid_arr.shape
        return _numba_cast_all_rays(
            grid_arr, int32(rows), int32(cols),
            float64(px), float64(py), float64(view_angle),
            float64(self.fov), int32(self.num_rays)
        )
