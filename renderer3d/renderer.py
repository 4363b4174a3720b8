"""
3D Scene Renderer - Optimized with NumPy frame buffer
First-person view rendering using surfarray + Numba JIT
"""

import pygame
import pygame.surfarray
import numpy as np
from numba import njit, int32, float64
from .raycaster import Raycaster, wall_height
from .textures import TextureManager
from utils.constants import (
    WALL, WALL_VINES, ENTRANCE, EXIT, FOV, TEXTURE_SIZE,
    SIDE_SHADE, MAX_SHADE_DISTANCE, MIN_SHADE, MIN_WALL_DISTANCE
)
from utils.colors import (
    COLOR_CEILING, COLOR_FLOOR, COLOR_WALL, COLOR_WALL_VINES,
    COLOR_ENTRANCE, COLOR_EXIT, COLOR_FALLBACK
)

# Flat colors for the untextured renderer
FLAT_COLORS = {
    WALL: COLOR_WALL,
    WALL_VINES: COLOR_WALL_VINES,
    ENTRANCE: COLOR_ENTRANCE,
    EXIT: COLOR_EXIT,
}

_FALLBACK = np.array(COLOR_FALLBACK, dtype=np.uint8)


@njit(cache=True)
def _numba_draw_walls(ray_results, frame_buffer, tex_table, render_height,
                      tex_size, wall_scale, side_shade, max_shade_dist,
                      min_shade, fallback):
    """
    Draw wall slices to frame buffer (Numba JIT compiled)

    Args:
        ray_results: numpy array (num_rays, 5) from cast_all_rays
        frame_buffer: numpy array (width, height, 3) uint8
        tex_table: numpy array (codes, tex_size, tex_size, 3) uint8
        render_height: screen height
        tex_size: texture dimension (e.g. 64)
        wall_scale: projection constant
        side_shade: brightness factor for horizontal faces
        max_shade_dist: distance at which shading bottoms out
        min_shade: darkest shading factor
        fallback: uint8 color for codes missing from tex_table
    """
    num_rays = ray_results.shape[0]
    num_codes = tex_table.shape[0]

    for x in range(num_rays):
        if ray_results[x, 4] == 0.0:
            continue  # ray left the maze

        dist = ray_results[x, 0]
        side = int32(ray_results[x, 1])
        code = int32(ray_results[x, 2])
        wall_x = ray_results[x, 3]

        if dist < MIN_WALL_DISTANCE:
            dist = MIN_WALL_DISTANCE

        full_height = int32(wall_scale / dist)
        if full_height <= 0:
            continue

        # Slice centered vertically, clamped to screen
        full_top = (render_height - full_height) // 2
        draw_start = full_top
        if draw_start < 0:
            draw_start = 0
        draw_end = full_top + full_height
        if draw_end > render_height:
            draw_end = render_height

        tex_x = int32(wall_x * tex_size)
        if tex_x >= tex_size:
            tex_x = tex_size - 1
        elif tex_x < 0:
            tex_x = 0

        # Shading
        shade = 1.0 - dist / max_shade_dist
        if shade < min_shade:
            shade = min_shade
        elif shade > 1.0:
            shade = 1.0
        if side == 1:
            shade *= side_shade

        for y in range(draw_start, draw_end):
            tex_y = int32(((y - full_top) * tex_size) / full_height)
            if tex_y < 0:
                tex_y = 0
            elif tex_y >= tex_size:
                tex_y = tex_size - 1

            for ch in range(3):
                if 0 < code < num_codes:
                    value = tex_table[code, tex_x, tex_y, ch]
                else:
                    value = fallback[ch]
                shaded = int32(value * shade)
                if shaded > 255:
                    shaded = 255
                frame_buffer[x, y, ch] = shaded


class Renderer3D:
    """
    Optimized 3D renderer using NumPy frame buffer and surfarray
    """

    def __init__(self, screen_width, screen_height, fov=FOV):
        """
        Initialize 3D renderer

        Args:
            screen_width, screen_height: Screen dimensions
            fov: Field of view in radians
        """
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.fov = fov
        self.wall_scale = screen_height

        # Initialize components
        self.raycaster = Raycaster(fov=fov, num_rays=screen_width)
        self.texture_manager = TextureManager(texture_size=TEXTURE_SIZE)

        # Wall textures as one array indexed by wall code
        self._tex_table = self.texture_manager.get_texture_table()

        # Frame buffer - RGB array (width, height, 3)
        self.frame_buffer = np.zeros((screen_width, screen_height, 3), dtype=np.uint8)

    def render(self, screen, player, grid):
        """
        Render the 3D view using NumPy frame buffer

        Args:
            screen: pygame.Surface to render to
            player: viewer pose (world_x, world_y, angle)
            grid: maze grid
        """
        self._draw_ceiling_floor()
        self._draw_walls(player, grid)

        screen_w, screen_h = screen.get_size()
        if screen_w == self.screen_width and screen_h == self.screen_height:
            pygame.surfarray.blit_array(screen, self.frame_buffer)
        else:
            render_surface = pygame.Surface((self.screen_width, self.screen_height))
            pygame.surfarray.blit_array(render_surface, self.frame_buffer)
            screen.blit(render_surface, (0, 0))

    def _draw_ceiling_floor(self):
        """Flat ceiling above the horizon, flat floor below"""
        half_h = self.screen_height // 2
        self.frame_buffer[:, :half_h] = COLOR_CEILING
        self.frame_buffer[:, half_h:] = COLOR_FLOOR

    def _draw_walls(self, player, grid):
        """Draw walls using raycasting with Numba JIT optimization"""
        ray_results = self.raycaster.cast_all_rays(
            grid, player.world_x, player.world_y, player.angle
        )

        _numba_draw_walls(
            ray_results, self.frame_buffer, self._tex_table,
            int32(self.screen_height), int32(self.texture_manager.texture_size),
            float64(self.wall_scale), float64(SIDE_SHADE),
            float64(MAX_SHADE_DISTANCE), float64(MIN_SHADE), _FALLBACK
        )


def draw_flat_slice(screen, column, height, color):
    """Draw a 1-pixel-wide wall strip centered vertically"""
    screen_h = screen.get_height()
    top = max(0, (screen_h - height) // 2)
    bottom = min(screen_h, top + height)
    if bottom > top:
        pygame.draw.line(screen, color, (column, top), (column, bottom - 1))


def draw_flat_frame(screen, slices, wall_scale=None):
    """
    Draw a frame of RaySlice values with one flat color per wall code

    Args:
        screen: pygame.Surface to draw on
        slices: iterable of RaySlice, e.g. Raycaster.render_frame()
        wall_scale: projection constant, screen height by default

    Returns:
        Number of columns drawn
    """
    if wall_scale is None:
        wall_scale = screen.get_height()

    half_h = screen.get_height() // 2
    screen.fill(COLOR_CEILING, (0, 0, screen.get_width(), half_h))
    screen.fill(COLOR_FLOOR, (0, half_h, screen.get_width(), screen.get_height() - half_h))

    drawn = 0
    for ray in slices:
        if not ray.hit:
            continue
        color = FLAT_COLORS.get(ray.wall_code, COLOR_FALLBACK)
        if ray.side == 1:
            color = tuple(int(ch * SIDE_SHADE) for ch in color)
        draw_flat_slice(screen, ray.column, wall_height(ray.distance, wall_scale), color)
        drawn += 1
    return drawn
