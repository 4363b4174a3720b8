"""
Procedural Texture Generation for the 3D Maze
Generates cobblestone, vine and door textures without external files
"""

import logging
import math
import random
import numpy as np
import pygame
import pygame.surfarray
from utils.constants import WALL, WALL_VINES, ENTRANCE, EXIT, WALL_CODES, TEXTURE_SIZE
from utils.helpers import clamp
from utils.colors import (
    COLOR_WALL, COLOR_WALL_VINES, COLOR_ENTRANCE, COLOR_EXIT, COLOR_FALLBACK,
    COLOR_VINE, COLOR_VINE_LEAF, COLOR_DOOR_FRAME
)

logger = logging.getLogger(__name__)


def _vary(color, rng, amount):
    """Randomly shift a color, clamped to 0-255"""
    return tuple(clamp(ch + rng.randint(-amount, amount), 0, 255) for ch in color)


class TextureManager:
    """
    Manages procedural wall textures keyed by grid wall code
    """

    def __init__(self, texture_size=TEXTURE_SIZE):
        """
        Args:
            texture_size: Size of textures (width and height)
        """
        self.texture_size = texture_size
        self._cache = {}
        self._warned_codes = set()
        self._seed = 42  # For reproducible textures

    def get_texture(self, texture_type, base_color=None):
        """
        Get or generate a texture

        Args:
            texture_type: 'cobble', 'vines', 'door'
            base_color: Base color tuple (R, G, B), or None for default

        Returns:
            pygame.Surface with the texture
        """
        cache_key = (texture_type, base_color, self.texture_size)

        if cache_key not in self._cache:
            if texture_type == 'cobble':
                self._cache[cache_key] = self._generate_cobble(base_color)
            elif texture_type == 'vines':
                self._cache[cache_key] = self._generate_vines(base_color)
            elif texture_type == 'door':
                self._cache[cache_key] = self._generate_door(base_color)
            else:
                # Default solid color
                self._cache[cache_key] = self._generate_solid(base_color or COLOR_FALLBACK)

        return self._cache[cache_key]

    def get_wall_texture(self, wall_code):
        """
        Texture for a grid wall code

        Unmapped codes get a flat fallback texture and one logged warning.
        """
        if wall_code == WALL:
            return self.get_texture('cobble', COLOR_WALL)
        if wall_code == WALL_VINES:
            return self.get_texture('vines', COLOR_WALL)
        if wall_code == ENTRANCE:
            return self.get_texture('door', COLOR_ENTRANCE)
        if wall_code == EXIT:
            return self.get_texture('door', COLOR_EXIT)

        if wall_code not in self._warned_codes:
            self._warned_codes.add(wall_code)
            logger.warning("No texture for wall code %s, using fallback color", wall_code)
        return self.get_texture('solid', COLOR_FALLBACK)

    def get_texture_table(self, codes=WALL_CODES):
        """
        Stack wall textures into one array indexed by wall code

        Returns:
            uint8 array (max_code + 1, size, size, 3), slot 0 (open) unused
        """
        size = self.texture_size
        table = np.zeros((max(codes) + 1, size, size, 3), dtype=np.uint8)
        for code in codes:
            table[code] = pygame.surfarray.array3d(self.get_wall_texture(code))
        return np.ascontiguousarray(table)

    def _generate_cobble(self, base_color=None):
        """
        Generate cobblestone texture

        Args:
            base_color: Base stone color, default gray

        Returns:
            pygame.Surface
        """
        if base_color is None:
            base_color = COLOR_WALL

        size = self.texture_size
        surface = pygame.Surface((size, size))
        surface.fill(base_color)

        rng = random.Random(self._seed + 1)

        # Stone centers for a Voronoi-like pattern
        stone_centers = []
        for _ in range(10):
            cx = rng.randint(0, size - 1)
            cy = rng.randint(0, size - 1)
            stone_centers.append((cx, cy, _vary(base_color, rng, 30)))

        for y in range(size):
            for x in range(size):
                distances = []
                for cx, cy, color in stone_centers:
                    # Wrap-around distance for seamless tiling
                    dx = min(abs(x - cx), size - abs(x - cx))
                    dy = min(abs(y - cy), size - abs(y - cy))
                    distances.append((dx * dx + dy * dy, color))
                distances.sort(key=lambda d: d[0])

                color = _vary(distances[0][1], rng, 10)

                # Darken pixels near the boundary between two stones
                if distances[1][0] - distances[0][0] < 50:
                    color = tuple(max(0, ch - 40) for ch in color)

                surface.set_at((x, y), color)

        return surface

    def _generate_vines(self, base_color=None):
        """Cobblestone texture overgrown with vines"""
        size = self.texture_size
        surface = self.get_texture('cobble', base_color).copy()

        rng = random.Random(self._seed + 2)

        # Hanging vine strands with leaves
        for _ in range(4):
            x = rng.randint(0, size - 1)
            length = rng.randint(size // 3, size)
            phase = rng.random() * math.pi * 2
            for y in range(length):
                vx = int(x + math.sin(y * 0.25 + phase) * 2) % size
                surface.set_at((vx, y), COLOR_VINE)
                surface.set_at(((vx + 1) % size, y), COLOR_VINE)
                if rng.random() < 0.15:
                    pygame.draw.circle(surface, COLOR_VINE_LEAF, (vx, y), 2)

        # Tint the whole tile toward the vine color
        tint = pygame.Surface((size, size))
        tint.fill(COLOR_WALL_VINES)
        tint.set_alpha(40)
        surface.blit(tint, (0, 0))

        return surface

    def _generate_door(self, base_color=None):
        """
        Generate a plank door texture for entrance and exit cells

        Args:
            base_color: Door color

        Returns:
            pygame.Surface
        """
        if base_color is None:
            base_color = COLOR_ENTRANCE

        size = self.texture_size
        surface = pygame.Surface((size, size))
        surface.fill(base_color)

        rng = random.Random(self._seed + 3)

        # Vertical grain
        for x in range(size):
            grain = math.sin(x * 0.5) * 12
            for y in range(size):
                noise = rng.randint(-6, 6)
                color = tuple(max(0, min(255, int(ch + grain + noise))) for ch in base_color)
                surface.set_at((x, y), color)

        # Plank seams and frame
        plank_w = size // 4
        for x in range(0, size, plank_w):
            pygame.draw.line(surface, COLOR_DOOR_FRAME, (x, 0), (x, size - 1))
        pygame.draw.rect(surface, COLOR_DOOR_FRAME, (0, 0, size, size), 3)

        return surface

    def _generate_solid(self, color):
        """Generate solid color texture"""
        surface = pygame.Surface((self.texture_size, self.texture_size))
        surface.fill(color)
        return surface
