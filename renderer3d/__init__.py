"""
3D Renderer Module - Wolfenstein3D style raycasting
"""

from .raycaster import Raycaster, RaySlice, wall_height
from .player3d import Player3D
from .renderer import Renderer3D, draw_flat_frame
from .textures import TextureManager

__all__ = ['Raycaster', 'RaySlice', 'wall_height', 'Player3D', 'Renderer3D',
           'draw_flat_frame', 'TextureManager']
