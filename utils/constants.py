"""
Global constants for Kruskal Maze 3D
"""

import math

# Screen settings
SCREEN_W = 640
SCREEN_H = 480
FPS = 60

# HUD text line height
HUD_LINE_H = 20

# Grid cell codes
OPEN = 0
WALL = 1
WALL_VINES = 2   # decorative wall variant
ENTRANCE = 3
EXIT = 4

WALL_CODES = (WALL, WALL_VINES, ENTRANCE, EXIT)

# Chance that a wall cell uses the vines variant (70/30 split)
WALL_VARIANT_CHANCE = 0.3

# Logical maze size of the first level
START_MAZE_SIZE = 10

# Viewer settings
FOV_DEGREES = 60
FOV = math.radians(FOV_DEGREES)
PLAYER_MOVE_SPEED = 2.5    # cells per second
PLAYER_STRAFE_SPEED = 2.5  # cells per second
PLAYER_TURN_SPEED = 1.5    # radians per second

# Projection: a wall one cell away fills the screen height
WALL_SCALE = SCREEN_H

# DDA sentinel for an axis the ray never crosses
DDA_INFINITY = 1e30

# Closest distance a wall slice is projected from
MIN_WALL_DISTANCE = 1e-6

# Texture settings
TEXTURE_SIZE = 64

# Entrance/exit placement retry ceiling
MAX_PLACEMENT_ATTEMPTS = 100000

# Wall shading
SIDE_SHADE = 0.75
MAX_SHADE_DISTANCE = 15.0
MIN_SHADE = 0.3
