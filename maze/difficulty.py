"""
Per-level maze configuration
Each level grows the maze until MAX_MAZE_SIZE is reached
"""

from utils.constants import START_MAZE_SIZE, WALL_VARIANT_CHANCE

MAX_MAZE_SIZE = 30
SIZE_STEP = 2


class LevelConfig:
    """Configuration for a single level"""
    def __init__(self, **kwargs):
        # Logical maze cells per side
        self.maze_size = kwargs.get('maze_size', START_MAZE_SIZE)

        # Decorative wall variant probability
        self.variant_chance = kwargs.get('variant_chance', WALL_VARIANT_CHANCE)

    def __repr__(self):
        return f"LevelConfig(maze_size={self.maze_size}, variant_chance={self.variant_chance})"


def get_level_config(level_number, start_size=START_MAZE_SIZE):
    """
    Get configuration for a level

    Args:
        level_number: 1-based level index
        start_size: maze size of level 1

    Returns:
        LevelConfig
    """
    if level_number < 1:
        raise ValueError(f"level number must be >= 1, got {level_number}")

    cap = max(MAX_MAZE_SIZE, start_size)
    size = min(cap, start_size + (level_number - 1) * SIZE_STEP)
    return LevelConfig(maze_size=size)
