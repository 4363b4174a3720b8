"""
Level Manager - handles maze generation, viewer spawning, and level progression
"""

import logging
import random
from maze.generator import MazeGenerator
from maze.difficulty import get_level_config
from renderer3d.player3d import Player3D
from utils.constants import START_MAZE_SIZE

logger = logging.getLogger(__name__)


class Level:
    """
    Represents a single level/maze
    """
    def __init__(self, level_number, rng, start_size=START_MAZE_SIZE):
        """
        Args:
            level_number: 1-based level index
            rng: random.Random shared by all levels of a run
            start_size: maze size of level 1
        """
        self.level_number = level_number
        self.config = get_level_config(level_number, start_size)
        self.rng = rng

        # Maze data
        self.maze = None
        self.grid = None

        # Viewer
        self.player = None

        # Level state
        self.time_elapsed = 0.0
        self.completed = False

    def generate_maze(self):
        """Generate the maze and place the viewer at the entrance"""
        generator = MazeGenerator(rng=self.rng, variant_chance=self.config.variant_chance)
        self.maze = generator.generate(self.config.maze_size)
        self.grid = self.maze.grid
        self.player = Player3D.from_spawn(self.maze.spawn_y)
        logger.info("Level %d: %dx%d maze, spawn row %.1f",
                    self.level_number, self.maze.n, self.maze.n, self.maze.spawn_y)

    @property
    def exit_pos(self):
        """(row, col) of the exit cell"""
        return self.maze.exit

    def update(self, dt):
        """
        Update level state

        Args:
            dt: Delta time in seconds

        Returns:
            True when the viewer stands on the exit cell
        """
        if self.maze is None or self.completed:
            return self.completed

        self.time_elapsed += dt

        if self.player.cell == self.maze.exit:
            self.completed = True
            logger.info("Level %d complete in %.1fs", self.level_number, self.time_elapsed)
        return self.completed

    def __repr__(self):
        return f"Level(number={self.level_number}, maze={self.maze})"


class LevelManager:
    """
    Manages level progression and state
    """
    def __init__(self, seed=None, start_size=START_MAZE_SIZE):
        """
        Args:
            seed: seed for the run's random source, None for a random run
            start_size: maze size of level 1
        """
        self.rng = random.Random(seed)
        self.start_size = start_size
        self.current_level = None
        self.best_times = {}  # {level_number: seconds}

    def create_level(self, level_number):
        """
        Create and generate a new level

        Returns:
            Level object
        """
        level = Level(level_number, self.rng, self.start_size)
        level.generate_maze()
        self.current_level = level
        return level

    def next_level(self):
        """Record the finished level and generate the following one"""
        if self.current_level is None:
            return self.create_level(1)

        finished = self.current_level
        if finished.completed:
            self.record_time(finished.level_number, finished.time_elapsed)
        return self.create_level(finished.level_number + 1)

    def regenerate_current_level(self):
        """Replace the current maze with a fresh one of the same level"""
        number = self.current_level.level_number if self.current_level else 1
        return self.create_level(number)

    def update_current_level(self, dt):
        """
        Update current level

        Returns:
            'continue' or 'complete'
        """
        if not self.current_level:
            return 'continue'

        if self.current_level.update(dt):
            return 'complete'
        return 'continue'

    def record_time(self, level_number, seconds):
        """Record best completion time for a level"""
        best = self.best_times.get(level_number)
        if best is None or seconds < best:
            self.best_times[level_number] = seconds

    def get_best_time(self, level_number):
        """Best completion time for a level, None if never completed"""
        return self.best_times.get(level_number)

    def __repr__(self):
        return f"LevelManager(current_level={self.current_level})"
