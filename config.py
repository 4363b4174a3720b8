"""
Program identity and run-time settings for Kruskal Maze 3D
"""

import logging
import os

GAME_TITLE = "Kruskal Maze 3D"
GAME_VERSION = "1.0.0"

# Console log level name, e.g. DEBUG to see generation details
LOG_LEVEL = os.environ.get("MAZE_LOG_LEVEL", "INFO")

# Fixed seed for reproducible runs, unset for a random run
_seed = os.environ.get("MAZE_SEED")
MAZE_SEED = int(_seed) if _seed else None

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level=None):
    """Install the console log handler"""
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
