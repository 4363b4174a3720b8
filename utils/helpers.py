"""
Helper utility functions for Kruskal Maze 3D
"""

import math


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def normalize_angle(angle):
    """Wrap an angle in radians to [0, 2pi)"""
    return angle % (2 * math.pi)


def format_time(seconds):
    """Format seconds to MM:SS string"""
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes:02d}:{secs:02d}"
