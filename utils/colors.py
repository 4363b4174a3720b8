"""
Color palette for Kruskal Maze 3D
"""

# Background colors
COLOR_CEILING = (35, 40, 55)      # Ceiling half of the view
COLOR_FLOOR = (55, 50, 45)        # Floor half of the view

# UI colors
COLOR_TEXT = (210, 210, 210)      # Normal text
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)  # Highlighted text
COLOR_TEXT_DIM = (150, 150, 150)  # Dimmed text

# Flat wall colors (simple renderer and texture bases)
COLOR_WALL = (128, 128, 128)        # Normal cobble wall
COLOR_WALL_VINES = (90, 120, 80)    # Cobble wall with vines
COLOR_ENTRANCE = (100, 149, 237)    # Start
COLOR_EXIT = (60, 200, 120)         # End

# Unknown wall code
COLOR_FALLBACK = (255, 0, 255)

# Texture details
COLOR_VINE = (50, 110, 45)
COLOR_VINE_LEAF = (80, 150, 60)
COLOR_DOOR_FRAME = (70, 60, 50)
