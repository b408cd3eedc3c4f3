"""Colour palette shared by the course, obstacles and ball (RGBA tuples)."""

WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)

# Course colours
LIGHT_GREEN = (35, 110, 35, 255)
DARK_GREEN = (30, 100, 30, 255)

# Obstacle colours
LIGHT_BROWN = (139, 69, 19, 255)
DARK_BROWN = (120, 60, 12, 255)
GRAY = (100, 100, 100, 255)

# Ball colours
BALL_COLOR = WHITE
DRAG_LINE_COLOR = RED

# Semi-transparent black used for drop shadows
SHADOW_COLOR = (0, 0, 0, 70)