"""Field-wide constants for Round/Square.

Window dimensions, colors, font sizes, field geometry, shape class tags and
size bounds, the random placement range, and logging configuration.
"""
import os

WIDTH, HEIGHT = 960, 640           # window size
FPS = 60                           # target frame rate
BG_COLOR = (25, 28, 33)            # dark page background
TEXT_COLOR = (235, 235, 235)       # light text
HINT_COLOR = (200, 200, 200)
HUD_PADDING = 12
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 14
FONT_SIZE_MEDIUM = 16

# Field element
FIELD_CLASS = "js-game-field"
FIELD_LEFT, FIELD_TOP = 40, 60
FIELD_WIDTH, FIELD_HEIGHT = 880, 550
FIELD_COLOR = "#f2efe6"
FIELD_Z_INDEX = 0

# Shapes
SQUARE_CLASS = "figure-square"
ROUND_CLASS = "figure-round"
SQUARE_MIN_SIZE, SQUARE_MAX_SIZE = 20, 150
ROUND_MIN_SIZE, ROUND_MAX_SIZE = 30, 200
RANDOM_CENTER_MIN, RANDOM_CENTER_MAX = 0, 1000   # default center range per axis
MAX_COLOR = 0xFFFFFF

# Log file settings
LOG_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "log.md")
