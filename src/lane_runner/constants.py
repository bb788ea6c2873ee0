"""
constants.py: Centralized configuration for the game world and rendering.
"""

# -------- Window & Render Config --------
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
RENDER_FPS = 60
WINDOW_CAPTION = "Lane Runner"

# -------- Entity Config --------
ENTITY_SIZE = 50.0              # Every entity is a 50x50 box

# -------- Lane Config --------
LANE_COUNT = 3
LANE_WIDTH = 200.0
LANE_MARGIN = 170.0             # x of lane 0
START_LANE = 1

# -------- Spawn Config --------
PLAYER_START_X = 150.0          # Snapped onto START_LANE on construction
PLAYER_START_Y = 500.0
FIRST_OBSTACLE_Y = 300.0
SPAWN_Y = -50.0                 # Just above the visible area

# -------- Motion Config (Pixels / Second) --------
CLASSIC_FALL_SPEED = 175.0
SCORED_FALL_SPEED = 250.0

# Automatic random jump (scored variant), seconds
JUMP_INTERVAL_MIN = 1.0
JUMP_INTERVAL_MAX = 3.0

# Obstacles this far below the window are swept from the working set
PRUNE_MARGIN = 0.0

# -------- Colors & Text --------
BACKGROUND_COLOR = (0, 0, 0)
GRASS_COLOR = (34, 120, 34)
GRASS_TILE_COLOR = (40, 134, 40)
GRASS_TILE = 100
PLAYER_COLOR = (0, 255, 0)
OBSTACLE_COLOR = (255, 0, 0)
TEXT_COLOR = (255, 255, 255)
GAME_OVER_COLOR = (255, 50, 50)

SCORE_FONT_SIZE = 32
GAME_OVER_FONT_SIZE = 40
SCORE_POSITION = (10, 10)
