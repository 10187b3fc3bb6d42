"""Fixed game rules shared by the core and the pygame front end."""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# Width/height of the square board, in cells
BOARD_SIZE = 9

# Where a new snake starts and which way it faces
START_X = 4
START_Y = 4
START_DIRECTION = RIGHT

# How often the snake advances, in milliseconds
TICK_INTERVAL_MS = 500

# High-score persistence
HIGH_SCORES_KEY = "high_scores"
MAX_HIGH_SCORES = 10
SCORES_FILE_ENV = "SNAKE_GAME_SCORES_FILE"
