"""
Snake on a fixed 9x9 board.

The snake never sheds its tail: every tick it survives adds one cell to its
trail and one point to the score. The game core (Snake, SnakeGame) does not
depend on pygame; snake_game.ui supplies the pygame window.
"""

from .constants import BOARD_SIZE, DIRECTIONS, DOWN, LEFT, RIGHT, TICK_INTERVAL_MS, UP
from .game import GameUi, SnakeGame, is_wall_collision
from .high_scores import JsonFileStore, add_score, load_high_scores, save_high_scores
from .snake import Snake

__all__ = [
    "UP", "DOWN", "LEFT", "RIGHT", "DIRECTIONS", "BOARD_SIZE", "TICK_INTERVAL_MS",
    "Snake",
    "GameUi", "SnakeGame", "is_wall_collision",
    "JsonFileStore", "load_high_scores", "save_high_scores", "add_score",
]
