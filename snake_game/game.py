"""
Game controller: owns the snake, the tick timer and the high scores.

The controller knows nothing about pygame. It talks to the screen through a
GameUi and starts its tick loop through a scheduler callable,
``schedule(period_ms, callback)``, which returns a handle with ``cancel()``.
"""

import logging
from abc import ABC, abstractmethod

from .constants import BOARD_SIZE, TICK_INTERVAL_MS
from .high_scores import add_score, load_high_scores
from .snake import Snake

logger = logging.getLogger(__name__)


class GameUi(ABC):
    """Everything the controller needs from whatever draws the game."""

    @abstractmethod
    def reset_board(self):
        """Clear the board to its empty state."""

    @abstractmethod
    def render_score(self, score):
        """Show the current score."""

    @abstractmethod
    def render_snake_head(self, x, y):
        """Draw the snake's starting cell."""

    @abstractmethod
    def render_snake_step(self, from_x, from_y, to_x, to_y):
        """Extend the drawn snake from one cell to the neighbouring one."""

    @abstractmethod
    def render_high_scores(self, scores):
        """Show the high scores in the order given."""


def is_wall_collision(x, y):
    """Return True if (x, y) lies outside the board."""
    return x < 0 or x >= BOARD_SIZE or y < 0 or y >= BOARD_SIZE


class SnakeGame:
    """One play session. Call initialize() before anything else."""

    def __init__(self, ui, store, schedule):
        self.ui = ui
        self.store = store
        self.schedule = schedule
        self.snake = Snake()
        self.is_over = False
        self._timer = None

    @property
    def is_running(self):
        return self._timer is not None

    def initialize(self):
        """Put the snake back at the start and redraw everything."""
        self.snake = Snake()
        self.is_over = False
        self.stop()
        self.ui.reset_board()
        self.ui.render_score(self.snake.score())
        self.ui.render_snake_head(self.snake.x, self.snake.y)
        self.ui.render_high_scores(load_high_scores(self.store))
        logger.debug("Game initialized at %s facing %s", self.snake.position, self.snake.direction)

    def start(self):
        """Start moving the snake. A timer that is already running is replaced."""
        self.stop()
        self._timer = self.schedule(TICK_INTERVAL_MS, self.tick)
        logger.debug("Game started")

    def stop(self):
        """Stop the tick loop. Safe to call when already stopped."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def set_direction(self, direction):
        self.snake.direction = direction

    def tick(self):
        """Move the snake one cell, ending the game on a collision."""
        x, y = self.snake.next_coordinates()
        if self.snake.has_visited(x, y):
            logger.info("Snake ran into itself at (%d, %d)", x, y)
            self.game_over()
        elif is_wall_collision(x, y):
            logger.info("Snake hit the wall at (%d, %d)", x, y)
            self.game_over()
        else:
            self.ui.render_snake_step(self.snake.x, self.snake.y, x, y)
            self.snake.move_to(x, y)
        self.ui.render_score(self.snake.score())

    def game_over(self):
        """Stop the snake and record its score."""
        self.stop()
        self.is_over = True
        score = self.snake.score()
        high_scores = add_score(self.store, score)
        logger.info("Game over with score %d", score)
        self.ui.render_high_scores(high_scores)

    # Callbacks for the UI

    def on_start(self):
        # Re-initialize in case a game is already running.
        self.initialize()
        self.start()

    def on_reset(self):
        self.initialize()

    def on_direction(self, direction):
        self.set_direction(direction)
