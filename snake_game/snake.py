"""State of a single snake: where it is, where it has been, where it is going."""

from .constants import DOWN, LEFT, RIGHT, START_DIRECTION, START_X, START_Y, UP


class Snake:
    """
    A snake that never sheds its tail.

    Attributes:
        x, y: current position (top-left origin, all coordinates positive)
        direction: direction of travel used on the next step
        history: every cell visited, oldest first; the last entry is (x, y)
    """

    def __init__(self, x=START_X, y=START_Y, direction=START_DIRECTION):
        self.x = x
        self.y = y
        self.direction = direction
        self.history = [(x, y)]

    @property
    def position(self):
        return self.x, self.y

    def has_visited(self, x, y):
        """Return True if the snake has ever occupied (x, y)."""
        return (x, y) in self.history

    def move_to(self, x, y):
        """Set the current position and add it to the history. Bounds are the caller's problem."""
        self.x = x
        self.y = y
        self.history.append((x, y))

    def score(self):
        return len(self.history) - 1

    def next_coordinates(self):
        """Return the (x, y) one step ahead in the current direction without moving."""
        # (0,0) is the top-left cell, so UP decreases y.
        x, y = self.x, self.y
        if self.direction == RIGHT:
            x += 1
        elif self.direction == UP:
            y -= 1
        elif self.direction == DOWN:
            y += 1
        elif self.direction == LEFT:
            x -= 1
        else:
            raise ValueError(f"Unrecognized direction: {self.direction!r}")
        return x, y
