import argparse
import logging
import sys

import pygame

from .constants import BOARD_SIZE, DOWN, LEFT, RIGHT, UP
from .game import GameUi, SnakeGame
from .high_scores import JsonFileStore, default_scores_path
from .timer import TimerPool

logger = logging.getLogger(__name__)

# Window configuration
WINDOW_WIDTH = 680
WINDOW_HEIGHT = 500
CELL_SIZE = 44
CELL_PADDING = 5
CORNER_RADIUS = 12
BOARD_LEFT = 24
BOARD_TOP = 80
PANEL_LEFT = BOARD_LEFT + BOARD_SIZE * CELL_SIZE + 30
ARROW_SIZE = 44
FPS = 30

# Colors (R, G, B)
BG_TOP = (18, 26, 38)
BG_BOTTOM = (9, 14, 22)
GRID_LINE = (30, 44, 61)
CELL_COLOR = (24, 34, 48)
HEAD_COLOR = (112, 224, 120)
BODY_COLOR = (66, 168, 90)
BUTTON_COLOR = (52, 78, 110)
BUTTON_DISABLED = (40, 46, 56)
WHITE = (240, 240, 240)
MUTED = (120, 128, 140)

# Corners and sides of a cell
TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT = "tl", "tr", "bl", "br"
ALL_CORNERS = {TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT}

# For a step in each direction: the corners rounded on the leading edge, the side
# of the old cell that joins the new one, and the side of the new cell that joins back.
STEP_EDGES = {
    LEFT: ({TOP_LEFT, BOTTOM_LEFT}, "left", "right"),
    RIGHT: ({TOP_RIGHT, BOTTOM_RIGHT}, "right", "left"),
    UP: ({TOP_LEFT, TOP_RIGHT}, "top", "bottom"),
    DOWN: ({BOTTOM_LEFT, BOTTOM_RIGHT}, "bottom", "top"),
}


def direction_between(from_x, from_y, to_x, to_y):
    """Return the direction that points from (from_x, from_y) to (to_x, to_y)."""
    if to_x > from_x:
        return RIGHT
    if to_x < from_x:
        return LEFT
    if to_y > from_y:
        return DOWN
    if to_y < from_y:
        return UP
    raise ValueError(f"No step from ({from_x}, {from_y}) to itself")


class BoardCells:
    """
    What is drawn in each board cell.

    A visited cell remembers which of its corners are rounded and which of its
    sides are joined to a neighbour, so the snake's path reads as one body
    with a rounded tip at each end.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self.rounded = {}
        self.joined = {}
        self.head = None

    def is_visited(self, x, y):
        return (x, y) in self.rounded

    def _visit(self, x, y):
        self.rounded.setdefault((x, y), set())
        self.joined.setdefault((x, y), set())

    def start_at(self, x, y):
        """Draw a fully rounded cell at (x, y)."""
        self._visit(x, y)
        self.rounded[(x, y)] |= ALL_CORNERS
        self.head = (x, y)

    def step(self, from_x, from_y, to_x, to_y):
        corners, from_side, to_side = STEP_EDGES[direction_between(from_x, from_y, to_x, to_y)]
        self._visit(from_x, from_y)
        self._visit(to_x, to_y)
        self.rounded[(from_x, from_y)] -= corners
        self.joined[(from_x, from_y)].add(from_side)
        self.rounded[(to_x, to_y)] |= corners
        self.joined[(to_x, to_y)].add(to_side)
        self.head = (to_x, to_y)

    def cell_rect(self, x, y):
        """Return the pixel rectangle for the snake segment drawn in (x, y)."""
        joined = self.joined.get((x, y), set())
        left = BOARD_LEFT + x * CELL_SIZE + (0 if "left" in joined else CELL_PADDING)
        top = BOARD_TOP + y * CELL_SIZE + (0 if "top" in joined else CELL_PADDING)
        right = BOARD_LEFT + (x + 1) * CELL_SIZE - (0 if "right" in joined else CELL_PADDING)
        bottom = BOARD_TOP + (y + 1) * CELL_SIZE - (0 if "bottom" in joined else CELL_PADDING)
        return pygame.Rect(left, top, right - left, bottom - top)


class Button:
    """A clickable labelled rectangle."""

    def __init__(self, rect, label, enabled=True):
        self.rect = pygame.Rect(rect)
        self.label = label
        self.enabled = enabled

    def hit(self, pos):
        return self.enabled and self.rect.collidepoint(pos)

    def draw(self, surface, font):
        color = BUTTON_COLOR if self.enabled else BUTTON_DISABLED
        pygame.draw.rect(surface, color, self.rect, border_radius=8)
        text = font.render(self.label, True, WHITE if self.enabled else MUTED)
        surface.blit(text, text.get_rect(center=self.rect.center))


def get_ui_font(size):
    """Load a preferred UI font, then fall back to the pygame default."""
    preferred = ["Bahnschrift", "Segoe UI", "DejaVu Sans", "Arial"]
    for name in preferred:
        path = pygame.font.match_font(name)
        if path:
            return pygame.font.Font(path, size)
    return pygame.font.Font(None, size)


def draw_background(surface):
    """Draw a vertical gradient behind everything."""
    for y in range(WINDOW_HEIGHT):
        t = y / WINDOW_HEIGHT
        r = int(BG_TOP[0] + (BG_BOTTOM[0] - BG_TOP[0]) * t)
        g = int(BG_TOP[1] + (BG_BOTTOM[1] - BG_TOP[1]) * t)
        b = int(BG_TOP[2] + (BG_BOTTOM[2] - BG_TOP[2]) * t)
        pygame.draw.line(surface, (r, g, b), (0, y), (WINDOW_WIDTH, y))


def draw_board(surface, cells):
    """Draw the empty grid, then the snake's path with its head highlighted."""
    board_px = BOARD_SIZE * CELL_SIZE
    pygame.draw.rect(surface, CELL_COLOR, (BOARD_LEFT, BOARD_TOP, board_px, board_px))
    for i in range(BOARD_SIZE + 1):
        offset = i * CELL_SIZE
        pygame.draw.line(
            surface, GRID_LINE, (BOARD_LEFT + offset, BOARD_TOP), (BOARD_LEFT + offset, BOARD_TOP + board_px)
        )
        pygame.draw.line(
            surface, GRID_LINE, (BOARD_LEFT, BOARD_TOP + offset), (BOARD_LEFT + board_px, BOARD_TOP + offset)
        )

    for (x, y), corners in cells.rounded.items():
        color = HEAD_COLOR if (x, y) == cells.head else BODY_COLOR
        pygame.draw.rect(
            surface,
            color,
            cells.cell_rect(x, y),
            border_top_left_radius=CORNER_RADIUS if TOP_LEFT in corners else 0,
            border_top_right_radius=CORNER_RADIUS if TOP_RIGHT in corners else 0,
            border_bottom_left_radius=CORNER_RADIUS if BOTTOM_LEFT in corners else 0,
            border_bottom_right_radius=CORNER_RADIUS if BOTTOM_RIGHT in corners else 0,
        )


def draw_high_scores(surface, title_font, font, scores):
    """Draw the numbered high-score list in the order given."""
    title = title_font.render("High Scores", True, WHITE)
    surface.blit(title, (PANEL_LEFT, BOARD_TOP))
    y = BOARD_TOP + title.get_height() + 8
    if not scores:
        surface.blit(font.render("None yet", True, MUTED), (PANEL_LEFT, y))
    for rank, score in enumerate(scores, start=1):
        line = font.render(f"{rank:>2}.  {score}", True, WHITE)
        surface.blit(line, (PANEL_LEFT, y))
        y += font.get_height() + 2


def draw_game_over_banner(surface, font):
    """Draw a centered label over the board."""
    board_px = BOARD_SIZE * CELL_SIZE
    label = font.render("Game Over", True, WHITE)
    box = label.get_rect(center=(BOARD_LEFT + board_px // 2, BOARD_TOP + board_px // 2))
    box.inflate_ip(26, 16)
    panel = pygame.Surface((box.width, box.height), pygame.SRCALPHA)
    panel.fill((0, 0, 0, 170))
    surface.blit(panel, box.topleft)
    surface.blit(label, label.get_rect(center=box.center))


class PygameUi(GameUi):
    """Draws a SnakeGame into a pygame surface and turns clicks and keys into game callbacks."""

    def __init__(self):
        self.on_start = None
        self.on_reset = None
        self.on_direction = None
        self.score = 0
        self.high_scores = []
        self.cells = BoardCells()

        self.font = get_ui_font(20)
        self.title_font = get_ui_font(24)
        self.small_font = get_ui_font(16)

        self.start_button = Button((WINDOW_WIDTH - 240, 16, 100, 40), "Start")
        self.reset_button = Button((WINDOW_WIDTH - 124, 16, 100, 40), "Reset", enabled=False)
        pad_x = PANEL_LEFT + 70
        pad_y = WINDOW_HEIGHT - 2 * ARROW_SIZE - 36
        step = ARROW_SIZE + 4
        self.arrow_buttons = {
            UP: Button((pad_x, pad_y, ARROW_SIZE, ARROW_SIZE), "^"),
            LEFT: Button((pad_x - step, pad_y + step, ARROW_SIZE, ARROW_SIZE), "<"),
            DOWN: Button((pad_x, pad_y + step, ARROW_SIZE, ARROW_SIZE), "v"),
            RIGHT: Button((pad_x + step, pad_y + step, ARROW_SIZE, ARROW_SIZE), ">"),
        }
        self.arrow_keys = {
            pygame.K_UP: UP,
            pygame.K_DOWN: DOWN,
            pygame.K_LEFT: LEFT,
            pygame.K_RIGHT: RIGHT,
        }

    def bind(self, on_start, on_reset, on_direction):
        """Connect the controller's callbacks."""
        self.on_start = on_start
        self.on_reset = on_reset
        self.on_direction = on_direction

    # GameUi

    def reset_board(self):
        self.cells.reset()

    def render_score(self, score):
        self.score = score

    def render_snake_head(self, x, y):
        self.cells.start_at(x, y)

    def render_snake_step(self, from_x, from_y, to_x, to_y):
        self.cells.step(from_x, from_y, to_x, to_y)

    def render_high_scores(self, scores):
        self.high_scores = list(scores)

    # Input

    def press_start(self):
        self.on_start()
        self.reset_button.enabled = True

    def press_reset(self):
        if not self.reset_button.enabled:
            return
        self.on_reset()
        self.reset_button.enabled = False

    def handle_event(self, event):
        """React to a click or key press. Returns True if the event was used."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.start_button.hit(event.pos):
                self.press_start()
                return True
            if self.reset_button.hit(event.pos):
                self.press_reset()
                return True
            for direction, button in self.arrow_buttons.items():
                if button.hit(event.pos):
                    self.on_direction(direction)
                    return True
        elif event.type == pygame.KEYDOWN:
            if event.key in self.arrow_keys:
                self.on_direction(self.arrow_keys[event.key])
                return True
            if event.key in (pygame.K_RETURN, pygame.K_SPACE):
                self.press_start()
                return True
            if event.key == pygame.K_r:
                self.press_reset()
                return True
        return False

    # Drawing

    def draw(self, surface, game_over=False):
        draw_background(surface)
        score = self.title_font.render(f"Score: {self.score}", True, WHITE)
        surface.blit(score, (BOARD_LEFT, 36 - score.get_height() // 2))
        self.start_button.draw(surface, self.font)
        self.reset_button.draw(surface, self.font)
        draw_board(surface, self.cells)
        if game_over:
            draw_game_over_banner(surface, self.title_font)
        draw_high_scores(surface, self.font, self.small_font, self.high_scores)
        for button in self.arrow_buttons.values():
            button.draw(surface, self.font)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="snake-game", description="Play Snake on a 9x9 board.")
    parser.add_argument(
        "--scores-file",
        default=None,
        help="JSON file holding the high scores (default: $SNAKE_GAME_SCORES_FILE or ~/.snake_game/high_scores.json)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    scores_path = args.scores_file or default_scores_path()
    logger.debug("High scores are kept in %s", scores_path)

    pygame.init()
    pygame.display.set_caption("Snake")
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    clock = pygame.time.Clock()

    timers = TimerPool()
    ui = PygameUi()
    game = SnakeGame(ui, JsonFileStore(scores_path), timers.schedule)
    ui.bind(game.on_start, game.on_reset, game.on_direction)
    game.initialize()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif not timers.dispatch(event):
                ui.handle_event(event)

        ui.draw(screen, game_over=game.is_over)
        pygame.display.flip()
        clock.tick(FPS)

    game.stop()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
