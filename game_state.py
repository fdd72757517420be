import logging
import random

from config import CELL_SIZE, DIRECTIONS, GRID_SIZE, INITIAL_LENGTH, RIGHT

logger = logging.getLogger(__name__)


def opposite(direction):
    """Return the direction pointing the other way."""
    return (-direction[0], -direction[1])


def direction_to_text(direction):
    """Convert a direction vector into a compact label for logs."""
    mapping = {
        None: "none",
        (0, -1): "up",
        (0, 1): "down",
        (-1, 0): "left",
        (1, 0): "right",
    }
    return mapping.get(direction, "unknown")


class GameState:
    """
    Snake, food, score and direction for one play session.

    Attributes:
        snake: list of (x, y) cells, head at index 0
        direction: direction applied on the last tick
        pending_direction: direction the next tick will apply
        food: (x, y) cell of the food
        score: food eaten since the last reset
        game_over: True once the snake hit a wall or itself
        game_over_reason: None, 'wall' or 'self'
    """

    def __init__(self, grid_size=GRID_SIZE, cell_size=CELL_SIZE, initial_length=INITIAL_LENGTH, rng=None):
        if grid_size < 1:
            raise ValueError("grid_size must be at least 1.")
        if cell_size < 1:
            raise ValueError("cell_size must be at least 1.")
        if initial_length < 1 or initial_length > grid_size:
            raise ValueError("initial_length does not fit within the grid width.")

        self.grid_size = grid_size
        self.cell_size = cell_size
        self.initial_length = initial_length
        self.rng = rng if rng is not None else random.Random()

        self.snake = []
        self.direction = RIGHT
        self.pending_direction = RIGHT
        self.food = (0, 0)
        self.score = 0
        self.game_over = False
        self.game_over_reason = None
        self.reset()

    @property
    def head(self):
        """Return the head cell."""
        return self.snake[0]

    @property
    def length(self):
        """Number of segments in the snake."""
        return len(self.snake)

    @property
    def board_pixels(self):
        """Side length of the board in pixels."""
        return self.grid_size * self.cell_size

    def random_cell(self):
        """Return a uniformly random grid cell; the snake is not excluded."""
        return (
            self.rng.randrange(self.grid_size),
            self.rng.randrange(self.grid_size),
        )

    def in_bounds(self, cell):
        """True if the cell lies on the board."""
        x, y = cell
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    def reset(self):
        """Start a new game: fresh snake on the top row heading right."""
        self.direction = RIGHT
        self.pending_direction = RIGHT
        self.food = self.random_cell()
        self.score = 0
        self.game_over = False
        self.game_over_reason = None

        # Tail on the origin, segments extending right up to the head.
        self.snake = [(self.initial_length - 1 - i, 0) for i in range(self.initial_length)]
        logger.debug("Reset: snake=%s food=%s", self.snake, self.food)

    def advance(self):
        """Move the snake one cell; does nothing once the game is over."""
        if self.game_over:
            return

        pending = self.pending_direction
        if pending in DIRECTIONS and pending != opposite(self.direction):
            self.direction = pending
        self.pending_direction = self.direction

        head_x, head_y = self.snake[0]
        dx, dy = self.direction
        new_head = (head_x + dx, head_y + dy)

        # Collision wins over eating: the whole body, tail included, blocks.
        if not self.in_bounds(new_head):
            self._end("wall")
            return
        if new_head in self.snake:
            self._end("self")
            return

        self.snake.insert(0, new_head)

        if new_head == self.food:
            self.score += 1
            self.food = self.random_cell()
            logger.debug("Food eaten at %s, score=%d, next food=%s", new_head, self.score, self.food)
        else:
            self.snake.pop()

    def _end(self, reason):
        self.game_over = True
        self.game_over_reason = reason
        logger.info(
            "Game over (%s) heading %s at %s, score=%d",
            reason,
            direction_to_text(self.direction),
            self.snake[0],
            self.score,
        )

    def __repr__(self):
        return (
            f"<GameState score={self.score}, length={len(self.snake)}, "
            f"food={self.food}, game_over={self.game_over}>"
        )
