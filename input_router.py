import logging

import pygame

from config import DIRECTIONS, DOWN, LEFT, RIGHT, UP
from game_state import direction_to_text, opposite

logger = logging.getLogger(__name__)

KEY_TO_DIRECTION = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}


def direction_from_vector(dx, dy):
    """Pick the dominant axis of a swipe vector, then its sign along that axis."""
    if dx == 0 and dy == 0:
        return None
    if abs(dx) >= abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


class InputRouter:
    """Turns keys, taps and swipes into the pending direction of a GameState."""

    def __init__(self, state):
        self.state = state

    def set_direction(self, candidate):
        """Queue a direction for the next tick unless it reverses the snake."""
        if candidate not in DIRECTIONS:
            return False
        if candidate == opposite(self.state.direction):
            logger.debug(
                "Ignored reversal %s while heading %s",
                direction_to_text(candidate),
                direction_to_text(self.state.direction),
            )
            return False
        self.state.pending_direction = candidate
        return True

    def handle_key(self, key):
        """Steer from an arrow key; other keys are ignored."""
        direction = KEY_TO_DIRECTION.get(key)
        if direction is None:
            return False
        return self.set_direction(direction)

    def handle_swipe(self, dx, dy):
        """Steer along the dominant axis of a swipe vector."""
        direction = direction_from_vector(dx, dy)
        if direction is None:
            return False
        return self.set_direction(direction)

    def handle_touch(self, pos):
        """Steer toward a touched pixel, measured from the head's top-left corner."""
        head_x, head_y = self.state.head
        size = self.state.cell_size
        return self.handle_swipe(pos[0] - head_x * size, pos[1] - head_y * size)

    def handle_event(self, event):
        """Route a pygame event; returns True if it changed the pending direction."""
        if event.type == pygame.KEYDOWN:
            return self.handle_key(event.key)
        if event.type == pygame.FINGERDOWN:
            # Finger coordinates are normalized to the window.
            board = self.state.board_pixels
            return self.handle_touch((event.x * board, event.y * board))
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # Taps also arrive as emulated clicks; the FINGERDOWN already counted.
            if getattr(event, "touch", False):
                return False
            return self.handle_touch(event.pos)
        return False
