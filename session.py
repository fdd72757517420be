"""
Play-session lifecycle: start screen, running game, game-over screen.

The session owns one GameState and the InputRouter bound to it. The pygame
loop forwards "start" and "restart" signals here and calls tick() at the
fixed game rate; rendering is delegated to a callable taking the state.
"""

import logging

from input_router import InputRouter

logger = logging.getLogger(__name__)

START = "start"
PLAYING = "playing"
GAME_OVER = "game_over"


class GameSession:
    def __init__(self, state, render=None):
        self.state = state
        self.router = InputRouter(state)
        self.render = render
        self.phase = START
        self.final_score = None

    def start(self):
        """Leave the start screen and begin a fresh game."""
        if self.phase != START:
            return False
        self._begin()
        logger.info("Game started")
        return True

    def restart(self):
        """Leave the game-over screen and begin a fresh game."""
        if self.phase != GAME_OVER:
            return False
        self._begin()
        logger.info("Game restarted")
        return True

    def _begin(self):
        self.state.reset()
        self.final_score = None
        self.phase = PLAYING

    def tick(self):
        """Advance the game by one step, then render it."""
        if self.phase == START:
            return
        was_over = self.state.game_over
        self.state.advance()
        if self.render is not None:
            self.render(self.state)

        if self.state.game_over and not was_over:
            self.phase = GAME_OVER
            self.final_score = self.state.score
            logger.info("Final score: %d", self.final_score)
