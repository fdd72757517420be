import os

# Run pygame headless.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random  # noqa: E402

import pytest  # noqa: E402

from game_state import GameState  # noqa: E402


class SequenceRng:
    """Stand-in for random.Random that hands out predetermined values."""

    def __init__(self, values):
        self.values = list(values)

    def randrange(self, stop):
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


@pytest.fixture
def state():
    """20x20 board, snake of 3 at (2,0),(1,0),(0,0), food parked off the top row."""
    game = GameState(grid_size=20, cell_size=20, initial_length=3, rng=random.Random(7))
    game.food = (10, 10)
    return game


@pytest.fixture
def sequence_rng():
    return SequenceRng
