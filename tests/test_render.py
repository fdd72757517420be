"""
Tests for render.py - drawing onto an off-screen surface.
"""

import pygame
import pytest

from config import BACKGROUND_COLOR, FOOD_COLOR, SNAKE_COLOR
from render import draw_board, draw_overlay, grid_rect


@pytest.fixture
def surface(state):
    return pygame.Surface((state.board_pixels, state.board_pixels))


def cell_center(cell, size=20):
    return (cell[0] * size + size // 2, cell[1] * size + size // 2)


def test_grid_rect_in_pixels():
    rect = grid_rect((3, 2), 20)
    assert (rect.x, rect.y, rect.width, rect.height) == (60, 40, 20, 20)


def test_draw_board_fills_snake_and_food(surface, state):
    draw_board(surface, state)

    for segment in state.snake:
        assert surface.get_at(cell_center(segment))[:3] == SNAKE_COLOR
    assert surface.get_at(cell_center(state.food))[:3] == FOOD_COLOR
    assert surface.get_at(cell_center((15, 15)))[:3] == BACKGROUND_COLOR


def test_draw_board_does_not_touch_state(surface, state):
    before = (list(state.snake), state.food, state.score, state.direction)
    draw_board(surface, state)
    assert (list(state.snake), state.food, state.score, state.direction) == before


def test_draw_overlay_darkens_center(surface, state):
    pygame.font.init()
    font = pygame.font.Font(None, 20)
    surface.fill((200, 200, 200))
    draw_overlay(surface, font, font, "Game Over", ["Score: 3"])
    # Corners stay untouched, the panel covers the middle.
    assert surface.get_at((0, 0))[:3] == (200, 200, 200)
    assert surface.get_at((200, 200))[:3] != (200, 200, 200)
