import pygame

from config import BACKGROUND_COLOR, BORDER_COLOR, FOOD_COLOR, OVERLAY_ALPHA, SNAKE_COLOR, WHITE


def grid_rect(grid_pos, cell_size):
    """Return a pixel rectangle for a grid position."""
    x, y = grid_pos
    return pygame.Rect(x * cell_size, y * cell_size, cell_size, cell_size)


def draw_cell(surface, grid_pos, cell_size, color):
    """Fill one cell and outline it so neighbouring segments stay distinct."""
    rect = grid_rect(grid_pos, cell_size)
    pygame.draw.rect(surface, color, rect)
    pygame.draw.rect(surface, BORDER_COLOR, rect, 1)


def draw_board(surface, state):
    """Draw the snake and the food from a read-only view of the state."""
    surface.fill(BACKGROUND_COLOR)
    for segment in state.snake:
        draw_cell(surface, segment, state.cell_size, SNAKE_COLOR)
    draw_cell(surface, state.food, state.cell_size, FOOD_COLOR)


def draw_overlay(surface, title_font, text_font, title, lines=()):
    """Draw a centered panel with a title and a few lines of text."""
    title_surface = title_font.render(title, True, WHITE)
    line_surfaces = [text_font.render(line, True, WHITE) for line in lines]
    widths = [title_surface.get_width()] + [s.get_width() for s in line_surfaces]
    content_w = max(widths)
    content_h = title_surface.get_height() + sum(text_font.get_height() + 6 for _ in line_surfaces)

    width, height = surface.get_size()
    panel_rect = pygame.Rect(0, 0, min(width, content_w + 48), min(height, content_h + 36))
    panel_rect.center = (width // 2, height // 2)
    panel_surface = pygame.Surface((panel_rect.width, panel_rect.height), pygame.SRCALPHA)
    panel_surface.fill((0, 0, 0, OVERLAY_ALPHA))
    surface.blit(panel_surface, panel_rect.topleft)

    y = panel_rect.top + 18
    surface.blit(title_surface, title_surface.get_rect(centerx=panel_rect.centerx, y=y))
    y += title_surface.get_height() + 6
    for line_surface in line_surfaces:
        surface.blit(line_surface, line_surface.get_rect(centerx=panel_rect.centerx, y=y))
        y += text_font.get_height() + 6
