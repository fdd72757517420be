import argparse
import logging
import random

import pygame

from config import (
    CELL_SIZE,
    FPS,
    FRAME_RATE,
    GRID_SIZE,
    INITIAL_LENGTH,
    LOG_FORMAT,
    TEXT_FONT_SIZE,
    TITLE_FONT_SIZE,
)
from game_state import GameState
from render import draw_board, draw_overlay
from session import GAME_OVER, START, GameSession
from ticker import FixedIntervalTicker

logger = logging.getLogger(__name__)

START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)
RESTART_KEYS = START_KEYS + (pygame.K_r,)


def get_ui_font(size):
    """Load a preferred UI font, then fall back safely to pygame default."""
    preferred = ["Bahnschrift", "Segoe UI", "Arial"]
    for name in preferred:
        path = pygame.font.match_font(name)
        if path:
            return pygame.font.Font(path, size)
    return pygame.font.Font(None, size)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Grid snake game")
    parser.add_argument(
        "--grid-size",
        type=int,
        default=GRID_SIZE,
        help=f"Cells per side of the square board (default: {GRID_SIZE})",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=CELL_SIZE,
        help=f"Cell size in pixels (default: {CELL_SIZE})",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=FPS,
        help=f"Game ticks per second (default: {FPS})",
    )
    parser.add_argument(
        "--length",
        type=int,
        default=INITIAL_LENGTH,
        help=f"Initial snake length (default: {INITIAL_LENGTH})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for food placement",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")
    try:
        state = GameState(
            grid_size=args.grid_size,
            cell_size=args.cell_size,
            initial_length=args.length,
            rng=random.Random(args.seed),
        )
    except ValueError as exc:
        parser.error(str(exc))
    return args, state


def is_pointer_press(event):
    """Left click or a finger touching the screen."""
    if event.type == pygame.FINGERDOWN:
        return True
    if event.type != pygame.MOUSEBUTTONDOWN or event.button != 1:
        return False
    # Clicks emulated from a tap duplicate the FINGERDOWN.
    return not getattr(event, "touch", False)


def handle_event(session, event):
    """Dispatch one event by session phase; returns False when the player quits."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
        return False

    if session.phase == START:
        if is_pointer_press(event) or (event.type == pygame.KEYDOWN and event.key in START_KEYS):
            session.start()
    elif session.phase == GAME_OVER:
        if is_pointer_press(event) or (event.type == pygame.KEYDOWN and event.key in RESTART_KEYS):
            session.restart()
    else:
        session.router.handle_event(event)
    return True


def main(argv=None):
    args, state = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    pygame.init()
    pygame.display.set_caption("Snake")
    screen = pygame.display.set_mode((state.board_pixels, state.board_pixels))
    board = pygame.Surface(screen.get_size())
    clock = pygame.time.Clock()
    title_font = get_ui_font(TITLE_FONT_SIZE)
    text_font = get_ui_font(TEXT_FONT_SIZE)

    session = GameSession(state, render=lambda s: draw_board(board, s))
    ticker = FixedIntervalTicker(args.fps)
    draw_board(board, state)
    logger.info(
        "Board %dx%d cells of %dpx, %d ticks/s",
        state.grid_size,
        state.grid_size,
        state.cell_size,
        args.fps,
    )

    running = True
    while running:
        dt_ms = clock.tick(FRAME_RATE)

        for event in pygame.event.get():
            phase = session.phase
            if not handle_event(session, event):
                running = False
                break
            if phase != session.phase:
                # Fresh game: redraw the new board and restart the tick cadence.
                ticker.reset()
                draw_board(board, state)

        for _ in range(ticker.elapsed(dt_ms)):
            session.tick()

        screen.blit(board, (0, 0))
        if session.phase == START:
            draw_overlay(screen, title_font, text_font, "Snake", ["Press Enter or tap to start", "Arrows or tap to steer"])
        elif session.phase == GAME_OVER:
            draw_overlay(
                screen,
                title_font,
                text_font,
                "Game Over",
                [f"Score: {session.final_score}", "Press R or tap to restart, Esc to quit"],
            )
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
