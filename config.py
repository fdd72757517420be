# Board configuration
BOARD_SIZE = 400
CELL_SIZE = 20
GRID_SIZE = BOARD_SIZE // CELL_SIZE
FPS = 10
INITIAL_LENGTH = 3

# Frame rate for event polling, independent of the game tick rate
FRAME_RATE = 60

# Colors (R, G, B)
BACKGROUND_COLOR = (0, 0, 0)
SNAKE_COLOR = (0, 255, 0)
FOOD_COLOR = (255, 0, 0)
BORDER_COLOR = (0, 0, 0)
WHITE = (240, 240, 240)
OVERLAY_ALPHA = 190
TITLE_FONT_SIZE = 36
TEXT_FONT_SIZE = 20

# Directions as (dx, dy) grid offsets
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
