"""
Display configuration for Morpion.
All the settings for the game window and how the board is drawn.

Setup:
    pip install opencv-python numpy
"""

import cv2


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the window!
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_NAME = "Morpion"
    WINDOW_WIDTH = 800
    WINDOW_HEIGHT = 800
    WINDOW_FLAGS = cv2.WINDOW_NORMAL  # Lets the user resize the window

    # Delay passed to cv2.waitKey each frame (milliseconds)
    # 4ms is roughly 240 frames per second
    FRAME_DELAY_MS = 4

    # ==================== BOARD SETTINGS ====================
    # Morpion is a 3x3 grid
    BOARD_SIZE = 3

    # Size of each square cell (pixels)
    CELL_SIZE = 200

    # Distance from the window edge to the first cell
    BOARD_MARGIN = 50

    # Distance from one cell's corner to the next one's
    CELL_SPACING = 250

    # ==================== COLORS (BGR) ====================
    EMPTY_COLOR = (0, 0, 0)          # Black
    CIRCLE_COLOR = (255, 0, 0)       # Blue
    CROSS_COLOR = (0, 0, 255)        # Red
    MARK_COLOR = (255, 255, 255)     # O and X drawn on top of the cell
    HIGHLIGHT_COLOR = (0, 255, 255)  # Outline of the winning line

    # Background while playing, then once the game is over
    BACKGROUND_COLOR = (255, 255, 255)  # White
    CIRCLE_WINS_BACKGROUND = (64, 0, 0)    # Dark blue
    CROSS_WINS_BACKGROUND = (0, 0, 64)     # Dark red
    DRAW_BACKGROUND = (64, 64, 64)         # Dark grey

    # ==================== DRAWING SETTINGS ====================
    MARK_THICKNESS = 12
    MARK_PADDING = 40     # Gap between a mark and its cell border
    HIGHLIGHT_THICKNESS = 6

    # ==================== KEYS ====================
    KEY_QUIT = 27        # Escape
    KEY_RESET = ord('r')
