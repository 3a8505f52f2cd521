"""
Board renderer for Morpion.
Maps window pixels to cells and draws the board onto an image.
"""

import cv2
import numpy as np
from typing import Optional, Sequence, Tuple

from logic.game_state import BOARD_CELLS, Cell, Player
from logic.win_checker import Outcome
from .config import DisplayConfig


class BoardRenderer:
    """
    Draws the 3x3 grid of square cells.

    Cell positions are fixed in pixels from the top-left corner of the
    image, whatever the size of the window.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or DisplayConfig()

    def cell_rect(self, index: int) -> Tuple[int, int, int, int]:
        """
        Get the pixel rectangle of a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            (x1, y1, x2, y2), with x2/y2 exclusive.
        """
        row, col = divmod(index, self.config.BOARD_SIZE)
        x1 = self.config.BOARD_MARGIN + self.config.CELL_SPACING * col
        y1 = self.config.BOARD_MARGIN + self.config.CELL_SPACING * row
        return x1, y1, x1 + self.config.CELL_SIZE, y1 + self.config.CELL_SIZE

    def cell_at(self, x: int, y: int) -> Optional[int]:
        """
        Find which cell a pixel falls in.

        Returns:
            Cell index, or None for the margins and the gaps between cells.
        """
        for index in range(BOARD_CELLS):
            x1, y1, x2, y2 = self.cell_rect(index)
            if x1 <= x < x2 and y1 <= y < y2:
                return index
        return None

    def background_for(self, outcome: Outcome) -> Tuple[int, int, int]:
        """Background color for a given game outcome."""
        if outcome == Outcome.CIRCLE_WINS:
            return self.config.CIRCLE_WINS_BACKGROUND
        if outcome == Outcome.CROSS_WINS:
            return self.config.CROSS_WINS_BACKGROUND
        if outcome == Outcome.DRAW:
            return self.config.DRAW_BACKGROUND
        return self.config.BACKGROUND_COLOR

    def cell_color(self, cell: Cell) -> Tuple[int, int, int]:
        if cell == Player.CIRCLE:
            return self.config.CIRCLE_COLOR
        if cell == Player.CROSS:
            return self.config.CROSS_COLOR
        return self.config.EMPTY_COLOR

    def render(
        self,
        board: Sequence[Cell],
        width: int,
        height: int,
        outcome: Outcome = Outcome.ONGOING,
        winning_line: Optional[Tuple[int, int, int]] = None
    ) -> np.ndarray:
        """
        Draw the whole board.

        Args:
            board: The 9 cells.
            width: Image width in pixels.
            height: Image height in pixels.
            outcome: Decides the background color.
            winning_line: Cells to outline, if any.

        Returns:
            A BGR image of shape (height, width, 3).
        """
        image = np.zeros((height, width, 3), dtype=np.uint8)
        image[:] = self.background_for(outcome)

        for index, cell in enumerate(board):
            x1, y1, x2, y2 = self.cell_rect(index)
            cv2.rectangle(image, (x1, y1), (x2 - 1, y2 - 1), self.cell_color(cell), -1)
            self._draw_mark(image, index, cell)

        if winning_line is not None:
            for index in winning_line:
                x1, y1, x2, y2 = self.cell_rect(index)
                cv2.rectangle(
                    image, (x1, y1), (x2 - 1, y2 - 1),
                    self.config.HIGHLIGHT_COLOR,
                    self.config.HIGHLIGHT_THICKNESS
                )

        return image

    def _draw_mark(self, image: np.ndarray, index: int, cell: Cell):
        """Draw an O or an X inside a cell."""
        if cell is None:
            return

        x1, y1, x2, y2 = self.cell_rect(index)
        pad = self.config.MARK_PADDING
        color = self.config.MARK_COLOR
        thickness = self.config.MARK_THICKNESS

        if cell == Player.CIRCLE:
            center = ((x1 + x2) // 2, (y1 + y2) // 2)
            radius = self.config.CELL_SIZE // 2 - pad
            cv2.circle(image, center, radius, color, thickness)
        else:
            cv2.line(image, (x1 + pad, y1 + pad), (x2 - pad, y2 - pad), color, thickness)
            cv2.line(image, (x2 - pad, y1 + pad), (x1 + pad, y2 - pad), color, thickness)
