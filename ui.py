"""
Morpion UI
A graphical interface for Morpion using an OpenCV window.

Shows:
- The 3x3 board (blue for O, red for X)
- The game result, as the background color
- The winning line, outlined

Controls:
- Left click on an empty cell to play there (you are O)
- 'r' to start a new game
- Escape, or closing the window, to quit
"""

import cv2
from collections import deque
from typing import Deque, Optional, Tuple

from display.config import DisplayConfig
from display.renderer import BoardRenderer

from logic.game_state import GameState, Player, PlacementError
from logic.win_checker import Outcome, WinChecker
from logic.ai_player import AIPlayer


class MorpionUI:
    """
    Main UI class for Morpion.

    The human always plays O and the AI always answers as X, right after
    the human's move.
    """

    def __init__(
        self,
        config: Optional[DisplayConfig] = None,
        ai: Optional[AIPlayer] = None
    ):
        """
        Initialize the UI. The window is only created by open() / run().

        Args:
            config: Display configuration. Uses defaults if not provided.
            ai: The opponent. Defaults to an AIPlayer playing X.
        """
        self.config = config or DisplayConfig()
        self.renderer = BoardRenderer(self.config)
        self.win_checker = WinChecker()

        self.human_player = Player.CIRCLE
        self.ai = ai or AIPlayer(self.human_player.opposite())

        self.game_state = GameState()
        self.outcome = Outcome.ONGOING
        self.ended = False

        # Visible area, in pixels
        self.width = self.config.WINDOW_WIDTH
        self.height = self.config.WINDOW_HEIGHT

        self.is_open = False

        # Clicks queued by the mouse callback, handled once per frame
        self._clicks: Deque[Tuple[int, int]] = deque()

    def open(self):
        """Create the window and start listening to the mouse."""
        name = self.config.WINDOW_NAME
        cv2.namedWindow(name, self.config.WINDOW_FLAGS)
        cv2.resizeWindow(name, self.width, self.height)
        cv2.setMouseCallback(name, self._on_mouse)
        self.is_open = True

    def close(self):
        """Close the window."""
        if self.is_open:
            cv2.destroyWindow(self.config.WINDOW_NAME)
        self.is_open = False

    def run(self):
        """Run the UI main loop until the window is closed."""
        self.open()
        try:
            while self.is_open:
                self.handle_events()
                if self.is_open:
                    self.render()
        finally:
            self.close()

    def _on_mouse(self, event, x, y, flags, param):
        if event == cv2.EVENT_LBUTTONDOWN:
            self._clicks.append((x, y))

    def handle_events(self):
        """Poll keys and window state, then play queued clicks."""
        key = cv2.waitKey(self.config.FRAME_DELAY_MS) & 0xFF

        if self._window_closed():
            # Already gone, nothing left to destroy
            print("Window closed.")
            self.is_open = False
            return

        if key == self.config.KEY_QUIT:
            print("Quitting...")
            self.close()
            return

        if key == self.config.KEY_RESET:
            self.reset_game()

        _, _, width, height = cv2.getWindowImageRect(self.config.WINDOW_NAME)
        if width > 0 and height > 0 and (width, height) != (self.width, self.height):
            self.resize(width, height)

        while self._clicks:
            self.play_at(*self._clicks.popleft())

    def _window_closed(self) -> bool:
        return cv2.getWindowProperty(self.config.WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1

    def resize(self, width: int, height: int):
        """
        Follow the window size. Cells keep their pixel positions, so this
        never touches the game.
        """
        self.width = width
        self.height = height

    def play_at(self, x: int, y: int):
        """
        Handle a click at pixel (x, y): the human's move, then the AI's reply.
        """
        if self.ended or not self.human_plays_at(x, y):
            return

        self.check_win()
        if self.ended:
            return

        index = self.ai.play(self.game_state)
        print(f"AI plays {self.ai.player.value} at {index}")
        self.check_win()

    def human_plays_at(self, x: int, y: int) -> bool:
        """
        Place the human's piece in the clicked cell.

        Returns:
            True if a piece was placed, False if the click missed the
            cells or hit an occupied one.
        """
        index = self.renderer.cell_at(x, y)
        if index is None:
            return False

        try:
            self.game_state.place(index, self.human_player)
        except PlacementError:
            return False

        return True

    def check_win(self):
        """Record the outcome of the board and end the game if it is over."""
        self.outcome = self.win_checker.update_game_state(self.game_state)
        self.ended = self.outcome.is_terminal

        if self.ended:
            if self.game_state.winner:
                print(f"{self.game_state.winner.value} WINS!")
            else:
                print("DRAW!")

    def reset_game(self):
        """Start a new game in the same window."""
        print("Resetting game...")
        self.game_state = GameState()
        self.outcome = Outcome.ONGOING
        self.ended = False
        self._clicks.clear()

    def draw(self):
        """Draw the current frame."""
        return self.renderer.render(
            self.game_state.board,
            self.width,
            self.height,
            outcome=self.outcome,
            winning_line=self.win_checker.get_winning_line(self.game_state)
        )

    def render(self):
        """Show the current frame in the window."""
        cv2.imshow(self.config.WINDOW_NAME, self.draw())
