"""
Win checker for Morpion.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple
from .game_state import Cell, GameState, Player


# All possible winning lines, as cell indices (row * 3 + col)
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class Outcome(Enum):
    """Where a board stands."""
    CIRCLE_WINS = "circle_wins"
    CROSS_WINS = "cross_wins"
    DRAW = "draw"
    ONGOING = "ongoing"

    @classmethod
    def won_by(cls, player: Player) -> "Outcome":
        return cls.CIRCLE_WINS if player == Player.CIRCLE else cls.CROSS_WINS

    @property
    def winner(self) -> Optional[Player]:
        if self == Outcome.CIRCLE_WINS:
            return Player.CIRCLE
        if self == Outcome.CROSS_WINS:
            return Player.CROSS
        return None

    @property
    def is_terminal(self) -> bool:
        return self != Outcome.ONGOING


class WinChecker:
    """
    Checks for win conditions in Morpion.

    Win condition: 3 pieces of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def evaluate(self, board: Sequence[Cell]) -> Outcome:
        """
        Work out the outcome of a board.

        Lines are scanned in table order and the first complete one decides.

        Args:
            board: The 9 cells.

        Returns:
            The Outcome; DRAW only when every cell is filled and no line is complete.
        """
        line = self._first_complete_line(board)
        if line is not None:
            return Outcome.won_by(board[line[0]])

        if all(cell is not None for cell in board):
            return Outcome.DRAW

        return Outcome.ONGOING

    def check_winner(self, game_state: GameState) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Player, or None if no winner yet.
        """
        return self.evaluate(game_state.board).winner

    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the game is a draw (all cells filled AND no winner).
        """
        return self.evaluate(game_state.board) == Outcome.DRAW

    def update_game_state(self, game_state: GameState) -> Outcome:
        """
        Store winner/draw information on the game state.

        Args:
            game_state: The game state to update.

        Returns:
            The outcome that was recorded.
        """
        outcome = self.evaluate(game_state.board)

        game_state.winner = outcome.winner
        game_state.is_draw = outcome == Outcome.DRAW
        game_state.is_game_over = outcome.is_terminal

        return outcome

    def get_winning_line(self, game_state: GameState) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a triple of cell indices, or None.
        """
        return self._first_complete_line(game_state.board)

    def _first_complete_line(self, board: Sequence[Cell]) -> Optional[Tuple[int, int, int]]:
        for line in self.WINNING_LINES:
            a, b, c = line
            if board[a] is not None and board[a] == board[b] == board[c]:
                return line
        return None
