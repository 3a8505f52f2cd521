"""
Game state management for Morpion.
Tracks the board, current player, and move history.
"""

from enum import Enum
from typing import Iterator, Optional, List
from dataclasses import dataclass, field


BOARD_CELLS = 9


class Player(Enum):
    """The two players in the game."""
    CIRCLE = "O"
    CROSS = "X"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.CROSS if self == Player.CIRCLE else Player.CIRCLE


# A cell holds a Player, or None when empty
Cell = Optional[Player]


class PlacementError(Exception):
    """A move that could not be placed on the board."""


class OutOfRangeError(PlacementError):
    """The index is not one of the 9 board cells."""

    def __init__(self, index: int):
        super().__init__(f"Cell index {index} is out of range (0-{BOARD_CELLS - 1})")
        self.index = index


class CellOccupiedError(PlacementError):
    """The target cell already holds a piece."""

    def __init__(self, index: int, occupant: Player):
        super().__init__(f"Cell {index} is already occupied by {occupant.value}")
        self.index = index
        self.occupant = occupant


def cell_symbol(cell: Cell) -> str:
    """Character used to show a cell: ' ', 'O' or 'X'."""
    return " " if cell is None else cell.value


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell index (0-8), row * 3 + col
    move_number: int        # Which move this is (0-8)


@dataclass
class GameState:
    """
    The complete state of the Morpion game.

    Tracks:
    - The 3x3 board, flattened row by row into 9 cells
    - Current player
    - Move history
    - Game status (ongoing, won, draw), filled in by WinChecker
    """

    # The 9 cells - None means empty
    board: List[Cell] = field(default_factory=lambda: [None] * BOARD_CELLS)

    # Current player's turn
    current_player: Player = Player.CIRCLE

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Player] = None
    is_draw: bool = False
    is_game_over: bool = False

    def place(self, index: int, player: Player) -> None:
        """
        Put a player's piece on an empty cell.

        Args:
            index: Cell index (0-8).
            player: The player placing the piece.

        Raises:
            OutOfRangeError: index is not in 0-8.
            CellOccupiedError: the cell is not empty.
        """
        if not 0 <= index < BOARD_CELLS:
            raise OutOfRangeError(index)

        occupant = self.board[index]
        if occupant is not None:
            raise CellOccupiedError(index, occupant)

        self.board[index] = player
        self.moves.append(Move(player=player, index=index, move_number=len(self.moves)))

    def make_move(self, index: int) -> None:
        """
        Place the current player's piece, then pass the turn.

        Nothing changes, turn included, if the placement fails.
        """
        self.place(index, self.current_player)
        self.current_player = self.current_player.opposite()

    def empty_cells(self) -> Iterator[int]:
        """
        Yield the indices of all empty cells, in ascending order.
        """
        for index, cell in enumerate(self.board):
            if cell is None:
                yield index

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        new_state = GameState(
            board=list(self.board),
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )
        return new_state

    def format_board(self) -> str:
        """
        Render the board as text, one row per line, followed by
        the prompt for the player to move.
        """
        lines = []
        for row in range(3):
            cells = self.board[row * 3:row * 3 + 3]
            lines.append(" | ".join(cell_symbol(cell) for cell in cells))
        lines.append(f"{self.current_player.value} >>")
        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print(self.format_board())


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    # Simulate a game
    for index in (4, 0, 2, 6, 3):
        print(f"\n{game.current_player.value} moves to {index}")
        game.make_move(index)
        game.print_board()

    try:
        game.make_move(4)
    except PlacementError as e:
        print(f"\nRejected: {e}")

    print("\nGame state test done!")
