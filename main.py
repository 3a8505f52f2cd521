"""
Main entry point for Morpion.

Two ways to play against the AI:
- gui (default): an OpenCV window, click a cell to play
- cli: the board is printed in the terminal, type a cell number (1-9)

Cells are numbered row by row:

    1 | 2 | 3
    4 | 5 | 6
    7 | 8 | 9
"""

from typing import Callable, Optional

from logic.game_state import GameState, Player, PlacementError
from logic.win_checker import Outcome, WinChecker
from logic.ai_player import AIPlayer


class ConsoleGame:
    """
    Morpion in the terminal.

    Game flow:
    1. The board is shown and the human (O) types a cell number
    2. The AI (X) answers
    3. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        ai: Optional[AIPlayer] = None,
        input_func: Optional[Callable[[], str]] = None
    ):
        """
        Initialize the console game.

        Args:
            ai: The opponent. Defaults to an AIPlayer playing X.
            input_func: Returns the next line typed by the human (default: input).
        """
        self.human_player = Player.CIRCLE
        self.ai = ai or AIPlayer(self.human_player.opposite())
        self.input_func = input_func or input

        self.game_state = GameState()
        self.win_checker = WinChecker()

    def play(self) -> Outcome:
        """
        Play one game to the end.

        Returns:
            How the game ended.
        """
        while True:
            outcome = self.win_checker.update_game_state(self.game_state)

            if outcome.is_terminal or self.game_state.current_player == self.human_player:
                self.game_state.print_board()

            if outcome.is_terminal:
                self._show_game_result()
                return outcome

            if self.game_state.current_player == self.human_player:
                self._human_move()
            else:
                self._ai_move()

    def _human_move(self):
        """Read lines until one names an empty cell, then play it."""
        while True:
            index = parse_cell(self.input_func())
            if index is None:
                continue

            try:
                self.game_state.make_move(index)
            except PlacementError:
                continue

            return

    def _ai_move(self):
        index = self.ai.get_best_move(self.game_state)
        self.game_state.make_move(index)

    def _show_game_result(self):
        """Show the final game result."""
        if self.game_state.winner:
            print(f"Player {self.game_state.winner.value} wins!")
        else:
            print("It's a draw!")


def parse_cell(line: str) -> Optional[int]:
    """
    Turn a typed cell number (1-9) into a cell index (0-8).

    Returns:
        The index, or None if the line is not a number from 1 to 9.
    """
    try:
        number = int(line.strip())
    except ValueError:
        return None

    if not 1 <= number <= 9:
        return None

    return number - 1


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Morpion (tic-tac-toe) against the computer")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["gui", "cli"],
        default="gui",
        help="Play in a window (gui) or in the terminal (cli)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print the AI's score for every candidate move"
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Search every position from scratch, without remembering results"
    )

    args = parser.parse_args()

    ai = AIPlayer(Player.CROSS, use_cache=not args.no_cache, verbose=args.verbose)

    print("\n" + "="*60)
    print("   Morpion")
    print("="*60)
    print(f"   Mode: {'Window' if args.mode == 'gui' else 'Terminal'}")
    print("   You play O, the computer plays X")
    print("="*60 + "\n")

    try:
        if args.mode == "gui":
            # Keep OpenCV out of terminal-only games
            from ui import MorpionUI
            MorpionUI(ai=ai).run()
        else:
            ConsoleGame(ai=ai).play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
