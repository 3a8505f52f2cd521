"""
AI player for Morpion.
Picks the cell that gives the best chance of winning if, from then on,
both sides play uniformly at random until the game ends.
"""

from typing import Dict, List, Sequence, Tuple
from .game_state import Cell, GameState, Player
from .win_checker import Outcome, WinChecker


Board = Tuple[Cell, ...]


class AIPlayer:
    """
    An AI that plays Morpion by exhaustive expected-value search.

    Every continuation of the game is enumerated. A won game is worth 1,
    a lost game 0 and a draw 0.5; a position that is not finished is worth
    the average of its children. The AI plays the move whose resulting
    position is worth the most.
    """

    def __init__(
        self,
        player: Player = Player.CROSS,
        use_cache: bool = True,
        verbose: bool = False
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: CROSS)
            use_cache: Remember the value of positions already searched.
            verbose: Print the score of every candidate move.
        """
        self.player = player
        self.use_cache = use_cache
        self.verbose = verbose
        self.win_checker = WinChecker()

        # (board, player to move) -> win probability
        self._cache: Dict[Tuple[Board, Player], float] = {}

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def win_probability(self, board: Sequence[Cell], to_move: Player) -> float:
        """
        Probability that the AI wins from this position under random play.

        Args:
            board: The 9 cells.
            to_move: The player whose turn it is on this board.

        Returns:
            A value between 0.0 and 1.0.
        """
        board = tuple(board)
        key = (board, to_move)
        if self.use_cache and key in self._cache:
            return self._cache[key]

        self.moves_evaluated += 1

        outcome = self.win_checker.evaluate(board)
        if outcome == Outcome.DRAW:
            value = 0.5
        elif outcome.is_terminal:
            value = 1.0 if outcome.winner == self.player else 0.0
        else:
            total = 0.0
            count = 0
            for index, cell in enumerate(board):
                if cell is not None:
                    continue
                child = board[:index] + (to_move,) + board[index + 1:]
                total += self.win_probability(child, to_move.opposite())
                count += 1
            value = total / count

        if self.use_cache:
            self._cache[key] = value
        return value

    def score_moves(self, game_state: GameState) -> List[Tuple[int, float]]:
        """
        Score every empty cell for the AI.

        Returns:
            (index, win probability) pairs in ascending index order.
        """
        board = tuple(game_state.board)
        scores = []
        for index in game_state.empty_cells():
            child = board[:index] + (self.player,) + board[index + 1:]
            scores.append((index, self.win_probability(child, self.player.opposite())))
        return scores

    def get_best_move(self, game_state: GameState) -> int:
        """
        Get the best move for the current position.

        Ties go to the lowest index.

        Args:
            game_state: Current game state. Must have at least one empty cell.

        Returns:
            Index (0-8) of the best move.
        """
        self.moves_evaluated = 0

        scores = self.score_moves(game_state)
        if not scores:
            raise RuntimeError("No empty cell left for the AI to play")

        best_move, best_score = scores[0]
        for index, score in scores:
            if self.verbose:
                print(f">> i={index} -> p={score}")
            if score > best_score:
                best_move, best_score = index, score

        if self.verbose:
            print(f">>> will play at {best_move}")

        return best_move

    def play(self, game_state: GameState) -> int:
        """
        Choose a move and place the AI's piece there.

        The current player marker is left alone; callers that track turns
        pass it on themselves.

        Returns:
            The index that was played.
        """
        index = self.get_best_move(game_state)
        game_state.place(index, self.player)
        return index


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(Player.CROSS, verbose=True)

    # AI can complete the left column
    game = GameState()
    for index, player in ((0, Player.CROSS), (1, Player.CIRCLE), (3, Player.CROSS), (4, Player.CIRCLE)):
        game.place(index, player)
    game.print_board()

    move = ai.get_best_move(game)
    print(f"AI's move: {move} ({ai.moves_evaluated} positions)")

    assert move == 6, f"Expected 6, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
