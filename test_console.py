"""
Tests for the terminal game and the command line entry point.
"""

import sys

import pytest

import main
from main import ConsoleGame, parse_cell
from logic.game_state import Player
from logic.win_checker import Outcome


def scripted(lines):
    """An input function that replays lines, then behaves like end of input."""
    lines = iter(lines)

    def read():
        try:
            return next(lines)
        except StopIteration:
            raise EOFError
    return read


@pytest.mark.parametrize("line, expected", [
    ("1", 0),
    ("9", 8),
    (" 5 \n", 4),
    ("0", None),
    ("10", None),
    ("-3", None),
    ("abc", None),
    ("", None),
    ("4.5", None),
])
def test_parse_cell(line, expected):
    assert parse_cell(line) == expected


def test_console_game_plays_to_the_end(capsys):
    # Junk first, then every cell in turn; occupied cells are skipped
    lines = ["abc", "0", "10", "5"] + [str(n) for n in range(1, 10)] * 4
    game = ConsoleGame(input_func=scripted(lines))

    outcome = game.play()

    assert outcome.is_terminal
    out = capsys.readouterr().out
    assert "O >>" in out
    if outcome == Outcome.DRAW:
        assert "It's a draw!" in out
    else:
        assert f"Player {outcome.winner.value} wins!" in out


def test_console_game_junk_input_does_not_move(capsys):
    game = ConsoleGame(input_func=scripted(["x", "42", "5"]))

    game._human_move()

    assert game.game_state.board[4] == Player.CIRCLE
    assert len(game.game_state.moves) == 1
    assert game.game_state.current_player == Player.CROSS


def test_console_game_reprompts_on_occupied_cell():
    game = ConsoleGame(input_func=scripted(["5", "5", "1"]))
    game._human_move()
    game._ai_move()

    ai_cell = next(i for i, cell in enumerate(game.game_state.board) if cell == Player.CROSS)
    game.input_func = scripted([str(ai_cell + 1), "5", str(next(game.game_state.empty_cells()) + 1)])
    game._human_move()

    assert game.game_state.board.count(Player.CIRCLE) == 2
    assert game.game_state.board.count(Player.CROSS) == 1


def test_console_game_ai_finishes_a_won_position(capsys):
    game = ConsoleGame(input_func=scripted([]))
    for index, player in ((0, Player.CIRCLE), (3, Player.CROSS), (1, Player.CIRCLE), (4, Player.CROSS), (8, Player.CIRCLE)):
        game.game_state.place(index, player)
    game.game_state.current_player = Player.CROSS

    outcome = game.play()

    assert outcome == Outcome.CROSS_WINS
    assert "Player X wins!" in capsys.readouterr().out


def test_main_cli_exits_on_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["main.py", "cli"])
    monkeypatch.setattr("builtins.input", scripted([]))

    main.main()

    out = capsys.readouterr().out
    assert "Terminal" in out
    assert "Goodbye!" in out


def test_main_rejects_unknown_mode(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["main.py", "web"])

    with pytest.raises(SystemExit):
        main.main()
