"""
Logic module for Morpion.
Handles game state, rules, and AI opponent.
"""

from .game_state import (
    GameState,
    Player,
    PlacementError,
    OutOfRangeError,
    CellOccupiedError,
)
from .win_checker import WinChecker, Outcome, WINNING_LINES
from .ai_player import AIPlayer
