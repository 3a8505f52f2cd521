"""
Display module for Morpion.
Handles window settings and drawing the board.
"""

from .config import DisplayConfig
from .renderer import BoardRenderer
