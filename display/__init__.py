"""
Display module for unbeatable TicTacToe.
Renders boards for the console and the Tk window.
"""

from .config import DisplayConfig
from .renderer import board_to_text, cell_at, render_board
