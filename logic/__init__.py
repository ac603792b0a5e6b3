"""
Logic module for unbeatable TicTacToe.
Handles the board, win detection, and the minimax opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .board import (
    Board,
    Player,
    apply_move,
    changed_cell,
    count_empty_cells,
    empty_board,
    empty_cells,
    is_valid_move,
)
from .win_checker import GameStatus, Outcome, evaluate, winning_line
from .move_generator import child_states
from .ai_player import AIPlayer, choose_computer_move, minimax
from .move_validator import MoveValidator, ValidationResult
from .game_state import GameSession, Move, TurnState
