"""
Move validator for unbeatable TicTacToe.
Checks moves coming from the human before they reach the board.
"""

from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig
from .board import Board, Cell, empty_cells, is_valid_move
from .win_checker import evaluate


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells
    """

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place token (0-2).
            col: Column to place token (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if evaluate(board).is_decided:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        last = GameConfig.BOARD_SIZE - 1
        if not (0 <= row <= last and 0 <= col <= last):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{last}."
            )

        if not is_valid_move(board, (row, col)):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {board.cell((row, col))}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[Cell]:
        """
        Get all valid moves on a board.

        Returns:
            List of (row, col) positions, empty once the game is over.
        """
        if evaluate(board).is_decided:
            return []

        return empty_cells(board)
