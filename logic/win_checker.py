"""
Win checker for unbeatable TicTacToe.
Classifies a board as won, drawn, or still in progress.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .board import Board, Cell, count_empty_cells


class GameStatus(Enum):
    """Where a board stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class Outcome:
    """
    The classification of a board.

    winner is the winning token when status is WON, otherwise None.
    """
    status: GameStatus
    winner: Optional[str] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def won(cls, token: str) -> "Outcome":
        return cls(GameStatus.WON, token)

    @classmethod
    def drawn(cls) -> "Outcome":
        return cls(GameStatus.DRAWN)

    @property
    def is_decided(self) -> bool:
        """True once the game is won or drawn."""
        return self.status != GameStatus.IN_PROGRESS


# All possible winning lines, in scan order
WINNING_LINES: List[Tuple[Cell, Cell, Cell]] = [
    # Rows
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # Columns
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # Diagonals
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
]


def _check_line(board: Board, line: Tuple[Cell, Cell, Cell]) -> Optional[str]:
    """
    Check if a single line has a winner.

    Returns:
        The token filling all 3 cells, or None.
    """
    (r0, c0), (r1, c1), (r2, c2) = line
    first = board.cells[r0][c0]
    if first == GameConfig.EMPTY:
        return None
    if first == board.cells[r1][c1] == board.cells[r2][c2]:
        return first
    return None


def _last_winning_line(board: Board) -> Optional[Tuple[Cell, Cell, Cell]]:
    # Later lines override earlier ones. A real game can never have two
    # different tokens winning at once.
    winning = None
    for line in WINNING_LINES:
        if _check_line(board, line) is not None:
            winning = line
    return winning


def evaluate(board: Board) -> Outcome:
    """
    Classify a board.

    Lines are scanned rows first, then columns, then the main diagonal
    and the anti-diagonal. If no line is complete, a full board is a draw.

    Args:
        board: The board to check.

    Returns:
        Outcome of the board.
    """
    line = _last_winning_line(board)
    if line is not None:
        return Outcome.won(_check_line(board, line))

    if count_empty_cells(board) == 0:
        return Outcome.drawn()

    return Outcome.in_progress()


def winning_line(board: Board) -> Optional[Tuple[Cell, Cell, Cell]]:
    """
    Get the line that decided the game, if there is one.

    Uses the same scan as evaluate(), so the line always belongs to
    the winner evaluate() reports.

    Returns:
        The winning line as three (row, col) cells, or None.
    """
    return _last_winning_line(board)
