"""
AI player for unbeatable TicTacToe.
Uses the Minimax algorithm to choose the computer's move.
"""

from typing import Optional

from .config import GameConfig
from .board import Board, Cell, changed_cell, count_empty_cells
from .win_checker import evaluate
from .move_generator import child_states


def minimax(board: Board, is_maximizing: bool, depth: int = 0) -> int:
    """
    Score a board assuming both sides play perfectly.

    The computer (O) maximizes and the human (X) minimizes. Every
    reachable game is searched; the tree is small enough that no
    pruning is needed.

    Args:
        board: Board to score.
        is_maximizing: True if the computer moves next.
        depth: How many moves have been made since the search started.

    Returns:
        WIN_SCORE - depth for a computer win, depth - WIN_SCORE for a
        human win, DRAW_SCORE for a draw.
    """
    outcome = evaluate(board)

    if outcome.is_decided:
        if outcome.winner == GameConfig.COMPUTER_TOKEN:
            return GameConfig.WIN_SCORE - depth  # Prefer faster wins
        elif outcome.winner == GameConfig.HUMAN_TOKEN:
            return depth - GameConfig.WIN_SCORE  # Prefer slower losses
        return GameConfig.DRAW_SCORE

    if is_maximizing:
        return max(
            minimax(child, False, depth + 1)
            for child in child_states(board, GameConfig.COMPUTER_TOKEN)
        )
    else:
        return min(
            minimax(child, True, depth + 1)
            for child in child_states(board, GameConfig.HUMAN_TOKEN)
        )


def choose_computer_move(board: Board) -> Board:
    """
    Pick the computer's move.

    Each candidate is scored with the human to move next. A candidate
    only replaces the current best on a strictly higher score, so among
    equal moves the first one in row-major order is kept.

    Args:
        board: Current board. Must have at least one empty cell.

    Returns:
        The board after the computer's move.
    """
    assert count_empty_cells(board) > 0, "No moves left for the computer"

    best_score = None
    best_board = board

    for candidate in child_states(board, GameConfig.COMPUTER_TOKEN):
        score = minimax(candidate, False, 1)

        if best_score is None or score > best_score:
            best_score = score
            best_board = candidate

    return best_board


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(self):
        self.token = GameConfig.COMPUTER_TOKEN

    def get_best_move(self, board: Board) -> Optional[Cell]:
        """
        Get the best move for the current position.

        Args:
            board: Current board.

        Returns:
            (row, col) of best move, or None if no moves available.
        """
        if count_empty_cells(board) == 0:
            return None

        return changed_cell(board, choose_computer_move(board))
