"""
Move generator for unbeatable TicTacToe.
Lists every board one move away from a given board.
"""

from typing import List

from .board import Board, apply_move, empty_cells


def child_states(board: Board, token: str) -> List[Board]:
    """
    Get all boards reachable by one move of a token.

    The boards come in row-major order of the cell played (row 0 left
    to right, then row 1, then row 2). The move selector relies on this
    order to break ties.

    Args:
        board: The current board.
        token: The token to place ("X" or "O").

    Returns:
        One new Board per empty cell.
    """
    return [apply_move(board, cell, token) for cell in empty_cells(board)]
