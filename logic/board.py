"""
Board model for unbeatable TicTacToe.
An immutable 3x3 grid plus the basic queries on it.
"""

from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple
from dataclasses import dataclass

from .config import GameConfig


Cell = Tuple[int, int]
Grid = Tuple[Tuple[str, ...], ...]


class Player(Enum):
    """The two players in the game."""
    HUMAN = GameConfig.HUMAN_TOKEN
    COMPUTER = GameConfig.COMPUTER_TOKEN

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.COMPUTER if self == Player.HUMAN else Player.HUMAN


VALID_TOKENS = (GameConfig.EMPTY, GameConfig.HUMAN_TOKEN, GameConfig.COMPUTER_TOKEN)


@dataclass(frozen=True)
class Board:
    """
    A TicTacToe board.

    Boards never change once built. Every move produces a new Board,
    so anyone holding a reference to an older one keeps seeing it as it was.
    """

    cells: Grid

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> "Board":
        """
        Build a board from nested rows, e.g. [["X", "", ""], ...].

        Raises:
            ValueError: If the grid is not 3x3 or holds an unknown token.
        """
        grid = tuple(tuple(row) for row in rows)

        if len(grid) != GameConfig.BOARD_SIZE or any(
            len(row) != GameConfig.BOARD_SIZE for row in grid
        ):
            raise ValueError(
                f"Board must be {GameConfig.BOARD_SIZE}x{GameConfig.BOARD_SIZE}, got {grid!r}"
            )

        for row in grid:
            for token in row:
                if token not in VALID_TOKENS:
                    raise ValueError(f"Unknown token {token!r} on board")

        return cls(grid)

    @property
    def rows(self) -> Grid:
        return self.cells

    def cell(self, cell: Cell) -> str:
        """Get the token at a cell (EMPTY if nobody played there)."""
        row, col = _check_cell(cell)
        return self.cells[row][col]

    def to_lists(self) -> List[List[str]]:
        """Get a fresh nested-list copy of the grid."""
        return [list(row) for row in self.cells]

    def __str__(self) -> str:
        return "\n".join(
            "|".join(token or " " for token in row) for row in self.cells
        )


def _check_cell(cell: Cell) -> Cell:
    row, col = cell
    assert 0 <= row < GameConfig.BOARD_SIZE and 0 <= col < GameConfig.BOARD_SIZE, (
        f"Cell {cell} is off the board"
    )
    return row, col


def empty_board() -> Board:
    """Get a board with all 9 cells empty."""
    return Board(
        tuple(
            tuple(GameConfig.EMPTY for _ in range(GameConfig.BOARD_SIZE))
            for _ in range(GameConfig.BOARD_SIZE)
        )
    )


def is_valid_move(board: Board, cell: Cell) -> bool:
    """Check whether a move can be played at a cell (the cell is empty)."""
    return board.cell(cell) == GameConfig.EMPTY


def apply_move(board: Board, cell: Cell, token: str) -> Board:
    """
    Place a token on the board.

    Does not check that the cell is empty; use is_valid_move() first
    if legality matters.

    Args:
        board: The board to play on. It is left untouched.
        cell: (row, col) to place the token at.
        token: "X" or "O".

    Returns:
        A new Board with the token placed.
    """
    row, col = _check_cell(cell)
    new_row = board.cells[row][:col] + (token,) + board.cells[row][col + 1:]
    return Board(board.cells[:row] + (new_row,) + board.cells[row + 1:])


def empty_cells(board: Board) -> List[Cell]:
    """
    Get all empty cells on the board.

    Returns:
        List of (row, col) tuples in row-major order.
    """
    empty = []
    for row in range(GameConfig.BOARD_SIZE):
        for col in range(GameConfig.BOARD_SIZE):
            if board.cells[row][col] == GameConfig.EMPTY:
                empty.append((row, col))
    return empty


def count_empty_cells(board: Board) -> int:
    """Number of moves left on the board."""
    return sum(
        1 for row in board.cells for token in row if token == GameConfig.EMPTY
    )


def changed_cell(before: Board, after: Board) -> Optional[Cell]:
    """
    Find the cell that differs between two boards.

    Returns:
        The first differing (row, col) in row-major order, or None if
        the boards are equal.
    """
    for row in range(GameConfig.BOARD_SIZE):
        for col in range(GameConfig.BOARD_SIZE):
            if before.cells[row][col] != after.cells[row][col]:
                return (row, col)
    return None
