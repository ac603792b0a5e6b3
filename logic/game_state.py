"""
Game state management for unbeatable TicTacToe.
Tracks the board, whose turn it is, and the move history of a session.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

from .config import GameConfig
from .board import Board, Cell, Player, apply_move, empty_board, is_valid_move
from .win_checker import GameStatus, Outcome, evaluate
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer


class TurnState(Enum):
    """Where the game is."""
    HUMAN_TO_MOVE = "human_to_move"
    COMPUTER_TO_MOVE = "computer_to_move"
    WON = "won"
    DRAWN = "drawn"


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    cell: Cell              # (row, col) played
    move_number: int        # Which move this is in the game (0-8)


@dataclass
class GameSession:
    """
    A human-vs-computer game, plus the count of draws across resets.

    Tracks:
    - The current board (replaced on every move, never edited)
    - Whose turn it is, or how the game ended
    - Move history
    - How many games in this session ended in a draw
    """

    computer_first: bool = False

    board: Board = field(default_factory=empty_board)
    turn: TurnState = TurnState.HUMAN_TO_MOVE
    outcome: Outcome = field(default_factory=Outcome.in_progress)
    moves: List[Move] = field(default_factory=list)
    times_drawn: int = 0

    validator: MoveValidator = field(default_factory=MoveValidator, repr=False, compare=False)
    ai: AIPlayer = field(default_factory=AIPlayer, repr=False, compare=False)

    def __post_init__(self):
        # A session can start from any board, including a finished one
        self.outcome = evaluate(self.board)

        if self.outcome.status == GameStatus.WON:
            self.turn = TurnState.WON
        elif self.outcome.status == GameStatus.DRAWN:
            self.turn = TurnState.DRAWN
        elif self.computer_first and not self.moves:
            self.turn = TurnState.COMPUTER_TO_MOVE

    @property
    def is_game_over(self) -> bool:
        return self.turn in (TurnState.WON, TurnState.DRAWN)

    def play_human(self, cell: Cell) -> ValidationResult:
        """
        Play the human's move.

        Args:
            cell: (row, col) the human picked.

        Returns:
            ValidationResult. The session only changes if it is valid.
        """
        if self.turn != TurnState.HUMAN_TO_MOVE:
            message = "Game is already over!" if self.is_game_over else "It's not your turn!"
            return ValidationResult(is_valid=False, error_message=message)

        row, col = cell
        result = self.validator.validate_move(self.board, row, col)
        if not result.is_valid:
            return result

        self._record(Player.HUMAN, (row, col), apply_move(self.board, (row, col), Player.HUMAN.value))
        return result

    def play_computer(self) -> Cell:
        """
        Let the computer search for its move and play it.

        Returns:
            The (row, col) the computer played.
        """
        assert self.turn == TurnState.COMPUTER_TO_MOVE, f"Computer can't move in state {self.turn}"

        cell = self.ai.get_best_move(self.board)
        self.apply_computer_move(cell)
        return cell

    def apply_computer_move(self, cell: Cell):
        """
        Play a computer move that was searched for elsewhere.

        The Tk front end runs AIPlayer.get_best_move() on a worker thread
        and hands the cell back here on the UI thread.

        Args:
            cell: (row, col) returned by the AI for the current board.
        """
        assert self.turn == TurnState.COMPUTER_TO_MOVE, f"Computer can't move in state {self.turn}"
        assert cell is not None and is_valid_move(self.board, cell), f"Computer can't play at {cell}"

        self._record(Player.COMPUTER, cell, apply_move(self.board, cell, self.ai.token))

    def _record(self, player: Player, cell: Cell, new_board: Board):
        self.moves.append(Move(player=player, cell=cell, move_number=len(self.moves)))
        self.board = new_board
        self.outcome = evaluate(new_board)

        if self.outcome.status == GameStatus.WON:
            self.turn = TurnState.WON
        elif self.outcome.status == GameStatus.DRAWN:
            self.turn = TurnState.DRAWN
            self.times_drawn += 1
        elif player.opposite() == Player.COMPUTER:
            self.turn = TurnState.COMPUTER_TO_MOVE
        else:
            self.turn = TurnState.HUMAN_TO_MOVE

    def reset(self):
        """Start a new game. The draw count is kept."""
        self.board = empty_board()
        self.outcome = Outcome.in_progress()
        self.moves = []
        self.turn = TurnState.COMPUTER_TO_MOVE if self.computer_first else TurnState.HUMAN_TO_MOVE

    def result_message(self) -> Optional[str]:
        """Get the message to show once the game is over, or None."""
        if self.turn == TurnState.WON:
            return f"The winner is {self.outcome.winner}!"
        if self.turn == TurnState.DRAWN:
            if self.times_drawn >= GameConfig.DRAWS_FOR_QUOTE:
                return "A strange game. The only winning move is not to play."
            return "Draw!"
        return None
