"""
Main entry point for unbeatable TicTacToe.

This script ties together:
- Logic (board, win detection, minimax opponent, game session)
- Display (console text or Tk window)

Run this script to play TicTacToe against the computer!
"""

import argparse
from typing import Optional

from display.renderer import board_to_text
from logic.board import Cell
from logic.game_state import GameSession, TurnState


class ConsoleGame:
    """
    Plays a session in the terminal.

    Game flow:
    1. Human (X) types a cell as "row col"
    2. Computer (O) replies with its minimax move
    3. Repeat until someone wins or it's a draw
    4. Offer another game
    """

    def __init__(self, computer_first: bool = False):
        self.session = GameSession(computer_first=computer_first)

    def start(self):
        """Play games until the human stops."""
        print("\n" + "="*60)
        print("   Unbeatable TicTacToe")
        print("   You play X, the computer plays O")
        print("="*60 + "\n")

        while True:
            self._game_loop()
            self._show_game_result()

            answer = input("\nPlay again? [y/N] ").strip().lower()
            if answer != "y":
                break
            self.session.reset()
            print("\nGame reset!")

    def _game_loop(self):
        """Main game loop."""
        while not self.session.is_game_over:
            print(board_to_text(self.session.board))

            if self.session.turn == TurnState.COMPUTER_TO_MOVE:
                print("\n>>> Computer is thinking...")
                cell = self.session.play_computer()
                print(f">>> Computer played O at {cell}\n")
                continue

            cell = self._read_human_move()
            if cell is None:
                continue

            result = self.session.play_human(cell)
            if result.is_valid:
                print(f"\n>>> You played X at {cell}\n")
            else:
                print(f"WARNING: {result.error_message}")

    def _read_human_move(self) -> Optional[Cell]:
        """Ask for "row col" until it parses."""
        valid = self.session.validator.get_valid_moves(self.session.board)
        text = input(f"Your move (row col), open cells {valid}: ")
        parts = text.replace(",", " ").split()

        try:
            row, col = (int(part) for part in parts)
        except ValueError:
            print("Please type two numbers, e.g. 1 1")
            return None

        return (row, col)

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        print(board_to_text(self.session.board))
        print(f"\n{self.session.result_message()}")
        print(f"Draws this session: {self.session.times_drawn}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Unbeatable TicTacToe")
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer open the game"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args()

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   Unbeatable TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(computer_first=args.computer_first)
        ui.run()
        return

    game = ConsoleGame(computer_first=args.computer_first)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
