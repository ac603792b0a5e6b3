"""
Unbeatable TicTacToe UI
A graphical interface for playing against the minimax computer using Tkinter.

Shows:
- The board (click a cell to play X)
- Game status and the computer's last move
- How many games this session ended in a draw
"""

import threading
import tkinter as tk
from tkinter import ttk
from typing import Optional

from PIL import ImageTk

from display.config import DisplayConfig
from display.renderer import cell_at, render_board
from logic.board import Board, Cell
from logic.game_state import GameSession, TurnState
from logic.win_checker import winning_line


class TicTacToeUI:
    """
    Main UI class for unbeatable TicTacToe.
    """

    def __init__(self, computer_first: bool = False):
        """Initialize the UI."""
        self.config = DisplayConfig()
        self.session = GameSession(computer_first=computer_first)
        self.photo: Optional[ImageTk.PhotoImage] = None

        self._create_ui()
        self._refresh()
        self._schedule_computer_move()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.configure(bg=self.config.WINDOW_BG)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        font = self.config.FONT_FAMILY
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=self.config.WINDOW_BG)
        style.configure('TLabel', background=self.config.WINDOW_BG, foreground='white', font=(font, 11))
        style.configure('Title.TLabel', font=(font, 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=(font, 12), foreground='#ffd700')
        style.configure('Move.TLabel', font=(font, 11), foreground='#00ff88')

        ttk.Label(main_frame, text="Unbeatable Tic-Tac-Toe", style='Title.TLabel').pack(pady=(0, 10))

        # Board canvas
        size = self.config.board_pixels
        self.board_canvas = tk.Canvas(
            main_frame,
            width=size,
            height=size,
            bg=self.config.WINDOW_BG,
            highlightthickness=0
        )
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_click)

        # Game status section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.computer_move_label = ttk.Label(main_frame, text="", style='Move.TLabel')
        self.computer_move_label.pack()

        self.draws_label = ttk.Label(main_frame, text="")
        self.draws_label.pack(pady=5)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 Reset Game",
            font=(font, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=(font, 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_click(self, event):
        """Handle a click on the board."""
        cell = cell_at(event.x, event.y, self.config)
        if cell is None:
            return

        result = self.session.play_human(cell)
        if not result.is_valid:
            print(result.error_message)
            return

        print(f"Human played X at {cell}")
        self._refresh()
        self._schedule_computer_move()

    def _schedule_computer_move(self):
        """Let the board redraw before the computer starts searching."""
        if self.session.turn == TurnState.COMPUTER_TO_MOVE:
            self.computer_move_label.configure(text="Computer is thinking...")
            self.root.after(self.config.COMPUTER_DELAY_MS, self._start_computer_search)

    def _start_computer_search(self):
        """Search for the computer's move in a background thread."""
        if self.session.turn != TurnState.COMPUTER_TO_MOVE:
            return

        # Clicks are rejected by the session until the move is applied
        board = self.session.board
        threading.Thread(target=self._computer_search, args=(board,), daemon=True).start()

    def _computer_search(self, board: Board):
        """Run the minimax search (runs in background thread)."""
        cell = self.session.ai.get_best_move(board)
        self.root.after(0, lambda: self._apply_computer_move(board, cell))

    def _apply_computer_move(self, board: Board, cell: Cell):
        """Play the searched move (runs on the UI thread)."""
        # The game may have been reset while the search ran
        if self.session.turn != TurnState.COMPUTER_TO_MOVE or self.session.board != board:
            return

        self.session.apply_computer_move(cell)
        print(f"Computer played O at {cell}")
        self.computer_move_label.configure(text=f"Computer played {cell}")
        self._refresh()

    def _refresh(self):
        """Redraw the board and status labels."""
        image = render_board(
            self.session.board,
            self.config,
            highlight=winning_line(self.session.board)
        )
        self.photo = ImageTk.PhotoImage(image)
        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=self.photo)

        message = self.session.result_message()
        if message is not None:
            print(message)
            self.status_label.configure(text=message)
        elif self.session.turn == TurnState.HUMAN_TO_MOVE:
            self.status_label.configure(text="Your turn (X)")
        else:
            self.status_label.configure(text="Computer's turn (O)")

        self.draws_label.configure(text=f"Draws this session: {self.session.times_drawn}")

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self.session.reset()
        self.computer_move_label.configure(text="")
        self._refresh()
        self._schedule_computer_move()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
