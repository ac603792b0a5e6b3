"""
Display configuration for unbeatable TicTacToe.
Sizes and colors for the rendered board and the window around it.
"""

from logic.config import GameConfig


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the board.
    """

    # ==================== BOARD IMAGE ====================
    CELL_SIZE = 120        # Pixels per cell
    BOARD_MARGIN = 10      # Blank border around the grid
    GRID_LINE_WIDTH = 4
    MARK_LINE_WIDTH = 10
    MARK_PADDING = 28      # Gap between a mark and its cell edge
    HIGHLIGHT_WIDTH = 8

    # ==================== COLORS (RGB) ====================
    BACKGROUND_COLOR = (26, 26, 46)     # #1a1a2e
    GRID_COLOR = (0, 212, 255)          # #00d4ff
    HUMAN_COLOR = (248, 113, 113)       # #f87171 - X
    COMPUTER_COLOR = (16, 185, 129)     # #10b981 - O
    HIGHLIGHT_COLOR = (255, 215, 0)     # #ffd700 - winning line

    # ==================== WINDOW ====================
    WINDOW_TITLE = "Unbeatable TicTacToe"
    WINDOW_BG = "#1a1a2e"
    FONT_FAMILY = "Segoe UI"
    # Delay before the computer replies, so the human's move is drawn first
    COMPUTER_DELAY_MS = 150

    @property
    def board_pixels(self) -> int:
        """Width and height of the rendered board image."""
        return self.CELL_SIZE * GameConfig.BOARD_SIZE + self.BOARD_MARGIN * 2
