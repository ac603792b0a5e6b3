"""
Game configuration for unbeatable TicTacToe.
Board shape, player tokens, and minimax scores.
"""


class GameConfig:
    """
    Configuration class for game rules and scoring.
    These are fixed for standard TicTacToe.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3

    # Marker for a cell nobody has played yet
    EMPTY = ""

    # ==================== PLAYER TOKENS ====================
    HUMAN_TOKEN = "X"     # Human always plays X
    COMPUTER_TOKEN = "O"  # Computer always plays O

    # ==================== MINIMAX SCORES ====================
    # A win is worth WIN_SCORE minus the depth it was found at,
    # so faster wins (and slower losses) score better
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # ==================== SESSION SETTINGS ====================
    # After this many draws the result message changes
    DRAWS_FOR_QUOTE = 3
