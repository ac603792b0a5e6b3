"""
Board renderer for unbeatable TicTacToe.
Draws a board as console text or as a Pillow image, and maps clicks back to cells.
"""

from typing import Optional, Sequence

from PIL import Image, ImageDraw

from logic.config import GameConfig
from logic.board import Board, Cell
from .config import DisplayConfig


def board_to_text(board: Board) -> str:
    """
    Draw the board with box characters and row/column indices.

    Args:
        board: The board to draw.

    Returns:
        Multi-line string ready to print.
    """
    lines = ["  0   1   2", "┌───┬───┬───┐"]

    for row in range(GameConfig.BOARD_SIZE):
        row_str = "│"
        for col in range(GameConfig.BOARD_SIZE):
            token = board.cells[row][col]
            row_str += f" {token or ' '} │"
        lines.append(f"{row_str} {row}")

        if row < GameConfig.BOARD_SIZE - 1:
            lines.append("├───┼───┼───┤")

    lines.append("└───┴───┴───┘")
    return "\n".join(lines)


def _cell_box(row: int, col: int, config: DisplayConfig):
    left = config.BOARD_MARGIN + col * config.CELL_SIZE
    top = config.BOARD_MARGIN + row * config.CELL_SIZE
    return left, top, left + config.CELL_SIZE, top + config.CELL_SIZE


def _cell_center(cell: Cell, config: DisplayConfig):
    left, top, right, bottom = _cell_box(cell[0], cell[1], config)
    return (left + right) // 2, (top + bottom) // 2


def render_board(
    board: Board,
    config: Optional[DisplayConfig] = None,
    highlight: Optional[Sequence[Cell]] = None
) -> Image.Image:
    """
    Render the board as an RGB image.

    Args:
        board: The board to draw.
        config: Display settings (defaults to DisplayConfig()).
        highlight: Cells of a winning line to strike through.

    Returns:
        Square PIL image of config.board_pixels per side.
    """
    config = config or DisplayConfig()
    size = config.board_pixels

    image = Image.new("RGB", (size, size), config.BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)

    # Grid lines
    start = config.BOARD_MARGIN
    end = size - config.BOARD_MARGIN
    for i in range(1, GameConfig.BOARD_SIZE):
        offset = config.BOARD_MARGIN + i * config.CELL_SIZE
        draw.line([(offset, start), (offset, end)], fill=config.GRID_COLOR, width=config.GRID_LINE_WIDTH)
        draw.line([(start, offset), (end, offset)], fill=config.GRID_COLOR, width=config.GRID_LINE_WIDTH)

    # Marks
    pad = config.MARK_PADDING
    for row in range(GameConfig.BOARD_SIZE):
        for col in range(GameConfig.BOARD_SIZE):
            token = board.cells[row][col]
            left, top, right, bottom = _cell_box(row, col, config)

            if token == GameConfig.HUMAN_TOKEN:
                draw.line([(left + pad, top + pad), (right - pad, bottom - pad)],
                          fill=config.HUMAN_COLOR, width=config.MARK_LINE_WIDTH)
                draw.line([(left + pad, bottom - pad), (right - pad, top + pad)],
                          fill=config.HUMAN_COLOR, width=config.MARK_LINE_WIDTH)
            elif token == GameConfig.COMPUTER_TOKEN:
                draw.ellipse([left + pad, top + pad, right - pad, bottom - pad],
                             outline=config.COMPUTER_COLOR, width=config.MARK_LINE_WIDTH)

    if highlight:
        draw.line([_cell_center(highlight[0], config), _cell_center(highlight[-1], config)],
                  fill=config.HIGHLIGHT_COLOR, width=config.HIGHLIGHT_WIDTH)

    return image


def cell_at(x: int, y: int, config: Optional[DisplayConfig] = None) -> Optional[Cell]:
    """
    Map a pixel on the rendered board to a cell.

    Returns:
        (row, col), or None if the pixel is in the margin or off the image.
    """
    config = config or DisplayConfig()
    x -= config.BOARD_MARGIN
    y -= config.BOARD_MARGIN
    grid_size = config.CELL_SIZE * GameConfig.BOARD_SIZE

    if not (0 <= x < grid_size and 0 <= y < grid_size):
        return None

    return (y // config.CELL_SIZE, x // config.CELL_SIZE)
