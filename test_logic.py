"""
Tests for the game logic: board, win checker, move generator and minimax.

Usage:
    pytest test_logic.py              # Run all tests
    pytest test_logic.py -m "not slow"  # Skip the exhaustive play test
"""

import pytest

from logic.config import GameConfig
from logic.board import (
    Board,
    Player,
    apply_move,
    changed_cell,
    count_empty_cells,
    empty_board,
    empty_cells,
    is_valid_move,
)
from logic.win_checker import GameStatus, Outcome, evaluate, winning_line
from logic.move_generator import child_states
from logic.ai_player import AIPlayer, choose_computer_move, minimax


def board(rows):
    return Board.from_rows(rows)


# ==================== BOARD ====================

def test_empty_board():
    b = empty_board()
    assert count_empty_cells(b) == 9
    assert all(token == "" for row in b.rows for token in row)
    assert evaluate(b) == Outcome.in_progress()


def test_from_rows_rejects_bad_shape():
    with pytest.raises(ValueError):
        Board.from_rows([["", "", ""], ["", "", ""]])
    with pytest.raises(ValueError):
        Board.from_rows([["", ""], ["", "", ""], ["", "", ""]])


def test_from_rows_rejects_unknown_token():
    with pytest.raises(ValueError):
        Board.from_rows([["Z", "", ""], ["", "", ""], ["", "", ""]])


def test_is_valid_move():
    b = board([["X", "", ""], ["", "", ""], ["", "", ""]])
    assert is_valid_move(b, (0, 1))
    assert not is_valid_move(b, (0, 0))


def test_off_board_cell_fails_loudly():
    b = empty_board()
    with pytest.raises(AssertionError):
        is_valid_move(b, (3, 0))
    with pytest.raises(AssertionError):
        is_valid_move(b, (-1, 0))
    with pytest.raises(AssertionError):
        apply_move(b, (0, 3), "X")


def test_apply_move_returns_new_board():
    original = empty_board()
    result = apply_move(original, (0, 0), "X")

    assert result.to_lists() == [["X", "", ""], ["", "", ""], ["", "", ""]]
    # The original is untouched
    assert original == empty_board()
    assert original.cell((0, 0)) == ""


def test_to_lists_is_a_copy():
    b = empty_board()
    grid = b.to_lists()
    grid[1][1] = "X"
    assert b.cell((1, 1)) == ""


def test_count_empty_cells():
    b = board([["X", "O", ""], ["O", "X", ""], ["X", "", ""]])
    assert count_empty_cells(b) == 4
    assert empty_cells(b) == [(0, 2), (1, 2), (2, 1), (2, 2)]


def test_changed_cell():
    before = empty_board()
    after = apply_move(before, (2, 1), "O")
    assert changed_cell(before, after) == (2, 1)
    assert changed_cell(before, before) is None


def test_player_opposite():
    assert Player.HUMAN.value == "X"
    assert Player.COMPUTER.value == "O"
    assert Player.HUMAN.opposite() == Player.COMPUTER
    assert Player.COMPUTER.opposite() == Player.HUMAN


# ==================== WIN CHECKER ====================

def test_evaluate_horizontal_win():
    b = board([["O", "O", "O"], ["X", "X", ""], ["", "", ""]])
    assert evaluate(b) == Outcome.won("O")


def test_evaluate_vertical_win():
    b = board([["X", "O", ""], ["X", "O", ""], ["X", "", ""]])
    assert evaluate(b) == Outcome.won("X")


def test_evaluate_diagonal_wins():
    main_diagonal = board([["X", "O", "X"], ["O", "X", ""], ["O", "", "X"]])
    anti_diagonal = board([["X", "O", "O"], ["X", "O", ""], ["O", "X", ""]])
    assert evaluate(main_diagonal) == Outcome.won("X")
    assert evaluate(anti_diagonal) == Outcome.won("O")


def test_evaluate_draw():
    b = board([["X", "O", "X"], ["O", "X", "X"], ["O", "X", "O"]])
    outcome = evaluate(b)
    assert outcome == Outcome.drawn()
    assert outcome.winner is None
    assert count_empty_cells(b) == 0


def test_full_board_with_winner_is_won_not_drawn():
    b = board([["X", "X", "X"], ["O", "O", "X"], ["X", "O", "O"]])
    assert evaluate(b) == Outcome.won("X")


def test_evaluate_in_progress():
    b = board([["X", "O", ""], ["", "", ""], ["", "", ""]])
    outcome = evaluate(b)
    assert outcome.status == GameStatus.IN_PROGRESS
    assert not outcome.is_decided


def test_later_winning_line_takes_precedence():
    # Impossible in a real game, but the scan order decides it
    rows_board = board([["X", "X", "X"], ["O", "O", "O"], ["", "", ""]])
    assert evaluate(rows_board) == Outcome.won("O")

    columns_board = board([["X", "O", ""], ["X", "O", ""], ["X", "O", ""]])
    assert evaluate(columns_board) == Outcome.won("O")


def test_winning_line_matches_evaluate():
    b = board([["X", "X", "X"], ["O", "O", "O"], ["", "", ""]])
    assert winning_line(b) == ((1, 0), (1, 1), (1, 2))

    b = board([["X", "O", "O"], ["X", "O", ""], ["O", "X", ""]])
    assert winning_line(b) == ((0, 2), (1, 1), (2, 0))

    assert winning_line(empty_board()) is None


# ==================== MOVE GENERATOR ====================

def test_child_states_known_board():
    b = board([["O", "O", "X"], ["X", "X", "O"], ["", "X", ""]])

    expected = [
        board([["O", "O", "X"], ["X", "X", "O"], ["O", "X", ""]]),
        board([["O", "O", "X"], ["X", "X", "O"], ["", "X", "O"]]),
    ]

    assert child_states(b, "O") == expected


def test_child_states_one_per_empty_cell_in_row_major_order():
    b = board([["X", "", ""], ["", "O", ""], ["", "", "X"]])
    children = child_states(b, "O")

    assert len(children) == count_empty_cells(b)
    cells = [changed_cell(b, child) for child in children]
    assert cells == empty_cells(b)
    assert cells == sorted(cells)
    for cell, child in zip(cells, children):
        assert child.cell(cell) == "O"
        assert count_empty_cells(child) == count_empty_cells(b) - 1


def test_child_states_of_full_board():
    b = board([["X", "O", "X"], ["O", "X", "X"], ["O", "X", "O"]])
    assert child_states(b, "X") == []


# ==================== MINIMAX ====================

def test_minimax_terminal_scores():
    x_wins = board([["X", "", ""], ["O", "X", ""], ["O", "", "X"]])
    o_wins = board([["O", "X", ""], ["O", "X", ""], ["O", "", ""]])
    drawn = board([["O", "O", "X"], ["X", "X", "O"], ["O", "X", "X"]])

    assert minimax(x_wins, True) == -10
    assert minimax(o_wins, True) == 10
    assert minimax(drawn, True) == 0


@pytest.mark.parametrize("depth", [0, 1, 4, 9])
def test_minimax_terminal_scores_depend_on_depth(depth):
    x_wins = board([["X", "", ""], ["O", "X", ""], ["O", "", "X"]])
    o_wins = board([["O", "X", ""], ["O", "X", ""], ["O", "", ""]])
    drawn = board([["O", "O", "X"], ["X", "X", "O"], ["O", "X", "X"]])

    for is_maximizing in (True, False):
        assert minimax(x_wins, is_maximizing, depth) == depth - GameConfig.WIN_SCORE
        assert minimax(o_wins, is_maximizing, depth) == GameConfig.WIN_SCORE - depth
        assert minimax(drawn, is_maximizing, depth) == 0


def test_minimax_computer_wins_this_turn():
    b = board([["", "", ""], ["O", "", "X"], ["O", "X", "X"]])
    assert minimax(b, True) == 9


def test_minimax_human_wins_this_turn():
    b = board([["", "", ""], ["X", "", "O"], ["X", "O", "O"]])
    assert minimax(b, False) == -9


def test_minimax_only_move_draws():
    b = board([["O", "O", "X"], ["X", "X", "O"], ["O", "X", ""]])
    assert minimax(b, True) == 0


def test_minimax_is_deterministic():
    b = board([["X", "", ""], ["", "O", ""], ["", "", "X"]])
    assert minimax(b, True, 2) == minimax(b, True, 2)


# ==================== MOVE SELECTOR ====================

def test_choose_computer_move_blocks_diagonal():
    b = board([["", "", "X"], ["", "X", "O"], ["", "", ""]])
    result = choose_computer_move(b)

    assert result.cell((2, 0)) == "O"
    assert changed_cell(b, result) == (2, 0)


def test_choose_computer_move_takes_the_win():
    b = board([["O", "O", ""], ["X", "X", ""], ["X", "", ""]])
    result = choose_computer_move(b)
    assert evaluate(result) == Outcome.won("O")


def test_choose_computer_move_fills_last_cell():
    b = board([["X", "O", "X"], ["X", "O", "O"], ["O", "X", ""]])
    result = choose_computer_move(b)
    assert result == board([["X", "O", "X"], ["X", "O", "O"], ["O", "X", "O"]])


def test_choose_computer_move_keeps_first_of_equal_moves():
    # O wins at (0, 2) or (2, 0), both on the next move
    b = board([["O", "O", ""], ["O", "X", "X"], ["", "", "X"]])
    assert minimax(apply_move(b, (0, 2), "O"), False, 1) == minimax(apply_move(b, (2, 0), "O"), False, 1)

    result = choose_computer_move(b)
    assert changed_cell(b, result) == (0, 2)


def test_choose_computer_move_does_not_touch_input():
    b = board([["", "", "X"], ["", "X", "O"], ["", "", ""]])
    snapshot = b.to_lists()
    choose_computer_move(b)
    assert b.to_lists() == snapshot


def test_choose_computer_move_on_full_board_fails_loudly():
    b = board([["X", "O", "X"], ["O", "X", "X"], ["O", "X", "O"]])
    with pytest.raises(AssertionError):
        choose_computer_move(b)


def test_ai_player_get_best_move():
    ai = AIPlayer()
    assert ai.token == "O"
    assert ai.get_best_move(board([["", "", "X"], ["", "X", "O"], ["", "", ""]])) == (2, 0)
    assert ai.get_best_move(board([["X", "O", "X"], ["O", "X", "X"], ["O", "X", "O"]])) is None


@pytest.mark.slow
def test_computer_never_loses_against_any_human():
    """
    Play every possible human move sequence from the empty board.

    The computer must never lose, must convert every position where it
    has a forced win, and perfect play from the human must end in a draw.
    """
    replies = {}

    def computer_reply(b):
        if b not in replies:
            reply = choose_computer_move(b)
            replies[b] = (reply, minimax(reply, False, 1))
        return replies[b]

    def explore(b):
        """Get the set of outcomes reachable with the human (X) to move."""
        outcomes = set()
        for child in child_states(b, "X"):
            outcome = evaluate(child)
            if outcome.is_decided:
                outcomes.add(outcome)
                continue

            reply, score = computer_reply(child)
            outcome = evaluate(reply)
            if outcome.is_decided:
                reached = {outcome}
            else:
                reached = explore(reply)

            if score > 0:
                assert reached == {Outcome.won("O")}, f"Computer missed a forced win after\n{child}"
            outcomes |= reached
        return outcomes

    outcomes = explore(empty_board())

    assert Outcome.won("X") not in outcomes
    assert Outcome.won("O") in outcomes
    # The best the human can do is a draw
    assert Outcome.drawn() in outcomes
