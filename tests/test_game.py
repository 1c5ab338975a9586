"""Unit tests for minixo board rules and win detection."""

import pytest

from minixo.game import (
    WINNING_LINES,
    Board,
    GameStatus,
    Outcome,
    evaluate,
    winning_line,
)


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("player", ["X", "O"])
def test_completed_line_wins(line, player):
    cells = [None] * 9
    for index in line:
        cells[index] = player
    status = evaluate(cells)
    assert status == GameStatus.won(player)
    assert winning_line(cells) == line


def test_full_board_without_line_is_tied():
    cells = ["X", "O", "X", "X", "O", "O", "O", "X", "X"]
    status = evaluate(cells)
    assert status.outcome is Outcome.TIED
    assert status.winner is None
    assert status.is_terminal


def test_win_on_last_cell_is_not_a_tie():
    cells = ["X", "O", "X", "O", "X", "O", "O", "X", "X"]
    assert evaluate(cells) == GameStatus.won("X")


def test_open_board_is_in_progress():
    assert evaluate(Board()) == GameStatus.in_progress()
    cells = ["X", "O", "X", "X", "O", "O", "O", "X", None]
    assert not evaluate(cells).is_terminal


def test_apply_move_places_marker_and_flips_turn():
    board = Board()
    board.apply_move(4, "X")
    assert board.cells[4] == "X"
    assert board.turn == "O"
    assert board.empty_cells() == [0, 1, 2, 3, 5, 6, 7, 8]


def test_apply_move_ignores_occupied_cell():
    board = Board()
    board.apply_move(0, "X")
    board.apply_move(0, "O")
    assert board.cells[0] == "X"
    assert board.turn == "O"


@pytest.mark.parametrize(
    "index, player",
    [(-1, "X"), (9, "X"), (1.5, "X"), ("4", "X"), (None, "X"), (3, "Z"), (3, None)],
)
def test_apply_move_ignores_invalid_input(index, player):
    board = Board()
    board.apply_move(index, player)
    assert board.cells == [None] * 9
    assert board.turn == "X"


def test_finished_board_refuses_moves():
    board = Board.from_cells(["X", "X", "X", "O", "O", None, None, None, None])
    board.apply_move(5, "O")
    assert board.cells[5] is None
    assert evaluate(board) == GameStatus.won("X")


def test_from_cells_infers_turn():
    assert Board.from_cells([None] * 9).turn == "X"
    assert Board.from_cells(["X"] + [None] * 8).turn == "O"
    assert Board.from_cells(["X", "O"] + [None] * 7).turn == "X"
    assert Board.from_cells([None] * 9, turn="O").turn == "O"


def test_from_cells_rejects_wrong_size():
    with pytest.raises(ValueError):
        Board.from_cells([None] * 8)


def test_clear_resets_board_and_turn():
    board = Board()
    board.apply_move(0, "X")
    board.apply_move(1, "O")
    board.clear()
    assert board.cells == [None] * 9
    assert board.turn == "X"


def test_clone_is_independent():
    board = Board()
    copy = board.clone()
    copy.apply_move(0, "X")
    assert board.cells[0] is None


def test_render_numbers_empty_cells():
    board = Board.from_cells(["X", None, None, None, "O", None, None, None, None])
    assert board.render().splitlines()[0] == "X | 2 | 3"
