import pytest

from ultimatettt.board import Board, Outcome, convert_position, evaluate_grid


def _grid(text):
    return [list(row) for row in text.split("/")]


@pytest.mark.parametrize(
    "text",
    ["XXX/_O_/O__", "O__/O_X/OX_", "X_O/_XO/__X", "O_X/_X_/X_O"],
)
def test_winning_lines(text):
    assert evaluate_grid(_grid(text)) is Outcome.WIN


def test_empty_grid_is_ongoing():
    assert evaluate_grid(_grid("___/___/___")) is Outcome.ONGOING


def test_mixed_line_is_not_a_win():
    assert evaluate_grid(_grid("XXO/___/___")) is Outcome.ONGOING


def test_full_grid_without_line_is_draw():
    assert evaluate_grid(_grid("XOX/XOO/OXX")) is Outcome.DRAW


def test_convert_position_pinned():
    assert convert_position(0) == (0, 0)
    assert convert_position(5) == (1, 2)
    assert convert_position(8) == (2, 2)


def test_convert_position_covers_every_cell_once():
    cells = [convert_position(p) for p in range(9)]
    assert sorted(cells) == [(r, c) for r in range(3) for c in range(3)]


@pytest.mark.parametrize("bad", [-1, 9, 42])
def test_convert_position_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        convert_position(bad)


def test_new_board_is_empty():
    board = Board()
    assert all(board.is_free(s, r, c) for s in range(9) for r in range(3) for c in range(3))
    assert all(board.is_section_open(s) for s in range(9))
    assert board.global_outcome() is Outcome.ONGOING


def test_place_and_get():
    board = Board()
    board.place(3, 2, 1, "O")
    assert board.get(3, 2, 1) == "O"
    assert not board.is_free(3, 2, 1)
    assert board.is_free(4, 2, 1)


def test_place_on_taken_cell_rejected():
    board = Board()
    board.place(0, 0, 0, "X")
    with pytest.raises(ValueError):
        board.place(0, 0, 0, "O")


def test_bad_section_rejected():
    board = Board()
    with pytest.raises(ValueError):
        board.get(9, 0, 0)


def test_section_win_detected():
    board = Board()
    for col in range(3):
        board.place(2, 1, col, "X")
    assert board.section_outcome(2) is Outcome.WIN
    assert board.section_outcome(1) is Outcome.ONGOING


def test_claim_section_marks_center_and_global():
    board = Board()
    over = board.claim_section(4, 1)
    assert over is False
    assert board.get(4, 1, 1) == "X"
    assert board.get(4, 0, 0) == " "
    assert board.global_grid[1][1] == "X"
    assert not board.is_section_open(4)


def test_claim_section_player_two_uses_o():
    board = Board()
    board.claim_section(0, 2)
    assert board.global_grid[0][0] == "O"


def test_three_claims_in_a_row_end_the_game():
    board = Board()
    assert board.claim_section(0, 2) is False
    assert board.claim_section(1, 2) is False
    assert board.claim_section(2, 2) is True
    assert board.global_outcome() is Outcome.WIN


def test_mark_draw_closes_section():
    board = Board()
    board.mark_draw(7)
    assert board.global_grid[2][1] == "."
    assert not board.is_section_open(7)


def test_render_global_empty():
    assert Board().render_global() == " _  _  _ \n" * 3


def test_render_shows_cells_and_labels():
    board = Board()
    board.place(4, 1, 1, "X")
    text = board.render()
    lines = text.split("\n")
    assert "L1| _ _ _  | _ X _ | _ _ _ |" in lines
    assert sum(line.startswith("L") for line in lines) == 3
    assert text.count("  |--------+-------+-------|") == 2
    assert text.endswith("  +------------------------+\n")