import pytest

from algokit.chess import check_reports, king_in_check, main, read_boards

EMPTY = "........"


def make_board(pieces):
    rows = [list(EMPTY) for _ in range(8)]
    for (row, col), piece in pieces.items():
        rows[row][col] = piece
    return ["".join(row) for row in rows]


def test_no_check():
    board = make_board({(0, 0): "k", (7, 7): "K"})
    assert king_in_check(board) is None


def test_rook_checks_black_king():
    board = make_board({(0, 4): "k", (7, 4): "R", (7, 0): "K"})
    assert king_in_check(board) == "black"


def test_blocked_rook():
    board = make_board({(0, 4): "k", (3, 4): "p", (7, 4): "R", (7, 0): "K"})
    assert king_in_check(board) is None


def test_bishop_checks_white_king():
    board = make_board({(0, 0): "b", (7, 7): "K", (0, 7): "k"})
    assert king_in_check(board) == "white"


def test_black_pawn_attacks_downwards():
    assert king_in_check(make_board({(1, 1): "p", (2, 2): "K"})) == "white"
    assert king_in_check(make_board({(1, 1): "p", (0, 0): "K"})) is None


def test_white_pawn_attacks_upwards():
    assert king_in_check(make_board({(6, 1): "P", (5, 0): "k"})) == "black"
    assert king_in_check(make_board({(6, 1): "P", (7, 0): "k"})) is None


def test_knight_check():
    board = make_board({(4, 4): "N", (2, 3): "k"})
    assert king_in_check(board) == "black"


def test_own_pieces_do_not_check():
    board = make_board({(0, 0): "q", (0, 7): "k"})
    assert king_in_check(board) is None


def test_invalid_board():
    with pytest.raises(ValueError):
        king_in_check([EMPTY] * 7)


def test_read_boards_stops_at_empty_board():
    first = make_board({(0, 4): "k", (7, 4): "R"})
    second = make_board({(0, 0): "k", (7, 7): "K"})
    lines = first + [""] + second + [""] + [EMPTY] * 8 + [""] + first
    boards = list(read_boards(lines))
    assert boards == [tuple(first), tuple(second)]


def test_read_boards_rejects_short_board():
    with pytest.raises(ValueError):
        list(read_boards([EMPTY] * 3 + [""]))


def test_check_reports():
    boards = [
        make_board({(0, 4): "k", (7, 4): "R"}),
        make_board({(0, 0): "b", (7, 7): "K"}),
        make_board({(0, 0): "k", (7, 7): "K"}),
    ]
    assert list(check_reports(boards)) == [
        "Game #1: black king is in check.",
        "Game #2: white king is in check.",
        "Game #3: no king is in check.",
    ]


def test_main_reads_file(tmp_path, capsys):
    board = make_board({(0, 4): "k", (7, 4): "R"})
    path = tmp_path / "boards.txt"
    path.write_text("\n".join(board + [""] + [EMPTY] * 8) + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Game #1: black king is in check.\n"


def test_main_reports_bad_board(tmp_path, capsys):
    path = tmp_path / "boards.txt"
    path.write_text("\n".join([EMPTY] * 5) + "\n\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "8 rows" in capsys.readouterr().err