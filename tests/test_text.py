from tetris_piece import Point, Piece, rotate
from tetris_text import render_text, HELP


def test_frame_layout(make_game):
    g = make_game("O")
    g.board[19][0] = "T"
    lines = render_text(g).split("\n")
    assert len(lines) == 23
    assert lines[0] == ".....##..."
    assert lines[1] == ".....##..."
    assert lines[19] == "#........."
    assert lines[20:] == ["Score: 0", "Level: 0", HELP]


def test_frame_shows_score_and_level(make_game):
    g = make_game("O")
    g.score, g.lines = 1600, 23
    lines = render_text(g).split("\n")
    assert lines[20] == "Score: 1600"
    assert lines[21] == "Level: 2"


def test_frame_skips_cells_off_the_grid(make_game):
    g = make_game("I")
    g.pos = Point(0, -2)
    g.piece = rotate(Piece.spawn("I"))
    lines = render_text(g).split("\n")
    # flat I at y=-1 is entirely above the board
    assert all(set(row) == {"."} for row in lines[:20])
    g.pos = Point(0, 0)
    assert render_text(g).split("\n")[1] == "##........"
