import pytest
from tetris_piece import Piece, Point, SHAPES, KINDS, rotate, centroid
from tetris_rng import PieceRandom, random_piece


def test_catalog_has_seven_four_cell_shapes():
    assert KINDS == ("I", "O", "L", "J", "S", "Z", "T")
    assert all(len(pts) == 4 for pts in SHAPES.values())
    assert SHAPES["J"] == ((0,0),(0,1),(0,2),(-1,2))
    assert SHAPES["Z"] == ((0,0),(0,1),(-1,1),(-1,2))


def test_centroid_truncates_toward_zero():
    p = Piece("X", (Point(-1, 0), Point(0, 0), Point(0, 1), Point(0, 0)))
    # -1/4 floors to -1 but truncates to 0
    assert centroid(p) == Point(0, 0)
    assert centroid(Piece.spawn("I")) == Point(0, 1)


def test_rotate_i_once():
    assert rotate(Piece.spawn("I")).points == ((1,1),(0,1),(-1,1),(-2,1))


def test_rotate_i_drifts_after_full_turn():
    p = Piece.spawn("I")
    for _ in range(4):
        p = rotate(p)
    assert p.points == ((0,-2),(0,-1),(0,0),(0,1))


@pytest.mark.parametrize("points", [
    SHAPES["O"],
    ((0,0),(2,0),(0,2),(2,2)),
    ((1,0),(1,2),(0,1),(2,1)),
])
def test_rotate_four_times_is_identity_for_stable_centroids(points):
    p = Piece("X", tuple(Point(*xy) for xy in points))
    q = p
    for _ in range(4):
        q = rotate(q)
    assert q == p


def test_rotate_keeps_kind_and_size():
    p = rotate(Piece.spawn("T"))
    assert p.t == "T" and len(p.points) == 4


def test_rotating_spawned_piece_leaves_template_alone():
    p = Piece.spawn("L")
    rotate(rotate(p))
    assert Piece.spawn("L").points == tuple(Point(*xy) for xy in SHAPES["L"])


def test_seeded_random_is_reproducible():
    r1, r2 = PieceRandom(7), PieceRandom(7)
    assert [r1.next_kind() for _ in range(50)] == [r2.next_kind() for _ in range(50)]


def test_random_draws_cover_every_shape():
    r = PieceRandom(1)
    seen = {r.next_piece().t for _ in range(500)}
    assert seen == set(KINDS)
    assert random_piece().t in KINDS
