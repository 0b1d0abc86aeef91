
"""Piece model, shapes, centroid rotation"""
from typing import NamedTuple, Tuple


class Point(NamedTuple):
    x: int
    y: int


SHAPES = {
    "I": ((0,0),(0,1),(0,2),(0,3)),
    "O": ((0,0),(0,1),(1,0),(1,1)),
    "L": ((0,0),(0,1),(0,2),(1,2)),
    "J": ((0,0),(0,1),(0,2),(-1,2)),
    "S": ((0,0),(0,1),(1,1),(1,2)),
    "Z": ((0,0),(0,1),(-1,1),(-1,2)),
    "T": ((0,0),(0,1),(0,2),(-1,1)),
}
KINDS = tuple(SHAPES)


class Piece(NamedTuple):
    t: str
    points: Tuple[Point, ...]

    @staticmethod
    def spawn(t: str) -> "Piece":
        return Piece(t, tuple(Point(x, y) for x, y in SHAPES[t]))


def _trunc_div(a: int, b: int) -> int:
    # rounds toward zero, unlike //
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def centroid(piece: Piece) -> Point:
    n = len(piece.points)
    return Point(_trunc_div(sum(p.x for p in piece.points), n),
                 _trunc_div(sum(p.y for p in piece.points), n))


def rotate(piece: Piece) -> Piece:
    """Clockwise quarter turn about the truncated centroid.

    No bounds or overlap check happens here. Shapes whose coordinate sums do
    not divide evenly drift a little on every turn.
    """
    cx, cy = centroid(piece)
    return Piece(piece.t, tuple(Point(cy - p.y + cx, p.x - cx + cy) for p in piece.points))
