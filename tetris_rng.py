
"""Uniform piece randomizer"""
import random
from typing import Optional
from tetris_piece import Piece, KINDS


class PieceRandom:
    """Independent uniform draws over the seven shapes; repeats are allowed."""
    PIECES = KINDS

    def __init__(self, seed: Optional[int] = None):
        self.rand = random.Random(seed)

    def next_kind(self) -> str:
        return self.rand.choice(self.PIECES)

    def next_piece(self) -> Piece:
        return Piece.spawn(self.next_kind())


_default = PieceRandom()


def random_piece() -> Piece:
    return _default.next_piece()
