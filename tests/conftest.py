import pytest
from tetris_piece import Piece
from tetris_game import Game


class ScriptedRandom:
    """Hands out the given shape kinds in order, repeating the last one."""
    def __init__(self, *kinds):
        self.kinds = list(kinds)

    def next_piece(self):
        t = self.kinds.pop(0) if len(self.kinds) > 1 else self.kinds[0]
        return Piece.spawn(t)


@pytest.fixture
def make_game():
    def make(*kinds, rows=20, cols=10, sleep=None):
        return Game(rows, cols, rng=ScriptedRandom(*(kinds or ("I",))), sleep=sleep)
    return make
