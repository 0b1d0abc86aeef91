import pytest
import pygame
from tetris_game import Command
from tetris_input import decode_char, decode_pygame_key


@pytest.mark.parametrize("ch, cmd", [
    ("w", Command.ROTATE), ("j", Command.ROTATE),
    ("a", Command.LEFT), ("h", Command.LEFT),
    ("s", Command.DOWN), ("k", Command.DOWN),
    ("d", Command.RIGHT), ("l", Command.RIGHT),
    ("q", Command.QUIT), ("x", Command.NONE), (" ", Command.NONE),
])
def test_decode_char(ch, cmd):
    assert decode_char(ch) is cmd


def test_decode_pygame_key():
    assert decode_pygame_key(pygame.K_LEFT) is Command.LEFT
    assert decode_pygame_key(pygame.K_UP) is Command.ROTATE
    assert decode_pygame_key(pygame.K_ESCAPE) is Command.QUIT
    assert decode_pygame_key(pygame.K_d, "d") is Command.RIGHT
    assert decode_pygame_key(pygame.K_q, "Q") is Command.QUIT
    assert decode_pygame_key(pygame.K_F1) is Command.NONE
