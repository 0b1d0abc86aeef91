
"""Key -> Command decoding for the pygame and terminal shells"""
import pygame
from tetris_game import Command

# classic bindings: wasd plus the vi-ish hjkl set
CHAR_COMMANDS = {
    "w": Command.ROTATE, "j": Command.ROTATE,
    "a": Command.LEFT, "h": Command.LEFT,
    "s": Command.DOWN, "k": Command.DOWN,
    "d": Command.RIGHT, "l": Command.RIGHT,
    "q": Command.QUIT,
}

PYGAME_COMMANDS = {
    pygame.K_UP: Command.ROTATE,
    pygame.K_LEFT: Command.LEFT,
    pygame.K_DOWN: Command.DOWN,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_ESCAPE: Command.QUIT,
}


def decode_char(ch: str) -> Command:
    return CHAR_COMMANDS.get(ch, Command.NONE)


def decode_pygame_key(key: int, unicode: str = "") -> Command:
    if key in PYGAME_COMMANDS:
        return PYGAME_COMMANDS[key]
    return decode_char(unicode.lower()) if unicode else Command.NONE
