
"""Terminal shell: one key per step, in the classic console style.

The loop draws the ASCII frame, blocks for a single key, forwards it as a
command and then ticks, so the piece falls one row per keypress.
"""
import curses
import logging
import os
from tetris_config import ROWS, COLS
from tetris_game import Command, Game
from tetris_input import decode_char
from tetris_text import render_text

CURSES_COMMANDS = {
    curses.KEY_UP: Command.ROTATE,
    curses.KEY_LEFT: Command.LEFT,
    curses.KEY_DOWN: Command.DOWN,
    curses.KEY_RIGHT: Command.RIGHT,
}


def decode_key(key: int) -> Command:
    if key in CURSES_COMMANDS:
        return CURSES_COMMANDS[key]
    if 0 <= key < 256:
        return decode_char(chr(key).lower())
    return Command.NONE


def draw(stdscr, game):
    stdscr.erase()
    for i, line in enumerate(render_text(game).splitlines()):
        try:
            stdscr.addstr(i, 0, line)
        except curses.error:
            pass  # window too small for this line
    stdscr.refresh()


def play(stdscr) -> Game:
    curses.curs_set(0)
    stdscr.keypad(True)
    game = Game(ROWS, COLS)
    while not game.over:
        draw(stdscr, game)
        game.handle_input(decode_key(stdscr.getch()))
        game.tick()
    return game


def run():
    # curses owns the terminal, so logs only go to a file
    path = os.environ.get("TETRIS_LOG")
    if path:
        logging.basicConfig(filename=path, level=logging.DEBUG,
                            format="%(asctime)s %(name)s %(levelname)s %(message)s")
    game = curses.wrapper(play)
    print("Game over!")
    print("Score:", game.score)


if __name__ == '__main__':
    run()
