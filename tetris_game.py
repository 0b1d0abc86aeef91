
"""Game state machine: input commands, gravity tick, locking, scoring"""
from __future__ import annotations
import enum
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
from tetris_config import CONFIG, COLS, ROWS
from tetris_piece import Piece, Point, rotate
from tetris_board import Board, new_board, piece_cells, collide, merge, sweep
from tetris_rng import PieceRandom

log = logging.getLogger(__name__)


class Command(enum.Enum):
    ROTATE = "rotate"
    LEFT = "left"
    DOWN = "down"
    RIGHT = "right"
    QUIT = "quit"
    NONE = "none"


MOVES = {
    Command.LEFT: (-1, 0),
    Command.DOWN: (0, 1),
    Command.RIGHT: (1, 0),
}


def gravity_interval(level: int) -> int:
    return CONFIG["BASE_INTERVAL"] - level * CONFIG["INTERVAL_STEP"]


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a game for renderers."""
    board: Tuple[Tuple[Optional[str], ...], ...]
    piece: Piece
    cells: Tuple[Tuple[int, int], ...]
    score: int
    lines: int
    level: int
    over: bool


class Game:
    """One running game.

    The board holds locked cells only; the falling piece lives in
    ``piece``/``pos`` until it locks. ``rng`` needs a ``next_piece()`` method
    and ``sleep`` takes seconds; pass ``sleep=None`` when the caller paces
    ticks itself.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS, rng=None,
                 sleep: Optional[Callable[[float], None]] = time.sleep):
        if rows < 1 or cols < 1:
            raise ValueError(f"board must be at least 1x1, got {rows}x{cols}")
        self.rows, self.cols = rows, cols
        self.board: Board = new_board(rows, cols)
        self.rng = rng if rng is not None else PieceRandom(CONFIG["SEED"])
        self.sleep = sleep
        self.score = 0
        self.lines = 0
        self.over = False
        self.piece: Piece = self.rng.next_piece()
        self.pos = self.spawn_point()

    def spawn_point(self) -> Point:
        return Point(self.cols // 2, 0)

    @property
    def level(self) -> int:
        return self.lines // CONFIG["LINES_PER_LEVEL"]

    @property
    def interval(self) -> int:
        return gravity_interval(self.level)

    def collides(self) -> bool:
        return collide(self.board, self.piece, self.pos)

    def cells(self) -> List[Tuple[int, int]]:
        return piece_cells(self.piece, self.pos)

    # ---------- input ----------
    def handle_input(self, command: Optional[Command]):
        if self.over or command is None:
            return
        if command is Command.ROTATE:
            # unchecked, unlike the moves below
            self.piece = rotate(self.piece)
        elif command in MOVES:
            self.shift(*MOVES[command])
        elif command is Command.QUIT:
            log.info("quit requested, score %d", self.score)
            self.over = True

    def shift(self, dx: int, dy: int) -> bool:
        old = self.pos
        self.pos = Point(old.x + dx, old.y + dy)
        if self.collides():
            self.pos = old
            return False
        return True

    # ---------- time step ----------
    def tick(self):
        if self.over:
            return
        speed = self.interval

        self.pos = Point(self.pos.x, self.pos.y + 1)
        if self.collides():
            self.pos = Point(self.pos.x, self.pos.y - 1)
            merge(self.board, self.piece, self.pos)
            log.debug("locked %s at %s", self.piece.t, tuple(self.pos))
            self.piece = self.rng.next_piece()
            self.pos = self.spawn_point()
            if self.collides():
                log.info("game over: %s cannot spawn, score %d lines %d",
                         self.piece.t, self.score, self.lines)
                self.over = True

        if self.sleep is not None:
            self.sleep(max(speed, 0) * CONFIG["TIME_UNIT_S"])

        c = sweep(self.board)
        if c:
            self.lines += c
            self.score += 100 * 2 ** c
            log.debug("cleared %d rows, score %d", c, self.score)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            board=tuple(tuple(r) for r in self.board),
            piece=self.piece,
            cells=tuple(self.cells()),
            score=self.score, lines=self.lines, level=self.level, over=self.over,
        )
