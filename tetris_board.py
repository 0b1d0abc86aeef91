
"""Board helpers: collide, merge, sweep"""
from typing import Optional, List, Tuple
from tetris_piece import Piece, Point
from tetris_config import COLS, ROWS

Board = List[List[Optional[str]]]


def new_board(rows: int = ROWS, cols: int = COLS) -> Board:
    return [[None] * cols for _ in range(rows)]


def piece_cells(piece: Piece, pos: Point) -> List[Tuple[int, int]]:
    return [(pos.x + p.x, pos.y + p.y) for p in piece.points]


def collide(board: Board, piece: Piece, pos: Point) -> bool:
    rows, cols = len(board), len(board[0])
    for bx, by in piece_cells(piece, pos):
        if bx < 0 or bx >= cols or by >= rows: return True
        if by >= 0 and board[by][bx]: return True
    return False


def merge(board: Board, piece: Piece, pos: Point):
    cols = len(board[0])
    for bx, by in piece_cells(piece, pos):
        # cells above the top are dropped; so are cells an unchecked rotation pushed off the grid
        if 0 <= by < len(board) and 0 <= bx < cols:
            board[by][bx] = piece.t


def sweep(board: Board) -> int:
    cols = len(board[0])
    c = 0
    for y in range(len(board)):
        if all(board[y]):
            del board[y]; board.insert(0, [None] * cols); c += 1
    return c
