
"""
pygame drawing helpers.

- Static background (grid + side panel) is rendered once per layout.
- One pre-filled cell Surface per shape colour, blitted for every block.
- Locked blocks are cached in a board Surface that is rebuilt only after a tick
  changes the board.
- HUD text Surfaces are re-rendered only when their values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional, Iterable
from tetris_config import CONFIG
from tetris_text import HELP

COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (102,224,255),
    "J": (106,119,255),
    "L": (255,158,94),
    "O": (255,224,102),
    "S": (94,224,142),
    "T": (200,119,255),
    "Z": (255,102,119),
}
FALLBACK = (180,180,180)
TEXT = (200,210,240)


@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int


def compute_dims(rows: int, cols: int, cell: Optional[int] = None) -> Dims:
    cell = int(cell or CONFIG["CELL_SIZE"])
    margin, panel_w = 16, 240
    board_w, board_h = cols * cell, rows * cell
    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=margin + board_w + margin + panel_w + margin,
        total_h=margin + board_h + margin,
        board_x=margin, board_y=margin,
        panel_x=margin + board_w + margin,
    )


@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    static: Optional[list] = None


class RenderAssets:
    """Pre-rendered surfaces for one board size."""
    def __init__(self, rows: int, cols: int, font: pygame.font.Font, cell: Optional[int] = None):
        self.rows, self.cols = rows, cols
        self.dims = compute_dims(rows, cols, cell)
        self.font = font
        self.hud = HudCache()
        self._make_static()
        self._make_cells()
        self.board_surface = pygame.Surface((self.dims.board_w, self.dims.board_h), pygame.SRCALPHA)

    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(self.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel = pygame.Rect(d.panel_x, d.board_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel)
        pygame.draw.rect(self.bg, (50,60,100), panel, 1)

    def _make_cells(self):
        c = self.dims.cell
        self.cell_surf: Dict[str, pygame.Surface] = {}
        for t, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[t] = s
        self.fallback_surf = pygame.Surface((c-2, c-2))
        self.fallback_surf.fill(FALLBACK)

    def _cell(self, t) -> pygame.Surface:
        return self.cell_surf.get(t, self.fallback_surf)

    def rebuild_board_surface(self, board: Iterable[Iterable[Optional[str]]]):
        """Redraws the locked-block cache from board contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(board):
            for x, t in enumerate(row):
                if t:
                    self.board_surface.blit(self._cell(t), (x*c + 1, y*c + 1))

    def draw_piece(self, screen: pygame.Surface, t: str, cells: Iterable[Tuple[int, int]]):
        d = self.dims
        for bx, by in cells:
            if 0 <= by < self.rows and 0 <= bx < self.cols:
                screen.blit(self._cell(t), (d.board_x + bx*d.cell + 1, d.board_y + by*d.cell + 1))

    def draw_frame(self, screen: pygame.Surface, snap):
        d = self.dims
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (d.board_x, d.board_y))
        self.draw_piece(screen, snap.piece.t, snap.cells)
        self.draw_hud(screen, snap.score, snap.level, snap.lines)

    def draw_hud(self, screen: pygame.Surface, score: int, level: int, lines: int):
        d, f, h = self.dims, self.font, self.hud
        if h.static is None:
            h.static = [f.render("Tetris", True, (197,202,233))]
            h.static += [f.render(part.strip(), True, (165,175,215)) for part in HELP.split(",")]
            h.static.append(f.render("arrows / Esc work too", True, (165,175,215)))
        if score != h.score:
            h.score = score
            h.score_s = f.render(f"Score: {score}", True, TEXT)
        if level != h.level:
            h.level = level
            h.level_s = f.render(f"Level: {level}", True, TEXT)
        if lines != h.lines:
            h.lines = lines
            h.lines_s = f.render(f"Lines: {lines}", True, TEXT)
        x = d.panel_x + 12
        screen.blit(h.static[0], (x, d.board_y + 12))
        screen.blit(h.score_s, (x, d.board_y + 44))
        screen.blit(h.level_s, (x, d.board_y + 68))
        screen.blit(h.lines_s, (x, d.board_y + 92))
        y = d.board_y + 140
        for surf in h.static[1:]:
            screen.blit(surf, (x, y)); y += 20

    def draw_game_over(self, screen: pygame.Surface, font: pygame.font.Font):
        d = self.dims
        msg = font.render("GAME OVER", True, (255,220,220))
        screen.blit(msg, msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2)))
