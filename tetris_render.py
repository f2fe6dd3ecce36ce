"""
Rendering sink for the playfield.

The renderer only reads a Frame; it never touches session state.

Caching:
- Pre-render one cell Surface per kind and blit it.
- Pre-render the static background (grid + panel frame) once per Dims.
- Keep a BOARD SURFACE with the *locked* cells; rebuild it only when the grid changes.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tetris_layout import Dims
from tetris_game import Frame, Status

# Colors per kind
COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (28,130,173),
    "O": (255,215,0),
    "T": (129,12,168),
    "J": (0,51,124),
    "L": (250,125,9),
    "S": (78,159,61),
    "Z": (205,24,24),
}
FALLBACK_COLOR = (180,180,180)
BG_COLOR = (10,13,34)
GRID_COLOR = (34,34,34)


@dataclass
class HudCache:
    lines: int = -1
    pieces: int = -1
    title: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    pieces_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: Optional[pygame.font.Font] = None):
        self.dims = dims
        self.font = font
        self.big_font = big_font or font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_grid = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG_COLOR)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, GRID_COLOR, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, GRID_COLOR, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    # ---------- Cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[t] = s

    def _sprite(self, kind: str) -> pygame.Surface:
        if kind not in self.cell_surf:
            s = pygame.Surface((self.dims.cell-2, self.dims.cell-2))
            s.fill(FALLBACK_COLOR)
            self.cell_surf[kind] = s
        return self.cell_surf[kind]

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, grid):
        """Rebuilds the locked-cells surface from grid contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(grid):
            for x, t in enumerate(row):
                if t is not None:
                    self.board_surface.blit(self._sprite(t), (x*c + 1, y*c + 1))
        self._board_grid = grid

    def draw_cell(self, screen: pygame.Surface, t: str, bx: int, by: int):
        if by < 0:
            return
        rx = self.dims.board_x + bx*self.dims.cell + 1
        ry = self.dims.board_y + by*self.dims.cell + 1
        screen.blit(self._sprite(t), (rx, ry))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, lines: int, pieces: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Playfield", True, (197,202,233))
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, (200,210,240))
        if pieces != self.hud.pieces:
            self.hud.pieces = pieces
            self.hud.pieces_s = f.render(f"Pieces: {pieces}", True, (200,210,240))
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.pieces_s, (d.panel_x + 12, d.panel_y + 68))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Soft drop", True, (165,175,215)),
                f.render("↑/X Rot CW", True, (165,175,215)),
                f.render("Z Rot CCW", True, (165,175,215)),
                f.render("P Pause • R Restart", True, (165,175,215)),
            ]
        y = d.panel_y + 110
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def draw_banner(self, screen: pygame.Surface, text: str, color):
        d = self.dims
        msg = self.big_font.render(text, True, color)
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        screen.blit(msg, rect)

    # ---------- Whole frame ----------
    def draw_frame(self, screen: pygame.Surface, frame: Frame):
        if frame.grid != self._board_grid:
            self.rebuild_board_surface(frame.grid)
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        if frame.piece_kind is not None:
            for x, y in frame.piece_cells:
                self.draw_cell(screen, frame.piece_kind, x, y)
        self.draw_panel_hud(screen, frame.lines, frame.pieces)
        if frame.status is Status.PAUSED:
            self.draw_banner(screen, "PAUSED", (220,240,255))
        elif frame.status is Status.GAME_OVER:
            self.draw_banner(screen, "GAME OVER", (255,220,220))
