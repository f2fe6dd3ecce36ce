from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from tetris_config import GameConfig
from tetris_game import Frame, GameSession, Status
from tetris_layout import compute_dims
from tetris_render import BG_COLOR, COLORS, RenderAssets
from tetris_rng import SequenceKinds


@pytest.fixture
def assets():
    pygame.init()
    dims = compute_dims(GameConfig(cols=4, rows=4, cell_size=10, spawn_column=1))
    yield dims, RenderAssets(dims, pygame.font.Font(None, 18))
    pygame.quit()


def pixel(screen: pygame.Surface, dims, x: int, y: int):
    px = dims.board_x + x * dims.cell + dims.cell // 2
    py = dims.board_y + y * dims.cell + dims.cell // 2
    return tuple(screen.get_at((px, py)))[:3]


def test_layout_fits_board_and_panel() -> None:
    dims = compute_dims(GameConfig())
    assert dims.board_w == 10 * 30
    assert dims.board_h == 24 * 30
    assert dims.total_w == dims.panel_x + dims.panel_w + dims.margin


def test_locked_and_active_cells_are_drawn(assets) -> None:
    dims, render = assets
    grid = [[None] * 4 for _ in range(4)]
    grid[3][0] = "O"
    frame = Frame(grid=grid, piece_cells=[(2, 0), (2, -1)], piece_kind="T",
                  status=Status.RUNNING, lines=0, pieces=1)
    screen = pygame.Surface((dims.total_w, dims.total_h))
    render.draw_frame(screen, frame)
    assert pixel(screen, dims, 0, 3) == COLORS["O"]
    assert pixel(screen, dims, 2, 0) == COLORS["T"]
    assert pixel(screen, dims, 1, 2) == BG_COLOR


def test_board_surface_rebuilt_when_grid_changes(assets) -> None:
    dims, render = assets
    session = GameSession(GameConfig(cols=4, rows=4, spawn_column=1), kinds=SequenceKinds(["I"]))
    screen = pygame.Surface((dims.total_w, dims.total_h))
    render.draw_frame(screen, session.frame())
    session.board.lock([(3, 3)], "Z")
    render.draw_frame(screen, session.frame())
    assert pixel(screen, dims, 3, 3) == COLORS["Z"]


def test_paused_and_game_over_banners_render(assets) -> None:
    dims, render = assets
    grid = [[None] * 4 for _ in range(4)]
    screen = pygame.Surface((dims.total_w, dims.total_h))
    for status in (Status.PAUSED, Status.GAME_OVER):
        render.draw_frame(screen, Frame(grid=grid, piece_cells=[], piece_kind=None,
                                        status=status, lines=3, pieces=7))
    assert render.hud.lines == 3
    assert render.hud.pieces == 7
