"""Game session: gravity clock, held-input handling, lock/clear/spawn, game over"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from tetris_board import Grid, Playfield
from tetris_config import GameConfig
from tetris_input import HorizontalRepeat, InputState
from tetris_piece import Piece, PieceController
from tetris_rng import UniformKinds
from tetris_shapes import CATALOG, ShapeCatalog

log = logging.getLogger(__name__)


class Status(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Frame:
    """Read-only snapshot handed to the renderer once per frame."""
    grid: Grid
    piece_cells: List[Tuple[int, int]]
    piece_kind: Optional[str]
    status: Status
    lines: int
    pieces: int


class FrameGate:
    """Drops scheduler callbacks that arrive sooner than ``interval`` after the last one let through."""

    def __init__(self, interval: float):
        self.interval = interval
        self.last: Optional[float] = None

    def ready(self, now: float) -> bool:
        if self.last is not None and now - self.last < self.interval:
            return False
        self.last = now
        return True


class GameSession:
    """One game, owned and advanced by a single update loop.

    ``kinds`` is anything with ``next_kind() -> str``; defaults to a uniform
    source over the catalog seeded from ``config.seed``.
    """

    def __init__(self, config: Optional[GameConfig] = None, catalog: ShapeCatalog = CATALOG, kinds=None):
        self.config = config or GameConfig()
        self.catalog = catalog
        self.board = Playfield(self.config.cols, self.config.rows)
        self.controller = PieceController(self.board, catalog)
        self.kinds = kinds or UniformKinds(catalog.kinds, self.config.seed)
        self.status = Status.RUNNING
        self.inputs = InputState()
        self.shift = HorizontalRepeat(self.config.move_repeat_ms)
        self.last_gravity: Optional[float] = None
        self.paused_at: Optional[float] = None
        self.lines = 0
        self.pieces = 0
        log.info("new session %dx%d", self.config.cols, self.config.rows)
        self.spawn()

    @property
    def piece(self) -> Optional[Piece]:
        return self.controller.piece

    # ---------- transitions ----------
    def spawn(self, kind: Optional[str] = None) -> bool:
        """Start a new piece; a blocked start position ends the game."""
        if kind is None:
            kind = self.kinds.next_kind()
        if kind not in self.catalog:
            raise KeyError(f"kind {kind!r} is not in the shape catalog")
        if self.controller.spawn(kind, self.config.spawn_column):
            return True
        self.status = Status.GAME_OVER
        log.info("game over: %s cannot spawn (pieces=%d lines=%d filled=%d)",
                 kind, self.pieces, self.lines, self.board.filled_count())
        return False

    def lock_and_spawn(self) -> bool:
        piece = self.controller.piece
        cells = self.controller.cells()
        visible = [(x, y) for x, y in cells if y >= 0]
        hidden = self.catalog.cell_count(piece.kind) - len(visible)
        if hidden:
            log.debug("%d cell(s) of %s locked above the ceiling", hidden, piece.kind)
        self.board.lock(visible, piece.kind)
        self.pieces += 1
        cleared = self.board.clear_full_rows()
        self.lines += cleared
        log.debug("locked %s at (%d,%d), cleared %d", piece.kind, piece.x, piece.y, cleared)
        return self.spawn()

    def drop_step(self) -> bool:
        """One gravity step: fall a row, or lock when grounded. False once the game is over."""
        if self.controller.is_grounded():
            return self.lock_and_spawn()
        self.controller.step_down()
        return True

    def soft_drop(self) -> bool:
        if self.controller.is_grounded():
            if self.config.soft_drop_locks:
                return self.lock_and_spawn()
            return True
        self.controller.step_down()
        return True

    def toggle_pause(self, now: float) -> Status:
        if self.status is Status.RUNNING:
            self.status = Status.PAUSED
            self.paused_at = now
            log.info("paused")
        elif self.status is Status.PAUSED:
            frozen = now - self.paused_at
            if self.last_gravity is not None:
                self.last_gravity += frozen
            self.shift.shift_timer(frozen)
            self.paused_at = None
            self.status = Status.RUNNING
            log.info("resumed after %.0f", frozen)
        return self.status

    # ---------- clock ----------
    def update(self, now: float, inputs: Optional[InputState] = None):
        if inputs is not None:
            self.inputs = inputs
        if self.status is not Status.RUNNING:
            return

        if self.last_gravity is None:
            self.last_gravity = now
        if now - self.last_gravity >= self.config.gravity_ms:
            self.last_gravity = now
            if not self.drop_step():
                return

        i = self.inputs
        step = self.shift.update(now, i.horizontal)
        if step:
            self.controller.try_translate(step)
        if i.rotate:
            self.controller.try_rotate(1)
        if i.rotate_ccw:
            self.controller.try_rotate(-1)
        if i.soft_drop:
            self.soft_drop()

    def frame(self) -> Frame:
        piece = self.controller.piece
        return Frame(
            grid=self.board.rows(),
            piece_cells=self.controller.cells() if piece else [],
            piece_kind=piece.kind if piece else None,
            status=self.status,
            lines=self.lines,
            pieces=self.pieces,
        )
