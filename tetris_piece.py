"""Active piece: placement checks, translation, rotation, ground contact"""
import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from tetris_board import Playfield
from tetris_shapes import CATALOG, ShapeCatalog

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Piece:
    kind: str
    rotation: int
    x: int
    y: int


def piece_cells(piece: Piece, catalog: ShapeCatalog = CATALOG) -> List[Tuple[int, int]]:
    """Absolute cells: anchor plus each offset of the current rotation state."""
    return [(piece.x + dx, piece.y + dy) for dx, dy in catalog.offsets(piece.kind, piece.rotation)]


def is_valid_placement(board: Playfield, kind: str, rotation: int, x: int, y: int,
                       catalog: ShapeCatalog = CATALOG) -> bool:
    for dx, dy in catalog.offsets(kind, rotation):
        bx, by = x + dx, y + dy
        if bx < 0 or bx >= board.width or by >= board.height:
            return False
        if by >= 0 and board.is_occupied(bx, by):
            return False
    return True


class PieceController:
    """Owns the falling piece and commits moves only when they are valid."""

    def __init__(self, board: Playfield, catalog: ShapeCatalog = CATALOG, piece: Optional[Piece] = None):
        self.board = board
        self.catalog = catalog
        self.piece = piece

    def _fits(self, p: Piece) -> bool:
        return is_valid_placement(self.board, p.kind, p.rotation, p.x, p.y, self.catalog)

    def cells(self) -> List[Tuple[int, int]]:
        return piece_cells(self.piece, self.catalog)

    def try_translate(self, dx: int, dy: int = 0) -> bool:
        test = replace(self.piece, x=self.piece.x + dx, y=self.piece.y + dy)
        if not self._fits(test):
            return False
        self.piece = test
        return True

    def try_rotate(self, direction: int = 1) -> bool:
        """Rotate in place (+1 clockwise, -1 counter-clockwise); no wall kicks."""
        n = self.catalog.rotation_count(self.piece.kind)
        test = replace(self.piece, rotation=(self.piece.rotation + direction) % n)
        if not self._fits(test):
            return False
        self.piece = test
        return True

    def is_grounded(self) -> bool:
        return not self._fits(replace(self.piece, y=self.piece.y + 1))

    def step_down(self) -> bool:
        if self.is_grounded():
            return False
        self.piece = replace(self.piece, y=self.piece.y + 1)
        return True

    def spawn(self, kind: str, column: int) -> bool:
        """Place a new piece at its start position; leaves the old one if blocked."""
        test = Piece(kind, 0, column, self.catalog.spawn_row(kind))
        if not self._fits(test):
            log.debug("spawn of %s at (%d,%d) blocked", kind, test.x, test.y)
            return False
        self.piece = test
        log.debug("spawned %s at (%d,%d)", kind, test.x, test.y)
        return True
