"""Playfield: fixed-size occupancy grid, lock and line clear"""
import logging
from typing import Iterable, List, Optional, Tuple

log = logging.getLogger(__name__)

Cell = Optional[str]  # None or the kind that was locked there
Grid = List[List[Cell]]


class Playfield:
    """Rows indexed top to bottom, columns left to right."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"playfield must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self._grid: Grid = [[None] * width for _ in range(height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int):
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x},{y}) outside {self.width}x{self.height} playfield")

    def get(self, x: int, y: int) -> Cell:
        self._check(x, y)
        return self._grid[y][x]

    def is_occupied(self, x: int, y: int) -> bool:
        # Above the ceiling is always free; the floor is the caller's business.
        if y < 0:
            return False
        self._check(x, y)
        return self._grid[y][x] is not None

    def lock(self, cells: Iterable[Tuple[int, int]], kind: str):
        cells = list(cells)
        for x, y in cells:
            if not self.in_bounds(x, y):
                raise ValueError(f"cannot lock cell ({x},{y}) outside the playfield")
        for x, y in cells:
            self._grid[y][x] = kind

    def is_row_full(self, y: int) -> bool:
        self._check(0, y)
        return all(c is not None for c in self._grid[y])

    def clear_full_rows(self) -> int:
        """Remove every full row, shift the rest down, return how many went."""
        full = [y for y in range(self.height) if self.is_row_full(y)]
        if not full:
            return 0
        kept = [row for y, row in enumerate(self._grid) if y not in full]
        self._grid = [[None] * self.width for _ in full] + kept
        log.debug("cleared rows %s", full)
        return len(full)

    def filled_count(self) -> int:
        return sum(c is not None for row in self._grid for c in row)

    def rows(self) -> Grid:
        """Copy of the grid for renderers and tests."""
        return [row[:] for row in self._grid]
