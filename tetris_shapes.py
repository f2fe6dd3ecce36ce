"""Shape catalog: piece kinds and their rotation states as pivot-relative offsets"""
from typing import Dict, Iterable, Sequence, Tuple

Offset = Tuple[int, int]
Rotation = Tuple[Offset, ...]

# The first offset of every state is the pivot; the others turn around it.
SHAPES: Dict[str, Sequence[Sequence[Offset]]] = {
    "I": [[(0,0),(-1,0),(1,0),(2,0)], [(0,0),(0,-1),(0,1),(0,2)]],
    "O": [[(0,0),(1,0),(0,-1),(1,-1)]],
    "T": [[(0,0),(-1,0),(1,0),(0,-1)], [(0,0),(0,-1),(0,1),(1,0)],
          [(0,0),(-1,0),(1,0),(0,1)], [(0,0),(0,-1),(0,1),(-1,0)]],
    "J": [[(0,0),(-1,0),(1,0),(-1,-1)], [(0,0),(0,-1),(0,1),(1,-1)],
          [(0,0),(-1,0),(1,0),(1,1)], [(0,0),(0,-1),(0,1),(-1,1)]],
    "L": [[(0,0),(-1,0),(1,0),(1,-1)], [(0,0),(0,-1),(0,1),(1,1)],
          [(0,0),(-1,0),(1,0),(-1,1)], [(0,0),(0,-1),(0,1),(-1,-1)]],
    "S": [[(0,0),(0,1),(-1,1),(1,0)], [(0,0),(0,-1),(1,0),(1,1)]],
    "Z": [[(0,0),(-1,0),(0,1),(1,1)], [(0,0),(0,1),(1,0),(1,-1)]],
}


class ShapeCatalog:
    """Immutable table of kinds -> rotation states.

    Every state of a kind must hold the same number of cells; rotation is
    applied modulo the state count, so cycling through all states returns a
    piece to its original footprint.
    """

    def __init__(self, shapes: Dict[str, Iterable[Iterable[Offset]]]):
        table: Dict[str, Tuple[Rotation, ...]] = {}
        for kind, states in shapes.items():
            rots = tuple(tuple((int(dx), int(dy)) for dx, dy in s) for s in states)
            if not rots:
                raise ValueError(f"shape {kind!r} has no rotation states")
            sizes = {len(r) for r in rots}
            if len(sizes) != 1 or 0 in sizes:
                raise ValueError(f"shape {kind!r} rotation states differ in cell count: {sorted(sizes)}")
            table[kind] = rots
        if not table:
            raise ValueError("catalog must define at least one shape")
        self._table = table

    @property
    def kinds(self) -> Tuple[str, ...]:
        return tuple(self._table)

    def __contains__(self, kind: str) -> bool:
        return kind in self._table

    def rotation_states(self, kind: str) -> Tuple[Rotation, ...]:
        return self._table[kind]

    def rotation_count(self, kind: str) -> int:
        return len(self._table[kind])

    def offsets(self, kind: str, rotation: int) -> Rotation:
        rots = self._table[kind]
        if not 0 <= rotation < len(rots):
            raise IndexError(f"rotation {rotation} out of range for {kind!r} ({len(rots)} states)")
        return rots[rotation]

    def cell_count(self, kind: str) -> int:
        return len(self._table[kind][0])

    def spawn_row(self, kind: str) -> int:
        """Lowest anchor row that keeps the spawn footprint fully visible."""
        top = min(dy for _, dy in self._table[kind][0])
        return max(0, -top)


CATALOG = ShapeCatalog(SHAPES)
