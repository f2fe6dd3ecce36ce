"""Piece-kind sources: seeded uniform random and fixed sequences"""
import random
from typing import Iterable, Optional, Sequence


class UniformKinds:
    """Each kind equally likely on every draw; pass a seed for reproducible games."""

    def __init__(self, kinds: Sequence[str], seed: Optional[int] = None):
        if not kinds:
            raise ValueError("UniformKinds needs at least one kind")
        self.kinds = list(kinds)
        self._rng = random.Random(seed)

    def next_kind(self) -> str:
        return self._rng.choice(self.kinds)


class SequenceKinds:
    """Replays a fixed sequence of kinds, cycling when it runs out."""

    def __init__(self, sequence: Iterable[str]):
        self.sequence = list(sequence)
        if not self.sequence:
            raise ValueError("SequenceKinds needs at least one kind")
        self.index = 0

    def next_kind(self) -> str:
        kind = self.sequence[self.index % len(self.sequence)]
        self.index += 1
        return kind
