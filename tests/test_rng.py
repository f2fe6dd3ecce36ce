from __future__ import annotations

import pytest

from tetris_rng import SequenceKinds, UniformKinds
from tetris_shapes import CATALOG


def test_uniform_kinds_is_reproducible_with_seed() -> None:
    a = UniformKinds(CATALOG.kinds, seed=7)
    b = UniformKinds(CATALOG.kinds, seed=7)
    assert [a.next_kind() for _ in range(50)] == [b.next_kind() for _ in range(50)]


def test_uniform_kinds_draws_every_kind() -> None:
    src = UniformKinds(CATALOG.kinds, seed=1)
    seen = {src.next_kind() for _ in range(500)}
    assert seen == set(CATALOG.kinds)


def test_sequence_kinds_cycles() -> None:
    src = SequenceKinds(["O", "T"])
    assert [src.next_kind() for _ in range(5)] == ["O", "T", "O", "T", "O"]


def test_sources_reject_empty_input() -> None:
    with pytest.raises(ValueError):
        SequenceKinds([])
    with pytest.raises(ValueError):
        UniformKinds([])
