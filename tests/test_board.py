from __future__ import annotations

import pytest

from tetris_board import Playfield


def fill_row(board: Playfield, y: int, kind: str = "I") -> None:
    board.lock([(x, y) for x in range(board.width)], kind)


def test_new_playfield_is_empty() -> None:
    board = Playfield(10, 24)
    assert board.filled_count() == 0
    assert len(board.rows()) == 24
    assert all(len(r) == 10 for r in board.rows())


def test_rows_above_ceiling_are_never_occupied() -> None:
    board = Playfield(4, 4)
    fill_row(board, 0)
    assert board.is_occupied(0, -1) is False
    assert board.is_occupied(0, 0) is True


def test_out_of_range_access_raises() -> None:
    board = Playfield(4, 4)
    with pytest.raises(IndexError):
        board.is_occupied(4, 0)
    with pytest.raises(IndexError):
        board.get(0, 4)
    with pytest.raises(ValueError):
        Playfield(0, 4)


def test_lock_marks_cells_with_kind() -> None:
    board = Playfield(10, 24)
    board.lock([(4, 22), (5, 22), (4, 23), (5, 23)], "O")
    for cell in [(4, 22), (5, 22), (4, 23), (5, 23)]:
        assert board.get(*cell) == "O"
    assert board.filled_count() == 4


def test_lock_outside_grid_is_rejected_without_partial_write() -> None:
    board = Playfield(4, 4)
    with pytest.raises(ValueError):
        board.lock([(0, 3), (4, 3)], "T")
    assert board.filled_count() == 0


def test_clear_without_full_rows_changes_nothing() -> None:
    board = Playfield(10, 24)
    board.lock([(0, 23), (1, 23), (1, 22)], "J")
    before = board.rows()
    assert board.clear_full_rows() == 0
    assert board.rows() == before


def test_clear_two_separated_full_rows() -> None:
    board = Playfield(4, 4)
    fill_row(board, 1)
    fill_row(board, 3)
    assert board.clear_full_rows() == 2
    assert board.filled_count() == 0
    assert board.rows() == [[None] * 4 for _ in range(4)]


def test_clear_shifts_remaining_rows_down_in_order() -> None:
    board = Playfield(4, 4)
    board.lock([(0, 0)], "T")
    fill_row(board, 1)
    board.lock([(1, 2)], "J")
    fill_row(board, 3)

    assert board.clear_full_rows() == 2
    rows = board.rows()
    assert rows[0] == [None] * 4
    assert rows[1] == [None] * 4
    assert rows[2] == ["T", None, None, None]
    assert rows[3] == [None, "J", None, None]


def test_clear_adjacent_full_rows() -> None:
    board = Playfield(3, 5)
    board.lock([(2, 1)], "L")
    fill_row(board, 2)
    fill_row(board, 3)
    fill_row(board, 4)
    assert board.clear_full_rows() == 3
    assert board.get(2, 4) == "L"
    assert board.filled_count() == 1


def test_rows_returns_a_copy() -> None:
    board = Playfield(2, 2)
    rows = board.rows()
    rows[0][0] = "Z"
    assert board.get(0, 0) is None
