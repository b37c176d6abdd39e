"""Tests for column lookups."""

import pytest

from kanban_core.errors import InvalidArgument, NotFound
from kanban_core.model.column import clamp_index, find_column, require_column

from .conftest import _make_board, _make_column


def test_find_column():
    board = _make_board(_make_column(0, "Backlog"), _make_column(1, "Doing"))
    assert find_column(board, 1) is board.columns[1]
    assert find_column(board, 7) is None


def test_require_column_not_found_lists_available():
    board = _make_board(_make_column(0, "Backlog"), _make_column(1, "Doing"))
    with pytest.raises(NotFound, match="available: 0, 1"):
        require_column(board, 7)


def test_require_column_empty_board():
    with pytest.raises(NotFound, match="available: none"):
        require_column(_make_board(), 0)


def test_clamp_index_in_range():
    assert clamp_index(0, 0) == 0
    assert clamp_index(2, 3) == 2
    assert clamp_index(3, 3) == 3


def test_clamp_index_past_end_appends():
    assert clamp_index(10, 3) == 3


def test_clamp_index_negative_rejected():
    with pytest.raises(InvalidArgument):
        clamp_index(-1, 3)
