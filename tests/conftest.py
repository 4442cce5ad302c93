"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from damka.core.board import Board


@pytest.fixture
def board() -> Board:
    """Fresh 10x10 board in the starting layout."""
    return Board.initial()


@pytest.fixture
def empty_board() -> Board:
    """Fresh 10x10 board with no pieces."""
    return Board()
