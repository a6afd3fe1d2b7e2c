"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from premovable.core.board import Board
from premovable.core.enums import Color, Role
from premovable.core.piece import Piece


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def lone_piece() -> Callable[[str, Role, Color], Board]:
    """Factory: a board holding a single piece."""

    def make(key: str, role: Role, color: Color = Color.WHITE) -> Board:
        return Board({key: Piece(color, role)})

    return make
