"""Core domain layer — pure premove geometry with zero external dependencies.

Quick start::

    from premovable.core import Board, premove

    board = Board.initial()
    print(premove(board, "e1", can_castle=True))
"""

from premovable.core.board import Board, PieceMap, rook_files_of
from premovable.core.enums import Color, Role
from premovable.core.mobility import Mobility
from premovable.core.piece import Piece
from premovable.core.premove import mobility_for, premove
from premovable.core.types import (
    ALL_KEYS,
    ALL_POS,
    Key,
    Pos,
    is_valid_key,
    key_to_pos,
    pos_to_key,
)

__all__ = [
    # Enums
    "Color",
    "Role",
    # Types / helpers
    "ALL_KEYS",
    "ALL_POS",
    "Key",
    "Pos",
    "is_valid_key",
    "key_to_pos",
    "pos_to_key",
    # Domain objects
    "Board",
    "Mobility",
    "Piece",
    "PieceMap",
    # Premove
    "mobility_for",
    "premove",
    "rook_files_of",
]
