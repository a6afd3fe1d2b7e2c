"""Premove destinations: which squares a piece could be queued to."""

from __future__ import annotations

from premovable.core import mobility as m
from premovable.core.board import PieceMap, rook_files_of
from premovable.core.enums import Color, Role
from premovable.core.piece import Piece
from premovable.core.types import ALL_POS, Key, key_to_pos, pos_to_key

# Roles whose pattern depends only on geometry. Pawn and king are built per
# call in :func:`mobility_for`.
MOBILITY: dict[Role, m.Mobility] = {
    Role.KNIGHT: m.knight,
    Role.BISHOP: m.bishop,
    Role.ROOK: m.rook,
    Role.QUEEN: m.queen,
    Role.VALET: m.valet,
    Role.ELEPHANT: m.elephant,
    Role.FOOL: m.fool,
    Role.WARDEN: m.warden,
    Role.PRINCE: m.prince,
    Role.LADY: m.lady,
    Role.DRAGON: m.dragon,
    Role.ARMA: m.arma,
    Role.MONK: m.monk,
    Role.GOSHAWK: m.goshawk,
    Role.UNICORN: m.unicorn,
    Role.CANNON: m.cannon,
    Role.JUNK: m.junk,
    Role.ZEBRA: m.zebra,
    Role.STANDARD: m.standard,
}


def _role_of(piece: Piece) -> Role:
    try:
        return Role(piece.role)
    except ValueError:
        return Role.STANDARD


def mobility_for(piece: Piece, pieces: PieceMap, can_castle: bool) -> m.Mobility:
    """Pick the movement predicate for *piece*.

    Unknown roles get the immobile ``standard`` pattern.
    """
    role = _role_of(piece)
    if role == Role.PAWN:
        return m.pawn(Color(piece.color))
    if role == Role.KING:
        color = Color(piece.color)
        return m.king(color, rook_files_of(pieces, color), can_castle)
    return MOBILITY[role]


def premove(pieces: PieceMap, key: Key, can_castle: bool) -> list[Key]:
    """Squares the piece on *key* could be premoved to.

    Returns an empty list when *key* is empty. The board is only read.
    """
    piece = pieces.get(key)
    if piece is None:
        return []
    x1, y1 = key_to_pos(key)
    mobility = mobility_for(piece, pieces, can_castle)
    return [
        pos_to_key(pos)
        for pos in ALL_POS
        if (pos[0] != x1 or pos[1] != y1) and mobility(x1, y1, pos[0], pos[1])
    ]
