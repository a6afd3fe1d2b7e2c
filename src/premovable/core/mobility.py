"""Mobility catalog: one geometric predicate per piece role.

Every predicate answers "can this role go from ``(x1, y1)`` to ``(x2, y2)``
on an empty board". Occupancy is never consulted, so sliding pieces are not
blocked; the engine rejects what turns out to be illegal once the premove is
played.
"""

from __future__ import annotations

from collections.abc import Callable, Collection
from typing import TypeAlias

from premovable.core.enums import Color

Mobility: TypeAlias = Callable[[int, int, int, int], bool]


def _diff(a: int, b: int) -> int:
    return abs(a - b)


def either(*patterns: Mobility) -> Mobility:
    """Compose *patterns* into a predicate that holds if any of them does."""

    def mobility(x1: int, y1: int, x2: int, y2: int) -> bool:
        return any(p(x1, y1, x2, y2) for p in patterns)

    return mobility


# -- Color / board dependent constructors ----------------------------------


def pawn(color: Color) -> Mobility:
    """Forward one rank (straight or diagonal), or two straight from the
    first two ranks. The back rank is included for horde pawns."""

    def mobility(x1: int, y1: int, x2: int, y2: int) -> bool:
        if _diff(x1, x2) >= 2:
            return False
        if color == Color.WHITE:
            return y2 == y1 + 1 or (y1 <= 1 and y2 == y1 + 2 and x1 == x2)
        return y2 == y1 - 1 or (y1 >= 6 and y2 == y1 - 2 and x1 == x2)

    return mobility


def king(color: Color, rook_files: Collection[int], can_castle: bool) -> Mobility:
    """One step in any direction, plus castling targets on the back rank.

    With castling allowed the king may go to c/g-file from the e-file when
    the matching corner rook is home, or onto any of its own rooks' files.
    """
    back_rank = color.back_rank

    def mobility(x1: int, y1: int, x2: int, y2: int) -> bool:
        if _diff(x1, x2) < 2 and _diff(y1, y2) < 2:
            return True
        if not (can_castle and y1 == y2 == back_rank):
            return False
        if x1 == 4:
            if x2 == 2 and 0 in rook_files:
                return True
            if x2 == 6 and 7 in rook_files:
                return True
        return x2 in rook_files

    return mobility


# -- Static catalog ---------------------------------------------------------


def knight(x1: int, y1: int, x2: int, y2: int) -> bool:
    xd = _diff(x1, x2)
    yd = _diff(y1, y2)
    return (xd == 1 and yd == 2) or (xd == 2 and yd == 1)


def bishop(x1: int, y1: int, x2: int, y2: int) -> bool:
    return _diff(x1, x2) == _diff(y1, y2)


def rook(x1: int, y1: int, x2: int, y2: int) -> bool:
    return x1 == x2 or y1 == y2


def valet(x1: int, y1: int, x2: int, y2: int) -> bool:
    return _diff(x1, x2) < 2 and _diff(y1, y2) < 2


def elephant(x1: int, y1: int, x2: int, y2: int) -> bool:
    xd = _diff(x1, x2)
    return xd == _diff(y1, y2) and xd == 2


def fool(x1: int, y1: int, x2: int, y2: int) -> bool:
    xd = _diff(x1, x2)
    return xd == _diff(y1, y2) and xd == 1


def warden(x1: int, y1: int, x2: int, y2: int) -> bool:
    xd = _diff(x1, x2)
    yd = _diff(y1, y2)
    return (xd == 1 and yd == 0) or (xd == 0 and yd == 1)


def monk(x1: int, y1: int, x2: int, y2: int) -> bool:
    xd = _diff(x1, x2)
    yd = _diff(y1, y2)
    return (xd == 2 and yd == 0) or (xd == 0 and yd == 2)


def goshawk(x1: int, y1: int, x2: int, y2: int) -> bool:
    xd = _diff(x1, x2)
    yd = _diff(y1, y2)
    return (xd == 1 and yd == 3) or (xd == 3 and yd == 1)


def cannon(x1: int, y1: int, x2: int, y2: int) -> bool:
    xd = _diff(x1, x2)
    yd = _diff(y1, y2)
    return (xd == 3 and yd == 0) or (xd == 0 and yd == 3)


def junk(x1: int, y1: int, x2: int, y2: int) -> bool:
    # Whole rank, origin included; the orchestrator drops the origin.
    return y1 == y2


def zebra(x1: int, y1: int, x2: int, y2: int) -> bool:
    xd = _diff(x1, x2)
    yd = _diff(y1, y2)
    return (xd == 1 and yd == 2) or (xd == 2 and yd == 1) or (xd == 1 and yd == 0)


def unicorn(x1: int, y1: int, x2: int, y2: int) -> bool:
    """Any positive multiple of a knight vector: (1, 2), (2, 4), (3, 6)..."""
    xd = _diff(x1, x2)
    yd = _diff(y1, y2)
    denominator = min(xd, yd)
    if denominator == 0:
        return False
    xn = xd / denominator
    yn = yd / denominator
    return (xn == 1 and yn == 2) or (xn == 2 and yn == 1)


def standard(x1: int, y1: int, x2: int, y2: int) -> bool:
    """The standard never moves."""
    return False


queen = either(bishop, rook)
prince = either(valet, knight)
lady = either(bishop, warden)
dragon = either(knight, queen)
arma = either(rook, fool)
