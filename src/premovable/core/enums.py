"""Core enumerations for the premove domain."""

from __future__ import annotations

from enum import Enum


class Color(str, Enum):
    """Side color."""

    WHITE = "white"
    BLACK = "black"

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def back_rank(self) -> int:
        """Rank index (0–7) the side's pieces start on."""
        return 0 if self is Color.WHITE else 7

    def __str__(self) -> str:
        return self.value


class Role(str, Enum):
    """Movement archetypes: the six standard pieces plus fairy roles.

    Members compare equal to their lowercase names, so ``"knight"`` can be
    used wherever a role is read.
    """

    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"

    VALET = "valet"
    ELEPHANT = "elephant"
    FOOL = "fool"
    WARDEN = "warden"
    PRINCE = "prince"
    LADY = "lady"
    DRAGON = "dragon"
    ARMA = "arma"
    MONK = "monk"
    GOSHAWK = "goshawk"
    CANNON = "cannon"
    JUNK = "junk"
    ZEBRA = "zebra"
    UNICORN = "unicorn"
    STANDARD = "standard"  # never moves

    def __str__(self) -> str:
        return self.value
