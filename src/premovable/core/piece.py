"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from premovable.core.enums import Color, Role

# Role ↔ display character (lowercase; white pieces are shown uppercase)
_ROLE_CHARS: dict[Role, str] = {
    Role.PAWN: "p",
    Role.KNIGHT: "n",
    Role.BISHOP: "b",
    Role.ROOK: "r",
    Role.QUEEN: "q",
    Role.KING: "k",
    Role.VALET: "v",
    Role.ELEPHANT: "e",
    Role.FOOL: "f",
    Role.WARDEN: "w",
    Role.PRINCE: "i",
    Role.LADY: "l",
    Role.DRAGON: "d",
    Role.ARMA: "a",
    Role.MONK: "m",
    Role.GOSHAWK: "g",
    Role.CANNON: "c",
    Role.JUNK: "j",
    Role.ZEBRA: "z",
    Role.UNICORN: "u",
    Role.STANDARD: "s",
}

_CHAR_ROLES: dict[str, Role] = {v: k for k, v in _ROLE_CHARS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a piece on the board."""

    color: Color
    role: Role

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Display character (uppercase = white, lowercase = black)."""
        char = _ROLE_CHARS.get(self.role, "?")
        return char.upper() if self.color == Color.WHITE else char

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from display character, e.g. 'N' → white knight."""
        try:
            role = _CHAR_ROLES[char.lower()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(Color.WHITE if char.isupper() else Color.BLACK, role)
