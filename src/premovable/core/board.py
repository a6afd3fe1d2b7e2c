"""Board - piece placement keyed by square name."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Protocol

from premovable.core.enums import Color, Role
from premovable.core.piece import Piece
from premovable.core.types import FILES, RANKS, Key, is_valid_key, key_to_pos


class PieceMap(Protocol):
    """Read-only view of a board: anything with ``get`` and ``items``.

    Both :class:`Board` and a plain ``dict[str, Piece]`` qualify.
    """

    def get(self, key: Key) -> Piece | None: ...

    def items(self) -> Iterable[tuple[Key, Piece]]: ...


class Board:
    """Mutable 64-square board mapping square keys to pieces."""

    __slots__ = ("_pieces",)

    def __init__(self, pieces: Mapping[Key, Piece] | None = None) -> None:
        self._pieces: dict[Key, Piece] = {}
        if pieces:
            for key, piece in pieces.items():
                self[key] = piece

    # -- Element access -----------------------------------------------------

    def __getitem__(self, key: Key) -> Piece | None:
        return self._pieces.get(key)

    def __setitem__(self, key: Key, piece: Piece | None) -> None:
        if not is_valid_key(key):
            raise ValueError(f"Invalid square key: {key!r}")
        if piece is None:
            self._pieces.pop(key, None)
        else:
            self._pieces[key] = piece

    def get(self, key: Key) -> Piece | None:
        return self._pieces.get(key)

    def items(self) -> Iterable[tuple[Key, Piece]]:
        return self._pieces.items()

    def is_empty(self, key: Key) -> bool:
        return key not in self._pieces

    def __contains__(self, key: object) -> bool:
        return key in self._pieces

    def __iter__(self) -> Iterator[Key]:
        return iter(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, role: Role) -> list[Key]:
        """Squares occupied by *color*'s *role*."""
        return [
            key
            for key, piece in self._pieces.items()
            if piece.color == color and piece.role == role
        ]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._pieces = self._pieces.copy()
        return b

    def clear(self) -> None:
        self._pieces = {}

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in FILES:
            b[f + "2"] = Piece(Color.WHITE, Role.PAWN)
            b[f + "7"] = Piece(Color.BLACK, Role.PAWN)

        back_rank = [
            Role.ROOK,
            Role.KNIGHT,
            Role.BISHOP,
            Role.QUEEN,
            Role.KING,
            Role.BISHOP,
            Role.KNIGHT,
            Role.ROOK,
        ]
        for f, role in zip(FILES, back_rank):
            b[f + "1"] = Piece(Color.WHITE, role)
            b[f + "8"] = Piece(Color.BLACK, role)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in reversed(RANKS):
            row = []
            for file in FILES:
                p = self[file + rank]
                row.append(str(p) if p else ".")
            rows.append(f"{rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def rook_files_of(pieces: PieceMap, color: Color) -> list[int]:
    """Files of *color*'s rooks standing on that color's back rank."""
    back_rank = RANKS[Color(color).back_rank]
    return [
        key_to_pos(key)[0]
        for key, piece in pieces.items()
        if key[1] == back_rank and piece.color == color and piece.role == Role.ROOK
    ]
