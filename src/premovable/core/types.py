"""Square key / coordinate helpers.

Keys are two-character names (``"e4"``); positions are zero-based
``(file, rank)`` pairs, so ``"a1" ↔ (0, 0)`` and ``"h8" ↔ (7, 7)``.
"""

from __future__ import annotations

from typing import TypeAlias

Key: TypeAlias = str  # "a1"–"h8"
Pos: TypeAlias = tuple[int, int]  # (file, rank), each 0–7

FILES = "abcdefgh"
RANKS = "12345678"


def is_valid_key(key: str) -> bool:
    """Check whether *key* names one of the 64 squares."""
    return len(key) == 2 and key[0] in FILES and key[1] in RANKS


def key_to_pos(key: Key) -> Pos:
    """Decode a square key, e.g. ``'e4'`` → ``(4, 3)``."""
    if not is_valid_key(key):
        raise ValueError(f"Invalid square key: {key!r}")
    return (ord(key[0]) - ord("a"), int(key[1]) - 1)


def pos_to_key(pos: Pos) -> Key:
    """Encode a coordinate pair, e.g. ``(4, 3)`` → ``'e4'``."""
    file, rank = pos
    if not (0 <= file < 8 and 0 <= rank < 8):
        raise ValueError(f"Invalid square position: {pos!r}")
    return FILES[file] + RANKS[rank]


# ── Square universe ─────────────────────────────────────────────────────────

ALL_KEYS: tuple[Key, ...] = tuple(f + r for f in FILES for r in RANKS)
ALL_POS: tuple[Pos, ...] = tuple(key_to_pos(k) for k in ALL_KEYS)
