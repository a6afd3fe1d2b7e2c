"""User-configurable premove settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PremoveSettings:
    """All user-configurable premove settings."""

    enabled: bool = True
    show_dests: bool = True  # highlight destinations of the selected piece
    castle: bool = True  # offer castling targets for the king
