"""Game layer — premove session state on top of the pure core."""

from premovable.game.controller import PremoveController, PremoveEvents
from premovable.game.settings import PremoveSettings

__all__ = [
    "PremoveController",
    "PremoveEvents",
    "PremoveSettings",
]
