"""PremoveController — queues one premove per client until its turn comes.

The controller never decides legality: it only accepts premoves whose
destination matches the piece's movement pattern, and hands the queued move
to a caller-supplied validator when the turn arrives.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from premovable.core.board import PieceMap
from premovable.core.enums import Color
from premovable.core.premove import premove
from premovable.core.types import Key
from premovable.game.settings import PremoveSettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SetCallback = Callable[[Key, Key], None]  # orig, dest
UnsetCallback = Callable[[], None]
Validator = Callable[[Key, Key], bool]  # orig, dest -> played?


@dataclass
class PremoveEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_set: list[SetCallback] = field(default_factory=list)
    on_unset: list[UnsetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class PremoveController:
    """Holds the premove state of one player.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_settings", "_movable_color", "_current", "_dests", "events")

    def __init__(
        self,
        movable_color: Color,
        settings: PremoveSettings | None = None,
    ) -> None:
        self._settings = settings if settings is not None else PremoveSettings()
        self._movable_color = movable_color
        self._current: tuple[Key, Key] | None = None
        self._dests: list[Key] = []
        self.events = PremoveEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def settings(self) -> PremoveSettings:
        return self._settings

    @property
    def movable_color(self) -> Color:
        return self._movable_color

    @property
    def current(self) -> tuple[Key, Key] | None:
        """The queued ``(orig, dest)`` premove, if any."""
        return self._current

    @property
    def dests(self) -> list[Key]:
        """Destinations highlighted for the last selected piece."""
        return list(self._dests)

    # ── Queries ──────────────────────────────────────────────────────────

    def is_premovable(self, pieces: PieceMap, orig: Key, turn_color: Color) -> bool:
        """Whether the piece on *orig* may be premoved right now."""
        piece = pieces.get(orig)
        return (
            piece is not None
            and self._settings.enabled
            and piece.color == self._movable_color
            and turn_color != piece.color
        )

    def can_premove(
        self, pieces: PieceMap, orig: Key, dest: Key, turn_color: Color
    ) -> bool:
        return (
            orig != dest
            and self.is_premovable(pieces, orig, turn_color)
            and dest in premove(pieces, orig, self._settings.castle)
        )

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, pieces: PieceMap, orig: Key, turn_color: Color) -> list[Key]:
        """Select *orig* and return the destinations to highlight."""
        if not self.is_premovable(pieces, orig, turn_color):
            self._dests = []
            return []
        dests = premove(pieces, orig, self._settings.castle)
        self._dests = dests if self._settings.show_dests else []
        return list(self._dests)

    # ── Premove lifecycle ────────────────────────────────────────────────

    def set_premove(
        self, pieces: PieceMap, orig: Key, dest: Key, turn_color: Color
    ) -> bool:
        """Queue ``orig → dest``. Returns True if it was accepted."""
        if not self.can_premove(pieces, orig, dest, turn_color):
            _LOGGER.debug("Rejected premove %s%s", orig, dest)
            return False
        self._current = (orig, dest)
        self._dests = []
        _LOGGER.debug("Set premove %s%s", orig, dest)
        for cb in self.events.on_set:
            cb(orig, dest)
        return True

    def unset_premove(self) -> None:
        if self._current is None:
            return
        self._current = None
        _LOGGER.debug("Unset premove")
        for cb in self.events.on_unset:
            cb()

    def play_premove(self, validate: Validator) -> bool:
        """Try the queued premove once the turn has arrived.

        *validate* applies full game rules and returns True if the move was
        played. The premove is cleared either way.
        """
        if self._current is None:
            return False
        orig, dest = self._current
        success = validate(orig, dest)
        _LOGGER.debug(
            "Played premove %s%s: %s", orig, dest, "ok" if success else "illegal"
        )
        self.unset_premove()
        return success

    def cancel(self) -> None:
        """Drop the queued premove and any highlighted destinations."""
        self.unset_premove()
        self._dests = []
