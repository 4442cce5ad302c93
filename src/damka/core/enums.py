"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. ``NONE`` classifies an empty square."""

    NONE = 0
    WHITE = 1
    BLACK = 2

    @property
    def opposite(self) -> Color:
        if self is Color.NONE:
            return Color.NONE
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    def __str__(self) -> str:
        return self.name.lower()


class Variant(IntEnum):
    """Rank of a piece. ``NONE`` classifies an empty square."""

    NONE = 0
    PAWN = 1
    QUEEN = 2

    def __str__(self) -> str:
        return self.name.lower()
