"""Piece value object and the shared classification predicates."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

from damka.core.enums import Color, Variant
from damka.core.position import Position


class Classified:
    """Predicate set for anything that holds a piece.

    Subclasses expose the held piece through :attr:`occupant`; every
    predicate below is derived from it, so a bare :class:`Piece` and a
    board :class:`Cell` answer the same questions the same way.
    """

    __slots__ = ()

    @property
    def occupant(self) -> Piece:
        raise NotImplementedError

    def color(self) -> Color:
        return _COLORS[self.occupant]

    def variant(self) -> Variant:
        return _VARIANTS[self.occupant]

    def is_empty(self) -> bool:
        return self.occupant is Piece.EMPTY

    def is_white(self) -> bool:
        return self.color() is Color.WHITE

    def is_black(self) -> bool:
        return self.color() is Color.BLACK

    def is_pawn(self) -> bool:
        return self.variant() is Variant.PAWN

    def is_queen(self) -> bool:
        return self.variant() is Variant.QUEEN

    def is_enemy(self, other: Classified) -> bool:
        """``True`` if both hold a piece and their colors differ."""
        mine, theirs = self.color(), other.color()
        return Color.NONE not in (mine, theirs) and mine is not theirs


class Piece(Classified, IntEnum):
    """Content of a single board square."""

    EMPTY = 0
    WHITE_PAWN = 1
    BLACK_PAWN = 2
    WHITE_QUEEN = 11
    BLACK_QUEEN = 12

    @property
    def occupant(self) -> Piece:
        return self

    def promote(self) -> Piece:
        """Pawn → queen of the same color; queens and ``EMPTY`` are returned as is.

        >>> Piece.BLACK_PAWN.promote()
        <Piece.BLACK_QUEEN: 12>
        """
        if not self.is_pawn():
            return self
        return Piece.of(self.color(), Variant.QUEEN)

    # ── Serialisation ────────────────────────────────────────────────────

    @property
    def tag(self) -> str:
        """Fixed-width cell tag, e.g. ``[WP]``."""
        return _TAGS[self]

    def __str__(self) -> str:
        return self.tag

    @classmethod
    def from_tag(cls, tag: str) -> Piece:
        """Create piece from its cell tag, e.g. ``[BQ]`` → black queen."""
        try:
            return _TAG_MAP[tag]
        except KeyError:
            raise ValueError(f"Invalid piece tag: {tag!r}") from None

    @classmethod
    def of(cls, color: Color, variant: Variant) -> Piece:
        """Piece with the given classification; ``(NONE, NONE)`` is ``EMPTY``."""
        try:
            return _BY_CLASS[(color, variant)]
        except KeyError:
            raise ValueError(f"No piece is {color!s} and {variant!s}") from None


_COLORS: dict[Piece, Color] = {
    Piece.EMPTY: Color.NONE,
    Piece.WHITE_PAWN: Color.WHITE,
    Piece.WHITE_QUEEN: Color.WHITE,
    Piece.BLACK_PAWN: Color.BLACK,
    Piece.BLACK_QUEEN: Color.BLACK,
}

_VARIANTS: dict[Piece, Variant] = {
    Piece.EMPTY: Variant.NONE,
    Piece.WHITE_PAWN: Variant.PAWN,
    Piece.BLACK_PAWN: Variant.PAWN,
    Piece.WHITE_QUEEN: Variant.QUEEN,
    Piece.BLACK_QUEEN: Variant.QUEEN,
}

_BY_CLASS: dict[tuple[Color, Variant], Piece] = {
    (_COLORS[p], _VARIANTS[p]): p for p in Piece
}

_TAGS: dict[Piece, str] = {
    Piece.EMPTY: "[--]",
    Piece.WHITE_PAWN: "[WP]",
    Piece.BLACK_PAWN: "[BP]",
    Piece.WHITE_QUEEN: "[WQ]",
    Piece.BLACK_QUEEN: "[BQ]",
}

_TAG_MAP: dict[str, Piece] = {v: k for k, v in _TAGS.items()}

TAG_WIDTH = 4


@dataclass(frozen=True, slots=True)
class Cell(Classified):
    """A board location together with its occupant.

    Unpacks as ``position, piece`` so callers that only need the piece can
    drop the location.
    """

    position: Position
    piece: Piece

    @property
    def occupant(self) -> Piece:
        return self.piece

    def __iter__(self) -> Iterator[Position | Piece]:
        yield self.position
        yield self.piece
