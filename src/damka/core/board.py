"""Board - piece placement on a square draughts grid."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, TypeAlias

from damka.core.enums import Color
from damka.core.piece import Cell, Piece
from damka.core.position import Position
from damka.core.types import (
    BOARD_SIZE,
    PAWN_ROWS,
    Coords,
    coords_of,
    index_of,
    is_dark_square,
    is_valid_coords,
    is_valid_index,
)

if TYPE_CHECKING:
    from damka.core.chain import MoveChain

_LOGGER = logging.getLogger(__name__)

BoardKey: TypeAlias = int | Coords | Position
CellGenerator: TypeAlias = Callable[[int, int], Piece]


def filter_by(cells: Iterable[Cell], predicate: Callable[[Cell], bool]) -> list[Cell]:
    """Cells for which *predicate* holds, in iteration order.

    Any :class:`~damka.core.piece.Classified` predicate works unbound,
    e.g. ``filter_by(board.cells(), Cell.is_white)``.
    """
    return [cell for cell in cells if predicate(cell)]


class Board:
    """Mutable ``size x size`` grid of pieces stored in row-major order.

    Cells are addressable by linear index, by ``(row, col)`` and by
    :class:`Position`; all three views share the same storage.
    """

    __slots__ = ("_size", "_squares")

    def __init__(self, size: int = BOARD_SIZE) -> None:
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self._size = size
        self._squares: list[Piece] = [Piece.EMPTY] * (size * size)

    @property
    def size(self) -> int:
        return self._size

    # -- Element access -----------------------------------------------------

    def _index(self, key: BoardKey) -> int:
        """Resolve any supported key to a linear index, bounds-checked."""
        if isinstance(key, Position):
            row, col = key.row, key.col
        elif isinstance(key, int):
            if not is_valid_index(key, self._size):
                raise IndexError(
                    f"Board index {key} out of range [0, {self._size * self._size})"
                )
            return key
        elif isinstance(key, tuple) and len(key) == 2:
            row, col = key
        else:
            raise TypeError(f"Unsupported board key: {key!r}")

        if not is_valid_coords(row, col, self._size):
            raise IndexError(
                f"Board coordinates ({row}, {col}) out of range for size {self._size}"
            )
        return index_of(row, col, self._size)

    def __getitem__(self, key: BoardKey) -> Piece:
        return self._squares[self._index(key)]

    def __setitem__(self, key: BoardKey, piece: Piece) -> None:
        self._squares[self._index(key)] = piece

    def is_empty(self, key: BoardKey) -> bool:
        return self[key] is Piece.EMPTY

    def index_of(self, key: BoardKey) -> int:
        return self._index(key)

    def position_from_index(self, index: int) -> Position:
        return Position(*coords_of(self._index(index), self._size))

    # -- Query helpers ------------------------------------------------------

    def cells(self) -> Iterator[Cell]:
        """All squares as :class:`Cell` values, row by row."""
        for index, piece in enumerate(self._squares):
            yield Cell(Position(*coords_of(index, self._size)), piece)

    def filter_cells(self, predicate: Callable[[Cell], bool]) -> list[Cell]:
        return filter_by(self.cells(), predicate)

    def pieces(self, color: Color) -> list[Cell]:
        """Cells occupied by *color*."""
        return self.filter_cells(lambda cell: cell.color() is color)

    def count(self, piece: Piece) -> int:
        return self._squares.count(piece)

    # -- Mutation / copying -------------------------------------------------

    def promote(self, key: BoardKey) -> Piece:
        """Promote the occupant of *key* in place and return it."""
        index = self._index(key)
        self._squares[index] = self._squares[index].promote()
        return self._squares[index]

    def promotion_row(self, color: Color) -> int | None:
        """Far rank for *color*: white moves towards row 0, black towards the last row."""
        if color is Color.WHITE:
            return 0
        if color is Color.BLACK:
            return self._size - 1
        return None

    def apply_chain(self, chain: MoveChain) -> Piece:
        """Play a finished chain: remove captures, move the piece, promote it.

        Returns the piece as it stands on ``chain.end``.
        """
        start, end = chain.start, chain.end
        piece = self[start]
        if piece is Piece.EMPTY:
            raise ValueError(f"No piece on {start}")
        if end != start and not self.is_empty(end):
            raise ValueError(f"Target square {end} is occupied by {self[end].name}")
        capture_indexes = [self._index(pos) for pos in chain.captures]

        for index in capture_indexes:
            _LOGGER.debug(
                "Removing %s at %s",
                self._squares[index].name,
                coords_of(index, self._size),
            )
            self._squares[index] = Piece.EMPTY

        self[start] = Piece.EMPTY
        if end.row == self.promotion_row(piece.color()):
            promoted = piece.promote()
            if promoted is not piece:
                _LOGGER.debug("Promoting %s to %s at %s", piece.name, promoted.name, end)
            piece = promoted
        self[end] = piece
        _LOGGER.debug(
            "Applied chain %s -> %s (%d steps, %d captures)",
            start,
            end,
            chain.step_count,
            chain.capture_count,
        )
        return piece

    def copy(self) -> Board:
        b = Board(self._size)
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [Piece.EMPTY] * (self._size * self._size)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_fn(cls, generator: CellGenerator, size: int = BOARD_SIZE) -> Board:
        """Build a board by calling ``generator(row, col)`` once per cell."""
        b = cls(size)
        for row in range(size):
            for col in range(size):
                b._squares[index_of(row, col, size)] = generator(row, col)
        return b

    @classmethod
    def initial(cls, size: int = BOARD_SIZE) -> Board:
        """Standard starting position: four rows of pawns per side on dark squares."""
        if size < 2 * PAWN_ROWS:
            raise ValueError(f"Board size {size} too small for the starting layout")

        def starting_piece(row: int, col: int) -> Piece:
            if not is_dark_square(row, col):
                return Piece.EMPTY
            if row < PAWN_ROWS:
                return Piece.BLACK_PAWN
            if row >= size - PAWN_ROWS:
                return Piece.WHITE_PAWN
            return Piece.EMPTY

        return cls.from_fn(starting_piece, size)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._squares == other._squares

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> Board:
        return self.copy()

    def _rows(self) -> Iterator[list[Piece]]:
        for start in range(0, self._size * self._size, self._size):
            yield self._squares[start : start + self._size]

    def __str__(self) -> str:
        return "\n".join("".join(p.tag for p in row) for row in self._rows())

    def __repr__(self) -> str:
        width = len(str(self._size - 1))
        rows = [
            f"{r:>{width}} " + "".join(p.tag for p in row)
            for r, row in enumerate(self._rows())
        ]
        rows.append(" " * (width + 1) + "".join(f"{c:^4}" for c in range(self._size)))
        return "\n".join(rows)
