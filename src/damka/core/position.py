"""Position — a square on the grid and its diagonal neighbourhood."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from damka.core.types import BOARD_SIZE, Coords, coords_of, index_of, is_valid_coords

# Fixed candidate order: up-left, up-right, down-left, down-right.
_DIAGONALS: tuple[Coords, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


@dataclass(frozen=True, order=True, slots=True)
class Position:
    """Immutable ``(row, col)`` coordinate. Equality and ordering are structural."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if self.row < 0 or self.col < 0:
            raise ValueError(f"Negative coordinates: ({self.row}, {self.col})")

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"

    def inner(self) -> Coords:
        return (self.row, self.col)

    # ── Linear indexing ──────────────────────────────────────────────────

    @classmethod
    def from_index(cls, index: int, size: int = BOARD_SIZE) -> Position:
        """Row-major index → position, e.g. 19 → (1, 9) on a 10x10 grid."""
        if index < 0:
            raise ValueError(f"Negative index: {index}")
        return cls(*coords_of(index, size))

    def to_index(self, size: int = BOARD_SIZE) -> int:
        return index_of(self.row, self.col, size)

    def is_on_board(self, size: int = BOARD_SIZE) -> bool:
        return is_valid_coords(self.row, self.col, size)

    # ── Geometry ─────────────────────────────────────────────────────────

    def possible_moves(
        self,
        exclude: PositionLike | None = None,
        size: int = BOARD_SIZE,
    ) -> list[Position]:
        """Diagonal neighbours that lie on the board.

        Candidates off the grid are dropped, never wrapped or clamped, and
        *exclude* (typically the square a chain just came from) is left
        out. A corner yields one square, an edge two, the interior four.
        """
        skip = as_position(exclude) if exclude is not None else None
        moves: list[Position] = []
        for d_row, d_col in _DIAGONALS:
            row, col = self.row + d_row, self.col + d_col
            if not is_valid_coords(row, col, size):
                continue
            candidate = Position(row, col)
            if candidate != skip:
                moves.append(candidate)
        return moves

    def jump_target(self, over: PositionLike, size: int = BOARD_SIZE) -> Position | None:
        """Landing square when jumping from here across the neighbour *over*.

        Returns ``None`` if the landing square falls off the board.
        """
        over = as_position(over)
        d_row, d_col = over.row - self.row, over.col - self.col
        if (d_row, d_col) not in _DIAGONALS:
            raise ValueError(f"{over} is not diagonally adjacent to {self}")
        row, col = over.row + d_row, over.col + d_col
        if not is_valid_coords(row, col, size):
            return None
        return Position(row, col)


PositionLike: TypeAlias = Position | Coords


def as_position(value: PositionLike) -> Position:
    """Accept either a :class:`Position` or a plain ``(row, col)`` pair."""
    if isinstance(value, Position):
        return value
    row, col = value
    return Position(row, col)
