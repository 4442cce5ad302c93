"""Grid constants and linear-index helpers.

Board layout (row-major, 10x10 by default)::

    (0, 0)=0,  (0, 1)=1,  ..., (0, 9)=9
    (1, 0)=10, (1, 1)=11, ..., (1, 9)=19
    ...
    (9, 0)=90, (9, 1)=91, ..., (9, 9)=99

Black starts on the low rows, white on the high rows.
"""

from __future__ import annotations

from typing import TypeAlias

Coords: TypeAlias = tuple[int, int]

BOARD_SIZE = 10
PAWN_ROWS = 4  # rows of pawns each side starts with


def coords_of(index: int, size: int = BOARD_SIZE) -> Coords:
    """Row and column of a linear index, e.g. 15 → (1, 5)."""
    return divmod(index, size)


def index_of(row: int, col: int, size: int = BOARD_SIZE) -> int:
    """Linear index of ``(row, col)``, e.g. (1, 5) → 15."""
    return row * size + col


def is_valid_index(index: int, size: int = BOARD_SIZE) -> bool:
    return 0 <= index < size * size


def is_valid_coords(row: int, col: int, size: int = BOARD_SIZE) -> bool:
    return 0 <= row < size and 0 <= col < size


def is_dark_square(row: int, col: int) -> bool:
    """Playable squares are the ones where ``row + col`` is odd."""
    return (row + col) % 2 == 1
