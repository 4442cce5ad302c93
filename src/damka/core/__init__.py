"""Core domain layer — pure draughts logic with zero external dependencies.

Quick start::

    from damka.core import Board, MoveChain, Position

    board = Board.initial()
    chain = MoveChain(Position(6, 1))
    chain.step(Position(5, 0))
    board.apply_chain(chain)
"""

from damka.core.board import Board, filter_by
from damka.core.chain import MoveChain
from damka.core.enums import Color, Variant
from damka.core.notation import board_from_text, board_to_text
from damka.core.piece import Cell, Classified, Piece
from damka.core.position import Position, as_position
from damka.core.types import (
    BOARD_SIZE,
    PAWN_ROWS,
    coords_of,
    index_of,
    is_dark_square,
)

__all__ = [
    # Enums
    "Color",
    "Variant",
    # Types / helpers
    "BOARD_SIZE",
    "PAWN_ROWS",
    "as_position",
    "coords_of",
    "index_of",
    "is_dark_square",
    # Domain objects
    "Board",
    "Cell",
    "Classified",
    "MoveChain",
    "Piece",
    "Position",
    "filter_by",
    # Notation
    "board_from_text",
    "board_to_text",
]
