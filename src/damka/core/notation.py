"""Text rendering of boards as grids of fixed-width cell tags.

Each row is one line of ``size`` four-character tags::

    [--][BP][--][BP]...
    [BP][--][BP][--]...

Meant for debugging and snapshot tests, not as a wire format.
"""

from __future__ import annotations

import logging

from damka.core.board import Board
from damka.core.piece import TAG_WIDTH, Piece

_LOGGER = logging.getLogger(__name__)


def board_to_text(board: Board) -> str:
    """Tag grid for *board*, rows separated by newlines."""
    return str(board)


def board_from_text(text: str) -> Board:
    """Parse a tag grid produced by :func:`board_to_text`.

    The board size is taken from the number of non-blank lines; every line
    must hold exactly that many tags.
    """
    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    if not lines:
        raise ValueError("Empty board text")

    size = len(lines)
    board = Board(size)
    for row, line in enumerate(lines):
        if len(line) != size * TAG_WIDTH:
            raise ValueError(
                f"Row {row} must hold {size} tags of width {TAG_WIDTH}: {line!r}"
            )
        for col in range(size):
            tag = line[col * TAG_WIDTH : (col + 1) * TAG_WIDTH]
            board[row, col] = Piece.from_tag(tag)

    _LOGGER.debug("Parsed %dx%d board from text", size, size)
    return board
