"""Tests for board text rendering and parsing."""

import pytest

from damka.core.board import Board
from damka.core.notation import board_from_text, board_to_text
from damka.core.piece import Piece


class TestBoardText:
    def test_to_text_matches_str(self, board: Board) -> None:
        assert board_to_text(board) == str(board)

    def test_parse_starting_layout(self, board: Board) -> None:
        assert board_from_text(board_to_text(board)) == board

    def test_parse_small_board(self) -> None:
        text = """
            [--][WQ][--]
            [BP][--][--]
            [--][--][WP]
        """
        b = board_from_text(text)
        assert b.size == 3
        assert b[0, 1] is Piece.WHITE_QUEEN
        assert b[1, 0] is Piece.BLACK_PAWN
        assert b[2, 2] is Piece.WHITE_PAWN
        assert b.count(Piece.EMPTY) == 6

    def test_empty_text(self) -> None:
        with pytest.raises(ValueError, match="Empty board text"):
            board_from_text("   \n  ")

    def test_ragged_row(self) -> None:
        with pytest.raises(ValueError, match="Row 1 must hold 2 tags"):
            board_from_text("[--][--]\n[--]")

    def test_unknown_tag(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece tag"):
            board_from_text("[--][XX]\n[--][--]")
