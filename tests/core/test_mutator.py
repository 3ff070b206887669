"""Tests for make_move: capture, relocation and the legal-move precondition."""

import logging

import pytest

from gridchess.core.board import Board
from gridchess.core.enums import PieceType
from gridchess.core.mutator import IllegalMoveError, make_move
from gridchess.core.notation import board_from_placement, board_to_placement
from gridchess.core.piece import Piece


class TestCapture:
    def test_capture_removes_exactly_one_piece(self, corner_board) -> None:
        board, bishop = corner_board(PieceType.BISHOP)
        bishop.init_legal_moves(board)
        before = len(board)
        captured = make_move(bishop, board, (7, 7))
        assert len(board) == before - 1
        assert bishop.position == (7, 7)
        assert board.piece_at((7, 7)) is bishop
        assert board.is_empty((3, 3))
        assert captured is not None
        assert captured.owner == 1 and captured.kind == PieceType.ROOK
        assert captured not in board

    def test_captured_piece_cache_cleared(self) -> None:
        board = board_from_placement("8/8/8/8/8/8/1r6/R7")
        board.refresh_legal_moves()
        rook = board.piece_at((0, 0))
        bystander = board.piece_at((1, 1))
        assert rook is not None and bystander is not None
        assert bystander.legal_moves
        # Not reachable by a rook: (1, 1) is diagonal from (0, 0).
        with pytest.raises(IllegalMoveError):
            rook.make_move(board, (1, 1))
        pawn = board.add(Piece(1, PieceType.PAWN, (0, 4)))
        board.refresh_legal_moves()
        assert pawn.legal_moves
        captured = rook.make_move(board, (0, 4))
        assert captured is pawn
        assert captured.legal_moves == []
        assert bystander.legal_moves  # untouched: only the resident is captured

    def test_queen_captures_along_diagonal(self) -> None:
        board = board_from_placement("7k/8/8/8/8/8/8/Q7")
        queen = board.piece_at((0, 0))
        assert queen is not None
        queen.init_legal_moves(board)
        assert (7, 7) in queen.legal_moves
        queen.make_move(board, (7, 7))
        assert board_to_placement(board) == "7Q/8/8/8/8/8/8/8"


class TestQuietMove:
    def test_quiet_move_keeps_count(self) -> None:
        board = Board()
        knight = board.add(Piece(0, PieceType.KNIGHT, (0, 0)))
        board.add(Piece(1, PieceType.KING, (7, 7)))
        knight.init_legal_moves(board)
        assert make_move(knight, board, (1, 2)) is None
        assert len(board) == 2
        assert knight.position == (1, 2)
        assert board.piece_at((1, 2)) is knight

    def test_cache_not_recomputed_after_move(self) -> None:
        board = Board()
        king = board.add(Piece(0, PieceType.KING, (0, 0)))
        moves = king.init_legal_moves(board)
        king.make_move(board, (1, 1))
        assert king.legal_moves == moves
        assert len(king.init_legal_moves(board)) == 8

    def test_other_caches_go_stale_until_refresh(self) -> None:
        board = Board()
        rook = board.add(Piece(0, PieceType.ROOK, (0, 0)))
        king = board.add(Piece(1, PieceType.KING, (7, 7)))
        board.refresh_legal_moves()
        assert (0, 7) in rook.legal_moves
        king.make_move(board, (6, 7))
        assert (0, 7) in rook.legal_moves
        board.add(Piece(1, PieceType.PAWN, (0, 3)))
        board.refresh_legal_moves()
        assert (0, 7) not in rook.legal_moves
        assert rook.legal_moves[:3] == [(0, 1), (0, 2), (0, 3)]


class TestPrecondition:
    def test_destination_not_in_fresh_moves_rejected(self) -> None:
        board = Board()
        knight = board.add(Piece(0, PieceType.KNIGHT, (0, 0)))
        knight.init_legal_moves(board)
        with pytest.raises(IllegalMoveError, match="Illegal move"):
            make_move(knight, board, (1, 1))
        assert knight.position == (0, 0)
        assert board.piece_at((0, 0)) is knight

    def test_uninitialised_cache_rejects_everything(self) -> None:
        board = Board()
        king = board.add(Piece(0, PieceType.KING, (3, 3)))
        with pytest.raises(IllegalMoveError):
            make_move(king, board, (3, 4))

    def test_rejection_leaves_board_untouched(self, corner_board) -> None:
        board, rook = corner_board(PieceType.ROOK)
        rook.init_legal_moves(board)
        before = board_to_placement(board)
        with pytest.raises(IllegalMoveError) as excinfo:
            make_move(rook, board, (0, 0))
        assert excinfo.value.destination == (0, 0)
        assert excinfo.value.piece is rook
        assert board_to_placement(board) == before
        assert len(board) == 5

    def test_stale_cache_listing_own_square_rejected(self) -> None:
        board = Board()
        king = board.add(Piece(0, PieceType.KING, (0, 0)))
        king.init_legal_moves(board)
        king.make_move(board, (1, 1))
        assert (1, 1) in king.legal_moves
        with pytest.raises(IllegalMoveError):
            king.make_move(board, (1, 1))
        assert len(board) == 1
        assert king in board
        assert king.position == (1, 1)
        assert board.piece_at((1, 1)) is king

    def test_stale_cache_rejection_leaves_others_untouched(self) -> None:
        board = board_from_placement("8/8/8/8/8/8/8/R6k")
        rook = board.piece_at((0, 0))
        assert rook is not None
        rook.init_legal_moves(board)
        rook.make_move(board, (0, 4))
        before = board_to_placement(board)
        with pytest.raises(IllegalMoveError):
            rook.make_move(board, (0, 4))
        assert board_to_placement(board) == before
        assert rook.position == (0, 4)

    def test_illegal_move_is_value_error(self) -> None:
        board = Board()
        pawn = board.add(Piece(0, PieceType.PAWN, (0, 0)))
        with pytest.raises(ValueError):
            pawn.make_move(board, (0, 1))

    def test_piece_not_on_board_rejected(self) -> None:
        board = Board()
        stray = Piece(0, PieceType.KING, (3, 3))
        stray.init_legal_moves(board)
        with pytest.raises(ValueError, match="not on this board"):
            make_move(stray, board, (3, 4))
        assert len(board) == 0
        assert stray.position == (3, 3)


class TestLogging:
    def test_capture_logged_at_debug(self, corner_board, caplog) -> None:
        board, king = corner_board(PieceType.KING)
        board.add(Piece(1, PieceType.PAWN, (4, 4)))
        king.init_legal_moves(board)
        with caplog.at_level(logging.DEBUG, logger="gridchess.core.mutator"):
            king.make_move(board, (4, 4))
        assert "captures" in caplog.text

    def test_rejection_logged_as_warning(self, caplog) -> None:
        board = Board()
        king = board.add(Piece(0, PieceType.KING, (3, 3)))
        with caplog.at_level(logging.WARNING, logger="gridchess.core.mutator"):
            with pytest.raises(IllegalMoveError):
                king.make_move(board, (5, 5))
        assert "Rejected move" in caplog.text
