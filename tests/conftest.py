"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from gridchess.core.board import Board
from gridchess.core.enums import PieceType
from gridchess.core.notation import board_from_placement
from gridchess.core.piece import Piece

# Opposing rooks (owner 1) in the four corners of an 8x8 board.
CORNERS_PLACEMENT = "r6r/8/8/8/8/8/8/r6r"


@pytest.fixture
def corner_board() -> Callable[[PieceType], tuple[Board, Piece]]:
    """Build the four-corner board with an owner-0 piece of a kind on (3, 3)."""

    def _build(kind: PieceType) -> tuple[Board, Piece]:
        board = board_from_placement(CORNERS_PLACEMENT)
        piece = board.add(Piece(0, kind, (3, 3)))
        return board, piece

    return _build
