"""Core domain layer — move generation and move application on N x N grids.

Quick start::

    from gridchess.core import board_from_placement

    board = board_from_placement("r6r/8/8/8/3R4/8/8/r6r")
    rook = board.piece_at((3, 3))
    for square in rook.init_legal_moves(board):
        print(square)
    rook.make_move(board, (3, 7))
    board.refresh_legal_moves()
"""

from gridchess.core.board import Board
from gridchess.core.enums import PieceType
from gridchess.core.move_generator import MoveGenerator, compute_legal_moves
from gridchess.core.mutator import IllegalMoveError, make_move
from gridchess.core.notation import (
    STANDARD_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from gridchess.core.piece import Piece
from gridchess.core.types import (
    DEFAULT_BOARD_SIZE,
    Coord,
    in_bounds,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "PieceType",
    # Types / helpers
    "Coord",
    "DEFAULT_BOARD_SIZE",
    "in_bounds",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "MoveGenerator",
    "Piece",
    # Operations
    "IllegalMoveError",
    "compute_legal_moves",
    "make_move",
    # Notation
    "STANDARD_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
