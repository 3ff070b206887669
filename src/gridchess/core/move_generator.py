"""Reachable-square generation for a single piece.

Leaping pieces (knight, king, pawn) try a fixed offset set; sliding pieces
(rook, bishop, queen) walk rays until the board edge or the first occupied
square. A friendly occupant blocks and is excluded, an opposing occupant is
included as a capture and ends the ray.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from gridchess.core.enums import PieceType
from gridchess.core.types import Coord, Offset, in_bounds

if TYPE_CHECKING:
    from gridchess.core.board import Board
    from gridchess.core.piece import Piece


KNIGHT_OFFSETS: tuple[Offset, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[Offset, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ROOK_DIRS: tuple[Offset, ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
BISHOP_DIRS: tuple[Offset, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
QUEEN_DIRS: tuple[Offset, ...] = ROOK_DIRS + BISHOP_DIRS


class MoveGenerator:
    """Generates reachable squares for pieces on a given :class:`Board`.

    Read-only: the board and the pieces are never mutated, and the result
    does not depend on anything but the current occupancy.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, piece: Piece) -> list[Coord]:
        """Squares *piece* may move to, direction by direction."""
        kind = piece.kind
        match kind:
            case PieceType.PAWN:
                # Pawns step like kings in every direction.
                return self._gen_leaping(piece, KING_OFFSETS)
            case PieceType.KNIGHT:
                return self._gen_leaping(piece, KNIGHT_OFFSETS)
            case PieceType.KING:
                return self._gen_leaping(piece, KING_OFFSETS)
            case PieceType.ROOK:
                return self._gen_sliding(piece, ROOK_DIRS)
            case PieceType.BISHOP:
                return self._gen_sliding(piece, BISHOP_DIRS)
            case PieceType.QUEEN:
                return self._gen_sliding(piece, QUEEN_DIRS)
            case _:
                assert_never(kind)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_leaping(self, piece: Piece, offsets: tuple[Offset, ...]) -> list[Coord]:
        board = self._board
        size = piece.board_size
        x, y = piece.position
        moves: list[Coord] = []
        for dx, dy in offsets:
            to_sq = (x + dx, y + dy)
            if not in_bounds(to_sq, size):
                continue
            target = board.piece_at(to_sq)
            if target is None or target.owner != piece.owner:
                moves.append(to_sq)
        return moves

    def _gen_sliding(self, piece: Piece, directions: tuple[Offset, ...]) -> list[Coord]:
        board = self._board
        size = piece.board_size
        moves: list[Coord] = []
        for dx, dy in directions:
            x, y = piece.position
            while True:
                x += dx
                y += dy
                to_sq = (x, y)
                if not in_bounds(to_sq, size):
                    break
                target = board.piece_at(to_sq)
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.owner != piece.owner:
                    moves.append(to_sq)
                break
        return moves


def compute_legal_moves(piece: Piece, board: Board) -> list[Coord]:
    """Squares *piece* can reach on *board*; empty when it is boxed in."""
    return MoveGenerator(board).generate_legal_moves(piece)
