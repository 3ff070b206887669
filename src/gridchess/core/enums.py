"""Core enumerations for the grid-chess domain."""

from __future__ import annotations

from enum import IntEnum


class PieceType(IntEnum):
    """Closed set of piece kinds ordered by conventional value.

    Move generation matches on every member; adding one means adding a
    branch to :func:`gridchess.core.move_generator.compute_legal_moves`.
    """

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()
