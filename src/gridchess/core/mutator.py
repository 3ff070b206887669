"""Move application: capture the resident of the destination, then relocate."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gridchess.core.types import Coord

if TYPE_CHECKING:
    from gridchess.core.board import Board
    from gridchess.core.piece import Piece

_LOGGER = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Destination is not in the mover's most recently computed legal moves."""

    def __init__(self, piece: Piece, destination: Coord) -> None:
        super().__init__(
            f"Illegal move: {piece.kind!s} at {piece.position!r} "
            f"cannot move to {destination!r}"
        )
        self.piece = piece
        self.destination = destination


def make_move(piece: Piece, board: Board, destination: Coord) -> Piece | None:
    """Move *piece* to *destination* on *board* and return the captured piece.

    *destination* must come from the piece's cached ``legal_moves``; the
    cache is checked, not recomputed. Nothing is mutated when the check
    fails. Afterwards every affected cache (including the mover's) is stale
    until the caller refreshes it.
    """
    # A stale cache can still list the square the piece now stands on.
    if destination not in piece.legal_moves or destination == piece.position:
        _LOGGER.warning(
            "Rejected move of %s from %s to %s", piece, piece.position, destination
        )
        raise IllegalMoveError(piece, destination)
    if board.piece_at(piece.position) is not piece:
        raise ValueError(f"Piece {piece!r} is not on this board")

    captured = board.remove(destination)
    if captured is not None:
        _LOGGER.debug("%s captures %s on %s", piece, captured, destination)

    origin = piece.position
    board.relocate(piece, destination)
    _LOGGER.debug("%s moved %s -> %s", piece, origin, destination)
    return captured
