"""Piece: owner, kind, position and a cached list of reachable squares."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridchess.core.enums import PieceType
from gridchess.core.move_generator import compute_legal_moves
from gridchess.core.mutator import make_move
from gridchess.core.types import DEFAULT_BOARD_SIZE, Coord, in_bounds

if TYPE_CHECKING:
    from gridchess.core.board import Board

# Placement character ↔ (owner, PieceType)
_CHAR_MAP: dict[str, tuple[int, PieceType]] = {
    "P": (0, PieceType.PAWN),
    "N": (0, PieceType.KNIGHT),
    "B": (0, PieceType.BISHOP),
    "R": (0, PieceType.ROOK),
    "Q": (0, PieceType.QUEEN),
    "K": (0, PieceType.KING),
    "p": (1, PieceType.PAWN),
    "n": (1, PieceType.KNIGHT),
    "b": (1, PieceType.BISHOP),
    "r": (1, PieceType.ROOK),
    "q": (1, PieceType.QUEEN),
    "k": (1, PieceType.KING),
}

_UNICODE: dict[tuple[int, PieceType], str] = {
    (0, PieceType.PAWN): "♙",
    (0, PieceType.KNIGHT): "♘",
    (0, PieceType.BISHOP): "♗",
    (0, PieceType.ROOK): "♖",
    (0, PieceType.QUEEN): "♕",
    (0, PieceType.KING): "♔",
    (1, PieceType.PAWN): "♟",
    (1, PieceType.KNIGHT): "♞",
    (1, PieceType.BISHOP): "♝",
    (1, PieceType.ROOK): "♜",
    (1, PieceType.QUEEN): "♛",
    (1, PieceType.KING): "♚",
}

_CHARS: dict[tuple[int, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


class Piece:
    """A single piece on a square board.

    ``legal_moves`` is a cache: it is empty until :meth:`init_legal_moves`
    is called and is never refreshed automatically. ``position`` is read-only;
    it changes only through :meth:`Board.relocate`, which keeps the board's
    occupancy index in step. Equality is identity, since two pieces of the
    same kind and owner are still distinct pieces.
    """

    __slots__ = ("owner", "kind", "_position", "board_size", "legal_moves")

    def __init__(
        self,
        owner: int,
        kind: PieceType,
        position: Coord,
        board_size: int = DEFAULT_BOARD_SIZE,
    ) -> None:
        if owner < 0:
            raise ValueError(f"Invalid owner id: {owner!r}")
        if board_size < 1:
            raise ValueError(f"Invalid board size: {board_size!r}")
        if not in_bounds(position, board_size):
            raise ValueError(
                f"Position {position!r} is off a {board_size}x{board_size} board"
            )
        self.owner = owner
        self.kind = kind
        self._position = position
        self.board_size = board_size
        self.legal_moves: list[Coord] = []

    @property
    def position(self) -> Coord:
        return self._position

    def __repr__(self) -> str:
        return (
            f"Piece(owner={self.owner!r}, kind={self.kind.name}, "
            f"position={self._position!r}, board_size={self.board_size!r})"
        )

    # ── Moves ────────────────────────────────────────────────────────────

    def init_legal_moves(self, board: Board) -> list[Coord]:
        """Recompute and cache the squares reachable on *board*."""
        self.legal_moves = compute_legal_moves(self, board)
        return self.legal_moves

    def make_move(self, board: Board, destination: Coord) -> Piece | None:
        """Move to *destination*, capturing any resident. See :func:`make_move`."""
        return make_move(self, board, destination)

    # ── Serialisation ────────────────────────────────────────────────────

    @property
    def char(self) -> str:
        """Placement character (uppercase = owner 0, lowercase = owner 1)."""
        try:
            return _CHARS[(self.owner, self.kind)]
        except KeyError:
            raise ValueError(
                f"Owner {self.owner!r} has no placement character"
            ) from None

    def __str__(self) -> str:
        if (self.owner, self.kind) in _CHARS:
            return _CHARS[(self.owner, self.kind)]
        return f"{self.kind!s}#{self.owner}"

    @classmethod
    def from_char(
        cls,
        char: str,
        position: Coord,
        board_size: int = DEFAULT_BOARD_SIZE,
    ) -> Piece:
        """Create piece from placement character, e.g. 'N' → owner 0 knight."""
        try:
            owner, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(owner, kind, position, board_size)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞ (falls back to :meth:`__str__`)."""
        return _UNICODE.get((self.owner, self.kind), str(self))
