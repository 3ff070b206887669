"""Board - the collection of pieces resident on an N x N grid."""

from __future__ import annotations

from collections.abc import Iterator

from gridchess.core.enums import PieceType
from gridchess.core.piece import Piece
from gridchess.core.types import DEFAULT_BOARD_SIZE, Coord, in_bounds

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable square board that exclusively owns its resident pieces.

    Occupancy is a sparse ``coord -> Piece`` index, so no two pieces can
    share a square. Pieces are moved only through :meth:`relocate` (used by
    :func:`gridchess.core.mutator.make_move`) to keep the index in step with
    each piece's ``position``.
    """

    __slots__ = ("_size", "_squares")

    def __init__(self, size: int = DEFAULT_BOARD_SIZE) -> None:
        if size < 1:
            raise ValueError(f"Invalid board size: {size!r}")
        self._size = size
        self._squares: dict[Coord, Piece] = {}

    @property
    def size(self) -> int:
        return self._size

    # -- Element access -----------------------------------------------------

    def piece_at(self, coord: Coord) -> Piece | None:
        return self._squares.get(coord)

    def is_empty(self, coord: Coord) -> bool:
        return coord not in self._squares

    def add(self, piece: Piece) -> Piece:
        """Place *piece* on its own ``position``; the square must be free."""
        if piece.board_size != self._size:
            raise ValueError(
                f"Piece board size {piece.board_size!r} does not match "
                f"board size {self._size!r}"
            )
        if not in_bounds(piece.position, self._size):
            raise ValueError(f"Position off board: {piece.position!r}")
        if piece.position in self._squares:
            raise ValueError(f"Square already occupied: {piece.position!r}")
        self._squares[piece.position] = piece
        return piece

    def remove(self, coord: Coord) -> Piece | None:
        """Take the resident of *coord* off the board, if any."""
        piece = self._squares.pop(coord, None)
        if piece is not None:
            piece.legal_moves = []
        return piece

    def relocate(self, piece: Piece, destination: Coord) -> None:
        """Move *piece* to the empty square *destination*."""
        if self._squares.get(piece.position) is not piece:
            raise ValueError(f"Piece {piece!r} is not on this board")
        if not in_bounds(destination, self._size):
            raise ValueError(f"Position off board: {destination!r}")
        if destination in self._squares:
            raise ValueError(f"Square already occupied: {destination!r}")
        del self._squares[piece.position]
        piece._position = destination
        self._squares[destination] = piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, owner: int | None = None) -> list[Piece]:
        """Resident pieces, optionally only those of *owner*."""
        if owner is None:
            return list(self._squares.values())
        return [p for p in self._squares.values() if p.owner == owner]

    def refresh_legal_moves(self) -> None:
        """Recompute the cached legal moves of every resident piece."""
        for piece in list(self._squares.values()):
            piece.init_legal_moves(self)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        """Deep copy: new Piece objects with the same caches."""
        b = Board(self._size)
        for coord, p in self._squares.items():
            clone = Piece(p.owner, p.kind, p.position, p.board_size)
            clone.legal_moves = p.legal_moves.copy()
            b._squares[coord] = clone
        return b

    def clear(self) -> None:
        for piece in self._squares.values():
            piece.legal_moves = []
        self._squares = {}

    # -- Factory ------------------------------------------------------------

    @classmethod
    def standard(cls) -> Board:
        """8x8 start layout: owner 0 on rows 0-1, owner 1 on rows 6-7."""
        b = cls(DEFAULT_BOARD_SIZE)
        for x, kind in enumerate(_BACK_RANK):
            b.add(Piece(0, kind, (x, 0)))
            b.add(Piece(0, PieceType.PAWN, (x, 1)))
            b.add(Piece(1, PieceType.PAWN, (x, 6)))
            b.add(Piece(1, kind, (x, 7)))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __len__(self) -> int:
        return len(self._squares)

    def __iter__(self) -> Iterator[Piece]:
        return iter(list(self._squares.values()))

    def __contains__(self, piece: object) -> bool:
        if not isinstance(piece, Piece):
            return False
        return self._squares.get(piece.position) is piece

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        if self._size != other._size or self._squares.keys() != other._squares.keys():
            return False
        return all(
            p.owner == other._squares[c].owner and p.kind == other._squares[c].kind
            for c, p in self._squares.items()
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(self._size - 1, -1, -1):
            row = []
            for x in range(self._size):
                p = self._squares.get((x, y))
                row.append(str(p) if p else ".")
            rows.append(f"{y + 1:>2} {' '.join(row)}")
        return "\n".join(rows)
