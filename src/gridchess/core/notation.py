"""Piece-placement text for N x N boards.

The format is the placement field of FEN generalised to any size: rows
separated by ``/`` from the top (highest ``y``) down, uppercase letters for
owner 0, lowercase for owner 1, and decimal run lengths (possibly several
digits) for empty squares. The row count fixes the board size.
"""

from __future__ import annotations

import re

from gridchess.core.board import Board
from gridchess.core.piece import Piece

STANDARD_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_TOKEN_RE = re.compile(r"\d+|\D")


def board_from_placement(text: str) -> Board:
    """Parse placement *text* into a :class:`Board`."""
    text = text.strip()
    if not text:
        raise ValueError(f"Invalid placement (empty): {text!r}")
    rows = text.split("/")
    size = len(rows)
    board = Board(size)
    for row_idx, row_text in enumerate(rows):
        y = size - 1 - row_idx
        x = 0
        for token in _TOKEN_RE.findall(row_text):
            if token.isdigit():
                step = int(token)
                if step < 1:
                    raise ValueError(f"Invalid placement run {token!r}: {text!r}")
                x += step
                continue
            if x >= size:
                raise ValueError(f"Invalid placement row width: {text!r}")
            board.add(Piece.from_char(token, (x, y), size))
            x += 1
        if x != size:
            raise ValueError(f"Invalid placement row width: {text!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise *board* to placement text."""
    rows: list[str] = []
    for y in range(board.size - 1, -1, -1):
        empty = 0
        row = ""
        for x in range(board.size):
            piece = board.piece_at((x, y))
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += piece.char
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
