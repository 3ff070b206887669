"""Coordinate type alias and board-geometry helpers.

Coordinates are ``(x, y)`` pairs with ``x`` the file (column) and ``y`` the
rank (row), both in ``[0, size)``::

    (0, size-1) ... (size-1, size-1)
        ...               ...
    (0, 0)      ... (size-1, 0)
"""

from __future__ import annotations

from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]
Offset: TypeAlias = tuple[int, int]

DEFAULT_BOARD_SIZE = 8

_FILE_LETTERS = "abcdefghijklmnopqrstuvwxyz"


def in_bounds(coord: Coord, size: int) -> bool:
    """Whether *coord* lies on a ``size`` x ``size`` board."""
    x, y = coord
    return 0 <= x < size and 0 <= y < size


def square_name(coord: Coord) -> str:
    """Human-readable name, e.g. (0, 0) → 'a1', (4, 3) → 'e4'."""
    x, y = coord
    if not (0 <= x < len(_FILE_LETTERS)) or y < 0:
        raise ValueError(f"Square has no name: {coord!r}")
    return f"{_FILE_LETTERS[x]}{y + 1}"


def parse_square(name: str, size: int = DEFAULT_BOARD_SIZE) -> Coord:
    """Parse square name, e.g. 'e4' → (4, 3), checked against *size*."""
    if len(name) < 2 or name[0] not in _FILE_LETTERS or not name[1:].isdigit():
        raise ValueError(f"Invalid square name: {name!r}")
    coord = (_FILE_LETTERS.index(name[0]), int(name[1:]) - 1)
    if not in_bounds(coord, size):
        raise ValueError(f"Square {name!r} is off a {size}x{size} board")
    return coord
