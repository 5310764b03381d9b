"""Coordinate value type and board geometry helpers.

Coordinates are zero-indexed ``(row, col)`` pairs. Row 0 is the top edge
of the board as displayed; pawns advance towards it.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable ``(row, col)`` address of a square."""

    row: int
    col: int

    @property
    def is_on_board(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    @property
    def is_dark(self) -> bool:
        """Whether the square is drawn with the dark colour."""
        return (self.row + self.col) % 2 == 1

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


def all_coordinates() -> Iterator[Coordinate]:
    """Every square of the board in row-major order."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield Coordinate(row, col)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_coordinate(value: object) -> bool:
    """Structural check for coordinates arriving from a drag payload.

    A :class:`Coordinate` passes, as does any two-item sequence of
    integers (``(3, 2)`` or ``[3, 2]``). Strings never pass.
    """
    if isinstance(value, Coordinate):
        return True
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return False
    return len(value) == 2 and all(_is_int(v) for v in value)


def to_coordinate(value: object) -> Coordinate | None:
    """Convert a payload value to a :class:`Coordinate`, or ``None``."""
    if isinstance(value, Coordinate):
        return value
    if not is_coordinate(value):
        return None
    row, col = value  # type: ignore[misc]
    return Coordinate(row, col)
