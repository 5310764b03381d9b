"""Move legality for single pieces.

All movement rules live here, dispatched on :class:`PieceKind`. Functions
are pure: they read the board snapshot they are given and never change it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dragboard.core.enums import PieceKind
from dragboard.core.types import Coordinate, all_coordinates

if TYPE_CHECKING:
    from dragboard.core.board import Board


def is_legal_move(
    origin: Coordinate,
    destination: Coordinate,
    kind: PieceKind,
    board: Board,
) -> bool:
    """Whether a *kind* piece on *origin* may land on *destination*.

    Landing on an occupied square is never allowed; captures are not
    modelled. Board bounds are not checked here.
    """
    if board.is_occupied(destination):
        return False

    row_delta = abs(origin.row - destination.row)
    col_delta = abs(origin.col - destination.col)

    match kind:
        case PieceKind.KING:
            # A zero-distance "move" passes too; the drop layer never offers it.
            return row_delta in (0, 1) and col_delta in (0, 1)
        case PieceKind.PAWN:
            # Pawns only advance towards row 0.
            return col_delta == 0 and destination.row - origin.row == -1
        case _:
            return False


def legal_destinations(
    origin: Coordinate, kind: PieceKind, board: Board
) -> list[Coordinate]:
    """All on-board squares a *kind* piece on *origin* may move to."""
    return [
        dest
        for dest in all_coordinates()
        if is_legal_move(origin, dest, kind, board)
    ]
