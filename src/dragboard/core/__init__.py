"""Core domain layer — board values and movement rules, no Qt imports.

Quick start::

    from dragboard.core import Board, Coordinate, PieceKind, is_legal_move

    board = Board.initial()
    is_legal_move(Coordinate(3, 2), Coordinate(4, 3), PieceKind.KING, board)
"""

from dragboard.core.board import INITIAL_PLACEMENT, Board
from dragboard.core.enums import HoverState, PieceKind, parse_piece_kind
from dragboard.core.piece import DragPayload, Piece
from dragboard.core.rules import is_legal_move, legal_destinations
from dragboard.core.types import (
    BOARD_SIZE,
    Coordinate,
    all_coordinates,
    is_coordinate,
    to_coordinate,
)

__all__ = [
    # Enums
    "HoverState",
    "PieceKind",
    "parse_piece_kind",
    # Types / helpers
    "BOARD_SIZE",
    "Coordinate",
    "all_coordinates",
    "is_coordinate",
    "to_coordinate",
    # Domain objects
    "Board",
    "DragPayload",
    "INITIAL_PLACEMENT",
    "Piece",
    # Rules
    "is_legal_move",
    "legal_destinations",
]
