"""Piece and drag payload value objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from dragboard.core.enums import PieceKind, parse_piece_kind
from dragboard.core.types import Coordinate, to_coordinate

_CHARS: dict[PieceKind, str] = {
    PieceKind.KING: "K",
    PieceKind.PAWN: "P",
}

_UNICODE: dict[PieceKind, str] = {
    PieceKind.KING: "♔",
    PieceKind.PAWN: "♙",
}

# Keys of the mapping carried by a drag gesture.
LOCATION_KEY = "location"
PIECE_TYPE_KEY = "piece_type"


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece standing on a square."""

    kind: PieceKind
    position: Coordinate

    def moved_to(self, destination: Coordinate) -> Piece:
        """Return a copy of this piece standing on *destination*."""
        return Piece(self.kind, destination)

    def __str__(self) -> str:
        return _CHARS[self.kind]

    @property
    def symbol(self) -> str:
        """Unicode symbol, e.g. ♔."""
        return _UNICODE[self.kind]


@dataclass(frozen=True, slots=True)
class DragPayload:
    """Identity of the piece being dragged, fixed for the whole gesture."""

    position: Coordinate
    kind: PieceKind

    @classmethod
    def of(cls, piece: Piece) -> DragPayload:
        return cls(piece.position, piece.kind)

    def as_data(self) -> dict[str, object]:
        """Mapping handed to the drag-and-drop layer at drag start."""
        return {LOCATION_KEY: self.position, PIECE_TYPE_KEY: self.kind}

    @classmethod
    def from_data(cls, data: Mapping[str, object]) -> DragPayload | None:
        """Validate a payload mapping coming from any drag source.

        Returns ``None`` when the location is not a coordinate or the
        piece type is not a known kind.
        """
        position = to_coordinate(data.get(LOCATION_KEY))
        kind = parse_piece_kind(data.get(PIECE_TYPE_KEY))
        if position is None or kind is None:
            return None
        return cls(position, kind)
