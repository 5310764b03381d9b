"""Core enumerations for the board domain."""

from __future__ import annotations

from enum import IntEnum


class PieceKind(IntEnum):
    """Kinds of piece that can stand on the board."""

    KING = 1
    PAWN = 2

    @property
    def label(self) -> str:
        """Lowercase name used in drag payloads, e.g. ``"king"``."""
        return self.name.lower()

    def __str__(self) -> str:
        return self.label


class HoverState(IntEnum):
    """Presentation verdict for a square while a drag hovers over it."""

    IDLE = 0
    VALID_MOVE = 1
    INVALID_MOVE = 2


def parse_piece_kind(value: object) -> PieceKind | None:
    """Return the :class:`PieceKind` for *value*, or ``None`` if unrecognised.

    Accepts a member or its lowercase label. Bare integers are rejected:
    foreign drag sources must name the kind explicitly.
    """
    if isinstance(value, PieceKind):
        return value
    if isinstance(value, str):
        for kind in PieceKind:
            if kind.label == value:
                return kind
    return None
