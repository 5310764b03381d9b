"""Board - immutable snapshot of the pieces on the 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from dragboard.core.enums import PieceKind
from dragboard.core.piece import Piece
from dragboard.core.types import BOARD_SIZE, Coordinate

INITIAL_PLACEMENT: tuple[Piece, ...] = (
    Piece(PieceKind.KING, Coordinate(3, 2)),
    Piece(PieceKind.PAWN, Coordinate(1, 6)),
)


class Board:
    """Unordered collection of pieces, keyed by position.

    Boards are never mutated; :meth:`with_move` derives a new one.
    """

    __slots__ = ("_pieces", "_by_position")

    def __init__(self, pieces: Iterable[Piece] = ()) -> None:
        self._pieces: tuple[Piece, ...] = tuple(pieces)
        self._by_position: dict[Coordinate, Piece] = {
            p.position: p for p in self._pieces
        }
        if len(self._by_position) != len(self._pieces):
            raise ValueError("Two pieces cannot share a square")

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Starting placement: one king and one pawn."""
        return cls(INITIAL_PLACEMENT)

    @classmethod
    def from_pieces(cls, *pieces: Piece) -> Board:
        return cls(pieces)

    # -- Queries ------------------------------------------------------------

    def piece_at(self, position: Coordinate) -> Piece | None:
        return self._by_position.get(position)

    def is_occupied(self, position: Coordinate) -> bool:
        return position in self._by_position

    @property
    def pieces(self) -> tuple[Piece, ...]:
        return self._pieces

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def __contains__(self, piece: object) -> bool:
        return piece in self._pieces

    # -- Derivation ---------------------------------------------------------

    def with_move(self, origin: Coordinate, destination: Coordinate) -> Board | None:
        """Board with the piece at *origin* relocated to *destination*.

        The moved piece is replaced, not mutated, and placed first; every
        other piece is carried over untouched. Returns ``None`` when
        *origin* is empty or another piece stands on *destination*.
        """
        piece = self.piece_at(origin)
        if piece is None:
            return None
        blocker = self.piece_at(destination)
        if blocker is not None and blocker is not piece:
            return None
        rest = [p for p in self._pieces if p is not piece]
        return Board([piece.moved_to(destination), *rest])

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._by_position == other._by_position

    def __hash__(self) -> int:
        return hash(frozenset(self._pieces))

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self.piece_at(Coordinate(row, col))
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  " + " ".join(str(c) for c in range(BOARD_SIZE)))
        return "\n".join(rows)
