"""BoardController — wires the board store to the drag and drop layer.

Coordinates: BoardStore, DragDropManager, one SquareHover per square and
one PieceDrag per piece. Emits events via simple callbacks so the UI /
tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass, field

from dragboard.core.board import Board
from dragboard.core.enums import HoverState
from dragboard.core.piece import LOCATION_KEY, DragPayload, Piece
from dragboard.core.rules import is_legal_move, legal_destinations
from dragboard.core.types import Coordinate, all_coordinates, to_coordinate
from dragboard.game.store import BoardStore
from dragboard.interaction.dnd import Cleanup, DragDropManager, DragEvent
from dragboard.interaction.machines import PieceDrag, SquareHover

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

BoardCallback = Callable[[Board], None]
SquareStateCallback = Callable[[Coordinate, HoverState], None]
DragStateCallback = Callable[[Coordinate, bool], None]  # piece origin, dragging
MoveCallback = Callable[[Coordinate, Coordinate], None]  # origin, destination


@dataclass
class BoardEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_board_changed: list[BoardCallback] = field(default_factory=list)
    on_square_state_changed: list[SquareStateCallback] = field(default_factory=list)
    on_drag_state_changed: list[DragStateCallback] = field(default_factory=list)
    on_move_committed: list[MoveCallback] = field(default_factory=list)


def square_key(location: Coordinate) -> Hashable:
    """Drop-target key of the square at *location*."""
    return ("square", location)


def piece_key(location: Coordinate) -> Hashable:
    """Draggable key of the piece standing on *location*."""
    return ("piece", location)


# ── Controller ───────────────────────────────────────────────────────────────


class BoardController:
    """Drives the drag interaction for one board.

    Thread-safety: all methods run on the UI thread, one event at a time.
    """

    def __init__(
        self,
        store: BoardStore | None = None,
        manager: DragDropManager | None = None,
    ) -> None:
        self._store = store if store is not None else BoardStore()
        self._manager = manager if manager is not None else DragDropManager()
        self.events = BoardEvents()

        self._squares: dict[Coordinate, SquareHover] = {}
        self._drags: dict[Coordinate, PieceDrag] = {}
        self._square_cleanups: list[Cleanup] = []
        self._piece_cleanups: list[Cleanup] = []

        for location in all_coordinates():
            self._register_square(location)
        self._register_pieces(self._store.board)
        self._monitor_cleanup = self._manager.monitor(on_drop=self._on_monitor_drop)
        self._store.events.on_board_changed.append(self._on_board_changed)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._store.board

    @property
    def store(self) -> BoardStore:
        return self._store

    @property
    def manager(self) -> DragDropManager:
        return self._manager

    def square_state(self, location: Coordinate) -> HoverState:
        return self._squares[location].state

    def is_dragging(self, location: Coordinate) -> bool:
        """Whether the piece standing on *location* is being dragged."""
        drag = self._drags.get(location)
        return drag is not None and drag.is_dragging

    def legal_destinations(self, location: Coordinate) -> list[Coordinate]:
        """Squares the piece on *location* may move to on the current board."""
        piece = self.board.piece_at(location)
        if piece is None:
            return []
        return legal_destinations(location, piece.kind, self.board)

    # ── Commands ─────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Put the pieces back on their starting squares."""
        self._manager.cancel()
        self._store.reset()

    def close(self) -> None:
        """Unregister everything from the drag and drop manager."""
        self._store.events.on_board_changed.remove(self._on_board_changed)
        self._monitor_cleanup()
        for cleanup in self._square_cleanups + self._piece_cleanups:
            cleanup()
        self._square_cleanups.clear()
        self._piece_cleanups.clear()
        self._drags.clear()

    # ── Registration ─────────────────────────────────────────────────────

    def _register_square(self, location: Coordinate) -> None:
        square = SquareHover(location, on_change=self._emit_square_state)
        self._squares[location] = square

        def on_enter(event: DragEvent) -> None:
            # Always the committed board, never a speculative one.
            square.enter(event.source.data, self._store.board)

        self._square_cleanups.append(
            self._manager.drop_target(
                square_key(location),
                square.data,
                can_drop=lambda source: square.can_accept(source.data),
                on_drag_enter=on_enter,
                on_drag_leave=lambda _event: square.leave(),
                on_drop=lambda _event: square.drop(),
            )
        )

    def _register_pieces(self, board: Board) -> None:
        for cleanup in self._piece_cleanups:
            cleanup()
        self._piece_cleanups.clear()
        self._drags.clear()

        for piece in board:
            self._register_piece(piece)

    def _register_piece(self, piece: Piece) -> None:
        drag = PieceDrag(piece, on_change=self._emit_drag_state)
        self._drags[piece.position] = drag
        self._piece_cleanups.append(
            self._manager.draggable(
                piece_key(piece.position),
                drag.initial_data,
                on_drag_start=lambda _event: drag.start(),
                on_drop=lambda _event: drag.drop(),
            )
        )

    # ── Drop handling ────────────────────────────────────────────────────

    def _on_monitor_drop(self, event: DragEvent) -> None:
        """Single handler for every drop on the surface."""
        if not event.drop_targets:
            _LOGGER.debug("Drop outside any square, gesture cancelled")
            return

        destination = to_coordinate(event.drop_targets[0].data.get(LOCATION_KEY))
        payload = DragPayload.from_data(event.source.data)
        if destination is None or payload is None:
            _LOGGER.debug("Ignoring drop with malformed data: %r", event)
            return

        board = self._store.board
        if board.piece_at(payload.position) is None:
            _LOGGER.debug("Stale drop: no piece on %s", payload.position)
            return

        # Hover verdicts are advisory; re-check against the live board.
        if not is_legal_move(payload.position, destination, payload.kind, board):
            _LOGGER.info(
                "Rejected %s move %s -> %s", payload.kind, payload.position, destination
            )
            return

        if self._store.commit_move(payload.position, destination) is not None:
            self._emit_move_committed(payload.position, destination)

    def _on_board_changed(self, board: Board) -> None:
        self._register_pieces(board)
        for cb in self.events.on_board_changed:
            cb(board)

    # ── Event emission ───────────────────────────────────────────────────

    def _emit_square_state(self, location: Coordinate, state: HoverState) -> None:
        for cb in self.events.on_square_state_changed:
            cb(location, state)

    def _emit_drag_state(self, piece: Piece, dragging: bool) -> None:
        for cb in self.events.on_drag_state_changed:
            cb(piece.position, dragging)

    def _emit_move_committed(self, origin: Coordinate, destination: Coordinate) -> None:
        for cb in self.events.on_move_committed:
            cb(origin, destination)
