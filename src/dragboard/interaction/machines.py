"""Per-piece and per-square interaction state machines.

Both machines are transient: the controller builds them for the pieces
and squares currently on screen and throws them away when the board
changes. They hold no reference to the board; callers pass the current
snapshot in.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import IntEnum

from dragboard.core.board import Board
from dragboard.core.enums import HoverState
from dragboard.core.piece import LOCATION_KEY, DragPayload, Piece
from dragboard.core.rules import is_legal_move
from dragboard.core.types import Coordinate, to_coordinate

_LOGGER = logging.getLogger(__name__)


class DragPhase(IntEnum):
    """States of a draggable piece."""

    IDLE = 0
    DRAGGING = 1


class PieceDrag:
    """Drag state of one piece: IDLE ⇄ DRAGGING."""

    __slots__ = ("_piece", "_phase", "_payload", "_on_change")

    def __init__(
        self,
        piece: Piece,
        on_change: Callable[[Piece, bool], None] | None = None,
    ) -> None:
        self._piece = piece
        self._phase = DragPhase.IDLE
        self._payload: DragPayload | None = None
        self._on_change = on_change

    @property
    def piece(self) -> Piece:
        return self._piece

    @property
    def phase(self) -> DragPhase:
        return self._phase

    @property
    def is_dragging(self) -> bool:
        return self._phase == DragPhase.DRAGGING

    @property
    def payload(self) -> DragPayload | None:
        """Payload captured at drag start; ``None`` while idle."""
        return self._payload

    def initial_data(self) -> dict[str, object]:
        return DragPayload.of(self._piece).as_data()

    def start(self) -> DragPayload:
        self._payload = DragPayload.of(self._piece)
        self._set_phase(DragPhase.DRAGGING)
        return self._payload

    def drop(self) -> None:
        """End the gesture, whatever happened to the move."""
        self._payload = None
        self._set_phase(DragPhase.IDLE)

    def _set_phase(self, phase: DragPhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        if self._on_change is not None:
            self._on_change(self._piece, self.is_dragging)


class SquareHover:
    """Hover classification of one square while a drag passes over it."""

    __slots__ = ("_location", "_state", "_on_change")

    def __init__(
        self,
        location: Coordinate,
        on_change: Callable[[Coordinate, HoverState], None] | None = None,
    ) -> None:
        self._location = location
        self._state = HoverState.IDLE
        self._on_change = on_change

    @property
    def location(self) -> Coordinate:
        return self._location

    @property
    def state(self) -> HoverState:
        return self._state

    def data(self) -> dict[str, object]:
        return {LOCATION_KEY: self._location}

    def can_accept(self, source_data: Mapping[str, object]) -> bool:
        """Refuse foreign payloads and drops back onto the origin square."""
        origin = to_coordinate(source_data.get(LOCATION_KEY))
        if origin is None:
            return False
        return origin != self._location

    def enter(self, source_data: Mapping[str, object], board: Board) -> HoverState:
        """Classify the hovered move against the committed *board*.

        A malformed payload leaves the state as it was.
        """
        payload = DragPayload.from_data(source_data)
        if payload is None:
            _LOGGER.debug("Ignoring malformed payload over %s", self._location)
            return self._state

        if is_legal_move(payload.position, self._location, payload.kind, board):
            self._set_state(HoverState.VALID_MOVE)
        else:
            self._set_state(HoverState.INVALID_MOVE)
        return self._state

    def leave(self) -> None:
        self._set_state(HoverState.IDLE)

    def drop(self) -> None:
        self._set_state(HoverState.IDLE)

    def _set_state(self, state: HoverState) -> None:
        if state == self._state:
            return
        self._state = state
        if self._on_change is not None:
            self._on_change(self._location, state)
