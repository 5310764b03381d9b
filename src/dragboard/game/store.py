"""BoardStore — owner of the committed board.

The store is the only place where the board changes. Everything else
reads the immutable :class:`Board` snapshot returned by :attr:`board`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from dragboard.core.board import Board
from dragboard.core.types import Coordinate

_LOGGER = logging.getLogger(__name__)

BoardChangedCallback = Callable[[Board], None]


@dataclass
class StoreEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_board_changed: list[BoardChangedCallback] = field(default_factory=list)


class BoardStore:
    """Holds the current board and applies committed moves."""

    __slots__ = ("_board", "events")

    def __init__(self, board: Board | None = None) -> None:
        self._board = board if board is not None else Board.initial()
        self.events = StoreEvents()

    @property
    def board(self) -> Board:
        return self._board

    def commit_move(self, origin: Coordinate, destination: Coordinate) -> Board | None:
        """Relocate the piece on *origin* to *destination*.

        Legality is the caller's concern. Returns the new board, or
        ``None`` (state untouched) when *origin* holds no piece or
        *destination* holds another one.
        """
        new_board = self._board.with_move(origin, destination)
        if new_board is None:
            _LOGGER.debug("Cannot move %s -> %s, commit skipped", origin, destination)
            return None
        self._board = new_board
        _LOGGER.info("Moved piece %s -> %s", origin, destination)
        self._emit_board_changed()
        return new_board

    def reset(self) -> Board:
        """Restore the initial placement."""
        self._board = Board.initial()
        self._emit_board_changed()
        return self._board

    def _emit_board_changed(self) -> None:
        for cb in self.events.on_board_changed:
            cb(self._board)
