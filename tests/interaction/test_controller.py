"""Tests for BoardController — drag gestures end to end without Qt."""

from __future__ import annotations

import pytest

from dragboard.core.board import Board
from dragboard.core.enums import HoverState, PieceKind
from dragboard.core.piece import Piece
from dragboard.core.types import Coordinate, all_coordinates
from dragboard.game.store import BoardStore
from dragboard.interaction.controller import BoardController, piece_key, square_key

KING_SQ = Coordinate(3, 2)
PAWN_SQ = Coordinate(1, 6)


@pytest.fixture
def ctrl() -> BoardController:
    return BoardController()


def _drag(ctrl: BoardController, origin: Coordinate, *path: Coordinate | None) -> None:
    """Start on *origin*, hover each square of *path* (None = off board), drop."""
    dnd = ctrl.manager
    assert dnd.start_drag(piece_key(origin))
    for loc in path:
        dnd.update_targets([square_key(loc)] if loc is not None else [])
    dnd.drop()


class TestSetup:
    def test_all_squares_idle(self, ctrl: BoardController) -> None:
        assert all(ctrl.square_state(c) == HoverState.IDLE for c in all_coordinates())

    def test_pieces_are_draggable(self, ctrl: BoardController) -> None:
        assert ctrl.manager.is_draggable(piece_key(KING_SQ))
        assert ctrl.manager.is_draggable(piece_key(PAWN_SQ))
        assert not ctrl.manager.is_draggable(piece_key(Coordinate(0, 0)))


class TestHover:
    def test_valid_and_invalid_classification(self, ctrl: BoardController) -> None:
        dnd = ctrl.manager
        dnd.start_drag(piece_key(KING_SQ))

        dnd.update_targets([square_key(Coordinate(4, 3))])
        assert ctrl.square_state(Coordinate(4, 3)) == HoverState.VALID_MOVE

        dnd.update_targets([square_key(Coordinate(5, 2))])
        assert ctrl.square_state(Coordinate(4, 3)) == HoverState.IDLE
        assert ctrl.square_state(Coordinate(5, 2)) == HoverState.INVALID_MOVE

    def test_origin_square_is_not_a_target(self, ctrl: BoardController) -> None:
        dnd = ctrl.manager
        dnd.start_drag(piece_key(KING_SQ))
        dnd.update_targets([square_key(KING_SQ)])
        assert dnd.drop_targets == ()
        assert ctrl.square_state(KING_SQ) == HoverState.IDLE

    def test_drag_state_events(self, ctrl: BoardController) -> None:
        seen: list[tuple[Coordinate, bool]] = []
        ctrl.events.on_drag_state_changed.append(lambda c, d: seen.append((c, d)))

        ctrl.manager.start_drag(piece_key(KING_SQ))
        assert ctrl.is_dragging(KING_SQ)
        ctrl.manager.cancel()

        assert seen == [(KING_SQ, True), (KING_SQ, False)]

    def test_square_state_events(self, ctrl: BoardController) -> None:
        seen: list[tuple[Coordinate, HoverState]] = []
        ctrl.events.on_square_state_changed.append(lambda c, s: seen.append((c, s)))

        _drag(ctrl, PAWN_SQ, Coordinate(0, 6))

        assert seen == [
            (Coordinate(0, 6), HoverState.VALID_MOVE),
            (Coordinate(0, 6), HoverState.IDLE),
        ]


class TestDrop:
    def test_legal_drop_commits(self, ctrl: BoardController) -> None:
        moves: list[tuple[Coordinate, Coordinate]] = []
        ctrl.events.on_move_committed.append(lambda o, d: moves.append((o, d)))

        _drag(ctrl, KING_SQ, Coordinate(4, 3))

        assert ctrl.board.piece_at(Coordinate(4, 3)) == Piece(PieceKind.KING, Coordinate(4, 3))
        assert ctrl.board.piece_at(KING_SQ) is None
        assert moves == [(KING_SQ, Coordinate(4, 3))]
        assert ctrl.square_state(Coordinate(4, 3)) == HoverState.IDLE
        assert not ctrl.is_dragging(Coordinate(4, 3))

    def test_illegal_drop_leaves_board(self, ctrl: BoardController) -> None:
        before = ctrl.board
        _drag(ctrl, PAWN_SQ, Coordinate(2, 6))
        assert ctrl.board is before
        assert ctrl.square_state(Coordinate(2, 6)) == HoverState.IDLE

    def test_drop_outside_board_is_noop(self, ctrl: BoardController) -> None:
        before = ctrl.board
        commits: list[object] = []
        ctrl.store.events.on_board_changed.append(commits.append)

        _drag(ctrl, KING_SQ, Coordinate(4, 3), None)

        assert ctrl.board is before
        assert commits == []
        assert ctrl.square_state(Coordinate(4, 3)) == HoverState.IDLE

    def test_draggables_follow_the_moved_piece(self, ctrl: BoardController) -> None:
        _drag(ctrl, KING_SQ, Coordinate(4, 3))

        assert not ctrl.manager.is_draggable(piece_key(KING_SQ))
        assert ctrl.manager.is_draggable(piece_key(Coordinate(4, 3)))

        _drag(ctrl, Coordinate(4, 3), Coordinate(5, 4))
        assert ctrl.board.piece_at(Coordinate(5, 4)) is not None

    def test_hover_verdict_is_rechecked_at_drop(self, ctrl: BoardController) -> None:
        dnd = ctrl.manager
        dnd.start_drag(piece_key(KING_SQ))
        dnd.update_targets([square_key(Coordinate(2, 3))])
        assert ctrl.square_state(Coordinate(2, 3)) == HoverState.VALID_MOVE

        # Another piece lands on the hovered square before the release.
        ctrl.store.commit_move(PAWN_SQ, Coordinate(2, 3))
        dnd.drop()

        assert ctrl.board.piece_at(Coordinate(2, 3)) == Piece(PieceKind.PAWN, Coordinate(2, 3))
        assert ctrl.board.piece_at(KING_SQ) is not None

    def test_stale_origin_is_ignored(self) -> None:
        store = BoardStore()
        ctrl = BoardController(store)
        dnd = ctrl.manager
        dnd.start_drag(piece_key(KING_SQ))
        dnd.update_targets([square_key(Coordinate(4, 3))])

        # The king leaves its square while the gesture is in flight.
        store.commit_move(KING_SQ, Coordinate(6, 6))
        before = ctrl.board
        dnd.drop()

        assert ctrl.board is before

    def test_foreign_drag_source_is_ignored(self, ctrl: BoardController) -> None:
        dnd = ctrl.manager
        dnd.draggable("foreign", lambda: {"location": (3, 2), "piece_type": "queen"})
        before = ctrl.board

        dnd.start_drag("foreign")
        dnd.update_targets([square_key(Coordinate(4, 3))])
        assert ctrl.square_state(Coordinate(4, 3)) == HoverState.IDLE
        dnd.drop()

        assert ctrl.board is before

    def test_malformed_location_cannot_target_squares(self, ctrl: BoardController) -> None:
        dnd = ctrl.manager
        dnd.draggable("foreign", lambda: {"location": "c4"})
        dnd.start_drag("foreign")
        dnd.update_targets([square_key(Coordinate(4, 3))])
        assert dnd.drop_targets == ()


class TestCommands:
    def test_reset(self, ctrl: BoardController) -> None:
        _drag(ctrl, KING_SQ, Coordinate(4, 3))
        ctrl.reset()
        assert ctrl.board == Board.initial()
        assert ctrl.manager.is_draggable(piece_key(KING_SQ))

    def test_reset_cancels_active_gesture(self, ctrl: BoardController) -> None:
        ctrl.manager.start_drag(piece_key(KING_SQ))
        ctrl.manager.update_targets([square_key(Coordinate(4, 3))])
        ctrl.reset()
        assert not ctrl.manager.is_dragging
        assert ctrl.square_state(Coordinate(4, 3)) == HoverState.IDLE

    def test_legal_destinations(self, ctrl: BoardController) -> None:
        assert ctrl.legal_destinations(PAWN_SQ) == [Coordinate(0, 6)]
        assert ctrl.legal_destinations(Coordinate(0, 0)) == []

    def test_close_unregisters_everything(self, ctrl: BoardController) -> None:
        ctrl.close()
        assert not ctrl.manager.is_draggable(piece_key(KING_SQ))
        assert not ctrl.manager.start_drag(piece_key(KING_SQ))
