"""Tests for BoardScene drawing and mouse-driven drag gestures."""

from __future__ import annotations

import pytest
from PyQt6.QtCore import QPointF, Qt

from dragboard.core.board import Board
from dragboard.core.enums import PieceKind
from dragboard.core.types import Coordinate
from dragboard.interaction.controller import BoardController
from dragboard.ui.board.board_scene import BoardScene
from dragboard.ui.settings import AppSettings
from dragboard.ui.styles.theme import BoardTheme

KING_SQ = Coordinate(3, 2)
PAWN_SQ = Coordinate(1, 6)


class _FakeMouseEvent:
    def __init__(self, pos: QPointF) -> None:
        self._pos = pos
        self.accepted = False

    def scenePos(self) -> QPointF:
        return self._pos

    def button(self) -> Qt.MouseButton:
        return Qt.MouseButton.LeftButton

    def accept(self) -> None:
        self.accepted = True


class _FakeKeyEvent:
    def __init__(self, key: Qt.Key) -> None:
        self._key = key
        self.accepted = False

    def key(self) -> Qt.Key:
        return self._key

    def accept(self) -> None:
        self.accepted = True


def _center(scene: BoardScene, loc: Coordinate) -> QPointF:
    t = scene.tile
    return QPointF(loc.col * t + t / 2, loc.row * t + t / 2)


def _press(scene: BoardScene, loc: Coordinate) -> None:
    scene.mousePressEvent(_FakeMouseEvent(_center(scene, loc)))  # type: ignore[arg-type]


def _move(scene: BoardScene, pos: QPointF) -> None:
    scene.mouseMoveEvent(_FakeMouseEvent(pos))  # type: ignore[arg-type]


def _release(scene: BoardScene, pos: QPointF) -> None:
    scene.mouseReleaseEvent(_FakeMouseEvent(pos))  # type: ignore[arg-type]


def test_draws_64_squares_in_checkered_colors() -> None:
    scene = BoardScene()
    theme = BoardTheme.default()
    assert len(scene._square_items) == 64
    assert scene.square_color(Coordinate(0, 0)) == theme.light_square
    assert scene.square_color(Coordinate(0, 1)) == theme.dark_square


def test_initial_pieces_are_placed() -> None:
    scene = BoardScene()
    assert set(scene._piece_items) == {KING_SQ, PAWN_SQ}
    assert scene._piece_items[KING_SQ].piece.kind == PieceKind.KING


def test_scene_rect_follows_tile_size() -> None:
    scene = BoardScene(settings=AppSettings(tile_size=50))
    assert scene.sceneRect().width() == 400


def test_pos_to_coord() -> None:
    scene = BoardScene()
    assert scene._pos_to_coord(scene.sceneRect().topLeft()) == Coordinate(0, 0)
    assert scene._pos_to_coord(_center(scene, Coordinate(6, 1))) == Coordinate(6, 1)
    assert scene._pos_to_coord(QPointF(-1, -1)) is None


def test_hover_colors_valid_and_invalid_squares() -> None:
    scene = BoardScene()
    theme = BoardTheme.default()

    _press(scene, KING_SQ)
    _move(scene, _center(scene, Coordinate(4, 3)))
    assert scene.square_color(Coordinate(4, 3)) == theme.valid_move

    _move(scene, _center(scene, Coordinate(5, 2)))
    assert scene.square_color(Coordinate(4, 3)) == theme.dark_square
    assert scene.square_color(Coordinate(5, 2)) == theme.invalid_move


def test_dragged_piece_fades() -> None:
    scene = BoardScene()
    _press(scene, KING_SQ)
    assert scene._piece_items[KING_SQ].opacity() == pytest.approx(0.4)


def test_legal_release_commits_and_emits() -> None:
    scene = BoardScene()
    moves: list[tuple[Coordinate, Coordinate]] = []
    scene.move_committed.connect(lambda o, d: moves.append((o, d)))

    _press(scene, KING_SQ)
    _move(scene, _center(scene, Coordinate(4, 3)))
    _release(scene, _center(scene, Coordinate(4, 3)))

    assert moves == [(KING_SQ, Coordinate(4, 3))]
    assert set(scene._piece_items) == {Coordinate(4, 3), PAWN_SQ}
    assert scene._dragging_item is None
    assert scene.square_color(Coordinate(4, 3)) == BoardTheme.default().dark_square


def test_illegal_release_snaps_back() -> None:
    scene = BoardScene()
    item = scene._piece_items[PAWN_SQ]
    start = item.pos()
    before = scene.controller.board

    _press(scene, PAWN_SQ)
    _move(scene, _center(scene, Coordinate(2, 6)))
    assert item.pos() != start
    _release(scene, _center(scene, Coordinate(2, 6)))

    assert scene.controller.board is before
    assert item.pos() == start
    assert item.opacity() == pytest.approx(1.0)
    assert scene._dragging_item is None


def test_release_outside_board_cancels() -> None:
    scene = BoardScene()
    before = scene.controller.board

    _press(scene, KING_SQ)
    _move(scene, _center(scene, Coordinate(4, 3)))
    _release(scene, QPointF(-20, -20))

    assert scene.controller.board is before
    assert scene.square_color(Coordinate(4, 3)) == BoardTheme.default().dark_square


def test_escape_cancels_gesture() -> None:
    scene = BoardScene()
    _press(scene, KING_SQ)
    _move(scene, _center(scene, Coordinate(4, 3)))

    event = _FakeKeyEvent(Qt.Key.Key_Escape)
    scene.keyPressEvent(event)  # type: ignore[arg-type]

    assert event.accepted
    assert not scene.controller.manager.is_dragging
    assert scene._dragging_item is None
    assert scene.square_color(Coordinate(4, 3)) == BoardTheme.default().dark_square


def test_legal_destination_hints() -> None:
    scene = BoardScene(settings=AppSettings(show_legal_destinations=True))
    _press(scene, PAWN_SQ)
    assert len(scene._hint_items) == 1

    _release(scene, _center(scene, PAWN_SQ))
    assert scene._hint_items == []


def test_set_interactive_false_cancels_drag() -> None:
    scene = BoardScene()
    _press(scene, KING_SQ)
    scene.set_interactive(False)
    assert not scene.controller.manager.is_dragging
    assert scene._interactive is False


def test_set_theme_repaints_squares() -> None:
    scene = BoardScene()
    scene.set_theme(BoardTheme.blue())
    assert scene.square_color(Coordinate(0, 1)) == BoardTheme.blue().dark_square


def test_board_reset_resyncs_items() -> None:
    ctrl = BoardController()
    scene = BoardScene(ctrl)
    ctrl.store.commit_move(KING_SQ, Coordinate(7, 7))
    assert Coordinate(7, 7) in scene._piece_items

    ctrl.reset()
    assert set(scene._piece_items) == {p.position for p in Board.initial()}
