"""BoardScene — QGraphicsScene that draws the board and feeds drag gestures.

The scene is the pointer source for the :class:`DragDropManager`: it turns
mouse press / move / release into ``start_drag`` / ``update_targets`` /
``drop`` and repaints squares and pieces from :class:`BoardController`
events. It holds no board state of its own.
"""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QKeyEvent, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
)

from dragboard.core.board import Board
from dragboard.core.enums import HoverState
from dragboard.core.types import BOARD_SIZE, Coordinate, all_coordinates
from dragboard.interaction.controller import BoardController, piece_key, square_key
from dragboard.ui.board.piece_item import PieceItem
from dragboard.ui.settings import AppSettings
from dragboard.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the squares and pieces of a :class:`BoardController`.

    Signals:
        move_committed(Coordinate, Coordinate): Emitted after a drop moved
            a piece from origin to destination.
    """

    move_committed = pyqtSignal(object, object)

    _BORDER = 3  # px

    def __init__(
        self,
        controller: BoardController | None = None,
        settings: AppSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller if controller is not None else BoardController()
        self._settings = settings if settings is not None else AppSettings()
        self._theme = BoardTheme.named(self._settings.board_theme)
        self._interactive = True

        # Interaction state
        self._dragging_item: PieceItem | None = None

        # Visual layers
        self._square_items: dict[Coordinate, QGraphicsRectItem] = {}
        self._piece_items: dict[Coordinate, PieceItem] = {}
        self._hint_items: list[QGraphicsRectItem] = []
        self._border_item: QGraphicsRectItem | None = None

        events = self._controller.events
        events.on_square_state_changed.append(self._on_square_state_changed)
        events.on_drag_state_changed.append(self._on_drag_state_changed)
        events.on_board_changed.append(self._on_board_changed)
        events.on_move_committed.append(self.move_committed.emit)

        self._draw_board()
        self._sync_pieces()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> BoardController:
        return self._controller

    @property
    def tile(self) -> int:
        """Pixels per square."""
        return self._settings.tile_size

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive
        if not interactive:
            self._cancel_drag()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()

    def square_color(self, location: Coordinate) -> QColor:
        """Current fill colour of the square at *location*."""
        return self._square_items[location].brush().color()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        if self._border_item is not None:
            self.removeItem(self._border_item)

        t = self.tile
        for location in all_coordinates():
            rect = QGraphicsRectItem(location.col * t, location.row * t, t, t)
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[location] = rect
            self._paint_square(location, self._controller.square_state(location))

        size = BOARD_SIZE * t
        border = QGraphicsRectItem(0, 0, size, size)
        border.setPen(QPen(self._theme.border, self._BORDER))
        border.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        border.setZValue(0.9)
        self.addItem(border)
        self._border_item = border

        self.setSceneRect(0, 0, size, size)

    def _paint_square(self, location: Coordinate, state: HoverState) -> None:
        item = self._square_items.get(location)
        if item is not None:
            item.setBrush(QBrush(self._theme.square_color(state, location.is_dark)))

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the committed board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()
        self._dragging_item = None

        t = self.tile
        for piece in self._controller.board:
            item = PieceItem(piece, t)
            loc = piece.position
            item.setPos(loc.col * t + item.margin, loc.row * t + item.margin)
            self.addItem(item)
            self._piece_items[loc] = item

    # ── Controller events ────────────────────────────────────────────────

    def _on_square_state_changed(self, location: Coordinate, state: HoverState) -> None:
        self._paint_square(location, state)

    def _on_drag_state_changed(self, location: Coordinate, dragging: bool) -> None:
        item = self._piece_items.get(location)
        if item is not None:
            item.set_dragging(dragging, self._settings.drag_opacity)

    def _on_board_changed(self, _board: Board) -> None:
        self._clear_hints()
        self._sync_pieces()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)
        if event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)

        location = self._pos_to_coord(event.scenePos())
        item = self._piece_items.get(location) if location is not None else None
        if location is None or item is None:
            return super().mousePressEvent(event)

        if self._controller.manager.start_drag(piece_key(location)):
            item.start_drag(event.scenePos())
            self._dragging_item = item
            if self._settings.show_legal_destinations:
                self._show_hints(location)
            self._update_targets(event.scenePos())
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._dragging_item is None or event is None:
            return super().mouseMoveEvent(event)
        self._dragging_item.drag_to(event.scenePos())
        self._update_targets(event.scenePos())
        event.accept()

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._dragging_item is None or event is None:
            return super().mouseReleaseEvent(event)

        item = self._dragging_item
        before = self._controller.board
        self._update_targets(event.scenePos())
        self._controller.manager.drop()
        self._clear_hints()

        # Unchanged board means the drop was refused or cancelled
        if self._controller.board is before:
            item.cancel_drag()
            self._dragging_item = None
        event.accept()

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if (
            event is not None
            and event.key() == Qt.Key.Key_Escape
            and self._dragging_item is not None
        ):
            self._cancel_drag()
            event.accept()
            return
        super().keyPressEvent(event)

    def _update_targets(self, pos: QPointF) -> None:
        location = self._pos_to_coord(pos)
        keys = [square_key(location)] if location is not None else []
        self._controller.manager.update_targets(keys)

    def _cancel_drag(self) -> None:
        item = self._dragging_item
        self._controller.manager.cancel()
        self._clear_hints()
        if item is not None:
            item.cancel_drag()
        self._dragging_item = None

    # ── Legal destination hints ──────────────────────────────────────────

    def _show_hints(self, origin: Coordinate) -> None:
        self._clear_hints()
        t = self.tile
        for dest in self._controller.legal_destinations(origin):
            rect = QGraphicsRectItem(dest.col * t, dest.row * t, t, t)
            rect.setBrush(QBrush(self._theme.legal_hint))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0.8)
            self.addItem(rect)
            self._hint_items.append(rect)

    def _clear_hints(self) -> None:
        for item in self._hint_items:
            self.removeItem(item)
        self._hint_items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_coord(self, pos: QPointF) -> Coordinate | None:
        """Scene position → board coordinate."""
        t = self.tile
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return Coordinate(row, col)
