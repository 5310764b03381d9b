"""PieceItem — draggable piece graphic on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QCursor
from PyQt6.QtSvgWidgets import QGraphicsSvgItem
from PyQt6.QtWidgets import QGraphicsItem

from dragboard.core.piece import Piece
from dragboard.ui.resources import piece_renderer


class PieceItem(QGraphicsSvgItem):
    """A single piece on the board.

    Stores the logical *piece* it shows. The scene moves it while dragged
    and snaps it back when the board does not change.
    """

    _MARGIN_RATIO = 0.08

    def __init__(self, piece: Piece, tile_size: int) -> None:
        super().__init__()
        self.piece = piece
        self._tile_size = tile_size
        self._margin = 0.0
        self._drag_origin: QPointF | None = None
        self._grab_offset = QPointF(0.0, 0.0)

        self.setSharedRenderer(piece_renderer(piece.kind))
        self.setTransformOriginPoint(0.0, 0.0)
        self.setCacheMode(QGraphicsItem.CacheMode.NoCache)
        self._update_size(tile_size)

        self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        self.setZValue(1)

    @property
    def margin(self) -> float:
        """Inner margin to keep the piece away from tile edges."""
        return self._margin

    def set_dragging(self, dragging: bool, opacity: float) -> None:
        """Fade the piece while its drag gesture is active."""
        self.setOpacity(opacity if dragging else 1.0)

    def start_drag(self, grab_pos: QPointF) -> None:
        """Called at the beginning of a drag gesture at scene point *grab_pos*."""
        self._drag_origin = self.pos()
        self._grab_offset = grab_pos - self.pos()
        self.setZValue(10)  # bring to front
        self.setCursor(QCursor(Qt.CursorShape.ClosedHandCursor))

    def drag_to(self, scene_pos: QPointF) -> None:
        """Follow the pointer, keeping the grab point under it."""
        if self._drag_origin is not None:
            self.setPos(scene_pos - self._grab_offset)

    def cancel_drag(self) -> None:
        """Snap back to original position."""
        if self._drag_origin is not None:
            self.setPos(self._drag_origin)
        self._drag_origin = None
        self.setZValue(1)
        self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))

    def _update_size(self, size: int) -> None:
        self._tile_size = size
        self._margin = float(size) * self._MARGIN_RATIO
        draw_size = max(float(size) - 2.0 * self._margin, 1.0)

        renderer = self.renderer()
        if renderer is None:
            return
        bounds = self.boundingRect()
        width = float(bounds.width()) or float(renderer.defaultSize().width()) or 1.0
        height = float(bounds.height()) or float(renderer.defaultSize().height()) or 1.0
        scale = min(draw_size / width, draw_size / height)
        self.setScale(scale)
