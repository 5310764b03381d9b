"""BoardView — QGraphicsView wrapper for the board scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy

from dragboard.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Displays the board scene, handles scaling to fit the widget.

    Signals:
        move_committed(Coordinate, Coordinate): Bubbled up from BoardScene.
    """

    move_committed = pyqtSignal(object, object)

    def __init__(self, scene: BoardScene | None = None, parent=None) -> None:
        self._scene = scene if scene is not None else BoardScene()
        super().__init__(self._scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)

        # Bubble scene signal
        self._scene.move_committed.connect(self.move_committed.emit)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
