"""MainWindow — top-level window hosting the board."""

from __future__ import annotations

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QMainWindow, QStatusBar, QVBoxLayout, QWidget

from dragboard.core.types import Coordinate
from dragboard.interaction.controller import BoardController
from dragboard.ui.board.board_scene import BoardScene
from dragboard.ui.board.board_view import BoardView
from dragboard.ui.settings import AppSettings


class MainWindow(QMainWindow):
    """Main application window for Dragboard."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Dragboard")
        self.setMinimumSize(420, 460)
        self.resize(560, 600)

        self._settings = settings if settings is not None else AppSettings()
        self._controller = BoardController()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()

    @property
    def controller(self) -> BoardController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    # ── Construction ─────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)

        scene = BoardScene(self._controller, self._settings)
        self._board_view = BoardView(scene, central)
        layout.addWidget(self._board_view)
        self.setCentralWidget(central)

        self._status = QStatusBar(self)
        self.setStatusBar(self._status)
        self._status.showMessage("Drag a piece to move it")

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_board = menu_bar.addMenu("&Board")
        assert self._menu_board is not None

        self._act_new = QAction("&New board", self)
        self._act_new.setShortcut("Ctrl+N")
        self._act_new.triggered.connect(self._on_new_board)
        self._menu_board.addAction(self._act_new)

        self._menu_board.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_board.addAction(self._act_quit)

    def _connect_signals(self) -> None:
        self._board_view.move_committed.connect(self._on_move_committed)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_new_board(self) -> None:
        self._controller.reset()
        self._status.showMessage("New board")

    def _on_move_committed(self, origin: Coordinate, destination: Coordinate) -> None:
        piece = self._controller.board.piece_at(destination)
        if piece is None:
            self._status.showMessage(f"{origin} → {destination}")
            return
        name = piece.kind.label.capitalize()
        self._status.showMessage(f"{piece.symbol} {name} {origin} → {destination}")
