"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from dragboard.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: AppSettings) -> None:
    """Install the root log handler at the configured level."""
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        _LOGGER.warning("Unknown log level %r, using WARNING", settings.log_level)
        level = logging.WARNING
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from dragboard.ui.styles.theme import APP_STYLE

    app.setApplicationName("Dragboard")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from dragboard.ui.main_window import MainWindow

    settings = AppSettings.from_env()
    configure_logging(settings)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()

    return app.exec()
