"""Application settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_ENV_LOG_LEVEL = "DRAGBOARD_LOG_LEVEL"
_ENV_THEME = "DRAGBOARD_THEME"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    tile_size: int = 64  # px per square
    drag_opacity: float = 0.4  # piece opacity while dragged
    show_legal_destinations: bool = False

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults, overridden by ``DRAGBOARD_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()
        if level := env.get(_ENV_LOG_LEVEL):
            settings.log_level = level.upper()
        if theme := env.get(_ENV_THEME):
            settings.board_theme = theme
        return settings
