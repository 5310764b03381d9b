"""Visual theme constants and QSS styles for Dragboard."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from dragboard.core.enums import HoverState


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board."""

    light_square: QColor
    dark_square: QColor
    valid_move: QColor  # hovered square accepts the piece
    invalid_move: QColor  # hovered square rejects the piece
    legal_hint: QColor  # optional overlay on legal destinations
    border: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor("white"),
            dark_square=QColor("lightgrey"),
            valid_move=QColor("lightgreen"),
            invalid_move=QColor("pink"),
            legal_hint=QColor(0, 0, 0, 40),  # dark dot overlay
            border=QColor("lightgrey"),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            valid_move=QColor(155, 199, 0),
            invalid_move=QColor(230, 120, 120),
            legal_hint=QColor(0, 0, 0, 40),
            border=QColor(140, 162, 173),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            valid_move=QColor(186, 202, 68),
            invalid_move=QColor(214, 110, 110),
            legal_hint=QColor(0, 0, 0, 40),
            border=QColor(112, 149, 120),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme by display name; unknown names give the default."""
        factory = THEMES.get(name)
        return factory() if factory is not None else cls.default()

    def square_color(self, state: HoverState, is_dark: bool) -> QColor:
        """Fill colour of a square in hover *state*."""
        if state == HoverState.VALID_MOVE:
            return self.valid_move
        if state == HoverState.INVALID_MOVE:
            return self.invalid_move
        return self.dark_square if is_dark else self.light_square


THEMES = {
    "Classic": BoardTheme.default,
    "Blue": BoardTheme.blue,
    "Green": BoardTheme.green,
}


APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel, QStatusBar {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
