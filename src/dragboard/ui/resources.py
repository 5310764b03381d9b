"""Piece rendering helpers for the SVG assets."""

from __future__ import annotations

from PyQt6.QtSvg import QSvgRenderer

from dragboard.core.enums import PieceKind
from dragboard.runtime_assets import asset_path

_ASSETS_DIR = asset_path("pieces")

# Cache SVG renderers (one per kind)
_renderers: dict[PieceKind, QSvgRenderer] = {}


def piece_renderer(kind: PieceKind) -> QSvgRenderer:
    """Return a cached SVG renderer for *kind*."""
    if kind not in _renderers:
        path = _ASSETS_DIR / f"{kind.label}.svg"
        renderer = QSvgRenderer(str(path))
        if not renderer.isValid():
            raise FileNotFoundError(f"SVG asset not found or invalid: {path}")
        _renderers[kind] = renderer
    return _renderers[kind]
