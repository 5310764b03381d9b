"""Interaction layer — drag and drop hub and the board's state machines.

Quick start::

    from dragboard.interaction import BoardController, piece_key, square_key

    ctrl = BoardController()
    dnd = ctrl.manager
    dnd.start_drag(piece_key(Coordinate(3, 2)))
    dnd.update_targets([square_key(Coordinate(4, 3))])
    dnd.drop()
"""

from dragboard.interaction.controller import (
    BoardController,
    BoardEvents,
    piece_key,
    square_key,
)
from dragboard.interaction.dnd import (
    DragDropManager,
    DragEvent,
    DragSource,
    DropTargetRecord,
)
from dragboard.interaction.machines import DragPhase, PieceDrag, SquareHover

__all__ = [
    # Drag and drop hub
    "DragDropManager",
    "DragEvent",
    "DragSource",
    "DropTargetRecord",
    # State machines
    "DragPhase",
    "PieceDrag",
    "SquareHover",
    # Controller
    "BoardController",
    "BoardEvents",
    "piece_key",
    "square_key",
]
