"""Game state layer — the store that owns the committed board.

Quick start::

    from dragboard.game import BoardStore

    store = BoardStore()
    store.commit_move(Coordinate(3, 2), Coordinate(4, 3))
"""

from dragboard.game.store import BoardStore, StoreEvents

__all__ = [
    "BoardStore",
    "StoreEvents",
]
