"""DragDropManager — framework-neutral drag and drop event hub.

Elements register as *draggables* or *drop targets* under a hashable key,
and any number of *monitors* observe every gesture. A pointer source (the
Qt board scene, or a test) drives a gesture with :meth:`start_drag`,
:meth:`update_targets`, :meth:`drop` and :meth:`cancel`; the manager turns
that into enter / leave / drop callbacks.

Events are delivered synchronously and one at a time, so a handler
always sees the effects of every earlier handler.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

_LOGGER = logging.getLogger(__name__)

DragData = Mapping[str, object]


@dataclass(frozen=True, slots=True)
class DragSource:
    """The element being dragged and the data captured at drag start."""

    key: Hashable
    data: DragData


@dataclass(frozen=True, slots=True)
class DropTargetRecord:
    """A drop target under the pointer, with its data at that moment."""

    key: Hashable
    data: DragData


@dataclass(frozen=True, slots=True)
class DragEvent:
    """Payload of every callback: the source and the targets under the pointer.

    ``drop_targets`` is ordered innermost first; most consumers only look
    at the first entry.
    """

    source: DragSource
    drop_targets: tuple[DropTargetRecord, ...] = ()


EventCallback = Callable[[DragEvent], None]
CanDropCallback = Callable[[DragSource], bool]
Cleanup = Callable[[], None]


@dataclass(frozen=True, slots=True, eq=False)
class _Draggable:
    get_initial_data: Callable[[], DragData]
    on_drag_start: EventCallback | None
    on_drop: EventCallback | None


@dataclass(frozen=True, slots=True, eq=False)
class _DropTarget:
    get_data: Callable[[], DragData]
    can_drop: CanDropCallback | None
    on_drag_enter: EventCallback | None
    on_drag_leave: EventCallback | None
    on_drop: EventCallback | None


@dataclass(frozen=True, slots=True, eq=False)
class _Monitor:
    on_drag_start: EventCallback | None
    on_drop: EventCallback | None


def _freeze(data: DragData) -> DragData:
    return MappingProxyType(dict(data))


class DragDropManager:
    """Registry of draggables, drop targets and monitors for one surface."""

    def __init__(self) -> None:
        self._draggables: dict[Hashable, _Draggable] = {}
        self._targets: dict[Hashable, _DropTarget] = {}
        self._monitors: list[_Monitor] = []

        # Gesture state
        self._source: DragSource | None = None
        self._current: tuple[DropTargetRecord, ...] = ()

    # ── Registration ─────────────────────────────────────────────────────

    def draggable(
        self,
        key: Hashable,
        get_initial_data: Callable[[], DragData],
        *,
        on_drag_start: EventCallback | None = None,
        on_drop: EventCallback | None = None,
    ) -> Cleanup:
        """Register a draggable element; returns a function that removes it."""
        entry = _Draggable(get_initial_data, on_drag_start, on_drop)
        self._draggables[key] = entry

        def cleanup() -> None:
            if self._draggables.get(key) is entry:
                del self._draggables[key]

        return cleanup

    def drop_target(
        self,
        key: Hashable,
        get_data: Callable[[], DragData],
        *,
        can_drop: CanDropCallback | None = None,
        on_drag_enter: EventCallback | None = None,
        on_drag_leave: EventCallback | None = None,
        on_drop: EventCallback | None = None,
    ) -> Cleanup:
        """Register a drop target; returns a function that removes it."""
        entry = _DropTarget(get_data, can_drop, on_drag_enter, on_drag_leave, on_drop)
        self._targets[key] = entry

        def cleanup() -> None:
            if self._targets.get(key) is entry:
                del self._targets[key]

        return cleanup

    def monitor(
        self,
        *,
        on_drag_start: EventCallback | None = None,
        on_drop: EventCallback | None = None,
    ) -> Cleanup:
        """Observe every gesture on this surface."""
        entry = _Monitor(on_drag_start, on_drop)
        self._monitors.append(entry)

        def cleanup() -> None:
            if entry in self._monitors:
                self._monitors.remove(entry)

        return cleanup

    def is_draggable(self, key: Hashable) -> bool:
        return key in self._draggables

    # ── Gesture state ────────────────────────────────────────────────────

    @property
    def is_dragging(self) -> bool:
        return self._source is not None

    @property
    def source(self) -> DragSource | None:
        return self._source

    @property
    def drop_targets(self) -> tuple[DropTargetRecord, ...]:
        return self._current

    # ── Driving API ──────────────────────────────────────────────────────

    def start_drag(self, key: Hashable) -> bool:
        """Begin a gesture on draggable *key*. Returns ``False`` if refused."""
        if self._source is not None:
            _LOGGER.debug("Drag already in progress, ignoring start on %r", key)
            return False
        entry = self._draggables.get(key)
        if entry is None:
            _LOGGER.debug("No draggable registered for %r", key)
            return False

        self._source = DragSource(key, _freeze(entry.get_initial_data()))
        self._current = ()
        event = DragEvent(self._source)
        if entry.on_drag_start is not None:
            entry.on_drag_start(event)
        for mon in list(self._monitors):
            if mon.on_drag_start is not None:
                mon.on_drag_start(event)
        return True

    def update_targets(self, keys: Sequence[Hashable]) -> None:
        """Report the drop targets now under the pointer, innermost first.

        Targets that are unknown or whose ``can_drop`` refuses the source
        are skipped. Leave callbacks fire before enter callbacks.
        """
        source = self._source
        if source is None:
            return

        records: list[DropTargetRecord] = []
        for key in keys:
            target = self._targets.get(key)
            if target is None:
                continue
            if target.can_drop is not None and not target.can_drop(source):
                continue
            records.append(DropTargetRecord(key, _freeze(target.get_data())))

        previous = self._current
        self._current = tuple(records)
        old_keys = {r.key for r in previous}
        new_keys = {r.key for r in self._current}
        event = DragEvent(source, self._current)

        for record in previous:
            if record.key in new_keys:
                continue
            target = self._targets.get(record.key)
            if target is not None and target.on_drag_leave is not None:
                target.on_drag_leave(event)
        for record in self._current:
            if record.key in old_keys:
                continue
            target = self._targets.get(record.key)
            if target is not None and target.on_drag_enter is not None:
                target.on_drag_enter(event)

    def drop(self) -> bool:
        """Finish the gesture at the current pointer location.

        Drop targets are notified first, then the draggable, then the
        monitors. Returns ``False`` when no gesture was active.
        """
        source = self._source
        if source is None:
            return False

        event = DragEvent(source, self._current)
        self._source = None
        self._current = ()

        for record in event.drop_targets:
            target = self._targets.get(record.key)
            if target is not None and target.on_drop is not None:
                target.on_drop(event)
        entry = self._draggables.get(source.key)
        if entry is not None and entry.on_drop is not None:
            entry.on_drop(event)
        for mon in list(self._monitors):
            if mon.on_drop is not None:
                mon.on_drop(event)
        return True

    def cancel(self) -> bool:
        """Abandon the gesture: leave every target, then drop on nothing."""
        if self._source is None:
            return False
        self.update_targets(())
        return self.drop()
