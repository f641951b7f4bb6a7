"""Observer registry that forwards calls to every registered observer."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable
from typing import Generic, Optional, TypeVar

SinkT = TypeVar("SinkT")

ObserverId = int


class Dispatcher(Generic[SinkT]):
    """Keeps observers under process-wide unique ids and dispatches to them."""

    _ids = itertools.count(400_000_001)
    _id_lock = threading.Lock()

    def __init__(self) -> None:
        self._observers: dict[ObserverId, SinkT] = {}

    def register_observer(self, observer: Optional[SinkT]) -> ObserverId:
        """Register *observer* and return its id; ``None`` is refused with 0."""
        if observer is None:
            return 0
        with Dispatcher._id_lock:
            observer_id = next(Dispatcher._ids)
        self._observers[observer_id] = observer
        return observer_id

    def unregister_observer(self, observer_id: ObserverId) -> bool:
        """Remove an observer; return whether it was registered."""
        return self._observers.pop(observer_id, None) is not None

    def clear_observers(self) -> None:
        """Remove all observers."""
        self._observers.clear()

    def dispatch(self, func: Optional[Callable[[SinkT], object]]) -> None:
        """Call *func* with each observer, in order of registration."""
        if func is None:
            return
        for observer in list(self._observers.values()):
            if observer is None:
                continue
            func(observer)