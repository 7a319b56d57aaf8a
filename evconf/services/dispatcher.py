"""
Synchronous change-event dispatcher.

Listeners are kept per canonical event name and run inline, highest
priority first. Exceptions raised by a listener propagate to whoever called
fire(); the remaining listeners of that event do not run.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable

from ..core.di import resolve_or_default
from ..core.interfaces.events import IEventDispatcher, Listener
from ..core.interfaces.logger import ILogger


def _get_logger() -> ILogger:
    from .logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]


class ChangeDispatcher(IEventDispatcher):
    """In-process IEventDispatcher keyed by canonical event name."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = defaultdict(list)

    def register(
        self,
        event_name: str,
        callback: Callable[..., Any],
        *,
        priority: int = 0,
        name: str | None = None,
    ) -> Listener:
        if not callable(callback):
            raise TypeError(f"listener for {event_name} is not callable: {callback!r}")

        listener = Listener(event_name=event_name, callback=callback, priority=priority, name=name)
        listeners = self._listeners[event_name]
        listeners.append(listener)
        listeners.sort(key=lambda entry: entry.sort_key)

        _get_logger().debug(
            "Registered listener %s for %s (priority %d)",
            name or getattr(callback, "__qualname__", repr(callback)),
            event_name,
            priority,
        )
        return listener

    def unregister(self, event_name: str, name: str) -> int:
        listeners = self._listeners.get(event_name)
        if not listeners:
            return 0

        kept = [listener for listener in listeners if listener.name != name]
        removed = len(listeners) - len(kept)
        if kept:
            self._listeners[event_name] = kept
        else:
            del self._listeners[event_name]
        return removed

    def fire(self, event_name: str, *args: Any) -> int:
        # Snapshot, so listeners may (un)register while the event is firing.
        listeners = list(self._listeners.get(event_name, ()))
        for listener in listeners:
            listener.callback(*args)
        return len(listeners)

    def listeners(self, event_name: str) -> list[Listener]:
        return list(self._listeners.get(event_name, ()))

    def has_listeners(self, event_name: str) -> bool:
        return bool(self._listeners.get(event_name))

    def clear(self) -> None:
        """Drop every registered listener."""
        self._listeners.clear()
