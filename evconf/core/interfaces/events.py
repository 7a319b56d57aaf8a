"""
Event dispatcher interface definitions.

The configuration core only needs two capabilities from an event system:
register a named listener, and fire a named event with ordered arguments.
Keeping that behind an interface lets hosts plug the configuration into
whatever dispatcher they already run.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Callable

_registration_counter = count()


@dataclass(frozen=True)
class Listener:
    """A callback registered for one canonical event name.

    Attributes:
        event_name: Canonical event the listener is bound to
        callback: Called with the fired arguments, e.g. (old, new)
        priority: Higher priorities run first
        name: Optional identifier used to unregister the listener later
        order: Registration sequence number, breaks priority ties
    """

    event_name: str
    callback: Callable[..., Any]
    priority: int = 0
    name: str | None = None
    order: int = field(default_factory=lambda: next(_registration_counter))

    @property
    def sort_key(self) -> tuple[int, int]:
        """Key that sorts listeners into firing order."""
        return (-self.priority, self.order)


class IEventDispatcher(ABC):
    """
    Interface for named-event dispatch.

    Implementations invoke listeners synchronously on the calling thread and
    never suppress exceptions raised by a listener.
    """

    @abstractmethod
    def register(
        self,
        event_name: str,
        callback: Callable[..., Any],
        *,
        priority: int = 0,
        name: str | None = None,
    ) -> Listener:
        """
        Register a listener for an event.

        Args:
            event_name: Canonical event name
            callback: Callable invoked with the fired arguments
            priority: Higher runs first; ties run in registration order
            name: Optional identifier for unregister()

        Returns:
            The registered Listener
        """

    @abstractmethod
    def unregister(self, event_name: str, name: str) -> int:
        """
        Remove every listener with the given name from an event.

        Returns:
            Number of listeners removed
        """

    @abstractmethod
    def fire(self, event_name: str, *args: Any) -> int:
        """
        Invoke all listeners of an event in priority order.

        Firing an event nobody listens to is a no-op.

        Returns:
            Number of listeners invoked
        """

    @abstractmethod
    def listeners(self, event_name: str) -> list[Listener]:
        """Return the listeners of an event in firing order."""
