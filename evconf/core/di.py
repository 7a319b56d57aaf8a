"""
Dependency injection helpers for evconf.

Library code resolves its collaborators (logger, settings) lazily through
these helpers, so evconf works without anyone bootstrapping the container
and picks up configured services once someone has.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def resolve_or_default(
    interface: type[T],
    default_factory: Callable[[], T],
) -> T:
    """Resolve a service from the container or create a default.

    Args:
        interface: The interface type to resolve
        default_factory: Callable that creates the fallback implementation

    Returns:
        Resolved service instance or default

    Example:
        >>> from evconf.core.interfaces.logger import ILogger
        >>> from evconf.services.logging import NullLogger
        >>> logger = resolve_or_default(ILogger, NullLogger)
    """
    instance = try_resolve(interface)
    if instance is not None:
        return instance
    return default_factory()


def try_resolve(interface: type[T]) -> T | None:
    """Try to resolve a service from the container.

    Returns None if the service isn't registered or its provider fails,
    rather than raising.
    """
    try:
        from .container import get_container

        return get_container().try_resolve(interface)
    except Exception:
        # Provider failed to build the service (e.g. unreadable settings)
        return None
