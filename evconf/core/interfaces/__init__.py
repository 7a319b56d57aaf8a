"""
Interface definitions for evconf's pluggable services.

These ABCs define the contracts implementations must follow, so the
configuration core can be wired to a different logger, presenter or
event dispatcher without changes.
"""

from .events import IEventDispatcher, Listener
from .logger import ILogger
from .presenter import IPresenter

__all__ = [
    "IEventDispatcher",
    "ILogger",
    "IPresenter",
    "Listener",
]
