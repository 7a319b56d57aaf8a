"""
Services behind a Configuration: value store, change dispatcher, logging.
"""

from .dispatcher import ChangeDispatcher
from .store import BlockRef, ConfigurationStore, StoreUpdate, resolve_block

__all__ = [
    "BlockRef",
    "ChangeDispatcher",
    "ConfigurationStore",
    "StoreUpdate",
    "resolve_block",
]
