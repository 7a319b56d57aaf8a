"""
Pydantic models for evconf.

Settings sections, change event keys and parse results.
"""

from .base import EvconfBaseModel, ImmutableModel
from .config import LoggingConfig, ParserConfig
from .events import SECTION, BlockKind, EventKey, event_name_for
from .parse import ChangeRecord, ParseResult

__all__ = [
    "SECTION",
    "BlockKind",
    "ChangeRecord",
    "EventKey",
    "EvconfBaseModel",
    "ImmutableModel",
    "LoggingConfig",
    "ParseResult",
    "ParserConfig",
    "event_name_for",
]
