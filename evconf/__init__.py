"""
evconf - event-driven configuration files.

    from evconf import Configuration

    conf = Configuration("server.conf")
    conf.on_change(("listen", "main"), "port", lambda old, new: print(old, new))
    conf.parse_config()
"""

from .configuration import Configuration, load
from .core.exceptions import (
    ConfigSyntaxError,
    ConfigurationError,
    EvconfException,
    FileOpenError,
    LineSyntaxError,
    ListenerError,
    MissingConfigFileError,
    ValueSyntaxError,
)
from .core.models.events import EventKey, event_name_for
from .core.models.parse import ChangeRecord, ParseResult
from .services.store import ConfigurationStore

__all__ = [
    "ChangeRecord",
    "ConfigSyntaxError",
    "Configuration",
    "ConfigurationError",
    "ConfigurationStore",
    "EvconfException",
    "EventKey",
    "FileOpenError",
    "LineSyntaxError",
    "ListenerError",
    "MissingConfigFileError",
    "ParseResult",
    "ValueSyntaxError",
    "event_name_for",
    "load",
]
