"""
Core infrastructure for evconf.

This package provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for logging and settings
- Interface definitions for logger, presenter and event dispatcher
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container
from .di import resolve_or_default, try_resolve
from .exceptions import (
    BlockReferenceError,
    ConfigSyntaxError,
    ConfigurationError,
    EvconfException,
    FileOpenError,
    LineSyntaxError,
    ListenerError,
    MissingConfigFileError,
    SettingsError,
    ValueSyntaxError,
)

__all__ = [
    "BlockReferenceError",
    "ConfigSyntaxError",
    "ConfigurationError",
    "EvconfException",
    "FileOpenError",
    "LineSyntaxError",
    "ListenerError",
    "MissingConfigFileError",
    "ServiceContainer",
    "SettingsError",
    "ValueSyntaxError",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
    "resolve_or_default",
    "try_resolve",
]
