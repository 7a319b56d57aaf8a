"""
Logger interface for internal diagnostic output.

Parsing and change dispatch report through ILogger; user-facing CLI output
goes through IPresenter instead. Library callers that never bootstrap the
container get a NullLogger and see nothing.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Interface for evconf's diagnostic logging."""

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug-level message."""

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an info-level message."""

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning-level message."""

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an error-level message."""

    @abstractmethod
    def set_level(self, level: str) -> None:
        """
        Set the logging level.

        Args:
            level: One of 'debug', 'info', 'warning', 'error'
        """
