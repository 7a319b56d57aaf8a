"""
Logger implementation for evconf diagnostics.

Wraps stdlib logging with optional stderr and rotating-file handlers.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, ClassVar

from ..core.interfaces.logger import ILogger


class EvconfLogger(ILogger):
    """
    ILogger backed by a dedicated stdlib logger.

    Output goes to stderr and/or ~/.evconf/evconf.log depending on settings.
    With both disabled, records still reach any handlers the host
    application attaches to the "evconf" logger hierarchy.
    """

    LOG_FILE_PATH = Path.home() / ".evconf" / "evconf.log"
    MAX_FILE_SIZE = 5 * 1024 * 1024  # 5MB
    BACKUP_COUNT = 3

    LEVEL_MAP: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "evconf",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = False,
        log_file: Path | None = None,
    ) -> None:
        """
        Initialize logger.

        Args:
            name: Logger name
            level: Initial log level (debug, info, warning, error)
            console_enabled: Enable stderr output
            file_enabled: Enable rotating file output
            log_file: Override for the log file location
        """
        self._logger = logging.getLogger(name)
        self._level = self.LEVEL_MAP.get(level.lower(), logging.WARNING)
        self._logger.setLevel(self._level)

        self._console_handler: logging.Handler | None = None
        self._file_handler: logging.Handler | None = None

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        owns_output = console_enabled or file_enabled
        if owns_output:
            for handler in list(self._logger.handlers):
                self._logger.removeHandler(handler)
        # Records reach the root logger only when we do not write them ourselves.
        self._logger.propagate = not owns_output

        if console_enabled:
            console = logging.StreamHandler(sys.stderr)
            console.setLevel(self._level)
            console.setFormatter(formatter)
            self._logger.addHandler(console)
            self._console_handler = console

        if file_enabled:
            self._setup_file_handler(formatter, log_file or self.LOG_FILE_PATH)

    def _setup_file_handler(self, formatter: logging.Formatter, path: Path) -> None:
        """Set up rotating file handler."""
        path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            path,
            maxBytes=self.MAX_FILE_SIZE,
            backupCount=self.BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(self._level)
        file_handler.setFormatter(formatter)
        self._logger.addHandler(file_handler)
        self._file_handler = file_handler

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        """Set log level on the logger and all of its handlers."""
        self._level = self.LEVEL_MAP.get(level.lower(), logging.WARNING)
        self._logger.setLevel(self._level)
        for handler in (self._console_handler, self._file_handler):
            if handler:
                handler.setLevel(self._level)

    @property
    def level(self) -> int:
        return self._level


class NullLogger(ILogger):
    """No-op logger for library use without bootstrap, and for tests."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass
