"""
Event-driven configuration objects.

A Configuration is bound to one file and one store for its whole life.
parse_config() can be called again at any time ("rehash"); every key whose
value differs from the stored one is committed and then announced as a
change event:

    change:<name>:<key>          for unnamed blocks   [ name ]
    change:<type>/<name>:<key>   for named blocks     [ type : name ]

Listeners receive (old, new); old is None the first time a key appears.
Register listeners before the first parse_config() to see the initial load,
after it to see only later changes. on_change() is the stable way to attach
them.

The store never shrinks: a key removed from the file keeps its last value
and fires nothing. A syntax error stops the parse at the offending line
without undoing what earlier lines committed.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from os import PathLike
from typing import Any

from .core.di import resolve_or_default, try_resolve
from .core.exceptions import (
    ConfigurationError,
    FileOpenError,
    LineSyntaxError,
    ListenerError,
    MissingConfigFileError,
    ValueSyntaxError,
)
from .core.interfaces.events import IEventDispatcher, Listener
from .core.interfaces.logger import ILogger
from .core.models.events import EventKey
from .core.models.parse import ChangeRecord, ParseResult
from .core.settings import EvconfSettings
from .parsing.literals import parse_value
from .parsing.scanner import LineKind, scan_line
from .services.dispatcher import ChangeDispatcher
from .services.store import BlockRef, ConfigurationStore, resolve_block

DEFAULT_ENCODING = "utf-8"
BOM = "\ufeff"


def _get_logger() -> ILogger:
    from .services.logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]


def _default_encoding() -> str:
    settings = try_resolve(EvconfSettings)
    if settings is not None:
        return settings.parser.encoding
    return DEFAULT_ENCODING


def _lines(handle, path: str, encoding: str):
    """Yield the lines of an open file, turning decode errors into syntax errors.

    A byte-order mark at the start of the file is dropped.
    """
    line_number = 0
    while True:
        try:
            raw = handle.readline()
        except UnicodeDecodeError as e:
            raise LineSyntaxError(
                f"line is not valid {encoding}",
                file_path=path,
                line=line_number + 1,
            ) from e
        if not raw:
            return
        if line_number == 0 and raw.startswith(BOM):
            raw = raw[1:]
        line_number += 1
        yield raw


class Configuration:
    """A configuration file, its values and its change listeners.

    Args:
        conffile: Path of the configuration file
        store: Starting values, either a ConfigurationStore or a nested
            dict (type -> name -> key -> value) that is updated in place
        dispatcher: Event dispatcher to fire changes through
            (default: a private ChangeDispatcher)
        encoding: File encoding (default: parser.encoding setting, utf-8)

    Raises:
        MissingConfigFileError: If conffile is not given
    """

    def __init__(
        self,
        conffile: str | PathLike[str] | None,
        store: ConfigurationStore | dict | None = None,
        *,
        dispatcher: IEventDispatcher | None = None,
        encoding: str | None = None,
    ) -> None:
        if conffile is None or str(conffile) == "":
            raise MissingConfigFileError()

        self.conffile = str(conffile)
        if isinstance(store, ConfigurationStore):
            self.store = store
        else:
            self.store = ConfigurationStore(store)
        self.dispatcher = dispatcher or ChangeDispatcher()
        self.encoding = encoding or _default_encoding()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.conffile!r}, blocks={len(self.store)})"

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    def parse_config(self) -> ParseResult:
        """Read the bound file and apply every changed value.

        Returns:
            ParseResult with all changes committed during this call

        Raises:
            FileOpenError: If the file cannot be opened; nothing is changed
            LineSyntaxError: For an unrecognized line, or a key/value line
                before any block header
            ValueSyntaxError: For an invalid value literal
            ListenerError: If a change listener raised; the change that
                fired it is already committed
        """
        logger = _get_logger()
        result = ParseResult(path=self.conffile)
        logger.debug("Parsing %s", self.conffile)

        try:
            handle = open(self.conffile, encoding=self.encoding)
        except OSError as e:
            raise FileOpenError(
                f"cannot open configuration file: {e.strerror or e}",
                file_path=self.conffile,
                cause=e,
            ) from e

        block: tuple[str, str] | None = None

        with handle:
            for line_number, raw in enumerate(_lines(handle, self.conffile, self.encoding), start=1):
                result.lines_read = line_number
                scanned = scan_line(raw)

                if scanned.kind == LineKind.BLANK:
                    continue

                if scanned.is_header:
                    block = (scanned.block_type, scanned.block_name)  # type: ignore[assignment]
                    continue

                if scanned.kind == LineKind.KEY_VALUE and block is None:
                    raise LineSyntaxError(
                        "key/value line outside of any block",
                        text=scanned.text,
                        file_path=self.conffile,
                        line=line_number,
                    )

                if scanned.kind != LineKind.KEY_VALUE:
                    raise LineSyntaxError(
                        "invalid line",
                        text=scanned.text,
                        file_path=self.conffile,
                        line=line_number,
                    )

                try:
                    value = parse_value(scanned.value or "")
                except ValueSyntaxError as e:
                    e.file_path = self.conffile
                    e.line = line_number
                    raise

                change = self._apply(block, scanned.key, value, line_number)  # type: ignore[arg-type]
                if change is not None:
                    result.changes.append(change)

        logger.info(
            "Parsed %s: %d lines, %d changes",
            self.conffile,
            result.lines_read,
            len(result.changes),
        )
        return result

    def _apply(self, block: tuple[str, str], key: str, value: Any, line_number: int) -> ChangeRecord | None:
        block_type, block_name = block
        update = self.store.set_if_changed(block_type, block_name, key, value)
        if not update.changed:
            return None

        event = EventKey.for_block(block_type, block_name, key)
        _get_logger().debug("%s: %r -> %r (line %d)", event.event_name, update.old, value, line_number)

        try:
            # Listeners get their own copy; the stored value only changes via set_if_changed().
            self.dispatcher.fire(event.event_name, update.old, copy.deepcopy(value))
        except Exception as e:
            raise ListenerError(
                event.event_name,
                file_path=self.conffile,
                line=line_number,
                cause=e,
            ) from e

        return ChangeRecord(event=event, old=update.old, new=copy.deepcopy(value), line=line_number)

    def rehash(self) -> bool:
        """Reparse the file, logging instead of raising on file or syntax errors.

        Meant for long-running hosts reloading on a signal. Listener errors
        are not configuration errors and still propagate.

        Returns:
            True if the whole file was applied
        """
        try:
            self.parse_config()
        except ConfigurationError as e:
            _get_logger().warning("Rehash of %s failed: %s", self.conffile, e)
            return False
        return True

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get(self, block: BlockRef, key: str) -> Any:
        """Value of a key; block is a name or a (type, name) pair."""
        return self.store.get(block, key)

    def has_block(self, block: BlockRef) -> bool:
        return self.store.has_block(block)

    def names_of_block_type(self, block_type: str) -> set[str]:
        return self.store.names_of_block_type(block_type)

    names_of_block = names_of_block_type

    def keys_of_block(self, block: BlockRef) -> set[str]:
        return self.store.keys_of_block(block)

    def values_of_block(self, block: BlockRef) -> list[Any]:
        return self.store.values_of_block(block)

    def entries_of_block(self, block: BlockRef) -> dict[str, Any]:
        return self.store.entries_of_block(block)

    hash_of_block = entries_of_block

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    @staticmethod
    def event_name(block: BlockRef, key: str) -> str:
        """Canonical change event name for a key of a block."""
        block_type, block_name = resolve_block(block)
        return EventKey.for_block(block_type, block_name, key).event_name

    def on_change(
        self,
        block: BlockRef,
        key: str,
        callback: Callable[[Any, Any], Any],
        *,
        priority: int = 0,
        name: str | None = None,
    ) -> Listener:
        """Call callback(old, new) whenever the key changes.

        Args:
            block: Block name, or (type, name) for named blocks
            key: Key within the block
            callback: Receives the old and new value
            priority: Higher priorities run first
            name: Identifier for off_change()

        Example:
            >>> conf.on_change(("cookies", "sugar"), "favorite", print)  # doctest: +SKIP
        """
        return self.dispatcher.register(
            self.event_name(block, key),
            callback,
            priority=priority,
            name=name,
        )

    def off_change(self, block: BlockRef, key: str, name: str) -> int:
        """Remove the named listeners of a key. Returns how many were removed."""
        return self.dispatcher.unregister(self.event_name(block, key), name)


def load(conffile: str | PathLike[str], store: ConfigurationStore | dict | None = None) -> Configuration:
    """Create a Configuration and parse it once."""
    conf = Configuration(conffile, store)
    conf.parse_config()
    return conf


__all__ = ["Configuration", "load"]
