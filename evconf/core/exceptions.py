"""
Custom exception hierarchy for evconf.

Every error raised while constructing, parsing or querying a configuration
derives from EvconfException, so host applications can catch the whole family
or pick out the specific failure they care about.
"""

from __future__ import annotations


class EvconfException(Exception):
    """
    Base exception for all evconf errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (file paths, line numbers, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration file errors
# =============================================================================


class ConfigurationError(EvconfException):
    """Base class for errors loading a configuration file."""

    pass


class MissingConfigFileError(ConfigurationError, ValueError):
    """
    A Configuration was constructed without a file path.

    Inherits from ValueError since it is an invalid constructor argument.
    """

    recoverable: bool = False

    def __init__(self, message: str = "no configuration file (conffile) specified") -> None:
        super().__init__(message)


class FileOpenError(ConfigurationError):
    """
    The bound configuration file cannot be opened for reading.

    Nothing has been read when this is raised, so the store is untouched.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        self.file_path = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigSyntaxError(ConfigurationError):
    """
    Base class for fatal syntax errors in a configuration file.

    Attributes:
        file_path: Path of the file being parsed (None if not known yet)
        line: 1-based line number of the offending line (None if not known yet)
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        line: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.file_path = file_path
        self.line = line
        super().__init__(message, context=context, cause=cause)

    @property
    def location(self) -> str:
        """Return 'path:line' for the error, as far as it is known."""
        if self.file_path and self.line is not None:
            return f"{self.file_path}:{self.line}"
        if self.file_path:
            return self.file_path
        if self.line is not None:
            return f"line {self.line}"
        return "<unknown>"

    def __str__(self) -> str:
        if self.file_path is None and self.line is None:
            return super().__str__()
        return f"{self.location}: {super().__str__()}"


class LineSyntaxError(ConfigSyntaxError):
    """
    A line matches none of the recognized shapes.

    Also raised for a key/value line that appears before any block header.
    """

    def __init__(
        self,
        message: str,
        *,
        text: str | None = None,
        file_path: str | None = None,
        line: int | None = None,
    ) -> None:
        self.text = text
        ctx = {"text": text} if text is not None else None
        super().__init__(message, file_path=file_path, line=line, context=ctx)


class ValueSyntaxError(ConfigSyntaxError):
    """
    The right-hand side of a key/value line is not a valid value literal.

    The literal parser does not know which file it is reading, so the parse
    driver fills in file_path and line before re-raising.
    """

    def __init__(
        self,
        message: str,
        *,
        text: str,
        position: int | None = None,
        file_path: str | None = None,
        line: int | None = None,
    ) -> None:
        self.text = text
        self.position = position
        ctx: dict = {"text": text}
        if position is not None:
            ctx["position"] = position
        super().__init__(message, file_path=file_path, line=line, context=ctx)


# =============================================================================
# Addressing and listener errors
# =============================================================================


class BlockReferenceError(EvconfException, ValueError):
    """A block reference is neither a name nor a (type, name) pair."""

    recoverable: bool = False

    def __init__(self, block: object) -> None:
        super().__init__(
            "block must be a name or a (type, name) pair",
            context={"block": block},
        )


class ListenerError(EvconfException):
    """
    A change listener raised while a configuration file was being applied.

    The value that triggered the event has already been committed when this
    is raised. The original exception is available as __cause__.
    """

    def __init__(
        self,
        event_name: str,
        *,
        file_path: str | None = None,
        line: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.event_name = event_name
        self.file_path = file_path
        self.line = line
        ctx: dict = {"event": event_name}
        if file_path:
            ctx["file_path"] = file_path
        if line is not None:
            ctx["line"] = line
        reason = f": {cause}" if cause is not None else ""
        super().__init__(f"listener for {event_name} failed{reason}", context=ctx, cause=cause)


# =============================================================================
# Tool settings errors
# =============================================================================


class SettingsError(EvconfException):
    """
    Error reading evconf's own settings file.

    Raised for TOML parsing errors and unreadable files.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = {"file_path": file_path} if file_path else None
        super().__init__(message, context=ctx, cause=cause)
