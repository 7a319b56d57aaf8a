"""
Console presenter for terminal output.
"""

import sys
from typing import Any

from ..core.interfaces.presenter import IPresenter
from ..core.models.parse import ChangeRecord
from .formatting import format_block_header, format_value


class ConsolePresenter(IPresenter):
    """Human-readable terminal output."""

    def __init__(self, use_color: bool = True, file=None) -> None:
        """
        Initialize console presenter.

        Args:
            use_color: Whether to use ANSI color codes
            file: Output file (defaults to sys.stdout)
        """
        self._use_color = use_color
        self._file = file

    @property
    def _out(self):
        # Resolved per call so click's CliRunner can swap sys.stdout.
        return self._file or sys.stdout

    def _color(self, stream) -> bool:
        return self._use_color and hasattr(stream, "isatty") and stream.isatty()

    def print(self, message: str) -> None:
        print(message, file=self._out)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        if self._color(sys.stderr):
            print(f"\033[91mError: {message}\033[0m", file=sys.stderr)
        else:
            print(f"Error: {message}", file=sys.stderr)

    def print_block(self, block_type: str, block_name: str, entries: dict[str, Any]) -> None:
        out = self._out
        header = format_block_header(block_type, block_name)
        if self._color(out):
            header = f"\033[1m{header}\033[0m"
        print(header, file=out)

        if not entries:
            return
        width = max(len(key) for key in entries)
        for key in sorted(entries):
            print(f"{key.ljust(width)} = {format_value(entries[key])}", file=out)
        print("", file=out)

    def print_change(self, change: ChangeRecord) -> None:
        marker = "+" if change.is_new else "~"
        line = f"{marker} {change.event_name}: {format_value(change.old)} -> {format_value(change.new)}"
        out = self._out
        if self._color(out):
            color = "92" if change.is_new else "93"
            line = f"\033[{color}m{line}\033[0m"
        print(line, file=out)
