"""
Parse result models.

A ParseResult describes one parse_config() run: which file was read, how far
the parser got and every change that was committed and fired on the way.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .base import ImmutableModel
from .events import EventKey


class ChangeRecord(ImmutableModel):
    """One committed change.

    Attributes:
        event: Identity of the changed key
        old: Previous value (None if the key was absent)
        new: Committed value
        line: 1-based line of the assignment
    """

    event: EventKey
    old: Any = None
    new: Any
    line: int

    @property
    def event_name(self) -> str:
        """Canonical event name fired for this change."""
        return self.event.event_name

    @property
    def is_new(self) -> bool:
        """Whether the key did not exist before this change."""
        return self.old is None


@dataclass
class ParseResult:
    """Result of a successful parse_config() call."""

    path: str
    lines_read: int = 0
    changes: list[ChangeRecord] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """Whether any value changed."""
        return bool(self.changes)

    def __bool__(self) -> bool:
        """A ParseResult only exists for a completed parse."""
        return True
