"""
Change event models.

An EventKey identifies the change of one key in one block. Its canonical
string form is a public contract that direct listeners may depend on:

    change:<name>:<key>          for unnamed blocks (type "section")
    change:<type>/<name>:<key>   for named blocks
"""

from __future__ import annotations

from enum import Enum

from .base import ImmutableModel

SECTION = "section"
EVENT_PREFIX = "change"


class BlockKind(str, Enum):
    """Whether a block was declared with a type or not."""

    SECTION = "section"
    NAMED = "named"


class EventKey(ImmutableModel):
    """Identity of a change event.

    Attributes:
        kind: SECTION for unnamed blocks, NAMED otherwise
        type: Block type (None for unnamed blocks)
        name: Block name
        key: Configuration key within the block
    """

    kind: BlockKind
    type: str | None = None
    name: str
    key: str

    @classmethod
    def for_block(cls, block_type: str, block_name: str, key: str) -> EventKey:
        """Build the key for a (type, name, key) triple.

        A block type of "section" is the same slot as an unnamed block.
        """
        if block_type == SECTION:
            return cls(kind=BlockKind.SECTION, name=block_name, key=key)
        return cls(kind=BlockKind.NAMED, type=block_type, name=block_name, key=key)

    @property
    def block_type(self) -> str:
        """Storage type of the block this key belongs to."""
        return self.type if self.kind == BlockKind.NAMED and self.type else SECTION

    @property
    def event_name(self) -> str:
        """Canonical event name."""
        if self.kind == BlockKind.SECTION:
            return f"{EVENT_PREFIX}:{self.name}:{self.key}"
        return f"{EVENT_PREFIX}:{self.type}/{self.name}:{self.key}"

    def __str__(self) -> str:
        return self.event_name


def event_name_for(block_type: str, block_name: str, key: str) -> str:
    """Shortcut for EventKey.for_block(...).event_name."""
    return EventKey.for_block(block_type, block_name, key).event_name
