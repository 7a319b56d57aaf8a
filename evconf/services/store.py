"""
In-memory configuration store.

Values live in a three-level mapping: block type -> block name -> key -> value.
Unnamed blocks use the reserved type "section". The store only grows or
overwrites; keys that disappear from a later reload keep their old value.
set_if_changed() is the only way values are written; readers get copies.
"""

from __future__ import annotations

import copy
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union

from ..core.exceptions import BlockReferenceError
from ..core.models.events import SECTION
from ..parsing.literals import values_equal

BlockRef = Union[str, Sequence[str]]


@dataclass(frozen=True)
class StoreUpdate:
    """Outcome of set_if_changed().

    Attributes:
        changed: Whether the value was committed
        old: Previous value, None if the key was absent
    """

    changed: bool
    old: Any = None


def resolve_block(block: BlockRef) -> tuple[str, str]:
    """Normalize a block reference to a (type, name) pair.

    A plain string names an unnamed block. A two-item tuple or list is
    (type, name).

    Raises:
        BlockReferenceError: For anything else

    Examples:
        >>> resolve_block("limits")
        ('section', 'limits')
        >>> resolve_block(["cookies", "sugar"])
        ('cookies', 'sugar')
    """
    if isinstance(block, str):
        return SECTION, block
    if isinstance(block, (tuple, list)) and len(block) == 2:
        block_type, block_name = block
        if isinstance(block_type, str) and isinstance(block_name, str):
            return block_type, block_name
    raise BlockReferenceError(block)


class ConfigurationStore:
    """Nested mapping of configuration values.

    The backing dict can be supplied by the caller; it is then mutated in
    place, so the caller's reference always reflects the latest load.
    """

    def __init__(self, data: dict[str, dict[str, dict[str, Any]]] | None = None) -> None:
        self._data = data if data is not None else {}

    def _block(self, block: BlockRef) -> dict[str, Any] | None:
        block_type, block_name = resolve_block(block)
        return self._data.get(block_type, {}).get(block_name)

    def get(self, block: BlockRef, key: str) -> Any:
        """Return the value of a key, or None if the block or key is absent."""
        entries = self._block(block)
        if not entries:
            return None
        return copy.deepcopy(entries.get(key))

    def has_block(self, block: BlockRef) -> bool:
        """Whether the block holds at least one key."""
        return bool(self._block(block))

    def names_of_block_type(self, block_type: str) -> set[str]:
        """Names of all blocks of a type, e.g. every [ listen : ... ] block."""
        return set(self._data.get(block_type, {}))

    def block_types(self) -> set[str]:
        """All block types present, including "section"."""
        return {block_type for block_type, blocks in self._data.items() if blocks}

    def keys_of_block(self, block: BlockRef) -> set[str]:
        return set(self._block(block) or {})

    def values_of_block(self, block: BlockRef) -> list[Any]:
        return copy.deepcopy(list((self._block(block) or {}).values()))

    def entries_of_block(self, block: BlockRef) -> dict[str, Any]:
        """Deep copy of the key -> value mapping of a block (empty if absent)."""
        return copy.deepcopy(dict(self._block(block) or {}))

    def set_if_changed(self, block_type: str, block_name: str, key: str, value: Any) -> StoreUpdate:
        """Commit a value unless it equals the stored one.

        Absence counts as a distinct prior state, so the first assignment of a
        key always commits.

        Returns:
            StoreUpdate with changed=True and the previous value if committed,
            changed=False otherwise
        """
        entries = self._data.setdefault(block_type, {}).setdefault(block_name, {})

        if key in entries and values_equal(entries[key], value):
            return StoreUpdate(changed=False, old=entries[key])

        old = entries.get(key)
        entries[key] = value
        return StoreUpdate(changed=True, old=old)

    def as_dict(self) -> dict[str, dict[str, dict[str, Any]]]:
        """Deep copy of the whole store, without empty blocks."""
        return {
            block_type: {name: copy.deepcopy(entries) for name, entries in blocks.items() if entries}
            for block_type, blocks in self._data.items()
            if any(blocks.values())
        }

    def __contains__(self, block: object) -> bool:
        try:
            return self.has_block(block)  # type: ignore[arg-type]
        except BlockReferenceError:
            return False

    def __len__(self) -> int:
        """Number of non-empty blocks."""
        return sum(1 for blocks in self._data.values() for entries in blocks.values() if entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(blocks={len(self)})"
