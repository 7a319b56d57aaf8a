"""
Presenter interface definitions for CLI output.

Commands hand finished data to an IPresenter; how it ends up on the
terminal (plain text, JSON) is the presenter's business.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..models.parse import ChangeRecord


class IPresenter(ABC):
    """Interface for user-facing output."""

    @abstractmethod
    def print(self, message: str) -> None:
        """Print a message to output."""

    @abstractmethod
    def print_error(self, message: str) -> None:
        """Print an error message."""

    @abstractmethod
    def print_block(self, block_type: str, block_name: str, entries: dict[str, Any]) -> None:
        """
        Print one configuration block with its keys and values.

        Args:
            block_type: Block type ("section" for unnamed blocks)
            block_name: Block name
            entries: Mapping of key to value
        """

    @abstractmethod
    def print_change(self, change: ChangeRecord) -> None:
        """
        Print a single change event.

        Args:
            change: The recorded change
        """
