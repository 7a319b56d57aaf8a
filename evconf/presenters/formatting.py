"""
Formatting helpers for evconf CLI output.

Values are shown in the same literal syntax the configuration files use,
so output can be pasted back into a file.
"""

from __future__ import annotations

from typing import Any

from ..core.models.events import SECTION


def format_value(value: Any) -> str:
    """Render a stored value as a configuration literal.

    Examples:
        >>> format_value("snickerdoodle")
        "'snickerdoodle'"
        >>> format_value([1, ["a", 2.5]])
        "[1, ['a', 2.5]]"
        >>> format_value(None)
        '(not set)'
    """
    if value is None:
        return "(not set)"
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace("'", "\\'")
        return f"'{escaped}'"
    if isinstance(value, list):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    return repr(value)


def format_block_header(block_type: str, block_name: str) -> str:
    """Render the header line that declares a block.

    Examples:
        >>> format_block_header("section", "limits")
        '[ limits ]'
        >>> format_block_header("cookies", "sugar")
        '[ cookies : sugar ]'
    """
    if block_type == SECTION:
        return f"[ {block_name} ]"
    return f"[ {block_type} : {block_name} ]"


def parse_block_argument(text: str) -> str | tuple[str, str]:
    """Turn a CLI block argument into a block reference.

    "name" is an unnamed block, "type:name" a named one.

    Examples:
        >>> parse_block_argument("limits")
        'limits'
        >>> parse_block_argument("cookies:sugar")
        ('cookies', 'sugar')
    """
    if ":" in text:
        block_type, block_name = text.split(":", 1)
        return block_type.strip(), block_name.strip()
    return text.strip()
