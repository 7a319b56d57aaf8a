"""
Line scanner for configuration files.

Classifies one physical line of a configuration file:

    [ name ]              unnamed block header (type "section")
    [ type : name ]       named block header
    key = value           key/value assignment (separators ':' and '=')
    # comment             ignored, as are blank lines

Anything else is INVALID. The scanner is stateless; whether a key/value line
is allowed at this point in the file is decided by the parse driver.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from ..core.models.events import SECTION

_NAMED_HEADER_RE = re.compile(r"^\[(.*?):(.*)\]$")
_SECTION_HEADER_RE = re.compile(r"^\[(.*)\]$")
_KEY_VALUE_RE = re.compile(r"^([\w:]*\w[\w:]*)\s*[:=]+(.*)$")


class LineKind(str, Enum):
    """Classification of a scanned line."""

    BLANK = "blank"
    NAMED_HEADER = "named_header"
    SECTION_HEADER = "section_header"
    KEY_VALUE = "key_value"
    INVALID = "invalid"


@dataclass(frozen=True)
class ScannedLine:
    """A classified line.

    Attributes:
        kind: What the line is
        text: The trimmed line
        block_type: Block type for header lines
        block_name: Block name for header lines
        key: Key for key/value lines
        value: Trimmed value literal text for key/value lines
    """

    kind: LineKind
    text: str
    block_type: str | None = None
    block_name: str | None = None
    key: str | None = None
    value: str | None = None

    @property
    def is_header(self) -> bool:
        return self.kind in (LineKind.NAMED_HEADER, LineKind.SECTION_HEADER)


def scan_line(raw: str) -> ScannedLine:
    """Classify one raw line.

    Examples:
        >>> scan_line("[ cookies : sugar ]").block_type
        'cookies'
        >>> scan_line("[ limits ]").block_type
        'section'
        >>> scan_line("favorite = 'snickerdoodle'").key
        'favorite'
    """
    line = raw.strip()

    if not line or line.startswith("#"):
        return ScannedLine(kind=LineKind.BLANK, text=line)

    match = _NAMED_HEADER_RE.match(line)
    if match:
        return ScannedLine(
            kind=LineKind.NAMED_HEADER,
            text=line,
            block_type=match.group(1).strip(),
            block_name=match.group(2).strip(),
        )

    match = _SECTION_HEADER_RE.match(line)
    if match:
        return ScannedLine(
            kind=LineKind.SECTION_HEADER,
            text=line,
            block_type=SECTION,
            block_name=match.group(1).strip(),
        )

    match = _KEY_VALUE_RE.match(line)
    if match:
        return ScannedLine(
            kind=LineKind.KEY_VALUE,
            text=line,
            key=match.group(1).strip(),
            value=match.group(2).strip(),
        )

    return ScannedLine(kind=LineKind.INVALID, text=line)
