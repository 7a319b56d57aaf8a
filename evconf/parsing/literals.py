"""
Value literal parser.

Turns the right-hand side of a key/value line into a Value:

    'single' or "double" quoted strings
    numbers: 10, -3, 2.5, .5, 1e3
    switches: on (1) and off (0)
    lists: [1, 'two', [3, 4]]   (nesting allowed, trailing comma allowed)
    ranges: 1..5 or 'a'..'e'    (expanded eagerly and inclusively)

A range is a list on its own and is spliced into an enclosing list, so
['a'..'c', 'z'] is ['a', 'b', 'c', 'z']. A '#' outside a string starts a
trailing comment.

This is a small recursive-descent parser over a fixed grammar. It never
evaluates code.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union

from ..core.exceptions import ValueSyntaxError

Value = Union[str, int, float, list]

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)(?:[eE][+-]?\d+)?")
_DOUBLE_QUOTE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}
_WORD_RE = re.compile(r"[A-Za-z_]\w*")
# Bare switch words. off is 0: None is reserved for absent keys.
KEYWORDS = {"on": 1, "off": 0}

# token kinds
STRING = "string"
NUMBER = "number"
LBRACKET = "["
RBRACKET = "]"
COMMA = ","
RANGE = ".."
END = "end"


@dataclass(frozen=True)
class Token:
    kind: str
    value: Any
    position: int


class _Range:
    """Marker for an expanded range inside a list, so it can be spliced."""

    __slots__ = ("items",)

    def __init__(self, items: list) -> None:
        self.items = items


def tokenize(text: str) -> list[Token]:
    """Split a value literal into tokens.

    Raises:
        ValueSyntaxError: On an unterminated string or an unknown character
    """
    tokens: list[Token] = []
    pos = 0
    length = len(text)

    while pos < length:
        char = text[pos]

        if char.isspace():
            pos += 1
            continue

        if char == "#":
            break

        if char in "'\"":
            value, end = _read_string(text, pos)
            tokens.append(Token(STRING, value, pos))
            pos = end
            continue

        if text.startswith("..", pos):
            tokens.append(Token(RANGE, "..", pos))
            pos += 2
            continue

        if char in "[],":
            tokens.append(Token(char, char, pos))
            pos += 1
            continue

        match = _NUMBER_RE.match(text, pos)
        if match:
            literal = match.group(0)
            if any(c in literal for c in ".eE"):
                number: int | float = float(literal)
            else:
                number = int(literal)
            tokens.append(Token(NUMBER, number, pos))
            pos = match.end()
            continue

        match = _WORD_RE.match(text, pos)
        if match:
            word = match.group(0)
            if word not in KEYWORDS:
                raise ValueSyntaxError(f"unknown keyword {word!r}", text=text, position=pos)
            tokens.append(Token(NUMBER, KEYWORDS[word], pos))
            pos = match.end()
            continue

        raise ValueSyntaxError(f"unexpected character {char!r}", text=text, position=pos)

    tokens.append(Token(END, None, pos))
    return tokens


def _read_string(text: str, start: int) -> tuple[str, int]:
    """Read a quoted string starting at the opening quote.

    Backslash escapes the quote character and itself. Double-quoted strings
    also understand \\n, \\t and \\r.
    """
    quote = text[start]
    chars: list[str] = []
    pos = start + 1

    while pos < len(text):
        char = text[pos]
        if char == quote:
            return "".join(chars), pos + 1
        if char == "\\" and pos + 1 < len(text):
            following = text[pos + 1]
            if following in (quote, "\\"):
                chars.append(following)
            elif quote == '"':
                chars.append(_DOUBLE_QUOTE_ESCAPES.get(following, following))
            else:
                chars.append(char + following)
            pos += 2
            continue
        chars.append(char)
        pos += 1

    raise ValueSyntaxError("unterminated string", text=text, position=start)


class _LiteralParser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.tokens = tokenize(text)
        self.index = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.index]

    def advance(self) -> Token:
        token = self.tokens[self.index]
        if token.kind != END:
            self.index += 1
        return token

    def error(self, message: str, token: Token | None = None) -> ValueSyntaxError:
        position = (token or self.current).position
        return ValueSyntaxError(message, text=self.text, position=position)

    def parse(self) -> Value:
        if self.current.kind == END:
            raise self.error("empty value")
        value = self.element()
        if self.current.kind != END:
            raise self.error(f"unexpected {self.current.kind!r} after value")
        if isinstance(value, _Range):
            return value.items
        return value

    def element(self) -> Value | _Range:
        start = self.current
        value = self.atom()
        if self.current.kind != RANGE:
            return value
        self.advance()
        end_token = self.current
        end = self.atom()
        return _Range(self.expand(value, end, start, end_token))

    def atom(self) -> Value:
        token = self.current
        if token.kind in (STRING, NUMBER):
            self.advance()
            return token.value
        if token.kind == LBRACKET:
            return self.sequence()
        if token.kind == END:
            raise self.error("unexpected end of value")
        raise self.error(f"unexpected {token.kind!r}")

    def sequence(self) -> list:
        self.advance()  # [
        items: list = []
        while self.current.kind != RBRACKET:
            item = self.element()
            if isinstance(item, _Range):
                items.extend(item.items)
            else:
                items.append(item)
            if self.current.kind == COMMA:
                self.advance()
                continue
            if self.current.kind != RBRACKET:
                if self.current.kind == END:
                    raise self.error("unterminated list")
                raise self.error(f"expected ',' or ']', got {self.current.kind!r}")
        self.advance()  # ]
        return items

    def expand(self, first: Value, last: Value, first_token: Token, last_token: Token) -> list:
        if _is_int(first) and _is_int(last):
            return list(range(first, last + 1))

        if isinstance(first, str) and isinstance(last, str):
            if len(first) != 1:
                raise self.error("range endpoints must be single characters", first_token)
            if len(last) != 1:
                raise self.error("range endpoints must be single characters", last_token)
            return [chr(code) for code in range(ord(first), ord(last) + 1)]

        raise self.error(
            "range endpoints must both be integers or both be single characters",
            first_token,
        )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_value(text: str) -> Value:
    """Parse a value literal.

    Args:
        text: Literal text, e.g. "['a'..'c']"

    Returns:
        The parsed value; ranges come back as expanded lists

    Raises:
        ValueSyntaxError: If the text is not a valid literal

    Examples:
        >>> parse_value("20")
        20
        >>> parse_value("['a'..'c']")
        ['a', 'b', 'c']
        >>> parse_value('"snickerdoodle"')
        'snickerdoodle'
    """
    return _LiteralParser(text).parse()


def values_equal(a: Any, b: Any) -> bool:
    """Structural equality between two stored values.

    Strings compare by content, numbers by numeric value (10 == 10.0), lists
    element-wise. A string never equals a number. None stands for an absent
    value and only equals None.
    """
    if a is None or b is None:
        return a is None and b is None

    if isinstance(a, list) or isinstance(b, list):
        if not (isinstance(a, list) and isinstance(b, list)) or len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))

    if isinstance(a, str) or isinstance(b, str):
        return isinstance(a, str) and isinstance(b, str) and a == b

    return a == b
