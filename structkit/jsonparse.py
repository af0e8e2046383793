"""Small lenient JSON-like parser returning the value and the characters consumed.

Recognised values are numbers, double-quoted strings with backslash escapes,
arrays and objects. Anything else (including ``true``, ``false`` and ``null``)
parses as ``None`` with nothing consumed. Objects keep the first value given
for a repeated key. Parsing a container stops with a consumed count of zero as
soon as an element cannot be parsed; what was gathered so far is returned.
"""

from __future__ import annotations

import math
import re
from typing import Any

_WHITESPACE = " \n\r\t\v\f"
_NUMBER_RE = re.compile(r"[+-]?[0-9]+(\.[0-9]*)?([eE][+-]?[0-9]+)?")
_INT_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"-?[0-9]+(\.[0-9]*)?([eE][+-]?[0-9]+)?")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "0": "\0",
    "t": "\t",
    "v": "\v",
    "f": "\f",
    "b": "\b",
    "a": "\a",
}


def unescape_char(c: str) -> str:
    """Return the character a backslash escape ``\\c`` stands for."""
    return _ESCAPES.get(c, c)


def _parse_number(text: str) -> int | float | None:
    if _INT_RE.fullmatch(text):
        number = int(text)
        if _INT_MIN <= number <= _INT_MAX:
            return number
    if _FLOAT_RE.fullmatch(text):
        number = float(text)
        if not math.isinf(number):
            return number
    return None


def _parse_string(text: str) -> tuple[str, int]:
    chars: list[str] = []
    escaped = False
    i = 1
    while i < len(text):
        ch = text[i]
        if escaped:
            chars.append(unescape_char(ch))
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == '"':
            i += 1
            break
        else:
            chars.append(ch)
        i += 1
    return "".join(chars), i


def _parse_array(text: str) -> tuple[list, int]:
    items: list[Any] = []
    i = 1
    while i < len(text):
        if text[i] == "]":
            i += 1
            break
        value, eaten = parse(text[i:])
        if eaten == 0:
            return items, 0
        items.append(value)
        i += eaten
        if i < len(text) and text[i] == ",":
            i += 1
    return items, i


def _parse_object(text: str) -> tuple[dict, int]:
    result: dict[str, Any] = {}
    i = 1
    while i < len(text):
        if text[i] == "}":
            i += 1
            break
        key, eaten = parse(text[i:])
        if eaten == 0:
            return result, 0
        i += eaten
        if not isinstance(key, str):
            return result, 0
        if i < len(text) and text[i] == ":":
            i += 1
        value, eaten = parse(text[i:])
        if eaten == 0:
            return result, 0
        i += eaten
        result.setdefault(key, value)
        if i < len(text) and text[i] == ",":
            i += 1
    return result, i


def parse(text: str) -> tuple[Any, int]:
    """Parse one value at the start of ``text``; return it and the length consumed."""
    if not text:
        return None, 0
    offset = len(text) - len(text.lstrip(_WHITESPACE))
    if 0 < offset < len(text):
        value, eaten = parse(text[offset:])
        return value, eaten + offset
    first = text[0]
    if first.isascii() and first.isdigit() or first in "+-":
        match = _NUMBER_RE.search(text)
        if match:
            literal = match.group(0)
            number = _parse_number(literal)
            if number is not None:
                return number, len(literal)
    elif first == '"':
        return _parse_string(text)
    elif first == "[":
        return _parse_array(text)
    elif first == "{":
        return _parse_object(text)
    return None, 0