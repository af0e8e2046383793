"""Readable text rendering of nested Python values.

Containers are shown in braces, strings are quoted, ``None`` is shown as
``nullptr`` and booleans as ``true``/``false``. An object can choose its own
rendering by defining a ``__pretty__`` method that returns a string.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping
from typing import Any


def _quoted(text: str, delim: str = '"', escape: str = "\\") -> str:
    body = "".join(escape + ch if ch in (delim, escape) else ch for ch in text)
    return f"{delim}{body}{delim}"


def _join(parts: Iterable[str]) -> str:
    return "{" + ", ".join(parts) + "}"


def format_value(value: Any) -> str:
    """Return the text form of ``value``."""
    hook = getattr(type(value), "__pretty__", None)
    if hook is not None:
        return hook(value)
    if value is None:
        return "nullptr"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return _quoted(value)
    if isinstance(value, float):
        return format(value, "g")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return repr(value)
    if isinstance(value, Mapping):
        return _join(
            f"{format_value(key)}: {format_value(item)}" for key, item in value.items()
        )
    if isinstance(value, Iterable):
        return _join(format_value(item) for item in value)
    return str(value)


def print_values(*args: Any) -> None:
    """Write the values to standard output, separated by spaces, with a newline."""
    sys.stdout.write(" ".join(format_value(arg) for arg in args) + "\n")