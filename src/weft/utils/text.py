"""Text helpers shared by the renderers.

Example:
    >>> from weft.utils.text import split_tokens
    >>> split_tokens(["  a ", "b  c"])
    ['a', 'b', 'c']
"""

from __future__ import annotations

from collections.abc import Iterable


def split_tokens(value: str | Iterable[str]) -> list[str]:
    """Split a string (or each string of an iterable) into trimmed tokens.

    Runs of whitespace collapse and empty tokens are dropped, so
    ``"x  y"`` and ``["x", " y "]`` both give ``["x", "y"]``.
    """
    if isinstance(value, str):
        return value.split()
    tokens: list[str] = []
    for item in value:
        tokens.extend(item.split())
    return tokens
