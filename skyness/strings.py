"""Small string helpers: integer formatting and splitting on a set of separators."""

from __future__ import annotations

from itertools import groupby

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def split(s: str, charset: str) -> list[str]:
    """Split ``s`` on runs of any character in ``charset``, dropping empty words."""
    return [
        "".join(group)
        for is_separator, group in groupby(s, key=lambda char: char in charset)
        if not is_separator
    ]


def count_words(s: str, charset: str) -> int:
    """Return how many words :func:`split` would produce."""
    return len(split(s, charset))