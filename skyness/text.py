"""Substring searches and word splitting used by the XPM reader."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def _check_find(find: str) -> None:
    if not find:
        raise ValueError("search string must not be empty")


def str_find(text: str, find: str, limit: int) -> int:
    """Return the index of ``find`` in ``text``, or -1.

    The search is refused (-1) when ``find`` is longer than ``limit``.
    """
    _check_find(find)
    if len(find) > limit:
        return -1
    return text.find(find)


def str_find_unquoted(text: str, find: str, limit: int) -> int:
    """Like :func:`str_find`, but skip matches inside double-quoted runs."""
    _check_find(find)
    if len(find) > limit:
        return -1
    quoted = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _BLANKS.split(text) if word]