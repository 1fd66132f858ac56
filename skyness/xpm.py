"""Reading XPM pixmaps, from files or in-memory string lists, into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from skyness.colors import NONE_COLOR, text_rgb
from skyness.image import Image
from skyness.text import split_words, str_find, str_find_unquoted
from skyness.visual import Visual

TRANSPARENT_PIXEL = 0xFF000000
"""Pixel value written where the XPM uses the colour ``none``."""

# Up to this many characters per pixel, a later colour definition replaces an
# earlier one with the same key; above it, the first definition is kept.
_DIRECT_LIMIT = 2

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_QUOTED_RE = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def _atoi(word: str) -> int:
    match = _INT_RE.match(word)
    return int(match.group(1)) if match else 0


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside double quotes with spaces, keeping the length."""
    while (start := str_find_unquoted(text, "/*", len(text))) != -1:
        rest = text[start + 2 :]
        end = str_find(rest, "*/", len(rest))
        stop = len(text) if end == -1 else start + 2 + end + 2
        text = _blank(text, start, stop)
    while (start := str_find_unquoted(text, "//", len(text))) != -1:
        rest = text[start + 2 :]
        end = str_find(rest, "\n", len(rest))
        stop = len(text) if end == -1 else start + 2 + end + 1
        text = _blank(text, start, stop)
    return text


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values: {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {line!r}")
    return width, height, ncolors, cpp


def _parse_color(spec: str) -> int:
    words = split_words(spec)
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour definition without 'c' key: {spec!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"colour definition without a colour: {spec!r}")
    name = words[index + 1]
    end = words[index + 2] if index + 2 < len(words) else None
    return text_rgb(name, end)


def parse_xpm(lines: Iterable[str], visual: Visual | None = None) -> Image:
    """Build an image from XPM lines: header, colour definitions, pixel rows."""
    rows = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(rows, "header"))
    direct = cpp <= _DIRECT_LIMIT
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour definition")
        key, value = line[:cpp], _parse_color(line[cpp:])
        if direct:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    image = Image(width, height, visual)
    for y in range(height):
        line = _next_line(rows, "pixel row")
        for x in range(width):
            color = palette.get(line[x * cpp : (x + 1) * cpp], 0)
            if color == NONE_COLOR:
                color = TRANSPARENT_PIXEL
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(xpm_data: Iterable[str], visual: Visual | None = None) -> Image:
    """Build an image from XPM data given as a sequence of strings."""
    return parse_xpm(xpm_data, visual)


def xpm_file_to_image(path: str | PathLike[str], visual: Visual | None = None) -> Image:
    """Read an XPM file (C source form) and build an image from it."""
    with open(path, "rb") as handle:
        text = handle.read().decode("latin-1")
    return parse_xpm(_QUOTED_RE.findall(strip_comments(text)), visual)