"""Reading of XPM pixmaps into :class:`~raycub.image.Image` objects."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from os import PathLike

from .colors import lookup_color
from .image import Image
from .wordtab import find, find_unquoted, split_words

_TRANSPARENT = 0xFF000000
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"[0-9a-fA-F]+")
_NAME_LIMIT = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments that lie outside quotes.

    Comments are replaced by spaces, so the text keeps its length. A line
    comment is blanked together with the newline that ends it.
    """
    while (begin := find_unquoted(text, "/*", len(text))) != -1:
        rel = find(text[begin + 2:], "*/", len(text) - begin - 2)
        end = len(text) if rel == -1 else begin + rel + 4
        text = text[:begin] + " " * (end - begin) + text[end:]
    while (begin := find_unquoted(text, "//", len(text))) != -1:
        rel = find(text[begin + 2:], "\n", len(text) - begin - 2)
        end = len(text) if rel == -1 else begin + rel + 3
        text = text[:begin] + " " * (end - begin) + text[end:]
    return text


def quoted_lines(text: str) -> list[str]:
    """Return the contents of each double-quoted string in ``text``, in order."""
    return _QUOTED.findall(text)


def text_rgb(name: str, end: str | None) -> int:
    """Return the 0xRRGGBB value of an XPM colour specification.

    ``#RRGGBB`` is read as hexadecimal; otherwise ``name`` (joined with
    ``end`` when given) is looked up among the named colours. ``None``
    gives -1 and an unknown name gives 0.
    """
    if name.startswith("#"):
        match = _LEADING_HEX.match(name, 1)
        return int(match.group(0), 16) if match else 0
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _read_colors(lines, count: int, cpp: int) -> dict[str, int]:
    # With one or two characters per pixel a later definition replaces an
    # earlier one; with more, the first definition of a key is kept.
    last_wins = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(count):
        line = next(lines, None)
        if line is None:
            raise XpmError("missing colour definition")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour definition without a value: {line!r}")
        end = words[index + 2] if index + 2 < len(words) else None
        rgb = text_rgb(words[index + 1], end)
        key = line[:cpp]
        if last_wins or key not in colors:
            colors[key] = rgb
    return colors


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, pixels.

    Transparent pixels (colour ``None``) are stored as 0xFF000000.
    """
    it = iter(lines)
    header = next(it, None)
    if header is None:
        raise XpmError("empty XPM data")
    fields = split_words(header)
    if len(fields) < 4:
        raise XpmError(f"invalid XPM header: {header!r}")
    width, height, count, cpp = (_atoi(word) for word in fields[:4])
    if width <= 0 or height <= 0 or count <= 0 or cpp <= 0:
        raise XpmError(f"invalid XPM header: {header!r}")
    colors = _read_colors(it, count, cpp)
    image = Image(width, height)
    for y in range(height):
        row = next(it, None)
        if row is None:
            raise XpmError(f"missing pixel row {y}")
        for x in range(width):
            key = row[cpp * x:cpp * (x + 1)]
            if len(key) < cpp:
                raise XpmError(f"pixel row {y} is too short")
            color = colors.get(key, 0)
            image.put_pixel(x, y, _TRANSPARENT if color == -1 else color)
    return image


def xpm_to_image(lines: Sequence[str]) -> Image:
    """Build an image from in-memory XPM data given as a sequence of strings."""
    if isinstance(lines, (str, bytes)):
        raise TypeError("XPM data must be a sequence of strings, not a single string")
    return parse_xpm(lines)


def xpm_file_to_image(path: str | PathLike[str]) -> Image:
    """Read an XPM file and return its image."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))