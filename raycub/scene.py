"""Reading of scene description files: textures, colours and the map."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_TEXTURE_KEYS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east", "DO": "door"}
_COLOR_KEYS = {"F": "floor", "C": "ceiling"}


class SceneError(Exception):
    """Raised when a scene file is missing or incomplete."""


@dataclass
class Scene:
    """Texture paths, floor and ceiling colours and map rows of a scene."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    door: str | None = None
    floor: int = 0
    ceiling: int = 0
    map_lines: list[str] = field(default_factory=list)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _words(line: str, sep: str) -> list[str]:
    return [word for word in line.split(sep) if word]


def parse_texture_path(line: str, current: str | None) -> str | None:
    """Return the texture path named by an ``XX path`` line, or None.

    None is returned when a path was already set, when the line does not
    hold exactly two words, or when the file cannot be opened.
    """
    if current is not None:
        return None
    words = _words(line, " ")
    if len(words) != 2:
        return None
    path = words[1].removesuffix("\n")
    if not path:
        return None
    try:
        with open(path, "rb"):
            pass
    except OSError:
        return None
    return path


def parse_rgb(line: str, current: int) -> int:
    """Return the colour of an ``F r,g,b`` or ``C r,g,b`` line, or -1.

    -1 is returned when a colour was already set (``current`` is not 0) or
    the line is malformed.
    """
    if current != 0:
        return -1
    words = _words(line, " ")
    if len(words) != 2:
        return -1
    parts = _words(words[1], ",")
    if len(parts) != 3 or parts[2].startswith("\n"):
        return -1
    red, green, blue = (_atoi(part) for part in parts)
    return 65536 * red + 256 * green + blue


def parse_scene(lines: Iterable[str]) -> Scene:
    """Build a scene from the lines of a scene file.

    Raises SceneError when a texture path or a colour is missing or invalid.
    """
    scene = Scene()
    for line in lines:
        key2, key1 = line[:2], line[:1]
        if key2 in _TEXTURE_KEYS:
            attr = _TEXTURE_KEYS[key2]
            setattr(scene, attr, parse_texture_path(line, getattr(scene, attr)))
        elif key1 in _COLOR_KEYS:
            attr = _COLOR_KEYS[key1]
            setattr(scene, attr, parse_rgb(line, getattr(scene, attr)))
        elif line and not line.startswith("\n"):
            scene.map_lines.append(line.removesuffix("\n"))
    paths = (scene.north, scene.south, scene.west, scene.east, scene.door)
    if any(path is None for path in paths) or -1 in (scene.floor, scene.ceiling):
        raise SceneError("Path Error")
    return scene


def read_scene(path: str | PathLike[str]) -> Scene:
    """Read and parse a scene file."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.readlines()
    except OSError as exc:
        raise SceneError("File Error") from exc
    return parse_scene(lines)


def count_map_lines(lines: Iterable[str]) -> int:
    """Count the lines that are not blank, the most a map can hold."""
    return sum(1 for line in lines if not line.startswith("\n"))