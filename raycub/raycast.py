"""Textured wall columns for the ray-cast view."""

from __future__ import annotations

import math
from enum import IntEnum

from .image import Image


class Orientation(IntEnum):
    """Which face of a cell a ray hit: walls first, then door faces."""

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3
    DOOR_NORTH = 4
    DOOR_SOUTH = 5
    DOOR_WEST = 6
    DOOR_EAST = 7

    @property
    def texture_index(self) -> int:
        """Index of the texture drawn on this face (all doors share index 4)."""
        return min(int(self), 4)


# Faces whose texture runs along x (True) or along y (False), and whether
# the texture is mirrored so it reads the right way round from that side.
_FACE_LAYOUT = {
    Orientation.NORTH: (True, False),
    Orientation.SOUTH: (True, True),
    Orientation.WEST: (False, True),
    Orientation.EAST: (False, False),
    Orientation.DOOR_NORTH: (True, False),
    Orientation.DOOR_SOUTH: (True, True),
    Orientation.DOOR_WEST: (False, True),
    Orientation.DOOR_EAST: (False, False),
}


def texture_column(orientation: int, p_x: float, p_y: float, tex_width: int) -> int:
    """Return the texture column for a hit at map point (``p_x``, ``p_y``).

    The fractional part of the coordinate along the face is scaled to the
    texture width; faces seen from the south and west are mirrored.
    """
    along_x, mirrored = _FACE_LAYOUT[Orientation(orientation)]
    coord = p_x if along_x else p_y
    column = math.floor((coord - math.floor(coord)) * tex_width)
    return tex_width - column if mirrored else column


def wall_height(game_height: int, distance: float) -> float:
    """Return the on-screen height of a wall seen at ``distance``."""
    if distance <= 0:
        raise ValueError(f"distance must be positive, got {distance!r}")
    return game_height / distance


def render_column(
    image: Image,
    x: int,
    distance: float,
    texture: Image,
    wall_x: float,
    ceiling_color: int,
    floor_color: int,
    game_height: int,
    offset_x: int,
    offset_y: int,
) -> float:
    """Draw one screen column: ceiling, textured wall slice, then floor.

    The column is drawn at ``x + offset_x`` from row ``offset_y`` down for
    ``game_height`` rows. Returns the wall height used.
    """
    height = wall_height(game_height, distance)
    ceiling = (game_height - height) / 2
    column = min(max(int(wall_x), 0), texture.width - 1)
    dst_x = x + offset_x
    for y in range(game_height):
        if y < ceiling:
            color = ceiling_color
        elif y < height + ceiling:
            tex_y = y - ceiling
            row = min(max(int(tex_y * texture.height / height), 0), texture.height - 1)
            color = texture.get_pixel(column, row)
        else:
            color = floor_color
        image.put_pixel(dst_x, y + offset_y, color)
    return height