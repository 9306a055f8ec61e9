"""Overlays drawn over the 3D view: the spinning spiral and the hand sprite."""

from __future__ import annotations

import math
from collections.abc import Iterator

from .image import Image

_ANGLE_STEP = 0.5
_RADIUS_STEP = 0.035
_THICK = ((0, 0), (1, 0), (0, 1), (-1, 0), (0, -1), (-1, -1), (1, 1), (-1, 1), (1, -1))


def _put_clipped(image: Image, x: int, y: int, color: int) -> None:
    if 0 <= x < image.width and 0 <= y < image.height:
        image.put_pixel(x, y, color)


def spiral_points(
    s_angle: float, center_x: float, center_y: float, max_radius: float
) -> Iterator[tuple[float, float]]:
    """Yield the points of a spiral and of the circle that closes it.

    The spiral starts at radius 1 and angle ``s_angle * 20`` degrees and
    grows until it reaches ``max_radius``; a full circle is then traced at
    the final radius.
    """
    radius = 1.0
    angle = s_angle * 20
    while radius < max_radius:
        rad = math.radians(angle)
        yield center_x + math.cos(rad) * radius, center_y + math.sin(rad) * radius
        angle += _ANGLE_STEP
        radius += _RADIUS_STEP
    angle = 0.0
    while angle < 360:
        rad = math.radians(angle)
        yield center_x + math.cos(rad) * radius, center_y + math.sin(rad) * radius
        angle += _ANGLE_STEP


def draw_spiral(
    image: Image,
    s_angle: float,
    center_x: float,
    center_y: float,
    max_radius: float,
    color: int,
) -> float:
    """Draw the spiral three pixels thick; return the next frame's ``s_angle``.

    Pixels falling outside the image are skipped.
    """
    for p_x, p_y in spiral_points(s_angle, center_x, center_y, max_radius):
        for dx, dy in _THICK:
            _put_clipped(image, int(p_x + dx), int(p_y + dy), color)
    return s_angle - 1


def draw_hand_row(
    image: Image,
    hand: Image,
    tex_x: float,
    tex_y: float,
    row: int,
    hand_size: int,
    origin_x: int,
    origin_y: int,
) -> None:
    """Copy one row of the hand sprite onto the image, ``hand_size`` pixels wide.

    The row lands at ``origin_y - row``, starting at column ``origin_x``.
    The sprite is sampled from (``tex_x``, ``tex_y``) stepping by the whole
    number of sprite pixels per screen pixel. Transparent (negative) sprite
    pixels and destinations outside the image are skipped.
    """
    step = hand.width // hand_size
    dst_y = origin_y - row
    for x in range(hand_size):
        color = hand.get_pixel(int(tex_x), int(tex_y))
        if color >= 0:
            _put_clipped(image, origin_x + x, dst_y, color)
        tex_x += step