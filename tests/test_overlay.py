import math

import pytest

from raycub.image import Image
from raycub.overlay import draw_hand_row, draw_spiral, spiral_points

TRANSPARENT = 0xFF000000


def test_spiral_starts_at_unit_radius_and_start_angle():
    first = next(spiral_points(0, 50.0, 40.0, 10.0))
    assert first[0] == pytest.approx(51.0)
    assert first[1] == pytest.approx(40.0)


def test_spiral_start_angle_follows_s_angle():
    # s_angle * 20 degrees: 90 degrees points straight down the y axis
    first = next(spiral_points(4.5, 0.0, 0.0, 5.0))
    assert first[0] == pytest.approx(0.0, abs=1e-9)
    assert first[1] == pytest.approx(1.0)


def test_spiral_ends_with_a_full_circle():
    points = list(spiral_points(0, 10.0, 10.0, 3.0))
    circle = points[-int(360 / 0.5):]
    radii = [math.hypot(x - 10.0, y - 10.0) for x, y in circle]
    assert max(radii) - min(radii) == pytest.approx(0.0, abs=1e-9)
    assert radii[0] >= 3.0


def test_spiral_stays_within_final_radius():
    points = list(spiral_points(7, 0.0, 0.0, 4.0))
    final = math.hypot(*points[-1])
    assert all(math.hypot(x, y) <= final + 1e-9 for x, y in points)


def test_spiral_radius_never_shrinks():
    points = list(spiral_points(0, 0.0, 0.0, 2.0))
    radii = [math.hypot(x, y) for x, y in points]
    assert all(b >= a - 1e-9 for a, b in zip(radii, radii[1:]))


def test_draw_spiral_returns_next_angle():
    image = Image(20, 20)
    assert draw_spiral(image, 5, 10.0, 10.0, 3.0, 0x00FF00) == 4


def test_draw_spiral_colours_only_near_the_centre():
    image = Image(40, 40)
    draw_spiral(image, 0, 20.0, 20.0, 5.0, 0x00FF00)
    drawn = [
        (x, y)
        for y in range(40)
        for x in range(40)
        if image.get_pixel(x, y) == 0x00FF00
    ]
    assert drawn
    assert all(math.hypot(x - 20, y - 20) <= 5.0 + 3 for x, y in drawn)
    assert image.get_pixel(0, 0) == 0


def test_draw_spiral_clips_at_image_edges():
    image = Image(5, 5)
    draw_spiral(image, 0, 0.0, 0.0, 4.0, 0x123456)
    assert image.get_pixel(1, 0) == 0x123456


def test_draw_hand_row_copies_and_skips_transparent():
    hand = Image(4, 1)
    for x, color in enumerate([0x111111, TRANSPARENT, 0x333333, 0x444444]):
        hand.put_pixel(x, 0, color)
    image = Image(10, 10)
    image.fill(0x999999)
    draw_hand_row(image, hand, 0.0, 0.0, 2, 4, 3, 8)
    row = [image.get_pixel(x, 8 - 2) for x in range(3, 7)]
    assert row == [0x111111, 0x999999, 0x333333, 0x444444]
    assert image.get_pixel(2, 6) == 0x999999
    assert image.get_pixel(3, 7) == 0x999999


def test_draw_hand_row_steps_through_wider_sprite():
    hand = Image(8, 1)
    for x in range(8):
        hand.put_pixel(x, 0, x + 1)
    image = Image(4, 2)
    draw_hand_row(image, hand, 0.0, 0.0, 0, 4, 0, 1)
    assert [image.get_pixel(x, 1) for x in range(4)] == [1, 3, 5, 7]


def test_draw_hand_row_reads_requested_sprite_row():
    hand = Image(2, 2)
    hand.fill(0x0000AA)
    hand.put_pixel(0, 1, 0x00BB00)
    hand.put_pixel(1, 1, 0x00BB00)
    image = Image(2, 1)
    draw_hand_row(image, hand, 0.0, 1.0, 0, 2, 0, 0)
    assert [image.get_pixel(x, 0) for x in range(2)] == [0x00BB00, 0x00BB00]


def test_draw_hand_row_clips_destination():
    hand = Image(2, 1)
    hand.fill(0x0A0B0C)
    image = Image(3, 3)
    draw_hand_row(image, hand, 0.0, 0.0, 0, 2, 2, 1)
    assert image.get_pixel(2, 1) == 0x0A0B0C
    assert image.get_pixel(1, 1) == 0