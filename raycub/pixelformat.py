"""Conversion of 0xRRGGBB colours into pixel values of a visual."""

from __future__ import annotations

from collections.abc import Sequence


def _shift_and_width(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"channel mask must be a positive bit mask, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    width = (mask ^ (mask + 1)).bit_length() - 1
    return shift, width


def channel_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return the position and width of each colour channel in a pixel.

    The result is ``(red_shift, red_bits, green_shift, green_bits,
    blue_shift, blue_bits)``: the number of zero bits below each mask and
    the number of contiguous one bits that follow. Raises ValueError for a
    mask that has no bits set.
    """
    shifts: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        shifts.extend(_shift_and_width(mask))
    return tuple(shifts)


def good_color(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Return the pixel value for ``color`` on a visual of the given depth.

    At a depth of 24 bits or more the colour is used unchanged; below that,
    each 8-bit channel is scaled down to the channel width in ``shifts``
    (as returned by :func:`channel_shifts`) and moved to its position.
    """
    if depth >= 24:
        return color
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )