"""An in-memory pixel image with a fixed row layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


@dataclass(eq=False)
class Image:
    """A width x height image of packed pixels.

    Pixels are ``bpp`` bits wide, rows are ``size_line`` bytes long and
    ``endian`` is 0 for little-endian and 1 for big-endian pixel bytes.
    Four-byte pixels read back as signed 32-bit values, so a pixel whose
    top byte is set (the transparent marker) reads back negative.
    """

    width: int
    height: int
    bpp: int = 32
    endian: int = 0
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.bpp not in (8, 16, 24, 32):
            raise ValueError(f"unsupported bits per pixel: {self.bpp}")
        if self.endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, got {self.endian!r}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bpp // 8

    @property
    def size_line(self) -> int:
        return self.width * self.bytes_per_pixel

    @property
    def _byteorder(self) -> Literal["little", "big"]:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at column ``x``, row ``y``."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[start:start + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x``, row ``y``."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        return int.from_bytes(
            self.data[start:start + opp], self._byteorder, signed=opp == 4
        )

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        opp = self.bytes_per_pixel
        value = color & ((1 << (8 * opp)) - 1)
        self.data[:] = value.to_bytes(opp, self._byteorder) * (
            self.width * self.height
        )