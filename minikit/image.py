"""Off-screen pixel images and TrueColor colour conversion.

An :class:`Image` is a zero-filled byte buffer laid out like a ZPixmap
image: rows of ``size_line`` bytes, each pixel ``bits_per_pixel // 8``
bytes wide, stored in the image's byte order.
"""

from __future__ import annotations

from typing import Sequence

# Rows are padded to this many bits, as with a bitmap pad of 32.
_ROW_PAD_BITS = 32
# The buffer leaves room for this many extra pixels on every row.
_EXTRA_PIXELS = 32


class Image:
    """A width x height pixel buffer."""

    def __init__(
        self,
        width: int,
        height: int,
        bits_per_pixel: int = 32,
        big_endian: bool = False,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image width and height must be positive")
        if bits_per_pixel <= 0 or bits_per_pixel % 8:
            raise ValueError("bits per pixel must be a positive multiple of 8")
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.big_endian = bool(big_endian)
        self.size_line = (
            (width * bits_per_pixel + _ROW_PAD_BITS - 1) // _ROW_PAD_BITS
        ) * (_ROW_PAD_BITS // 8)
        self.data = bytearray((width + _EXTRA_PIXELS) * height * 4)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def _byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside the image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y); bits beyond the pixel width are dropped."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        value = color & ((1 << (opp * 8)) - 1)
        self.data[start:start + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """The unsigned pixel value stored at (x, y)."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + opp], self._byteorder)

    def data_addr(self) -> tuple[bytearray, int, int, int]:
        """The pixel buffer, bits per pixel, bytes per row and byte order
        (0 for little endian, 1 for big endian)."""
        return self.data, self.bits_per_pixel, self.size_line, int(self.big_endian)


def _mask_shift(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError("colour masks must be positive")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Shift and bit count of each channel mask:
    (red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits)."""
    return tuple(
        value
        for mask in (red_mask, green_mask, blue_mask)
        for value in _mask_shift(mask)
    )


def good_color(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a visual of ``depth``.

    Depths of 24 and more take the colour unchanged; shallower visuals pack
    each channel according to ``shifts`` as made by :func:`rgb_shifts`.
    """
    if depth >= 24:
        return color
    if len(shifts) != 6:
        raise ValueError("shifts must hold six values")
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )