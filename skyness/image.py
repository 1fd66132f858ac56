"""In-memory ZPixmap images laid out like X images."""

from __future__ import annotations

from skyness.visual import Visual

_PAD_BITS = 32


class Image:
    """A width x height pixel buffer in the layout a visual's server expects.

    ``data`` holds ``size_line`` bytes per row; ``endian`` is 0 for
    least-significant byte first and 1 for most-significant byte first.
    """

    def __init__(self, width: int, height: int, visual: Visual | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.visual = visual if visual is not None else Visual()
        self.width = width
        self.height = height
        self.bits_per_pixel = self.visual.bits_per_pixel
        row_bits = width * self.bits_per_pixel
        self.size_line = (row_bits + _PAD_BITS - 1) // _PAD_BITS * (_PAD_BITS // 8)
        self.endian = self.visual.byte_order
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store a raw pixel value; bits beyond the pixel width are dropped."""
        offset = self._offset(x, y)
        opp = self.bytes_per_pixel
        value = color & ((1 << (8 * opp)) - 1)
        order = "big" if self.endian else "little"
        self.data[offset : offset + opp] = value.to_bytes(opp, order)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the raw pixel value stored at (x, y)."""
        offset = self._offset(x, y)
        opp = self.bytes_per_pixel
        order = "big" if self.endian else "little"
        return int.from_bytes(self.data[offset : offset + opp], order)