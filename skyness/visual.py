"""Description of a TrueColor visual and conversion of RGB colours to pixels."""

from __future__ import annotations

from dataclasses import dataclass, field


def _shift_and_width(mask: int, name: str) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"{name} mask must be a positive bit mask")
    shift = (mask & -mask).bit_length() - 1
    width = 0
    mask >>= shift
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, int, int, int, int, int]:
    """Return (shift, width) for the red, green and blue masks, flattened."""
    red = _shift_and_width(red_mask, "red")
    green = _shift_and_width(green_mask, "green")
    blue = _shift_and_width(blue_mask, "blue")
    return (*red, *green, *blue)


@dataclass(frozen=True)
class Visual:
    """A TrueColor visual: depth, channel masks and server byte order (0 = LSB first)."""

    depth: int = 24
    red_mask: int = 0xFF0000
    green_mask: int = 0x00FF00
    blue_mask: int = 0x0000FF
    byte_order: int = 0
    shifts: tuple[int, int, int, int, int, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.depth <= 0:
            raise ValueError("depth must be positive")
        if self.byte_order not in (0, 1):
            raise ValueError("byte_order must be 0 or 1")
        object.__setattr__(
            self, "shifts", mask_shifts(self.red_mask, self.green_mask, self.blue_mask)
        )

    @property
    def bits_per_pixel(self) -> int:
        """Bits used to store one pixel of this depth in a ZPixmap image."""
        if self.depth > 16:
            return 32
        if self.depth > 8:
            return 16
        return 8

    def color_value(self, color: int) -> int:
        """Convert a 0xRRGGBB colour to this visual's pixel value."""
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        r_shift, r_width, g_shift, g_width, b_shift, b_width = self.shifts
        return (
            ((red >> (16 - r_width)) << r_shift)
            + ((green >> (16 - g_width)) << g_shift)
            + ((blue >> (16 - b_width)) << b_shift)
        )