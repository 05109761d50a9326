"""
Representative color extraction for input images.

Each image is reduced to a single averaged pixel, which is then described
by hue, saturation, value (HSL lightness), luma and a hex string used for
flat swatches.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from PIL import Image

from color_sort_grid.constants import (
    COLOR_MODE_RGB,
    HUE_DEGREES,
    HUE_SECTOR_DEGREES,
    HUE_SECTORS,
    LUMA_WEIGHTS,
)

_RGB = tuple[int, int, int]
_CHANNEL_MAX = 255


@dataclass(frozen=True, slots=True)
class ColorInfo:
    """Dominant color of an image and the scalar attributes derived from it."""

    hue: int
    saturation: float
    value: float
    luma: float
    color_hex: str

    @property
    def rgb(self) -> _RGB:
        """Return the dominant color as an 8-bit RGB triple."""
        return (
            int(self.color_hex[0:2], 16),
            int(self.color_hex[2:4], 16),
            int(self.color_hex[4:6], 16),
        )


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def dominant_rgb(img: Image.Image) -> _RGB:
    """Average the image down to one pixel and return its RGB channels."""
    pixel = img.convert(COLOR_MODE_RGB).resize((1, 1), Image.Resampling.BOX)
    r, g, b = pixel.getpixel((0, 0))
    return int(r), int(g), int(b)


def rgb_to_hsv(r: int, g: int, b: int) -> tuple[int, float, float]:
    """
    Convert 8-bit RGB channels to hue, saturation and value.

    Hue is an integer number of degrees in [0, 360). Saturation and value
    are percentages rounded to one decimal; value is the midpoint of the
    largest and smallest channel. Achromatic input yields hue 0.
    """
    rn, gn, bn = r / _CHANNEL_MAX, g / _CHANNEL_MAX, b / _CHANNEL_MAX
    cmin = min(rn, gn, bn)
    cmax = max(rn, gn, bn)
    delta = cmax - cmin

    if delta == 0:
        sector = 0.0
    elif cmax == rn:
        # fmod keeps the sign of the dividend, negatives are wrapped below
        sector = math.fmod((gn - bn) / delta, HUE_SECTORS)
    elif cmax == gn:
        sector = (bn - rn) / delta + 2
    else:
        sector = (rn - gn) / delta + 4

    hue = _round_half_up(sector * HUE_SECTOR_DEGREES)
    if hue < 0:
        hue += HUE_DEGREES

    value = (cmax + cmin) / 2
    saturation = 0.0 if delta == 0 else delta / (1 - abs(2 * value - 1))
    return hue, round(saturation * 100, 1), round(value * 100, 1)


def compute_luma(r: int, g: int, b: int) -> float:
    """Return the weighted RGB sum on the 0-255 channel scale."""
    wr, wg, wb = LUMA_WEIGHTS
    return wr * r + wg * g + wb * b


def rgb_to_hex(rgb: _RGB) -> str:
    """Format an RGB triple as six zero-padded lowercase hex digits."""
    r, g, b = rgb
    return f"{r:02x}{g:02x}{b:02x}"


def color_info_from_rgb(rgb: _RGB) -> ColorInfo:
    """Build the full color description for one RGB triple."""
    hue, saturation, value = rgb_to_hsv(*rgb)
    return ColorInfo(
        hue=hue,
        saturation=saturation,
        value=value,
        luma=compute_luma(*rgb),
        color_hex=rgb_to_hex(rgb),
    )


def extract_color_info(img: Image.Image) -> ColorInfo:
    """Compute the representative color of an image."""
    return color_info_from_rgb(dominant_rgb(img))
