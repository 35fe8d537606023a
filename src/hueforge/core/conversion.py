"""
Color space conversion: hex <-> RGB <-> HSL.

Hex input is validated once at the boundary. Everything downstream works
on HSL/RGB models whose channels are already in range.
"""

from __future__ import annotations

import colorsys
import math
import re

from .errors import make_color_error
from .ir.color import HSL, RGB, ColorResult, PaletteRole
from .naming import get_color_name

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def normalize_hex(value: str) -> str:
    """Normalize a 3- or 6-digit hex color to ``#rrggbb``.

    Args:
        value: Hex color with or without the leading ``#``.

    Returns:
        Lowercase ``#rrggbb`` string.

    Raises:
        InvalidColorFormat: If the input is not a 3- or 6-digit hex color.
    """
    if not isinstance(value, str):
        raise make_color_error("Color must be a hex string", value)

    digits = value.strip()
    if digits.startswith("#"):
        digits = digits[1:]

    if not _HEX_DIGITS.fullmatch(digits):
        raise make_color_error("Color contains non-hex characters", value)
    if len(digits) == 3:
        digits = "".join(c + c for c in digits)
    if len(digits) != 6:
        raise make_color_error("Hex color must have 3 or 6 digits", value)

    return "#" + digits.lower()


def _to_channel(unit: float) -> int:
    """Scale a [0, 1] component to a rounded 8-bit channel (half rounds up)."""
    return max(0, min(255, math.floor(unit * 255 + 0.5)))


def hex_to_rgb(value: str) -> RGB:
    """Decode a hex color into 8-bit channels."""
    digits = normalize_hex(value)[1:]
    return RGB(r=int(digits[0:2], 16), g=int(digits[2:4], 16), b=int(digits[4:6], 16))


def rgb_to_hex(rgb: RGB) -> str:
    """Encode 8-bit channels as ``#rrggbb``."""
    return f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}"


def rgb_to_hsl(rgb: RGB) -> HSL:
    """Convert 8-bit channels to HSL (degrees / percent).

    Achromatic input (max == min) yields hue 0 and saturation 0.
    """
    h, l, s = colorsys.rgb_to_hls(rgb.r / 255, rgb.g / 255, rgb.b / 255)
    return HSL(h=h * 360, s=s * 100, l=l * 100)


def hex_to_hsl(value: str) -> HSL:
    """Convert a hex color to HSL."""
    return rgb_to_hsl(hex_to_rgb(value))


def hsl_to_rgb(hsl: HSL) -> RGB:
    """Convert HSL to 8-bit channels, rounding to the nearest integer."""
    r, g, b = colorsys.hls_to_rgb(hsl.h / 360, hsl.l / 100, hsl.s / 100)
    return RGB(r=_to_channel(r), g=_to_channel(g), b=_to_channel(b))


def hsl_to_hex(hsl: HSL) -> str:
    """Convert HSL to ``#rrggbb``."""
    return rgb_to_hex(hsl_to_rgb(hsl))


def rgba_string(rgb: RGB, alpha: float) -> str:
    """Render channels plus opacity as a CSS ``rgba()`` value."""
    return f"rgba({rgb.r}, {rgb.g}, {rgb.b}, {alpha:g})"


def hsl_to_color_result(hsl: HSL, role: PaletteRole | None = None, **fields: object) -> ColorResult:
    """Build a full color result (hex, rgb, name) from an HSL value."""
    rgb = hsl_to_rgb(hsl)
    return ColorResult(
        hex=rgb_to_hex(rgb),
        hsl=hsl,
        rgb=rgb,
        role=role,
        name=get_color_name(hsl),
        **fields,
    )
