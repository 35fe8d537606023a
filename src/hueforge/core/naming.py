"""
Descriptive color names built from HSL buckets.
"""

from __future__ import annotations

from .ir.color import HSL

# Twelve 30-degree sectors; sector 0 is centred on red (345-15 degrees).
_HUE_NAMES: tuple[str, ...] = (
    "Red",
    "Orange",
    "Yellow",
    "Chartreuse",
    "Green",
    "Spring Green",
    "Cyan",
    "Azure",
    "Blue",
    "Violet",
    "Magenta",
    "Rose",
)


def _luminosity_label(lightness: float) -> str:
    if lightness < 20:
        return "Very Dark"
    if lightness < 40:
        return "Dark"
    if lightness > 85:
        return "Very Light"
    if lightness > 65:
        return "Light"
    return ""


def _hue_label(hue: float) -> str:
    sector = int(((hue + 15) % 360) // 30)
    return _HUE_NAMES[sector]


def get_color_name(hsl: HSL) -> str:
    """Describe a color as ``"[luminosity] [saturation] [hue]"``.

    Near-achromatic colors (saturation < 10) are named Black, White or Gray
    without a hue.
    """
    if hsl.s < 10:
        if hsl.l < 20:
            return "Black"
        if hsl.l > 85:
            return "White"
        return "Gray"

    saturation = ""
    if hsl.s < 30:
        saturation = "Grayish"
    elif hsl.s > 80:
        saturation = "Vivid"

    parts = (_luminosity_label(hsl.l), saturation, _hue_label(hsl.h))
    return " ".join(part for part in parts if part)
