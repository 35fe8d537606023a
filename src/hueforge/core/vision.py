"""
Color-vision deficiency simulation with fixed linear RGB transforms.

Works on display RGB normalized to [0, 1]. This is the full simulator; the
hue-rotation shortcut used for role variants lives in ``variants``.
"""

from __future__ import annotations

import math

from .conversion import hex_to_rgb, rgb_to_hex
from .ir.color import RGB, ColorBlindnessType, ColorResult, coerce_tag

Matrix = tuple[tuple[float, float, float], ...]

_MATRICES: dict[ColorBlindnessType, Matrix] = {
    ColorBlindnessType.PROTANOPIA: (
        (0.567, 0.433, 0.0),
        (0.558, 0.442, 0.0),
        (0.0, 0.242, 0.758),
    ),
    ColorBlindnessType.DEUTERANOPIA: (
        (0.625, 0.375, 0.0),
        (0.7, 0.3, 0.0),
        (0.0, 0.3, 0.7),
    ),
    ColorBlindnessType.TRITANOPIA: (
        (0.95, 0.05, 0.0),
        (0.0, 0.433, 0.567),
        (0.0, 0.475, 0.525),
    ),
}


def _quantize(unit: float) -> int:
    return math.floor(max(0.0, min(255.0, unit * 255)) + 0.5)


def simulate_color_blindness(rgb: RGB, kind: ColorBlindnessType | str) -> RGB:
    """Approximate how a color appears under a color-vision deficiency.

    Args:
        rgb: Color to transform.
        kind: Deficiency tag; "none" returns the input unchanged.

    Returns:
        Simulated color.

    Raises:
        InvalidParameter: If the tag is unknown.
    """
    kind = coerce_tag(ColorBlindnessType, kind, "color_blindness")
    if kind is ColorBlindnessType.NONE:
        return rgb

    channels = (rgb.r / 255, rgb.g / 255, rgb.b / 255)

    if kind is ColorBlindnessType.ACHROMATOPSIA:
        r, g, b = channels
        luminance = 0.2126 * r + 0.7152 * g + 0.0722 * b
        simulated = (luminance, luminance, luminance)
    else:
        simulated = tuple(
            sum(weight * value for weight, value in zip(row, channels, strict=True))
            for row in _MATRICES[kind]
        )

    r, g, b = (_quantize(v) for v in simulated)
    return RGB(r=r, g=g, b=b)


def simulate_hex(color: str, kind: ColorBlindnessType | str) -> str:
    """Hex-in, hex-out wrapper around :func:`simulate_color_blindness`."""
    return rgb_to_hex(simulate_color_blindness(hex_to_rgb(color), kind))


def simulate_color_result(color: ColorResult, kind: ColorBlindnessType | str) -> ColorResult:
    """Simulate a deficiency on a generated color.

    Only ``hex`` and ``rgb`` change; the stored ``hsl`` keeps the generated
    hue so the color can be re-derived later.
    """
    rgb = simulate_color_blindness(color.rgb, kind)
    return color.updated(rgb=rgb, hex=rgb_to_hex(rgb))
