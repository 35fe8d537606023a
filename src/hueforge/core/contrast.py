"""
WCAG 2.x relative luminance and contrast ratio, plus an iterative search
that shifts a foreground color until it reaches a target ratio.
"""

from __future__ import annotations

import logging

from .conversion import hex_to_rgb, rgb_to_hex
from .errors import make_parameter_error
from .ir.color import RGB

logger = logging.getLogger(__name__)

# WCAG thresholds for normal / large text
WCAG_THRESHOLDS: dict[str, tuple[float, float]] = {
    "AA": (4.5, 3.0),
    "AAA": (7.0, 4.5),
}

_STEP = 5
_MAX_ITERATIONS = 100
_WHITE = "#ffffff"
_BLACK = "#000000"


def _linearize(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def rgb_luminance(rgb: RGB) -> float:
    """Relative luminance of 8-bit channels."""
    return 0.2126 * _linearize(rgb.r) + 0.7152 * _linearize(rgb.g) + 0.0722 * _linearize(rgb.b)


def relative_luminance(color: str) -> float:
    """Relative luminance of a hex color, in [0, 1]."""
    return rgb_luminance(hex_to_rgb(color))


def contrast_ratio(color_a: str, color_b: str) -> float:
    """WCAG contrast ratio between two hex colors, in [1, 21]."""
    lum_a = relative_luminance(color_a)
    lum_b = relative_luminance(color_b)
    lighter, darker = max(lum_a, lum_b), min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def meets_wcag(ratio: float, level: str = "AA", *, large_text: bool = False) -> bool:
    """Check a contrast ratio against a WCAG conformance level.

    Args:
        ratio: Contrast ratio to check.
        level: "AA" or "AAA".
        large_text: Use the large-text threshold.

    Returns:
        True if the ratio meets the level.
    """
    thresholds = WCAG_THRESHOLDS.get(level.upper())
    if thresholds is None:
        raise make_parameter_error(
            "Unknown WCAG level", "level", level, allowed=list(WCAG_THRESHOLDS)
        )
    normal, large = thresholds
    return ratio >= (large if large_text else normal)


def _shift(rgb: RGB, amount: int) -> RGB:
    return RGB(
        r=max(0, min(255, rgb.r + amount)),
        g=max(0, min(255, rgb.g + amount)),
        b=max(0, min(255, rgb.b + amount)),
    )


def ensure_minimum_contrast(
    background: str,
    foreground: str,
    target_ratio: float = 4.5,
    *,
    fallback: bool = True,
) -> str | None:
    """Shift a foreground color until it contrasts enough with a background.

    The foreground is lightened when the background luminance is below 0.5,
    darkened otherwise. Each iteration moves every RGB channel by another
    5 units (clamped), for at most 100 iterations.

    Args:
        background: Background hex color.
        foreground: Foreground hex color to adjust.
        target_ratio: Minimum contrast ratio required.
        fallback: When no step meets the target, return pure white (lightening)
            or pure black (darkening) instead of None.

    Returns:
        The unchanged foreground if it already passes, the first adjusted hex
        that passes, otherwise the fallback color or None.
    """
    if contrast_ratio(background, foreground) >= target_ratio:
        return foreground

    lighten = relative_luminance(background) < 0.5
    step = _STEP if lighten else -_STEP
    start = hex_to_rgb(foreground)

    for i in range(1, _MAX_ITERATIONS + 1):
        candidate = rgb_to_hex(_shift(start, step * i))
        if contrast_ratio(background, candidate) >= target_ratio:
            return candidate

    logger.debug(
        "No foreground reaches %.2f against %s (start %s)", target_ratio, background, foreground
    )
    if not fallback:
        return None
    return _WHITE if lighten else _BLACK
