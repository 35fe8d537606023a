"""
Presentation-mode adjustment of saturation and lightness.

Hue is never touched. Each mode is a small pure transform looked up by
tag.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .ir.color import HSL, ColorMode, coerce_tag

HIGH_CONTRAST_MODES = frozenset({ColorMode.HIGH_CONTRAST, ColorMode.HIGH_CONTRAST_DARK})
DARK_MODES = frozenset({ColorMode.DARK, ColorMode.HIGH_CONTRAST_DARK})

_HC_SATURATION_SCALE = 1.3


def is_high_contrast(mode: ColorMode | str) -> bool:
    """True for highContrast and highContrastDark."""
    return coerce_tag(ColorMode, mode, "mode") in HIGH_CONTRAST_MODES


def is_dark(mode: ColorMode | str) -> bool:
    """True for dark and highContrastDark."""
    return coerce_tag(ColorMode, mode, "mode") in DARK_MODES


def _dark(hsl: HSL) -> HSL:
    lightness = max(15, hsl.l - 40) if hsl.l > 50 else max(10, hsl.l - 20)
    return hsl.replace(l=lightness)


def _high_contrast(hsl: HSL) -> HSL:
    lightness = max(10, hsl.l - 10) if hsl.l < 40 else min(90, hsl.l + 10)
    return hsl.replace(s=min(100, hsl.s * _HC_SATURATION_SCALE), l=lightness)


def _high_contrast_dark(hsl: HSL) -> HSL:
    lightness = max(30, hsl.l - 30) if hsl.l > 50 else max(5, hsl.l - 15)
    return hsl.replace(s=min(100, hsl.s * _HC_SATURATION_SCALE), l=lightness)


_MODE_TRANSFORMS: dict[ColorMode, Callable[[HSL], HSL]] = {
    ColorMode.DEFAULT: lambda hsl: hsl,
    ColorMode.DARK: _dark,
    ColorMode.HIGH_CONTRAST: _high_contrast,
    ColorMode.HIGH_CONTRAST_DARK: _high_contrast_dark,
}


def adjust_hsl_for_mode(hsl: HSL, mode: ColorMode | str) -> HSL:
    """Apply one mode's saturation/lightness transform to a single color."""
    return _MODE_TRANSFORMS[coerce_tag(ColorMode, mode, "mode")](hsl)


def adjust_for_mode(colors: Iterable[HSL], mode: ColorMode | str) -> list[HSL]:
    """Apply a mode transform to every color, preserving order."""
    transform = _MODE_TRANSFORMS[coerce_tag(ColorMode, mode, "mode")]
    return [transform(hsl) for hsl in colors]
