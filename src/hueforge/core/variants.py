"""
Derived color variants.

Two families live here:

- Per-role presentation variants (dark, high contrast, and a colorblind
  shortcut that rotates hue or drops saturation). The shortcut is simpler
  than the linear-RGB simulator in ``vision`` and is kept as its own
  operation.
- Auxiliary colors derived from a palette color: shadows, overlays and a
  focus ring.
"""

from __future__ import annotations

from collections.abc import Callable

from .conversion import hex_to_hsl, hsl_to_color_result, hsl_to_hex, normalize_hex, rgba_string
from .ir.color import HSL, ColorBlindnessType, ColorResult, PaletteRole, coerce_tag
from .ir.roles import ColorblindVariants, ShadowColors, VariantSet

# =============================================================================
# Presentation variants
# =============================================================================

_DARK_LIGHTNESS_DROP = 30
_HC_SATURATION_BOOST = 20

_COLORBLIND_SHORTCUTS: dict[ColorBlindnessType, Callable[[HSL], HSL]] = {
    ColorBlindnessType.NONE: lambda hsl: hsl,
    ColorBlindnessType.PROTANOPIA: lambda hsl: hsl.replace(h=hsl.h + 15),
    ColorBlindnessType.DEUTERANOPIA: lambda hsl: hsl.replace(h=hsl.h + 345),
    ColorBlindnessType.TRITANOPIA: lambda hsl: hsl.replace(h=hsl.h + 30),
    ColorBlindnessType.ACHROMATOPSIA: lambda hsl: hsl.replace(s=0),
}

SIMULATED_TYPES: tuple[ColorBlindnessType, ...] = (
    ColorBlindnessType.PROTANOPIA,
    ColorBlindnessType.DEUTERANOPIA,
    ColorBlindnessType.TRITANOPIA,
    ColorBlindnessType.ACHROMATOPSIA,
)


def generate_dark_color(color: str) -> str:
    """Lower lightness by 30 (floored at 0)."""
    hsl = hex_to_hsl(color)
    return hsl_to_hex(hsl.replace(l=max(0, hsl.l - _DARK_LIGHTNESS_DROP)))


def generate_high_contrast_color(color: str) -> str:
    """Boost saturation by 20 and snap lightness to 20 or 80."""
    hsl = hex_to_hsl(color)
    return hsl_to_hex(
        hsl.replace(
            s=min(100, hsl.s + _HC_SATURATION_BOOST),
            l=20 if hsl.l < 50 else 80,
        )
    )


def generate_colorblind_color(color: str, kind: ColorBlindnessType | str) -> str:
    """Colorblind-friendly shortcut variant.

    protanopia +15 degrees, deuteranopia +345, tritanopia +30, achromatopsia
    drops saturation, none leaves the color as is.
    """
    transform = _COLORBLIND_SHORTCUTS[coerce_tag(ColorBlindnessType, kind, "color_blindness")]
    return hsl_to_hex(transform(hex_to_hsl(color)))


def _colorblind_variants(color: str, *, dark: bool = False) -> ColorblindVariants:
    values = {}
    for kind in SIMULATED_TYPES:
        variant = generate_colorblind_color(color, kind)
        values[kind.value] = generate_dark_color(variant) if dark else variant
    return ColorblindVariants(**values)


def generate_variant_set(color: str) -> VariantSet:
    """Every presentation variant of one color."""
    high_contrast = generate_high_contrast_color(color)
    return VariantSet(
        base=normalize_hex(color),
        dark=generate_dark_color(color),
        high_contrast=high_contrast,
        dark_high_contrast=generate_dark_color(high_contrast),
        colorblind=_colorblind_variants(color),
        dark_colorblind=_colorblind_variants(color, dark=True),
    )


def fixed_variant_set(value: str) -> VariantSet:
    """A variant set that uses the same value everywhere (e.g. an rgba overlay)."""
    same = ColorblindVariants(
        protanopia=value, deuteranopia=value, tritanopia=value, achromatopsia=value
    )
    return VariantSet(
        base=value,
        dark=value,
        high_contrast=value,
        dark_high_contrast=value,
        colorblind=same,
        dark_colorblind=same,
    )


# =============================================================================
# Auxiliary colors
# =============================================================================


def _as_result(color: ColorResult | str) -> ColorResult:
    if isinstance(color, ColorResult):
        return color
    return hsl_to_color_result(hex_to_hsl(color))


def generate_shadow_colors(color: ColorResult | str) -> ShadowColors:
    """Three darker, desaturated shadow tones."""
    base = _as_result(color).hsl

    def shadow(s_drop: float, l_drop: float, role: PaletteRole) -> ColorResult:
        return hsl_to_color_result(
            base.replace(s=max(0, base.s - s_drop), l=max(0, base.l - l_drop)), role=role
        )

    return ShadowColors(
        light=shadow(20, 10, PaletteRole.SHADOW_LIGHT),
        medium=shadow(25, 20, PaletteRole.SHADOW_MEDIUM),
        dark=shadow(30, 30, PaletteRole.SHADOW_DARK),
    )


def generate_modal_overlay(color: ColorResult | str) -> ColorResult:
    """The color at 50% opacity, for modal backdrops."""
    base = _as_result(color)
    return base.updated(
        hex=rgba_string(base.rgb, 0.5),
        role=PaletteRole.MODAL_OVERLAY,
        name=f"{base.name} (50% Opacity)",
        is_accessible=True,
        contrast_ratio=1.0,
        alpha=0.5,
    )


def generate_blur_overlay(color: ColorResult | str) -> ColorResult:
    """A near-white tint of the color at 80% opacity."""
    hsl = _as_result(color).hsl
    blur = hsl_to_color_result(hsl.replace(s=max(0, hsl.s - 15), l=95), role=PaletteRole.BLUR_OVERLAY)
    return blur.updated(hex=rgba_string(blur.rgb, 0.8), alpha=0.8)


def generate_focus_ring(color: ColorResult | str) -> ColorResult:
    """A brighter, more saturated ring color for focus outlines."""
    hsl = _as_result(color).hsl
    return hsl_to_color_result(
        hsl.replace(s=min(100, hsl.s + 10), l=min(70, hsl.l + 15)),
        role=PaletteRole.FOCUS_RING,
    )
