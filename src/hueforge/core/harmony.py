"""
Harmony generation: from one base color to an ordered, role-tagged palette.

Pipeline of generate_color_scheme:

    base hex -> HSL -> scheme samples -> mode adjustment -> color results
    (hex, rgb, name, positional role) -> background/text contrast repair
    -> optional color-vision simulation

Multi-cluster schemes share one routine parametrized by their anchor
offsets. When more colors are requested than a scheme has anchors, the
anchors become groups that fan out around their hue.
"""

from __future__ import annotations

import logging
import math

from .conversion import hex_to_hsl, hsl_to_color_result
from .errors import make_parameter_error
from .ir.color import (
    HSL,
    ColorBlindnessType,
    ColorMode,
    ColorResult,
    PaletteRole,
    SchemeType,
    coerce_tag,
)
from .modes import adjust_for_mode, is_high_contrast
from .reconcile import reconcile_contrast
from .vision import simulate_color_result

logger = logging.getLogger(__name__)

# =============================================================================
# Scheme geometry
# =============================================================================

# Anchor hue offsets (degrees from the base hue) per multi-cluster scheme
SCHEME_ANCHORS: dict[SchemeType, tuple[float, ...]] = {
    SchemeType.COMPLEMENTARY: (0.0, 180.0),
    SchemeType.SPLIT_COMPLEMENTARY: (0.0, 150.0, 210.0),
    SchemeType.TRIADIC: (0.0, 120.0, 240.0),
    SchemeType.TETRADIC: (0.0, 60.0, 180.0, 240.0),
    SchemeType.SQUARE: (0.0, 90.0, 180.0, 270.0),
}

# Fan-out inside an anchor group
_GROUP_HUE_STEP = 5.0
_GROUP_SATURATION_SPREAD = 5.0
_GROUP_LIGHTNESS_SPREAD = 7.0

# Analogous arc and drift
_ANALOGOUS_ARC = 60.0
_ANALOGOUS_SATURATION_DRIFT = 5.0
_ANALOGOUS_LIGHTNESS_DRIFT = 7.0

# Monochromatic lightness sweep (start, end) per mode, before mode adjustment.
# The dark sweep lands on 15-55 once the dark transform has run. The
# highContrastDark sweep starts at 60 so its transform (l - 30, floor 30)
# keeps every step distinct, landing on 30-65.
MONOCHROMATIC_SWEEPS: dict[ColorMode, tuple[float, float]] = {
    ColorMode.DEFAULT: (20.0, 85.0),
    ColorMode.HIGH_CONTRAST: (20.0, 85.0),
    ColorMode.DARK: (55.0, 95.0),
    ColorMode.HIGH_CONTRAST_DARK: (60.0, 95.0),
}

# Positional role tags
_CORE_ROLES: tuple[PaletteRole, ...] = (
    PaletteRole.PRIMARY,
    PaletteRole.SECONDARY,
    PaletteRole.ACCENT,
    PaletteRole.BACKGROUND,
    PaletteRole.SURFACE,
    PaletteRole.TEXT,
)
_EXTENDED_ROLES: tuple[PaletteRole, ...] = (
    PaletteRole.BORDER,
    PaletteRole.SUCCESS,
    PaletteRole.WARNING,
    PaletteRole.ERROR,
)


def _validate_count(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise make_parameter_error("count must be an integer >= 1", "count", count)


def _spread(index: int, size: int) -> float:
    """Position of member ``index`` in a group of ``size``, scaled to [-1, 1]."""
    if size < 2:
        return 0.0
    half = (size - 1) / 2
    return (index - half) / half


# =============================================================================
# Hue layout
# =============================================================================


def group_sizes(count: int, anchors: int) -> list[int]:
    """Split ``count`` samples over ``anchors`` groups.

    The first group gets ceil(count / anchors), the others floor(count /
    anchors), and the last group absorbs whatever remains so the sizes
    always sum to ``count``.
    """
    sizes = [math.ceil(count / anchors)] + [count // anchors] * (anchors - 1)
    sizes[-1] = count - sum(sizes[:-1])
    return sizes


def _fan_out(anchor: HSL, size: int, high_contrast: bool) -> list[HSL]:
    members = []
    for j in range(size):
        offset = j - (size - 1) / 2
        t = _spread(j, size)
        saturation = anchor.s if high_contrast else anchor.s + _GROUP_SATURATION_SPREAD * t
        members.append(
            HSL(
                h=anchor.h + offset * _GROUP_HUE_STEP,
                s=saturation,
                l=anchor.l + _GROUP_LIGHTNESS_SPREAD * t,
            )
        )
    return members


def clustered_hues(
    base: HSL,
    offsets: tuple[float, ...],
    count: int,
    *,
    high_contrast: bool = False,
) -> list[HSL]:
    """Lay out ``count`` samples around anchor hues at ``offsets`` from the base.

    Shared by complementary, split-complementary, triadic, tetradic and
    square schemes.
    """
    anchors = [base.replace(h=base.h + offset) for offset in offsets]
    if count <= len(anchors):
        return anchors[:count]

    samples: list[HSL] = []
    for anchor, size in zip(anchors, group_sizes(count, len(anchors)), strict=True):
        samples.extend(_fan_out(anchor, size, high_contrast))
    return samples


def monochromatic_hues(base: HSL, count: int, mode: ColorMode = ColorMode.DEFAULT) -> list[HSL]:
    """Fixed hue and saturation, lightness swept linearly across the mode's range."""
    start, end = MONOCHROMATIC_SWEEPS[mode]
    step = (end - start) / (count - 1)
    return [base.replace(l=start + i * step) for i in range(count)]


def analogous_hues(base: HSL, count: int, *, high_contrast: bool = False) -> list[HSL]:
    """A 60-degree arc centred on the base hue with a slight s/l drift."""
    step = _ANALOGOUS_ARC / (count - 1)
    samples = []
    for i in range(count):
        t = _spread(i, count)
        saturation = base.s if high_contrast else base.s + _ANALOGOUS_SATURATION_DRIFT * t
        samples.append(
            HSL(
                h=base.h - _ANALOGOUS_ARC / 2 + i * step,
                s=saturation,
                l=base.l + _ANALOGOUS_LIGHTNESS_DRIFT * t,
            )
        )
    return samples


def generate_hues(
    base: HSL,
    scheme: SchemeType | str,
    count: int,
    mode: ColorMode | str = ColorMode.DEFAULT,
) -> list[HSL]:
    """Produce the raw (pre-mode-adjustment) samples for a scheme.

    Args:
        base: Base color.
        scheme: Harmony scheme.
        count: Number of samples (>= 1).
        mode: Presentation mode; selects the monochromatic sweep and
            suppresses saturation fan-out in high-contrast modes.

    Returns:
        ``count`` HSL samples. A single sample is always the base itself.

    Raises:
        InvalidParameter: For an unknown scheme/mode or count < 1.
    """
    scheme = coerce_tag(SchemeType, scheme, "scheme")
    mode = coerce_tag(ColorMode, mode, "mode")
    _validate_count(count)

    if count == 1:
        return [base]

    high_contrast = is_high_contrast(mode)
    if scheme is SchemeType.MONOCHROMATIC:
        return monochromatic_hues(base, count, mode)
    if scheme is SchemeType.ANALOGOUS:
        return analogous_hues(base, count, high_contrast=high_contrast)
    return clustered_hues(base, SCHEME_ANCHORS[scheme], count, high_contrast=high_contrast)


# =============================================================================
# Palette assembly
# =============================================================================


def assign_palette_role(index: int) -> PaletteRole:
    """Positional role: six core roles, four extended roles, then the core six again."""
    if index < len(_CORE_ROLES):
        return _CORE_ROLES[index]
    extended = index - len(_CORE_ROLES)
    if extended < len(_EXTENDED_ROLES):
        return _EXTENDED_ROLES[extended]
    return _CORE_ROLES[(extended - len(_EXTENDED_ROLES)) % len(_CORE_ROLES)]


def generate_color_scheme(
    base_hex: str,
    scheme: SchemeType | str,
    count: int,
    mode: ColorMode | str = ColorMode.DEFAULT,
    color_blindness: ColorBlindnessType | str = ColorBlindnessType.NONE,
) -> list[ColorResult]:
    """Generate an ordered palette from a base color.

    Args:
        base_hex: Seed color as 3- or 6-digit hex.
        scheme: Harmony scheme.
        count: Number of colors (>= 1).
        mode: Presentation mode.
        color_blindness: Deficiency to simulate on the final colors.

    Returns:
        ``count`` color results in palette order.

    Raises:
        InvalidColorFormat: If ``base_hex`` is malformed.
        InvalidParameter: For count < 1 or an unknown tag.
    """
    scheme = coerce_tag(SchemeType, scheme, "scheme")
    mode = coerce_tag(ColorMode, mode, "mode")
    color_blindness = coerce_tag(ColorBlindnessType, color_blindness, "color_blindness")
    _validate_count(count)
    base = hex_to_hsl(base_hex)

    logger.debug(
        "Generating %d %s colors from %s (mode=%s, color_blindness=%s)",
        count,
        scheme,
        base_hex,
        mode,
        color_blindness,
    )

    samples = adjust_for_mode(generate_hues(base, scheme, count, mode), mode)
    colors = [
        hsl_to_color_result(hsl, role=assign_palette_role(index))
        for index, hsl in enumerate(samples)
    ]
    colors = reconcile_contrast(colors, mode)

    if color_blindness is not ColorBlindnessType.NONE:
        colors = [simulate_color_result(color, color_blindness) for color in colors]
    return colors
