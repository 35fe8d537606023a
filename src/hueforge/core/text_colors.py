"""
Text colors for a background.

Primary text is pushed toward white or black until it meets the target
ratio; secondary, tertiary and inactive text are derived from it, and the
link pair uses a hue opposite-ish to the background.
"""

from __future__ import annotations

import logging

from .contrast import contrast_ratio
from .conversion import hex_to_hsl, hsl_to_color_result, hsl_to_hex
from .ir.color import HSL, ColorResult, PaletteRole
from .ir.roles import TextColorSet

logger = logging.getLogger(__name__)

# (high contrast, normal) targets
PRIMARY_TARGETS = (7.0, 4.5)
SECONDARY_TARGETS = (5.5, 3.5)
TERTIARY_TARGETS = (4.5, 3.0)

_PRIMARY_STEP = 2
_PRIMARY_ATTEMPTS = 20
_LINK_HUE_SHIFT = 210


def _target(targets: tuple[float, float], high_contrast: bool) -> float:
    return targets[0] if high_contrast else targets[1]


def _primary_hsl(background: HSL, use_light: bool, dark_mode: bool) -> HSL:
    if use_light:
        return HSL(h=background.h, s=8 if dark_mode else 5, l=98 if dark_mode else 95)
    return HSL(h=background.h, s=8 if dark_mode else 10, l=8 if dark_mode else 10)


def _push_primary(background_hex: str, start: HSL, use_light: bool, target: float) -> str:
    """Step lightness toward the extreme until ``target`` is met, else keep the start."""
    for attempt in range(_PRIMARY_ATTEMPTS):
        delta = attempt * _PRIMARY_STEP
        candidate = hsl_to_hex(start.replace(l=start.l + delta if use_light else start.l - delta))
        if contrast_ratio(background_hex, candidate) >= target:
            return candidate
    logger.debug("Primary text on %s never reached %.1f", background_hex, target)
    return hsl_to_hex(start)


def _text_result(
    hsl: HSL,
    role: PaletteRole,
    name: str,
    background_hex: str,
    target: float | None,
) -> ColorResult:
    """Color result with its ratio against the background.

    ``target`` of None marks the color accessible regardless of its ratio.
    """
    color = hsl_to_color_result(hsl, role=role)
    ratio = contrast_ratio(background_hex, color.hex)
    return color.updated(
        name=name,
        contrast_ratio=ratio,
        is_accessible=True if target is None else ratio >= target,
    )


def generate_text_colors(
    background: ColorResult | str,
    dark_mode: bool = False,
    high_contrast: bool = False,
) -> TextColorSet:
    """Text colors tuned for one background.

    Args:
        background: Background color result or hex.
        dark_mode: Dark presentation (brighter links, less muted inactive text).
        high_contrast: Use the stricter 7 / 5.5 / 4.5 targets.

    Returns:
        Primary, secondary, tertiary, link, link-hover and inactive colors.
    """
    if isinstance(background, ColorResult):
        background_hex, background_hsl = background.hex, background.hsl
    else:
        background_hsl = hex_to_hsl(background)
        background_hex = hsl_to_hex(background_hsl)

    use_light = background_hsl.l < 50
    primary_target = _target(PRIMARY_TARGETS, high_contrast)
    secondary_target = _target(SECONDARY_TARGETS, high_contrast)

    primary_hex = _push_primary(
        background_hex,
        _primary_hsl(background_hsl, use_light, dark_mode),
        use_light,
        primary_target,
    )
    primary_hsl = hex_to_hsl(primary_hex)

    if use_light:
        secondary_l = max(50, primary_hsl.l - 15)
        tertiary_l = max(40, primary_hsl.l - 25)
        inactive_l = max(30, primary_hsl.l - (30 if dark_mode else 35))
    else:
        secondary_l = min(70, primary_hsl.l + 20)
        tertiary_l = min(80, primary_hsl.l + 30)
        inactive_l = min(85, primary_hsl.l + (30 if dark_mode else 35))

    if dark_mode:
        link_s = 85 if high_contrast else 75
        link_l = 70 if use_light else 50
    else:
        link_s = 80 if high_contrast else 70
        link_l = 65 if use_light else 45
    link_hsl = HSL(h=background_hsl.h + _LINK_HUE_SHIFT, s=link_s, l=link_l)
    hover_hsl = link_hsl.replace(
        s=min(100, link_hsl.s + 10),
        l=min(75, link_hsl.l + 10) if use_light else max(35, link_hsl.l - 5),
    )
    inactive_hsl = primary_hsl.replace(
        s=max(0, primary_hsl.s - (5 if dark_mode else 10)), l=inactive_l
    )

    return TextColorSet(
        primary=_text_result(
            primary_hsl,
            PaletteRole.TEXT_PRIMARY,
            "Light Text" if use_light else "Dark Text",
            background_hex,
            primary_target,
        ),
        secondary=_text_result(
            primary_hsl.replace(l=secondary_l),
            PaletteRole.TEXT_SECONDARY,
            "Secondary Text",
            background_hex,
            secondary_target,
        ),
        tertiary=_text_result(
            primary_hsl.replace(l=tertiary_l),
            PaletteRole.TEXT_TERTIARY,
            "Tertiary Text",
            background_hex,
            _target(TERTIARY_TARGETS, high_contrast),
        ),
        link=_text_result(
            link_hsl, PaletteRole.TEXT_LINK, "Link Text", background_hex, secondary_target
        ),
        link_hover=_text_result(
            hover_hsl, PaletteRole.TEXT_LINK_HOVER, "Link Hover", background_hex, None
        ),
        inactive=_text_result(
            inactive_hsl, PaletteRole.TEXT_INACTIVE, "Inactive Text", background_hex, None
        ),
    )
