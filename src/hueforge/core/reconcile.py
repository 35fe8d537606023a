"""
Background/text contrast reconciliation for a generated palette.

Only the first color tagged ``background`` and the first tagged ``text``
take part. An unreachable target marks both colors inaccessible and keeps
them as generated; the black/white fallback of ``ensure_minimum_contrast``
is not used here.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .contrast import contrast_ratio, ensure_minimum_contrast
from .conversion import hex_to_hsl, hex_to_rgb
from .ir.color import ColorMode, ColorResult, PaletteRole
from .modes import is_high_contrast
from .naming import get_color_name

logger = logging.getLogger(__name__)

NORMAL_TARGET = 4.5
HIGH_CONTRAST_TARGET = 7.0


def target_contrast(mode: ColorMode | str) -> float:
    """Minimum background/text ratio for a mode."""
    return HIGH_CONTRAST_TARGET if is_high_contrast(mode) else NORMAL_TARGET


def _first_index(colors: Sequence[ColorResult], role: PaletteRole) -> int | None:
    for index, color in enumerate(colors):
        if color.role == role:
            return index
    return None


def reconcile_contrast(colors: Sequence[ColorResult], mode: ColorMode | str) -> list[ColorResult]:
    """Repair background/text contrast in a role-tagged palette.

    Args:
        colors: Role-tagged colors in palette order.
        mode: Presentation mode; high-contrast modes require 7.0, others 4.5.

    Returns:
        A new list. Untouched when there are fewer than two colors or no
        background/text pair.
    """
    result = list(colors)
    if len(result) < 2:
        return result

    bg_index = _first_index(result, PaletteRole.BACKGROUND)
    text_index = _first_index(result, PaletteRole.TEXT)
    if bg_index is None or text_index is None:
        return result

    background = result[bg_index]
    text = result[text_index]
    target = target_contrast(mode)
    ratio = contrast_ratio(background.hex, text.hex)

    if ratio >= target:
        result[bg_index] = background.updated(contrast_ratio=ratio, is_accessible=True)
        result[text_index] = text.updated(contrast_ratio=ratio, is_accessible=True)
        return result

    adjusted = ensure_minimum_contrast(background.hex, text.hex, target, fallback=False)
    if adjusted is None:
        logger.debug(
            "Background %s / text %s stuck at %.2f (target %.1f)",
            background.hex,
            text.hex,
            ratio,
            target,
        )
        result[bg_index] = background.updated(contrast_ratio=ratio, is_accessible=False)
        result[text_index] = text.updated(contrast_ratio=ratio, is_accessible=False)
        return result

    new_ratio = contrast_ratio(background.hex, adjusted)
    logger.debug("Text %s -> %s (%.2f -> %.2f)", text.hex, adjusted, ratio, new_ratio)
    adjusted_hsl = hex_to_hsl(adjusted)
    result[text_index] = text.updated(
        hex=adjusted,
        hsl=adjusted_hsl,
        rgb=hex_to_rgb(adjusted),
        name=get_color_name(adjusted_hsl),
        is_accessible=True,
        contrast_ratio=new_ratio,
    )
    result[bg_index] = background.updated(contrast_ratio=new_ratio, is_accessible=True)
    return result
