"""
Semantic role colors.

``adjust_color_for_role`` nudges a color for one caller-defined role using
a rule table keyed by role type. ``assemble_role_palette`` runs it over a
whole role list, giving repeated roles of the same type slightly different
shades, and attaches every presentation variant.

The engine never touches a document: ``role_css_variables`` returns the
custom-property mapping and the caller applies it.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .conversion import hex_to_hsl, hsl_to_hex
from .errors import make_parameter_error
from .harmony import generate_color_scheme
from .ir.color import HSL, SchemeType, coerce_tag
from .ir.roles import Role, RoleResult, RoleType, VariantSet, default_roles
from .variants import SIMULATED_TYPES, fixed_variant_set, generate_variant_set

logger = logging.getLogger(__name__)

# =============================================================================
# Rule table
# =============================================================================


@dataclass(frozen=True)
class RoleRule:
    """How one role type reshapes a color.

    Lightness is ``lightness + lightness_step * index``, then bounded by
    ``lightness_floor`` / ``lightness_cap`` when set. Hue is either fixed
    or shifted; saturation is either fixed or boosted (capped at 100).
    """

    lightness: float
    lightness_step: float = 0.0
    lightness_floor: float | None = None
    lightness_cap: float | None = None
    hue: float | None = None
    hue_shift: float = 0.0
    saturation: float | None = None
    saturation_boost: float = 0.0

    def apply(self, hsl: HSL, index: int) -> HSL:
        lightness = self.lightness + self.lightness_step * index
        if self.lightness_floor is not None:
            lightness = max(self.lightness_floor, lightness)
        if self.lightness_cap is not None:
            lightness = min(self.lightness_cap, lightness)

        hue = self.hue if self.hue is not None else hsl.h + self.hue_shift
        if self.saturation is not None:
            saturation = self.saturation
        else:
            saturation = min(100, hsl.s + self.saturation_boost)

        return HSL(h=hue, s=saturation, l=lightness)


ROLE_RULES: dict[RoleType, RoleRule] = {
    RoleType.BACKGROUND: RoleRule(lightness=90, lightness_step=-2, lightness_cap=95),
    RoleType.TEXT: RoleRule(lightness=15, lightness_step=3, lightness_floor=5),
    RoleType.BORDER: RoleRule(lightness=50, lightness_step=2, lightness_cap=70),
    RoleType.HIGHLIGHT: RoleRule(lightness=60, lightness_step=-3, lightness_cap=90),
    RoleType.ACCENT: RoleRule(lightness=55, lightness_step=-2, saturation_boost=10),
    RoleType.CTA: RoleRule(lightness=45, lightness_step=-2, saturation_boost=15),
    RoleType.LINK: RoleRule(lightness=50, lightness_step=-2, hue_shift=20),
    RoleType.SUCCESS: RoleRule(lightness=40, lightness_step=2, hue=120, saturation_boost=10),
    RoleType.WARNING: RoleRule(lightness=50, lightness_step=2, hue=35, saturation_boost=10),
    RoleType.ERROR: RoleRule(lightness=50, lightness_step=-2, hue=0, saturation_boost=10),
    RoleType.INFO: RoleRule(lightness=50, lightness_step=-2, hue=200, saturation_boost=10),
    RoleType.DISABLED: RoleRule(lightness=70, lightness_step=2, saturation=0),
    RoleType.SECONDARY: RoleRule(lightness=25, lightness_step=3, lightness_floor=5),
    RoleType.OVERLAY: RoleRule(lightness=20, lightness_step=-2, lightness_floor=0),
}


def adjust_color_for_role(color: str, role_type: RoleType | str, occurrence_index: int) -> str:
    """Reshape a color for a semantic role.

    Args:
        color: Hex color to adjust.
        role_type: Semantic role tag.
        occurrence_index: How many roles of the same type came before this one.

    Returns:
        Adjusted hex color.

    Raises:
        InvalidParameter: For an unknown role type or a negative index.
    """
    role_type = coerce_tag(RoleType, role_type, "role_type")
    if isinstance(occurrence_index, bool) or not isinstance(occurrence_index, int):
        raise make_parameter_error(
            "occurrence_index must be an integer", "occurrence_index", occurrence_index
        )
    if occurrence_index < 0:
        raise make_parameter_error(
            "occurrence_index must be >= 0", "occurrence_index", occurrence_index
        )
    return hsl_to_hex(ROLE_RULES[role_type].apply(hex_to_hsl(color), occurrence_index))


# =============================================================================
# Role palette
# =============================================================================

LIGHT_OVERLAY = "rgba(0, 0, 0, 0.3)"
DARK_OVERLAY = "rgba(255, 255, 255, 0.2)"

# Lightness for the first three Background roles
_BACKGROUND_LIGHTNESS = {False: (98, 88, 78), True: (10, 20, 30)}


def assemble_role_palette(
    base_hex: str,
    scheme: SchemeType | str,
    roles: Sequence[Role],
    *,
    dark_mode: bool = False,
) -> list[RoleResult]:
    """Pick a color (and its variants) for every caller-defined role.

    Args:
        base_hex: Seed color.
        scheme: Harmony scheme used to produce one color per role.
        roles: Roles in display order.
        dark_mode: Selects the overlay value and background lightness ladder.

    Returns:
        One result per role, in the same order. Empty for no roles.
    """
    if not roles:
        return []

    scheme_colors = [c.hex for c in generate_color_scheme(base_hex, scheme, len(roles))]
    seen: dict[RoleType, int] = {}
    results: list[RoleResult] = []

    for role, scheme_color in zip(roles, scheme_colors, strict=True):
        occurrence = seen.get(role.type, 0)
        seen[role.type] = occurrence + 1

        if role.type is RoleType.OVERLAY:
            color = DARK_OVERLAY if dark_mode else LIGHT_OVERLAY
            variants = fixed_variant_set(color)
        else:
            color = adjust_color_for_role(scheme_color, role.type, occurrence)
            ladder = _BACKGROUND_LIGHTNESS[dark_mode]
            if role.type is RoleType.BACKGROUND and occurrence < len(ladder):
                color = hsl_to_hex(hex_to_hsl(color).replace(l=ladder[occurrence]))
            variants = generate_variant_set(color)

        results.append(RoleResult(role=role, color=color, variants=variants))

    logger.debug("Assembled %d role colors from %s (%s)", len(results), base_hex, scheme)
    return results


# =============================================================================
# Variant keys and CSS custom properties
# =============================================================================


@dataclass(frozen=True)
class VariantKey:
    """A selectable variant: lookup key, CSS suffix, display label and reader."""

    key: str
    suffix: str
    label: str
    read: Callable[[VariantSet], str]


def _variant_keys() -> tuple[VariantKey, ...]:
    keys = [
        VariantKey("base", "", "Base", lambda v: v.base),
        VariantKey("dark", "-dark", "Dark", lambda v: v.dark),
        VariantKey("highContrast", "-hc", "High Contrast", lambda v: v.high_contrast),
        VariantKey("darkHighContrast", "-dark-hc", "Dark High Contrast", lambda v: v.dark_high_contrast),
    ]
    for kind in SIMULATED_TYPES:
        keys.append(
            VariantKey(
                f"colorblind_{kind.value}",
                f"-cb-{kind.value}",
                f"Colorblind ({kind.value.capitalize()})",
                lambda v, attr=kind.value: getattr(v.colorblind, attr),
            )
        )
    for kind in SIMULATED_TYPES:
        keys.append(
            VariantKey(
                f"darkColorblind_{kind.value}",
                f"-dark-cb-{kind.value}",
                f"Dark Colorblind ({kind.value.capitalize()})",
                lambda v, attr=kind.value: getattr(v.dark_colorblind, attr),
            )
        )
    return tuple(keys)


VARIANT_KEYS: tuple[VariantKey, ...] = _variant_keys()
_VARIANTS_BY_KEY = {variant.key: variant for variant in VARIANT_KEYS}


def get_variant_key(key: str) -> VariantKey:
    """Look up a variant key, raising InvalidParameter when unknown."""
    variant = _VARIANTS_BY_KEY.get(key)
    if variant is None:
        raise make_parameter_error("Unknown variant", "variant", key, allowed=list(_VARIANTS_BY_KEY))
    return variant


def variant_value(variants: VariantSet, key: str) -> str:
    """Read one variant from a set by its key (e.g. ``darkColorblind_tritanopia``)."""
    return get_variant_key(key).read(variants)


def sanitize_name(name: str) -> str:
    """Lowercase a role name and replace whitespace runs with dashes."""
    return re.sub(r"\s+", "-", name.lower())


def role_css_variables(results: Sequence[RoleResult]) -> dict[str, str]:
    """CSS custom properties for every role and variant.

    Keys look like ``--color-<role-name><suffix>``. Later roles with the
    same sanitized name overwrite earlier ones.
    """
    variables: dict[str, str] = {}
    for result in results:
        prefix = f"--color-{sanitize_name(result.role.name)}"
        for variant in VARIANT_KEYS:
            variables[prefix + variant.suffix] = variant_value(result.variants, variant.key)
    return variables
