"""
Intermediate representation for hueforge.

Frozen pydantic models shared by the color engine, the palettespec loader
and the CLI.
"""

from .color import (
    HSL,
    RGB,
    ColorBlindnessType,
    ColorMode,
    ColorResult,
    PaletteRole,
    SchemeType,
    clamp,
    coerce_tag,
    wrap_hue,
)
from .palettespec import PaletteSpecYAML
from .roles import (
    ColorblindVariants,
    Role,
    RoleResult,
    RoleType,
    ShadowColors,
    TextColorSet,
    VariantSet,
    default_roles,
)

__all__ = [
    # Color
    "HSL",
    "RGB",
    "ColorBlindnessType",
    "ColorMode",
    "ColorResult",
    "PaletteRole",
    "SchemeType",
    "clamp",
    "coerce_tag",
    "wrap_hue",
    # Roles
    "ColorblindVariants",
    "Role",
    "RoleResult",
    "RoleType",
    "ShadowColors",
    "TextColorSet",
    "VariantSet",
    "default_roles",
    # Configuration
    "PaletteSpecYAML",
]
