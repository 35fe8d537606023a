"""
hueforge - deterministic color-harmony engine.

Generates palettes from one base color, adapts them to dark and
high-contrast presentation, simulates color-vision deficiencies and
repairs WCAG text contrast.
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.contrast import contrast_ratio, ensure_minimum_contrast
from .core.conversion import hex_to_hsl, hsl_to_hex, hsl_to_rgb
from .core.errors import HueforgeError, InvalidColorFormat, InvalidParameter, PaletteSpecError
from .core.export import format_colors, format_role_variants
from .core.harmony import generate_color_scheme
from .core.naming import get_color_name
from .core.palettespec_loader import load_palettespec
from .core.roles import adjust_color_for_role, assemble_role_palette, role_css_variables
from .core.text_colors import generate_text_colors
from .core.variants import (
    generate_colorblind_color,
    generate_dark_color,
    generate_high_contrast_color,
    generate_variant_set,
)
from .core.vision import simulate_color_blindness

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "HueforgeError",
    "InvalidColorFormat",
    "InvalidParameter",
    "PaletteSpecError",
    "generate_color_scheme",
    "adjust_color_for_role",
    "generate_dark_color",
    "generate_high_contrast_color",
    "generate_colorblind_color",
    "generate_variant_set",
    "hex_to_hsl",
    "hsl_to_hex",
    "hsl_to_rgb",
    "get_color_name",
    "contrast_ratio",
    "ensure_minimum_contrast",
    "simulate_color_blindness",
    "assemble_role_palette",
    "role_css_variables",
    "generate_text_colors",
    "format_colors",
    "format_role_variants",
    "load_palettespec",
]
