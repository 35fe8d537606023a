"""Core hueforge functionality: conversion, contrast, harmony, modes, simulation, roles, export."""

from . import ir
from .contrast import contrast_ratio, ensure_minimum_contrast, meets_wcag, relative_luminance
from .conversion import hex_to_hsl, hex_to_rgb, hsl_to_hex, hsl_to_rgb, normalize_hex
from .errors import (
    ErrorContext,
    HueforgeError,
    InvalidColorFormat,
    InvalidParameter,
    PaletteSpecError,
)
from .export import ExportFormat, format_colors, format_role_variants
from .harmony import generate_color_scheme
from .modes import adjust_for_mode
from .naming import get_color_name
from .palettespec_loader import (
    create_default_palettespec,
    load_palettespec,
    palettespec_exists,
    save_palettespec,
    scaffold_palettespec,
)
from .reconcile import reconcile_contrast
from .roles import (
    VARIANT_KEYS,
    adjust_color_for_role,
    assemble_role_palette,
    default_roles,
    role_css_variables,
)
from .text_colors import generate_text_colors
from .variants import (
    generate_blur_overlay,
    generate_colorblind_color,
    generate_dark_color,
    generate_focus_ring,
    generate_high_contrast_color,
    generate_modal_overlay,
    generate_shadow_colors,
    generate_variant_set,
)
from .vision import simulate_color_blindness, simulate_hex

__all__ = [
    "ir",
    # Errors
    "HueforgeError",
    "InvalidColorFormat",
    "InvalidParameter",
    "PaletteSpecError",
    "ErrorContext",
    # Conversion
    "normalize_hex",
    "hex_to_rgb",
    "hex_to_hsl",
    "hsl_to_rgb",
    "hsl_to_hex",
    "get_color_name",
    # Contrast
    "relative_luminance",
    "contrast_ratio",
    "meets_wcag",
    "ensure_minimum_contrast",
    # Generation
    "generate_color_scheme",
    "adjust_for_mode",
    "reconcile_contrast",
    "simulate_color_blindness",
    "simulate_hex",
    # Roles and variants
    "adjust_color_for_role",
    "assemble_role_palette",
    "role_css_variables",
    "generate_dark_color",
    "generate_high_contrast_color",
    "generate_colorblind_color",
    "generate_shadow_colors",
    "generate_modal_overlay",
    "generate_blur_overlay",
    "generate_focus_ring",
    "generate_variant_set",
    "default_roles",
    "VARIANT_KEYS",
    "generate_text_colors",
    # Export and configuration
    "ExportFormat",
    "format_colors",
    "format_role_variants",
    "load_palettespec",
    "save_palettespec",
    "palettespec_exists",
    "create_default_palettespec",
    "scaffold_palettespec",
]
