"""
Palette commands for hueforge CLI.

Commands:
- generate: Harmony palette from a base color
- roles: Semantic role palette with presentation variants
- variants: Presentation variants and auxiliary colors of one color
- text: Text colors tuned for a background
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from hueforge.core.errors import HueforgeError
from hueforge.core.export import format_colors, format_role_variants
from hueforge.core.harmony import generate_color_scheme
from hueforge.core.ir.color import ColorResult
from hueforge.core.ir.palettespec import PaletteSpecYAML
from hueforge.core.ir.roles import default_roles
from hueforge.core.palettespec_loader import load_palettespec
from hueforge.core.roles import VARIANT_KEYS, assemble_role_palette
from hueforge.core.text_colors import generate_text_colors
from hueforge.core.variants import (
    generate_blur_overlay,
    generate_focus_ring,
    generate_modal_overlay,
    generate_shadow_colors,
    generate_variant_set,
)

from .utils import console, fail, swatch, yes_no

logger = logging.getLogger(__name__)

_TABLE_FORMATS = ("table", "json", "css", "scss", "tailwind")


def _color_table(title: str, colors: list[tuple[str, ColorResult]], *, show_contrast: bool) -> Table:
    table = Table(title=title)
    table.add_column("", no_wrap=True)
    table.add_column("Label", style="cyan")
    table.add_column("Hex", style="bold")
    table.add_column("Name")
    table.add_column("HSL", style="bright_black")
    if show_contrast:
        table.add_column("Contrast", justify="right")
        table.add_column("Accessible", justify="center")

    for label, color in colors:
        hsl = color.hsl
        row = [
            swatch(color.hex),
            label,
            color.hex,
            color.name,
            f"{hsl.h:.0f}, {hsl.s:.0f}%, {hsl.l:.0f}%",
        ]
        if show_contrast:
            row += [f"{color.contrast_ratio:.2f}", yes_no(color.is_accessible)]
        table.add_row(*row)
    return table


def _load_spec(spec: Path | None) -> PaletteSpecYAML | None:
    return None if spec is None else load_palettespec(spec, use_defaults=False)


def generate_command(
    base: Annotated[
        str | None,
        typer.Argument(help="Base color, e.g. '#3498db' or 'f80' (default: from --spec)"),
    ] = None,
    scheme: Annotated[
        str | None, typer.Option("--scheme", "-s", help="Harmony scheme [default: monochromatic]")
    ] = None,
    count: Annotated[
        int | None, typer.Option("--count", "-n", help="Number of colors [default: 5]")
    ] = None,
    mode: Annotated[
        str | None,
        typer.Option("--mode", "-m", help="default, dark, highContrast or highContrastDark"),
    ] = None,
    color_blindness: Annotated[
        str | None,
        typer.Option("--color-blindness", "-c", help="Deficiency to simulate on the output"),
    ] = None,
    spec: Annotated[
        Path | None,
        typer.Option(
            "--spec",
            help="Project directory holding palettespec.yaml; explicit flags override it",
        ),
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json, css, scss or tailwind"),
    ] = "table",
) -> None:
    """Generate a harmony palette from a base color.

    Examples:
        hueforge generate '#3498db'                         # Monochromatic table
        hueforge generate f80 -s triadic -n 6 -f css        # CSS custom properties
        hueforge generate '#222' -m highContrastDark -f json
        hueforge generate --spec . -n 8                     # palettespec.yaml, 8 colors
    """
    if format not in _TABLE_FORMATS:
        fail(f"Unknown format {format!r}; expected one of: {', '.join(_TABLE_FORMATS)}")

    try:
        palettespec = _load_spec(spec)
        if palettespec is not None:
            base = base or palettespec.base_color
            scheme = scheme or palettespec.scheme
            count = palettespec.count if count is None else count
            mode = mode or palettespec.mode
            color_blindness = color_blindness or palettespec.color_blindness
        if base is None:
            fail("Missing BASE color (pass it or use --spec)")
        scheme = scheme or "monochromatic"
        count = 5 if count is None else count
        logger.debug("generate %s scheme=%s count=%s mode=%s", base, scheme, count, mode)

        colors = generate_color_scheme(
            base, scheme, count, mode or "default", color_blindness or "none"
        )
        if format != "table":
            typer.echo(format_colors(colors, format))
            return
    except HueforgeError as e:
        fail(e)

    rows = [(color.role.value if color.role else f"color-{i}", color) for i, color in enumerate(colors)]
    console.print(_color_table(f"{scheme} palette from {base}", rows, show_contrast=True))


def roles_command(
    base: Annotated[
        str | None, typer.Argument(help="Base color (default: from --spec)")
    ] = None,
    scheme: Annotated[
        str | None, typer.Option("--scheme", "-s", help="Harmony scheme [default: monochromatic]")
    ] = None,
    dark: Annotated[bool, typer.Option("--dark", help="Dark role palette")] = False,
    spec: Annotated[
        Path | None,
        typer.Option(
            "--spec",
            help="Project directory holding palettespec.yaml; supplies roles, dark_mode "
            "and, when not given, the base color and scheme",
        ),
    ] = None,
    variant: Annotated[
        list[str] | None,
        typer.Option("--variant", help="Variant key to include (repeatable), e.g. darkHighContrast"),
    ] = None,
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: table, css or list")
    ] = "table",
) -> None:
    """Assemble a semantic role palette.

    Examples:
        hueforge roles '#3498db'                               # Table of roles
        hueforge roles '#3498db' --dark -f css                 # Every variant as CSS
        hueforge roles '#3498db' --variant base --variant dark -f list
        hueforge roles --spec .                                # Everything from palettespec.yaml
    """
    try:
        palettespec = _load_spec(spec)
        if palettespec is not None:
            roles = palettespec.roles
            dark = dark or palettespec.dark_mode
            base = base or palettespec.base_color
            scheme = scheme or palettespec.scheme
        else:
            roles = default_roles()
        if base is None:
            fail("Missing BASE color (pass it or use --spec)")

        results = assemble_role_palette(base, scheme or "monochromatic", roles, dark_mode=dark)
        if format in ("css", "list"):
            typer.echo(format_role_variants(results, variant, format))
            return
        if format != "table":
            fail(f"Unknown format {format!r}; expected one of: table, css, list")
    except HueforgeError as e:
        fail(e)

    table = Table(title=f"Role palette from {base} ({'dark' if dark else 'light'})")
    table.add_column("", no_wrap=True)
    table.add_column("Role", style="cyan")
    table.add_column("Type")
    table.add_column("Color", style="bold")
    table.add_column("Dark")
    table.add_column("High Contrast")
    for result in results:
        table.add_row(
            swatch(result.color),
            result.role.name,
            result.role.type.value,
            result.color,
            result.variants.dark,
            result.variants.high_contrast,
        )
    console.print(table)


def variants_command(
    color: Annotated[str, typer.Argument(help="Color to derive variants from")],
) -> None:
    """Show presentation variants, shadows, overlays and the focus ring of a color."""
    try:
        variants = generate_variant_set(color)
        shadows = generate_shadow_colors(color)
        auxiliary = [
            ("Shadow (light)", shadows.light),
            ("Shadow (medium)", shadows.medium),
            ("Shadow (dark)", shadows.dark),
            ("Modal overlay", generate_modal_overlay(color)),
            ("Blur overlay", generate_blur_overlay(color)),
            ("Focus ring", generate_focus_ring(color)),
        ]
    except HueforgeError as e:
        fail(e)

    table = Table(title=f"Variants of {variants.base}")
    table.add_column("", no_wrap=True)
    table.add_column("Variant", style="cyan")
    table.add_column("Key", style="bright_black")
    table.add_column("Value", style="bold")
    for key in VARIANT_KEYS:
        value = key.read(variants)
        table.add_row(swatch(value), key.label, key.key, value)
    console.print(table)

    aux_table = Table(title="Auxiliary colors")
    aux_table.add_column("", no_wrap=True)
    aux_table.add_column("Use", style="cyan")
    aux_table.add_column("Value", style="bold")
    aux_table.add_column("Name")
    for label, result in auxiliary:
        aux_table.add_row(swatch(result.hex), label, result.hex, result.name)
    console.print(aux_table)


def text_command(
    background: Annotated[str, typer.Argument(help="Background color")],
    dark: Annotated[bool, typer.Option("--dark", help="Dark presentation")] = False,
    high_contrast: Annotated[
        bool, typer.Option("--high-contrast", help="Stricter contrast targets")
    ] = False,
) -> None:
    """Show text colors tuned for a background."""
    try:
        text = generate_text_colors(background, dark, high_contrast)
    except HueforgeError as e:
        fail(e)

    rows = [
        ("primary", text.primary),
        ("secondary", text.secondary),
        ("tertiary", text.tertiary),
        ("link", text.link),
        ("link hover", text.link_hover),
        ("inactive", text.inactive),
    ]
    console.print(_color_table(f"Text colors on {background}", rows, show_contrast=True))
