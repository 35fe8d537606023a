"""
Accessibility commands for hueforge CLI.

Commands:
- contrast: WCAG contrast ratio of a text/background pair, optionally repaired
- simulate: How a color looks under each color-vision deficiency
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.table import Table

from hueforge.core.contrast import WCAG_THRESHOLDS, contrast_ratio, ensure_minimum_contrast, meets_wcag
from hueforge.core.conversion import normalize_hex
from hueforge.core.errors import HueforgeError
from hueforge.core.ir.color import ColorBlindnessType, coerce_tag
from hueforge.core.variants import SIMULATED_TYPES, generate_colorblind_color
from hueforge.core.vision import simulate_hex

from .utils import console, fail, swatch, yes_no


def contrast_command(
    foreground: Annotated[str, typer.Argument(help="Text color")],
    background: Annotated[str, typer.Argument(help="Background color")],
    target: Annotated[
        float, typer.Option("--target", "-t", help="Minimum ratio for --fix")
    ] = 4.5,
    fix: Annotated[
        bool, typer.Option("--fix", help="Adjust the text color until it meets --target")
    ] = False,
) -> None:
    """Check the WCAG contrast ratio of a text color on a background.

    Examples:
        hueforge contrast '#777' '#fff'
        hueforge contrast '#777' '#fff' --fix --target 7
    """
    try:
        foreground = normalize_hex(foreground)
        background = normalize_hex(background)
        ratio = contrast_ratio(foreground, background)
    except HueforgeError as e:
        fail(e)

    console.print(f"Contrast ratio {foreground} on {background}: [bold]{ratio:.2f}:1[/bold]")

    table = Table(title="WCAG 2.x")
    table.add_column("Level", style="cyan")
    table.add_column("Normal text", justify="center")
    table.add_column("Large text", justify="center")
    for level in WCAG_THRESHOLDS:
        table.add_row(
            level,
            yes_no(meets_wcag(ratio, level)),
            yes_no(meets_wcag(ratio, level, large_text=True)),
        )
    console.print(table)

    if fix:
        if ratio >= target:
            console.print(f"[green]Already meets {target:g}:1[/green]")
            return
        adjusted = ensure_minimum_contrast(background, foreground, target)
        new_ratio = contrast_ratio(adjusted, background)
        console.print(f"Adjusted text color: [bold]{adjusted}[/bold] ({new_ratio:.2f}:1)")


def simulate_command(
    color: Annotated[str, typer.Argument(help="Color to simulate")],
    type: Annotated[
        str | None,
        typer.Option(
            "--type",
            "-t",
            help="protanopia, deuteranopia, tritanopia or achromatopsia (default: all)",
        ),
    ] = None,
) -> None:
    """Show how a color appears under color-vision deficiencies.

    The simulated column applies a full linear-RGB model; the shortcut
    column is the quick hue-rotation variant used for role palettes.
    """
    try:
        base = normalize_hex(color)
        kinds = (
            [coerce_tag(ColorBlindnessType, type, "color_blindness")]
            if type
            else list(SIMULATED_TYPES)
        )
    except HueforgeError as e:
        fail(e)

    table = Table(title=f"Color-vision simulation of {base}")
    table.add_column("Type", style="cyan")
    table.add_column("", no_wrap=True)
    table.add_column("Simulated", style="bold")
    table.add_column("", no_wrap=True)
    table.add_column("Shortcut")
    for kind in kinds:
        simulated = simulate_hex(base, kind)
        shortcut = generate_colorblind_color(base, kind)
        table.add_row(kind.value, swatch(simulated), simulated, swatch(shortcut), shortcut)
    console.print(table)
