"""
palettespec.yaml commands for hueforge CLI.

Commands:
- spec init: Write a default palettespec.yaml
- spec show: Print the palettespec in effect for a directory
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from hueforge.core.errors import HueforgeError
from hueforge.core.palettespec_loader import (
    get_palettespec_path,
    load_palettespec,
    palettespec_exists,
    scaffold_palettespec,
)

from .utils import console, fail

spec_app = typer.Typer(
    help="Manage palettespec.yaml palette configuration",
    no_args_is_help=True,
)


@spec_app.command("init")
def spec_init(
    path: Annotated[Path, typer.Option("--path", "-p", help="Project directory")] = Path("."),
    base: Annotated[str, typer.Option("--base", "-b", help="Base color")] = "#3498db",
    scheme: Annotated[
        str, typer.Option("--scheme", "-s", help="Harmony scheme")
    ] = "monochromatic",
    force: Annotated[
        bool, typer.Option("--force", help="Overwrite an existing palettespec.yaml")
    ] = False,
) -> None:
    """Create a palettespec.yaml with default roles."""
    try:
        written = scaffold_palettespec(path, base_color=base, scheme=scheme, overwrite=force)
    except HueforgeError as e:
        fail(e)

    if written is None:
        console.print(
            f"[yellow]{get_palettespec_path(path)} already exists[/yellow] (use --force to overwrite)"
        )
        return
    console.print(f"[green]Created[/green] {written}")


@spec_app.command("show")
def spec_show(
    path: Annotated[Path, typer.Option("--path", "-p", help="Project directory")] = Path("."),
) -> None:
    """Show the palettespec in effect (defaults when no file exists)."""
    try:
        palettespec = load_palettespec(path)
    except HueforgeError as e:
        fail(e)

    source = get_palettespec_path(path) if palettespec_exists(path) else "defaults"
    table = Table(title=f"PaletteSpec ({source})")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("base_color", palettespec.base_color)
    table.add_row("scheme", palettespec.scheme.value)
    table.add_row("count", str(palettespec.count))
    table.add_row("mode", palettespec.mode.value)
    table.add_row("color_blindness", palettespec.color_blindness.value)
    table.add_row("dark_mode", str(palettespec.dark_mode).lower())
    console.print(table)

    roles = Table(title="Roles")
    roles.add_column("ID", justify="right")
    roles.add_column("Name", style="cyan")
    roles.add_column("Type")
    for role in palettespec.roles:
        roles.add_row(str(role.id), role.name, role.type.value)
    console.print(roles)
