"""
hueforge CLI utilities.

Shared helpers used across CLI modules: version display, logging setup,
error reporting and color swatches.
"""

import logging
import os
import platform
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from hueforge._version import get_version
from hueforge.core.errors import HueforgeError

console = Console()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "HUEFORGE_LOG_LEVEL"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        console.print(f"hueforge {get_version()}")
        console.print(
            f"Python {platform.python_version()} ({platform.python_implementation()})",
            style="bright_black",
        )
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for a CLI run.

    ``--verbose`` forces DEBUG; otherwise the level comes from
    ``HUEFORGE_LOG_LEVEL`` and defaults to WARNING.
    """
    level_name = "DEBUG" if verbose else os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=LOG_FORMAT,
    )


def fail(error: HueforgeError | str) -> NoReturn:
    """Print an error in red and exit with status 1."""
    console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False)
    raise typer.Exit(code=1)


def swatch(value: str, width: int = 4) -> Text:
    """A block of background color; blank for non-hex values such as rgba()."""
    if not value.startswith("#"):
        return Text(" " * width)
    return Text(" " * width, style=f"on {value}")


def yes_no(flag: bool) -> str:
    return "[green]yes[/green]" if flag else "[red]no[/red]"
