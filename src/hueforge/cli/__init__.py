"""
hueforge CLI Package.

This package contains the CLI components:

- palette.py: generate, roles, variants and text commands
- accessibility.py: contrast and simulate commands
- spec.py: palettespec.yaml management (spec init / spec show)
- utils.py: Shared utilities
"""

import typer

from hueforge._version import get_version
from hueforge.cli.accessibility import contrast_command, simulate_command
from hueforge.cli.palette import generate_command, roles_command, text_command, variants_command
from hueforge.cli.spec import spec_app
from hueforge.cli.utils import configure_logging, version_callback

__version__ = get_version()

app = typer.Typer(
    help="""hueforge - deterministic color harmony

Command Types:
  • Palettes: generate, roles, variants, text
    → Build palettes from one base color

  • Accessibility: contrast, simulate
    → WCAG contrast checks and color-vision simulation

  • Configuration: spec init, spec show
    → Manage palettespec.yaml in a project directory
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """hueforge CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="generate")(generate_command)
app.command(name="roles")(roles_command)
app.command(name="variants")(variants_command)
app.command(name="text")(text_command)
app.command(name="contrast")(contrast_command)
app.command(name="simulate")(simulate_command)
app.add_typer(spec_app, name="spec")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = [
    "__version__",
    "app",
    "main",
    "spec_app",
    "get_version",
    "version_callback",
]
