"""
Palette export to CSS, SCSS, Tailwind config and JSON.

Pure string builders: callers decide where the text goes.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Sequence
from enum import StrEnum

from .errors import make_parameter_error
from .ir.color import ColorResult, coerce_tag
from .ir.roles import RoleResult
from .roles import VARIANT_KEYS, get_variant_key, sanitize_name


class ExportFormat(StrEnum):
    """Output format for a generated palette."""

    CSS = "css"
    SCSS = "scss"
    TAILWIND = "tailwind"
    JSON = "json"


def color_key(color: ColorResult, index: int) -> str:
    """Export key for a color: its role tag, or ``color-<index>`` when untagged."""
    return color.role.value if color.role else f"color-{index}"


def _keyed(colors: Sequence[ColorResult]) -> list[tuple[str, str]]:
    return [(color_key(color, index), color.hex) for index, color in enumerate(colors)]


def _css(pairs: list[tuple[str, str]]) -> str:
    lines = [f"  --color-{key}: {value};" for key, value in pairs]
    return "\n".join([":root {", *lines, "}"])


def _scss(pairs: list[tuple[str, str]]) -> str:
    return "\n".join(f"${key}: {value};" for key, value in pairs)


def _tailwind(pairs: list[tuple[str, str]]) -> str:
    lines = [f"        '{key}': '{value}'," for key, value in pairs]
    return "\n".join(
        [
            "module.exports = {",
            "  theme: {",
            "    extend: {",
            "      colors: {",
            *lines,
            "      }",
            "    }",
            "  }",
            "}",
        ]
    )


def _json(pairs: list[tuple[str, str]]) -> str:
    return json.dumps(dict(pairs), indent=2)


_FORMATTERS: dict[ExportFormat, Callable[[list[tuple[str, str]]], str]] = {
    ExportFormat.CSS: _css,
    ExportFormat.SCSS: _scss,
    ExportFormat.TAILWIND: _tailwind,
    ExportFormat.JSON: _json,
}


def format_colors(colors: Sequence[ColorResult], fmt: ExportFormat | str = ExportFormat.CSS) -> str:
    """Render a palette in one of the export formats.

    Args:
        colors: Palette in order.
        fmt: ``css``, ``scss``, ``tailwind`` or ``json``.

    Returns:
        The rendered text. Repeated keys keep only the last color in JSON.

    Raises:
        InvalidParameter: For an unknown format.
    """
    fmt = coerce_tag(ExportFormat, fmt, "format")
    return _FORMATTERS[fmt](_keyed(colors))


def format_role_variants(
    results: Sequence[RoleResult],
    variant_keys: Iterable[str] | None = None,
    output: str = "css",
) -> str:
    """Render selected variants of a role palette.

    Args:
        results: Output of ``assemble_role_palette``.
        variant_keys: Keys such as ``base`` or ``darkColorblind_tritanopia``;
            all variants when omitted.
        output: ``css`` for custom-property lines, ``list`` for readable lines.

    Returns:
        One line per role and variant.

    Raises:
        InvalidParameter: For an unknown variant key or output style.
    """
    if output not in ("css", "list"):
        raise make_parameter_error("Unknown output style", "output", output, allowed=["css", "list"])

    if variant_keys is None:
        variants = list(VARIANT_KEYS)
    else:
        variants = [get_variant_key(key) for key in variant_keys]

    lines = []
    for result in results:
        for variant in variants:
            value = variant.read(result.variants)
            if output == "css":
                lines.append(f"--color-{sanitize_name(result.role.name)}{variant.suffix}: {value};")
            else:
                lines.append(f"{result.role.name} ({variant.label}): {value}")
    return "\n".join(lines)
