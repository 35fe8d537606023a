"""
PaletteSpec persistence layer.

Handles reading and writing palette configuration to palettespec.yaml in
a project root. A PaletteSpec holds the inputs for deterministic palette
generation so the CLI can reproduce a palette without repeating flags.

Default location: {project_root}/palettespec.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import PaletteSpecError
from .ir.color import ColorBlindnessType, ColorMode, SchemeType
from .ir.palettespec import PaletteSpecYAML
from .ir.roles import default_roles

logger = logging.getLogger(__name__)

PALETTESPEC_FILE = "palettespec.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_palettespec_path(project_root: Path) -> Path:
    """Get the palettespec.yaml file path."""
    return project_root / PALETTESPEC_FILE


def palettespec_exists(project_root: Path) -> bool:
    """Check if a palettespec.yaml exists in the project."""
    return get_palettespec_path(project_root).exists()


# =============================================================================
# Loading
# =============================================================================


def _parse_palettespec_data(data: Any, source: Path) -> PaletteSpecYAML:
    if not isinstance(data, dict):
        raise PaletteSpecError(f"Expected a mapping in {source}, got {type(data).__name__}")
    return PaletteSpecYAML(**data)


def load_palettespec(project_root: Path, *, use_defaults: bool = True) -> PaletteSpecYAML:
    """Load PaletteSpec from palettespec.yaml.

    Args:
        project_root: Directory holding palettespec.yaml.
        use_defaults: If True, return the default PaletteSpec when the file
            is missing or empty.

    Returns:
        PaletteSpecYAML instance.

    Raises:
        PaletteSpecError: If the file is missing (when use_defaults=False),
            is not valid YAML, or fails schema validation.
    """
    palettespec_path = get_palettespec_path(project_root)

    if not palettespec_path.exists():
        if use_defaults:
            logger.debug("No palettespec.yaml found, using defaults")
            return create_default_palettespec()
        raise PaletteSpecError(f"PaletteSpec not found: {palettespec_path}")

    try:
        content = palettespec_path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)

        if not data:
            if use_defaults:
                logger.warning(f"Empty palettespec.yaml at {palettespec_path}, using defaults")
                return create_default_palettespec()
            raise PaletteSpecError(f"Empty or invalid YAML in {palettespec_path}")

        return _parse_palettespec_data(data, palettespec_path)

    except yaml.YAMLError as e:
        raise PaletteSpecError(f"Invalid YAML in {palettespec_path}: {e}") from e
    except ValidationError as e:
        raise PaletteSpecError(f"Invalid PaletteSpec schema in {palettespec_path}: {e}") from e


def save_palettespec(project_root: Path, palettespec: PaletteSpecYAML) -> Path:
    """Save PaletteSpec to palettespec.yaml.

    Args:
        project_root: Directory to write into.
        palettespec: PaletteSpecYAML to save.

    Returns:
        Path to the saved palettespec.yaml file.
    """
    palettespec_path = get_palettespec_path(project_root)

    data = palettespec.model_dump(mode="json")

    palettespec_path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved PaletteSpec to {palettespec_path}")
    return palettespec_path


# =============================================================================
# Scaffolding
# =============================================================================


def create_default_palettespec(
    base_color: str = "#3498db",
    scheme: SchemeType | str = SchemeType.MONOCHROMATIC,
) -> PaletteSpecYAML:
    """Create a default PaletteSpecYAML.

    Args:
        base_color: Seed color.
        scheme: Harmony scheme.

    Returns:
        PaletteSpecYAML with one role per role type.
    """
    return PaletteSpecYAML(
        base_color=base_color,
        scheme=scheme,
        count=5,
        mode=ColorMode.DEFAULT,
        color_blindness=ColorBlindnessType.NONE,
        dark_mode=False,
        roles=default_roles(),
    )


def scaffold_palettespec(
    project_root: Path,
    *,
    base_color: str = "#3498db",
    scheme: SchemeType | str = SchemeType.MONOCHROMATIC,
    overwrite: bool = False,
) -> Path | None:
    """Create a default palettespec.yaml file.

    Args:
        project_root: Directory to write into.
        base_color: Seed color.
        scheme: Harmony scheme.
        overwrite: If True, overwrite an existing file.

    Returns:
        Path to the created file, or None if skipped.

    Raises:
        PaletteSpecError: If ``base_color`` or ``scheme`` is invalid.
    """
    palettespec_path = get_palettespec_path(project_root)

    if palettespec_path.exists() and not overwrite:
        logger.debug(f"Skipping existing palettespec: {palettespec_path}")
        return None

    try:
        palettespec = create_default_palettespec(base_color, scheme)
    except ValidationError as e:
        raise PaletteSpecError(f"Invalid PaletteSpec values: {e}") from e
    return save_palettespec(project_root, palettespec)
