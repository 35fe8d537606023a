"""
PaletteSpec YAML IR types for declarative palette configuration.

Defines the structure of palettespec.yaml: the generation inputs (base
color, scheme, count, mode, color-vision simulation) plus the role list
used for semantic role palettes.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .color import ColorBlindnessType, ColorMode, SchemeType
from .roles import Role, default_roles


class PaletteSpecYAML(BaseModel):
    """Root palettespec.yaml structure."""

    model_config = ConfigDict(frozen=True)

    base_color: str = Field(default="#3498db", description="Seed color as 3- or 6-digit hex")
    scheme: SchemeType = Field(default=SchemeType.MONOCHROMATIC, description="Harmony scheme")
    count: int = Field(default=5, ge=1, description="Number of colors to generate")
    mode: ColorMode = Field(default=ColorMode.DEFAULT, description="Presentation mode")
    color_blindness: ColorBlindnessType = Field(
        default=ColorBlindnessType.NONE, description="Deficiency to simulate"
    )
    dark_mode: bool = Field(default=False, description="Dark variant of the role palette")
    roles: list[Role] = Field(default_factory=default_roles, description="Semantic roles")

    @field_validator("base_color")
    @classmethod
    def _normalize_base_color(cls, v: str) -> str:
        from ..conversion import normalize_hex
        from ..errors import InvalidColorFormat

        try:
            return normalize_hex(v)
        except InvalidColorFormat as e:
            raise ValueError(str(e)) from e
