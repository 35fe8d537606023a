"""
Semantic role IR types.

Roles are owned by the caller (a UI keeps the list, names and ids); the
engine only reads each role's type and its occurrence index among roles
of the same type.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from .color import ColorResult


class RoleType(StrEnum):
    """Semantic purpose of a caller-defined role."""

    BACKGROUND = "Background"
    TEXT = "Text"
    BORDER = "Border"
    HIGHLIGHT = "Highlight"
    ACCENT = "Accent"
    CTA = "CTA"
    LINK = "Link"
    SUCCESS = "Success"
    WARNING = "Warning"
    ERROR = "Error"
    INFO = "Info"
    DISABLED = "Disabled"
    SECONDARY = "Secondary"
    OVERLAY = "Overlay"


class Role(BaseModel):
    """A named role supplied by the caller."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(min_length=1)
    type: RoleType


def default_roles() -> list[Role]:
    """One role per type, named after the type."""
    return [Role(id=index, name=kind.value, type=kind) for index, kind in enumerate(RoleType, 1)]


class ColorblindVariants(BaseModel):
    """One value per simulated deficiency."""

    model_config = ConfigDict(frozen=True)

    protanopia: str
    deuteranopia: str
    tritanopia: str
    achromatopsia: str


class VariantSet(BaseModel):
    """Every presentation variant of one role color."""

    model_config = ConfigDict(frozen=True)

    base: str
    dark: str
    high_contrast: str
    dark_high_contrast: str
    colorblind: ColorblindVariants
    dark_colorblind: ColorblindVariants


class RoleResult(BaseModel):
    """The color chosen for one role, with its variants."""

    model_config = ConfigDict(frozen=True)

    role: Role
    color: str
    variants: VariantSet


class TextColorSet(BaseModel):
    """Text colors derived for a single background."""

    model_config = ConfigDict(frozen=True)

    primary: ColorResult
    secondary: ColorResult
    tertiary: ColorResult
    link: ColorResult
    link_hover: ColorResult
    inactive: ColorResult


class ShadowColors(BaseModel):
    """Three shadow depths derived from one color."""

    model_config = ConfigDict(frozen=True)

    light: ColorResult
    medium: ColorResult
    dark: ColorResult
