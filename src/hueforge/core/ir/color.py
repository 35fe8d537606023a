"""
Color IR types: channel models, generated color results and the tags that
select how a palette is generated.

HSL is the canonical internal representation. Constructing an HSL wraps
hue modulo 360 and clamps saturation/lightness to [0, 100], so every
arithmetic step that rebuilds an HSL stays in range.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import make_parameter_error

# =============================================================================
# Enums
# =============================================================================


class SchemeType(StrEnum):
    """Harmony rule used to distribute hues around the base hue."""

    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    SPLIT_COMPLEMENTARY = "splitComplementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    SQUARE = "square"


class ColorMode(StrEnum):
    """Presentation mode; changes saturation/lightness, never hue."""

    DEFAULT = "default"
    DARK = "dark"
    HIGH_CONTRAST = "highContrast"
    HIGH_CONTRAST_DARK = "highContrastDark"


class ColorBlindnessType(StrEnum):
    """Color-vision deficiency to simulate."""

    NONE = "none"
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"
    ACHROMATOPSIA = "achromatopsia"


class PaletteRole(StrEnum):
    """Tag written onto a generated color."""

    # Positional roles of generate_color_scheme
    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"
    BACKGROUND = "background"
    SURFACE = "surface"
    TEXT = "text"
    BORDER = "border"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"

    # Text color set
    TEXT_PRIMARY = "text-primary"
    TEXT_SECONDARY = "text-secondary"
    TEXT_TERTIARY = "text-tertiary"
    TEXT_LINK = "text-link"
    TEXT_LINK_HOVER = "text-link-hover"
    TEXT_INACTIVE = "text-inactive"

    # Auxiliary colors
    SHADOW_LIGHT = "shadow-light"
    SHADOW_MEDIUM = "shadow-medium"
    SHADOW_DARK = "shadow-dark"
    MODAL_OVERLAY = "modal-overlay"
    BLUR_OVERLAY = "blur-overlay"
    FOCUS_RING = "focus-ring"


E = TypeVar("E", bound=StrEnum)


def coerce_tag(enum_cls: type[E], value: str | E, parameter: str) -> E:
    """Convert a string tag to its enum member.

    Args:
        enum_cls: Target StrEnum class.
        value: Member or its string value.
        parameter: Parameter name used in the error message.

    Returns:
        The enum member.

    Raises:
        InvalidParameter: If the value is not a member of the enum.
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise make_parameter_error(
            f"Unknown {parameter}",
            parameter,
            value,
            allowed=[member.value for member in enum_cls],
        ) from None


# =============================================================================
# Channel models
# =============================================================================


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def wrap_hue(hue: float) -> float:
    """Wrap a hue in degrees into [0, 360)."""
    wrapped = hue % 360.0
    # -1e-15 % 360 rounds up to 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


class HSL(BaseModel):
    """Hue (degrees), saturation and lightness (percent)."""

    model_config = ConfigDict(frozen=True)

    h: float = Field(default=0.0, description="Hue in degrees, wrapped into [0, 360)")
    s: float = Field(default=0.0, description="Saturation percent, clamped to [0, 100]")
    l: float = Field(default=0.0, description="Lightness percent, clamped to [0, 100]")  # noqa: E741

    @field_validator("h")
    @classmethod
    def _wrap_hue(cls, v: float) -> float:
        return wrap_hue(v)

    @field_validator("s", "l")
    @classmethod
    def _clamp_percent(cls, v: float) -> float:
        return clamp(v, 0.0, 100.0)

    def replace(self, **changes: float) -> HSL:
        """Return a normalized copy with some components replaced."""
        data = {"h": self.h, "s": self.s, "l": self.l}
        data.update(changes)
        return HSL(**data)


class RGB(BaseModel):
    """8-bit red, green and blue channels."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


# =============================================================================
# Generated colors
# =============================================================================


class ColorResult(BaseModel):
    """One generated color, as handed back to callers."""

    model_config = ConfigDict(frozen=True)

    hex: str = Field(description="#rrggbb, or rgba(...) for alpha variants")
    hsl: HSL
    rgb: RGB
    role: PaletteRole | None = None
    name: str = ""
    is_accessible: bool = True
    contrast_ratio: float = Field(default=1.0, ge=1.0)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    def updated(self, **changes: object) -> ColorResult:
        """Return a copy with the given fields replaced."""
        return self.model_copy(update=changes)
