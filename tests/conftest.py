"""Shared pytest fixtures for hueforge tests."""

import pytest

from hueforge.core.ir import HSL, ColorResult, PaletteRole, Role, RoleType
from hueforge.core.conversion import hex_to_hsl, hsl_to_color_result


@pytest.fixture
def base_hex() -> str:
    """The default seed color used across tests."""
    return "#3498db"


@pytest.fixture
def base_hsl(base_hex: str) -> HSL:
    return hex_to_hsl(base_hex)


@pytest.fixture
def make_color():
    """Build a role-tagged ColorResult from a hex string."""

    def _make(hex_value: str, role: PaletteRole | None = None) -> ColorResult:
        return hsl_to_color_result(hex_to_hsl(hex_value), role=role)

    return _make


@pytest.fixture
def sample_roles() -> list[Role]:
    """A small caller-defined role list with a repeated type."""
    return [
        Role(id=1, name="Page", type=RoleType.BACKGROUND),
        Role(id=2, name="Card", type=RoleType.BACKGROUND),
        Role(id=3, name="Body Text", type=RoleType.TEXT),
        Role(id=4, name="Primary Button", type=RoleType.CTA),
        Role(id=5, name="Scrim", type=RoleType.OVERLAY),
    ]
