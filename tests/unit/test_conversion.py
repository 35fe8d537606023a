"""Tests for hex/RGB/HSL conversion and color naming."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from hueforge.core.conversion import (
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_color_result,
    hsl_to_hex,
    hsl_to_rgb,
    normalize_hex,
    rgb_to_hex,
    rgba_string,
)
from hueforge.core.errors import InvalidColorFormat
from hueforge.core.ir import HSL, RGB, PaletteRole
from hueforge.core.naming import get_color_name

SAMPLE_HEXES = ["#3498db", "#000000", "#ffffff", "#ff8000", "#123456", "#7f7f80", "#e74c3c"]


class TestNormalizeHex:
    """Test hex validation and normalization."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("#3498DB", "#3498db"),
            ("3498db", "#3498db"),
            ("#ABC", "#aabbcc"),
            ("f80", "#ff8800"),
            ("  #3498db ", "#3498db"),
        ],
    )
    def test_valid(self, value, expected):
        assert normalize_hex(value) == expected

    @pytest.mark.parametrize("value", ["#12345G", "#1234", "#1234567", "", "#", "blue", "#ff 000"])
    def test_invalid(self, value):
        with pytest.raises(InvalidColorFormat):
            normalize_hex(value)

    def test_non_string_rejected(self):
        with pytest.raises(InvalidColorFormat):
            normalize_hex(0x3498DB)  # type: ignore[arg-type]

    def test_error_carries_value(self):
        with pytest.raises(InvalidColorFormat) as exc_info:
            normalize_hex("#12345G")
        assert exc_info.value.context is not None
        assert exc_info.value.context.value == "#12345G"


class TestHexRgb:
    """Test hex <-> RGB."""

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#3498db") == RGB(r=52, g=152, b=219)

    def test_short_hex_to_rgb(self):
        assert hex_to_rgb("#fff").as_tuple() == (255, 255, 255)

    def test_rgb_to_hex_lowercase(self):
        assert rgb_to_hex(RGB(r=255, g=0, b=128)) == "#ff0080"

    def test_rgb_bounds(self):
        with pytest.raises(ValidationError):
            RGB(r=256, g=0, b=0)

    def test_rgba_string(self):
        assert rgba_string(RGB(r=52, g=152, b=219), 0.5) == "rgba(52, 152, 219, 0.5)"


class TestHsl:
    """Test HSL conversion and normalization."""

    @pytest.mark.parametrize(
        "hex_value,h,s,l",
        [
            ("#ff0000", 0, 100, 50),
            ("#00ff00", 120, 100, 50),
            ("#0000ff", 240, 100, 50),
            ("#ffffff", 0, 0, 100),
            ("#000000", 0, 0, 0),
        ],
    )
    def test_hex_to_hsl(self, hex_value, h, s, l):  # noqa: E741
        hsl = hex_to_hsl(hex_value)
        assert hsl.h == pytest.approx(h)
        assert hsl.s == pytest.approx(s)
        assert hsl.l == pytest.approx(l)

    def test_achromatic_has_zero_hue_and_saturation(self):
        hsl = hex_to_hsl("#808080")
        assert hsl.h == 0
        assert hsl.s == 0

    @pytest.mark.parametrize(
        "hsl,expected",
        [
            (HSL(h=0, s=100, l=50), "#ff0000"),
            (HSL(h=120, s=100, l=50), "#00ff00"),
            (HSL(h=0, s=0, l=50), "#808080"),
            (HSL(h=0, s=100, l=80), "#ff9999"),
        ],
    )
    def test_hsl_to_hex(self, hsl, expected):
        assert hsl_to_hex(hsl) == expected

    @pytest.mark.parametrize("hex_value", SAMPLE_HEXES)
    def test_round_trip_within_one_unit(self, hex_value):
        original = hex_to_rgb(hex_value)
        restored = hsl_to_rgb(hex_to_hsl(hex_value))
        for a, b in zip(original.as_tuple(), restored.as_tuple(), strict=True):
            assert abs(a - b) <= 1

    @pytest.mark.parametrize("h,expected", [(-30, 330), (360, 0), (720, 0), (405, 45)])
    def test_hue_wraps(self, h, expected):
        assert HSL(h=h, s=50, l=50).h == pytest.approx(expected)

    def test_percentages_clamp(self):
        hsl = HSL(h=10, s=150, l=-5)
        assert hsl.s == 100
        assert hsl.l == 0

    def test_replace_normalizes(self):
        hsl = HSL(h=350, s=50, l=50).replace(h=370, l=120)
        assert hsl.h == pytest.approx(10)
        assert hsl.l == 100
        assert hsl.s == 50

    def test_hsl_is_frozen(self):
        hsl = HSL(h=10, s=20, l=30)
        with pytest.raises(ValidationError):
            hsl.h = 20  # type: ignore[misc]


class TestColorResult:
    """Test building full color results."""

    def test_fields(self):
        color = hsl_to_color_result(HSL(h=0, s=100, l=50), role=PaletteRole.PRIMARY)
        assert color.hex == "#ff0000"
        assert color.rgb == RGB(r=255, g=0, b=0)
        assert color.role == PaletteRole.PRIMARY
        assert color.name == "Vivid Red"
        assert color.is_accessible is True
        assert color.contrast_ratio == 1.0
        assert color.alpha == 1.0

    def test_updated_returns_copy(self):
        color = hsl_to_color_result(HSL(h=0, s=100, l=50))
        changed = color.updated(is_accessible=False)
        assert changed.is_accessible is False
        assert color.is_accessible is True


class TestColorNames:
    """Test descriptive color naming."""

    @pytest.mark.parametrize(
        "hsl,expected",
        [
            (HSL(h=0, s=100, l=50), "Vivid Red"),
            (HSL(h=210, s=50, l=30), "Dark Azure"),
            (HSL(h=120, s=20, l=90), "Very Light Grayish Green"),
            (HSL(h=350, s=60, l=70), "Light Red"),
            (HSL(h=300, s=90, l=50), "Vivid Magenta"),
            (HSL(h=240, s=50, l=10), "Very Dark Blue"),
        ],
    )
    def test_chromatic(self, hsl, expected):
        assert get_color_name(hsl) == expected

    @pytest.mark.parametrize(
        "lightness,expected", [(10, "Black"), (50, "Gray"), (90, "White")]
    )
    def test_near_achromatic(self, lightness, expected):
        assert get_color_name(HSL(h=200, s=5, l=lightness)) == expected
