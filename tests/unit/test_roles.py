"""Tests for semantic role colors and variant keys."""

from __future__ import annotations

import pytest

from hueforge.core.conversion import hex_to_hsl, hex_to_rgb
from hueforge.core.errors import InvalidParameter
from hueforge.core.ir import Role, RoleType, default_roles
from hueforge.core.roles import (
    DARK_OVERLAY,
    LIGHT_OVERLAY,
    ROLE_RULES,
    VARIANT_KEYS,
    adjust_color_for_role,
    assemble_role_palette,
    get_variant_key,
    role_css_variables,
    sanitize_name,
    variant_value,
)


def _hue_distance(a: float, b: float) -> float:
    gap = (b - a) % 360
    return min(gap, 360 - gap)


# (type, index, hue, saturation, lightness)
# hue: ("fixed", degrees) or ("shift", degrees from the input hue)
# saturation: ("fixed", value) or ("boost", added to the input saturation)
RULE_TABLE = [
    (RoleType.BACKGROUND, 0, ("shift", 0), ("boost", 0), 90),
    (RoleType.BACKGROUND, 2, ("shift", 0), ("boost", 0), 86),
    (RoleType.TEXT, 0, ("shift", 0), ("boost", 0), 15),
    (RoleType.TEXT, 2, ("shift", 0), ("boost", 0), 21),
    (RoleType.BORDER, 0, ("shift", 0), ("boost", 0), 50),
    (RoleType.BORDER, 2, ("shift", 0), ("boost", 0), 54),
    (RoleType.HIGHLIGHT, 0, ("shift", 0), ("boost", 0), 60),
    (RoleType.HIGHLIGHT, 2, ("shift", 0), ("boost", 0), 54),
    (RoleType.ACCENT, 0, ("shift", 0), ("boost", 10), 55),
    (RoleType.ACCENT, 2, ("shift", 0), ("boost", 10), 51),
    (RoleType.CTA, 0, ("shift", 0), ("boost", 15), 45),
    (RoleType.CTA, 2, ("shift", 0), ("boost", 15), 41),
    (RoleType.LINK, 0, ("shift", 20), ("boost", 0), 50),
    (RoleType.LINK, 2, ("shift", 20), ("boost", 0), 46),
    (RoleType.SUCCESS, 0, ("fixed", 120), ("boost", 10), 40),
    (RoleType.SUCCESS, 2, ("fixed", 120), ("boost", 10), 44),
    (RoleType.WARNING, 0, ("fixed", 35), ("boost", 10), 50),
    (RoleType.WARNING, 2, ("fixed", 35), ("boost", 10), 54),
    (RoleType.ERROR, 0, ("fixed", 0), ("boost", 10), 50),
    (RoleType.ERROR, 2, ("fixed", 0), ("boost", 10), 46),
    (RoleType.INFO, 0, ("fixed", 200), ("boost", 10), 50),
    (RoleType.INFO, 2, ("fixed", 200), ("boost", 10), 46),
    (RoleType.DISABLED, 0, None, ("fixed", 0), 70),
    (RoleType.DISABLED, 2, None, ("fixed", 0), 74),
    (RoleType.SECONDARY, 0, ("shift", 0), ("boost", 0), 25),
    (RoleType.SECONDARY, 2, ("shift", 0), ("boost", 0), 31),
    (RoleType.OVERLAY, 0, ("shift", 0), ("boost", 0), 20),
    (RoleType.OVERLAY, 2, ("shift", 0), ("boost", 0), 16),
]


class TestRoleRules:
    """Role rule table."""

    def test_every_type_has_a_rule(self):
        assert set(ROLE_RULES) == set(RoleType)

    def test_table_covers_every_type(self):
        assert {row[0] for row in RULE_TABLE} == set(RoleType)

    @pytest.mark.parametrize("role_type,index,hue,saturation,lightness", RULE_TABLE)
    def test_rule(self, base_hex, base_hsl, role_type, index, hue, saturation, lightness):
        hsl = hex_to_hsl(adjust_color_for_role(base_hex, role_type, index))

        assert hsl.l == pytest.approx(lightness, abs=1)

        kind, amount = saturation
        expected_s = amount if kind == "fixed" else min(100, base_hsl.s + amount)
        assert hsl.s == pytest.approx(expected_s, abs=2)

        if hue is not None:
            kind, amount = hue
            expected_h = amount if kind == "fixed" else base_hsl.h + amount
            assert _hue_distance(hsl.h, expected_h) == pytest.approx(0, abs=2)

    def test_saturation_boost_capped(self):
        for role_type in (RoleType.ACCENT, RoleType.CTA):
            hsl = hex_to_hsl(adjust_color_for_role("#ff0000", role_type, 0))
            assert hsl.s == pytest.approx(100)

    def test_overlay_floors_at_black(self, base_hex):
        assert adjust_color_for_role(base_hex, RoleType.OVERLAY, 10) == "#000000"
        assert adjust_color_for_role(base_hex, RoleType.OVERLAY, 25) == "#000000"

    def test_unbounded_steps_clamp_to_range(self, base_hex):
        assert hex_to_hsl(adjust_color_for_role(base_hex, RoleType.BACKGROUND, 20)).l == (
            pytest.approx(50, abs=1)
        )
        assert hex_to_hsl(adjust_color_for_role(base_hex, RoleType.HIGHLIGHT, 30)).l == 0

    def test_success_is_green(self, base_hex, base_hsl):
        hsl = hex_to_hsl(adjust_color_for_role(base_hex, "Success", 0))
        assert hsl.h == pytest.approx(120, abs=1)
        assert hsl.l == pytest.approx(40, abs=1)
        assert hsl.s == pytest.approx(base_hsl.s + 10, abs=2)

    @pytest.mark.parametrize("index,lightness", [(0, 90), (3, 84)])
    def test_background_steps(self, base_hex, index, lightness):
        hsl = hex_to_hsl(adjust_color_for_role(base_hex, RoleType.BACKGROUND, index))
        assert hsl.l == pytest.approx(lightness, abs=1)

    @pytest.mark.parametrize("index,lightness", [(0, 15), (5, 30)])
    def test_text_steps(self, base_hex, index, lightness):
        hsl = hex_to_hsl(adjust_color_for_role(base_hex, RoleType.TEXT, index))
        assert hsl.l == pytest.approx(lightness, abs=1)

    def test_disabled_is_gray(self, base_hex):
        rgb = hex_to_rgb(adjust_color_for_role(base_hex, RoleType.DISABLED, 0))
        assert rgb.r == rgb.g == rgb.b

    def test_link_shifts_hue(self, base_hex, base_hsl):
        hsl = hex_to_hsl(adjust_color_for_role(base_hex, RoleType.LINK, 0))
        assert (hsl.h - base_hsl.h) % 360 == pytest.approx(20, abs=1)

    def test_unknown_type(self, base_hex):
        with pytest.raises(InvalidParameter):
            adjust_color_for_role(base_hex, "Banner", 0)

    @pytest.mark.parametrize("index", [-1, 1.5])
    def test_bad_index(self, base_hex, index):
        with pytest.raises(InvalidParameter):
            adjust_color_for_role(base_hex, RoleType.TEXT, index)


class TestAssembleRolePalette:
    """Whole role palettes."""

    def test_one_result_per_role_in_order(self, base_hex, sample_roles):
        results = assemble_role_palette(base_hex, "analogous", sample_roles)
        assert [r.role for r in results] == sample_roles
        for result in results:
            assert result.variants.base == result.color

    def test_empty(self, base_hex):
        assert assemble_role_palette(base_hex, "triadic", []) == []

    def test_default_roles_cover_every_type(self, base_hex):
        results = assemble_role_palette(base_hex, "triadic", default_roles())
        assert len(results) == len(RoleType)
        assert {r.role.type for r in results} == set(RoleType)

    @pytest.mark.parametrize(
        "dark_mode,ladder", [(False, [98, 88, 78, 84]), (True, [10, 20, 30, 84])]
    )
    def test_background_ladder(self, base_hex, dark_mode, ladder):
        roles = [Role(id=i, name=f"Surface {i}", type=RoleType.BACKGROUND) for i in range(4)]
        results = assemble_role_palette(base_hex, "monochromatic", roles, dark_mode=dark_mode)
        assert [hex_to_hsl(r.color).l for r in results] == pytest.approx(ladder, abs=1)

    @pytest.mark.parametrize("dark_mode,expected", [(False, LIGHT_OVERLAY), (True, DARK_OVERLAY)])
    def test_overlay(self, base_hex, sample_roles, dark_mode, expected):
        results = assemble_role_palette(base_hex, "triadic", sample_roles, dark_mode=dark_mode)
        overlay = results[-1]
        assert overlay.color == expected
        assert overlay.variants.dark == expected
        assert overlay.variants.colorblind.protanopia == expected

    def test_repeated_types_differ(self, base_hex, sample_roles):
        results = assemble_role_palette(base_hex, "monochromatic", sample_roles)
        assert results[0].color != results[1].color


class TestVariantKeys:
    def test_twelve_keys(self):
        assert len(VARIANT_KEYS) == 12
        assert [v.key for v in VARIANT_KEYS[:4]] == ["base", "dark", "highContrast", "darkHighContrast"]

    def test_lookup(self):
        key = get_variant_key("darkColorblind_tritanopia")
        assert key.suffix == "-dark-cb-tritanopia"
        assert key.label == "Dark Colorblind (Tritanopia)"

    def test_variant_value(self, base_hex, sample_roles):
        result = assemble_role_palette(base_hex, "triadic", sample_roles)[0]
        assert variant_value(result.variants, "highContrast") == result.variants.high_contrast
        assert variant_value(result.variants, "colorblind_deuteranopia") == (
            result.variants.colorblind.deuteranopia
        )

    def test_unknown_key(self):
        with pytest.raises(InvalidParameter):
            get_variant_key("sepia")


class TestCssVariables:
    @pytest.mark.parametrize(
        "name,expected",
        [("Primary Button", "primary-button"), ("Body  \tText", "body-text"), ("CTA", "cta")],
    )
    def test_sanitize_name(self, name, expected):
        assert sanitize_name(name) == expected

    def test_all_roles_and_variants(self, base_hex):
        results = assemble_role_palette(base_hex, "triadic", default_roles())
        variables = role_css_variables(results)
        assert len(variables) == len(RoleType) * len(VARIANT_KEYS)
        background = results[0]
        assert variables["--color-background"] == background.color
        assert variables["--color-background-dark"] == background.variants.dark
        assert variables["--color-text-dark-cb-protanopia"] == (
            results[1].variants.dark_colorblind.protanopia
        )
        assert variables["--color-overlay-hc"] == LIGHT_OVERLAY

    def test_later_role_wins_on_name_clash(self, base_hex):
        roles = [
            Role(id=1, name="Panel", type=RoleType.BACKGROUND),
            Role(id=2, name="panel", type=RoleType.TEXT),
        ]
        results = assemble_role_palette(base_hex, "triadic", roles)
        assert role_css_variables(results)["--color-panel"] == results[1].color
