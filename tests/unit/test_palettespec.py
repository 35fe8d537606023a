"""Tests for the PaletteSpec IR model and palettespec.yaml loader."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from hueforge.core.errors import PaletteSpecError

# =============================================================================
# IR model
# =============================================================================


class TestPaletteSpecIR:
    """Test PaletteSpecYAML."""

    def test_default_construction(self):
        from hueforge.core.ir import PaletteSpecYAML

        spec = PaletteSpecYAML()
        assert spec.base_color == "#3498db"
        assert spec.scheme == "monochromatic"
        assert spec.count == 5
        assert spec.mode == "default"
        assert spec.color_blindness == "none"
        assert spec.dark_mode is False
        assert len(spec.roles) == 14

    def test_base_color_normalized(self):
        from hueforge.core.ir import PaletteSpecYAML

        assert PaletteSpecYAML(base_color="ABC").base_color == "#aabbcc"

    @pytest.mark.parametrize(
        "field,value",
        [
            ("base_color", "#12345G"),
            ("count", 0),
            ("scheme", "hexagonal"),
            ("mode", "sepia"),
            ("color_blindness", "colorful"),
        ],
    )
    def test_invalid_values(self, field, value):
        from hueforge.core.ir import PaletteSpecYAML

        with pytest.raises(ValidationError):
            PaletteSpecYAML(**{field: value})

    def test_frozen(self):
        from hueforge.core.ir import PaletteSpecYAML

        spec = PaletteSpecYAML()
        with pytest.raises(ValidationError):
            spec.count = 3  # type: ignore[misc]

    def test_role_requires_name(self):
        from hueforge.core.ir import Role

        with pytest.raises(ValidationError):
            Role(id=1, name="", type="Background")


# =============================================================================
# Loader
# =============================================================================


class TestPaletteSpecLoader:
    """Test palettespec.yaml persistence."""

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        from hueforge.core.palettespec_loader import create_default_palettespec, load_palettespec

        assert load_palettespec(tmp_path) == create_default_palettespec()

    def test_missing_file_without_defaults(self, tmp_path: Path):
        from hueforge.core.palettespec_loader import load_palettespec

        with pytest.raises(PaletteSpecError, match="not found"):
            load_palettespec(tmp_path, use_defaults=False)

    def test_empty_file_warns(self, tmp_path: Path, caplog):
        from hueforge.core.palettespec_loader import load_palettespec

        (tmp_path / "palettespec.yaml").write_text("", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="hueforge.core.palettespec_loader"):
            spec = load_palettespec(tmp_path)
        assert spec.count == 5
        assert "Empty palettespec.yaml" in caplog.text

    def test_empty_file_without_defaults(self, tmp_path: Path):
        from hueforge.core.palettespec_loader import load_palettespec

        (tmp_path / "palettespec.yaml").write_text("", encoding="utf-8")
        with pytest.raises(PaletteSpecError):
            load_palettespec(tmp_path, use_defaults=False)

    def test_load_values(self, tmp_path: Path):
        from hueforge.core.ir import RoleType
        from hueforge.core.palettespec_loader import load_palettespec

        (tmp_path / "palettespec.yaml").write_text(
            """
base_color: "#E74C3C"
scheme: triadic
count: 6
mode: highContrast
dark_mode: true
roles:
  - id: 1
    name: Page
    type: Background
  - id: 2
    name: Body
    type: Text
""",
            encoding="utf-8",
        )
        spec = load_palettespec(tmp_path)
        assert spec.base_color == "#e74c3c"
        assert spec.scheme == "triadic"
        assert spec.count == 6
        assert spec.mode == "highContrast"
        assert spec.color_blindness == "none"
        assert spec.dark_mode is True
        assert [r.type for r in spec.roles] == [RoleType.BACKGROUND, RoleType.TEXT]

    @pytest.mark.parametrize(
        "content,match",
        [
            ("base_color: [unclosed", "Invalid YAML"),
            ("count: 0\n", "Invalid PaletteSpec schema"),
            ("- just\n- a list\n", "Expected a mapping"),
            ("roles:\n  - id: 1\n    name: X\n    type: Banner\n", "Invalid PaletteSpec schema"),
        ],
    )
    def test_invalid_files(self, tmp_path: Path, content, match):
        from hueforge.core.palettespec_loader import load_palettespec

        (tmp_path / "palettespec.yaml").write_text(content, encoding="utf-8")
        with pytest.raises(PaletteSpecError, match=match):
            load_palettespec(tmp_path)

    def test_save_then_load(self, tmp_path: Path):
        from hueforge.core.ir import PaletteSpecYAML, Role
        from hueforge.core.palettespec_loader import load_palettespec, save_palettespec

        spec = PaletteSpecYAML(
            base_color="#2c3e50",
            scheme="square",
            count=8,
            roles=[Role(id=7, name="Hero", type="CTA")],
        )
        path = save_palettespec(tmp_path, spec)
        assert path == tmp_path / "palettespec.yaml"
        assert "scheme: square" in path.read_text(encoding="utf-8")
        assert load_palettespec(tmp_path) == spec

    def test_scaffold(self, tmp_path: Path):
        from hueforge.core.palettespec_loader import (
            load_palettespec,
            palettespec_exists,
            scaffold_palettespec,
        )

        assert not palettespec_exists(tmp_path)
        assert scaffold_palettespec(tmp_path, base_color="#f80") is not None
        assert palettespec_exists(tmp_path)
        assert load_palettespec(tmp_path).base_color == "#ff8800"

        assert scaffold_palettespec(tmp_path, base_color="#000") is None
        assert load_palettespec(tmp_path).base_color == "#ff8800"

        scaffold_palettespec(tmp_path, base_color="#000", overwrite=True)
        assert load_palettespec(tmp_path).base_color == "#000000"

    def test_scaffold_invalid_color(self, tmp_path: Path):
        from hueforge.core.palettespec_loader import scaffold_palettespec

        with pytest.raises(PaletteSpecError):
            scaffold_palettespec(tmp_path, base_color="nope")
