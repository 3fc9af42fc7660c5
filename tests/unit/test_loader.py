"""Tests for loading design system files."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tokencraft import generate
from tokencraft.errors import DesignSystemLoadError
from tokencraft.loader import load_design_system

YAML_SOURCE = """\
colors:
  alphaSchedule:
    lo: 0.25
  modes:
    - name: dark
      isDefault: true
      tokens:
        bg: [0.26, 0, 180]
        ink: {l: 0.93, c: 0.04, h: 299}
spacing:
  modes:
    - name: default
      tokens: {unit: px, base: 8, min: 4, range: 2}
"""

TOML_SOURCE = """\
[[spacing.modes]]
name = "default"

[spacing.modes.tokens]
unit = "px"
base = 8
min = 4
range = 2
"""


class TestLoadDesignSystem:
    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "design.yaml"
        path.write_text(YAML_SOURCE)

        data = load_design_system(path)

        assert data["colors"]["modes"][0]["tokens"]["bg"] == {"l": 0.26, "c": 0, "h": 180}
        assert data["colors"]["modes"][0]["tokens"]["ink"] == {"l": 0.93, "c": 0.04, "h": 299}

    def test_yaml_generates(self, tmp_path: Path):
        path = tmp_path / "design.yml"
        path.write_text(YAML_SOURCE)

        ir = generate(load_design_system(str(path)))

        assert ir.tokens["clr-bg"].value == "oklch(0.2600 0.0000 180.00)"
        assert ir.tokens["sp-2"].value == "16px"

    def test_json(self, tmp_path: Path):
        path = tmp_path / "design.json"
        path.write_text(
            json.dumps(
                {"time": {"modes": [{"name": "default", "tokens": {"unit": "ms", "base": 100, "min": 50, "range": 1}}]}}
            )
        )

        data = load_design_system(path)

        assert data["time"]["modes"][0]["tokens"]["base"] == 100

    def test_toml(self, tmp_path: Path):
        path = tmp_path / "design.toml"
        path.write_text(TOML_SOURCE)

        ir = generate(load_design_system(path))

        assert ir.tokens["sp-1"].value == "8px"

    def test_unsupported_suffix(self, tmp_path: Path):
        path = tmp_path / "design.txt"
        path.write_text("spacing: {}")

        with pytest.raises(DesignSystemLoadError, match="Unsupported"):
            load_design_system(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(DesignSystemLoadError, match="not found"):
            load_design_system(tmp_path / "missing.yaml")

    def test_parse_error(self, tmp_path: Path):
        path = tmp_path / "design.json"
        path.write_text("{not json")

        with pytest.raises(DesignSystemLoadError, match="Failed to parse") as exc_info:
            load_design_system(path)
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_document_must_be_mapping(self, tmp_path: Path):
        path = tmp_path / "design.yaml"
        path.write_text("- spacing\n- colors\n")

        with pytest.raises(DesignSystemLoadError, match="must contain a mapping"):
            load_design_system(path)
