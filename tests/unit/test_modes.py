"""Tests for default mode selection."""

from __future__ import annotations

import logging

import pytest

from tokencraft.ir import SpacingMode


def _mode(name: str, is_default: bool | None = None) -> SpacingMode:
    return SpacingMode.model_validate(
        {
            "name": name,
            "isDefault": is_default,
            "tokens": {"unit": "px", "base": 1, "min": 1, "range": 1},
        }
    )


class TestSelectDefault:
    def test_flagged_mode_wins(self):
        from tokencraft.modes import select_default

        default, overrides = select_default([_mode("a"), _mode("b", True), _mode("c")])

        assert default.name == "b"
        assert [m.name for m in overrides] == ["a", "c"]

    def test_first_mode_when_none_flagged(self):
        from tokencraft.modes import select_default

        default, overrides = select_default([_mode("a"), _mode("b")])

        assert default.name == "a"
        assert [m.name for m in overrides] == ["b"]

    def test_multiple_flags_warns_and_keeps_first(self, caplog: pytest.LogCaptureFixture):
        from tokencraft.modes import select_default

        with caplog.at_level(logging.WARNING, logger="tokencraft.modes"):
            default, overrides = select_default([_mode("a", True), _mode("b", True)])

        assert default.name == "a"
        assert [m.name for m in overrides] == ["b"]
        assert "flagged as default" in caplog.text

    def test_empty_list_raises(self):
        from tokencraft.errors import GeneratorError
        from tokencraft.modes import select_default

        with pytest.raises(GeneratorError):
            select_default([])
