"""Tests for the color generator."""

from __future__ import annotations

from typing import Any

from tokencraft.ir import DEFAULT_OPTIONS, ColorFamily


def _names(tokens) -> list[str]:
    return [t.name for t in tokens]


class TestColorGenerator:
    def test_base_plus_alpha_count(self, basic_colors: dict[str, Any]):
        from tokencraft.generators import generate_color_tokens

        result = generate_color_tokens(ColorFamily.model_validate(basic_colors), DEFAULT_OPTIONS)

        # 7 colors x (1 base + 6 alpha levels)
        assert len(result.default_tokens) == 49

    def test_token_names(self, basic_colors: dict[str, Any]):
        from tokencraft.generators import generate_color_tokens

        result = generate_color_tokens(ColorFamily.model_validate(basic_colors), DEFAULT_OPTIONS)
        names = _names(result.default_tokens)

        assert names[:7] == [
            "clr-bg",
            "clr-bg-a-min",
            "clr-bg-a-lo-x",
            "clr-bg-a-lo",
            "clr-bg-a-hi",
            "clr-bg-a-hi-x",
            "clr-bg-a-max",
        ]

    def test_base_value(self, basic_colors: dict[str, Any]):
        from tokencraft.generators import generate_color_tokens

        result = generate_color_tokens(ColorFamily.model_validate(basic_colors), DEFAULT_OPTIONS)
        bg = result.default_tokens[0]

        assert bg.value == "oklch(0.2600 0.0000 180.00)"
        assert bg.metadata.base_color == "bg"
        assert not bg.metadata.is_alpha_variant

    def test_alpha_value_and_metadata(self, basic_colors: dict[str, Any]):
        from tokencraft.generators import generate_color_tokens

        result = generate_color_tokens(ColorFamily.model_validate(basic_colors), DEFAULT_OPTIONS)
        lo = next(t for t in result.default_tokens if t.name == "clr-bg-a-lo")

        assert lo.value == "oklch(0.2600 0.0000 180.00 / 0.2500)"
        assert lo.raw_value == 0.25
        assert lo.metadata.is_alpha_variant is True
        assert lo.metadata.alpha_level == "lo"
        assert lo.metadata.base_color == "bg"

    def test_no_schedule_emits_base_only(self):
        from tokencraft.generators import generate_color_tokens

        colors = ColorFamily.model_validate(
            {"modes": [{"name": "default", "tokens": {"bg": {"l": 0.5, "c": 0, "h": 0}}}]}
        )
        result = generate_color_tokens(colors, DEFAULT_OPTIONS)

        assert _names(result.default_tokens) == ["clr-bg"]

    def test_sparse_override(self, multi_mode_colors: dict[str, Any]):
        from tokencraft.generators import generate_color_tokens

        result = generate_color_tokens(
            ColorFamily.model_validate(multi_mode_colors), DEFAULT_OPTIONS
        )

        assert result.mode_info.default == "light"
        assert result.mode_info.overrides == ["dark"]
        dark = result.override_tokens["dark"]
        # bg and ink only, each with 6 alpha variants
        assert len(dark) == 14
        assert "clr-primary" not in _names(dark)

    def test_undefined_colors_are_skipped(self):
        from tokencraft.generators import generate_color_tokens

        colors = ColorFamily.model_validate(
            {
                "modes": [
                    {"name": "light", "tokens": {"bg": {"l": 0.9, "c": 0, "h": 0}}},
                    {"name": "dark", "tokens": {"bg": {"l": 0.1, "c": 0, "h": 0}, "ink": None}},
                ]
            }
        )
        result = generate_color_tokens(colors, DEFAULT_OPTIONS)

        assert _names(result.override_tokens["dark"]) == ["clr-bg"]

    def test_mode_schedule_overrides_family_schedule(self, basic_colors: dict[str, Any]):
        from tokencraft.generators import generate_color_tokens

        config = {
            **basic_colors,
            "modes": [
                basic_colors["modes"][0],
                {
                    "name": "contrast",
                    "alphaSchedule": {"half": 0.5},
                    "tokens": {"bg": {"l": 0, "c": 0, "h": 0}},
                },
            ],
        }
        result = generate_color_tokens(ColorFamily.model_validate(config), DEFAULT_OPTIONS)

        assert _names(result.override_tokens["contrast"]) == ["clr-bg", "clr-bg-a-half"]

    def test_custom_alpha_modifier_and_separators(self):
        from tokencraft.generators import generate_color_tokens
        from tokencraft.ir import merge_options

        colors = ColorFamily.model_validate(
            {
                "alphaSchedule": {"lo": 0.25},
                "modes": [{"name": "default", "tokens": {"bg": {"l": 0.5, "c": 0, "h": 0}}}],
            }
        )
        options = merge_options(
            {
                "prefixes": {"color": "color"},
                "separators": {"modifier": "_", "value": "_"},
                "colorFormat": {"alphaModifier": "alpha"},
            }
        )
        result = generate_color_tokens(colors, options)

        assert _names(result.default_tokens) == ["color-bg", "color-bg_alpha_lo"]

    def test_hex_encodings(self):
        from tokencraft.generators import generate_color_tokens
        from tokencraft.ir import merge_options

        colors = ColorFamily.model_validate(
            {
                "alphaSchedule": {"half": 0.5},
                "modes": [{"name": "default", "tokens": {"white": {"l": 1, "c": 0, "h": 0}}}],
            }
        )
        options = merge_options({"colorFormat": {"base": "hex", "alpha": "hexa"}})
        result = generate_color_tokens(colors, options)

        assert [t.value for t in result.default_tokens] == ["#ffffff", "#ffffff80"]
