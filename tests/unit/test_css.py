"""Tests for the CSS transformer and file headers."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from tokencraft import generate, generate_css, to_css
from tokencraft.ir import IR, TokenFamily, TokenValue

SPACING_ONLY = {
    "spacing": {
        "modes": [{"name": "default", "tokens": {"unit": "px", "base": 8, "min": 4, "range": 2}}]
    }
}


def _token(name: str, value: str) -> TokenValue:
    return TokenValue(family=TokenFamily.SPACING, name=name, value=value)


class TestToCss:
    def test_minimal_output(self):
        css = to_css(generate(SPACING_ONLY))

        assert css == ":root {\n  --sp-min: 4px;\n  --sp-1: 8px;\n  --sp-2: 16px;\n}"

    def test_generate_css_shortcut(self):
        assert generate_css(SPACING_ONLY) == to_css(generate(SPACING_ONLY))

    def test_override_blocks_by_category(self, full_config: dict[str, Any]):
        css = to_css(generate(full_config))

        assert '[data-color-mode="dark"] {' in css
        assert '[data-size-mode="small"] {' in css
        assert '[data-size-mode="thick"] {\n  --bdw: 2px;\n}' in css
        assert "data-time-mode" not in css
        assert "light" not in css

    def test_block_order(self, full_config: dict[str, Any]):
        css = to_css(generate(full_config))

        root = css.index(":root {")
        dark = css.index('[data-color-mode="dark"]')
        small = css.index('[data-size-mode="small"]')
        large = css.index('[data-size-mode="large"]')
        assert root < dark < small < large

    def test_blocks_separated_by_blank_line(self, full_config: dict[str, Any]):
        css = to_css(generate(full_config))

        assert "}\n\n[data-color-mode" in css
        assert not css.endswith("\n")

    def test_unknown_override_mode_skipped(self):
        ir = IR(
            tokens={"sp-1": _token("sp-1", "8px")},
            override_tokens={"ghost": {"sp-1": _token("sp-1", "1px")}},
        )

        assert to_css(ir) == ":root {\n  --sp-1: 8px;\n}"

    def test_empty_override_mode_skipped(self):
        ir = IR.model_validate(
            {
                "tokens": {"sp-1": _token("sp-1", "8px")},
                "modes": {"size": {"default": "default", "overrides": ["small"]}},
                "overrideTokens": {"small": {}},
            }
        )

        assert "small" not in to_css(ir)

    def test_custom_selectors(self, full_config: dict[str, Any]):
        css = to_css(
            generate(full_config),
            {"selectors": {"root": "html", "sizeMode": ".size-{mode}"}},
        )

        assert css.startswith("html {")
        assert ".size-small {" in css
        assert '[data-color-mode="dark"] {' in css

    def test_generate_css_uses_option_selectors(self, full_config: dict[str, Any]):
        css = generate_css(full_config, {"selectors": {"colorMode": ".theme-{mode}"}})
        assert ".theme-dark {" in css


class TestFileHeader:
    def test_header_block(self):
        css = to_css(
            generate(SPACING_ONLY),
            {"fileHeader": {"toolName": "tokencraft", "toolVersion": "0.1.0"}},
        )

        assert css.startswith(
            "/*\n"
            " * Generated by tokencraft v0.1.0\n"
            " * Do not edit directly - regenerate from the design system source.\n"
            " */\n\n:root {"
        )

    def test_header_disabled(self):
        css = to_css(generate(SPACING_ONLY), {"fileHeader": False})
        assert css.startswith(":root {")

    def test_timestamp_and_custom_lines(self):
        from tokencraft.transformers import FileHeader, header_lines

        header = FileHeader(
            tool_name="tokencraft",
            tool_version="1.2.3",
            include_timestamp=True,
            custom_lines=["Theme: default"],
        )
        lines = header_lines(header, now=datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC))

        assert lines[2] == "Generated at 2026-01-02T03:04:05+00:00"
        assert lines[-1] == "Theme: default"

    def test_no_timestamp_by_default(self):
        from tokencraft.transformers import FileHeader, header_lines

        lines = header_lines(FileHeader(tool_name="x", tool_version="1"))
        assert not any(line.startswith("Generated at") for line in lines)

    def test_line_comment_style(self):
        from tokencraft.transformers import format_header_comment

        assert format_header_comment(["a", "", "b"], "line") == "// a\n//\n// b"
