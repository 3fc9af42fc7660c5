"""
CSS transformer.

Renders an IR as CSS custom properties: one root block holding every
default token, then one block per override mode under the selector of
the mode's category:

    :root {
      --sp-1: 8px;
    }

    [data-size-mode="small"] {
      --sp-1: 4px;
    }
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..ir.options import Selectors
from ..ir.tokens import IR, ModeCategory, TokenValue
from .header import FileHeader, format_header_comment, header_lines

logger = logging.getLogger(__name__)

MODE_PLACEHOLDER = "{mode}"


class CssOptions(BaseModel):
    """CSS transformer options. No header is written unless one is given."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    selectors: Selectors = Field(default_factory=Selectors)
    file_header: FileHeader | None = Field(default=None, alias="fileHeader")


def merge_css_options(user: CssOptions | Mapping[str, Any] | None = None) -> CssOptions:
    if user is None:
        return CssOptions()
    if isinstance(user, CssOptions):
        return user
    data = dict(user)
    if data.get("fileHeader") is False or data.get("file_header") is False:
        data.pop("fileHeader", None)
        data.pop("file_header", None)
    return CssOptions.model_validate(data)


def selector_for_mode(mode_name: str, category: ModeCategory, selectors: Selectors) -> str:
    template = {
        ModeCategory.COLOR: selectors.color_mode,
        ModeCategory.SIZE: selectors.size_mode,
        ModeCategory.TIME: selectors.time_mode,
    }[category]
    return template.replace(MODE_PLACEHOLDER, mode_name)


def _declarations(tokens: Mapping[str, TokenValue]) -> list[str]:
    return [f"  --{name}: {token.value};" for name, token in tokens.items()]


def _block(selector: str, declarations: list[str]) -> str:
    return "\n".join([f"{selector} {{", *declarations, "}"])


def to_css(ir: IR, options: CssOptions | Mapping[str, Any] | None = None) -> str:
    """Transform an IR into a CSS string.

    Override modes whose name is not in any category's override list are
    skipped, as are modes with no tokens. Blocks are separated by a blank
    line.
    """
    css_options = merge_css_options(options)
    blocks: list[str] = []

    if css_options.file_header is not None:
        blocks.append(format_header_comment(header_lines(css_options.file_header), "block"))

    blocks.append(_block(css_options.selectors.root, _declarations(ir.tokens)))

    for mode_name, tokens in ir.override_tokens.items():
        category = ir.category_of(mode_name)
        if category is None:
            logger.debug("Skipping override mode '%s': not in any mode category", mode_name)
            continue

        declarations = _declarations(tokens)
        if not declarations:
            continue

        selector = selector_for_mode(mode_name, category, css_options.selectors)
        blocks.append(_block(selector, declarations))

    return "\n\n".join(blocks)
