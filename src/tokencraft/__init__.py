"""
tokencraft - a design-token compiler.

Expands a declarative, mode-aware design system (colors, spacing, gap,
typography, border, time) into a normalized Intermediate Representation
and renders it as CSS custom properties.

    >>> from tokencraft import generate, to_css
    >>> ir = generate({"spacing": {"modes": [{"name": "default", "tokens":
    ...     {"unit": "px", "base": 8, "min": 4, "range": 2}}]}})
    >>> print(to_css(ir))
    :root {
      --sp-min: 4px;
      --sp-1: 8px;
      --sp-2: 16px;
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .constraints import (
    ColorDiagnostic,
    LuminanceConstraint,
    LuminanceValidation,
    Polarity,
    validate_luminance,
)
from .errors import DesignSystemLoadError, GeneratorError, TokencraftError, ValidationError
from .generator import generate
from .ir import (
    IR,
    DesignSystem,
    GeneratorOptions,
    ModeCategory,
    Oklch,
    TokenFamily,
    TokenValue,
    merge_options,
    oklch,
)
from .loader import load_design_system
from .oklch import format_color, format_color_with_alpha
from .presets import get_preset, list_presets
from .transformers import CssOptions, FileHeader, to_css
from .validator import validate_design_system

__version__ = "0.1.0"


def generate_css(
    design_system: DesignSystem | Mapping[str, Any],
    options: GeneratorOptions | Mapping[str, Any] | None = None,
    css_options: CssOptions | Mapping[str, Any] | None = None,
) -> str:
    """Generate CSS directly from a design system.

    Combines ``generate`` and ``to_css``. Without explicit ``css_options``
    the selector templates from the generator options are used.
    """
    merged = merge_options(options)
    ir = generate(design_system, merged)
    if css_options is None:
        css_options = CssOptions(selectors=merged.selectors)
    return to_css(ir, css_options)


__all__ = [
    "__version__",
    # Generation
    "generate",
    "generate_css",
    "validate_design_system",
    "load_design_system",
    # Output
    "to_css",
    "CssOptions",
    "FileHeader",
    # Types
    "IR",
    "DesignSystem",
    "GeneratorOptions",
    "ModeCategory",
    "Oklch",
    "TokenFamily",
    "TokenValue",
    "oklch",
    # Colors
    "format_color",
    "format_color_with_alpha",
    # Presets
    "get_preset",
    "list_presets",
    # Constraints
    "ColorDiagnostic",
    "LuminanceConstraint",
    "LuminanceValidation",
    "Polarity",
    "validate_luminance",
    # Errors
    "TokencraftError",
    "ValidationError",
    "GeneratorError",
    "DesignSystemLoadError",
]
