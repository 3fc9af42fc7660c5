"""
Main generator: validates a design system, runs every family generator and
assembles the Intermediate Representation.

Partial design systems are supported; families that are not provided
contribute nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError
from .generators import (
    generate_border_radius_tokens,
    generate_border_width_tokens,
    generate_color_tokens,
    generate_gap_tokens,
    generate_spacing_tokens,
    generate_time_tokens,
    generate_typography_tokens,
)
from .ir.config import DesignSystem
from .ir.options import GeneratorOptions, merge_options
from .ir.tokens import (
    CATEGORY_FAMILIES,
    EMPTY_RESULT,
    IR,
    GeneratorResult,
    ModeCategories,
    ModeCategory,
    ModeInfo,
    TokenFamily,
    TokenValue,
)
from .validator import validate_design_system

logger = logging.getLogger(__name__)


def _tokens_to_record(tokens: Iterable[TokenValue]) -> dict[str, TokenValue]:
    """Key tokens by name. On a name collision the first token is kept."""
    record: dict[str, TokenValue] = {}
    for token in tokens:
        existing = record.get(token.name)
        if existing is not None:
            logger.warning(
                "Token name collision on '%s': dropping %s token, keeping earlier %s token",
                token.name,
                token.family,
                existing.family,
            )
            continue
        record[token.name] = token
    return record


def _union(names: Iterable[str]) -> list[str]:
    """Unique names in first-seen order."""
    return list(dict.fromkeys(names))


def _run_generators(
    design_system: DesignSystem, options: GeneratorOptions
) -> dict[TokenFamily, GeneratorResult]:
    """Run every family generator, spacing first."""
    spacing = design_system.spacing
    border = design_system.border

    results: dict[TokenFamily, GeneratorResult] = {}

    results[TokenFamily.SPACING] = (
        generate_spacing_tokens(spacing, options) if spacing else EMPTY_RESULT
    )
    results[TokenFamily.COLOR] = (
        generate_color_tokens(design_system.colors, options)
        if design_system.colors
        else EMPTY_RESULT
    )
    results[TokenFamily.GAP] = (
        generate_gap_tokens(design_system.gap, spacing, options)
        if design_system.gap and spacing
        else EMPTY_RESULT
    )
    results[TokenFamily.TYPOGRAPHY] = (
        generate_typography_tokens(design_system.typography, options)
        if design_system.typography
        else EMPTY_RESULT
    )
    results[TokenFamily.BORDER_RADIUS] = (
        generate_border_radius_tokens(border.radius, spacing, options)
        if border and border.radius and spacing
        else EMPTY_RESULT
    )
    results[TokenFamily.BORDER_WIDTH] = (
        generate_border_width_tokens(border.width, options)
        if border and border.width
        else EMPTY_RESULT
    )
    results[TokenFamily.TIME] = (
        generate_time_tokens(design_system.time, options) if design_system.time else EMPTY_RESULT
    )

    return results


def _mode_info(category: ModeCategory, results: dict[TokenFamily, GeneratorResult]) -> ModeInfo:
    """Default and override mode names for one category.

    The default name comes from the category's first family (spacing for
    size); overrides are the union over all of the category's families.
    """
    families = CATEGORY_FAMILIES[category]
    return ModeInfo(
        default=results[families[0]].mode_info.default,
        overrides=_union(
            name for family in families for name in results[family].mode_info.overrides
        ),
    )


# Concatenation order of the default token set
_OUTPUT_ORDER = (
    TokenFamily.COLOR,
    TokenFamily.SPACING,
    TokenFamily.GAP,
    TokenFamily.TYPOGRAPHY,
    TokenFamily.BORDER_RADIUS,
    TokenFamily.BORDER_WIDTH,
    TokenFamily.TIME,
)


def generate(
    design_system: DesignSystem | Mapping[str, Any],
    options: GeneratorOptions | Mapping[str, Any] | None = None,
) -> IR:
    """Generate the Intermediate Representation from a design system.

    Args:
        design_system: A ``DesignSystem`` or the equivalent plain mapping.
            Any family may be omitted.
        options: Generator options or a partial mapping of them.

    Returns:
        The IR: default tokens, mode categories and sparse override tokens.

    Raises:
        ValidationError: If the design system is malformed.
    """
    config = design_system.to_config() if isinstance(design_system, DesignSystem) else design_system
    validate_design_system(config)

    try:
        model = DesignSystem.model_validate(dict(config))
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid design system: {e}") from e
    merged_options = merge_options(options)

    results = _run_generators(model, merged_options)
    ordered = [results[family] for family in _OUTPUT_ORDER]

    tokens = _tokens_to_record(token for result in ordered for token in result.default_tokens)

    override_names = _union(name for result in ordered for name in result.mode_info.overrides)
    override_tokens: dict[str, dict[str, TokenValue]] = {}
    for mode_name in override_names:
        mode_tokens = [
            token for result in ordered for token in result.override_tokens.get(mode_name, [])
        ]
        if mode_tokens:
            override_tokens[mode_name] = _tokens_to_record(mode_tokens)

    modes = ModeCategories(
        color=_mode_info(ModeCategory.COLOR, results),
        size=_mode_info(ModeCategory.SIZE, results),
        time=_mode_info(ModeCategory.TIME, results),
    )

    logger.debug(
        "Generated %d default tokens and %d override modes", len(tokens), len(override_tokens)
    )

    return IR(tokens=tokens, modes=modes, override_tokens=override_tokens)
