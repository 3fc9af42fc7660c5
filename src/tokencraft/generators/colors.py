"""
Color token generator.

Emits one base token per named color plus one alpha variant per level of
the applicable alpha schedule:

    --clr-bg, --clr-bg-a-min, --clr-bg-a-lo, ...

Override modes emit only the colors they declare. Everything else is
inherited from the default mode through the cascade.
"""

from __future__ import annotations

import logging

from ..ir.config import AlphaSchedule, ColorFamily, ColorMode
from ..ir.options import GeneratorOptions
from ..ir.tokens import GeneratorResult, ModeInfo, TokenFamily, TokenMetadata, TokenValue
from ..modes import select_default
from ..oklch import format_color, format_color_with_alpha

logger = logging.getLogger(__name__)


def _alpha_token_name(color_name: str, level: str, options: GeneratorOptions) -> str:
    prefix = options.prefixes.color
    modifier = options.color_format.alpha_modifier
    seps = options.separators
    return f"{prefix}-{color_name}{seps.modifier}{modifier}{seps.value}{level}"


def generate_tokens_for_mode(
    mode: ColorMode,
    alpha_schedule: AlphaSchedule | None,
    options: GeneratorOptions,
) -> list[TokenValue]:
    """Expand one color mode. Undefined entries (sparse holes) are skipped."""
    prefix = options.prefixes.color
    color_format = options.color_format
    tokens: list[TokenValue] = []

    for color_name, color in mode.tokens.items():
        if color is None:
            continue

        tokens.append(
            TokenValue(
                family=TokenFamily.COLOR,
                name=f"{prefix}-{color_name}",
                value=format_color(color, color_format.base),
                metadata=TokenMetadata(base_color=color_name),
            )
        )

        for level, alpha in (alpha_schedule or {}).items():
            tokens.append(
                TokenValue(
                    family=TokenFamily.COLOR,
                    name=_alpha_token_name(color_name, level, options),
                    value=format_color_with_alpha(color, alpha, color_format.alpha),
                    raw_value=alpha,
                    metadata=TokenMetadata(
                        is_alpha_variant=True,
                        alpha_level=level,
                        base_color=color_name,
                    ),
                )
            )

    return tokens


def generate_color_tokens(colors: ColorFamily, options: GeneratorOptions) -> GeneratorResult:
    """Generate color tokens for the default mode and every override mode.

    The alpha schedule for a mode is its own ``alphaSchedule`` if set,
    otherwise the family-level schedule. With neither, only base colors
    are emitted.
    """
    default_mode, override_modes = select_default(colors.modes)

    default_tokens = generate_tokens_for_mode(
        default_mode, default_mode.alpha_schedule or colors.alpha_schedule, options
    )

    override_tokens: dict[str, list[TokenValue]] = {}
    for mode in override_modes:
        mode_tokens = generate_tokens_for_mode(
            mode, mode.alpha_schedule or colors.alpha_schedule, options
        )
        if mode_tokens:
            override_tokens[mode.name] = mode_tokens

    logger.debug(
        "Generated %d default color tokens, %d override modes",
        len(default_tokens),
        len(override_modes),
    )

    return GeneratorResult(
        default_tokens=default_tokens,
        override_tokens=override_tokens,
        mode_info=ModeInfo(
            default=default_mode.name,
            overrides=[m.name for m in override_modes],
        ),
    )
