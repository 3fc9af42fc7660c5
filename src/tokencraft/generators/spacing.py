"""
Spacing token generator.

Multiplicative scale: sp-{n} = base * n for n in 1..range, plus sp-min.
"""

from __future__ import annotations

import logging

from ..formatting import format_number
from ..ir.config import SpacingFamily, SpacingMode
from ..ir.options import GeneratorOptions
from ..ir.tokens import GeneratorResult, ModeInfo, TokenFamily, TokenValue
from ..modes import select_default

logger = logging.getLogger(__name__)


def generate_tokens_for_mode(mode: SpacingMode, options: GeneratorOptions) -> list[TokenValue]:
    prefix = options.prefixes.spacing
    system = mode.tokens
    unit = system.unit

    tokens = [
        TokenValue(
            family=TokenFamily.SPACING,
            name=f"{prefix}-min",
            value=f"{format_number(system.min)}{unit}",
            raw_value=system.min,
            unit=unit,
        )
    ]

    for i in range(1, system.range + 1):
        value = system.base * i
        tokens.append(
            TokenValue(
                family=TokenFamily.SPACING,
                name=f"{prefix}-{i}",
                value=f"{format_number(value)}{unit}",
                raw_value=value,
                unit=unit,
            )
        )

    return tokens


def generate_spacing_tokens(spacing: SpacingFamily, options: GeneratorOptions) -> GeneratorResult:
    default_mode, override_modes = select_default(spacing.modes)

    default_tokens = generate_tokens_for_mode(default_mode, options)
    override_tokens = {mode.name: generate_tokens_for_mode(mode, options) for mode in override_modes}

    logger.debug(
        "Generated %d default spacing tokens, %d override modes",
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
