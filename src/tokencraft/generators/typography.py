"""
Typography token generator.

Additive scale: fs-1 = base, fs-{n} = base + increment * (n - 1), plus fs-min.
A fixed step between sizes reads more evenly than a ratio at small sizes.
"""

from __future__ import annotations

import logging

from ..formatting import trim_number
from ..ir.config import TypographyFamily, TypographyMode
from ..ir.options import GeneratorOptions
from ..ir.tokens import GeneratorResult, ModeInfo, TokenFamily, TokenValue
from ..modes import select_default

logger = logging.getLogger(__name__)


def generate_tokens_for_mode(mode: TypographyMode, options: GeneratorOptions) -> list[TokenValue]:
    prefix = options.prefixes.typography
    system = mode.tokens
    unit = system.unit

    tokens = [
        TokenValue(
            family=TokenFamily.TYPOGRAPHY,
            name=f"{prefix}-min",
            value=f"{trim_number(system.min)}{unit}",
            raw_value=system.min,
            unit=unit,
        )
    ]

    for i in range(1, system.range + 1):
        value = system.base if i == 1 else system.base + system.increment * (i - 1)
        tokens.append(
            TokenValue(
                family=TokenFamily.TYPOGRAPHY,
                name=f"{prefix}-{i}",
                value=f"{trim_number(value)}{unit}",
                raw_value=value,
                unit=unit,
            )
        )

    return tokens


def generate_typography_tokens(
    typography: TypographyFamily, options: GeneratorOptions
) -> GeneratorResult:
    default_mode, override_modes = select_default(typography.modes)

    default_tokens = generate_tokens_for_mode(default_mode, options)
    override_tokens = {mode.name: generate_tokens_for_mode(mode, options) for mode in override_modes}

    logger.debug(
        "Generated %d default typography tokens, %d override modes",
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
