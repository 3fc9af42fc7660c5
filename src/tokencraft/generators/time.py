"""
Time token generator.

Multiplicative scale: t-{n} = base * n, plus t-min.

Time modes are independent scales that are all active at once (e.g. UI
transitions next to longer animations), not alternative themes. Every
mode is emitted into the default token set: the default scale
unprefixed (--t-1) and each other scale under its own name (--t-anim-1).
No override blocks are produced.
"""

from __future__ import annotations

import logging

from ..formatting import format_number
from ..ir.config import TimeFamily, TimeMode
from ..ir.options import GeneratorOptions
from ..ir.tokens import GeneratorResult, ModeInfo, TokenFamily, TokenMetadata, TokenValue
from ..modes import select_default

logger = logging.getLogger(__name__)


def generate_tokens_for_mode(
    mode: TimeMode, is_default: bool, options: GeneratorOptions
) -> list[TokenValue]:
    base_prefix = options.prefixes.time
    prefix = base_prefix if is_default else f"{base_prefix}-{mode.name}"
    system = mode.tokens
    unit = system.unit
    metadata = TokenMetadata(time_category=mode.name)

    tokens = [
        TokenValue(
            family=TokenFamily.TIME,
            name=f"{prefix}-min",
            value=f"{format_number(system.min)}{unit}",
            raw_value=system.min,
            unit=unit,
            metadata=metadata,
        )
    ]

    for i in range(1, system.range + 1):
        value = system.base * i
        tokens.append(
            TokenValue(
                family=TokenFamily.TIME,
                name=f"{prefix}-{i}",
                value=f"{format_number(value)}{unit}",
                raw_value=value,
                unit=unit,
                metadata=metadata,
            )
        )

    return tokens


def generate_time_tokens(time: TimeFamily, options: GeneratorOptions) -> GeneratorResult:
    default_mode, _ = select_default(time.modes)

    tokens: list[TokenValue] = []
    for mode in time.modes:
        tokens.extend(generate_tokens_for_mode(mode, mode is default_mode, options))

    logger.debug("Generated %d time tokens across %d scales", len(tokens), len(time.modes))

    return GeneratorResult(
        default_tokens=tokens,
        mode_info=ModeInfo(default=default_mode.name),
    )
