"""
Border token generators (radius and width).
"""

from __future__ import annotations

import logging

from ..formatting import format_number
from ..ir.config import BorderRadiusFamily, BorderWidthFamily, BorderWidthMode, SpacingFamily
from ..ir.options import GeneratorOptions
from ..ir.tokens import GeneratorResult, ModeInfo, TokenFamily, TokenValue
from ..modes import select_default
from .gap import generate_referencing_family

logger = logging.getLogger(__name__)

# =============================================================================
# Border radius
# =============================================================================


def generate_border_radius_tokens(
    radius: BorderRadiusFamily,
    spacing: SpacingFamily,
    options: GeneratorOptions,
) -> GeneratorResult:
    """Border radius resolves against spacing exactly like gap does."""
    return generate_referencing_family(
        TokenFamily.BORDER_RADIUS,
        options.prefixes.border_radius,
        radius.modes,
        spacing,
        options,
    )


# =============================================================================
# Border width
# =============================================================================


def generate_width_tokens_for_mode(
    mode: BorderWidthMode, options: GeneratorOptions
) -> list[TokenValue]:
    """A single unindexed token per mode."""
    system = mode.tokens
    return [
        TokenValue(
            family=TokenFamily.BORDER_WIDTH,
            name=options.prefixes.border_width,
            value=f"{format_number(system.value)}{system.unit}",
            raw_value=system.value,
            unit=system.unit,
        )
    ]


def generate_border_width_tokens(
    width: BorderWidthFamily, options: GeneratorOptions
) -> GeneratorResult:
    default_mode, override_modes = select_default(width.modes)

    default_tokens = generate_width_tokens_for_mode(default_mode, options)
    override_tokens = {
        mode.name: generate_width_tokens_for_mode(mode, options) for mode in override_modes
    }

    logger.debug("Generated border width tokens, %d override modes", len(override_modes))

    return GeneratorResult(
        default_tokens=default_tokens,
        override_tokens=override_tokens,
        mode_info=ModeInfo(
            default=default_mode.name,
            overrides=[m.name for m in override_modes],
        ),
    )
