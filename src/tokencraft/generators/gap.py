"""
Gap token generator, plus the spacing reference resolution it shares with
border radius.

Each gap entry is the ``"min"`` sentinel or an integer index into a spacing
scale. Values are resolved against a spacing mode and baked in, so they stay
valid in any selector scope:

    gap: {s: 1}, spacing: {base: 8}  ->  --gap-s: 8px  (reference sp-1)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..formatting import format_number
from ..ir.config import (
    GapFamily,
    NamedMode,
    SpacingFamily,
    SpacingMode,
    SpacingReference,
    SpacingReferenceSystem,
)
from ..ir.options import GeneratorOptions
from ..ir.tokens import GeneratorResult, ModeInfo, TokenFamily, TokenValue
from ..modes import select_default

logger = logging.getLogger(__name__)

MIN_REFERENCE = "min"


def find_spacing_mode(
    mode_name: str,
    system: SpacingReferenceSystem,
    spacing_modes: Sequence[SpacingMode],
) -> SpacingMode:
    """Pick the spacing mode a gap or radius mode resolves against.

    Tried in order: the explicit ``spacingMode``, a spacing mode with the
    same name, the default spacing mode.
    """
    if system.spacing_mode:
        for spacing_mode in spacing_modes:
            if spacing_mode.name == system.spacing_mode:
                return spacing_mode

    for spacing_mode in spacing_modes:
        if spacing_mode.name == mode_name:
            return spacing_mode

    default, _ = select_default(spacing_modes)
    return default


def resolve_reference(value: SpacingReference, spacing_mode: SpacingMode) -> float:
    """Resolve ``"min"`` to the spacing min and ``n`` to ``n * base``."""
    if value == MIN_REFERENCE:
        return spacing_mode.tokens.min
    return value * spacing_mode.tokens.base


def reference_name(value: SpacingReference, options: GeneratorOptions) -> str:
    """Name of the spacing token a reference points at (``sp-min``, ``sp-2``)."""
    return f"{options.prefixes.spacing}-{value}"


def generate_reference_tokens(
    family: TokenFamily,
    prefix: str,
    system: SpacingReferenceSystem,
    spacing_mode: SpacingMode,
    options: GeneratorOptions,
) -> list[TokenValue]:
    """Expand one gap or radius mode against the given spacing mode."""
    unit = system.unit or spacing_mode.tokens.unit
    tokens: list[TokenValue] = []

    for key, value in system.references().items():
        resolved = resolve_reference(value, spacing_mode)
        tokens.append(
            TokenValue(
                family=family,
                name=f"{prefix}-{key}",
                value=f"{format_number(resolved)}{unit}",
                raw_value=resolved,
                unit=unit,
                reference=reference_name(value, options),
            )
        )

    return tokens


def generate_referencing_family(
    family: TokenFamily,
    prefix: str,
    modes: Sequence[NamedMode],
    spacing: SpacingFamily,
    options: GeneratorOptions,
) -> GeneratorResult:
    """Generate default and override tokens for a spacing-referencing family."""
    default_mode, override_modes = select_default(modes)

    def expand(mode) -> list[TokenValue]:
        spacing_mode = find_spacing_mode(mode.name, mode.tokens, spacing.modes)
        return generate_reference_tokens(family, prefix, mode.tokens, spacing_mode, options)

    default_tokens = expand(default_mode)
    override_tokens = {mode.name: expand(mode) for mode in override_modes}

    logger.debug(
        "Generated %d default %s tokens, %d override modes",
        len(default_tokens),
        family,
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


def generate_gap_tokens(
    gap: GapFamily,
    spacing: SpacingFamily,
    options: GeneratorOptions,
) -> GeneratorResult:
    return generate_referencing_family(
        TokenFamily.GAP, options.prefixes.gap, gap.modes, spacing, options
    )
