"""
Luminance constraint validation.

Checks that background and foreground color groups are far enough apart
in OKLCH lightness to stay readable, and reports how much room each color
has before it breaks the constraint. This is a diagnostic; it is not part
of token generation.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .ir.config import Oklch

_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class Polarity(StrEnum):
    """Which group is expected to be darker.

    NEGATIVE: dark backgrounds, light foregrounds.
    POSITIVE: light backgrounds, dark foregrounds.
    """

    NEGATIVE = "negative"
    POSITIVE = "positive"


class LuminanceConstraint(BaseModel):
    model_config = _MODEL_CONFIG

    polarity: Polarity
    min_delta: float = Field(alias="minDelta", description="Minimum lightness gap between groups")
    background_colors: list[str] = Field(alias="backgroundColors")
    foreground_colors: list[str] = Field(alias="foregroundColors")


class ColorDiagnostic(BaseModel):
    model_config = _MODEL_CONFIG

    group: str
    luminance: float
    headroom: float = Field(
        description="Distance from the group boundary: positive is safe, 0 at the limit, negative violates"
    )


class LuminanceValidation(BaseModel):
    """Result of a luminance check.

    Negative polarity gives backgrounds a ``max`` boundary and foregrounds
    a ``min``; positive polarity swaps them.
    """

    model_config = _MODEL_CONFIG

    delta_valid: bool = Field(alias="deltaValid")
    actual_delta: float = Field(alias="actualDelta")
    required_delta: float = Field(alias="requiredDelta")
    background_constraint: float = Field(alias="backgroundConstraint")
    background_constraint_type: str = Field(alias="backgroundConstraintType")
    foreground_constraint: float = Field(alias="foregroundConstraint")
    foreground_constraint_type: str = Field(alias="foregroundConstraintType")
    colors: dict[str, ColorDiagnostic] = Field(default_factory=dict)


def _lightness(colors: Mapping[str, Any], keys: Sequence[str]) -> dict[str, float]:
    """Lightness per key; missing or undefined colors are left out."""
    found: dict[str, float] = {}
    for key in keys:
        color = colors.get(key)
        if isinstance(color, Mapping):
            color = Oklch.model_validate(dict(color))
        if color is not None:
            found[key] = color.l
    return found


def validate_luminance(
    colors: Mapping[str, Any],
    constraint: LuminanceConstraint | Mapping,
) -> LuminanceValidation:
    """Validate the lightness gap between background and foreground colors.

    The delta is measured between the closest pair: with negative polarity
    ``min(foreground) - max(background)``, with positive polarity
    ``min(background) - max(foreground)``. If either group ends up empty
    the result is "not satisfied" with zeroed boundaries and no per-color
    diagnostics.
    """
    if not isinstance(constraint, LuminanceConstraint):
        constraint = LuminanceConstraint.model_validate(dict(constraint))

    negative = constraint.polarity == Polarity.NEGATIVE
    min_delta = constraint.min_delta
    bg_type, fg_type = ("max", "min") if negative else ("min", "max")

    background = _lightness(colors, constraint.background_colors)
    foreground = _lightness(colors, constraint.foreground_colors)

    if not background or not foreground:
        return LuminanceValidation(
            delta_valid=False,
            actual_delta=0.0,
            required_delta=min_delta,
            background_constraint=0.0,
            background_constraint_type=bg_type,
            foreground_constraint=0.0,
            foreground_constraint_type=fg_type,
        )

    max_bg, min_bg = max(background.values()), min(background.values())
    max_fg, min_fg = max(foreground.values()), min(foreground.values())

    if negative:
        actual_delta = min_fg - max_bg
        background_constraint = min_fg - min_delta
        foreground_constraint = max_bg + min_delta
    else:
        actual_delta = min_bg - max_fg
        background_constraint = max_fg + min_delta
        foreground_constraint = min_bg - min_delta

    diagnostics: dict[str, ColorDiagnostic] = {}
    for key, lightness in background.items():
        headroom = (
            background_constraint - lightness if negative else lightness - background_constraint
        )
        diagnostics[key] = ColorDiagnostic(group="background", luminance=lightness, headroom=headroom)
    for key, lightness in foreground.items():
        headroom = (
            lightness - foreground_constraint if negative else foreground_constraint - lightness
        )
        diagnostics[key] = ColorDiagnostic(group="foreground", luminance=lightness, headroom=headroom)

    return LuminanceValidation(
        delta_valid=actual_delta >= min_delta,
        actual_delta=actual_delta,
        required_delta=min_delta,
        background_constraint=background_constraint,
        background_constraint_type=bg_type,
        foreground_constraint=foreground_constraint,
        foreground_constraint_type=fg_type,
        colors=diagnostics,
    )
