"""
Design system configuration types.

A design system is made of token families (colors, spacing, gap,
typography, border radius, border width, time). Every family is a list
of named modes; exactly one mode per family acts as the default and the
rest are overrides.

Input keys follow the documented camelCase spelling (``isDefault``,
``alphaSchedule``, ``spacingMode``); the snake_case field names are
accepted as well.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True)

# Alpha level name -> opacity in [0, 1]
AlphaSchedule = dict[str, float]

# Gap / border radius reference: the "min" sentinel or a spacing index
SpacingReference = int | Literal["min"]


# =============================================================================
# Colors
# =============================================================================


class Oklch(BaseModel):
    """A color in the OKLCH space.

    - l: lightness, 0 (black) to 1 (white)
    - c: chroma, 0 to roughly 0.4
    - h: hue angle in degrees; ``None`` for achromatic colors
    """

    model_config = _MODEL_CONFIG

    mode: Literal["oklch"] = "oklch"
    l: float = Field(description="Lightness (0-1)")  # noqa: E741
    c: float = Field(description="Chroma (0-0.4 typical)")
    h: float | None = Field(default=None, description="Hue (0-360)")


def oklch(l: float, c: float, h: float) -> Oklch:  # noqa: E741
    """Create an OKLCH color."""
    return Oklch(l=l, c=c, h=h)


class NamedMode(BaseModel):
    """Fields shared by every family mode."""

    model_config = _MODEL_CONFIG

    name: str = Field(description="Mode name, unique within its family")
    is_default: bool | None = Field(default=False, alias="isDefault")


class ColorMode(NamedMode):
    """A color mode. Override modes only list the colors that change."""

    tokens: dict[str, Oklch | None] = Field(default_factory=dict)
    alpha_schedule: AlphaSchedule | None = Field(default=None, alias="alphaSchedule")


class ColorFamily(BaseModel):
    model_config = _MODEL_CONFIG

    modes: list[ColorMode]
    alpha_schedule: AlphaSchedule | None = Field(
        default=None,
        alias="alphaSchedule",
        description="Default alpha schedule for modes that do not declare one",
    )


# =============================================================================
# Spacing
# =============================================================================


class SpacingSystem(BaseModel):
    """Multiplicative spacing scale: sp-{n} = base * n."""

    model_config = _MODEL_CONFIG

    unit: str
    base: float
    min: float
    range: int


class SpacingMode(NamedMode):
    tokens: SpacingSystem


class SpacingFamily(BaseModel):
    model_config = _MODEL_CONFIG

    modes: list[SpacingMode]


# =============================================================================
# Gap and border radius
# =============================================================================


class SpacingReferenceSystem(BaseModel):
    """Open-ended map of token name -> spacing reference.

    ``unit`` and ``spacingMode`` are configuration; every other key
    becomes a token.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    unit: str | None = None
    spacing_mode: str | None = Field(default=None, alias="spacingMode")

    def references(self) -> dict[str, SpacingReference]:
        """Token entries in declaration order."""
        return dict(self.model_extra or {})


class GapMode(NamedMode):
    tokens: SpacingReferenceSystem


class GapFamily(BaseModel):
    model_config = _MODEL_CONFIG

    modes: list[GapMode]


class BorderRadiusMode(NamedMode):
    tokens: SpacingReferenceSystem


class BorderRadiusFamily(BaseModel):
    model_config = _MODEL_CONFIG

    modes: list[BorderRadiusMode]


# =============================================================================
# Typography
# =============================================================================


class FontSizeSystem(BaseModel):
    """Additive type scale: fs-1 = base, fs-{n} = base + increment * (n - 1)."""

    model_config = _MODEL_CONFIG

    unit: str
    base: float
    min: float
    increment: float
    range: int


class TypographyMode(NamedMode):
    tokens: FontSizeSystem


class TypographyFamily(BaseModel):
    model_config = _MODEL_CONFIG

    modes: list[TypographyMode]


# =============================================================================
# Border width
# =============================================================================


class BorderWidthSystem(BaseModel):
    model_config = _MODEL_CONFIG

    unit: str
    value: float


class BorderWidthMode(NamedMode):
    tokens: BorderWidthSystem


class BorderWidthFamily(BaseModel):
    model_config = _MODEL_CONFIG

    modes: list[BorderWidthMode]


class BorderFamily(BaseModel):
    model_config = _MODEL_CONFIG

    radius: BorderRadiusFamily | None = None
    width: BorderWidthFamily | None = None


# =============================================================================
# Time
# =============================================================================


class TimeSystem(BaseModel):
    """Multiplicative time scale: t-{n} = base * n."""

    model_config = _MODEL_CONFIG

    unit: str
    base: float
    min: float
    range: int


class TimeMode(NamedMode):
    """A named time scale.

    Time scales coexist rather than replace each other: the default scale
    is emitted unprefixed and every other scale under its own name.
    """

    tokens: TimeSystem


class TimeFamily(BaseModel):
    model_config = _MODEL_CONFIG

    modes: list[TimeMode]


# =============================================================================
# Design system
# =============================================================================


class DesignSystem(BaseModel):
    """A (possibly partial) design system. Every family is optional."""

    model_config = _MODEL_CONFIG

    colors: ColorFamily | None = None
    spacing: SpacingFamily | None = None
    gap: GapFamily | None = None
    typography: TypographyFamily | None = None
    border: BorderFamily | None = None
    time: TimeFamily | None = None

    def to_config(self) -> dict[str, Any]:
        """Dump back to the plain mapping shape accepted by the validator."""
        return self.model_dump(by_alias=True, exclude_none=True)
