"""
Design system presets.

A preset is a complete, ready-to-use DesignSystem that can be generated
as-is or used as a starting point. Presets are frozen models; derive a
variant with ``model_copy(update=...)``.
"""

from __future__ import annotations

from .ir.config import (
    BorderFamily,
    BorderRadiusFamily,
    BorderRadiusMode,
    BorderWidthFamily,
    BorderWidthMode,
    BorderWidthSystem,
    ColorFamily,
    ColorMode,
    DesignSystem,
    FontSizeSystem,
    GapFamily,
    GapMode,
    SpacingFamily,
    SpacingMode,
    SpacingReferenceSystem,
    SpacingSystem,
    TimeFamily,
    TimeMode,
    TimeSystem,
    TypographyFamily,
    TypographyMode,
    oklch,
)

# Least to most opaque
DEFAULT_ALPHA_SCHEDULE: dict[str, float] = {
    "min": 0.07,
    "lo-x": 0.125,
    "lo": 0.25,
    "hi": 0.68,
    "hi-x": 0.85,
    "max": 0.93,
}


def _scale_references(spacing_mode: str, unit: str | None = None) -> SpacingReferenceSystem:
    """The conventional min/s/l/max shape used by gap and border radius."""
    return SpacingReferenceSystem(
        spacing_mode=spacing_mode, unit=unit, min="min", s=1, l=2, max=3
    )


# =============================================================================
# Default Theme
# =============================================================================

DEFAULT_THEME = DesignSystem(
    colors=ColorFamily(
        alpha_schedule=DEFAULT_ALPHA_SCHEDULE,
        modes=[
            ColorMode(
                name="dark",
                is_default=True,
                tokens={
                    "bg": oklch(0.2603, 0.0000, 129.63),  # page background
                    "ev": oklch(0.2935, 0.0018, 286.29),  # elevated surface
                    "primary": oklch(0.7969, 0.1178, 296.37),
                    "neutral": oklch(0.9302, 0.0371, 299.19),
                    "ink": oklch(0.9333, 0.0371, 299.20),  # text and icons
                    "positive": oklch(0.7625, 0.2030, 150.49),
                    "negative": oklch(0.6875, 0.2113, 7.38),
                },
            ),
            ColorMode(
                name="light",
                tokens={
                    "bg": oklch(0.9850, 0.0020, 286.00),
                    "ev": oklch(0.9600, 0.0040, 286.00),
                    "primary": oklch(0.5200, 0.1600, 296.37),
                    "ink": oklch(0.2200, 0.0200, 296.00),
                },
            ),
        ],
    ),
    spacing=SpacingFamily(
        modes=[
            SpacingMode(
                name="default",
                is_default=True,
                tokens=SpacingSystem(unit="px", base=8, min=4, range=12),
            ),
            SpacingMode(name="small", tokens=SpacingSystem(unit="px", base=4, min=2, range=12)),
            SpacingMode(name="large", tokens=SpacingSystem(unit="px", base=16, min=8, range=12)),
        ]
    ),
    gap=GapFamily(
        modes=[
            GapMode(name="default", is_default=True, tokens=_scale_references("default")),
            GapMode(name="small", tokens=_scale_references("small")),
            GapMode(name="large", tokens=_scale_references("large")),
        ]
    ),
    typography=TypographyFamily(
        modes=[
            TypographyMode(
                name="default",
                is_default=True,
                tokens=FontSizeSystem(unit="rem", base=0.875, min=0.625, increment=0.125, range=12),
            ),
            TypographyMode(
                name="small",
                tokens=FontSizeSystem(unit="rem", base=0.75, min=0.625, increment=0.125, range=12),
            ),
            TypographyMode(
                name="large",
                tokens=FontSizeSystem(unit="rem", base=1.125, min=0.75, increment=0.5, range=12),
            ),
        ]
    ),
    border=BorderFamily(
        radius=BorderRadiusFamily(
            modes=[
                BorderRadiusMode(
                    name="default", is_default=True, tokens=_scale_references("default", "px")
                ),
                BorderRadiusMode(name="small", tokens=_scale_references("small", "px")),
                BorderRadiusMode(name="large", tokens=_scale_references("large", "px")),
            ]
        ),
        width=BorderWidthFamily(
            modes=[
                BorderWidthMode(
                    name="default", is_default=True, tokens=BorderWidthSystem(unit="px", value=1)
                ),
                BorderWidthMode(name="small", tokens=BorderWidthSystem(unit="px", value=0.5)),
                BorderWidthMode(name="large", tokens=BorderWidthSystem(unit="px", value=2)),
            ]
        ),
    ),
    time=TimeFamily(
        modes=[
            TimeMode(
                name="default",
                is_default=True,
                tokens=TimeSystem(unit="ms", base=100, min=50, range=10),
            ),
            TimeMode(name="anim", tokens=TimeSystem(unit="ms", base=1000, min=500, range=10)),
        ]
    ),
)


# =============================================================================
# Preset Registry
# =============================================================================

PRESETS: dict[str, DesignSystem] = {
    "default": DEFAULT_THEME,
}


def get_preset(name: str) -> DesignSystem | None:
    """
    Get a design system preset by name.

    Args:
        name: Preset name (e.g. "default")

    Returns:
        DesignSystem if found, None otherwise
    """
    return PRESETS.get(name)


def list_presets() -> list[str]:
    """Names of all available presets."""
    return list(PRESETS.keys())
