"""
Configuration, option and IR types for tokencraft.
"""

from .config import (
    AlphaSchedule,
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
    NamedMode,
    Oklch,
    SpacingFamily,
    SpacingMode,
    SpacingReference,
    SpacingReferenceSystem,
    SpacingSystem,
    TimeFamily,
    TimeMode,
    TimeSystem,
    TypographyFamily,
    TypographyMode,
    oklch,
)
from .options import (
    DEFAULT_OPTIONS,
    AlphaColorEncoding,
    ColorEncoding,
    ColorFormat,
    GeneratorOptions,
    Prefixes,
    Selectors,
    Separators,
    merge_options,
)
from .tokens import (
    CATEGORY_FAMILIES,
    EMPTY_RESULT,
    IR,
    GeneratorResult,
    ModeCategories,
    ModeCategory,
    ModeInfo,
    TokenFamily,
    TokenMetadata,
    TokenValue,
)

__all__ = [
    # Config
    "AlphaSchedule",
    "BorderFamily",
    "BorderRadiusFamily",
    "BorderRadiusMode",
    "BorderWidthFamily",
    "BorderWidthMode",
    "BorderWidthSystem",
    "ColorFamily",
    "ColorMode",
    "DesignSystem",
    "FontSizeSystem",
    "GapFamily",
    "GapMode",
    "NamedMode",
    "Oklch",
    "SpacingFamily",
    "SpacingMode",
    "SpacingReference",
    "SpacingReferenceSystem",
    "SpacingSystem",
    "TimeFamily",
    "TimeMode",
    "TimeSystem",
    "TypographyFamily",
    "TypographyMode",
    "oklch",
    # Options
    "DEFAULT_OPTIONS",
    "AlphaColorEncoding",
    "ColorEncoding",
    "ColorFormat",
    "GeneratorOptions",
    "Prefixes",
    "Selectors",
    "Separators",
    "merge_options",
    # IR
    "CATEGORY_FAMILIES",
    "EMPTY_RESULT",
    "IR",
    "GeneratorResult",
    "ModeCategories",
    "ModeCategory",
    "ModeInfo",
    "TokenFamily",
    "TokenMetadata",
    "TokenValue",
]
