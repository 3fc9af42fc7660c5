"""
Generator options.

Controls token naming and color output. Every field has a documented
default, so callers only pass what they want to change.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class ColorEncoding(StrEnum):
    """Output encodings for opaque colors."""

    OKLCH = "oklch"
    RGB = "rgb"
    HEX = "hex"


class AlphaColorEncoding(StrEnum):
    """Output encodings for colors with an alpha channel."""

    OKLCH = "oklch"
    RGBA = "rgba"
    HEXA = "hexa"


class Prefixes(BaseModel):
    model_config = _MODEL_CONFIG

    color: str = Field(default="clr", description="--clr-bg")
    spacing: str = Field(default="sp", description="--sp-1")
    gap: str = Field(default="gap", description="--gap-s")
    typography: str = Field(default="fs", description="--fs-1")
    border_radius: str = Field(default="bdr", alias="borderRadius", description="--bdr-s")
    border_width: str = Field(default="bdw", alias="borderWidth", description="--bdw")
    time: str = Field(default="t", description="--t-1")


class Separators(BaseModel):
    model_config = _MODEL_CONFIG

    modifier: str = Field(default="-", description='Before the alpha modifier ("-a")')
    value: str = Field(default="-", description='Before the alpha level ("-lo")')


class ColorFormat(BaseModel):
    model_config = _MODEL_CONFIG

    base: ColorEncoding = ColorEncoding.OKLCH
    alpha: AlphaColorEncoding = AlphaColorEncoding.OKLCH
    alpha_modifier: str = Field(
        default="a",
        alias="alphaModifier",
        description="Infix for alpha variants (--clr-bg-a-lo)",
    )


class Selectors(BaseModel):
    """Selector templates. ``{mode}`` is replaced by the override mode name."""

    model_config = _MODEL_CONFIG

    root: str = ":root"
    color_mode: str = Field(default='[data-color-mode="{mode}"]', alias="colorMode")
    size_mode: str = Field(default='[data-size-mode="{mode}"]', alias="sizeMode")
    time_mode: str = Field(default='[data-time-mode="{mode}"]', alias="timeMode")


class GeneratorOptions(BaseModel):
    model_config = _MODEL_CONFIG

    prefixes: Prefixes = Field(default_factory=Prefixes)
    separators: Separators = Field(default_factory=Separators)
    color_format: ColorFormat = Field(default_factory=ColorFormat, alias="colorFormat")
    selectors: Selectors = Field(default_factory=Selectors)


DEFAULT_OPTIONS = GeneratorOptions()


def merge_options(user: GeneratorOptions | Mapping[str, Any] | None = None) -> GeneratorOptions:
    """Merge user options over the defaults.

    Accepts a ready ``GeneratorOptions`` or a partial nested mapping such as
    ``{"prefixes": {"color": "color"}}``; omitted fields keep their defaults.
    """
    if user is None:
        return DEFAULT_OPTIONS
    if isinstance(user, GeneratorOptions):
        return user
    return GeneratorOptions.model_validate(dict(user))
