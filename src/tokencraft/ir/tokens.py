"""
Intermediate Representation (IR) types.

The IR is the normalized, fully expanded output of the generator layer.
It holds every computed token value ready to be rendered by a transformer.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    WrapSerializer,
)

_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class TokenFamily(StrEnum):
    """Token families produced by the generators."""

    COLOR = "color"
    SPACING = "spacing"
    GAP = "gap"
    TYPOGRAPHY = "typography"
    BORDER_RADIUS = "borderRadius"
    BORDER_WIDTH = "borderWidth"
    TIME = "time"


class ModeCategory(StrEnum):
    """Selector axes. Families in one category share override modes."""

    COLOR = "color"
    SIZE = "size"
    TIME = "time"


CATEGORY_FAMILIES: dict[ModeCategory, tuple[TokenFamily, ...]] = {
    ModeCategory.COLOR: (TokenFamily.COLOR,),
    ModeCategory.SIZE: (
        TokenFamily.SPACING,
        TokenFamily.GAP,
        TokenFamily.TYPOGRAPHY,
        TokenFamily.BORDER_RADIUS,
        TokenFamily.BORDER_WIDTH,
    ),
    ModeCategory.TIME: (TokenFamily.TIME,),
}


class TokenMetadata(BaseModel):
    """Family-specific diagnostic tags."""

    model_config = _MODEL_CONFIG

    is_alpha_variant: bool | None = Field(default=None, alias="isAlphaVariant")
    alpha_level: str | None = Field(default=None, alias="alphaLevel")
    base_color: str | None = Field(default=None, alias="baseColor")
    time_category: str | None = Field(default=None, alias="timeCategory")


class TokenValue(BaseModel):
    """A single token in the IR."""

    model_config = _MODEL_CONFIG

    family: TokenFamily
    name: str = Field(description="Full token name without the -- prefix (e.g. 'sp-1')")
    value: str = Field(description="Computed CSS value (e.g. '8px')")
    raw_value: float | None = Field(default=None, alias="rawValue")
    unit: str | None = None
    reference: str | None = Field(
        default=None, description="Token this value was derived from (e.g. 'sp-1')"
    )
    metadata: TokenMetadata | None = None


class ModeInfo(BaseModel):
    model_config = _MODEL_CONFIG

    default: str = ""
    overrides: list[str] = Field(default_factory=list)


class ModeCategories(BaseModel):
    model_config = _MODEL_CONFIG

    color: ModeInfo = Field(default_factory=ModeInfo)
    size: ModeInfo = Field(default_factory=ModeInfo)
    time: ModeInfo = Field(default_factory=ModeInfo)

    def get(self, category: ModeCategory) -> ModeInfo:
        return getattr(self, category.value)


class GeneratorResult(BaseModel):
    """Output of one family generator."""

    model_config = _MODEL_CONFIG

    default_tokens: list[TokenValue] = Field(default_factory=list)
    override_tokens: dict[str, list[TokenValue]] = Field(default_factory=dict)
    mode_info: ModeInfo = Field(default_factory=ModeInfo)


EMPTY_RESULT = GeneratorResult()


# =============================================================================
# Read-only token maps
# =============================================================================


def _read_only(tokens: dict[str, TokenValue]) -> Mapping[str, TokenValue]:
    return MappingProxyType(tokens)


def _read_only_modes(
    modes: dict[str, dict[str, TokenValue]],
) -> Mapping[str, Mapping[str, TokenValue]]:
    return MappingProxyType({name: MappingProxyType(tokens) for name, tokens in modes.items()})


def _dump_tokens(value: Mapping[str, TokenValue], handler: SerializerFunctionWrapHandler) -> Any:
    return handler(dict(value))


def _dump_modes(
    value: Mapping[str, Mapping[str, TokenValue]], handler: SerializerFunctionWrapHandler
) -> Any:
    return handler({name: dict(tokens) for name, tokens in value.items()})


TokenMap = Annotated[
    dict[str, TokenValue], AfterValidator(_read_only), WrapSerializer(_dump_tokens)
]
ModeTokenMap = Annotated[
    dict[str, dict[str, TokenValue]],
    AfterValidator(_read_only_modes),
    WrapSerializer(_dump_modes),
]


class IR(BaseModel):
    """The complete Intermediate Representation.

    Immutable once built: the token maps are exposed as read-only mappings.

    Attributes:
        tokens: Default-mode tokens across all families, keyed by name
        modes: Default and override mode names per mode category
        override_tokens: Per override mode, only the tokens that mode emits
    """

    model_config = _MODEL_CONFIG

    tokens: TokenMap = Field(default_factory=dict, validate_default=True)
    modes: ModeCategories = Field(default_factory=ModeCategories)
    override_tokens: ModeTokenMap = Field(
        default_factory=dict, alias="overrideTokens", validate_default=True
    )

    def category_of(self, mode_name: str) -> ModeCategory | None:
        """Return the mode category whose override list contains ``mode_name``."""
        for category in ModeCategory:
            if mode_name in self.modes.get(category).overrides:
                return category
        return None

    def resolve_mode(self, mode_name: str) -> dict[str, TokenValue]:
        """Materialize the full token set for one override mode.

        Override blocks are sparse and rely on CSS cascade to inherit the
        default values. Targets without cascade need the merged view:
        default tokens with the mode's tokens applied over them. Unknown
        mode names resolve to the default tokens.
        """
        merged = dict(self.tokens)
        merged.update(self.override_tokens.get(mode_name, {}))
        return merged

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dump using the camelCase wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
