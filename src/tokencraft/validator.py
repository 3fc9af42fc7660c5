"""
Input validation for design system configurations.

Runs before any generation and fails fast: the first problem found is
raised as a ValidationError naming the offending field path. No partial
generation happens on invalid input.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from .errors import ValidationError
from .ir.config import DesignSystem, Oklch

FAMILIES = ("colors", "spacing", "gap", "typography", "border", "time")

# Keys of a gap / border radius mode that configure rather than name tokens
REFERENCE_CONFIG_KEYS = frozenset({"unit", "spacingMode", "spacing_mode"})


# =============================================================================
# Value checks
# =============================================================================


def _is_number(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond the float range
        return False


def _is_integer(value: Any) -> bool:
    return _is_number(value) and float(value).is_integer()


def _present(config: Mapping[str, Any], key: str) -> bool:
    return config.get(key) is not None


def _require_mapping(value: Any, path: str, message: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValidationError(message, path=path)
    return value


def _require_key(key: Any, path: str, label: str) -> None:
    """Keys become token names, so they must be non-empty strings."""
    if not isinstance(key, str) or not key:
        raise ValidationError(
            f"{path} {label} must be a non-empty string (got {key!r})", path=f"{path}.{key}"
        )


def _require_unit(tokens: Mapping[str, Any], path: str, label: str) -> None:
    unit = tokens.get("unit")
    if not isinstance(unit, str) or not unit:
        raise ValidationError(f"{label} must have a unit string", path=f"{path}.unit")


def _require_number(
    tokens: Mapping[str, Any],
    key: str,
    path: str,
    label: str,
    *,
    positive: bool = False,
    non_negative: bool = False,
) -> None:
    value = tokens.get(key)
    field_path = f"{path}.{key}"
    if positive and (not _is_number(value) or value <= 0):
        raise ValidationError(f"{label} {key} must be a positive number", path=field_path)
    if non_negative and (not _is_number(value) or value < 0):
        raise ValidationError(f"{label} {key} must be a non-negative number", path=field_path)
    if not _is_number(value):
        raise ValidationError(f"{label} {key} must be a number", path=field_path)


def _require_range(tokens: Mapping[str, Any], path: str, label: str) -> None:
    value = tokens.get("range")
    if not _is_integer(value) or value < 1:
        raise ValidationError(
            f"{label} range must be a positive integer (got {value!r})",
            path=f"{path}.range",
        )


# =============================================================================
# Mode lists
# =============================================================================


def _validate_modes(family: Any, path: str, label: str) -> list[Mapping[str, Any]]:
    """Check the shared mode-list shape and return the modes.

    Every family is ``{modes: [{name, isDefault?, tokens}, ...]}`` with at
    least one mode and unique, non-empty mode names.
    """
    family = _require_mapping(family, path, f"{path} must be a mapping with a modes list")
    modes = family.get("modes")
    if not isinstance(modes, Sequence) or isinstance(modes, (str, bytes)):
        raise ValidationError(f"{path}.modes must be an array", path=f"{path}.modes")
    if not modes:
        raise ValidationError(f"{path}.modes must have at least one mode", path=f"{path}.modes")

    seen: set[str] = set()
    for index, mode in enumerate(modes):
        mode_path = f"{path}.modes[{index}]"
        mode = _require_mapping(mode, mode_path, f"{label} mode at index {index} must be a mapping")

        name = mode.get("name")
        if not isinstance(name, str) or not name:
            raise ValidationError(
                f"{label} mode at index {index} must have a name", path=f"{mode_path}.name"
            )
        if name in seen:
            raise ValidationError(
                f'{label} mode name "{name}" is used more than once', path=f"{mode_path}.name"
            )
        seen.add(name)

        is_default = mode.get("isDefault", mode.get("is_default"))
        if is_default is not None and not isinstance(is_default, bool):
            raise ValidationError(
                f'{label} mode "{name}" isDefault must be a boolean',
                path=f'{path}.modes["{name}"].isDefault',
            )

        if not isinstance(mode.get("tokens"), Mapping):
            raise ValidationError(
                f'{label} mode "{name}" must have tokens', path=f'{path}.modes["{name}"].tokens'
            )

    return list(modes)


def _mode_path(path: str, mode: Mapping[str, Any]) -> str:
    return f'{path}.modes["{mode["name"]}"].tokens'


# =============================================================================
# Families
# =============================================================================


def validate_alpha_schedule(schedule: Any, path: str) -> None:
    """Alpha schedules map level names to opacities in [0, 1]."""
    schedule = _require_mapping(schedule, path, f"{path} must be a mapping of level -> alpha")
    if not schedule:
        raise ValidationError(f"{path} must have at least one alpha level", path=path)

    for level, value in schedule.items():
        _require_key(level, path, "alpha level")
        if not _is_number(value):
            raise ValidationError(f"{path}.{level} must be a number", path=f"{path}.{level}")
        if value < 0 or value > 1:
            raise ValidationError(
                f"{path}.{level} must be between 0 and 1 (got {value})",
                path=f"{path}.{level}",
            )


def _validate_color(value: Any, path: str) -> None:
    if value is None or isinstance(value, Oklch):
        return
    color = _require_mapping(value, path, f"{path} must be an OKLCH color {{l, c, h}}")
    mode = color.get("mode", "oklch")
    if mode != "oklch":
        raise ValidationError(
            f'{path}.mode must be "oklch" (got {mode!r})', path=f"{path}.mode"
        )
    for channel in ("l", "c"):
        if not _is_number(color.get(channel)):
            raise ValidationError(f"{path}.{channel} must be a number", path=f"{path}.{channel}")
    hue = color.get("h")
    if hue is not None and not _is_number(hue):
        raise ValidationError(f"{path}.h must be a number", path=f"{path}.h")


def _alpha_schedule(config: Mapping[str, Any]) -> Any:
    return config.get("alphaSchedule", config.get("alpha_schedule"))


def validate_colors(colors: Any) -> None:
    modes = _validate_modes(colors, "colors", "Color")

    schedule = _alpha_schedule(colors)
    if schedule is not None:
        validate_alpha_schedule(schedule, "colors.alphaSchedule")

    for mode in modes:
        tokens_path = _mode_path("colors", mode)
        for color_name, color in mode["tokens"].items():
            _require_key(color_name, tokens_path, "color name")
            _validate_color(color, f"{tokens_path}.{color_name}")

        schedule = _alpha_schedule(mode)
        if schedule is not None:
            validate_alpha_schedule(
                schedule, f'colors.modes["{mode["name"]}"].alphaSchedule'
            )


def validate_spacing(spacing: Any) -> None:
    for mode in _validate_modes(spacing, "spacing", "Spacing"):
        tokens = mode["tokens"]
        path = _mode_path("spacing", mode)
        label = f'Spacing mode "{mode["name"]}"'

        _require_unit(tokens, path, label)
        _require_number(tokens, "base", path, label, positive=True)
        _require_number(tokens, "min", path, label, non_negative=True)
        _require_range(tokens, path, label)


def _validate_reference_family(
    family: Any, path: str, label: str, spacing_names: set[str]
) -> None:
    """Gap and border radius: every token entry references the spacing scale."""
    for mode in _validate_modes(family, path, label):
        tokens = mode["tokens"]
        tokens_path = _mode_path(path, mode)
        mode_label = f'{label} mode "{mode["name"]}"'

        if "unit" in tokens and tokens["unit"] is not None:
            _require_unit(tokens, tokens_path, mode_label)

        spacing_mode = tokens.get("spacingMode", tokens.get("spacing_mode"))
        if spacing_mode is not None:
            if not isinstance(spacing_mode, str):
                raise ValidationError(
                    f"{mode_label} spacingMode must be a string",
                    path=f"{tokens_path}.spacingMode",
                )
            if spacing_mode not in spacing_names:
                raise ValidationError(
                    f'{mode_label} references unknown spacing mode "{spacing_mode}"',
                    path=f"{tokens_path}.spacingMode",
                )

        for key, value in tokens.items():
            _require_key(key, tokens_path, "token name")
            if key in REFERENCE_CONFIG_KEYS:
                continue
            if value == "min":
                continue
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValidationError(
                    f'{mode_label} {key} must be "min" or a non-negative integer (got {value!r})',
                    path=f"{tokens_path}.{key}",
                )


def validate_typography(typography: Any) -> None:
    for mode in _validate_modes(typography, "typography", "Typography"):
        tokens = mode["tokens"]
        path = _mode_path("typography", mode)
        label = f'Typography mode "{mode["name"]}"'

        _require_unit(tokens, path, label)
        _require_number(tokens, "base", path, label, positive=True)
        _require_number(tokens, "min", path, label, non_negative=True)
        _require_number(tokens, "increment", path, label)
        _require_range(tokens, path, label)


def validate_border_width(width: Any) -> None:
    for mode in _validate_modes(width, "border.width", "Border width"):
        tokens = mode["tokens"]
        path = _mode_path("border.width", mode)
        label = f'Border width mode "{mode["name"]}"'

        _require_unit(tokens, path, label)
        _require_number(tokens, "value", path, label, non_negative=True)


def validate_time(time: Any) -> None:
    for mode in _validate_modes(time, "time", "Time"):
        tokens = mode["tokens"]
        path = _mode_path("time", mode)
        label = f'Time mode "{mode["name"]}"'

        _require_unit(tokens, path, label)
        _require_number(tokens, "base", path, label, non_negative=True)
        _require_number(tokens, "min", path, label, non_negative=True)
        _require_range(tokens, path, label)


def _spacing_names(config: Mapping[str, Any]) -> set[str]:
    return {mode["name"] for mode in config["spacing"]["modes"]}


def _override_names(family: Mapping[str, Any]) -> list[str]:
    """Names of the non-default modes, resolved like ``select_default``."""
    modes = family["modes"]
    flagged = [m for m in modes if m.get("isDefault", m.get("is_default"))]
    default = flagged[0] if flagged else modes[0]
    return [m["name"] for m in modes if m is not default]


def _size_families(config: Mapping[str, Any]) -> list[tuple[str, Mapping[str, Any]]]:
    families = [
        (key, config[key]) for key in ("spacing", "gap", "typography") if _present(config, key)
    ]
    border = config.get("border") or {}
    for key in ("radius", "width"):
        if _present(border, key):
            families.append((f"border.{key}", border[key]))
    return families


def _validate_mode_categories(config: Mapping[str, Any]) -> None:
    """An override mode name may belong to one selector axis only.

    Color and size overrides are keyed by mode name in the IR, so sharing
    a name would put both axes under one selector. Time has no overrides.
    """
    if not _present(config, "colors"):
        return
    color_overrides = set(_override_names(config["colors"]))

    for path, family in _size_families(config):
        for name in _override_names(family):
            if name in color_overrides:
                raise ValidationError(
                    f'Mode "{name}" is an override in both the color and size categories; '
                    "override mode names must be unique across categories",
                    path=f'{path}.modes["{name}"].name',
                )


# =============================================================================
# Entry point
# =============================================================================


def validate_design_system(config: Mapping[str, Any] | DesignSystem) -> None:
    """Validate a (possibly partial) design system, raising on the first problem.

    Only the families present are validated. Gap and border radius both
    resolve against spacing, so they require the spacing family.

    Raises:
        ValidationError: With ``path`` set to the offending field.
    """
    if isinstance(config, DesignSystem):
        config = config.to_config()
    if not isinstance(config, Mapping):
        raise ValidationError("Design system must be a mapping of token families")

    if not any(_present(config, family) for family in FAMILIES):
        raise ValidationError(
            "At least one token family must be provided (" + ", ".join(FAMILIES) + ")"
        )

    border = config.get("border")
    if border is not None:
        border = _require_mapping(border, "border", "border must be a mapping of radius/width")

    has_spacing = _present(config, "spacing")
    if _present(config, "gap") and not has_spacing:
        raise ValidationError(
            "Gap requires spacing (gap values reference spacing tokens)", path="gap"
        )
    if border is not None and _present(border, "radius") and not has_spacing:
        raise ValidationError(
            "Border radius requires spacing (radius values reference spacing tokens)",
            path="border.radius",
        )

    if _present(config, "colors"):
        validate_colors(config["colors"])
    if has_spacing:
        validate_spacing(config["spacing"])
    if _present(config, "gap"):
        _validate_reference_family(config["gap"], "gap", "Gap", _spacing_names(config))
    if _present(config, "typography"):
        validate_typography(config["typography"])
    if border is not None:
        if _present(border, "radius"):
            _validate_reference_family(
                border["radius"], "border.radius", "Border radius", _spacing_names(config)
            )
        if _present(border, "width"):
            validate_border_width(border["width"])
    if _present(config, "time"):
        validate_time(config["time"])

    _validate_mode_categories(config)
