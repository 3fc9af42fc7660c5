"""
Design system file loading.

Reads a design system from YAML, JSON or TOML into the plain mapping that
``generate`` accepts. This is the only part of tokencraft that touches the
filesystem; generation itself is pure.

Colors may be written compactly as ``[l, c, h]`` lists:

    colors:
      alphaSchedule: {lo: 0.25, hi: 0.75}
      modes:
        - name: dark
          isDefault: true
          tokens:
            bg: [0.26, 0, 180]
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml

from .errors import DesignSystemLoadError

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".yaml", ".yml", ".json", ".toml")


def _parse(path: Path, text: str) -> Any:
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return yaml.safe_load(text)
    if suffix == ".json":
        return json.loads(text)
    return tomllib.loads(text)


def _normalize_color(value: Any) -> Any:
    if isinstance(value, (list, tuple)) and len(value) == 3:
        l, c, h = value  # noqa: E741
        return {"l": l, "c": c, "h": h}
    return value


def _normalize_colors(data: dict[str, Any]) -> dict[str, Any]:
    """Expand ``[l, c, h]`` color shorthands without touching the input."""
    colors = data.get("colors")
    if not isinstance(colors, dict) or not isinstance(colors.get("modes"), list):
        return data

    modes = []
    for mode in colors["modes"]:
        if isinstance(mode, dict) and isinstance(mode.get("tokens"), dict):
            tokens = {name: _normalize_color(value) for name, value in mode["tokens"].items()}
            mode = {**mode, "tokens": tokens}
        modes.append(mode)

    return {**data, "colors": {**colors, "modes": modes}}


def load_design_system(path: Path | str) -> dict[str, Any]:
    """Load a design system file.

    Args:
        path: A ``.yaml``/``.yml``, ``.json`` or ``.toml`` file.

    Returns:
        The design system as a plain mapping (not yet validated).

    Raises:
        DesignSystemLoadError: If the file is missing, has an unsupported
            extension, cannot be parsed, or is not a mapping.
    """
    path = Path(path)
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise DesignSystemLoadError(
            f"Unsupported design system file type '{path.suffix}' "
            f"(expected one of {', '.join(SUPPORTED_SUFFIXES)})"
        )
    if not path.exists():
        raise DesignSystemLoadError(f"Design system file not found: {path}")

    try:
        data = _parse(path, path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise DesignSystemLoadError(f"Failed to parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise DesignSystemLoadError(f"{path} must contain a mapping of token families")

    logger.debug("Loaded design system from %s (%s)", path, ", ".join(data))
    return _normalize_colors(data)
