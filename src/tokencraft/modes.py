"""
Default mode resolution shared by every family generator.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

from .errors import GeneratorError
from .ir.config import NamedMode

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=NamedMode)


def select_default(modes: Sequence[M]) -> tuple[M, list[M]]:
    """Split a family's modes into the default mode and the overrides.

    The first mode flagged ``isDefault`` wins; if none is flagged, the
    first declared mode is the default. Overrides keep declaration order.

    Raises:
        GeneratorError: If ``modes`` is empty (validation rejects this first).
    """
    if not modes:
        raise GeneratorError("Cannot select a default mode from an empty mode list")

    flagged = [mode for mode in modes if mode.is_default]
    if len(flagged) > 1:
        logger.warning(
            "Modes %s are all flagged as default; using '%s'",
            ", ".join(repr(m.name) for m in flagged),
            flagged[0].name,
        )

    default = flagged[0] if flagged else modes[0]
    overrides = [mode for mode in modes if mode is not default]
    return default, overrides
