"""
Per-family token generators.

Each generator expands one family's configuration into token records for
the default mode and every override mode.
"""

from .border import generate_border_radius_tokens, generate_border_width_tokens
from .colors import generate_color_tokens
from .gap import find_spacing_mode, generate_gap_tokens, resolve_reference
from .spacing import generate_spacing_tokens
from .time import generate_time_tokens
from .typography import generate_typography_tokens

__all__ = [
    "find_spacing_mode",
    "generate_border_radius_tokens",
    "generate_border_width_tokens",
    "generate_color_tokens",
    "generate_gap_tokens",
    "generate_spacing_tokens",
    "generate_time_tokens",
    "generate_typography_tokens",
    "resolve_reference",
]
