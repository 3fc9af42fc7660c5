"""
Pure-Python OKLCH color formatting.

Converts OKLCH colors to CSS strings in oklch(), rgb() or hex notation,
with and without an alpha channel. Colors outside the sRGB gamut are
mapped into it first (CSS Color 4 chroma reduction), so every output is
displayable. No external color libraries required.
"""

from __future__ import annotations

import math

from .formatting import trim_number
from .ir.config import Oklch
from .ir.options import AlphaColorEncoding, ColorEncoding

# Just-noticeable difference and search precision for gamut mapping
_JND = 0.02
_EPSILON = 0.0001

RGB = tuple[float, float, float]
Lab = tuple[float, float, float]


# =============================================================================
# Conversions
# =============================================================================


def oklch_to_oklab(L: float, C: float, H: float) -> Lab:
    rad = math.radians(H)
    return (L, C * math.cos(rad), C * math.sin(rad))


def oklab_to_oklch(L: float, a: float, b: float) -> tuple[float, float, float]:
    C = math.hypot(a, b)
    H = math.degrees(math.atan2(b, a)) % 360 if C else 0.0
    return (L, C, H)


def oklab_to_linear_srgb(L: float, a: float, b: float) -> RGB:
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.2914855480 * b

    l, m, s = l_**3, m_**3, s_**3

    return (
        4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s,
        -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s,
        -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s,
    )


def linear_srgb_to_oklab(r: float, g: float, b: float) -> Lab:
    l = 0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b
    m = 0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b
    s = 0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b

    l_, m_, s_ = (math.copysign(abs(v) ** (1 / 3), v) for v in (l, m, s))

    return (
        0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_,
    )


def _to_gamma(x: float) -> float:
    if abs(x) <= 0.0031308:
        return 12.92 * x
    return math.copysign(1.055 * abs(x) ** (1 / 2.4) - 0.055, x)


def _to_linear(x: float) -> float:
    if abs(x) <= 0.04045:
        return x / 12.92
    return math.copysign(((abs(x) + 0.055) / 1.055) ** 2.4, x)


def oklch_to_srgb(L: float, C: float, H: float) -> RGB:
    """Unclipped gamma-encoded sRGB (channels may fall outside [0, 1])."""
    r, g, b = oklab_to_linear_srgb(*oklch_to_oklab(L, C, H))
    return (_to_gamma(r), _to_gamma(g), _to_gamma(b))


def srgb_to_oklch(r: float, g: float, b: float) -> tuple[float, float, float]:
    return oklab_to_oklch(*linear_srgb_to_oklab(_to_linear(r), _to_linear(g), _to_linear(b)))


# =============================================================================
# Gamut mapping
# =============================================================================


def _in_gamut(rgb: RGB, tolerance: float = 1e-6) -> bool:
    return all(-tolerance <= ch <= 1 + tolerance for ch in rgb)


def _clip(rgb: RGB) -> RGB:
    return (
        min(max(rgb[0], 0.0), 1.0),
        min(max(rgb[1], 0.0), 1.0),
        min(max(rgb[2], 0.0), 1.0),
    )


def _delta_eok(lch: tuple[float, float, float], rgb: RGB) -> float:
    L1, a1, b1 = oklch_to_oklab(*lch)
    L2, a2, b2 = linear_srgb_to_oklab(*(_to_linear(ch) for ch in rgb))
    return math.sqrt((L1 - L2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


def gamut_map(color: Oklch) -> RGB:
    """Map an OKLCH color into sRGB by reducing chroma at constant L and H.

    Returns gamma-encoded sRGB channels in [0, 1].
    """
    L, C, H = color.l, color.c, color.h or 0.0

    rgb = oklch_to_srgb(L, C, H)
    if _in_gamut(rgb):
        return _clip(rgb)
    if L >= 1:
        return (1.0, 1.0, 1.0)
    if L <= 0:
        return (0.0, 0.0, 0.0)

    clipped = _clip(rgb)
    if _delta_eok((L, C, H), clipped) < _JND:
        return clipped

    low, high = 0.0, C
    low_in_gamut = True
    while high - low > _EPSILON:
        chroma = (low + high) / 2
        candidate = oklch_to_srgb(L, chroma, H)
        if low_in_gamut and _in_gamut(candidate):
            low = chroma
            continue
        clipped = _clip(candidate)
        delta = _delta_eok((L, chroma, H), clipped)
        if delta < _JND:
            if _JND - delta < _EPSILON:
                return clipped
            low_in_gamut = False
            low = chroma
        else:
            high = chroma

    return clipped


def _displayable_oklch(color: Oklch) -> tuple[float, float, float]:
    """The color itself if displayable, otherwise its gamut-mapped OKLCH."""
    hue = color.h or 0.0
    if _in_gamut(oklch_to_srgb(color.l, color.c, hue)):
        return (color.l, color.c, hue)
    return srgb_to_oklch(*gamut_map(color))


def _channels_255(color: Oklch) -> tuple[int, int, int]:
    r, g, b = gamut_map(color)
    return (round(r * 255), round(g * 255), round(b * 255))


# =============================================================================
# CSS output
# =============================================================================


def oklch_to_css(color: Oklch, alpha: float | None = None) -> str:
    """Format as ``oklch(L C H)`` or ``oklch(L C H / A)``."""
    L, C, H = _displayable_oklch(color)
    body = f"{L:.4f} {C:.4f} {H:.2f}"
    if alpha is None:
        return f"oklch({body})"
    return f"oklch({body} / {alpha:.4f})"


def oklch_to_hex(color: Oklch) -> str:
    return "#{:02x}{:02x}{:02x}".format(*_channels_255(color))


def oklch_to_rgb(color: Oklch) -> str:
    r, g, b = _channels_255(color)
    return f"rgb({r}, {g}, {b})"


def oklch_to_rgba(color: Oklch, alpha: float) -> str:
    r, g, b = _channels_255(color)
    return f"rgba({r}, {g}, {b}, {trim_number(alpha)})"


def oklch_to_hexa(color: Oklch, alpha: float) -> str:
    return f"{oklch_to_hex(color)}{round(alpha * 255):02x}"


def format_color(color: Oklch, encoding: ColorEncoding | str = ColorEncoding.OKLCH) -> str:
    """Format an opaque color in the requested encoding."""
    encoding = ColorEncoding(encoding)
    if encoding is ColorEncoding.HEX:
        return oklch_to_hex(color)
    if encoding is ColorEncoding.RGB:
        return oklch_to_rgb(color)
    return oklch_to_css(color)


def format_color_with_alpha(
    color: Oklch,
    alpha: float,
    encoding: AlphaColorEncoding | str = AlphaColorEncoding.OKLCH,
) -> str:
    """Format a color with an opacity in [0, 1] in the requested encoding."""
    encoding = AlphaColorEncoding(encoding)
    if encoding is AlphaColorEncoding.RGBA:
        return oklch_to_rgba(color, alpha)
    if encoding is AlphaColorEncoding.HEXA:
        return oklch_to_hexa(color, alpha)
    return oklch_to_css(color, alpha)
