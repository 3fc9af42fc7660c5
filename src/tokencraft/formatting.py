"""
Number formatting for CSS values.
"""

from __future__ import annotations


def format_number(value: float) -> str:
    """Render a number the way it is written in CSS.

    Integral values drop the fractional part (``8.0`` -> ``"8"``); other
    values use the shortest round-tripping representation.
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def trim_number(value: float, places: int = 4) -> str:
    """Round to ``places`` decimals and strip insignificant trailing zeros.

    >>> trim_number(1.0)
    '1'
    >>> trim_number(1.125)
    '1.125'
    """
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text
