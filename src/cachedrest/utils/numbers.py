"""Loose string-to-number conversion used by query filters."""

import math
import re

_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INFINITY = re.compile(r"[+-]?Infinity")
_RADIX = {
    "0x": (16, re.compile(r"[0-9a-fA-F]+")),
    "0o": (8, re.compile(r"[0-7]+")),
    "0b": (2, re.compile(r"[01]+")),
}


def parse_number(value: object) -> float:
    """Convert ``value`` to a float the way a JavaScript unary ``+`` would.

    Accepted forms, after trimming whitespace: blank text (0), signed
    decimals with optional fraction and exponent, signed ``Infinity`` and
    unsigned ``0x``/``0o``/``0b`` integers; one too wide for a float is
    ``inf``. Everything else is NaN, which compares unequal to every
    number including itself.

    Args:
        value: A number or a string. Any other type, including a tuple of
            repeated query values, is NaN.

    Returns:
        The parsed number, or ``math.nan``.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return math.nan

    text = value.strip()
    if not text:
        return 0.0
    if _DECIMAL.fullmatch(text):
        return float(text)
    if _INFINITY.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf

    radix = _RADIX.get(text[:2].lower())
    if radix is not None:
        base, digits = radix
        if digits.fullmatch(text[2:]):
            try:
                return float(int(text[2:], base))
            except OverflowError:
                return math.inf

    return math.nan
