"""Display formatting for computed statistics.

Numbers are rendered as integers when they are exactly integral and are
otherwise rounded half-up to a fixed number of decimals with trailing zeros
dropped. Undefined values stay ``None`` so that "no data" never reads as zero.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, localcontext

DEFAULT_PRECISION = 4

# Integral floats at or above this are shown in exponent form by format_raw
_MAX_PLAIN_INTEGER = 1e16


def format_number(value: float | None, precision: int = DEFAULT_PRECISION) -> str | None:
    """Format a number for display.

    Rounding works on the exact binary value of the float and sends halves
    away from zero, so ``0.03125`` becomes ``0.0313`` at four places. The
    result is always plain decimal notation, never an exponent.

    Args:
        value: Number to format (None for an undefined statistic)
        precision: Maximum number of decimal places

    Returns:
        Formatted string, or None when the value is undefined or not finite

    Example:
        >>> format_number(4.571428571)
        '4.5714'
        >>> format_number(4.0)
        '4'
    """
    if value is None:
        return None

    value = float(value)
    if not math.isfinite(value):
        return None

    if value.is_integer():
        return str(int(value))

    # Non-integral floats are below 2**53, so 17 digits cover the integer part
    with localcontext() as ctx:
        ctx.prec = 17 + precision
        rounded = Decimal(abs(value)).quantize(
            Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP
        )

    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")

    if value < 0 and text != "0":
        text = "-" + text
    return text


def format_raw(value: float) -> str:
    """Format a sample value at full precision.

    Integral values drop the trailing ``.0``; everything else uses the
    shortest representation that reads back as the same float.

    Example:
        >>> format_raw(1.23456), format_raw(2.0)
        ('1.23456', '2')
    """
    value = float(value)
    if value.is_integer() and abs(value) < _MAX_PLAIN_INTEGER:
        return str(int(value))
    return repr(value)


def format_mode(
    mode: Iterable[float | str] | None,
    precision: int = DEFAULT_PRECISION,
) -> list[str] | None:
    """Format each mode value, passing the no-mode sentinel through."""
    if mode is None:
        return None
    return [
        value if isinstance(value, str) else format_number(value, precision)
        for value in mode
    ]
