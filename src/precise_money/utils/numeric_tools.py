from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import TypeAlias

# Use where optimal type is `float`, but other types are also acceptable (and will be converted to `float`)
FloatLike: TypeAlias = float | int | str | Decimal

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Longest numeric prefix accepted by `parse_leading_float` (sign, digits, fraction, exponent); ASCII digits only
_LEADING_FLOAT_PATTERN = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def parse_leading_float(text: str) -> float | None:
    """Parses the longest leading decimal number of $text into a finite `float`.

    Leading whitespace is skipped and anything after the numeric prefix is ignored,
    so "12.5 USD" parses as 12.5 and "1e3x" as 1000.0.

    Args:
        text: Text that should start with a base-10 number.

    Returns:
        The parsed finite float, or None if $text has no numeric prefix or the
        prefix does not fit into a finite float.

    Examples:
        >>> parse_leading_float("0.125")
        0.125
        >>> parse_leading_float("  -3.5e2 apples")
        -350.0
        >>> parse_leading_float("randomString") is None
        True
    """
    match = _LEADING_FLOAT_PATTERN.match(text)
    if match is None:
        return None

    result = float(match.group(1))
    if not math.isfinite(result):
        return None

    return result


def format_float(value: float) -> str:
    """Renders $value as its shortest decimal string, printing whole numbers below 1e21 as plain digits.

    Examples:
        >>> format_float(0.13)
        '0.13'
        >>> format_float(30.0)
        '30'
        >>> format_float(1e17)
        '100000000000000000'
    """
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e21:
        return format(as_decimal(value).quantize(Decimal(1)), "f")
    return repr(value)
