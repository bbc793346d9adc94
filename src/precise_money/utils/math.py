from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

from precise_money.utils.numeric_tools import FloatLike, as_decimal


def round_number_to_digits(value: FloatLike, precision: int) -> float:
    """
    Round a number to $precision decimal digits, with ties rounded away from zero.

    Rounding is done on the shortest decimal representation of $value, so 0.125 rounds
    to 0.13 even though the nearest binary float lies slightly below 0.125.

    Args:
        value: The number to round (Float-like scalar).
        precision: Number of decimal digits to keep. Negative values round to tens, hundreds, ...

    Returns:
        The rounded number as a float.

    Raises:
        ValueError: If $precision is not an integer or $value is not a finite number.

    Examples:
        >>> round_number_to_digits(0.125, 2)
        0.13
        >>> round_number_to_digits(0.1234321, 3)
        0.123
        >>> round_number_to_digits(-0.125, 2)
        -0.13
    """
    # Raise: precision must be a plain integer (bool is excluded on purpose)
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise ValueError(f"Cannot call `round_number_to_digits` because $precision ({precision!r}) is not an integer")

    try:
        decimal_value = as_decimal(value)
    except (ValueError, TypeError, InvalidOperation) as e:
        raise ValueError(f"Cannot call `round_number_to_digits` because $value ({value!r}) cannot be converted to Decimal") from e

    # Raise: NaN and infinities have no digits to round
    if not decimal_value.is_finite():
        raise ValueError(f"Cannot call `round_number_to_digits` because $value ({value!r}) is not finite")

    quantum = Decimal(1).scaleb(-precision)
    with localcontext() as ctx:
        # Large magnitudes need more than the default 28 digits to be quantized
        ctx.prec = max(ctx.prec, decimal_value.adjusted() + precision + 2)
        rounded = decimal_value.quantize(quantum, rounding=ROUND_HALF_UP)

    return float(rounded)


def calculate_percent(value: FloatLike, percent: FloatLike) -> float:
    """
    Calculate $percent percent of $value, i.e. `value * percent / 100`.

    Args:
        value: The base number (Float-like scalar).
        percent: The percentage, e.g. 25 or "25" for a quarter of $value.

    Returns:
        The percentage share of $value as a float.

    Raises:
        ValueError: If $value or $percent cannot be converted to a finite Decimal.

    Examples:
        >>> calculate_percent(20, 50)
        10.0
        >>> calculate_percent(25.9, "25")
        6.475
    """
    try:
        decimal_value = as_decimal(value)
        decimal_percent = as_decimal(percent)
    except (ValueError, TypeError, InvalidOperation) as e:
        raise ValueError(f"Cannot call `calculate_percent` because $value ({value!r}) or $percent ({percent!r}) cannot be converted to Decimal") from e

    # Raise: both operands must be finite numbers
    if not (decimal_value.is_finite() and decimal_percent.is_finite()):
        raise ValueError(f"Cannot call `calculate_percent` because $value ({value!r}) or $percent ({percent!r}) is not finite")

    return float(decimal_value * decimal_percent / 100)
