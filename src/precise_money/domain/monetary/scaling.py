"""Scaled-integer arithmetic for decimal amounts.

Operands are shifted by `SCALE_EXPONENT` decimal places into integers, combined
exactly in integer space and shifted back. Every shift happens on the decimal
representation of the number, never through a binary float multiplication, so
`0.1 + 0.2` yields exactly the float nearest to 0.3.

The combined integer must stay strictly inside the range of integers that a
64-bit float represents exactly; otherwise `RangeError` is raised instead of
returning a silently corrupted result.
"""

from __future__ import annotations

import logging
import operator
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Callable, Final

from precise_money.domain.monetary.errors import RangeError
from precise_money.utils.numeric_tools import as_decimal

logger = logging.getLogger(__name__)

# Number of decimal digits kept exact while operands are in integer space
SCALE_EXPONENT: Final[int] = 6

# Largest and smallest integers a 64-bit float holds exactly (2**53 - 1 and its negation)
MAX_SAFE_INTEGER: Final[int] = 2**53 - 1
MIN_SAFE_INTEGER: Final[int] = -MAX_SAFE_INTEGER


class ScaledOperation(Enum):
    """Arithmetic operations supported on scaled integers.

    Each member carries the integer combine step and the exponent used to
    rescale the combined integer. Multiplication rescales twice because both
    factors were scaled by `10**SCALE_EXPONENT`.
    """

    ADD = ("add", operator.add, -SCALE_EXPONENT)
    SUBTRACT = ("subtract", operator.sub, -SCALE_EXPONENT)
    MULTIPLY = ("multiply", operator.mul, -2 * SCALE_EXPONENT)

    def __init__(self, label: str, combine: Callable[[int, int], int], rescale_exponent: int):
        self.label = label
        self.combine = combine
        self.rescale_exponent = rescale_exponent


def normalize(value: float) -> int:
    """Shifts $value by `SCALE_EXPONENT` decimal places and rounds it to the nearest integer.

    The shift is applied to the decimal representation of $value, so 0.1 becomes
    exactly 100000. Digits beyond `SCALE_EXPONENT` are rounded half away from zero.
    """
    shifted = as_decimal(value).scaleb(SCALE_EXPONENT)
    return int(shifted.to_integral_value(rounding=ROUND_HALF_UP))


def in_safe_integer_range(number: int) -> bool:
    """Checks whether $number lies strictly between `MIN_SAFE_INTEGER` and `MAX_SAFE_INTEGER`.

    The boundary values themselves are treated as unsafe.
    """
    return MIN_SAFE_INTEGER < number < MAX_SAFE_INTEGER


def rescale(number: int, exponent: int) -> float:
    """Shifts the integer $number by $exponent decimal places and returns the nearest float."""
    return float(Decimal(number).scaleb(exponent))


def calculate(left: float, right: float, operation: ScaledOperation) -> float:
    """Combines $left and $right exactly using scaled integers.

    Args:
        left: Left operand.
        right: Right operand.
        operation: Which arithmetic operation to perform.

    Returns:
        The result as the float nearest to the exact decimal result.

    Raises:
        RangeError: If the combined scaled integer is outside the safe integer range.
    """
    scaled_left, scaled_right = normalize(left), normalize(right)
    combined = operation.combine(scaled_left, scaled_right)

    # Raise: refuse results that a float cannot hold exactly
    if not in_safe_integer_range(combined):
        logger.debug(f"Refused to {operation.label} {left!r} and {right!r}: scaled result {combined} is outside the safe integer range")
        raise RangeError(combined)

    return rescale(combined, operation.rescale_exponent)
