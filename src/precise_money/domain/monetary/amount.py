from __future__ import annotations

import logging
from decimal import Decimal
from typing import TypeAlias

from precise_money.config import get_settings
from precise_money.domain.monetary.errors import ParseError
from precise_money.domain.monetary.scaling import ScaledOperation, calculate
from precise_money.utils.math import calculate_percent, round_number_to_digits
from precise_money.utils.numeric_tools import FloatLike, format_float, parse_leading_float

logger = logging.getLogger(__name__)

# Anything an `Amount` can be built from
AmountLike: TypeAlias = "Amount | float | int | str | Decimal"


class Amount:
    """Represents a monetary amount that adds, subtracts and multiplies without float rounding noise.

    The full-precision value is stored as a float and never rounded in place.
    Rounding happens only on demand through `rounded_value` and `format`.
    Every operation returns a new `Amount`; instances are immutable.

    Arithmetic goes through scaled integers (see `precise_money.domain.monetary.scaling`),
    so `Amount(0.1).add(0.2).value == 0.3`.
    """

    __slots__ = ("_value",)

    def __init__(self, amount: AmountLike):
        """Initialize Amount from a number or a string that starts with a number.

        Strings are parsed with leading-float semantics, so "12.50 USD" becomes 12.5.

        Args:
            amount: An `Amount`, int, float, Decimal or string.

        Raises:
            ParseError: If $amount cannot be parsed into a finite floating point number.
        """
        if isinstance(amount, Amount):
            value = amount.value
        else:
            value = self._parse(amount)

        object.__setattr__(self, "_value", value)

    @staticmethod
    def _parse(amount: object) -> float:
        # Raise: bool is an int subclass but not an amount
        if isinstance(amount, bool) or not isinstance(amount, (int, float, str, Decimal)):
            logger.debug(f"Rejected $amount of unsupported type {type(amount).__name__}: {amount!r}")
            raise ParseError(amount)

        value = parse_leading_float(str(amount))
        if value is None:
            logger.debug(f"Rejected $amount that is not a finite number: {amount!r}")
            raise ParseError(amount)

        return value

    # region Properties

    @property
    def value(self) -> float:
        """Get the full-precision value."""
        return self._value

    @property
    def amount(self) -> float:
        """Alias of `value`."""
        return self._value

    # endregion

    # region Display

    def rounded_value(self, precision: int | None = None) -> float:
        """Returns the value rounded to $precision decimal digits.

        Args:
            precision: Number of digits to round to. Defaults to the configured
                display precision, which is 2 unless $PRECISE_MONEY_DISPLAY_PRECISION
                overrides it. Settings are loaded once when `precise_money.config` is
                imported, so this call never reads the environment or a `.env` file.

        Returns:
            The rounded value. The stored value is not changed.
        """
        if precision is None:
            precision = get_settings().display_precision
        return round_number_to_digits(self._value, precision)

    def format(self, precision: int | None = None) -> str:
        """Returns `rounded_value(precision)` rendered as a string, e.g. "0.13"."""
        return format_float(self.rounded_value(precision))

    # endregion

    # region Arithmetic

    def add(self, other: AmountLike) -> Amount:
        """Adds $other to this amount.

        Args:
            other: Another `Amount`, or a number or string convertible to one.

        Returns:
            New `Amount` holding the exact sum.

        Raises:
            ParseError: If $other cannot be converted to an `Amount`.
            RangeError: If the sum is too big to calculate safely.
        """
        return self._calculate(other, ScaledOperation.ADD)

    def subtract(self, other: AmountLike) -> Amount:
        """Subtracts $other from this amount.

        Args:
            other: Another `Amount`, or a number or string convertible to one.

        Returns:
            New `Amount` holding the exact difference.

        Raises:
            ParseError: If $other cannot be converted to an `Amount`.
            RangeError: If the difference is too big to calculate safely.
        """
        return self._calculate(other, ScaledOperation.SUBTRACT)

    def multiply(self, other: AmountLike) -> Amount:
        """Multiplies this amount by $other.

        Both factors are scaled before multiplying, so the product of the scaled
        integers grows quickly: `Amount(100).multiply(100)` is already refused.

        Args:
            other: Another `Amount`, or a number or string convertible to one.

        Returns:
            New `Amount` holding the exact product.

        Raises:
            ParseError: If $other cannot be converted to an `Amount`.
            RangeError: If the product is too big to calculate safely.
        """
        return self._calculate(other, ScaledOperation.MULTIPLY)

    def add_percent(self, percent: FloatLike) -> Amount:
        """Adds $percent percent of this amount to it, e.g. for taxes.

        Raises:
            ValueError: If $percent is not a number.
            RangeError: If the result is too big to calculate safely.
        """
        return self.add(calculate_percent(self._value, percent))

    def subtract_percent(self, percent: FloatLike) -> Amount:
        """Subtracts $percent percent of this amount from it, e.g. for discounts.

        Raises:
            ValueError: If $percent is not a number.
            RangeError: If the result is too big to calculate safely.
        """
        return self.subtract(calculate_percent(self._value, percent))

    def _calculate(self, other: AmountLike, operation: ScaledOperation) -> Amount:
        other_amount = coerce_to_amount(other)
        return Amount(calculate(self._value, other_amount.value, operation))

    # endregion

    # region Operators

    def __add__(self, other):
        """Add Amount + Amount or Amount + number."""
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        """Right addition: number + Amount."""
        return self.__add__(other)

    def __sub__(self, other):
        """Subtract Amount - Amount or Amount - number."""
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        """Right subtraction: number - Amount."""
        if not _is_operand(other):
            return NotImplemented
        return coerce_to_amount(other).subtract(self)

    def __mul__(self, other):
        """Multiply Amount * Amount or Amount * number."""
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        """Right multiplication: number * Amount."""
        return self.__mul__(other)

    def __neg__(self):
        return Amount(-self._value)

    def __abs__(self):
        return Amount(abs(self._value))

    # endregion

    # region Comparison

    def __eq__(self, other) -> bool:
        """Check equality of the full-precision values."""
        if not isinstance(other, Amount):
            return False
        return self._value == other._value

    def __lt__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash(self._value)

    # endregion

    # region Conversions

    def __setattr__(self, name, value):
        raise AttributeError(f"`{self.__class__.__name__}` is immutable, cannot set attribute '{name}'")

    def __reduce__(self):
        # Rebuild through `__init__` because `__setattr__` is blocked (copy, deepcopy, pickle)
        return (self.__class__, (self._value,))

    def __float__(self) -> float:
        """Return the value rounded to the default display precision."""
        return self.rounded_value()

    def __str__(self) -> str:
        """Return string like '19.43'."""
        return self.format()

    def __repr__(self) -> str:
        """Return string like 'Amount(19.425)'."""
        return f"{self.__class__.__name__}({self._value!r})"

    # endregion


def _is_operand(other: object) -> bool:
    # Types accepted by the arithmetic operators; anything else lets Python try the other operand
    if isinstance(other, bool):
        return False
    return isinstance(other, (Amount, int, float, str, Decimal))


def coerce_to_amount(value: AmountLike) -> Amount:
    """Returns $value unchanged if it is an `Amount`, otherwise builds one from it.

    Raises:
        ParseError: If $value cannot be parsed into a finite floating point number.
    """
    if isinstance(value, Amount):
        return value
    return Amount(value)
