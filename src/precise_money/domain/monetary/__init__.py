"""Monetary domain package.

This package contains the `Amount` value type and the scaled-integer arithmetic
it uses to add, subtract and multiply decimal amounts without float rounding noise.
"""

from precise_money.domain.monetary.amount import Amount, AmountLike, coerce_to_amount
from precise_money.domain.monetary.errors import AmountError, ParseError, RangeError

__all__ = ["Amount", "AmountLike", "AmountError", "ParseError", "RangeError", "coerce_to_amount"]
