__version__ = "0.0.1"

from precise_money.domain.monetary.amount import Amount, coerce_to_amount
from precise_money.domain.monetary.errors import AmountError, ParseError, RangeError

__all__ = ["Amount", "AmountError", "ParseError", "RangeError", "coerce_to_amount"]
