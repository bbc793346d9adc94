"""Exceptions raised by `Amount` construction and arithmetic."""


class AmountError(Exception):
    """Base class for all errors raised by the monetary package."""


class ParseError(AmountError, ValueError):
    """Raised when an input cannot be interpreted as a base-10 floating point number."""

    MESSAGE = "Your amount could not be parsed into a floating point number. Please pass an amount that can be parsed as a float."

    def __init__(self, amount: object = None):
        self.amount = amount
        super().__init__(self.MESSAGE)


class RangeError(AmountError, OverflowError):
    """Raised when a scaled integer result falls outside the exactly representable range."""

    MESSAGE = "Your numbers are too big to calculate safely."

    def __init__(self, scaled_result: int | None = None):
        self.scaled_result = scaled_result
        super().__init__(self.MESSAGE)
