"""Scaled-number error classes.

Both errors are raised synchronously by the constructing or converting
operation; there is no fallback value substitution inside the library.
"""


class ScaledNumberError(Exception):
    """Base error for scaled-number operations."""

    pass


class InvalidNumber(ScaledNumberError, ValueError):
    """Text (or a non-finite float) cannot be parsed as a decimal number."""

    code = "errors.invalidNumber"

    def __init__(self, text: str, reason: str = "not a decimal number"):
        self.text = text
        self.reason = reason
        super().__init__(f"{self.code}: {text!r} is {reason}")


class PrecisionOverflow(ScaledNumberError, ArithmeticError):
    """Significant-digit window does not fit in the target decimals."""

    def __init__(self, decimal_scale: int, decimals: int):
        self.decimal_scale = decimal_scale
        self.decimals = decimals
        super().__init__(f"decimalScale ({decimal_scale}) > decimals {decimals}")
