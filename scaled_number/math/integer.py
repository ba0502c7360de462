"""Integer primitives shared by the codec, the float bridge and ScaledValue.

Python's ``//`` rounds toward negative infinity. Every precision-losing
step in this library truncates toward zero instead, so all scaled
divisions go through :func:`div_trunc`.

``int(str)`` and ``str(int)`` refuse more than 4300 digits on current
interpreters; digit text is converted through ``decimal.Decimal``, which
has no such limit.
"""

from __future__ import annotations

from decimal import Decimal

from scaled_number.constants import DEFAULT_DECIMALS


def div_trunc(a: int, b: int) -> int:
    """Divide two scaled integers, dropping the remainder toward zero.

    Used wherever a scaled value loses fractional digits (downscaling,
    mul, div), so ``-1.25`` cut to one decimal is ``-1.2``, not ``-1.3``.

    Raises:
        ZeroDivisionError: If b is zero

    Examples:
        div_trunc(-125, 10) == -12
        div_trunc(125, 10) == 12
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero in div_trunc")

    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def pow10(exponent: int) -> int:
    """Return 10**exponent as an int (exponent must be non-negative)."""
    if exponent < 0:
        raise ValueError(f"pow10 requires a non-negative exponent, got {exponent}")
    return 10**exponent


def scale(number: int, decimals: int = DEFAULT_DECIMALS) -> int:
    """Scale a whole number up by 10**decimals."""
    return int(number) * pow10(decimals)


def digits_to_int(digits: str) -> int:
    """Convert validated ``-?[0-9]+`` text of any length to an int."""
    return int(Decimal(digits))


def int_to_digits(value: int) -> str:
    """Decimal text of an int of any length."""
    return format(Decimal(value), "f")


def floored_log10(value: int) -> int:
    """Digit count of |value| minus one (0 for zero)."""
    return Decimal(value).adjusted()
