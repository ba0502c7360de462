"""Bridge between native floats and scaled integers.

Floats carry roughly 15-17 significant decimal digits, so conversions in
either direction are bounded by a significant-digit budget
(``DEFAULT_SIGNIFICANT_DIGITS``):

- float_to_scaled rounds the float's shortest repr at the significant-digit
  boundary and then shifts by whole powers of ten; both steps are exact,
  so large finite floats never overflow.
- scaled_to_float drops low-order digits before narrowing so the float
  mantissa is never asked for more precision than the budget.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Context, Decimal, localcontext

import structlog

from scaled_number.constants import DEFAULT_DECIMALS, DEFAULT_SIGNIFICANT_DIGITS
from scaled_number.errors import InvalidNumber, PrecisionOverflow
from scaled_number.math.integer import div_trunc, floored_log10, pow10

logger = structlog.get_logger()


def count_leading_zeros(value: float, base: int = 10) -> int:
    """Count the x10 shifts needed to bring |value| to at least 1.

    Returns 0 for values >= 1 and for zero.
    """
    value = abs(value)
    if value == 0:
        return 0
    result = 0
    while value < 1:
        result += 1
        value *= base
    return result


def _round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves toward +inf."""
    if value >= 0:
        return int(value.to_integral_value(rounding=ROUND_HALF_UP))
    return -int((-value).to_integral_value(rounding=ROUND_HALF_DOWN))


def float_to_scaled(
    value: float,
    decimals: int = DEFAULT_DECIMALS,
    significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> int:
    """Convert a float to an integer scaled by 10**decimals.

    Args:
        value: Native float to convert
        decimals: Fixed-point precision of the result
        significant_digits: Digits kept after the leading zeros

    Returns:
        Scaled integer holding at most ``significant_digits`` significant
        digits below 1 (more for large values, whose whole digits are kept).

    Raises:
        InvalidNumber: If value is NaN or infinite
        PrecisionOverflow: If leading zeros + significant_digits > decimals

    Examples:
        float_to_scaled(0.50134, 6, 5) == 501340
        float_to_scaled(0.00543, 6, 3) == 5430
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidNumber(str(value), "not finite")
    if value == 0:
        return 0

    decimal_scale = count_leading_zeros(value) + significant_digits
    if decimal_scale > decimals:
        logger.debug(
            "precision_overflow",
            value=value,
            decimal_scale=decimal_scale,
            decimals=decimals,
        )
        raise PrecisionOverflow(decimal_scale, decimals)

    amount = Decimal(value) if isinstance(value, int) else Decimal(repr(float(value)))
    # Enough precision that scaleb only moves the exponent
    with localcontext(Context(prec=len(amount.as_tuple().digits))):
        scaled_significant = _round_half_up(amount.scaleb(decimal_scale))
    return scaled_significant * pow10(decimals - decimal_scale)


def scaled_to_float(
    value: int,
    decimals: int = DEFAULT_DECIMALS,
    significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> float:
    """Convert a scaled integer to a float approximation.

    Low-order digits beyond ``significant_digits`` are truncated before
    narrowing, but never more than ``decimals`` of them, so whole digits
    always survive.
    """
    log = floored_log10(value)
    drop_scale = min(max(0, log - significant_digits + 1), decimals)
    kept = div_trunc(value, pow10(drop_scale))
    # int / int true division is correctly rounded even for huge operands
    return kept / pow10(decimals - drop_scale)
