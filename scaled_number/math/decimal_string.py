"""Exact conversion between decimal text and scaled integers.

Text like ``"-1,234.5e2"`` is parsed into an integer scaled by
``10**decimals``. Excess fractional digits are truncated, never rounded:
``parse_decimal("1.2345", 2) == 123``. Rendering is the inverse for any
value that did not need truncation::

    parse_decimal(render_decimal(v, d), d) == v
"""

from __future__ import annotations

import re

import structlog

from scaled_number.errors import InvalidNumber
from scaled_number.math.integer import digits_to_int, int_to_digits, pow10

logger = structlog.get_logger()

GROUPING_SEPARATOR = ","
DECIMAL_SEPARATOR = "."

# Unsigned mantissa with an optional exponent; the sign is stripped first
_NUMBER_RE = re.compile(r"(?P<whole>[0-9]*)(?:\.(?P<fraction>[0-9]*))?(?:[eE](?P<exponent>[-+]?[0-9]+))?")


def parse_decimal(text: str, decimals: int) -> int:
    """Parse decimal text into an integer scaled by 10**decimals.

    Args:
        text: Decimal text; may contain grouping commas, a leading ``-``
            and an ``e<int>`` exponent suffix.
        decimals: Number of implied fractional digits in the result.

    Returns:
        The scaled integer. Fractional digits beyond ``decimals`` are
        truncated toward zero.

    Raises:
        InvalidNumber: If text is empty, a lone ``.``, or not a decimal
            number.
    """
    if not text or text == DECIMAL_SEPARATOR:
        logger.debug("invalid_number", text=text, reason="empty")
        raise InvalidNumber(text, "empty")

    cleaned = text.replace(GROUPING_SEPARATOR, "")
    multiplier = 1
    if cleaned.startswith("-"):
        multiplier = -1
        cleaned = cleaned[1:]

    match = _NUMBER_RE.fullmatch(cleaned)
    if match is None or not (match.group("whole") or match.group("fraction")):
        logger.debug("invalid_number", text=text, reason="malformed")
        raise InvalidNumber(text)

    exponent = match.group("exponent")
    if exponent:
        decimals += digits_to_int(exponent)

    whole = digits_to_int(match.group("whole") or "0")

    if decimals < 0:
        return (whole // pow10(-decimals)) * multiplier

    fraction = match.group("fraction") or "0"
    if len(fraction) <= decimals:
        fraction = fraction.ljust(decimals, "0")
    else:
        fraction = fraction[:decimals]

    return (whole * pow10(decimals) + digits_to_int(fraction or "0")) * multiplier


def render_decimal(value: int, decimals: int) -> str:
    """Render a scaled integer as exact decimal text.

    Trailing fractional zeros are stripped and the separator is omitted
    for whole values: ``render_decimal(123450, 3) == "123.45"``,
    ``render_decimal(-1, 5) == "-0.00001"``.
    """
    prefix = "-" if value < 0 else ""
    digits = int_to_digits(abs(value)).rjust(decimals, "0")

    split = len(digits) - decimals
    whole = digits[:split] or "0"
    fraction = digits[split:].rstrip("0")

    if fraction:
        return f"{prefix}{whole}{DECIMAL_SEPARATOR}{fraction}"
    return f"{prefix}{whole}"


def scaled_to_number(value: int, decimals: int = 0) -> float:
    """Narrow a scaled integer to the float nearest its exact text.

    Magnitudes beyond the float range become infinite.
    """
    return float(render_decimal(value, decimals))
