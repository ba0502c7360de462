"""Display helpers: crypto, currency, compact currency and percent text.

Each helper takes a native number (already narrowed from a ScaledValue)
and delegates the actual rendering to a LocaleFormatter.
"""

from __future__ import annotations

import dataclasses
import math

from scaled_number.constants import (
    COMPACT_BUCKETS,
    COMPACT_FRACTION_DIGITS,
    CRYPTO_BASE_DIGITS,
    CRYPTO_DIGIT_EXPONENT,
    CRYPTO_SMALL_VALUE_DECIMALS,
    CRYPTO_SMALL_VALUE_THRESHOLD,
    CURRENCY_FRACTION_DIGITS,
    PERCENT_MAX_FRACTION_DIGITS,
)
from scaled_number.formatting.config import FormatOptions
from scaled_number.formatting.locale_formatter import (
    DEFAULT_LOCALE_FORMATTER,
    LocaleFormatter,
    NumberStyle,
)

_CURRENCY_OPTIONS = FormatOptions(
    min_fraction_digits=CURRENCY_FRACTION_DIGITS,
    max_fraction_digits=CURRENCY_FRACTION_DIGITS,
)
_COMPACT_OPTIONS = FormatOptions(min_fraction_digits=0, max_fraction_digits=COMPACT_FRACTION_DIGITS)
_PERCENT_OPTIONS = FormatOptions(max_fraction_digits=PERCENT_MAX_FRACTION_DIGITS)


def crypto_fraction_digits(number: float) -> int:
    """Adaptive fraction digits for crypto amounts.

    Larger magnitudes get fewer digits; anything below 0.0001 (including
    zero) is shown at full 18-digit precision. NaN and infinities get none.
    """
    magnitude = abs(number)
    if not math.isfinite(magnitude):
        return 0
    if magnitude < CRYPTO_SMALL_VALUE_THRESHOLD:
        return CRYPTO_SMALL_VALUE_DECIMALS
    return max(CRYPTO_BASE_DIGITS - math.floor(magnitude**CRYPTO_DIGIT_EXPONENT), 0)


def format_crypto(
    number: float,
    formatter: LocaleFormatter | None = None,
    **overrides: int | bool,
) -> str:
    """Format a token amount with adaptive precision.

    Keyword overrides (min_fraction_digits, max_fraction_digits,
    use_grouping) replace the computed options.

    Examples:
        format_crypto(121231.120102) == "121,231.12"
        format_crypto(0.0000000123) == "0.0000000123"
        format_crypto(123102031023, use_grouping=False) == "123102031023"
    """
    formatter = formatter or DEFAULT_LOCALE_FORMATTER
    options = FormatOptions(max_fraction_digits=crypto_fraction_digits(number))
    if overrides:
        options = dataclasses.replace(options, **overrides)
    return formatter.format(number, NumberStyle.PLAIN, options)


def format_currency(number: float, formatter: LocaleFormatter | None = None) -> str:
    """Format as currency with exactly 2 fraction digits ("$1,234.50")."""
    formatter = formatter or DEFAULT_LOCALE_FORMATTER
    return formatter.format(number, NumberStyle.CURRENCY, _CURRENCY_OPTIONS)


def format_percent(number: float, formatter: LocaleFormatter | None = None) -> str:
    """Format a ratio as a percentage with up to 2 fraction digits (0.1234 -> "12.34%")."""
    formatter = formatter or DEFAULT_LOCALE_FORMATTER
    return formatter.format(number, NumberStyle.PERCENT, _PERCENT_OPTIONS)


def _compact(number: float, style: NumberStyle, formatter: LocaleFormatter) -> str:
    magnitude = abs(number)
    for threshold, suffix in COMPACT_BUCKETS:
        if magnitude >= threshold:
            return formatter.format(number / threshold, style, _COMPACT_OPTIONS) + suffix
    return formatter.format(number, style, _CURRENCY_OPTIONS)


def number_to_compact_string(number: float, formatter: LocaleFormatter | None = None) -> str:
    """Format with a k/m/b/t magnitude suffix ("1.2m", "456k", "700.12")."""
    return _compact(number, NumberStyle.PLAIN, formatter or DEFAULT_LOCALE_FORMATTER)


def number_to_compact_currency(number: float, formatter: LocaleFormatter | None = None) -> str:
    """Compact form with a currency prefix ("$1.2m", "$990t", "$0.21")."""
    return _compact(number, NumberStyle.CURRENCY, formatter or DEFAULT_LOCALE_FORMATTER)
