"""Locale formatter contract and its default implementation.

ScaledValue never groups digits or places symbols itself; it narrows to a
float and calls a LocaleFormatter with a style and FormatOptions.
"""

from __future__ import annotations

import decimal
import math
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Protocol, runtime_checkable

from scaled_number.formatting.config import DEFAULT_FORMAT_CONFIG, FormatConfig, FormatOptions

# Minimum working precision; enough for uint256-sized values
DECIMAL_HIGH_PREC = 78


class NumberStyle(str, Enum):
    """Rendering style requested from a LocaleFormatter."""

    PLAIN = "plain"
    CURRENCY = "currency"
    PERCENT = "percent"


@runtime_checkable
class LocaleFormatter(Protocol):
    """Renders a native number as locale-correct text."""

    def format(self, number: float, style: NumberStyle, options: FormatOptions) -> str:
        """Render number in the given style.

        Args:
            number: Value to render (percent style multiplies by 100)
            style: PLAIN, CURRENCY or PERCENT
            options: Fraction digit bounds and grouping flag

        Returns:
            Display text
        """
        ...


class DefaultLocaleFormatter:
    """en-US style formatter driven by a FormatConfig.

    Rounds half away from zero on the shortest decimal representation of
    the float (what a user sees when printing it), then trims trailing
    zeros down to ``min_fraction_digits``.
    """

    def __init__(self, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> None:
        self.config = config

    def format(self, number: float, style: NumberStyle, options: FormatOptions) -> str:
        if isinstance(number, float) and not math.isfinite(number):
            return self._format_non_finite(number)

        amount = Decimal(number) if isinstance(number, int) else Decimal(repr(float(number)))
        if style == NumberStyle.PERCENT:
            amount *= 100

        negative, whole, fraction = self._round(amount, options)
        text = self._group(whole) if options.use_grouping else whole
        if fraction:
            text = f"{text}{self.config.decimal_separator}{fraction}"

        sign = "-" if negative else ""
        if style == NumberStyle.CURRENCY:
            return f"{sign}{self.config.currency_symbol}{text}"
        if style == NumberStyle.PERCENT:
            return f"{sign}{text}{self.config.percent_sign}"
        return f"{sign}{text}"

    def _round(self, amount: Decimal, options: FormatOptions) -> tuple[bool, str, str]:
        """Quantize to max fraction digits and split into sign/whole/fraction."""
        quantum = Decimal(1).scaleb(-options.max_fraction_digits)
        prec = max(DECIMAL_HIGH_PREC, amount.adjusted() + options.max_fraction_digits + 2)
        with decimal.localcontext(decimal.Context(prec=prec)):
            rounded = amount.quantize(quantum, rounding=ROUND_HALF_UP)

        text = format(abs(rounded), "f")
        whole, _, fraction = text.partition(".")
        fraction = fraction.rstrip("0").ljust(options.min_fraction_digits, "0")
        # A value that rounds to zero is shown unsigned
        return rounded < 0, whole, fraction

    def _group(self, whole: str) -> str:
        size = self.config.group_size
        groups = []
        while len(whole) > size:
            groups.insert(0, whole[-size:])
            whole = whole[:-size]
        groups.insert(0, whole)
        return self.config.group_separator.join(groups)

    def _format_non_finite(self, number: float) -> str:
        if math.isnan(number):
            return "NaN"
        return "-∞" if number < 0 else "∞"


# Default formatter instance
DEFAULT_LOCALE_FORMATTER = DefaultLocaleFormatter()
