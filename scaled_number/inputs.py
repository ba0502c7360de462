"""Tagged numeric inputs accepted by ScaledValue constructors.

A raw Python value is classified once by :func:`tag_input` into one of
four variants, and :func:`resolve_input` turns a variant into a scaled
integer. The variants differ in how they are scaled:

- RawInteger: already scaled, used as-is
- Text / NativeNumber: unscaled, parsed at the target decimals
- ExternalDecimal: an exact ``decimal.Decimal`` read as integral text
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import TypeAlias

import structlog

from scaled_number.errors import InvalidNumber
from scaled_number.math.decimal_string import parse_decimal
from scaled_number.math.integer import int_to_digits

logger = structlog.get_logger()


@dataclass(frozen=True)
class RawInteger:
    """An integer already scaled by 10**decimals."""

    value: int


@dataclass(frozen=True)
class Text:
    """Unscaled decimal text such as "1,234.5" or "3.4e-5"."""

    value: str


@dataclass(frozen=True)
class NativeNumber:
    """An unscaled native int or float."""

    value: int | float


@dataclass(frozen=True)
class ExternalDecimal:
    """An exact decimal from outside the library (``decimal.Decimal``)."""

    value: Decimal


NumericInput: TypeAlias = RawInteger | Text | NativeNumber | ExternalDecimal


def tag_input(value: object) -> NumericInput:
    """Classify an unscaled Python value.

    ``int`` is tagged as NativeNumber (unscaled); wrap it in RawInteger
    explicitly when it is already scaled.

    Raises:
        TypeError: If value is not str, int, float or Decimal
    """
    if isinstance(value, (RawInteger, Text, NativeNumber, ExternalDecimal)):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a numeric input")
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, (int, float)):
        return NativeNumber(value)
    if isinstance(value, Decimal):
        return ExternalDecimal(value)
    raise TypeError(f"Unsupported numeric input: {type(value).__name__}")


def number_to_text(value: int | float) -> str:
    """Stringify a native number for parsing.

    Raises:
        InvalidNumber: If value is NaN or infinite
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidNumber(str(value), "not finite")
    if isinstance(value, int):
        return int_to_digits(value)
    return str(value)


def external_decimal_to_raw(value: Decimal) -> int:
    """Read an external decimal's positional text as an integer.

    Only integral decimals convert exactly; a fractional part is
    truncated toward zero (and logged).
    """
    if not value.is_finite():
        raise InvalidNumber(str(value), "not finite")
    raw = parse_decimal(format(value, "f"), 0)
    if value != raw:
        logger.warning("external_decimal_truncated", value=str(value), raw=int_to_digits(raw))
    return raw


def resolve_input(numeric: NumericInput, decimals: int) -> int:
    """Resolve a tagged input into an integer scaled by 10**decimals.

    Empty text resolves to zero.

    Raises:
        InvalidNumber: If text or number cannot be parsed
    """
    if isinstance(numeric, RawInteger):
        return numeric.value
    if isinstance(numeric, Text):
        return parse_decimal(numeric.value or "0", decimals)
    if isinstance(numeric, NativeNumber):
        return parse_decimal(number_to_text(numeric.value), decimals)
    if isinstance(numeric, ExternalDecimal):
        return external_decimal_to_raw(numeric.value)
    raise TypeError(f"Unsupported numeric input: {type(numeric).__name__}")
