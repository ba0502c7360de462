"""ScaledValue: immutable fixed-point decimal over an unbounded int.

A ScaledValue is the exact rational ``value / 10**decimals``. Arithmetic
works on the raw integers; the right-hand operand is first aligned to the
left-hand operand's decimals, and the result always carries the
left-hand decimals.

Precision is only lost where documented, and always by truncation toward
zero:
- aligning to fewer decimals (standardize_decimals)
- mul / div
- parsing text with more fractional digits than decimals
- importing floats (significant-digit budget)

Usage:
    from scaled_number import ScaledValue

    price = ScaledValue.from_unscaled("1,234.5", 6)
    fee = price.mul("0.003")
    fee.to_string()            # "3.7035"
    fee.to_currency_string()   # "$3.70"
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import structlog

from scaled_number.constants import DEFAULT_DECIMALS, DEFAULT_SIGNIFICANT_DIGITS
from scaled_number.errors import InvalidNumber
from scaled_number.formatting.display import (
    format_crypto,
    format_currency,
    format_percent,
    number_to_compact_currency,
)
from scaled_number.formatting.locale_formatter import LocaleFormatter
from scaled_number.inputs import (
    ExternalDecimal,
    NativeNumber,
    NumericInput,
    Text,
    resolve_input,
    tag_input,
)
from scaled_number.math.decimal_string import render_decimal, scaled_to_number
from scaled_number.math.float_bridge import float_to_scaled, scaled_to_float
from scaled_number.math.integer import digits_to_int, div_trunc, int_to_digits, pow10
from scaled_number.models.plain import PlainScaledValue

logger = structlog.get_logger()


class ScaledValue:
    """Fixed-point number stored as an int scaled by 10**decimals.

    Example: 1.5 at 18 decimals is stored as value=1_500_000_000_000_000_000.

    Attributes:
        value: The raw scaled integer (read-only)
        decimals: Number of implied fractional digits (read-only)
    """

    __slots__ = ("_value", "_decimals")
    _value: int
    _decimals: int

    def __init__(self, value: int = 0, decimals: int = DEFAULT_DECIMALS) -> None:
        """Create from a raw scaled integer.

        Raises:
            TypeError: If value or decimals is not an int
            ValueError: If decimals is negative
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"ScaledValue requires int, got {type(value).__name__}")
        if isinstance(decimals, bool) or not isinstance(decimals, int):
            raise TypeError(f"decimals must be int, got {type(decimals).__name__}")
        if decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {decimals}")
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_decimals", decimals)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> int:
        """The raw scaled integer."""
        return self._value

    @property
    def decimals(self) -> int:
        """Number of implied fractional digits."""
        return self._decimals

    # --- Construction ---

    @classmethod
    def zero(cls, decimals: int = DEFAULT_DECIMALS) -> ScaledValue:
        """Create the zero value."""
        return cls(0, decimals)

    @classmethod
    def from_integer(cls, raw: int, decimals: int = DEFAULT_DECIMALS) -> ScaledValue:
        """Create from a raw integer that is already scaled."""
        return cls(raw, decimals)

    @classmethod
    def from_input(cls, numeric: NumericInput, decimals: int = DEFAULT_DECIMALS) -> ScaledValue:
        """Create from a tagged numeric input (see scaled_number.inputs)."""
        return cls(resolve_input(numeric, decimals), decimals)

    @classmethod
    def from_unscaled(cls, value: int | float | str = 0, decimals: int = DEFAULT_DECIMALS) -> ScaledValue:
        """Create from unscaled text or a native number.

        Numbers are stringified first, so ``from_unscaled(0.1)`` is exactly
        ``from_unscaled("0.1")``. Empty text is zero.

        Raises:
            InvalidNumber: If the text is "." or not a decimal number
        """
        numeric = tag_input(value)
        if not isinstance(numeric, (Text, NativeNumber)):
            raise TypeError(f"from_unscaled requires str, int or float, got {type(value).__name__}")
        return cls.from_input(numeric, decimals)

    @classmethod
    def from_external_decimal(cls, value: Decimal, decimals: int = DEFAULT_DECIMALS) -> ScaledValue:
        """Create from an external exact decimal holding the raw integer.

        The decimal is read as integral text and kept as the raw value
        under ``decimals``: ``from_external_decimal(Decimal("100000000"), 8)``
        is 1.0. A fractional part is truncated toward zero.
        """
        return cls.from_input(ExternalDecimal(value), decimals)

    @classmethod
    def from_float(
        cls,
        value: float,
        decimals: int = DEFAULT_DECIMALS,
        significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
    ) -> ScaledValue:
        """Create from a float, keeping ``significant_digits`` significant digits.

        Raises:
            PrecisionOverflow: If the significant window does not fit in decimals
        """
        return cls(float_to_scaled(value, decimals, significant_digits), decimals)

    @classmethod
    def from_plain(cls, plain: PlainScaledValue | dict[str, Any] | None) -> ScaledValue:
        """Create from the plain form; None is zero at the default decimals.

        Raises:
            pydantic.ValidationError: If a dict does not match the plain layout
        """
        if plain is None:
            return cls()
        if not isinstance(plain, PlainScaledValue):
            plain = PlainScaledValue.model_validate(plain)
        return cls(digits_to_int(plain.value), plain.decimals)

    @classmethod
    def is_valid(cls, value: int | float | str, decimals: int = DEFAULT_DECIMALS) -> bool:
        """True if from_unscaled(value, decimals) would succeed."""
        try:
            cls.from_unscaled(value, decimals)
        except InvalidNumber:
            return False
        return True

    # --- Predicates ---

    def is_zero(self) -> bool:
        return self._value == 0

    def is_negative(self) -> bool:
        return self._value < 0

    # --- Alignment ---

    def standardize_decimals(self, other: ScaledValue) -> ScaledValue:
        """Express other at self's decimals.

        Upscaling is exact; downscaling truncates toward zero.
        """
        if self._decimals == other.decimals:
            return other
        if self._decimals > other.decimals:
            return ScaledValue(other.value * pow10(self._decimals - other.decimals), self._decimals)
        return ScaledValue(div_trunc(other.value, pow10(other.decimals - self._decimals)), self._decimals)

    def _resolve_operand(self, operand: ScaledValue | int | float | str) -> tuple[int, int]:
        """Return (raw value, decimals) for a mul/div operand.

        Plain numbers and text are parsed at self's decimals.
        """
        if isinstance(operand, ScaledValue):
            return operand.value, operand.decimals
        numeric = tag_input(operand)
        if not isinstance(numeric, (Text, NativeNumber)):
            raise TypeError(f"Unsupported operand: {type(operand).__name__}")
        return resolve_input(numeric, self._decimals), self._decimals

    # --- Arithmetic ---

    def add(self, other: ScaledValue) -> ScaledValue:
        other = self.standardize_decimals(other)
        return ScaledValue(self._value + other.value, self._decimals)

    def sub(self, other: ScaledValue) -> ScaledValue:
        other = self.standardize_decimals(other)
        return ScaledValue(self._value - other.value, self._decimals)

    def mul(self, operand: ScaledValue | int | float | str) -> ScaledValue:
        """Multiply, truncating toward zero at self's decimals."""
        scaled_value, scaled_decimals = self._resolve_operand(operand)
        return ScaledValue(div_trunc(self._value * scaled_value, pow10(scaled_decimals)), self._decimals)

    def div(self, operand: ScaledValue | int | float | str) -> ScaledValue:
        """Divide, truncating toward zero at self's decimals.

        A zero divisor returns the canonical zero ``ScaledValue()`` instead
        of raising.
        """
        scaled_value, scaled_decimals = self._resolve_operand(operand)
        if scaled_value == 0:
            logger.debug("division_by_zero_returns_zero", dividend=str(self))
            return ScaledValue()
        return ScaledValue(div_trunc(self._value * pow10(scaled_decimals), scaled_value), self._decimals)

    def abs(self) -> ScaledValue:
        return ScaledValue(abs(self._value), self._decimals)

    def neg(self) -> ScaledValue:
        return ScaledValue(-self._value, self._decimals)

    # --- Comparison ---

    def eq(self, other: ScaledValue) -> bool:
        """Strict equality: same raw value and same decimals.

        ``(10, 1)`` and ``(100, 2)`` are the same magnitude but not eq;
        standardize first to compare magnitudes.
        """
        return self._value == other.value and self._decimals == other.decimals

    def gt(self, other: ScaledValue) -> bool:
        return self._value > self.standardize_decimals(other).value

    def gte(self, other: ScaledValue) -> bool:
        return self._value >= self.standardize_decimals(other).value

    def lt(self, other: ScaledValue) -> bool:
        return self._value < self.standardize_decimals(other).value

    def lte(self, other: ScaledValue) -> bool:
        return self._value <= self.standardize_decimals(other).value

    def max(self, other: ScaledValue) -> ScaledValue:
        other = self.standardize_decimals(other)
        return self if self._value > other.value else other

    def min(self, other: ScaledValue) -> ScaledValue:
        other = self.standardize_decimals(other)
        return self if self._value < other.value else other

    # --- Export ---

    def to_plain(self) -> PlainScaledValue:
        return PlainScaledValue(value=int_to_digits(self._value), decimals=self._decimals)

    def to_string(self) -> str:
        """Exact decimal text ("-123.918")."""
        return render_decimal(self._value, self._decimals)

    def to_number(self) -> float:
        """Narrow the exact text to a float (may lose precision)."""
        return scaled_to_number(self._value, self._decimals)

    def to_float(self, significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS) -> float:
        """Float approximation bounded to ``significant_digits`` digits."""
        return scaled_to_float(self._value, self._decimals, significant_digits)

    # --- Display ---

    def to_crypto_string(self, formatter: LocaleFormatter | None = None, **overrides: int | bool) -> str:
        """Adaptive-precision text ("121,231.12", "0.0000000123")."""
        return format_crypto(self.to_number(), formatter, **overrides)

    def to_currency_string(self, price: float = 1.0, formatter: LocaleFormatter | None = None) -> str:
        """Currency text of value x price with 2 fraction digits."""
        return format_currency(self.to_number() * price, formatter)

    def to_compact_currency_string(self, price: float = 1.0, formatter: LocaleFormatter | None = None) -> str:
        """Compact currency text of value x price ("$1.2m")."""
        return number_to_compact_currency(self.to_number() * price, formatter)

    def to_percent_string(self, formatter: LocaleFormatter | None = None) -> str:
        """Percent text, treating the value as a ratio (0.25 -> "25%")."""
        return format_percent(self.to_number(), formatter)

    # --- Python protocol ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScaledValue):
            return NotImplemented
        return self.eq(other)

    def __hash__(self) -> int:
        return hash((self._value, self._decimals))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ScaledValue):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ScaledValue):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ScaledValue):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ScaledValue):
            return NotImplemented
        return self.gte(other)

    def __add__(self, other: ScaledValue) -> ScaledValue:
        if not isinstance(other, ScaledValue):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: ScaledValue) -> ScaledValue:
        if not isinstance(other, ScaledValue):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: ScaledValue | int | float | str) -> ScaledValue:
        return self.mul(other)

    def __truediv__(self, other: ScaledValue | int | float | str) -> ScaledValue:
        return self.div(other)

    def __neg__(self) -> ScaledValue:
        return self.neg()

    def __abs__(self) -> ScaledValue:
        return self.abs()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __float__(self) -> float:
        return self.to_number()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ScaledValue({int_to_digits(self._value)}, decimals={self._decimals})"
