"""Integer and text primitives behind ScaledValue.

This package provides:
- decimal_string: exact decimal text <-> scaled integer codec
- float_bridge: float <-> scaled integer under a significant-digit budget
- integer: truncating division, power-of-ten and digit-text helpers
"""

from scaled_number.math.decimal_string import parse_decimal, render_decimal, scaled_to_number
from scaled_number.math.float_bridge import (
    count_leading_zeros,
    float_to_scaled,
    scaled_to_float,
)
from scaled_number.math.integer import (
    digits_to_int,
    div_trunc,
    floored_log10,
    int_to_digits,
    pow10,
    scale,
)

__all__ = [
    # Codec
    "parse_decimal",
    "render_decimal",
    "scaled_to_number",
    # Float bridge
    "float_to_scaled",
    "scaled_to_float",
    "count_leading_zeros",
    # Integer helpers
    "digits_to_int",
    "div_trunc",
    "floored_log10",
    "int_to_digits",
    "pow10",
    "scale",
]
