"""Exact fixed-point decimal arithmetic for token and currency amounts."""

from scaled_number.errors import InvalidNumber, PrecisionOverflow, ScaledNumberError
from scaled_number.formatting import (
    DefaultLocaleFormatter,
    FormatConfig,
    FormatOptions,
    LocaleFormatter,
    NumberStyle,
    format_crypto,
    format_currency,
    format_percent,
    number_to_compact_currency,
    number_to_compact_string,
)
from scaled_number.inputs import ExternalDecimal, NativeNumber, NumericInput, RawInteger, Text, tag_input
from scaled_number.math import float_to_scaled, parse_decimal, render_decimal, scale, scaled_to_float
from scaled_number.models import PlainScaledValue
from scaled_number.value import ScaledValue

__version__ = "0.1.0"
__all__ = [
    # Value type
    "ScaledValue",
    "PlainScaledValue",
    # Inputs
    "NumericInput",
    "RawInteger",
    "Text",
    "NativeNumber",
    "ExternalDecimal",
    "tag_input",
    # Codec and float bridge
    "parse_decimal",
    "render_decimal",
    "float_to_scaled",
    "scaled_to_float",
    "scale",
    # Formatting
    "LocaleFormatter",
    "DefaultLocaleFormatter",
    "FormatConfig",
    "FormatOptions",
    "NumberStyle",
    "format_crypto",
    "format_currency",
    "format_percent",
    "number_to_compact_string",
    "number_to_compact_currency",
    # Errors
    "ScaledNumberError",
    "InvalidNumber",
    "PrecisionOverflow",
    "__version__",
]
