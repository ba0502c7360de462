"""Display formatting for scaled values.

Usage:
    from scaled_number.formatting import DefaultLocaleFormatter, FormatConfig

    formatter = DefaultLocaleFormatter(FormatConfig(currency_symbol="€"))
    value.to_currency_string(formatter=formatter)
"""

from scaled_number.formatting.config import DEFAULT_FORMAT_CONFIG, FormatConfig, FormatOptions
from scaled_number.formatting.display import (
    crypto_fraction_digits,
    format_crypto,
    format_currency,
    format_percent,
    number_to_compact_currency,
    number_to_compact_string,
)
from scaled_number.formatting.locale_formatter import (
    DEFAULT_LOCALE_FORMATTER,
    DefaultLocaleFormatter,
    LocaleFormatter,
    NumberStyle,
)

__all__ = [
    # Config
    "FormatConfig",
    "FormatOptions",
    "DEFAULT_FORMAT_CONFIG",
    # Formatter
    "LocaleFormatter",
    "DefaultLocaleFormatter",
    "DEFAULT_LOCALE_FORMATTER",
    "NumberStyle",
    # Display helpers
    "crypto_fraction_digits",
    "format_crypto",
    "format_currency",
    "format_percent",
    "number_to_compact_string",
    "number_to_compact_currency",
]
