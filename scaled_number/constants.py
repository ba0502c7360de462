"""Numeric constants for scaled-number arithmetic and display.

Centralizes the default precision and the display thresholds used by the
formatting helpers.
"""

# Default number of implied fractional digits (matches 18-decimal ERC-20 tokens)
DEFAULT_DECIMALS = 18

# Significant digits preserved when bridging to/from native floats
DEFAULT_SIGNIFICANT_DIGITS = 5

# Crypto display: values below this threshold are shown at full precision
CRYPTO_SMALL_VALUE_THRESHOLD = 0.0001
CRYPTO_SMALL_VALUE_DECIMALS = 18

# Crypto display: fraction digits shrink as the magnitude grows
# max_fraction_digits = max(CRYPTO_BASE_DIGITS - floor(|v| ** CRYPTO_DIGIT_EXPONENT), 0)
CRYPTO_BASE_DIGITS = 5
CRYPTO_DIGIT_EXPONENT = 1 / 10

# Compact display buckets, largest first (threshold, suffix)
COMPACT_BUCKETS: tuple[tuple[int, str], ...] = (
    (1_000_000_000_000, "t"),
    (1_000_000_000, "b"),
    (1_000_000, "m"),
    (1_000, "k"),
)

# Fraction digits for bucketed (compact) and unbucketed amounts
COMPACT_FRACTION_DIGITS = 1
CURRENCY_FRACTION_DIGITS = 2
PERCENT_MAX_FRACTION_DIGITS = 2
