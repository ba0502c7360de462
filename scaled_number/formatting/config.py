"""Formatting configuration.

Locale conventions are an explicit, immutable object handed to the
formatter instead of process-wide state, so display code stays pure and
tests never need to patch a locale.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

ENV_PREFIX = "SCALED_NUMBER_"


@dataclass(frozen=True)
class FormatConfig:
    """Locale symbols used by the default formatter.

    Attributes:
        currency_symbol: Prefix for currency style (default: "$")
        percent_sign: Suffix for percent style (default: "%")
        group_separator: Thousands separator (default: ",")
        decimal_separator: Fraction separator (default: ".")
        group_size: Digits per group (default: 3)
    """

    currency_symbol: str = "$"
    percent_sign: str = "%"
    group_separator: str = ","
    decimal_separator: str = "."
    group_size: int = 3

    def __post_init__(self) -> None:
        if self.group_size <= 0:
            raise ValueError(f"group_size must be positive, got {self.group_size}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FormatConfig:
        """Build a config from SCALED_NUMBER_* environment variables.

        Recognized variables (all optional):
        - SCALED_NUMBER_CURRENCY_SYMBOL
        - SCALED_NUMBER_PERCENT_SIGN
        - SCALED_NUMBER_GROUP_SEPARATOR
        - SCALED_NUMBER_DECIMAL_SEPARATOR
        - SCALED_NUMBER_GROUP_SIZE
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            currency_symbol=env.get(f"{ENV_PREFIX}CURRENCY_SYMBOL", defaults.currency_symbol),
            percent_sign=env.get(f"{ENV_PREFIX}PERCENT_SIGN", defaults.percent_sign),
            group_separator=env.get(f"{ENV_PREFIX}GROUP_SEPARATOR", defaults.group_separator),
            decimal_separator=env.get(f"{ENV_PREFIX}DECIMAL_SEPARATOR", defaults.decimal_separator),
            group_size=int(env.get(f"{ENV_PREFIX}GROUP_SIZE", str(defaults.group_size))),
        )


@dataclass(frozen=True)
class FormatOptions:
    """Per-call options for the locale formatter.

    Defaults mirror a plain locale number: up to 3 fraction digits,
    trailing zeros dropped, grouping on.
    """

    min_fraction_digits: int = 0
    max_fraction_digits: int = 3
    use_grouping: bool = True

    def __post_init__(self) -> None:
        if self.min_fraction_digits < 0 or self.max_fraction_digits < 0:
            raise ValueError(
                f"Fraction digits must be non-negative, got "
                f"min={self.min_fraction_digits} max={self.max_fraction_digits}"
            )
        if self.min_fraction_digits > self.max_fraction_digits:
            raise ValueError(
                f"min_fraction_digits ({self.min_fraction_digits}) > "
                f"max_fraction_digits ({self.max_fraction_digits})"
            )


# Default configuration instance
DEFAULT_FORMAT_CONFIG = FormatConfig()
