"""Pytest configuration and fixtures."""

import pytest

from scaled_number.formatting import DefaultLocaleFormatter, FormatConfig


@pytest.fixture
def formatter() -> DefaultLocaleFormatter:
    """Default en-US style formatter."""
    return DefaultLocaleFormatter()


@pytest.fixture
def euro_formatter() -> DefaultLocaleFormatter:
    """Formatter with continental separators and a euro prefix."""
    return DefaultLocaleFormatter(
        FormatConfig(currency_symbol="€", group_separator=".", decimal_separator=",")
    )
