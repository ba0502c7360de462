"""Shared type definitions for serialized scaled values."""

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from scaled_number.math.integer import int_to_digits

_SIGNED_INTEGER_RE = re.compile(r"-?[0-9]+")


def validate_signed_integer(value: Any) -> str:
    """Validate that a value is a signed decimal integer string.

    Args:
        value: Value to validate (string or int)

    Returns:
        The integer as decimal text (leading zeros are kept)

    Raises:
        ValueError: If value is not an int or a ``-?[0-9]+`` string
    """
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool):
        raise ValueError(f"SignedInteger must be string or int, got {type(value).__name__}")

    if isinstance(value, int):
        return int_to_digits(value)

    if not isinstance(value, str):
        raise ValueError(f"SignedInteger must be string or int, got {type(value).__name__}")

    if not _SIGNED_INTEGER_RE.fullmatch(value):
        raise ValueError(f"SignedInteger must be a decimal integer string: '{value}'")

    return value


# Arbitrary-precision signed integer as decimal string (validated)
SignedInteger = Annotated[
    str,
    BeforeValidator(validate_signed_integer),
    Field(description="Signed integer as decimal string"),
]

# Number of implied fractional digits
Decimals = Annotated[int, Field(ge=0, description="Number of implied fractional digits")]
