"""Pydantic models for serialized scaled values."""

from scaled_number.models.plain import PlainScaledValue
from scaled_number.models.types import Decimals, SignedInteger, validate_signed_integer

__all__ = [
    "PlainScaledValue",
    "SignedInteger",
    "Decimals",
    "validate_signed_integer",
]
