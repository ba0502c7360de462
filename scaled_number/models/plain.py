"""Plain (serializable) form of a ScaledValue.

The JSON layout is stable across versions::

    {"value": "-123918", "decimals": 3}
"""

from pydantic import BaseModel, Field

from scaled_number.models.types import Decimals, SignedInteger


class PlainScaledValue(BaseModel):
    """A scaled integer and its decimals, both as plain JSON values."""

    value: SignedInteger = Field(description="Raw scaled integer as decimal string")
    decimals: Decimals

    model_config = {"frozen": True}
