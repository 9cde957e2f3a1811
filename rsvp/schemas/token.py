"""Pydantic schema for a single presentation token."""

from pydantic import BaseModel, ConfigDict, Field


class Token(BaseModel):
    """One unit of presented content with its pacing weight.

    ``delay_weight`` multiplies the base per-token duration and is never
    below 1.0, so no token is shown faster than the base rate.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    delay_weight: float = Field(1.0, ge=1.0)
