"""
Pydantic models for user contributions.

A contribution records cash a user put into their portfolio on a
given date.  The date is kept as the client sent it.
"""

from pydantic import BaseModel, Field


class Contribution(BaseModel):
    """Schema for a contribution (aporte)."""

    user_id: int = Field(0, alias="userID", examples=[1])
    amount: float = Field(0.0, examples=[1500.0])
    date: str = Field("", examples=["2024-05-10"])

    model_config = {
        "populate_by_name": True,
        "allow_inf_nan": False,
    }
