"""
Pydantic models for allocation goals.

A goal states the share of a user's portfolio they want to keep in a
given asset type.
"""

from pydantic import BaseModel, Field


class Goal(BaseModel):
    """Schema for a user goal."""

    id: int = Field(0, examples=[1])
    user_id: int = Field(0, alias="userID", examples=[1])
    asset_type: str = Field("", alias="assetType", examples=["Ações Nacionais"])
    percentage: float = Field(0.0, examples=[40.0])

    model_config = {
        "populate_by_name": True,
        "allow_inf_nan": False,
    }
