"""
Pydantic models for asset data.

An asset is a single financial holding: its category (``type``), the
ticker symbol, the current unit price, the target allocation
``percentage`` (0–100), an analyst ``score`` and the ``quantity``
held.  Missing fields decode to zero values, so clients may send
partial objects.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Asset(BaseModel):
    """Schema for creating, replacing and reading an asset."""

    id: Optional[int] = Field(None, examples=[1])
    type: str = Field("", examples=["Fundos Imobiliários"], description="Asset category label")
    ticker: str = Field("", examples=["XPML11"])
    price: float = Field(0.0, examples=[100.95], description="Current unit price")
    percentage: float = Field(0.0, examples=[3.97], description="Target allocation share, 0 to 100")
    score: int = Field(0, examples=[6])
    quantity: int = Field(0, examples=[50], description="Units held")

    model_config = {
        "allow_inf_nan": False,
    }

    @property
    def total_value(self) -> float:
        return self.price * self.quantity
