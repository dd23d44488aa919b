"""
Pydantic models for derived portfolio views.

Neither model is stored; both are computed from the asset collection
on every request by ``services.portfolio_service``.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class Portfolio(BaseModel):
    """Aggregated value of every asset and its split by asset type."""

    total_value: float = Field(0.0, alias="totalValue", examples=[400.0])
    distribution: Dict[str, float] = Field(
        default_factory=dict,
        examples=[{"Ações Nacionais": 50.0, "Fundos Imobiliários": 50.0}],
        description="Percentage of total value held in each asset type",
    )
    assets_quantity: int = Field(0, alias="assetsQuantity", examples=[2])

    model_config = {
        "populate_by_name": True,
    }


class InvestmentSuggestion(BaseModel):
    """How much of a cash amount to put into one asset."""

    asset_id: Optional[int] = Field(None, alias="assetID", examples=[1])
    ticker: str = Field("", examples=["XPML11"])
    suggested_amount: float = Field(0.0, alias="suggestedAmount", examples=[200.0])
    suggested_quantity: int = Field(0, alias="suggestedQuantity", examples=[4])

    model_config = {
        "populate_by_name": True,
    }
