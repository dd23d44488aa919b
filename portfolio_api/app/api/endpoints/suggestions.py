"""
Investment suggestion endpoint.

``GET /api/suggestions?amount=N`` splits ``N`` across every asset
according to its target percentage.  The amount is required and must
be a finite number; negative values are accepted.
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from portfolio_api.app.core.store import Store, get_store
from portfolio_api.app.schemas.portfolio import InvestmentSuggestion
from portfolio_api.app.services.portfolio_service import PortfolioService

router = APIRouter()


@router.get("", response_model=List[InvestmentSuggestion])
async def get_investment_suggestions(
    amount: float = Query(..., allow_inf_nan=False, description="Cash amount to invest"),
    store: Store = Depends(get_store),
) -> List[InvestmentSuggestion]:
    return await PortfolioService.get_suggestions(store, amount)
