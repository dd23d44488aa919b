"""Portfolio endpoint: totals and distribution by asset type."""

from fastapi import APIRouter, Depends

from portfolio_api.app.core.store import Store, get_store
from portfolio_api.app.schemas.portfolio import Portfolio
from portfolio_api.app.services.portfolio_service import PortfolioService

router = APIRouter()


@router.get("", response_model=Portfolio)
async def get_portfolio(store: Store = Depends(get_store)) -> Portfolio:
    return await PortfolioService.get_portfolio(store)
