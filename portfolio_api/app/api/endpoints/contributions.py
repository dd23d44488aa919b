"""
Contribution endpoints.

Users record contributions (cash put into the portfolio) and can fetch
the most recent one.  "Most recent" means last recorded; the ``date``
field is not compared.
"""

from fastapi import APIRouter, Depends, status

from portfolio_api.app.core.store import Store, get_store
from portfolio_api.app.schemas.contribution import Contribution
from portfolio_api.app.services.contribution_service import ContributionService

router = APIRouter()


@router.get("/latest/{user_id}", response_model=Contribution)
async def get_latest_contribution(user_id: int, store: Store = Depends(get_store)) -> Contribution:
    """Return the user's latest contribution, or 404 if they have none."""
    return await ContributionService.get_latest_contribution(store, user_id)


@router.post("", response_model=Contribution, status_code=status.HTTP_201_CREATED)
async def add_contribution(data: Contribution, store: Store = Depends(get_store)) -> Contribution:
    return await ContributionService.create_contribution(store, data)
