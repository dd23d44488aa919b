"""
Asset endpoints.

Both services list and create assets the same way but identify an
asset differently when replacing it: the planner service uses the
numeric id (``PUT /api/assets/{id}``), the portfolio service uses the
ticker (``PUT /api/assets/{ticker}``).  ``router`` serves the former,
``ticker_router`` the latter.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from portfolio_api.app.core.store import Store, get_store
from portfolio_api.app.schemas.asset import Asset
from portfolio_api.app.services.asset_service import AssetService

router = APIRouter()
ticker_router = APIRouter()


async def list_assets(
    asset_type: Optional[str] = Query(None, alias="type", description="Only return assets of this type"),
    store: Store = Depends(get_store),
) -> List[Asset]:
    """List assets in creation order, optionally filtered by type."""
    return await AssetService.list_assets(store, asset_type)


async def add_asset(data: Asset, store: Store = Depends(get_store)) -> Asset:
    """Create an asset.  Returns 409 if its key is already in use."""
    return await AssetService.create_asset(store, data)


for _router in (router, ticker_router):
    _router.add_api_route("", list_assets, methods=["GET"], response_model=List[Asset])
    _router.add_api_route(
        "", add_asset, methods=["POST"], response_model=Asset, status_code=status.HTTP_201_CREATED
    )


@router.put("/{asset_id}", response_model=Asset)
async def edit_asset(asset_id: int, data: Asset, store: Store = Depends(get_store)) -> Asset:
    """Replace the asset with id ``asset_id``; 404 if there is none."""
    return await AssetService.replace_asset(store, asset_id, data)


@ticker_router.put("/{ticker}", response_model=Asset)
async def edit_asset_by_ticker(ticker: str, data: Asset, store: Store = Depends(get_store)) -> Asset:
    """Replace the asset with ticker ``ticker``; 404 if there is none."""
    return await AssetService.replace_asset(store, ticker, data)
