"""
Service layer for assets.

Assets are identified by the store's ``asset_key``: the numeric ``id``
in the planner service and the ``ticker`` in the portfolio service.
Creating an asset whose key is already taken raises
``DuplicateRecordError``; replacing an unknown key raises
``RecordNotFoundError``.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from portfolio_api.app.core.store import Store
from portfolio_api.app.schemas.asset import Asset

logger = logging.getLogger(__name__)


class AssetService:
    """Service class for managing assets."""

    @classmethod
    async def list_assets(cls, store: Store, asset_type: Optional[str] = None) -> List[Asset]:
        """Return every asset, or only those whose ``type`` equals ``asset_type``.

        An empty ``asset_type`` is treated as no filter.
        """
        return store.assets.list_all(type=asset_type or None)

    @classmethod
    async def create_asset(cls, store: Store, data: Asset) -> Asset:
        asset = store.assets.append(data)
        logger.info("Created asset %s (%s)", asset.ticker, getattr(asset, store.asset_key))
        return asset

    @classmethod
    async def replace_asset(cls, store: Store, key: Any, data: Asset) -> Asset:
        """Replace the asset identified by ``key`` with ``data``."""
        asset = store.assets.replace(store.asset_key, key, data)
        logger.info("Replaced asset %s=%s", store.asset_key, key)
        return asset
