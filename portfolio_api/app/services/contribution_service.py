"""
Service layer for user contributions.

Contributions are append‑only.  The latest contribution of a user is
the one appended last, independent of its ``date`` value.
"""

from __future__ import annotations

import logging

from portfolio_api.app.core.errors import RecordNotFoundError
from portfolio_api.app.core.store import Store
from portfolio_api.app.schemas.contribution import Contribution

logger = logging.getLogger(__name__)


class ContributionService:
    """Service class for managing contributions."""

    @classmethod
    async def create_contribution(cls, store: Store, data: Contribution) -> Contribution:
        contribution = store.contributions.append(data)
        logger.info("Recorded contribution of %s for user %s", contribution.amount, contribution.user_id)
        return contribution

    @classmethod
    async def get_latest_contribution(cls, store: Store, user_id: int) -> Contribution:
        """Return the most recently recorded contribution of ``user_id``.

        Raises ``RecordNotFoundError`` when the user has none.
        """
        contribution = store.contributions.find_latest("user_id", user_id)
        if contribution is None:
            raise RecordNotFoundError(f"No contribution found for user {user_id}")
        return contribution
