"""Service layer for user allocation goals."""

from __future__ import annotations

import logging
from typing import List

from portfolio_api.app.core.store import Store
from portfolio_api.app.schemas.goal import Goal

logger = logging.getLogger(__name__)


class GoalService:
    """Service class for managing goals."""

    @classmethod
    async def list_goals(cls, store: Store, user_id: int) -> List[Goal]:
        return store.goals.list_all(user_id=user_id)

    @classmethod
    async def create_goal(cls, store: Store, data: Goal) -> Goal:
        goal = store.goals.append(data)
        logger.info("Created goal %s for user %s", goal.id, goal.user_id)
        return goal
