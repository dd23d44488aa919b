"""Goal endpoints: list a user's goals and create new ones."""

from typing import List

from fastapi import APIRouter, Depends, status

from portfolio_api.app.core.store import Store, get_store
from portfolio_api.app.schemas.goal import Goal
from portfolio_api.app.services.goal_service import GoalService

router = APIRouter()


@router.get("/{user_id}", response_model=List[Goal])
async def get_goals(user_id: int, store: Store = Depends(get_store)) -> List[Goal]:
    """Return the goals of ``user_id`` in creation order (possibly empty)."""
    return await GoalService.list_goals(store, user_id)


@router.post("", response_model=Goal, status_code=status.HTTP_201_CREATED)
async def add_goal(data: Goal, store: Store = Depends(get_store)) -> Goal:
    return await GoalService.create_goal(store, data)
