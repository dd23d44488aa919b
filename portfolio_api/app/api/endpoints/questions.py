"""
Questionnaire endpoints.

Two routers live here: ``router`` for the global list of questions and
``answers_router`` for answers about individual assets.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from portfolio_api.app.core.store import Store, get_store
from portfolio_api.app.schemas.question import AssetQuestionAnswer, Question
from portfolio_api.app.services.question_service import QuestionService

router = APIRouter()
answers_router = APIRouter()


@router.get("", response_model=List[Question])
async def get_questions(store: Store = Depends(get_store)) -> List[Question]:
    return await QuestionService.list_questions(store)


@router.post("", response_model=Question, status_code=status.HTTP_201_CREATED)
async def add_question(data: Question, store: Store = Depends(get_store)) -> Question:
    return await QuestionService.create_question(store, data)


@answers_router.get("/{asset_id}", response_model=List[AssetQuestionAnswer])
async def get_asset_question_answers(asset_id: int, store: Store = Depends(get_store)) -> List[AssetQuestionAnswer]:
    """Return every answer recorded for ``asset_id``."""
    return await QuestionService.list_answers(store, asset_id)


@answers_router.post("", response_model=AssetQuestionAnswer, status_code=status.HTTP_201_CREATED)
async def add_asset_question_answer(
    data: AssetQuestionAnswer, store: Store = Depends(get_store)
) -> AssetQuestionAnswer:
    return await QuestionService.create_answer(store, data)
