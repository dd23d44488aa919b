"""
Service layer for the asset questionnaire.

Questions are global; answers are attached to an asset and listed per
asset.  Neither checks that the referenced asset or question exists.
"""

from __future__ import annotations

import logging
from typing import List

from portfolio_api.app.core.store import Store
from portfolio_api.app.schemas.question import AssetQuestionAnswer, Question

logger = logging.getLogger(__name__)


class QuestionService:
    """Service class for questions and their per‑asset answers."""

    @classmethod
    async def list_questions(cls, store: Store) -> List[Question]:
        return store.questions.list_all()

    @classmethod
    async def create_question(cls, store: Store, data: Question) -> Question:
        question = store.questions.append(data)
        logger.info("Created question %s (%s)", question.id, question.criterion)
        return question

    @classmethod
    async def list_answers(cls, store: Store, asset_id: int) -> List[AssetQuestionAnswer]:
        return store.answers.list_all(asset_id=asset_id)

    @classmethod
    async def create_answer(cls, store: Store, data: AssetQuestionAnswer) -> AssetQuestionAnswer:
        answer = store.answers.append(data)
        logger.info("Recorded answer to question %s for asset %s", answer.question_id, answer.asset_id)
        return answer
