"""
Pydantic models for the asset questionnaire.

Questions belong to an asset type and evaluate one ``criterion``
(e.g. dividend history).  Answers link a question to a concrete asset
with free text.
"""

from pydantic import BaseModel, Field


class Question(BaseModel):
    """Schema for a questionnaire entry."""

    id: int = Field(0, examples=[1])
    criterion: str = Field("", examples=["Dividendos"])
    question: str = Field("", examples=["O ativo paga dividendos há mais de 5 anos?"])
    asset_type: str = Field("", alias="assetType", examples=["Ações Nacionais"])

    model_config = {
        "populate_by_name": True,
    }


class AssetQuestionAnswer(BaseModel):
    """Schema for an answer to a question about a specific asset."""

    asset_id: int = Field(0, alias="assetID", examples=[3])
    question_id: int = Field(0, alias="questionID", examples=[1])
    answer: str = Field("", examples=["Sim"])

    model_config = {
        "populate_by_name": True,
    }
