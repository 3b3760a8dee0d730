"""Pydantic schemas for the VoteHub API."""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


# ---------------------------- Questions ------------------------------
class QuestionView(BaseModel):
    """A question together with its choices, in display order."""

    id: str
    question: str
    is_active: bool = True
    choices_array: List[str] = Field(default_factory=list)


# ----------------------------- Answers -------------------------------
class AnswerResponse(BaseModel):
    id: str
    sh_id: str
    question_id: str
    choice_id: str
    answer_time: datetime

    model_config = {"from_attributes": True}


# ------------------------------ System -------------------------------
class SeedResponse(BaseModel):
    message: str


__all__ = [
    "QuestionView",
    "AnswerResponse",
    "SeedResponse",
]
