"""Voting: question lookup, form rendering and the default record-answer action.

The form only knows about the action through its URL; whatever is mounted
behind `POST /voting/{question_id}/answers` receives the selected choice and
owns validation and persistence.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, List, Optional

from fastapi import status
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from votehub import models, schemas
from votehub.errors import api_error

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Every form renders a single radio group
CHOICE_FIELD = "radio-0"

AnswerAction = Callable[[Session, schemas.QuestionView, str, Optional[str]], Any]


def get_question_or_404(db: Session, question_id: str) -> models.QuestionModel:
    question = db.query(models.QuestionModel).filter(models.QuestionModel.id == question_id).first()
    if not question:
        raise api_error(status.HTTP_404_NOT_FOUND, "question_not_found", "Question not found")
    return question


def to_question_view(db: Session, question: models.QuestionModel) -> schemas.QuestionView:
    """Build the view of `question` with its choices sorted by choice id.

    `choices` has no position column, so the id is the display order; datasets
    that care about order (the demo data does) give choices ids that sort
    the way they should be shown.
    """
    choices = (
        db.query(models.ChoiceModel)
        .filter(models.ChoiceModel.question_id == question.id)
        .order_by(models.ChoiceModel.id)
        .all()
    )
    return schemas.QuestionView(
        id=question.id,
        question=question.question,
        is_active=bool(question.is_active),
        choices_array=[c.choice for c in choices],
    )


def load_question_view(db: Session, question_id: str) -> schemas.QuestionView:
    return to_question_view(db, get_question_or_404(db, question_id))


def list_active_questions(db: Session) -> List[schemas.QuestionView]:
    questions = (
        db.query(models.QuestionModel)
        .filter(models.QuestionModel.is_active == 1)
        .order_by(models.QuestionModel.id)
        .all()
    )
    return [to_question_view(db, q) for q in questions]


def render_voting_form(question: schemas.QuestionView, action_url: str) -> str:
    """Render `question` as a single-select form posting to `action_url`.

    One radio input per choice, all in the same group, plus a submit button.
    """
    template = templates.get_template("voting_form.html")
    return template.render(question=question, action_url=action_url, group_name=CHOICE_FIELD)


def record_answer(
    db: Session,
    question: schemas.QuestionView,
    choice: str,
    shareholder_id: Optional[str] = None,
) -> schemas.AnswerResponse:
    """Default record-answer action: store the shareholder's pick for `question`."""
    if not shareholder_id:
        raise api_error(status.HTTP_400_BAD_REQUEST, "shareholder_required", "shareholder_id is required to record an answer")

    shareholder = db.query(models.ShareholderModel).filter(models.ShareholderModel.id == shareholder_id).first()
    if not shareholder:
        raise api_error(status.HTTP_404_NOT_FOUND, "shareholder_not_found", "Shareholder not found")

    selected = (
        db.query(models.ChoiceModel)
        .filter(models.ChoiceModel.question_id == question.id, models.ChoiceModel.choice == choice)
        .first()
    )
    if not selected:
        raise api_error(status.HTTP_404_NOT_FOUND, "choice_not_found", "Choice not found for this question")

    answer = models.AnswerModel(
        sh_id=shareholder.id,
        question_id=question.id,
        choice_id=selected.id,
        answer_time=datetime.now(timezone.utc),
    )
    db.add(answer)
    db.commit()
    db.refresh(answer)
    logger.info("Recorded answer %s: shareholder=%s question=%s", answer.id, shareholder.id, question.id)
    return schemas.AnswerResponse.model_validate(answer)


__all__ = [
    "CHOICE_FIELD",
    "AnswerAction",
    "get_question_or_404",
    "to_question_view",
    "load_question_view",
    "list_active_questions",
    "render_voting_form",
    "record_answer",
]
