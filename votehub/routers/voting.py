"""Voting routes.

Endpoints implemented:
- GET  /api/questions                 (active questions with their choices)
- GET  /api/questions/{id}
- GET  /voting/{id}                   (HTML form for one question)
- POST /voting/{id}/answers           (record-answer action the form posts to)
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Form, Query, Request, status
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.encoders import jsonable_encoder
from sqlalchemy.orm import Session

from votehub import schemas
from votehub.database import get_db
from votehub.voting import (
    CHOICE_FIELD,
    AnswerAction,
    list_active_questions,
    load_question_view,
    record_answer,
    render_voting_form,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Voting"])


def get_answer_action() -> AnswerAction:
    """The action the voting form submits to; override to plug in another one."""
    return record_answer


@router.get("/api/questions", response_model=List[schemas.QuestionView])
def list_questions(db: Session = Depends(get_db)) -> List[schemas.QuestionView]:
    return list_active_questions(db)


@router.get("/api/questions/{question_id}", response_model=schemas.QuestionView)
def get_question(question_id: str, db: Session = Depends(get_db)) -> schemas.QuestionView:
    return load_question_view(db, question_id)


@router.get("/voting/{question_id}", response_class=HTMLResponse)
def voting_form(
    question_id: str,
    request: Request,
    shareholder_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
) -> HTMLResponse:
    question = load_question_view(db, question_id)
    action_url = request.url_for("submit_answer", question_id=question.id)
    if shareholder_id:
        action_url = action_url.include_query_params(shareholder_id=shareholder_id)
    return HTMLResponse(render_voting_form(question, str(action_url)))


@router.post("/voting/{question_id}/answers", name="submit_answer", status_code=status.HTTP_201_CREATED)
def submit_answer(
    question_id: str,
    choice: str = Form(..., alias=CHOICE_FIELD),
    shareholder_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    action: AnswerAction = Depends(get_answer_action),
):
    question = load_question_view(db, question_id)
    result = action(db, question, choice, shareholder_id)
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=jsonable_encoder(result))
