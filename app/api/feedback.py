# app/api/feedback.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app import models
from app.database import get_db
from app.schemas.feedback import FeedbackCreate, FeedbackResponse
from app.services import feedback_service
from app.utils.security import get_current_user

router = APIRouter(prefix="/api/feedback", tags=["Feedback"])


@router.post("", response_model=FeedbackResponse, status_code=status.HTTP_201_CREATED)
def submit_feedback(
    payload: FeedbackCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return feedback_service.submit_feedback(
        db,
        session_id=payload.session_id,
        from_id=current_user.id,
        to_id=payload.to_id,
        rating=payload.rating,
        comment=payload.comment,
    )


@router.get("", response_model=List[FeedbackResponse])
def get_feedback_received(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return feedback_service.list_received(db, current_user.id)


@router.get("/given", response_model=List[FeedbackResponse])
def get_feedback_given(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return feedback_service.list_given(db, current_user.id)
