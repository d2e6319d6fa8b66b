# app/services/feedback_service.py
"""
Feedback Service Layer
Business logic for post-session feedback.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud import feedback as feedback_crud
from app.crud import session as session_crud
from app.crud import user as user_crud
from app.exceptions import NotFoundError
from app.models.feedback import Feedback
from app.services import activity_service

logger = logging.getLogger(__name__)


def submit_feedback(
    db: Session,
    *,
    session_id: int,
    from_id: int,
    to_id: int,
    rating: int,
    comment: Optional[str] = None
) -> Feedback:
    """
    Append feedback for a session and log a ``feedback_given`` activity.

    The session and the receiver must exist. The session's status is not
    checked and a second submission by the same giver for the same session
    is stored as another row; clients hide the form once
    ``has_given_feedback`` is true.

    Args:
        db: Database session
        session_id: Session identifier
        from_id: Giver user ID (the caller)
        to_id: Receiver user ID
        rating: Rating value (1-5), already range-checked by the schema
        comment: Optional text comment

    Returns:
        Created Feedback object

    Raises:
        NotFoundError: If the session or receiver does not exist
    """
    if session_crud.get_session(db, session_id) is None:
        raise NotFoundError("Session not found")
    if user_crud.get_user(db, to_id) is None:
        raise NotFoundError("User not found")

    try:
        feedback = feedback_crud.create_feedback(
            db,
            session_id=session_id,
            from_id=from_id,
            to_id=to_id,
            rating=rating,
            comment=comment,
        )
        activity_service.record(
            db,
            user_id=from_id,
            type=activity_service.FEEDBACK_GIVEN,
            content="You left feedback for a session",
            related_user_id=to_id,
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(feedback)
    logger.info("Feedback %s for session %s from user %s", feedback.id, session_id, from_id)
    return feedback


def list_received(db: Session, user_id: int) -> List[Feedback]:
    return feedback_crud.get_feedback_for_user(db, user_id)


def list_given(db: Session, user_id: int) -> List[Feedback]:
    return feedback_crud.get_feedback_given_by_user(db, user_id)


def has_given_feedback(db: Session, session_id: int, user_id: int) -> bool:
    return feedback_crud.get_feedback_by_session_and_user(db, session_id, user_id) is not None
