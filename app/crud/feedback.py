# app/crud/feedback.py
"""
Feedback CRUD Operations
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.feedback import Feedback


def create_feedback(
    db: Session,
    session_id: int,
    from_id: int,
    to_id: int,
    rating: int,
    comment: Optional[str] = None
) -> Feedback:
    """
    Append a feedback row.

    No uniqueness check on (session_id, from_id) is made here; callers that
    want one-per-giver use get_feedback_by_session_and_user first.

    Args:
        db: Database session
        session_id: Session identifier
        from_id: Giver user ID
        to_id: Receiver user ID
        rating: Rating value (1-5)
        comment: Optional text comment

    Returns:
        Created Feedback object
    """
    feedback = Feedback(
        session_id=session_id,
        from_id=from_id,
        to_id=to_id,
        rating=rating,
        comment=comment,
    )
    db.add(feedback)
    db.flush()
    return feedback


def get_feedback_for_user(db: Session, user_id: int) -> List[Feedback]:
    """Feedback received by a user, newest first."""
    return (
        db.query(Feedback)
        .filter(Feedback.to_id == user_id)
        .order_by(Feedback.created_at.desc(), Feedback.id.desc())
        .all()
    )


def get_feedback_given_by_user(db: Session, user_id: int) -> List[Feedback]:
    """Feedback written by a user, newest first."""
    return (
        db.query(Feedback)
        .filter(Feedback.from_id == user_id)
        .order_by(Feedback.created_at.desc(), Feedback.id.desc())
        .all()
    )


def get_feedback_by_session_and_user(db: Session, session_id: int, user_id: int) -> Optional[Feedback]:
    return (
        db.query(Feedback)
        .filter(Feedback.session_id == session_id, Feedback.from_id == user_id)
        .first()
    )
