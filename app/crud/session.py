# app/crud/session.py
"""
Session Store
Persistence and role-scoped queries for mentorship sessions.
"""

from datetime import date
from typing import Any, Iterable, List, Optional

from sqlalchemy.orm import Session

from app.models.session import Session as SessionModel, SessionStatus
from app.models.user import ROLE_MENTOR


def _role_column(role: str):
    return SessionModel.mentor_id if role == ROLE_MENTOR else SessionModel.mentee_id


# ======================
# CREATE / READ
# ======================

def create_session(
    db: Session,
    *,
    mentor_id: int,
    mentee_id: int,
    date: date,
    time: str,
    topic: str,
    notes: Optional[str] = None,
) -> SessionModel:
    """Insert a new pending session and flush so it has an id."""
    session = SessionModel(
        mentor_id=mentor_id,
        mentee_id=mentee_id,
        date=date,
        time=time,
        topic=topic,
        notes=notes,
        status=SessionStatus.PENDING.value,
        meeting_link=None,
    )
    db.add(session)
    db.flush()
    return session


def get_session(db: Session, session_id: int) -> Optional[SessionModel]:
    return db.query(SessionModel).filter(SessionModel.id == session_id).first()


def list_sessions_for_user(db: Session, user_id: int, role: str) -> List[SessionModel]:
    """
    Get sessions assigned to a user in their role, newest date first.

    A mentor only sees sessions where they are the mentor and a mentee only
    sessions where they are the mentee.
    """
    return (
        db.query(SessionModel)
        .filter(_role_column(role) == user_id)
        .order_by(SessionModel.date.desc(), SessionModel.time.desc())
        .all()
    )


def get_upcoming_sessions(
    db: Session,
    user_id: int,
    role: str,
    today: Optional[date] = None,
) -> List[SessionModel]:
    """
    Get sessions on or after today, soonest first.

    Mentors see approved and pending sessions (pending ones still need their
    decision); mentees only see approved sessions.

    Args:
        db: Database session
        user_id: User identifier
        role: "mentor" or "mentee"
        today: Reference date. Defaults to the server's local date
            (``date.today()``), not UTC; session dates are naive calendar days.

    Returns:
        List of Session objects
    """
    today = today or date.today()
    if role == ROLE_MENTOR:
        statuses = (SessionStatus.APPROVED.value, SessionStatus.PENDING.value)
    else:
        statuses = (SessionStatus.APPROVED.value,)

    return (
        db.query(SessionModel)
        .filter(
            _role_column(role) == user_id,
            SessionModel.status.in_(statuses),
            SessionModel.date >= today,
        )
        .order_by(SessionModel.date.asc(), SessionModel.time.asc())
        .all()
    )


def get_pending_requests(db: Session, mentor_id: int) -> List[SessionModel]:
    return (
        db.query(SessionModel)
        .filter(
            SessionModel.mentor_id == mentor_id,
            SessionModel.status == SessionStatus.PENDING.value,
        )
        .order_by(SessionModel.date.asc(), SessionModel.time.asc())
        .all()
    )


# ======================
# UPDATE
# ======================

def transition_status(
    db: Session,
    session_id: int,
    *,
    from_statuses: Iterable[str],
    to_status: str,
    **values: Any,
) -> bool:
    """
    Compare-and-swap the status column.

    The UPDATE only matches while the row is still in one of
    ``from_statuses``, so two racing transitions on the same session cannot
    both succeed. Extra column values (e.g. ``meeting_link``) are written in
    the same statement.

    Args:
        db: Database session
        session_id: Session identifier
        from_statuses: Statuses the row must currently be in
        to_status: Status to write
        **values: Additional columns to set

    Returns:
        True if the row was updated, False if the guard did not match
    """
    updates = {SessionModel.status: to_status}
    for column, value in values.items():
        updates[getattr(SessionModel, column)] = value

    updated = (
        db.query(SessionModel)
        .filter(
            SessionModel.id == session_id,
            SessionModel.status.in_(list(from_statuses)),
        )
        .update(updates, synchronize_session=False)
    )
    return updated == 1


def update_session_fields(db: Session, session: SessionModel, values: dict) -> SessionModel:
    for key, value in values.items():
        setattr(session, key, value)
    db.flush()
    return session
