# app/services/session_service.py
"""
Session Lifecycle Service

States:
    pending  -> approved | rejected | canceled
    approved -> completed | canceled | pending (reschedule)
    rejected, completed, canceled are terminal.

Every mutating call checks the caller against the session's participants
before touching the row, and every status change is a compare-and-swap on
the status column so concurrent transitions cannot both win.
"""

from __future__ import annotations

import logging
import random
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.orm import Session

from app.config import settings
from app.crud import availability as availability_crud
from app.crud import session as session_crud
from app.crud import user as user_crud
from app.exceptions import (
    InvalidStatusTransitionError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from app.models.session import Session as SessionModel, SessionStatus
from app.models.user import ROLE_MENTEE, ROLE_MENTOR, User
from app.schemas.session import SessionCreate, SessionReschedule, SessionUpdate
from app.services import activity_service
from app.services.meeting_links import MeetingLinkPool

logger = logging.getLogger(__name__)

PENDING = SessionStatus.PENDING.value
APPROVED = SessionStatus.APPROVED.value
REJECTED = SessionStatus.REJECTED.value
COMPLETED = SessionStatus.COMPLETED.value
CANCELED = SessionStatus.CANCELED.value


# ======================
# HELPERS
# ======================

def _get_or_404(db: Session, session_id: int) -> SessionModel:
    session = session_crud.get_session(db, session_id)
    if not session:
        raise NotFoundError("Session not found")
    return session


def _load_for_participant(db: Session, session_id: int, user_id: int) -> SessionModel:
    session = _get_or_404(db, session_id)
    if not session.is_participant(user_id):
        logger.warning("User %s is not a participant of session %s", user_id, session_id)
        raise PermissionDeniedError("You don't have permission to access this session")
    return session


def _load_for_mentor(db: Session, session_id: int, mentor_id: int, action: str) -> SessionModel:
    session = _get_or_404(db, session_id)
    if session.mentor_id != mentor_id:
        logger.warning(
            "User %s tried to %s session %s owned by mentor %s",
            mentor_id, action, session_id, session.mentor_id,
        )
        raise PermissionDeniedError(f"You can only {action} your own session requests")
    return session


def _ensure_status(session: SessionModel, allowed: Iterable[str], action: str) -> None:
    if session.status not in allowed:
        raise InvalidStatusTransitionError(
            f"Cannot {action} a session that is {session.status}"
        )


def _swap_status(
    db: Session,
    session: SessionModel,
    *,
    from_statuses: Iterable[str],
    to_status: str,
    action: str,
    **values: Any,
) -> None:
    from_statuses = tuple(from_statuses)
    if not session_crud.transition_status(
        db,
        session.id,
        from_statuses=from_statuses,
        to_status=to_status,
        **values,
    ):
        # Lost the race: reload to report what the row actually is now.
        db.expire(session)
        logger.warning(
            "Stale %s on session %s (now %s, expected one of %s)",
            action, session.id, session.status, from_statuses,
        )
        raise InvalidStatusTransitionError(
            f"Cannot {action} a session that is {session.status}"
        )


def _name(user: Optional[User]) -> str:
    return user.full_name if user else "A user"


def _check_availability(db: Session, mentor_id: int, session_date: date, time: str) -> None:
    weekday = session_date.strftime("%A")
    if availability_crud.find_covering_slot(db, mentor_id, weekday, time) is None:
        raise ValidationError(
            "Validation error",
            errors=[{
                "loc": ["body", "time"],
                "msg": f"Mentor is not available on {weekday} at {time}",
                "type": "value_error.availability",
            }],
        )


def _schema_errors(exc: SchemaValidationError) -> List[Dict[str, Any]]:
    return [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]


# ======================
# QUERIES
# ======================

def get_session_for_participant(db: Session, session_id: int, user: User) -> SessionModel:
    return _load_for_participant(db, session_id, user.id)


def list_sessions(db: Session, user: User) -> List[SessionModel]:
    return session_crud.list_sessions_for_user(db, user.id, user.role)


def list_upcoming(db: Session, user: User, today: Optional[date] = None) -> List[SessionModel]:
    return session_crud.get_upcoming_sessions(db, user.id, user.role, today=today)


def list_pending_requests(db: Session, mentor: User) -> List[SessionModel]:
    return session_crud.get_pending_requests(db, mentor.id)


# ======================
# REQUEST
# ======================

def request_session(
    db: Session,
    *,
    mentee: User,
    payload: SessionCreate,
    enforce_availability: Optional[bool] = None,
) -> SessionModel:
    """
    Create a pending session from a mentee to a mentor.

    Writes two activities: ``session_created`` for the mentee and
    ``session_requested`` for the mentor.

    Raises:
        PermissionDeniedError: caller is not a mentee
        NotFoundError: mentor_id does not name a mentor
        ValidationError: availability enforcement is on and the slot is not offered
    """
    if mentee.role != ROLE_MENTEE:
        raise PermissionDeniedError("Only mentees can request sessions")

    mentor = user_crud.get_user(db, payload.mentor_id)
    if not mentor or mentor.role != ROLE_MENTOR or not mentor.is_active:
        raise NotFoundError("Mentor not found")

    if enforce_availability is None:
        enforce_availability = settings.ENFORCE_AVAILABILITY
    if enforce_availability:
        _check_availability(db, mentor.id, payload.date, payload.time)

    try:
        session = session_crud.create_session(
            db,
            mentor_id=mentor.id,
            mentee_id=mentee.id,
            date=payload.date,
            time=payload.time,
            topic=payload.topic,
            notes=payload.notes,
        )
        activity_service.record_pair(
            db,
            actor_id=mentee.id,
            actor_type=activity_service.SESSION_CREATED,
            actor_content=f"You requested a session with {mentor.full_name}",
            counterpart_id=mentor.id,
            counterpart_type=activity_service.SESSION_REQUESTED,
            counterpart_content=f"{mentee.full_name} requested a session with you",
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(session)
    logger.info(
        "Session %s requested by mentee %s with mentor %s for %s %s",
        session.id, mentee.id, mentor.id, session.date, session.time,
    )
    return session


# ======================
# MENTOR DECISIONS
# ======================

def approve(
    db: Session,
    session_id: int,
    acting_mentor_id: int,
    meeting_links: MeetingLinkPool,
    rng: Optional[random.Random] = None,
) -> SessionModel:
    """Approve a pending request and attach a meeting link from the pool."""
    session = _load_for_mentor(db, session_id, acting_mentor_id, "approve")
    _ensure_status(session, (PENDING,), "approve")

    meeting_link = meeting_links.pick(rng)
    try:
        _swap_status(
            db,
            session,
            from_statuses=(PENDING,),
            to_status=APPROVED,
            action="approve",
            meeting_link=meeting_link,
        )
        activity_service.record_pair(
            db,
            actor_id=session.mentor_id,
            actor_type=activity_service.SESSION_APPROVED,
            actor_content=f"You approved a session with {_name(session.mentee)}",
            counterpart_id=session.mentee_id,
            counterpart_type=activity_service.SESSION_CONFIRMED,
            counterpart_content=f"{_name(session.mentor)} approved your session request",
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(session)
    logger.info("Session %s approved by mentor %s", session.id, acting_mentor_id)
    return session


def reject(db: Session, session_id: int, acting_mentor_id: int) -> SessionModel:
    session = _load_for_mentor(db, session_id, acting_mentor_id, "reject")
    _ensure_status(session, (PENDING,), "reject")

    try:
        _swap_status(
            db,
            session,
            from_statuses=(PENDING,),
            to_status=REJECTED,
            action="reject",
        )
        activity_service.record_pair(
            db,
            actor_id=session.mentor_id,
            actor_type=activity_service.SESSION_REJECTED,
            actor_content=f"You declined a session with {_name(session.mentee)}",
            counterpart_id=session.mentee_id,
            counterpart_type=activity_service.SESSION_DECLINED,
            counterpart_content=f"{_name(session.mentor)} declined your session request",
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(session)
    logger.info("Session %s rejected by mentor %s", session.id, acting_mentor_id)
    return session


def complete(db: Session, session_id: int, acting_mentor_id: int) -> SessionModel:
    """Mark an approved session as held. Participants may then leave feedback."""
    session = _load_for_mentor(db, session_id, acting_mentor_id, "complete")
    _ensure_status(session, (APPROVED,), "complete")

    try:
        _swap_status(
            db,
            session,
            from_statuses=(APPROVED,),
            to_status=COMPLETED,
            action="complete",
        )
        activity_service.record_pair(
            db,
            actor_id=session.mentor_id,
            actor_type=activity_service.SESSION_COMPLETED,
            actor_content=f"You completed a session with {_name(session.mentee)}",
            counterpart_id=session.mentee_id,
            counterpart_type=activity_service.SESSION_COMPLETED,
            counterpart_content=(
                f"{_name(session.mentor)} marked your session as completed. "
                "You can now leave feedback."
            ),
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(session)
    logger.info("Session %s completed by mentor %s", session.id, acting_mentor_id)
    return session


# ======================
# PARTICIPANT ACTIONS
# ======================

def cancel(db: Session, session_id: int, acting_user_id: int) -> SessionModel:
    session = _load_for_participant(db, session_id, acting_user_id)
    _ensure_status(session, (PENDING, APPROVED), "cancel")

    counterpart_id = session.counterpart_of(acting_user_id)
    actor = session.mentor if acting_user_id == session.mentor_id else session.mentee
    counterpart = session.mentee if acting_user_id == session.mentor_id else session.mentor

    try:
        _swap_status(
            db,
            session,
            from_statuses=(PENDING, APPROVED),
            to_status=CANCELED,
            action="cancel",
        )
        activity_service.record_pair(
            db,
            actor_id=acting_user_id,
            actor_type=activity_service.SESSION_CANCELED,
            actor_content=f"You canceled your session with {_name(counterpart)}",
            counterpart_id=counterpart_id,
            counterpart_type=activity_service.SESSION_CANCELED_BY_PARTNER,
            counterpart_content=f"{_name(actor)} canceled your session on {session.date.isoformat()}",
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(session)
    logger.info("Session %s canceled by user %s", session.id, acting_user_id)
    return session


def reschedule(
    db: Session,
    session_id: int,
    acting_user_id: int,
    payload: SessionReschedule,
    enforce_availability: Optional[bool] = None,
) -> SessionModel:
    """
    Move a pending or approved session to a new date/time.

    An approved session goes back to pending and loses its meeting link, so
    the mentor has to approve the new slot.
    """
    session = _load_for_participant(db, session_id, acting_user_id)
    _ensure_status(session, (PENDING, APPROVED), "reschedule")

    if enforce_availability is None:
        enforce_availability = settings.ENFORCE_AVAILABILITY
    if enforce_availability:
        _check_availability(db, session.mentor_id, payload.date, payload.time)

    counterpart_id = session.counterpart_of(acting_user_id)
    actor = session.mentor if acting_user_id == session.mentor_id else session.mentee
    counterpart = session.mentee if acting_user_id == session.mentor_id else session.mentor
    when = f"{payload.date.isoformat()} at {payload.time}"

    try:
        _swap_status(
            db,
            session,
            from_statuses=(PENDING, APPROVED),
            to_status=PENDING,
            action="reschedule",
            date=payload.date,
            time=payload.time,
            meeting_link=None,
        )
        activity_service.record_pair(
            db,
            actor_id=acting_user_id,
            actor_type=activity_service.SESSION_RESCHEDULED,
            actor_content=f"You moved your session with {_name(counterpart)} to {when}",
            counterpart_id=counterpart_id,
            counterpart_type=activity_service.SESSION_RESCHEDULE_REQUESTED,
            counterpart_content=f"{_name(actor)} moved your session to {when}",
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(session)
    logger.info("Session %s rescheduled by user %s to %s", session.id, acting_user_id, when)
    return session


def update_session(
    db: Session,
    session_id: int,
    acting_user_id: int,
    patch: Union[SessionUpdate, Dict[str, Any]],
) -> SessionModel:
    """
    Edit a session's topic and notes.

    The accepted shape is closed: status, participants and the meeting link
    cannot be patched here.
    """
    if not isinstance(patch, SessionUpdate):
        try:
            patch = SessionUpdate.model_validate(patch)
        except SchemaValidationError as exc:
            raise ValidationError("Validation error", errors=_schema_errors(exc)) from exc

    session = _load_for_participant(db, session_id, acting_user_id)

    values = patch.model_dump(exclude_unset=True)
    if values.get("topic", "") is None:
        values.pop("topic")
    if not values:
        return session

    try:
        session_crud.update_session_fields(db, session, values)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(session)
    logger.info("Session %s fields %s updated by user %s", session.id, sorted(values), acting_user_id)
    return session
