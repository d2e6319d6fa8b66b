# app/api/session.py
"""
Session lifecycle API.

Status changes go through one endpoint per transition; PUT only edits the
free-text fields.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app import models
from app.database import get_db
from app.schemas.session import SessionCreate, SessionReschedule, SessionResponse, SessionUpdate
from app.services import session_service
from app.services.meeting_links import MeetingLinkPool
from app.utils.security import get_current_user, require_mentee, require_mentor

router = APIRouter(prefix="/api", tags=["sessions"])


def get_meeting_links(request: Request) -> MeetingLinkPool:
    """Pool loaded at startup and kept on app.state."""
    return request.app.state.meeting_links


# ======================
# SESSION LISTING
# ======================
@router.get("/sessions", response_model=List[SessionResponse])
def get_sessions(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Sessions where the caller is the mentor (mentors) or the mentee (mentees)."""
    return session_service.list_sessions(db, current_user)


@router.get("/sessions/upcoming", response_model=List[SessionResponse])
def get_upcoming_sessions(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return session_service.list_upcoming(db, current_user)


@router.get("/session-requests", response_model=List[SessionResponse])
def get_session_requests(
    current_user: models.User = Depends(require_mentor),
    db: Session = Depends(get_db)
):
    return session_service.list_pending_requests(db, current_user)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
def get_session(
    session_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return session_service.get_session_for_participant(db, session_id, current_user)


# ======================
# CREATE SESSION REQUEST
# ======================
@router.post("/sessions", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def create_session_request(
    payload: SessionCreate,
    current_user: models.User = Depends(require_mentee),
    db: Session = Depends(get_db)
):
    return session_service.request_session(db, mentee=current_user, payload=payload)


# ======================
# TRANSITIONS
# ======================
@router.post("/sessions/{session_id}/approve", response_model=SessionResponse)
def approve_session(
    session_id: int,
    current_user: models.User = Depends(require_mentor),
    meeting_links: MeetingLinkPool = Depends(get_meeting_links),
    db: Session = Depends(get_db)
):
    return session_service.approve(db, session_id, current_user.id, meeting_links)


@router.post("/sessions/{session_id}/reject", response_model=SessionResponse)
def reject_session(
    session_id: int,
    current_user: models.User = Depends(require_mentor),
    db: Session = Depends(get_db)
):
    return session_service.reject(db, session_id, current_user.id)


@router.post("/sessions/{session_id}/complete", response_model=SessionResponse)
def complete_session(
    session_id: int,
    current_user: models.User = Depends(require_mentor),
    db: Session = Depends(get_db)
):
    return session_service.complete(db, session_id, current_user.id)


@router.post("/sessions/{session_id}/cancel", response_model=SessionResponse)
def cancel_session(
    session_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return session_service.cancel(db, session_id, current_user.id)


@router.post("/sessions/{session_id}/reschedule", response_model=SessionResponse)
def reschedule_session(
    session_id: int,
    payload: SessionReschedule,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return session_service.reschedule(db, session_id, current_user.id, payload)


@router.put("/sessions/{session_id}", response_model=SessionResponse)
def update_session(
    session_id: int,
    payload: SessionUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return session_service.update_session(db, session_id, current_user.id, payload)
