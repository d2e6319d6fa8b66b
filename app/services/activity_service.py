from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.activity import Activity

logger = logging.getLogger(__name__)


# Activity types written by the session lifecycle and feedback flows.
SESSION_CREATED = "session_created"
SESSION_REQUESTED = "session_requested"
SESSION_APPROVED = "session_approved"
SESSION_CONFIRMED = "session_confirmed"
SESSION_REJECTED = "session_rejected"
SESSION_DECLINED = "session_declined"
SESSION_CANCELED = "session_canceled"
SESSION_CANCELED_BY_PARTNER = "session_canceled_by_partner"
SESSION_COMPLETED = "session_completed"
SESSION_RESCHEDULED = "session_rescheduled"
SESSION_RESCHEDULE_REQUESTED = "session_reschedule_requested"
FEEDBACK_GIVEN = "feedback_given"


def record(
    db: Session,
    *,
    user_id: int,
    type: str,
    content: str,
    related_user_id: Optional[int] = None,
) -> Activity:
    """Append one activity. No dedup and no retention cap."""
    activity = Activity(
        user_id=user_id,
        type=type,
        content=content,
        related_user_id=related_user_id,
    )
    db.add(activity)
    db.flush()
    return activity


def record_pair(
    db: Session,
    *,
    actor_id: int,
    actor_type: str,
    actor_content: str,
    counterpart_id: int,
    counterpart_type: str,
    counterpart_content: str,
) -> List[Activity]:
    """Record a lifecycle event once per participant, each pointing at the other."""
    return [
        record(
            db,
            user_id=actor_id,
            type=actor_type,
            content=actor_content,
            related_user_id=counterpart_id,
        ),
        record(
            db,
            user_id=counterpart_id,
            type=counterpart_type,
            content=counterpart_content,
            related_user_id=actor_id,
        ),
    ]


def list_for_user(db: Session, *, user_id: int, limit: int = 10) -> List[Activity]:
    return (
        db.query(Activity)
        .filter(Activity.user_id == user_id)
        .order_by(Activity.created_at.desc(), Activity.id.desc())
        .limit(limit)
        .all()
    )
