from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app import models
from app.config import settings
from app.database import get_db
from app.schemas.activity import ActivityResponse
from app.services import activity_service
from app.utils.security import get_current_user

router = APIRouter(prefix="/api/activities", tags=["Activities"])


@router.get("", response_model=List[ActivityResponse])
def get_my_activities(
    limit: Optional[int] = Query(None, ge=1, le=settings.ACTIVITY_FEED_MAX_LIMIT),
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Most recent activities for the caller, newest first."""
    return activity_service.list_for_user(
        db,
        user_id=current_user.id,
        limit=limit or settings.ACTIVITY_FEED_DEFAULT_LIMIT,
    )
