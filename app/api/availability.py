import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app import models
from app.crud import availability as availability_crud
from app.crud import user as user_crud
from app.database import get_db
from app.exceptions import NotFoundError, PermissionDeniedError, ValidationError
from app.models.user import ROLE_MENTOR
from app.schemas.availability import AvailabilityCreate, AvailabilityResponse
from app.utils.security import get_current_user, require_mentor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Availability"])


@router.get("/mentors/{mentor_id}/availability", response_model=List[AvailabilityResponse])
def get_mentor_availability(
    mentor_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    mentor = user_crud.get_user(db, mentor_id)
    if not mentor or mentor.role != ROLE_MENTOR:
        raise NotFoundError("Mentor not found")
    return availability_crud.get_availability_for_mentor(db, mentor_id)


@router.post("/availability", response_model=AvailabilityResponse, status_code=status.HTTP_201_CREATED)
def create_availability(
    payload: AvailabilityCreate,
    current_user: models.User = Depends(require_mentor),
    db: Session = Depends(get_db)
):
    """Add a weekly slot. Slots on the same day may not overlap."""
    clash = availability_crud.find_overlapping(
        db, current_user.id, payload.day, payload.start_time, payload.end_time
    )
    if clash:
        raise ValidationError(
            "Validation error",
            errors=[{
                "loc": ["body", "start_time"],
                "msg": f"Overlaps existing slot {clash.start_time}-{clash.end_time} on {clash.day}",
                "type": "value_error.overlap",
            }],
        )

    slot = availability_crud.create_availability(
        db, current_user.id, payload.day, payload.start_time, payload.end_time
    )
    logger.info("Mentor %s added availability %s", current_user.id, slot.id)
    return slot


@router.delete("/availability/{availability_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_availability(
    availability_id: int,
    current_user: models.User = Depends(require_mentor),
    db: Session = Depends(get_db)
):
    slot = availability_crud.get_availability(db, availability_id)
    if not slot:
        raise NotFoundError("Availability not found")
    if slot.mentor_id != current_user.id:
        raise PermissionDeniedError("You can only remove your own availability")

    availability_crud.delete_availability(db, slot)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
