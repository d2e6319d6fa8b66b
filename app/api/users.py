from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app import models
from app.crud import user as user_crud
from app.database import get_db
from app.exceptions import NotFoundError
from app.schemas.user import ProfileUpdate, UserPublic
from app.utils.security import get_current_user

router = APIRouter(prefix="/api", tags=["Users"])


@router.get("/profile/{user_id}", response_model=UserPublic)
def get_profile(
    user_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    user = user_crud.get_user(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


@router.put("/profile", response_model=UserPublic)
def update_profile(
    profile_update: ProfileUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Edit the caller's own profile. Role and password are not editable here."""
    return user_crud.update_profile(db, current_user, profile_update)


@router.get("/mentors", response_model=List[UserPublic])
def list_mentors(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return user_crud.get_all_mentors(db)


@router.get("/users/profiles", response_model=List[UserPublic])
def list_profiles(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return user_crud.get_all_users(db)
