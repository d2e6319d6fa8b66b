from typing import List, Optional

from sqlalchemy.orm import Session

from app import models, schemas
from app.models.user import ROLE_MENTOR
from app.utils.security import get_password_hash


def create_user(db: Session, user: schemas.UserRegister) -> models.User:
    data = user.model_dump(exclude={"password"})
    data["email"] = data["email"].strip().lower()
    db_user = models.User(
        **data,
        password_hash=get_password_hash(user.password),
        is_active=True,
    )
    db.add(db_user)
    db.flush()
    return db_user


def get_user(db: Session, user_id: int) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email.strip().lower()).first()


def get_user_by_username(db: Session, username: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.username == username).first()


def get_all_mentors(db: Session) -> List[models.User]:
    return (
        db.query(models.User)
        .filter(models.User.role == ROLE_MENTOR, models.User.is_active == True)  # noqa: E712
        .order_by(models.User.id.asc())
        .all()
    )


def get_all_users(db: Session) -> List[models.User]:
    return db.query(models.User).filter(models.User.is_active == True).order_by(models.User.id.asc()).all()  # noqa: E712


def update_profile(db: Session, user: models.User, profile_update: schemas.ProfileUpdate) -> models.User:
    update_data = profile_update.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(user, key, value)
    db.commit()
    db.refresh(user)
    return user
