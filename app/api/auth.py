# app/api/auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app import models
from app.crud import user as user_crud
from app.database import get_db
from app.exceptions import DuplicateRequestError
from app.schemas.auth import LoginRequest, Token
from app.schemas.user import UserPublic, UserRegister
from app.utils.security import authenticate_user, create_access_token, get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Authentication"])


# ===== REGISTER ENDPOINT =====

@router.post("/register", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
def register(user_data: UserRegister, db: Session = Depends(get_db)):
    """Register a mentor or mentee account"""
    if user_crud.get_user_by_email(db, user_data.email):
        raise DuplicateRequestError("Email already registered")
    if user_crud.get_user_by_username(db, user_data.username):
        raise DuplicateRequestError("Username already taken")

    try:
        new_user = user_crud.create_user(db, user_data)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(new_user)
    logger.info("Registered %s %s", new_user.role, new_user.id)
    return new_user


# ===== LOGIN ENDPOINT =====

@router.post("/login", response_model=Token)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Verify credentials and return access token"""
    user = authenticate_user(db, credentials.email, credentials.password)
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    access_token = create_access_token(data={"sub": user.email, "role": user.role})
    return {
        "access_token": access_token,
        "token_type": "bearer",
        "role": user.role,
    }


@router.get("/user", response_model=UserPublic)
def read_current_user(current_user: models.User = Depends(get_current_user)):
    return current_user
