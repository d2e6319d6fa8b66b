from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app import models, schemas
from app.config import settings
from app.database import get_db
from app.exceptions import PermissionDeniedError
from app.models.user import ROLE_MENTEE, ROLE_MENTOR


# ==========================
# AUTH CONFIG
# ==========================

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/login")

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto"
)


# ==========================
# PASSWORD UTILS
# ==========================

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Bcrypt max input length = 72 bytes
    Truncate safely to avoid crash
    """
    password_bytes = password.encode("utf-8")

    if len(password_bytes) > 72:
        password_bytes = password_bytes[:72]
        password = password_bytes.decode("utf-8", errors="ignore")

    return pwd_context.hash(password)


# ==========================
# JWT TOKEN
# ==========================

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()

    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )


# ==========================
# AUTH HELPERS
# ==========================

def authenticate_user(db: Session, email: str, password: str):
    user = db.query(models.User).filter(
        models.User.email == email.strip().lower()
    ).first()

    if not user:
        return False

    if not verify_password(password, user.password_hash):
        return False

    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
):
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM]
        )

        email: str = payload.get("sub")
        role: str = payload.get("role")

        if email is None:
            raise credentials_exception

        token_data = schemas.TokenData(email=email, role=role)

    except JWTError:
        raise credentials_exception

    user = db.query(models.User).filter(
        models.User.email == token_data.email
    ).first()

    if user is None or not user.is_active:
        raise credentials_exception

    return user


# ==========================
# ROLE GATES
# ==========================

def require_mentor(current_user: models.User = Depends(get_current_user)):
    if current_user.role != ROLE_MENTOR:
        raise PermissionDeniedError("Only mentors can access this resource")
    return current_user


def require_mentee(current_user: models.User = Depends(get_current_user)):
    if current_user.role != ROLE_MENTEE:
        raise PermissionDeniedError("Only mentees can access this resource")
    return current_user
