from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


# ======================
# REGISTRATION / PROFILE INPUT
# ======================

class UserRegister(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    # Bcrypt has a 72-byte limit.
    password: str = Field(..., min_length=6, max_length=72)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    role: Literal["mentor", "mentee"]
    title: Optional[str] = Field(None, max_length=150)
    organization: Optional[str] = Field(None, max_length=150)
    bio: Optional[str] = None
    specialties: Optional[str] = Field(None, max_length=500)


class ProfileUpdate(BaseModel):
    """Editable profile fields. Role and password are dropped if sent."""
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    title: Optional[str] = Field(None, max_length=150)
    organization: Optional[str] = Field(None, max_length=150)
    bio: Optional[str] = None
    specialties: Optional[str] = Field(None, max_length=500)
    profile_image: Optional[str] = Field(None, max_length=255)

    model_config = ConfigDict(extra="ignore")


# ======================
# USER OUTPUT
# ======================

class UserPublic(BaseModel):
    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    title: Optional[str] = None
    organization: Optional[str] = None
    bio: Optional[str] = None
    specialties: Optional[str] = None
    profile_image: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
