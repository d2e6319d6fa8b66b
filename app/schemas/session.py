from datetime import date as date_type, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# HH:MM, 24-hour clock
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


def _clean_text(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip()
    return v or None


# ======================
# SESSION REQUEST MODELS
# ======================

class SessionCreate(BaseModel):
    """Mentee's request for a session; the mentee is always the caller."""
    mentor_id: int
    date: date_type
    time: str = Field(..., pattern=TIME_PATTERN)
    topic: str = Field(..., min_length=1, max_length=200)
    notes: Optional[str] = Field(None, max_length=2000)

    model_config = ConfigDict(extra="forbid")

    @field_validator("topic")
    @classmethod
    def validate_topic(cls, v):
        if not v.strip():
            raise ValueError("Topic cannot be empty or just whitespace")
        return v.strip()

    @field_validator("notes")
    @classmethod
    def clean_notes(cls, v):
        return _clean_text(v)


# ======================
# SESSION UPDATE MODELS
# ======================

class SessionReschedule(BaseModel):
    date: date_type
    time: str = Field(..., pattern=TIME_PATTERN)

    model_config = ConfigDict(extra="forbid")


class SessionUpdate(BaseModel):
    """Free-text edits only. Status changes go through the transition endpoints."""
    topic: Optional[str] = Field(None, min_length=1, max_length=200)
    notes: Optional[str] = Field(None, max_length=2000)

    model_config = ConfigDict(extra="forbid")

    @field_validator("topic")
    @classmethod
    def validate_topic(cls, v):
        if v is not None and not v.strip():
            raise ValueError("Topic cannot be empty or just whitespace")
        return v.strip() if v else v

    @field_validator("notes")
    @classmethod
    def clean_notes(cls, v):
        return _clean_text(v)


# ======================
# SESSION RESPONSE MODELS
# ======================

class SessionResponse(BaseModel):
    id: int
    mentor_id: int
    mentee_id: int
    date: date_type
    time: str
    topic: str
    notes: Optional[str] = None
    status: str
    meeting_link: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
