"""
Feedback Pydantic Schemas
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FeedbackCreate(BaseModel):
    """Schema for leaving feedback; the giver is always the caller"""
    session_id: int = Field(..., description="Session identifier")
    to_id: int = Field(..., description="User the feedback is about")
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5 stars")
    comment: Optional[str] = Field(None, max_length=1000, description="Feedback comment (max 1000 chars)")

    @field_validator("comment")
    @classmethod
    def validate_comment(cls, v):
        """Blank comments are stored as no comment"""
        if v is None:
            return None
        return v.strip() or None


class FeedbackResponse(BaseModel):
    id: int
    session_id: int
    from_id: int
    to_id: int
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
