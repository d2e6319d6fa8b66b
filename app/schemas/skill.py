from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SkillCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    progress: int = Field(0, ge=0, le=100)


class SkillProgressUpdate(BaseModel):
    progress: int = Field(..., ge=0, le=100)


class SkillResponse(BaseModel):
    id: int
    mentee_id: int
    name: str
    progress: int
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
