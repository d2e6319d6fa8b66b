from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ActivityResponse(BaseModel):
    id: int
    user_id: int
    type: str
    content: str
    related_user_id: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
