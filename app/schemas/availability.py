from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.schemas.session import TIME_PATTERN

Weekday = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


class AvailabilityCreate(BaseModel):
    day: Weekday
    start_time: str = Field(..., pattern=TIME_PATTERN)
    end_time: str = Field(..., pattern=TIME_PATTERN)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def check_range(self):
        # zero-padded HH:MM strings compare chronologically
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class AvailabilityResponse(BaseModel):
    id: int
    mentor_id: int
    day: str
    start_time: str
    end_time: str

    model_config = ConfigDict(from_attributes=True)
