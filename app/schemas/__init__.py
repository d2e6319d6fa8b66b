# app/schemas/__init__.py

from .auth import Token, TokenData, LoginRequest
from .user import UserRegister, ProfileUpdate, UserPublic
from .session import SessionCreate, SessionReschedule, SessionUpdate, SessionResponse
from .availability import AvailabilityCreate, AvailabilityResponse
from .feedback import FeedbackCreate, FeedbackResponse
from .activity import ActivityResponse
from .skill import SkillCreate, SkillProgressUpdate, SkillResponse

__all__ = [
    "Token",
    "TokenData",
    "LoginRequest",
    "UserRegister",
    "ProfileUpdate",
    "UserPublic",
    "SessionCreate",
    "SessionReschedule",
    "SessionUpdate",
    "SessionResponse",
    "AvailabilityCreate",
    "AvailabilityResponse",
    "FeedbackCreate",
    "FeedbackResponse",
    "ActivityResponse",
    "SkillCreate",
    "SkillProgressUpdate",
    "SkillResponse",
]
