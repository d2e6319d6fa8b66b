# app/models/__init__.py
# Import models in dependency order
from .user import User
from .availability import Availability
from .session import Session, SessionStatus
from .feedback import Feedback
from .activity import Activity
from .skill import Skill

__all__ = ["User", "Availability", "Session", "SessionStatus", "Feedback", "Activity", "Skill"]
