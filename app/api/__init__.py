# app/api/__init__.py
# This file makes the api directory a Python package.

from . import activity
from . import auth
from . import availability
from . import feedback
from . import session
from . import skill
from . import users

__all__ = [
    "activity",
    "auth",
    "availability",
    "feedback",
    "session",
    "skill",
    "users",
]
