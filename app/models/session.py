# app/models/session.py
import enum

from sqlalchemy import Column, Integer, String, Text, Date, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import relationship
from app.database import Base


class SessionStatus(str, enum.Enum):
    """Session lifecycle states."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    COMPLETED = "completed"
    CANCELED = "canceled"


TERMINAL_STATUSES = (
    SessionStatus.REJECTED.value,
    SessionStatus.COMPLETED.value,
    SessionStatus.CANCELED.value,
)


class Session(Base):
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, index=True)
    mentor_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    mentee_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    time = Column(String(5), nullable=False)  # HH:MM, 24h
    topic = Column(String(200), nullable=False)
    notes = Column(Text)
    status = Column(String(20), nullable=False, default=SessionStatus.PENDING.value, index=True)
    meeting_link = Column(String(255))
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, onupdate=func.now())

    # Relationships
    mentor = relationship("User", foreign_keys=[mentor_id], back_populates="mentor_sessions")
    mentee = relationship("User", foreign_keys=[mentee_id], back_populates="mentee_sessions")
    feedback = relationship("Feedback", back_populates="session", cascade="all, delete-orphan")

    def is_participant(self, user_id: int) -> bool:
        return user_id in (self.mentor_id, self.mentee_id)

    def counterpart_of(self, user_id: int) -> int:
        """Get the other party in a session"""
        return self.mentor_id if self.mentee_id == user_id else self.mentee_id
