# app/models/feedback.py
from sqlalchemy import Column, Integer, Text, ForeignKey, TIMESTAMP, func, CheckConstraint
from sqlalchemy.orm import relationship
from app.database import Base


class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, index=True)
    # (session_id, from_id) is intentionally not unique at the storage level.
    session_id = Column(Integer, ForeignKey("sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    from_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    to_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text)
    created_at = Column(TIMESTAMP, server_default=func.now())

    __table_args__ = (
        CheckConstraint('rating >= 1 AND rating <= 5', name='check_feedback_rating_range'),
    )

    session = relationship("Session", back_populates="feedback")
    giver = relationship("User", foreign_keys=[from_id])
    receiver = relationship("User", foreign_keys=[to_id])
