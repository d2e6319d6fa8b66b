from sqlalchemy import Column, Integer, String, ForeignKey, TIMESTAMP, CheckConstraint, func
from sqlalchemy.orm import relationship
from app.database import Base


# app/models/skill.py
class Skill(Base):
    """A learning goal tracked by a mentee."""
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    mentee_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False
    )
    name = Column(String(100), nullable=False)
    progress = Column(Integer, default=0, nullable=False)
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        CheckConstraint('progress >= 0 AND progress <= 100', name='check_skill_progress_range'),
    )

    mentee = relationship("User", back_populates="skills")
