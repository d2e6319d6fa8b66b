from sqlalchemy import Column, Integer, String, Boolean, Text, TIMESTAMP, func
from sqlalchemy.orm import relationship
from app.database import Base

ROLE_MENTOR = "mentor"
ROLE_MENTEE = "mentee"
USER_ROLES = (ROLE_MENTOR, ROLE_MENTEE)


# ---------------- USER (AUTH + PROFILE) ----------------
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    role = Column(String(20), nullable=False, index=True)  # 'mentor' or 'mentee'
    title = Column(String(150))
    organization = Column(String(150))
    bio = Column(Text)
    specialties = Column(String(500))  # comma separated
    profile_image = Column(String(255))
    is_active = Column(Boolean, default=True)
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, onupdate=func.now())

    mentor_sessions = relationship("Session", foreign_keys="Session.mentor_id", back_populates="mentor")
    mentee_sessions = relationship("Session", foreign_keys="Session.mentee_id", back_populates="mentee")
    availability = relationship("Availability", back_populates="mentor", cascade="all, delete-orphan")
    skills = relationship("Skill", back_populates="mentee", cascade="all, delete-orphan")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_mentor(self) -> bool:
        return self.role == ROLE_MENTOR

    @property
    def is_mentee(self) -> bool:
        return self.role == ROLE_MENTEE
