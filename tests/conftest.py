"""Pytest bootstrap for project imports and shared fixtures."""

from pathlib import Path
import sys

# Ensure project root is on sys.path so `import app` works
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models
from app.database import Base
from app.services.meeting_links import MeetingLinkPool

MEETING_LINKS = (
    "https://meet.google.com/aaa-bbbb-ccc",
    "https://meet.google.com/ddd-eeee-fff",
    "https://meet.google.com/ggg-hhhh-iii",
)


def _build_engine():
    # StaticPool keeps one connection so every session sees the same in-memory DB
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def engine():
    engine = _build_engine()
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def db_session(engine):
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def make_user(db_session):
    counter = {"n": 0}

    def _make_user(role: str, first_name: str = "Test", last_name: str = "User") -> models.User:
        counter["n"] += 1
        n = counter["n"]
        user = models.User(
            username=f"{role}{n}",
            email=f"{role}{n}@example.com",
            password_hash="hash",
            first_name=first_name,
            last_name=last_name,
            role=role,
            is_active=True,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def mentor(make_user):
    return make_user("mentor", "Rita", "Mentor")


@pytest.fixture
def mentee(make_user):
    return make_user("mentee", "Max", "Mentee")


@pytest.fixture
def link_pool():
    return MeetingLinkPool(MEETING_LINKS)
