from __future__ import annotations

from datetime import date, timedelta

import pytest
from sqlalchemy.orm import sessionmaker

# Skip suite when FastAPI's test client dependency is not present.
pytest.importorskip("httpx")

from fastapi.testclient import TestClient

from app.api.session import get_meeting_links
from app.database import get_db
from app.main import app
from app.utils.security import create_access_token


@pytest.fixture
def client(engine, link_pool):
    TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_meeting_links] = lambda: link_pool
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _auth(user) -> dict:
    token = create_access_token(data={"sub": user.email, "role": user.role})
    return {"Authorization": f"Bearer {token}"}


def _next_week() -> str:
    return (date.today() + timedelta(days=7)).isoformat()


def _create_session(client, mentee, mentor, **overrides):
    body = {
        "mentor_id": mentor.id,
        "date": _next_week(),
        "time": "10:00",
        "topic": "Resume review",
    }
    body.update(overrides)
    return client.post("/api/sessions", json=body, headers=_auth(mentee))


# ======================
# AUTH
# ======================

def test_register_login_and_current_user(client):
    register = client.post(
        "/api/register",
        json={
            "username": "newmentor",
            "email": "NewMentor@Example.com",
            "password": "secret123",
            "first_name": "New",
            "last_name": "Mentor",
            "role": "mentor",
        },
    )
    assert register.status_code == 201, register.text
    assert "password_hash" not in register.json()
    assert register.json()["email"] == "newmentor@example.com"

    duplicate = client.post(
        "/api/register",
        json={
            "username": "other",
            "email": "newmentor@example.com",
            "password": "secret123",
            "first_name": "Other",
            "last_name": "Mentor",
            "role": "mentor",
        },
    )
    assert duplicate.status_code == 400

    login = client.post("/api/login", json={"email": "newmentor@example.com", "password": "secret123"})
    assert login.status_code == 200, login.text
    token = login.json()["access_token"]

    me = client.get("/api/user", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["role"] == "mentor"

    bad = client.post("/api/login", json={"email": "newmentor@example.com", "password": "wrong"})
    assert bad.status_code == 401


def test_unauthenticated_requests_are_rejected(client):
    assert client.get("/api/sessions").status_code == 401
    assert client.get("/api/activities").status_code == 401


# ======================
# SESSIONS
# ======================

def test_malformed_session_request_is_400_with_field_errors(client, mentor, mentee):
    response = _create_session(client, mentee, mentor, time="25:00", topic="")

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation error"
    fields = {tuple(err["loc"])[-1] for err in body["errors"]}
    assert {"time", "topic"} <= fields


def test_session_request_rejects_injected_fields(client, mentor, mentee):
    response = _create_session(client, mentee, mentor, status="approved")
    assert response.status_code == 400


def test_only_mentees_can_request_sessions(client, make_user, mentor):
    other_mentor = make_user("mentor")
    response = _create_session(client, mentor, other_mentor)
    assert response.status_code == 403


def test_lifecycle_over_http(client, mentor, mentee, link_pool):
    created = _create_session(client, mentee, mentor)
    assert created.status_code == 201, created.text
    session_id = created.json()["id"]
    assert created.json()["status"] == "pending"

    requests = client.get("/api/session-requests", headers=_auth(mentor))
    assert [s["id"] for s in requests.json()] == [session_id]
    assert client.get("/api/sessions/upcoming", headers=_auth(mentee)).json() == []

    approved = client.post(f"/api/sessions/{session_id}/approve", headers=_auth(mentor))
    assert approved.status_code == 200, approved.text
    assert approved.json()["status"] == "approved"
    assert approved.json()["meeting_link"] in link_pool

    upcoming = client.get("/api/sessions/upcoming", headers=_auth(mentee))
    assert [s["id"] for s in upcoming.json()] == [session_id]

    again = client.post(f"/api/sessions/{session_id}/approve", headers=_auth(mentor))
    assert again.status_code == 409
    rejected_late = client.post(f"/api/sessions/{session_id}/reject", headers=_auth(mentor))
    assert rejected_late.status_code == 409

    completed = client.post(f"/api/sessions/{session_id}/complete", headers=_auth(mentor))
    assert completed.status_code == 200
    assert completed.json()["status"] == "completed"

    feed = client.get("/api/activities", params={"limit": 1}, headers=_auth(mentee))
    assert feed.status_code == 200
    assert [a["type"] for a in feed.json()] == ["session_completed"]

    full_feed = client.get("/api/activities", headers=_auth(mentee))
    assert [a["type"] for a in full_feed.json()] == [
        "session_completed",
        "session_confirmed",
        "session_created",
    ]


def test_decisions_by_wrong_user(client, make_user, mentor, mentee):
    other_mentor = make_user("mentor")
    session_id = _create_session(client, mentee, mentor).json()["id"]

    assert client.post(f"/api/sessions/{session_id}/approve", headers=_auth(other_mentor)).status_code == 403
    assert client.post(f"/api/sessions/{session_id}/reject", headers=_auth(other_mentor)).status_code == 403
    # role gate: mentees never reach the approve handler
    assert client.post(f"/api/sessions/{session_id}/approve", headers=_auth(mentee)).status_code == 403
    assert client.post("/api/sessions/99999/approve", headers=_auth(mentor)).status_code == 404
    assert client.get(f"/api/sessions/{session_id}", headers=_auth(other_mentor)).status_code == 403


def test_put_session_only_edits_free_text(client, mentor, mentee):
    session_id = _create_session(client, mentee, mentor).json()["id"]

    patched = client.put(f"/api/sessions/{session_id}", json={"notes": "Bring CV"}, headers=_auth(mentee))
    assert patched.status_code == 200
    assert patched.json()["notes"] == "Bring CV"

    status_patch = client.put(f"/api/sessions/{session_id}", json={"status": "approved"}, headers=_auth(mentee))
    assert status_patch.status_code == 400
    assert client.get(f"/api/sessions/{session_id}", headers=_auth(mentee)).json()["status"] == "pending"


def test_cancel_and_reschedule_over_http(client, mentor, mentee):
    session_id = _create_session(client, mentee, mentor).json()["id"]
    new_day = (date.today() + timedelta(days=14)).isoformat()

    moved = client.post(
        f"/api/sessions/{session_id}/reschedule",
        json={"date": new_day, "time": "14:00"},
        headers=_auth(mentor),
    )
    assert moved.status_code == 200
    assert moved.json()["date"] == new_day

    canceled = client.post(f"/api/sessions/{session_id}/cancel", headers=_auth(mentee))
    assert canceled.status_code == 200
    assert canceled.json()["status"] == "canceled"

    assert client.post(f"/api/sessions/{session_id}/cancel", headers=_auth(mentor)).status_code == 409
    late_move = client.post(
        f"/api/sessions/{session_id}/reschedule",
        json={"date": new_day, "time": "16:00"},
        headers=_auth(mentee),
    )
    assert late_move.status_code == 409


def test_reschedule_by_outsider_is_forbidden(client, make_user, mentor, mentee):
    outsider = make_user("mentee")
    session_id = _create_session(client, mentee, mentor).json()["id"]

    response = client.post(
        f"/api/sessions/{session_id}/reschedule",
        json={"date": _next_week(), "time": "14:00"},
        headers=_auth(outsider),
    )
    assert response.status_code == 403


# ======================
# ACTIVITIES
# ======================

def test_activity_feed_defaults_to_ten_entries(client, mentor, mentee):
    # each request writes one entry to the mentee's feed
    for i in range(11):
        assert _create_session(client, mentee, mentor, topic=f"Topic {i}").status_code == 201

    feed = client.get("/api/activities", headers=_auth(mentee))
    assert feed.status_code == 200
    assert len(feed.json()) == 10

    assert len(client.get("/api/activities", params={"limit": 11}, headers=_auth(mentee)).json()) == 11
    assert client.get("/api/activities", params={"limit": 0}, headers=_auth(mentee)).status_code == 400


# ======================
# FEEDBACK
# ======================

def test_duplicate_feedback_over_http_both_succeed(client, mentor, mentee):
    session_id = _create_session(client, mentee, mentor).json()["id"]
    body = {"session_id": session_id, "to_id": mentor.id, "rating": 5, "comment": "Great"}

    first = client.post("/api/feedback", json=body, headers=_auth(mentee))
    second = client.post("/api/feedback", json=body, headers=_auth(mentee))

    assert first.status_code == 201
    assert second.status_code == 201
    assert first.json()["id"] != second.json()["id"]
    assert len(client.get("/api/feedback/given", headers=_auth(mentee)).json()) == 2
    assert len(client.get("/api/feedback", headers=_auth(mentor)).json()) == 2

    out_of_range = client.post("/api/feedback", json={**body, "rating": 6}, headers=_auth(mentee))
    assert out_of_range.status_code == 400


# ======================
# AVAILABILITY / SKILLS / PROFILE
# ======================

def test_availability_overlap_and_ownership(client, make_user, mentor, mentee):
    first = client.post(
        "/api/availability",
        json={"day": "Monday", "start_time": "09:00", "end_time": "11:00"},
        headers=_auth(mentor),
    )
    assert first.status_code == 201

    overlap = client.post(
        "/api/availability",
        json={"day": "Monday", "start_time": "10:30", "end_time": "12:00"},
        headers=_auth(mentor),
    )
    assert overlap.status_code == 400

    backwards = client.post(
        "/api/availability",
        json={"day": "Monday", "start_time": "12:00", "end_time": "11:00"},
        headers=_auth(mentor),
    )
    assert backwards.status_code == 400

    listed = client.get(f"/api/mentors/{mentor.id}/availability", headers=_auth(mentee))
    assert [slot["day"] for slot in listed.json()] == ["Monday"]

    other_mentor = make_user("mentor")
    slot_id = first.json()["id"]
    assert client.delete(f"/api/availability/{slot_id}", headers=_auth(other_mentor)).status_code == 403
    assert client.delete(f"/api/availability/{slot_id}", headers=_auth(mentor)).status_code == 204
    assert client.delete(f"/api/availability/{slot_id}", headers=_auth(mentor)).status_code == 404


def test_skill_progress_tracking(client, mentor, mentee):
    created = client.post("/api/skills", json={"name": "Public speaking"}, headers=_auth(mentee))
    assert created.status_code == 201
    skill_id = created.json()["id"]
    assert created.json()["progress"] == 0

    updated = client.put(f"/api/skills/{skill_id}", json={"progress": 40}, headers=_auth(mentee))
    assert updated.json()["progress"] == 40

    assert client.put(f"/api/skills/{skill_id}", json={"progress": 140}, headers=_auth(mentee)).status_code == 400
    assert client.get("/api/skills", headers=_auth(mentor)).status_code == 403


def test_profile_update_cannot_change_role(client, mentee):
    response = client.put(
        "/api/profile",
        json={"bio": "Aspiring engineer", "role": "mentor"},
        headers=_auth(mentee),
    )
    assert response.status_code == 200
    assert response.json()["bio"] == "Aspiring engineer"
    assert response.json()["role"] == "mentee"

    mentors = client.get("/api/mentors", headers=_auth(mentee))
    assert all(m["role"] == "mentor" for m in mentors.json())
