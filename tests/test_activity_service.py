from __future__ import annotations

from app.services import activity_service


def test_record_is_plain_append(db_session, mentee):
    first = activity_service.record(db_session, user_id=mentee.id, type="session_created", content="Same")
    second = activity_service.record(db_session, user_id=mentee.id, type="session_created", content="Same")
    db_session.commit()

    assert first.id != second.id
    assert first.related_user_id is None
    assert len(activity_service.list_for_user(db_session, user_id=mentee.id)) == 2


def test_record_pair_points_each_side_at_the_other(db_session, mentor, mentee):
    pair = activity_service.record_pair(
        db_session,
        actor_id=mentor.id,
        actor_type="session_approved",
        actor_content="You approved",
        counterpart_id=mentee.id,
        counterpart_type="session_confirmed",
        counterpart_content="Approved",
    )
    db_session.commit()

    assert [(a.user_id, a.related_user_id, a.type) for a in pair] == [
        (mentor.id, mentee.id, "session_approved"),
        (mentee.id, mentor.id, "session_confirmed"),
    ]


def test_list_for_user_newest_first_and_limited(db_session, mentor, mentee):
    for i in range(12):
        activity_service.record(db_session, user_id=mentee.id, type="session_created", content=f"#{i}")
    activity_service.record(db_session, user_id=mentor.id, type="session_requested", content="other feed")
    db_session.commit()

    feed = activity_service.list_for_user(db_session, user_id=mentee.id)
    assert len(feed) == 10
    assert feed[0].content == "#11"
    assert all(a.user_id == mentee.id for a in feed)

    assert [a.content for a in activity_service.list_for_user(db_session, user_id=mentee.id, limit=3)] == [
        "#11",
        "#10",
        "#9",
    ]
