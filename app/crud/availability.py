from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.availability import Availability


def get_availability_for_mentor(db: Session, mentor_id: int) -> List[Availability]:
    return (
        db.query(Availability)
        .filter(Availability.mentor_id == mentor_id)
        .order_by(Availability.id.asc())
        .all()
    )


def get_availability(db: Session, availability_id: int) -> Optional[Availability]:
    return db.query(Availability).filter(Availability.id == availability_id).first()


def find_overlapping(
    db: Session,
    mentor_id: int,
    day: str,
    start_time: str,
    end_time: str,
) -> Optional[Availability]:
    """Return an existing slot on the same day that intersects [start, end)."""
    return (
        db.query(Availability)
        .filter(
            Availability.mentor_id == mentor_id,
            Availability.day == day,
            Availability.start_time < end_time,
            Availability.end_time > start_time,
        )
        .first()
    )


def find_covering_slot(db: Session, mentor_id: int, day: str, time: str) -> Optional[Availability]:
    return (
        db.query(Availability)
        .filter(
            Availability.mentor_id == mentor_id,
            Availability.day == day,
            Availability.start_time <= time,
            Availability.end_time > time,
        )
        .first()
    )


def create_availability(db: Session, mentor_id: int, day: str, start_time: str, end_time: str) -> Availability:
    slot = Availability(mentor_id=mentor_id, day=day, start_time=start_time, end_time=end_time)
    db.add(slot)
    db.commit()
    db.refresh(slot)
    return slot


def delete_availability(db: Session, slot: Availability) -> None:
    db.delete(slot)
    db.commit()
