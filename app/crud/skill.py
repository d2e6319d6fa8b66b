from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.skill import Skill


def get_skills_for_mentee(db: Session, mentee_id: int) -> List[Skill]:
    return db.query(Skill).filter(Skill.mentee_id == mentee_id).order_by(Skill.id.asc()).all()


def get_skill(db: Session, skill_id: int) -> Optional[Skill]:
    return db.query(Skill).filter(Skill.id == skill_id).first()


def create_skill(db: Session, mentee_id: int, name: str, progress: int = 0) -> Skill:
    skill = Skill(mentee_id=mentee_id, name=name.strip(), progress=progress)
    db.add(skill)
    db.commit()
    db.refresh(skill)
    return skill


def update_skill_progress(db: Session, skill: Skill, progress: int) -> Skill:
    skill.progress = progress
    db.commit()
    db.refresh(skill)
    return skill
