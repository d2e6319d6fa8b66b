from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app import models
from app.crud import skill as skill_crud
from app.database import get_db
from app.exceptions import NotFoundError, PermissionDeniedError
from app.schemas.skill import SkillCreate, SkillProgressUpdate, SkillResponse
from app.utils.security import require_mentee

router = APIRouter(prefix="/api/skills", tags=["skills"])


@router.get("", response_model=List[SkillResponse])
def get_my_skills(
    current_user: models.User = Depends(require_mentee),
    db: Session = Depends(get_db)
):
    return skill_crud.get_skills_for_mentee(db, current_user.id)


@router.post("", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
def add_skill(
    payload: SkillCreate,
    current_user: models.User = Depends(require_mentee),
    db: Session = Depends(get_db)
):
    return skill_crud.create_skill(db, current_user.id, payload.name, payload.progress)


@router.put("/{skill_id}", response_model=SkillResponse)
def update_skill_progress(
    skill_id: int,
    payload: SkillProgressUpdate,
    current_user: models.User = Depends(require_mentee),
    db: Session = Depends(get_db)
):
    skill = skill_crud.get_skill(db, skill_id)
    if not skill:
        raise NotFoundError("Skill not found")
    if skill.mentee_id != current_user.id:
        raise PermissionDeniedError("You can only update your own skills")
    return skill_crud.update_skill_progress(db, skill, payload.progress)
