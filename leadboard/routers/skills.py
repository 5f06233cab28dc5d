# skills.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from leadboard.database import get_db
from leadboard.routers.dependencies import store_error_to_http
from leadboard.schemas.skills import SkillCreate, SkillRead
from leadboard.services.errors import ConflictError, ValidationError
from leadboard.services.skills_service import create_skill, list_skills


router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("", response_model=list[SkillRead])
def read_skills(db: Session = Depends(get_db)) -> list[SkillRead]:
    return [SkillRead.model_validate(skill) for skill in list_skills(db)]


@router.post("", response_model=SkillRead, status_code=status.HTTP_201_CREATED)
def add_skill(payload: SkillCreate, db: Session = Depends(get_db)) -> SkillRead:
    try:
        skill = create_skill(db, payload.name)
    except (ConflictError, ValidationError) as exc:
        raise store_error_to_http(exc) from exc
    return SkillRead.model_validate(skill)
