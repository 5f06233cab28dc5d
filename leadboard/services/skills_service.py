# skills_service.py
import logging
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from leadboard.models.skills import Skill
from leadboard.services.errors import ConflictError, ValidationError


logger = logging.getLogger(__name__)


def list_skills(db: Session) -> list[Skill]:
    return db.query(Skill).order_by(Skill.name.asc()).all()


def create_skill(db: Session, name: str) -> Skill:
    trimmed = (name or "").strip()
    if not trimmed:
        raise ValidationError("Skill name cannot be empty")

    existing = db.query(Skill).filter(func.lower(Skill.name) == trimmed.lower()).first()
    if existing is not None:
        raise ConflictError("Skill already exists")

    skill = Skill(name=trimmed)
    db.add(skill)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError("Skill already exists") from exc
    db.refresh(skill)
    return skill


def get_skills_by_ids(db: Session, skill_ids: list[int]) -> list[Skill]:
    unique_ids = list(dict.fromkeys(skill_ids))
    if not unique_ids:
        return []
    skills = db.query(Skill).filter(Skill.id.in_(unique_ids)).all()
    if len(skills) != len(unique_ids):
        raise ValidationError("One or more skills do not exist")
    by_id = {skill.id: skill for skill in skills}
    return [by_id[skill_id] for skill_id in unique_ids]


def load_known_skill_names(db: Session) -> list[str]:
    """Best-effort snapshot of skill names; an unreachable store yields []."""
    try:
        rows = db.query(Skill.name).order_by(Skill.name.asc()).all()
    except SQLAlchemyError as exc:
        logger.warning("skills.load_failed error=%s; continuing without skill matching", exc)
        db.rollback()
        return []
    return [name for (name,) in rows if name]
