# members_service.py
import logging
import re
from typing import Sequence
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from leadboard.models.members import MEMBER_ROLES, Member
from leadboard.models.opportunities import Opportunity
from leadboard.schemas.members import MemberRead, MemberRecommendationResponse
from leadboard.services.errors import ConflictError, ValidationError
from leadboard.services.skills_service import get_skills_by_ids


logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def create_member(db: Session, full_name: str, email: str, role: str, skill_ids: Sequence[int] = ()) -> MemberRead:
    full_name = (full_name or "").strip()
    email = (email or "").strip()
    role = (role or "").strip()
    if not full_name or not email or not role:
        raise ValidationError("name, email, and role are required fields")
    if not _EMAIL_RE.match(email):
        raise ValidationError("Email format is not valid")
    if role not in MEMBER_ROLES:
        raise ValidationError(f"role must be one of: {', '.join(MEMBER_ROLES)}")

    email = email.lower()
    if db.query(Member.id).filter(Member.email == email).first() is not None:
        raise ConflictError("A member with this email already exists")

    skills = get_skills_by_ids(db, list(skill_ids))
    member = Member(full_name=full_name, email=email, role=role)
    member.skills = skills
    db.add(member)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError("A member with this email already exists") from exc
    db.refresh(member)
    logger.info("members.created id=%s skills=%d", member.id, len(skills))
    return _to_read(member, active=0, completed=0)


def list_members(db: Session) -> list[MemberRead]:
    members = db.query(Member).order_by(Member.full_name.asc()).all()
    active = _count_by_member(db, "assigned")
    completed = _count_by_member(db, "done")
    return [
        _to_read(member, active=active.get(member.id, 0), completed=completed.get(member.id, 0))
        for member in members
    ]


def count_members(db: Session) -> int:
    return int(db.query(func.count(Member.id)).scalar() or 0)


def recommend_members(db: Session, required_skills: Sequence[str]) -> MemberRecommendationResponse:
    wanted = [skill.strip() for skill in required_skills if skill and skill.strip()]
    members = list_members(db)

    matching = [member for member in members if wanted and any(skill in member.skills for skill in wanted)]
    # Alternatives are only offered when there is nothing to match against.
    alternatives = [] if wanted else members
    return MemberRecommendationResponse(required_skills=wanted, matching=matching, alternatives=alternatives)


def _count_by_member(db: Session, status: str) -> dict[int, int]:
    rows = (
        db.query(Opportunity.assigned_member_id, func.count(Opportunity.id))
        .filter(Opportunity.assigned_member_id.isnot(None))
        .filter(func.lower(Opportunity.status) == status)
        .group_by(Opportunity.assigned_member_id)
        .all()
    )
    return {int(member_id): int(count) for member_id, count in rows}


def _to_read(member: Member, *, active: int, completed: int) -> MemberRead:
    return MemberRead(
        id=member.id,
        full_name=member.full_name,
        email=member.email,
        role=member.role,
        created_at=member.created_at,
        skills=[skill.name for skill in member.skills],
        active_opportunities=active,
        completed_opportunities=completed,
    )
