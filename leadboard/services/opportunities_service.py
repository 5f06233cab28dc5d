# opportunities_service.py
import logging
from typing import Any, Sequence
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from leadboard.models.members import Member
from leadboard.models.opportunities import OPPORTUNITY_STATUSES, URGENCY_LEVELS, Opportunity
from leadboard.schemas.opportunities import OpportunityRead
from leadboard.services.clients_service import find_or_create_client
from leadboard.services.errors import ConflictError, NotFoundError, ValidationError
from leadboard.services.skills_service import get_skills_by_ids


logger = logging.getLogger(__name__)


def normalize_urgency(value: str | None) -> str:
    urgency = (value or "medium").strip().lower()
    if urgency not in URGENCY_LEVELS:
        raise ValidationError(f"urgency must be one of: {', '.join(URGENCY_LEVELS)}")
    return urgency


def normalize_status(value: str | None) -> str:
    status = (value or "").strip().lower()
    if status not in OPPORTUNITY_STATUSES:
        raise ValidationError(f"status must be one of: {', '.join(OPPORTUNITY_STATUSES)}")
    return status


def create_opportunity(
    db: Session,
    client_name: str,
    company: str,
    original_message: str,
    ai_summary: str | None = None,
    urgency: str | None = "medium",
    skill_ids: Sequence[int] = (),
    assigned_member_id: int | None = None,
) -> OpportunityRead:
    if not (client_name or "").strip() or not (company or "").strip() or not (original_message or "").strip():
        raise ValidationError("client_name, company and original_message are required fields")

    normalized_urgency = normalize_urgency(urgency)
    skills = get_skills_by_ids(db, list(skill_ids))
    if assigned_member_id is not None:
        _get_member(db, assigned_member_id)

    try:
        client = find_or_create_client(db, client_name, company)
        opportunity = _new_opportunity(client.id, original_message, ai_summary, normalized_urgency, assigned_member_id)
        opportunity.skills = skills
        db.add(opportunity)
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError("Opportunity could not be saved, the client was created concurrently") from exc
    db.refresh(opportunity)
    logger.info("opportunities.created id=%s client_id=%s status=%s", opportunity.id, client.id, opportunity.status)
    return to_read(opportunity)


def _new_opportunity(
    client_id: int,
    original_message: str,
    ai_summary: str | None,
    urgency: str,
    assigned_member_id: int | None,
) -> Opportunity:
    return Opportunity(
        client_id=client_id,
        original_message=original_message.strip(),
        ai_summary=(ai_summary or "").strip() or None,
        urgency=urgency,
        # An assigned member implies the opportunity is already in progress.
        status="assigned" if assigned_member_id is not None else "new",
        assigned_member_id=assigned_member_id,
    )


def list_opportunities(db: Session, status: str | None = None) -> list[OpportunityRead]:
    query = db.query(Opportunity)
    if status:
        query = query.filter(func.lower(Opportunity.status) == normalize_status(status))
    rows = query.order_by(Opportunity.created_at.desc(), Opportunity.id.desc()).all()
    return [to_read(row) for row in rows]


def get_opportunity(db: Session, opportunity_id: int) -> Opportunity:
    opportunity = db.query(Opportunity).filter(Opportunity.id == opportunity_id).one_or_none()
    if opportunity is None:
        raise NotFoundError("Opportunity not found")
    return opportunity


def update_status(db: Session, opportunity_id: int, status: str) -> OpportunityRead:
    new_status = normalize_status(status)
    opportunity = get_opportunity(db, opportunity_id)
    opportunity.status = new_status
    db.commit()
    db.refresh(opportunity)
    logger.info("opportunities.status id=%s status=%s", opportunity_id, new_status)
    return to_read(opportunity)


def assign_member(db: Session, opportunity_id: int, member_id: int) -> OpportunityRead:
    opportunity = get_opportunity(db, opportunity_id)
    member = _get_member(db, member_id)
    opportunity.assigned_member_id = member.id
    opportunity.status = "assigned"
    db.commit()
    db.refresh(opportunity)
    logger.info("opportunities.assigned id=%s member_id=%s", opportunity_id, member.id)
    return to_read(opportunity)


def update_details(db: Session, opportunity_id: int, changes: dict[str, Any]) -> OpportunityRead:
    """Apply only the keys present in `changes` (ai_summary, urgency, skill_ids)."""
    opportunity = get_opportunity(db, opportunity_id)

    if "ai_summary" in changes:
        opportunity.ai_summary = (changes["ai_summary"] or "").strip() or None
    if "urgency" in changes:
        if changes["urgency"] is None:
            raise ValidationError(f"urgency must be one of: {', '.join(URGENCY_LEVELS)}")
        opportunity.urgency = normalize_urgency(changes["urgency"])
    if "skill_ids" in changes:
        opportunity.skills = get_skills_by_ids(db, list(changes["skill_ids"] or []))

    db.commit()
    db.refresh(opportunity)
    return to_read(opportunity)


def count_opportunities(db: Session) -> int:
    return int(db.query(func.count(Opportunity.id)).scalar() or 0)


def count_by_status(db: Session, status: str) -> int:
    wanted = normalize_status(status)
    return int(db.query(func.count(Opportunity.id)).filter(func.lower(Opportunity.status) == wanted).scalar() or 0)


def to_read(opportunity: Opportunity) -> OpportunityRead:
    status = (opportunity.status or "new").lower()
    if status not in OPPORTUNITY_STATUSES:
        status = "new"
    # Legacy rows may carry an assignee while still marked new.
    if status == "new" and opportunity.assigned_member_id is not None:
        status = "assigned"

    urgency = (opportunity.urgency or "medium").lower()
    if urgency not in URGENCY_LEVELS:
        urgency = "medium"

    client = opportunity.client
    member = opportunity.assigned_member
    return OpportunityRead(
        id=opportunity.id,
        client_id=opportunity.client_id,
        client_name=client.name if client is not None else "Unknown Client",
        company=client.company if client is not None else "Unknown Company",
        original_message=opportunity.original_message or "",
        ai_summary=opportunity.ai_summary or "",
        urgency=urgency,
        status=status,
        assigned_member_id=opportunity.assigned_member_id,
        assignee=member.full_name if member is not None else "",
        skills=[skill.name for skill in opportunity.skills],
        created_at=opportunity.created_at,
    )


def _get_member(db: Session, member_id: int) -> Member:
    member = db.query(Member).filter(Member.id == member_id).one_or_none()
    if member is None:
        raise ValidationError("Assigned member does not exist")
    return member
