from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import func
from sqlalchemy.orm import Session

from leadboard.models.opportunities import Opportunity, opportunity_skills
from leadboard.models.skills import Skill
from leadboard.schemas.dashboard import DashboardStats
from leadboard.services.members_service import count_members
from leadboard.services.opportunities_service import count_by_status, count_opportunities


CLOSED_STATUSES = ("archived", "cancelled")


def top_needed_skill(db: Session) -> str | None:
    row = (
        db.query(Skill.name, func.count(Opportunity.id).label("c"))
        .select_from(Skill)
        .join(opportunity_skills, opportunity_skills.c.skill_id == Skill.id)
        .join(Opportunity, Opportunity.id == opportunity_skills.c.opportunity_id)
        .filter(func.lower(Opportunity.status).notin_(CLOSED_STATUSES))
        .group_by(Skill.name)
        .order_by(func.count(Opportunity.id).desc(), Skill.name.asc())
        .first()
    )
    return row[0] if row else None


def team_availability(db: Session) -> int:
    """Percentage of members without an opportunity in progress."""
    total = count_members(db)
    if total == 0:
        return 0
    busy = int(
        db.query(func.count(func.distinct(Opportunity.assigned_member_id)))
        .filter(Opportunity.assigned_member_id.isnot(None))
        .filter(func.lower(Opportunity.status) == "assigned")
        .scalar()
        or 0
    )
    return round((total - busy) * 100 / total)


def dashboard_stats(db: Session) -> DashboardStats:
    return DashboardStats(
        generated_at=datetime.now(timezone.utc),
        pending_action=count_by_status(db, "new"),
        top_needed_skill=top_needed_skill(db),
        team_availability=team_availability(db),
        total_opportunities=count_opportunities(db),
        active_opportunities=count_by_status(db, "assigned"),
    )
