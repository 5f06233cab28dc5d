# __init__.py
from leadboard.models.clients import Client
from leadboard.models.members import MEMBER_ROLES, Member, member_skills
from leadboard.models.opportunities import OPPORTUNITY_STATUSES, URGENCY_LEVELS, Opportunity, opportunity_skills
from leadboard.models.skills import Skill

__all__ = [
	"Client",
	"Member",
	"MEMBER_ROLES",
	"member_skills",
	"Opportunity",
	"OPPORTUNITY_STATUSES",
	"URGENCY_LEVELS",
	"opportunity_skills",
	"Skill",
]
