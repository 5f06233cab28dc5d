# __init__.py
from leadboard.schemas.ai import ProcessEmailRequest
from leadboard.schemas.clients import ClientRead
from leadboard.schemas.dashboard import DashboardStats
from leadboard.schemas.members import MemberCreate, MemberRead, MemberRecommendationRequest, MemberRecommendationResponse
from leadboard.schemas.opportunities import (
	OpportunityAssignmentUpdate,
	OpportunityCreate,
	OpportunityDetailsUpdate,
	OpportunityRead,
	OpportunityStatusUpdate,
)
from leadboard.schemas.skills import SkillCreate, SkillRead

__all__ = [
	"ProcessEmailRequest",
	"ClientRead",
	"DashboardStats",
	"MemberCreate",
	"MemberRead",
	"MemberRecommendationRequest",
	"MemberRecommendationResponse",
	"OpportunityAssignmentUpdate",
	"OpportunityCreate",
	"OpportunityDetailsUpdate",
	"OpportunityRead",
	"OpportunityStatusUpdate",
	"SkillCreate",
	"SkillRead",
]
