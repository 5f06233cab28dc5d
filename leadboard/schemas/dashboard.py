from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class DashboardStats(BaseModel):
    generated_at: datetime
    pending_action: int
    top_needed_skill: str | None = None
    team_availability: int
    total_opportunities: int
    active_opportunities: int
