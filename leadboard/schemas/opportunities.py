from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


OpportunityStatus = Literal["new", "assigned", "done", "cancelled", "archived"]
Urgency = Literal["low", "medium", "high"]


class OpportunityCreate(BaseModel):
    client_name: str = Field(min_length=1)
    company: str = Field(min_length=1)
    original_message: str = Field(min_length=1)
    ai_summary: str | None = None
    # Accepts extractor priorities ("High") as well as stored urgencies ("high").
    urgency: str = "medium"
    skill_ids: list[int] = Field(default_factory=list)
    assigned_member_id: int | None = None


class OpportunityStatusUpdate(BaseModel):
    status: str


class OpportunityAssignmentUpdate(BaseModel):
    member_id: int


class OpportunityDetailsUpdate(BaseModel):
    ai_summary: str | None = None
    urgency: str | None = None
    skill_ids: list[int] | None = None


class OpportunityRead(BaseModel):
    id: int
    client_id: int
    client_name: str
    company: str
    original_message: str
    ai_summary: str
    urgency: Urgency
    status: OpportunityStatus
    assigned_member_id: int | None = None
    assignee: str = ""
    skills: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
