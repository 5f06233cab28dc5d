from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class MemberCreate(BaseModel):
    name: str
    email: str
    role: str
    skill_ids: list[int] = Field(default_factory=list)


class MemberRead(BaseModel):
    id: int
    full_name: str
    email: str
    role: str | None = None
    created_at: datetime | None = None
    skills: list[str] = Field(default_factory=list)
    active_opportunities: int = 0
    completed_opportunities: int = 0


class MemberRecommendationRequest(BaseModel):
    required_skills: list[str] = Field(default_factory=list)


class MemberRecommendationResponse(BaseModel):
    required_skills: list[str] = Field(default_factory=list)
    matching: list[MemberRead] = Field(default_factory=list)
    # Only populated when no required skills were given.
    alternatives: list[MemberRead] = Field(default_factory=list)
