from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from leadboard.database import Base


OPPORTUNITY_STATUSES = ("new", "assigned", "done", "cancelled", "archived")
URGENCY_LEVELS = ("low", "medium", "high")

opportunity_skills = Table(
    "opportunity_skills",
    Base.metadata,
    Column("opportunity_id", Integer, ForeignKey("opportunities.id", ondelete="CASCADE"), primary_key=True),
    Column("skill_id", Integer, ForeignKey("skills.id", ondelete="CASCADE"), primary_key=True),
)


class Opportunity(Base):
    __tablename__ = "opportunities"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    assigned_member_id = Column(Integer, ForeignKey("members.id", ondelete="SET NULL"), nullable=True, index=True)

    status = Column(String(32), nullable=False, default="new", index=True)
    original_message = Column(Text, nullable=False)
    ai_summary = Column(Text, nullable=True)
    urgency = Column(String(16), nullable=False, default="medium")

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    client = relationship("Client", lazy="joined")
    assigned_member = relationship("Member", lazy="joined")
    skills = relationship("Skill", secondary=opportunity_skills, order_by="Skill.name", lazy="selectin")
