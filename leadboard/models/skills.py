# skills.py
from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func
from leadboard.database import Base


class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
