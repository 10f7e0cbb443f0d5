"""
Skills database models.
"""
from sqlalchemy import Column, Integer, String, DateTime

from apps.shared.database import Base, utcnow


class Skill(Base):
    """
    A skill bar in the public Skills section.

    category is one of SKILL_CATEGORIES; proficiency is a percentage (1-100).
    """
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    category = Column(String(20), nullable=False, index=True)
    proficiency = Column(Integer, nullable=False, default=50)
    order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
