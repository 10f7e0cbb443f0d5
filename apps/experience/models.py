"""
Experience database models.
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, Date, DateTime

from apps.shared.database import Base, SafeJSON, utcnow


class Experience(Base):
    """
    One position in the work history timeline.

    end_date is ignored while current is true; see ExperienceResponse.
    """
    __tablename__ = "experience"

    id = Column(Integer, primary_key=True)
    company = Column(String(200), nullable=False)
    position = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    technologies = Column(SafeJSON, nullable=False, default=list)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date)
    current = Column(Boolean, nullable=False, default=False)
    order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
