"""
Projects database models.

Stores portfolio projects shown in the public Projects section.
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime

from apps.shared.database import Base, SafeJSON, utcnow


class Project(Base):
    """
    Project model for portfolio projects.

    Stores all project data including:
    - Basic info (title, short and long description)
    - Media (image URL)
    - Metadata (technologies, GitHub / live links)
    - Display settings (featured, order)
    """
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    long_description = Column(Text)
    technologies = Column(SafeJSON, nullable=False, default=list)  # ["React", "Python", "PostgreSQL"]
    image_url = Column(Text)  # URL or data URI
    github_url = Column(String(500))
    live_url = Column(String(500))
    featured = Column(Boolean, nullable=False, default=False)
    order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
