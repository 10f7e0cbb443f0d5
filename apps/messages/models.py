"""
Contact messages database models.
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime

from apps.shared.database import Base, utcnow


class Message(Base):
    """A contact form submission, readable only by the admin."""
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=False)
    email = Column(String(320), nullable=False)
    subject = Column(String(300), nullable=False, default="")
    message = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
