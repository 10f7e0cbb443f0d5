"""
Admin account database model
"""
import uuid
from sqlalchemy import Column, Integer, String, DateTime

from apps.shared.database import Base, utcnow


class Admin(Base):
    """
    The single admin account (single user mode).

    `slot` is always 1 and unique, so the database itself refuses a second
    admin row even when two setup requests race.
    """
    __tablename__ = "admins"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    slot = Column(Integer, nullable=False, unique=True, default=1)
    email = Column(String(320), nullable=False, unique=True, index=True)  # stored lowercased
    password_hash = Column(String(255), nullable=False)
    name = Column(String(200), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    def to_dict(self) -> dict:
        """Public view of the admin, never includes the hash."""
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
        }
