"""
Pydantic schemas for contact messages.
"""
from typing import Optional
from pydantic import EmailStr, Field

from apps.shared.schemas import CamelModel, RecordResponse


class ContactMessageCreate(CamelModel):
    """Public contact form payload."""
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    subject: str = Field("", max_length=300)
    message: str = Field(..., min_length=1)


class ContactMessageUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    subject: Optional[str] = Field(None, max_length=300)
    message: Optional[str] = Field(None, min_length=1)
    read: Optional[bool] = None


class ContactMessageResponse(RecordResponse):
    name: str
    email: str
    subject: str
    message: str
    read: bool
