"""
Pydantic schemas for admin setup and login.
"""
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field

from apps.shared.schemas import CamelModel


class AdminSetup(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)


class LoginRequest(BaseModel):
    # Plain str: a malformed email must fail as invalid credentials, not 400
    email: str
    password: str


class AdminUser(BaseModel):
    id: str
    email: str
    name: str


class LoginResponse(CamelModel):
    token: str
    expires_at: datetime
    user: AdminUser


class SessionResponse(CamelModel):
    admin_id: str
    expires_at: datetime


class SetupResponse(BaseModel):
    message: str
    id: str


class ResetResponse(CamelModel):
    message: str
    deleted_count: int


class StatsResponse(CamelModel):
    projects: int
    experience: int
    skills: int
    messages: int
    unread_messages: int
