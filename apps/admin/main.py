"""
Admin & Auth API

- /admin/setup: one-time creation of the admin account
- /admin/reset: delete the admin account (shared reset key)
- /admin/stats: dashboard counters
- /auth/*: credential login and session probe
"""
import os
import logging
from datetime import datetime, timezone
from typing import Optional
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from apps.shared.database import get_db
from apps.shared.auth import (
    SESSION_COOKIE_NAME,
    get_session_token,
    require_admin,
    verify_reset_key,
)
from apps.shared.errors import Unauthorized
from apps.shared.session import SESSION_MAX_AGE, decode_session_token, issue_session_token
from apps.admin.schemas import (
    AdminSetup,
    LoginRequest,
    LoginResponse,
    ResetResponse,
    SessionResponse,
    SetupResponse,
    StatsResponse,
)
from apps.admin.utils import authenticate, create_admin, reset_admin
from apps.experience.models import Experience
from apps.messages.models import Message
from apps.projects.models import Project
from apps.skills.models import Skill

logger = logging.getLogger(__name__)

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
SESSION_COOKIE_SECURE = os.getenv(
    "SESSION_COOKIE_SECURE", "true" if ENVIRONMENT == "production" else "false"
).lower() == "true"

router = APIRouter(prefix="/admin", tags=["admin"])
auth_router = APIRouter(prefix="/auth", tags=["auth"])


def _timestamp(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


# ──────────────────────────────────────────────────────────────────────────────
# Account lifecycle
# ──────────────────────────────────────────────────────────────────────────────

@router.post("/setup", response_model=SetupResponse, status_code=201)
def setup_admin(setup_data: AdminSetup, db: Session = Depends(get_db)):
    """Create the admin account. Fails once an admin exists."""
    admin = create_admin(db, setup_data.email, setup_data.password, setup_data.name)
    return {"message": "Admin created", "id": admin.id}


@router.delete("/reset", response_model=ResetResponse)
def reset_admin_account(
    _: None = Depends(verify_reset_key),
    db: Session = Depends(get_db),
):
    """Delete all admin accounts so setup can run again. Requires x-reset-key."""
    deleted = reset_admin(db)
    return {"message": "Admin accounts deleted successfully", "deleted_count": deleted}


@router.get("/stats", response_model=StatsResponse)
def dashboard_stats(
    admin_id: str = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Record counts for the admin dashboard."""
    return {
        "projects": db.query(Project).count(),
        "experience": db.query(Experience).count(),
        "skills": db.query(Skill).count(),
        "messages": db.query(Message).count(),
        "unread_messages": db.query(Message).filter(Message.read == False).count(),
    }


# ──────────────────────────────────────────────────────────────────────────────
# Sessions
# ──────────────────────────────────────────────────────────────────────────────

@auth_router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, response: Response, db: Session = Depends(get_db)):
    """
    Exchange email/password for a 24 hour session token.

    The token is returned in the body (for Bearer use) and set as an
    HttpOnly cookie (for the admin panel).
    """
    admin = authenticate(db, credentials.email, credentials.password)

    token = issue_session_token(admin.id)
    _, expires_at = decode_session_token(token)

    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=token,
        max_age=SESSION_MAX_AGE,
        httponly=True,
        secure=SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    logger.info(f"Admin {admin.id} logged in")
    return {
        "token": token,
        "expires_at": _timestamp(expires_at),
        "user": admin.to_dict(),
    }


@auth_router.get("/session", response_model=SessionResponse)
def current_session(token: Optional[str] = Depends(get_session_token)):
    """Report who the current session belongs to and when it expires."""
    decoded = decode_session_token(token) if token else None
    if decoded is None:
        raise Unauthorized()
    admin_id, expires_at = decoded
    return {"admin_id": admin_id, "expires_at": _timestamp(expires_at)}


@auth_router.post("/logout")
def logout(response: Response):
    """
    Drop the session cookie. The token itself stays valid until it expires;
    sessions are stateless and cannot be revoked server-side.
    """
    response.delete_cookie(SESSION_COOKIE_NAME)
    return {"message": "Logged out"}
