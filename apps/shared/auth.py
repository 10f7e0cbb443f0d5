"""
Admin Authentication

Password hashing, the session dependency that gates every write endpoint,
and the shared-secret check used by the admin reset endpoint.
"""

import os
import hmac
import logging
from typing import Optional

from fastapi import Depends, Security
from fastapi.security import APIKeyCookie, APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer
from passlib.context import CryptContext

from apps.shared.errors import Unauthorized
from apps.shared.session import decode_session_token

# Setup logging
logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "portfolio_session"
RESET_KEY_HEADER = "x-reset-key"

# Shared secret for DELETE /api/admin/reset. Unset means reset is disabled.
ADMIN_RESET_KEY = os.getenv("ADMIN_RESET_KEY")
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

# pbkdf2_sha256 is pure python, no bcrypt build needed
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

bearer_scheme = HTTPBearer(auto_error=False)
session_cookie = APIKeyCookie(name=SESSION_COOKIE_NAME, auto_error=False)
reset_key_header = APIKeyHeader(name=RESET_KEY_HEADER, auto_error=False)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    """
    Check a password against a stored hash.

    With no hash (unknown account) a dummy verification still runs so the
    caller cannot tell a missing account from a wrong password by timing.
    """
    if not password_hash:
        pwd_context.dummy_verify()
        return False
    return pwd_context.verify(password, password_hash)


def validate_session(token: Optional[str]) -> str:
    """Return the admin id carried by a valid token, else raise Unauthorized."""
    if not token:
        raise Unauthorized()
    decoded = decode_session_token(token)
    if decoded is None:
        raise Unauthorized()
    admin_id, _ = decoded
    return admin_id


def get_session_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    cookie_token: Optional[str] = Security(session_cookie),
) -> Optional[str]:
    """Bearer header wins over the session cookie."""
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return cookie_token


def require_admin(token: Optional[str] = Depends(get_session_token)) -> str:
    """
    Dependency for endpoints that need an authenticated admin

    Usage in endpoints:
    @router.post("/things")
    def create_thing(admin_id: str = Depends(require_admin)):
        # only reached with a valid session
        pass
    """
    return validate_session(token)


def verify_reset_key(reset_key: Optional[str] = Security(reset_key_header)) -> None:
    """
    Dependency guarding the admin reset endpoint.

    The key is a static shared secret with no rotation; treat it like a
    root password and keep it out of the frontend.
    """
    if not ADMIN_RESET_KEY:
        logger.warning(
            "Admin reset attempted but ADMIN_RESET_KEY is not set (environment: %s). "
            "Set ADMIN_RESET_KEY to enable the reset endpoint.",
            ENVIRONMENT,
        )
        raise Unauthorized()

    # Use constant-time comparison to prevent timing attacks
    if reset_key is None or not hmac.compare_digest(reset_key.encode(), ADMIN_RESET_KEY.encode()):
        raise Unauthorized()
