"""
Admin Session Tokens

Stateless, time-bound session tokens for the admin panel. A token carries
the admin id, the issue time and a random nonce, signed with HMAC-SHA256.
Nothing is stored server-side, so a token stays valid until it expires.
"""
import os
import time
import hmac
import hashlib
import secrets
import base64
from typing import Optional


# Session secret for HMAC signing (must be set)
SESSION_SECRET = os.getenv("SESSION_SECRET")

# Session lifetime in seconds (24 hours)
SESSION_MAX_AGE = 24 * 60 * 60


def _require_secret() -> str:
    if not SESSION_SECRET:
        raise RuntimeError(
            "SESSION_SECRET environment variable must be set for admin sessions. "
            "Generate one with: python3 -c 'import secrets; print(secrets.token_urlsafe(32))'"
        )
    return SESSION_SECRET


def _sign(payload: str) -> str:
    return hmac.new(
        _require_secret().encode(),
        payload.encode(),
        hashlib.sha256
    ).hexdigest()


def issue_session_token(admin_id: str, issued_at: Optional[int] = None) -> str:
    """
    Create a signed session token for an authenticated admin.

    Args:
        admin_id: Id of the admin the token is issued to
        issued_at: Unix timestamp to embed (defaults to now)

    Returns:
        Base64url-encoded token string

    Raises:
        RuntimeError: If SESSION_SECRET is not configured
    """
    timestamp = int(time.time()) if issued_at is None else issued_at
    nonce = secrets.token_urlsafe(16)
    payload = f"{admin_id}:{timestamp}:{nonce}"

    full_token = f"{payload}:{_sign(payload)}"
    return base64.urlsafe_b64encode(full_token.encode()).decode()


def decode_session_token(token: str) -> Optional[tuple[str, int]]:
    """
    Verify a session token.

    Checks:
    1. Token can be decoded
    2. Signature is valid (prevents tampering)
    3. Token is not older than SESSION_MAX_AGE

    Returns:
        (admin_id, expires_at) if valid, None otherwise

    Raises:
        RuntimeError: If SESSION_SECRET is not configured
    """
    _require_secret()

    try:
        decoded = base64.urlsafe_b64decode(token.encode()).decode()

        parts = decoded.split(":")
        if len(parts) != 4:
            return None

        admin_id, timestamp_str, nonce, received_signature = parts
        timestamp = int(timestamp_str)

        expected_signature = _sign(f"{admin_id}:{timestamp_str}:{nonce}")

        # Constant-time comparison to prevent timing attacks
        if not hmac.compare_digest(received_signature, expected_signature):
            return None

        expires_at = timestamp + SESSION_MAX_AGE
        if expires_at < int(time.time()):
            return None

        return admin_id, expires_at

    except (ValueError, TypeError, UnicodeDecodeError, base64.binascii.Error):
        return None
