import base64
import time

import pytest

from apps.shared import session
from apps.shared.session import SESSION_MAX_AGE, decode_session_token, issue_session_token


def test_issued_token_decodes_to_admin_id():
    token = issue_session_token("admin-1")

    admin_id, expires_at = decode_session_token(token)

    assert admin_id == "admin-1"
    assert abs(expires_at - (int(time.time()) + SESSION_MAX_AGE)) <= 2


def test_tokens_are_unique_per_issue():
    assert issue_session_token("admin-1") != issue_session_token("admin-1")


def test_token_expires_after_24_hours():
    issued_at = int(time.time()) - SESSION_MAX_AGE - 1

    assert decode_session_token(issue_session_token("admin-1", issued_at=issued_at)) is None


def test_token_still_valid_just_before_expiry():
    issued_at = int(time.time()) - SESSION_MAX_AGE + 60

    assert decode_session_token(issue_session_token("admin-1", issued_at=issued_at)) is not None


def test_tampered_admin_id_is_rejected():
    decoded = base64.urlsafe_b64decode(issue_session_token("admin-1")).decode()
    forged = decoded.replace("admin-1", "admin-2", 1)

    assert decode_session_token(base64.urlsafe_b64encode(forged.encode()).decode()) is None


def test_token_signed_with_other_secret_is_rejected(monkeypatch):
    monkeypatch.setattr(session, "SESSION_SECRET", "another-secret")
    token = issue_session_token("admin-1")
    monkeypatch.undo()

    assert decode_session_token(token) is None


@pytest.mark.parametrize("garbage", ["", "not-base64!!", base64.urlsafe_b64encode(b"a:b").decode()])
def test_garbage_tokens_are_rejected(garbage):
    assert decode_session_token(garbage) is None


def test_missing_secret_raises(monkeypatch):
    monkeypatch.setattr(session, "SESSION_SECRET", None)

    with pytest.raises(RuntimeError):
        issue_session_token("admin-1")
