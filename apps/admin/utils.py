"""
Admin account operations: setup, reset and credential checks.
"""
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from apps.admin.models import Admin
from apps.shared.auth import hash_password, verify_password
from apps.shared.crud import commit_or_raise
from apps.shared.errors import AlreadyExists, InvalidCredentials

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def authenticate(db: Session, email: str, password: str) -> Admin:
    """
    Check an email/password pair against the admin account.

    Raises InvalidCredentials for an unknown email and for a wrong password
    alike; the password check runs in both cases.
    """
    admin = db.query(Admin).filter(Admin.email == normalize_email(email)).first()

    if not verify_password(password, admin.password_hash if admin else None):
        logger.warning("Failed admin login attempt")
        raise InvalidCredentials()

    return admin


def create_admin(db: Session, email: str, password: str, name: str) -> Admin:
    """
    Create the admin account. Only one may exist.

    The explicit check gives the common case a clean error; the unique
    `slot` constraint catches concurrent setups that both pass the check.
    """
    if db.query(Admin).first() is not None:
        raise AlreadyExists("Admin already exists")

    admin = Admin(
        email=normalize_email(email),
        password_hash=hash_password(password),
        name=name.strip(),
    )
    db.add(admin)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise AlreadyExists("Admin already exists")

    db.refresh(admin)
    logger.info(f"Admin account {admin.id} created")
    return admin


def reset_admin(db: Session) -> int:
    """Delete every admin account so setup can run again. Returns the count."""
    deleted = db.query(Admin).delete()
    commit_or_raise(db, "reset admin")
    logger.warning(f"Admin reset: {deleted} account(s) deleted")
    return deleted
