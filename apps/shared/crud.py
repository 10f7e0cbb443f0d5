"""
Shared helpers for the content CRUD routers.

Each router keeps its own endpoints; these helpers hold the parts that are
identical across Project, Experience, Skill and Message.
"""
import logging
from typing import Any, Dict, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from apps.shared.database import Base
from apps.shared.errors import InternalError, NotFound, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def commit_or_raise(db: Session, action: str) -> None:
    """Commit, or roll back and raise InternalError with the cause chained."""
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to {action}: {type(e).__name__}")
        raise InternalError() from e


def get_or_404(db: Session, model: Type[ModelT], record_id: int, label: str) -> ModelT:
    """Load a record by primary key or raise NotFound("<label> not found")."""
    record = db.get(model, record_id)
    if record is None:
        raise NotFound(f"{label} not found")
    return record


def apply_update(record: Base, update_data: Dict[str, Any]) -> None:
    """
    Apply a partial update in place.

    Only keys present in update_data change. An explicit null for a
    NOT NULL column is rejected instead of failing at flush time.
    """
    columns = record.__table__.columns
    for key, value in update_data.items():
        if value is None and key in columns and not columns[key].nullable:
            raise ValidationError(f"{key} cannot be null")
        setattr(record, key, value)


def create_record(db: Session, model: Type[ModelT], data: Dict[str, Any]) -> ModelT:
    record = model(**data)
    db.add(record)
    commit_or_raise(db, f"create {model.__name__}")
    db.refresh(record)
    return record


def update_record(db: Session, record: ModelT, update_data: Dict[str, Any]) -> ModelT:
    apply_update(record, update_data)
    commit_or_raise(db, f"update {type(record).__name__} {record.id}")
    db.refresh(record)
    return record


def delete_record(db: Session, record: Base) -> None:
    db.delete(record)
    commit_or_raise(db, f"delete {type(record).__name__} {record.id}")
