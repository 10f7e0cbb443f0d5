"""
Atomic upsert utilities using ON CONFLICT

Replaces the unsafe check-then-insert pattern with a single
INSERT ... ON CONFLICT DO UPDATE statement. Works on PostgreSQL (production)
and SQLite (local development and tests), which share the same syntax.

Usage:
    from apps.shared.upsert import atomic_upsert

    # Replace this unsafe pattern:
    existing = db.query(Model).filter(Model.key == value).first()
    if existing:
        existing.data = new_data
    else:
        db.add(Model(key=value, data=new_data))
    db.commit()

    # With this atomic operation:
    atomic_upsert(db, Model, 'key', value, {'data': new_data})
"""

from typing import Any, Dict, Type

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from apps.shared.database import Base, utcnow

_INSERT_BY_DIALECT = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


def atomic_upsert(
    db: Session,
    model: Type[Base],
    unique_field: str,
    unique_value: Any,
    update_data: Dict[str, Any],
    auto_update_timestamp: bool = True,
    timestamp_field: str = 'updated_at'
) -> None:
    """
    Perform an atomic upsert on a table with a unique constraint.

    1. Insert if the unique_field value doesn't exist
    2. Update the listed fields if it does

    Args:
        db: SQLAlchemy database session
        model: SQLAlchemy model class (e.g., SiteSetting)
        unique_field: Name of the unique field (e.g., 'key')
        unique_value: Value for the unique field (e.g., 'hero_photo')
        update_data: Dictionary of fields to set
        auto_update_timestamp: If True, also set timestamp_field to now
        timestamp_field: Name of timestamp field to auto-update (default: 'updated_at')

    The caller owns the transaction and must commit.

    Raises:
        ValueError: If the model lacks the fields, or the dialect has no ON CONFLICT support
    """
    # Validate model has the unique field
    if not hasattr(model, unique_field):
        raise ValueError(f"Model {model.__name__} does not have field '{unique_field}'")

    # Validate timestamp field exists if auto-update is enabled
    if auto_update_timestamp and not hasattr(model, timestamp_field):
        raise ValueError(f"Model {model.__name__} does not have field '{timestamp_field}'")

    dialect = db.get_bind().dialect.name
    insert = _INSERT_BY_DIALECT.get(dialect)
    if insert is None:
        raise ValueError(f"Atomic upsert is not supported on dialect '{dialect}'")

    # Build values dictionary for INSERT
    now = utcnow()
    insert_values = {unique_field: unique_value, **update_data}
    if auto_update_timestamp:
        insert_values[timestamp_field] = now

    stmt = insert(model).values(**insert_values)

    # Build ON CONFLICT DO UPDATE clause
    update_dict = update_data.copy()
    if auto_update_timestamp:
        update_dict[timestamp_field] = now

    stmt = stmt.on_conflict_do_update(
        index_elements=[unique_field],
        set_=update_dict
    )

    # Execute the atomic upsert
    db.execute(stmt)
