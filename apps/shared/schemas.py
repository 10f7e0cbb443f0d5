"""
Base pydantic models shared by every router.

The frontend speaks camelCase JSON (`imageUrl`, `createdAt`); models keep
snake_case attributes and accept either spelling on input.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordResponse(CamelModel):
    """Common fields of every stored record."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AckResponse(BaseModel):
    """Plain acknowledgement, e.g. after a delete."""
    message: str
