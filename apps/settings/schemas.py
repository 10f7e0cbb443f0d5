"""
Pydantic schemas for the settings store.
"""
from typing import Literal, Optional
from pydantic import Field

from apps.shared.schemas import CamelModel, RecordResponse

SettingType = Literal["image", "text", "json", "file"]


class SettingUpsert(CamelModel):
    key: str = Field(..., min_length=1, max_length=100)
    value: str = Field(..., min_length=1)
    type: Optional[SettingType] = None
    label: Optional[str] = Field(None, max_length=200)


class SettingResponse(RecordResponse):
    key: str
    value: str
    type: SettingType
    label: str
    value_kind: Literal["ref", "inline"]
    mime_type: Optional[str] = None
    size: int
